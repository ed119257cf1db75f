"""Collection of the .proto files named on the command line."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

PROTO_EXTENSION = ".proto"


class ProtoSetError(Exception):
    """Raised when no Protocol Buffer files are found."""


@dataclass(frozen=True)
class ProtoFile:
    """A .proto file: its absolute, cleaned path and the path shown in output."""

    path: str
    display_path: str


def _extension(path: str) -> str:
    name = os.path.basename(path)
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def _walk(path: str) -> Iterator[str]:
    """Yield ``path`` and everything below it in lexical order, not following links."""
    info = os.lstat(path)
    yield path
    if os.path.isdir(path) and not os.path.islink(path) and info is not None:
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def _abs_clean(path: str) -> str:
    if path == "":
        return path
    return os.path.normpath(os.path.abspath(path))


def _collect(abs_work_dir: str, abs_path: str) -> list[ProtoFile]:
    files = []
    for path in _walk(abs_path):
        if _extension(path) != PROTO_EXTENSION:
            continue
        try:
            display_path = os.path.relpath(path, abs_work_dir)
        except ValueError:
            display_path = path
        files.append(ProtoFile(path, os.path.normpath(display_path)))
    return files


@dataclass
class ProtoSet:
    """A non-empty set of .proto files."""

    proto_files: list[ProtoFile] = field(default_factory=list)

    @classmethod
    def from_paths(cls, target_paths: Iterable[str | os.PathLike[str]]) -> ProtoSet:
        """Collect the .proto files at or below each of ``target_paths``.

        Raises ProtoSetError when none is found, OSError when a path cannot be walked.
        """
        targets = [os.fspath(p) for p in target_paths]
        abs_cwd = _abs_clean(os.getcwd())
        try:
            abs_cwd = os.path.realpath(abs_cwd, strict=True)
        except OSError:
            pass

        files: list[ProtoFile] = []
        for target in targets:
            files.extend(_collect(abs_cwd, _abs_clean(target)))
        if not files:
            raise ProtoSetError(f"not found protocol buffer files in {targets}")
        return cls(files)