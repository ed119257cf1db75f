"""Comparison of configured Unix-style paths with paths of the running platform."""

from __future__ import annotations

import os
from collections.abc import Iterable


def _to_native(unix_path: str, sep: str) -> str:
    return unix_path.replace("/", sep)


def is_same_unix_path(unix_path: str, path: str, sep: str | None = None) -> bool:
    """Tell whether ``unix_path`` names ``path`` once written with ``sep``."""
    sep = os.sep if sep is None else sep
    return _to_native(unix_path, sep) == path


def has_unix_path_prefix(path: str, unix_prefix: str, sep: str | None = None) -> bool:
    """Tell whether ``path`` starts with ``unix_prefix`` written with ``sep``."""
    sep = os.sep if sep is None else sep
    return path.startswith(_to_native(unix_prefix, sep))


def contains_cross_platform_path(
    needle: str,
    unix_path_haystack: Iterable[str],
    sep: str | None = None,
) -> bool:
    """Tell whether any Unix-style path in the haystack names ``needle``."""
    return any(is_same_unix_path(h, needle, sep) for h in unix_path_haystack)