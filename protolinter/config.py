"""Lint configuration: which rules run, and which files and directories they skip."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from protolinter.options import OptionError
from protolinter.pathutil import contains_cross_platform_path, has_unix_path_prefix
from protolinter.rules_option import RulesOption


def _known_fields(owner: str, data: Any, known: set[str], strict: bool) -> dict[str, Any]:
    """Return the known, non-null entries of ``data``.

    With ``strict``, keys that name no field raise OptionError. Otherwise unknown
    keys are dropped and keys are matched without regard to case.
    """
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise OptionError(f"{owner}: expected a mapping, got {data!r}")
    values: dict[str, Any] = {}
    for key, value in data.items():
        name = key.lower() if not strict and isinstance(key, str) else key
        if name not in known:
            if strict:
                raise OptionError(f"field {key} not found in {owner}")
            continue
        if value is not None:
            values[name] = value
    return values


def _str_list(owner: str, key: str, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise OptionError(f"{owner}.{key}: expected a list of strings, got {value!r}")
    items = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (str, int, float)):
            raise OptionError(f"{owner}.{key}: expected a list of strings, got {value!r}")
        items.append(str(item))
    return items


def _bool(owner: str, key: str, value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise OptionError(f"{owner}.{key}: expected a boolean, got {value!r}")
    return value


def _separator(sep: str | None) -> str:
    return os.sep if sep is None else sep


@dataclass
class Directories:
    """Directories whose files no rule is applied to."""

    exclude: list[str] = field(default_factory=list)

    def should_skip_rule(self, display_path: str, sep: str | None = None) -> bool:
        """Tell whether ``display_path`` lies under one of the excluded directories."""
        sep = _separator(sep)
        return any(
            has_unix_path_prefix(
                display_path, exclude if exclude.endswith(sep) else exclude + sep, sep
            )
            for exclude in self.exclude
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None = None, strict: bool = True) -> Directories:
        """Build the section from a configuration mapping."""
        values = _known_fields(cls.__name__, data, {"exclude"}, strict)
        return cls(exclude=_str_list(cls.__name__, "exclude", values.get("exclude")))


@dataclass
class Files:
    """Files no rule is applied to."""

    exclude: list[str] = field(default_factory=list)

    def should_skip_rule(self, display_path: str, sep: str | None = None) -> bool:
        """Tell whether ``display_path`` is one of the excluded files."""
        return contains_cross_platform_path(display_path, self.exclude, sep)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None = None, strict: bool = True) -> Files:
        """Build the section from a configuration mapping."""
        values = _known_fields(cls.__name__, data, {"exclude"}, strict)
        return cls(exclude=_str_list(cls.__name__, "exclude", values.get("exclude")))


@dataclass
class Ignore:
    """Files that one rule is not applied to."""

    id: str = ""
    files: list[str] = field(default_factory=list)

    def should_skip_rule(self, rule_id: str, display_path: str, sep: str | None = None) -> bool:
        """Tell whether this entry turns off ``rule_id`` for ``display_path``."""
        return self.id == rule_id and contains_cross_platform_path(display_path, self.files, sep)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None = None, strict: bool = True) -> Ignore:
        """Build the entry from a configuration mapping."""
        owner = cls.__name__
        values = _known_fields(owner, data, {"id", "files"}, strict)
        rule_id = values.get("id", "")
        if isinstance(rule_id, bool) or not isinstance(rule_id, (str, int, float)):
            raise OptionError(f"{owner}.id: expected a string, got {rule_id!r}")
        return cls(id=str(rule_id), files=_str_list(owner, "files", values.get("files")))


@dataclass
class Rules:
    """The set of enabled rules."""

    no_default: bool = False
    all_default: bool = False
    add: list[str] = field(default_factory=list)
    remove: list[str] = field(default_factory=list)

    def enabled_ids(self, default_rule_ids: Iterable[str] = ()) -> list[str]:
        """Return the ids of the enabled rules, in order."""
        candidates = [] if self.no_default else list(default_rule_ids)
        candidates.extend(self.add)
        return [rule_id for rule_id in candidates if rule_id not in self.remove]

    def should_skip_rule(self, rule_id: str, default_rule_ids: Iterable[str] | None = None) -> bool:
        """Tell whether ``rule_id`` is not among the enabled rules."""
        return rule_id not in self.enabled_ids(default_rule_ids or ())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None = None, strict: bool = True) -> Rules:
        """Build the section from a configuration mapping."""
        owner = cls.__name__
        values = _known_fields(owner, data, {"no_default", "all_default", "add", "remove"}, strict)
        return cls(
            no_default=_bool(owner, "no_default", values.get("no_default")),
            all_default=_bool(owner, "all_default", values.get("all_default")),
            add=_str_list(owner, "add", values.get("add")),
            remove=_str_list(owner, "remove", values.get("remove")),
        )


@dataclass
class Lint:
    """The lint section of the configuration."""

    ignores: list[Ignore] = field(default_factory=list)
    files: Files = field(default_factory=Files)
    directories: Directories = field(default_factory=Directories)
    rules: Rules = field(default_factory=Rules)
    rules_option: RulesOption = field(default_factory=RulesOption)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None = None, strict: bool = True) -> Lint:
        """Build the section from a configuration mapping.

        With ``strict``, unknown keys anywhere raise OptionError.
        """
        owner = cls.__name__
        values = _known_fields(
            owner, data, {"ignores", "files", "directories", "rules", "rules_option"}, strict
        )
        raw_ignores = values.get("ignores", [])
        if not isinstance(raw_ignores, list):
            raise OptionError(f"{owner}.ignores: expected a list, got {raw_ignores!r}")
        return cls(
            ignores=[Ignore.from_mapping(item, strict) for item in raw_ignores],
            files=Files.from_mapping(values.get("files"), strict),
            directories=Directories.from_mapping(values.get("directories"), strict),
            rules=Rules.from_mapping(values.get("rules"), strict),
            rules_option=RulesOption.from_mapping(values.get("rules_option"), strict),
        )


@dataclass
class ExternalConfig:
    """A configuration read from a file, with the path it came from."""

    source_path: str = ""
    lint: Lint = field(default_factory=Lint)

    def should_skip_rule(
        self,
        rule_id: str,
        display_path: str,
        default_rule_ids: Iterable[str] | None = None,
        sep: str | None = None,
    ) -> bool:
        """Tell whether ``rule_id`` must not be applied to ``display_path``."""
        lint = self.lint
        return (
            any(ignore.should_skip_rule(rule_id, display_path, sep) for ignore in lint.ignores)
            or lint.files.should_skip_rule(display_path, sep)
            or lint.directories.should_skip_rule(display_path, sep)
            or lint.rules.should_skip_rule(rule_id, default_rule_ids)
        )