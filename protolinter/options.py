"""Per-rule options that can be read from a configuration mapping."""

import enum
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, TypeVar, get_args, get_origin

_T = TypeVar("_T", bound="CustomizableSeverityOption")


class Severity(enum.StrEnum):
    """Severity a rule reports its failures with."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


class OptionError(ValueError):
    """Raised when a rule option in the configuration is invalid."""


def _unwrap_optional(hint: Any) -> Any:
    if get_origin(hint) in (typing.Union, types.UnionType):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _convert(owner: str, key: str, hint: Any, value: Any) -> Any:
    hint = _unwrap_optional(hint)
    origin = get_origin(hint)

    def invalid(expected: str) -> OptionError:
        return OptionError(f"{owner}.{key}: expected {expected}, got {value!r}")

    if hint is Severity:
        if not isinstance(value, str):
            raise invalid("a string")
        if value == "":
            return None
        try:
            return Severity(value)
        except ValueError:
            valid = ", ".join(s.value for s in Severity)
            raise OptionError(
                f"{owner}.{key}: {value} is an invalid severity. valid options are [{valid}]"
            ) from None
    if hint is bool:
        if not isinstance(value, bool):
            raise invalid("a boolean")
        return value
    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise invalid("an integer")
        return value
    if hint is str:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise invalid("a string")
        return str(value)
    if origin is list:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise invalid("a list of strings")
        return list(value)
    if origin is dict:
        if not isinstance(value, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in value.items()
        ):
            raise invalid("a mapping of strings")
        return dict(value)
    raise TypeError(f"{owner}.{key}: unsupported option type {hint!r}")


@dataclass(kw_only=True)
class CustomizableSeverityOption:
    """An option carrying only the severity a rule reports with."""

    severity: Severity | None = None

    @classmethod
    def from_mapping(
        cls: type[_T], data: Mapping[str, Any] | None = None, strict: bool = True
    ) -> _T:
        """Build the option from a configuration mapping whose keys are field names.

        With ``strict``, keys that name no field raise OptionError.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise OptionError(f"{cls.__name__}: expected a mapping, got {data!r}")
        types_by_name = {f.name: f.type for f in fields(cls) if f.init}
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key not in types_by_name:
                if strict:
                    raise OptionError(f"field {key} not found in {cls.__name__}")
                continue
            if value is None:
                continue
            values[key] = _convert(cls.__name__, key, types_by_name[key], value)
        return cls(**values)


@dataclass(kw_only=True)
class HaveCommentOption(CustomizableSeverityOption):
    """Option for the rules that require comments on declarations."""

    should_follow_go_style: bool = False


@dataclass(kw_only=True)
class PrepositionsOption(CustomizableSeverityOption):
    """Option for the rules that forbid prepositions in names."""

    prepositions: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class EnumFieldNamesZeroValueEndWithOption(CustomizableSeverityOption):
    """Option for ENUM_FIELD_NAMES_ZERO_VALUE_END_WITH."""

    suffix: str = ""


@dataclass(kw_only=True)
class FileNamesLowerSnakeCaseOption(CustomizableSeverityOption):
    """Option for FILE_NAMES_LOWER_SNAKE_CASE."""

    excludes: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class MaxLineLengthOption(CustomizableSeverityOption):
    """Option for MAX_LINE_LENGTH."""

    max_chars: int = 0
    tab_chars: int = 0


@dataclass(kw_only=True)
class RepeatedFieldNamesPluralizedOption(CustomizableSeverityOption):
    """Option for REPEATED_FIELD_NAMES_PLURALIZED."""

    plural_rules: dict[str, str] = field(default_factory=dict)
    singular_rules: dict[str, str] = field(default_factory=dict)
    uncountable_rules: list[str] = field(default_factory=list)
    irregular_rules: dict[str, str] = field(default_factory=dict)


@dataclass(kw_only=True)
class ServiceNamesEndWithOption(CustomizableSeverityOption):
    """Option for SERVICE_NAMES_END_WITH."""

    text: str = ""


@dataclass(kw_only=True)
class SyntaxConsistentOption(CustomizableSeverityOption):
    """Option for SYNTAX_CONSISTENT."""

    version: str = ""