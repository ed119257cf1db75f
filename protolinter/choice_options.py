"""Rule options whose values are chosen from a fixed set of spellings."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from protolinter.options import CustomizableSeverityOption, OptionError, Severity

_C = TypeVar("_C", bound="_ChoiceOption")

_VALID_NEWLINES = ("\n", "\r", "\r\n", "")
_NEWLINE_HINT = r"valid option is \n, \r or \r\n"


class QuoteType(enum.IntEnum):
    """Quote character that string literals must use."""

    DOUBLE = 0
    SINGLE = 1


class ConventionType(enum.IntEnum):
    """Name case convention for RPC names."""

    LOWER_CAMEL = 1
    UPPER_SNAKE = 2
    LOWER_SNAKE = 3


_SUPPORT_QUOTES = {"double": QuoteType.DOUBLE, "single": QuoteType.SINGLE}
_SUPPORT_CONVENTIONS = {
    "lower_camel_case": ConventionType.LOWER_CAMEL,
    "upper_snake_case": ConventionType.UPPER_SNAKE,
    "lower_snake_case": ConventionType.LOWER_SNAKE,
}


def _mapping(owner: str, data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise OptionError(f"{owner}: expected a mapping, got {data!r}")
    return data


def _yaml_fields(owner: str, data: Any, known: set[str]) -> tuple[dict[str, Any], Severity | None]:
    """Check YAML keys strictly and split off the severity."""
    values = dict(_mapping(owner, data))
    unknown = [key for key in values if key not in known and key != "severity"]
    if unknown:
        raise OptionError(f"field {unknown[0]} not found in {owner}")
    severity_value = values.pop("severity", None)
    severity = None
    if severity_value is not None:
        severity = CustomizableSeverityOption.from_mapping({"severity": severity_value}).severity
    return values, severity


def _yaml_str(owner: str, key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise OptionError(f"{owner}.{key}: expected a string, got {value!r}")
    return str(value)


def _toml_str(owner: str, key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise OptionError(f"{owner}.{key}: expected a string, got {value!r}")
    return value


def _check_newline(newline: str) -> str:
    if newline not in _VALID_NEWLINES:
        raise OptionError(f"{newline} is an invalid newline option. {_NEWLINE_HINT}")
    return newline


def _choose(value: str, choices: Mapping[str, Any], what: str) -> Any:
    try:
        return choices[value]
    except KeyError:
        valid = ",".join(choices)
        raise OptionError(
            f"{value} is an invalid {what}. valid options are [{valid}]"
        ) from None


@dataclass(kw_only=True)
class _ChoiceOption(CustomizableSeverityOption):
    @classmethod
    def from_yaml(cls: type[_C], data: Mapping[str, Any] | None) -> _C:
        raise NotImplementedError

    @classmethod
    def from_toml(cls: type[_C], data: Mapping[str, Any] | None) -> _C:
        raise NotImplementedError

    @classmethod
    def from_mapping(
        cls: type[_C], data: Mapping[str, Any] | None = None, strict: bool = True
    ) -> _C:
        """Read the option with YAML rules when strict, TOML rules otherwise."""
        return cls.from_yaml(data) if strict else cls.from_toml(data)


@dataclass(kw_only=True)
class ImportsSortedOption(_ChoiceOption):
    """Option for IMPORTS_SORTED; ``newline`` is kept only for compatibility."""

    newline: str = ""

    @classmethod
    def from_yaml(cls, data: Mapping[str, Any] | None) -> ImportsSortedOption:
        """Read the option from a parsed YAML mapping, rejecting unknown keys."""
        values, severity = _yaml_fields(cls.__name__, data, {"newline"})
        newline = _check_newline(_yaml_str(cls.__name__, "newline", values.get("newline")))
        return cls(severity=severity, newline=newline)

    @classmethod
    def from_toml(cls, data: Mapping[str, Any] | None) -> ImportsSortedOption:
        """Read the option from a parsed TOML table."""
        values = _mapping(cls.__name__, data)
        option = cls()
        if "newline" in values:
            option.newline = _check_newline(_toml_str(cls.__name__, "newline", values["newline"]))
        return option


@dataclass(kw_only=True)
class IndentOption(_ChoiceOption):
    """Option for INDENT; ``style`` holds the indentation text itself."""

    style: str = ""
    newline: str = ""
    not_insert_newline: bool = False

    @classmethod
    def from_yaml(cls, data: Mapping[str, Any] | None) -> IndentOption:
        """Read the option from a parsed YAML mapping, rejecting unknown keys."""
        owner = cls.__name__
        values, severity = _yaml_fields(owner, data, {"style", "newline", "not_insert_newline"})

        style_name = _yaml_str(owner, "style", values.get("style"))
        styles = {"tab": "\t", "4": " " * 4, "2": " " * 2, "": ""}
        if style_name not in styles:
            raise OptionError(
                f"{style_name} is an invalid style option. valid option is tab, 4 or 2"
            )

        newline = _check_newline(_yaml_str(owner, "newline", values.get("newline")))

        not_insert = values.get("not_insert_newline")
        if not_insert is None:
            not_insert = False
        elif not isinstance(not_insert, bool):
            raise OptionError(f"{owner}.not_insert_newline: expected a boolean, got {not_insert!r}")

        return cls(
            severity=severity,
            style=styles[style_name],
            newline=newline,
            not_insert_newline=not_insert,
        )

    @classmethod
    def from_toml(cls, data: Mapping[str, Any] | None) -> IndentOption:
        """Read the option from a parsed TOML table; a literal tab is accepted as style."""
        owner = cls.__name__
        values = _mapping(owner, data)
        option = cls()

        if "style" in values:
            style_name = _toml_str(owner, "style", values["style"])
            styles = {"\t": "\t", "tab": "\t", "4": " " * 4, "2": " " * 2, "": ""}
            if style_name not in styles:
                raise OptionError(
                    f"{style_name} is an invalid style option. valid option is \\t, tab, 4 or 2"
                )
            option.style = styles[style_name]

        if "newline" in values:
            option.newline = _check_newline(_toml_str(owner, "newline", values["newline"]))

        if "not_insert_newline" in values:
            not_insert = values["not_insert_newline"]
            if not isinstance(not_insert, bool):
                raise OptionError(
                    f"{owner}.not_insert_newline: expected a boolean, got {not_insert!r}"
                )
            option.not_insert_newline = not_insert

        return option


@dataclass(kw_only=True)
class QuoteConsistentOption(_ChoiceOption):
    """Option for QUOTE_CONSISTENT."""

    quote: QuoteType = QuoteType.DOUBLE

    @classmethod
    def from_yaml(cls, data: Mapping[str, Any] | None) -> QuoteConsistentOption:
        """Read the option from a parsed YAML mapping, rejecting unknown keys."""
        values, severity = _yaml_fields(cls.__name__, data, {"quote"})
        option = cls(severity=severity)
        quote = _yaml_str(cls.__name__, "quote", values.get("quote"))
        if quote:
            option.quote = _choose(quote, _SUPPORT_QUOTES, "quote")
        return option

    @classmethod
    def from_toml(cls, data: Mapping[str, Any] | None) -> QuoteConsistentOption:
        """Read the option from a parsed TOML table."""
        values = _mapping(cls.__name__, data)
        option = cls()
        if "quote" in values:
            quote = _toml_str(cls.__name__, "quote", values["quote"])
            if quote:
                option.quote = _choose(quote, _SUPPORT_QUOTES, "quote")
        return option


@dataclass(kw_only=True)
class RPCNamesCaseOption(_ChoiceOption):
    """Option for RPC_NAMES_CASE; ``convention`` is None when unset."""

    convention: ConventionType | None = None

    @classmethod
    def from_yaml(cls, data: Mapping[str, Any] | None) -> RPCNamesCaseOption:
        """Read the option from a parsed YAML mapping, rejecting unknown keys."""
        values, severity = _yaml_fields(cls.__name__, data, {"convention"})
        option = cls(severity=severity)
        convention = _yaml_str(cls.__name__, "convention", values.get("convention"))
        if convention:
            option.convention = _choose(convention, _SUPPORT_CONVENTIONS, "name convention")
        return option

    @classmethod
    def from_toml(cls, data: Mapping[str, Any] | None) -> RPCNamesCaseOption:
        """Read the option from a parsed TOML table."""
        values = _mapping(cls.__name__, data)
        option = cls()
        if "convention" in values:
            convention = _toml_str(cls.__name__, "convention", values["convention"])
            if convention:
                option.convention = _choose(convention, _SUPPORT_CONVENTIONS, "name convention")
        return option