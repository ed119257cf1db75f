"""Locating and loading the external configuration file."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable
from typing import Any

import yaml

from protolinter.config import ExternalConfig, Lint
from protolinter.options import OptionError

CONFIG_FILE_NAMES = (".protolint", "protolint")
CONFIG_FILE_EXTENSIONS = (".yaml", ".yml")
PACKAGE_JSON = "package.json"
PYPROJECT_TOML = "pyproject.toml"

_Loader = Callable[[str], "ExternalConfig | None"]


class ConfigError(Exception):
    """Raised when the configuration cannot be found or is invalid."""


def _load_file_content(file_path: str) -> bytes:
    with open(file_path, "rb") as handle:
        data = handle.read()
    if not data:
        raise ConfigError(f"read {file_path}, but the content is empty")
    return data


def _lint_from(file_path: str, data: Any, strict: bool) -> Lint:
    try:
        return Lint.from_mapping(data, strict)
    except OptionError as exc:
        raise ConfigError(f"{file_path}: {exc}") from exc


def load_yaml_config(file_path: str | os.PathLike[str]) -> ExternalConfig:
    """Load a protolint YAML file; unknown keys are errors."""
    file_path = os.fspath(file_path)
    data = _load_file_content(file_path)
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{file_path}: {exc}") from exc
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ConfigError(f"{file_path}: expected a mapping at the top level")
    for key in document:
        if key not in ("lint", "sourcepath"):
            raise ConfigError(f"{file_path}: field {key} not found in ExternalConfig")
    lint = _lint_from(file_path, document.get("lint"), strict=True)
    return ExternalConfig(source_path=file_path, lint=lint)


def _lookup(document: dict[str, Any], name: str) -> Any:
    for key, value in document.items():
        if isinstance(key, str) and key.lower() == name:
            return value
    return None


def load_json_config(file_path: str | os.PathLike[str]) -> ExternalConfig | None:
    """Load the ``protolint`` entry of a JSON file, or None if it has none."""
    file_path = os.fspath(file_path)
    data = _load_file_content(file_path)
    try:
        document = json.loads(data)
    except ValueError as exc:
        raise ConfigError(f"{file_path}: {exc}") from exc
    if not isinstance(document, dict):
        raise ConfigError(f"{file_path}: expected an object at the top level")
    section = _lookup(document, "protolint")
    if section is None:
        return None
    return ExternalConfig(source_path=file_path, lint=_lint_from(file_path, section, strict=False))


def load_toml_config(file_path: str | os.PathLike[str]) -> ExternalConfig | None:
    """Load the ``tools.protolint`` table of a TOML file, or None if it has none."""
    file_path = os.fspath(file_path)
    data = _load_file_content(file_path)
    try:
        document = tomllib.loads(data.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{file_path}: {exc}") from exc
    tools = _lookup(document, "tools")
    if tools is None:
        return None
    if not isinstance(tools, dict):
        raise ConfigError(f"{file_path}: tools must be a table")
    section = _lookup(tools, "protolint")
    if section is None:
        return None
    return ExternalConfig(source_path=file_path, lint=_lint_from(file_path, section, strict=False))


def _loader_for_extension(file_path: str) -> _Loader:
    if file_path.endswith(CONFIG_FILE_EXTENSIONS):
        return load_yaml_config
    if file_path.endswith(".json"):
        return load_json_config
    if file_path.endswith(".toml"):
        return load_toml_config
    raise ConfigError(f"{file_path} is not a valid support file extension")


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def _search_dirs(dir_path: str) -> list[str]:
    dirs = [dir_path]
    if not dir_path:
        current = os.path.dirname(os.getcwd())
        while current not in dirs:
            dirs.append(current)
            current = os.path.dirname(current)
    return dirs


def _find_config(file_path: str, dir_path: str) -> tuple[_Loader, str]:
    if file_path:
        return _loader_for_extension(file_path), file_path

    dirs = _search_dirs(dir_path)
    candidates: list[tuple[_Loader, str]] = [
        (load_yaml_config, os.path.join(d, name + ext))
        for d in dirs
        for name in CONFIG_FILE_NAMES
        for ext in CONFIG_FILE_EXTENSIONS
    ]
    candidates += [(load_json_config, os.path.join(d, PACKAGE_JSON)) for d in dirs]
    candidates += [(load_toml_config, os.path.join(d, PYPROJECT_TOML)) for d in dirs]

    for loader, path in candidates:
        if _exists(path):
            return loader, path
    checked = ",".join(path for _, path in candidates)
    raise ConfigError(f"not found config file by searching `{checked}`")


def get_external_config(
    file_path: str | os.PathLike[str] = "",
    dir_path: str | os.PathLike[str] = "",
) -> ExternalConfig | None:
    """Find and load the configuration.

    ``file_path`` names the file itself; ``dir_path`` a directory to look in.
    With neither, the working directory and its ancestors are searched, and
    None is returned when nothing is found.
    """
    file_path = os.fspath(file_path)
    dir_path = os.fspath(dir_path)
    try:
        loader, path = _find_config(file_path, dir_path)
    except (ConfigError, OSError):
        if not file_path and not dir_path:
            return None
        raise
    return loader(path)