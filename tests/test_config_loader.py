import json
import os

import pytest

from protolinter.choice_options import IndentOption
from protolinter.config import ExternalConfig, Ignore, Lint, Rules
from protolinter.config_loader import (
    ConfigError,
    get_external_config,
    load_json_config,
    load_toml_config,
    load_yaml_config,
)
from protolinter.options import MaxLineLengthOption, Severity
from protolinter.rules_option import RulesOption

INDENT_YAML = 'lint:\n  rules_option:\n    indent:\n      style: tab\n      newline: "\\n"\n'
INDENT_JSON = {"protolint": {"rules_option": {"indent": {"style": "\t", "newline": "\n"}}}}
INDENT_TOML = '[tools.protolint.rules_option.indent]\nstyle = "\\t"\nnewline = "\\n"\n'

VALID_YAML = """\
lint:
  ignores:
    - id: ENUM_FIELD_NAMES_UPPER_SNAKE_CASE
      files:
        - path/to/foo.proto
        - path/to/bar.proto
    - id: ENUM_NAMES_UPPER_CAMEL_CASE
      files:
        - path/to/foo.proto
  rules:
    no_default: true
    add:
      - FIELD_NAMES_LOWER_SNAKE_CASE
      - MESSAGE_NAMES_UPPER_CAMEL_CASE
    remove:
      - RPC_NAMES_UPPER_CAMEL_CASE
  rules_option:
    max_line_length:
      severity: note
      max_chars: 80
      tab_chars: 2
    indent:
      severity: warning
      style: tab
      newline: "\\n"
"""


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _indent_config(source):
    return ExternalConfig(
        source_path=str(source),
        lint=Lint(rules_option=RulesOption(indent=IndentOption(style="\t", newline="\n"))),
    )


@pytest.fixture
def root(tmp_path):
    return tmp_path.resolve()


def test_invalid_config_file(root):
    _write(root / "protolint.yaml", "lint:\n  unknown_key: 1\n")
    with pytest.raises(ConfigError):
        get_external_config("", str(root))


def test_invalid_indent_style(root):
    _write(root / "protolint.yaml", "lint:\n  rules_option:\n    indent:\n      style: 4-space\n")
    with pytest.raises(ConfigError):
        get_external_config("", str(root))


def test_not_found_returns_none(root, monkeypatch):
    monkeypatch.chdir(root)
    assert get_external_config() is None


def test_valid_config_file(root):
    _write(root / "protolint.yaml", VALID_YAML)
    got = get_external_config("", str(root))
    assert got == ExternalConfig(
        source_path=os.path.join(str(root), "protolint.yaml"),
        lint=Lint(
            ignores=[
                Ignore(
                    id="ENUM_FIELD_NAMES_UPPER_SNAKE_CASE",
                    files=["path/to/foo.proto", "path/to/bar.proto"],
                ),
                Ignore(id="ENUM_NAMES_UPPER_CAMEL_CASE", files=["path/to/foo.proto"]),
            ],
            rules=Rules(
                no_default=True,
                add=["FIELD_NAMES_LOWER_SNAKE_CASE", "MESSAGE_NAMES_UPPER_CAMEL_CASE"],
                remove=["RPC_NAMES_UPPER_CAMEL_CASE"],
            ),
            rules_option=RulesOption(
                max_line_length=MaxLineLengthOption(
                    severity=Severity.NOTE, max_chars=80, tab_chars=2
                ),
                indent=IndentOption(severity=Severity.WARNING, style="\t", newline="\n"),
            ),
        ),
    )


@pytest.mark.parametrize("name", [".protolint.yaml", "protolint.yml", ".protolint.yml"])
def test_load_by_dir(root, name):
    _write(root / name, INDENT_YAML)
    assert get_external_config("", str(root)) == _indent_config(os.path.join(str(root), name))


def test_load_particular_name_by_file_path(root):
    path = _write(root / "my_protolint.yaml", INDENT_YAML)
    assert get_external_config(str(path)) == _indent_config(path)


def test_hidden_yaml_preferred_to_plain(root):
    _write(root / ".protolint.yml", INDENT_YAML)
    _write(root / "protolint.yaml", "lint:\n  bogus: 1\n")
    got = get_external_config("", str(root))
    assert got.source_path == os.path.join(str(root), ".protolint.yml")


def test_load_at_cwd_automatically(root, monkeypatch):
    _write(root / ".protolint.yml", INDENT_YAML)
    monkeypatch.chdir(root)
    assert get_external_config() == _indent_config(".protolint.yml")


def test_prefer_cwd_to_parent(root, monkeypatch):
    _write(root / ".protolint.yml", INDENT_YAML)
    _write(root / "child" / ".protolint.yaml", INDENT_YAML)
    monkeypatch.chdir(root / "child")
    assert get_external_config() == _indent_config(".protolint.yaml")


def test_locate_at_parent(root, monkeypatch):
    _write(root / ".protolint.yml", INDENT_YAML)
    (root / "empty_child").mkdir()
    monkeypatch.chdir(root / "empty_child")
    assert get_external_config() == _indent_config(os.path.join(str(root), ".protolint.yml"))


def test_locate_at_grand_parent(root, monkeypatch):
    _write(root / ".protolint.yml", INDENT_YAML)
    (root / "empty_child" / "empty_grand_child").mkdir(parents=True)
    monkeypatch.chdir(root / "empty_child" / "empty_grand_child")
    assert get_external_config() == _indent_config(os.path.join(str(root), ".protolint.yml"))


def test_not_found_with_dir_path(root):
    _write(root / "my_protolint.yaml", INDENT_YAML)
    with pytest.raises(ConfigError, match="not found config file"):
        get_external_config("", str(root))


def test_not_found_with_file_path(root):
    with pytest.raises(FileNotFoundError):
        get_external_config(str(root / "not_found.yaml"))


def test_unsupported_extension(root):
    with pytest.raises(ConfigError, match="not a valid support file extension"):
        get_external_config(str(root / "config.ini"))


def test_empty_file_is_an_error(root):
    path = _write(root / "protolint.yaml", "")
    with pytest.raises(ConfigError, match="content is empty"):
        load_yaml_config(path)


def test_package_json_with_protolint(root, monkeypatch):
    _write(root / "package.json", json.dumps(INDENT_JSON))
    monkeypatch.chdir(root)
    assert get_external_config() == _indent_config("package.json")


def test_package_json_without_protolint(root, monkeypatch):
    _write(root / "package.json", json.dumps({"name": "example", "version": "1.0.0"}))
    monkeypatch.chdir(root)
    assert get_external_config() is None


def test_non_pure_package_json(root, monkeypatch):
    document = dict(INDENT_JSON, name="example", scripts={"lint": "protolint lint ."})
    _write(root / "package.json", json.dumps(document))
    monkeypatch.chdir(root)
    assert get_external_config() == _indent_config("package.json")


def test_pyproject_with_protolint(root, monkeypatch):
    _write(root / "pyproject.toml", '[project]\nname = "example"\n\n' + INDENT_TOML)
    monkeypatch.chdir(root)
    assert get_external_config() == _indent_config("pyproject.toml")


def test_pyproject_without_tools_protolint(root, monkeypatch):
    _write(root / "pyproject.toml", "[tools.black]\nline-length = 88\n")
    monkeypatch.chdir(root)
    assert get_external_config() is None


def test_pyproject_without_tools(root, monkeypatch):
    _write(root / "pyproject.toml", '[project]\nname = "example"\n')
    monkeypatch.chdir(root)
    assert get_external_config() is None


@pytest.mark.parametrize("other", ["package.json", "pyproject.toml"])
def test_sibling_yaml_supersedes(root, monkeypatch, other):
    _write(root / "package.json", json.dumps(INDENT_JSON))
    _write(root / "pyproject.toml", INDENT_TOML)
    _write(root / "protolint.yaml", INDENT_YAML)
    (root / other).touch()
    monkeypatch.chdir(root)
    assert get_external_config() == _indent_config("protolint.yaml")


@pytest.mark.parametrize("name, text", [
    ("package.json", json.dumps(INDENT_JSON)),
    ("pyproject.toml", INDENT_TOML),
])
def test_parent_yaml_supersedes(root, monkeypatch, name, text):
    _write(root / "protolint.yaml", INDENT_YAML)
    _write(root / "child" / name, text)
    monkeypatch.chdir(root / "child")
    assert get_external_config() == _indent_config(os.path.join(str(root), "protolint.yaml"))


def test_load_json_and_toml_by_file_path(root):
    json_path = _write(root / "custom.json", json.dumps(INDENT_JSON))
    toml_path = _write(root / "custom.toml", INDENT_TOML)
    assert load_json_config(json_path) == _indent_config(json_path)
    assert load_toml_config(toml_path) == _indent_config(toml_path)
    assert get_external_config(str(json_path)) == _indent_config(json_path)


def test_malformed_json_is_an_error(root):
    path = _write(root / "package.json", "{not json")
    with pytest.raises(ConfigError):
        load_json_config(path)


def test_yaml_top_level_unknown_key(root):
    path = _write(root / "protolint.yaml", "lnt:\n  rules: {}\n")
    with pytest.raises(ConfigError, match="field lnt not found"):
        load_yaml_config(path)