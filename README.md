# protolinter

Building blocks for linting Protocol Buffer files: loading the lint
configuration, deciding which rules apply to which file, collecting `.proto`
files, running rules over a parsed file, and a few file helpers that keep
line endings intact.

## What this package does not do

It does not parse `.proto` files, it ships no lint rules, it has no report
output formats, and it installs no command-line command. `Linter.run` takes
the parse step and the rules from the caller, and returns the failures the
rules produce as they are; writing them out is left to the caller.

## Configuration

`protolinter.config_loader.get_external_config(file_path, dir_path)` finds
and loads the lint configuration and returns an `ExternalConfig`.

- With a `file_path`, the loader is chosen by extension: `.yaml` / `.yml`,
  `.json` (reads the `protolint` key) or `.toml` (reads the
  `[tools.protolint]` table).
- With a `dir_path`, that directory is searched.
- With neither, the current directory and then each parent directory are
  searched.

In each directory the files `.protolint.yaml`, `.protolint.yml`,
`protolint.yaml` and `protolint.yml` are tried first; only when none exists
in any searched directory are `package.json` files tried, and then
`pyproject.toml` files. When nothing is found and no path was given, the
result is `None`; otherwise a `ConfigError` is raised. A JSON or TOML file
without a protolint section also gives `None`.

YAML files are read strictly: an unknown key anywhere is a `ConfigError`.
In JSON and TOML files, unknown keys are ignored and keys are matched
without regard to case. The loaders are also available on their own:
`load_yaml_config`, `load_json_config` and `load_toml_config`.

```python
from protolinter.config_loader import get_external_config

config = get_external_config("", "")
if config is not None and config.should_skip_rule(
    "INDENT", "path/to/foo.proto", ["INDENT", "MAX_LINE_LENGTH"], "/"
):
    print("INDENT is disabled for this file")
```

`ExternalConfig.should_skip_rule(rule_id, display_path, default_rule_ids, sep)`
is true when the rule is ignored for that file, the file or one of its
directories is excluded, or the rule is not enabled. Paths in the
configuration are written with `/`; `sep` (default `os.sep`) is the
separator of the display path, so Windows paths match them too.

A YAML configuration looks like this:

```yaml
lint:
  ignores:
    - id: ENUM_NAMES_UPPER_CAMEL_CASE
      files:
        - path/to/foo.proto
  files:
    exclude:
      - path/to/skipped.proto
  directories:
    exclude:
      - path/to/generated
  rules:
    no_default: true
    add:
      - FIELD_NAMES_LOWER_SNAKE_CASE
    remove:
      - RPC_NAMES_UPPER_CAMEL_CASE
  rules_option:
    max_line_length:
      max_chars: 80
      tab_chars: 2
    indent:
      style: tab
```

Enabled rules are the default rule ids (unless `no_default` is set) plus
`add`, minus `remove`; `Rules.enabled_ids` returns them in order.

### Rule options

`protolinter.rules_option.RulesOption` holds one option per configurable
rule. Every option has a `severity` (`Severity.ERROR`, `WARNING` or `NOTE`,
or `None` when unset). The options with values chosen from a fixed set live
in `protolinter.choice_options` and raise `OptionError` for anything else:

| Option | Key | Accepted values |
| --- | --- | --- |
| `IndentOption` | `style` | `tab`, `4`, `2` (TOML also a literal tab) |
| `IndentOption`, `ImportsSortedOption` | `newline` | `\n`, `\r`, `\r\n` |
| `QuoteConsistentOption` | `quote` | `double`, `single` (`QuoteType`) |
| `RPCNamesCaseOption` | `convention` | `lower_camel_case`, `upper_snake_case`, `lower_snake_case` (`ConventionType`) |

`IndentOption.style` holds the indentation text itself (a tab, or four or
two spaces). Each of these classes has `from_yaml` and `from_toml`.

## Finding proto files

```python
from protolinter.protoset import ProtoSet

proto_set = ProtoSet.from_paths(["protos"])
for proto_file in proto_set.proto_files:
    print(proto_file.path, proto_file.display_path)
```

Every file ending in `.proto` at or below the given paths is collected in
lexical order. `path` is absolute; `display_path` is relative to the
working directory. A `ProtoSetError` is raised when no proto file is found.

## Running rules

`protolinter.linter.Linter.run(gen_proto, has_applies)` calls
`gen_proto(previous)` before each rule (with `None` the first time) and
applies the rule's `apply` method to what it returns, gathering all
failures in order. `RuleList` is a list of rules with `default()`, which
keeps those whose `is_official` is true, and `ids()`.

## Files and line endings

```python
from protolinter.osutil import detect_line_ending

detect_line_ending("first\r\nsecond")  # "\r\n"
```

`detect_line_ending` returns `""` for text without line breaks and raises
`LineEndingError` when no kind of line ending outnumbers the others.
`read_all_lines`, `write_lines_to_existing_file` and `write_existing_file`
read and rewrite files without changing their line endings; the writers
never create a file. `ExitCode` names the exit statuses `SUCCESS`,
`LINT_FAILURE` and `INTERNAL_FAILURE`.