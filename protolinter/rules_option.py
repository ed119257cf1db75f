"""The set of per-rule options found under ``rules_option`` in the configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from protolinter.choice_options import (
    ImportsSortedOption,
    IndentOption,
    QuoteConsistentOption,
    RPCNamesCaseOption,
)
from protolinter.options import (
    CustomizableSeverityOption,
    EnumFieldNamesZeroValueEndWithOption,
    FileNamesLowerSnakeCaseOption,
    HaveCommentOption,
    MaxLineLengthOption,
    OptionError,
    PrepositionsOption,
    RepeatedFieldNamesPluralizedOption,
    ServiceNamesEndWithOption,
    SyntaxConsistentOption,
)


def _opt(factory: type, key: str | None = None) -> Any:
    metadata = {"key": key} if key is not None else {}
    return field(default_factory=factory, metadata=metadata)


@dataclass
class RulesOption:
    """Options for the rules that take them, keyed as in the configuration."""

    file_names_lower_snake_case: FileNamesLowerSnakeCaseOption = _opt(FileNamesLowerSnakeCaseOption)
    quote_consistent: QuoteConsistentOption = _opt(QuoteConsistentOption)
    imports_sorted: ImportsSortedOption = _opt(ImportsSortedOption)
    max_line_length: MaxLineLengthOption = _opt(MaxLineLengthOption)
    indent: IndentOption = _opt(IndentOption)
    enum_field_names_zero_value_end_with: EnumFieldNamesZeroValueEndWithOption = _opt(
        EnumFieldNamesZeroValueEndWithOption
    )
    service_names_end_with: ServiceNamesEndWithOption = _opt(ServiceNamesEndWithOption)
    field_names_exclude_prepositions: PrepositionsOption = _opt(PrepositionsOption)
    message_names_exclude_prepositions: PrepositionsOption = _opt(PrepositionsOption)
    rpc_names_case: RPCNamesCaseOption = _opt(RPCNamesCaseOption)
    messages_have_comment: HaveCommentOption = _opt(HaveCommentOption)
    services_have_comment: HaveCommentOption = _opt(HaveCommentOption)
    rpcs_have_comment: HaveCommentOption = _opt(HaveCommentOption)
    fields_have_comment: HaveCommentOption = _opt(HaveCommentOption)
    enums_have_comment: HaveCommentOption = _opt(HaveCommentOption)
    enum_fields_have_comment: HaveCommentOption = _opt(HaveCommentOption)
    syntax_consistent: SyntaxConsistentOption = _opt(SyntaxConsistentOption)
    repeated_field_names_pluralized: RepeatedFieldNamesPluralizedOption = _opt(
        RepeatedFieldNamesPluralizedOption
    )
    enum_field_names_prefix: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    enum_field_names_upper_snake_case: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    enum_names_upper_camel_case: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    field_names_lower_snake_case: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    file_has_comment: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    message_names_upper_camel_case: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    order: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    package_name_lower_case: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    proto3_fields_avoid_required: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    proto3_groups_avoid: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    rpc_names_upper_camel_case: CustomizableSeverityOption = _opt(CustomizableSeverityOption)
    # The configuration key keeps its historical spelling.
    service_names_upper_camel_case: CustomizableSeverityOption = _opt(
        CustomizableSeverityOption, key="service_names_upper_caml_case"
    )
    field_numbers_order_ascending: CustomizableSeverityOption = _opt(CustomizableSeverityOption)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any] | None = None, strict: bool = True
    ) -> "RulesOption":
        """Build the options from the ``rules_option`` mapping.

        With ``strict``, unknown keys raise OptionError; otherwise they are ignored.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise OptionError(f"{cls.__name__}: expected a mapping, got {data!r}")

        by_key = {f.metadata.get("key", f.name): f for f in fields(cls)}

        values: dict[str, Any] = {}
        for key, value in data.items():
            found = by_key.get(key)
            if found is None:
                if strict:
                    raise OptionError(f"field {key} not found in {cls.__name__}")
                continue
            values[found.name] = found.type.from_mapping(value, strict)
        return cls(**values)