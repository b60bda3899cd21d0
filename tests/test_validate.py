from dataclasses import dataclass

import pytest

from skuipy.ast import Document
from skuipy.diagnostics import Diagnostic
from skuipy.parser import ParseMode, ParserOptions, parse
from skuipy.validate import (
    IdScopeRule,
    ParameterShapeRule,
    RelativeKeyRule,
    RootCardinalityRule,
    default_validation_rules,
    run_validation,
    validate_validation_rules,
)
from tests._debug import debug_dump_diagnostics
from tests._shared_cases import PARSER_CASES, SkuiCase, case_id, case_source


def document_of(source: str) -> Document:
    parsed = parse(source)
    assert parsed.diagnostics == [], parsed.diagnostics
    assert parsed.document is not None
    return parsed.document


def validate(source: str, options: ParserOptions | None = None) -> list[Diagnostic]:
    diagnostics = run_validation(document_of(source), options=options)
    debug_dump_diagnostics("validate", diagnostics, source)
    return diagnostics


def codes(diagnostics: list[Diagnostic]) -> list[str]:
    return [diagnostic.code for diagnostic in diagnostics]


# -------------------------
# Root cardinality
# -------------------------


def test_two_roots() -> None:
    source = "Window() {}\nDialog() {}\n"
    diagnostics = validate(source)

    assert codes(diagnostics) == ["VALIDATION_ROOT_CARDINALITY"]
    assert diagnostics[0].range.start.value == source.index("Dialog")
    assert "2 root components" in diagnostics[0].message


def test_each_extra_root_is_reported() -> None:
    diagnostics = validate("A() {}\nB() {}\nC() {}\n")

    assert codes(diagnostics) == ["VALIDATION_ROOT_CARDINALITY"] * 2


def test_empty_document_needs_root_in_strict_mode() -> None:
    diagnostics = validate("")

    assert codes(diagnostics) == ["VALIDATION_ROOT_CARDINALITY"]
    assert diagnostics[0].range.is_empty()


def test_stylesheet_only_document() -> None:
    source = "#main { padding: 10 }"

    assert codes(validate(source)) == ["VALIDATION_ROOT_CARDINALITY"]
    assert validate(source, ParserOptions(allow_stylesheet_only=True)) == []
    assert validate(source, ParserOptions.for_mode(ParseMode.PERMISSIVE)) == []


def test_definitions_do_not_count_as_roots() -> None:
    assert codes(validate("Card : Frame() {}\n")) == ["VALIDATION_ROOT_CARDINALITY"]
    assert validate("Card : Frame() {}\nWindow() {}\n") == []


# -------------------------
# Id scope
# -------------------------


def test_id_on_only_top_level_component() -> None:
    diagnostics = validate('CustomWidget() #hello { title: "x" }')

    assert sorted(codes(diagnostics)) == ["VALIDATION_ID_NOT_ALLOWED", "VALIDATION_ROOT_CARDINALITY"]
    id_diagnostic = next(d for d in diagnostics if d.code == "VALIDATION_ID_NOT_ALLOWED")
    assert "top-level component `CustomWidget`" in id_diagnostic.message


def test_id_on_round_trip_root() -> None:
    diagnostics = validate(case_source("flex_root_with_selectors"))

    assert sorted(codes(diagnostics)) == ["VALIDATION_ID_NOT_ALLOWED", "VALIDATION_ROOT_CARDINALITY"]


def test_ids_on_descendants_of_root_are_allowed() -> None:
    assert validate("Window() { Flex() { Button() #ok } Label() #title }") == []


def test_id_on_component_value_inside_root() -> None:
    assert validate("Window(Button() #ok) {}") == []


def test_id_on_second_top_level_component() -> None:
    diagnostics = validate(case_source("stylesheet_and_root"))

    assert codes(diagnostics) == ["VALIDATION_ID_NOT_ALLOWED"]
    assert "`#list`" in diagnostics[0].message


def test_ids_inside_definitions_are_allowed() -> None:
    assert validate("Card : Frame() { Label() #x Row(Button() #ok) }\nWindow() {}\n") == []


def test_id_on_component_a_definition_declares() -> None:
    diagnostics = validate("Card : Frame() #x { Label() #y }\nWindow() {}\n")

    assert codes(diagnostics) == ["VALIDATION_ID_NOT_ALLOWED"]
    assert "definition `Card`" in diagnostics[0].message
    assert "`Frame`" in diagnostics[0].message


def test_id_without_single_root() -> None:
    diagnostics = validate("Window() { Label() #a }\nDialog() {}\n")

    assert sorted(codes(diagnostics)) == ["VALIDATION_ID_NOT_ALLOWED", "VALIDATION_ROOT_CARDINALITY"]
    id_diagnostic = next(d for d in diagnostics if d.code == "VALIDATION_ID_NOT_ALLOWED")
    assert "no single root" in id_diagnostic.message


# -------------------------
# Parameter shape
# -------------------------


def test_mixed_parameters() -> None:
    diagnostics = validate('Window(title: "x", 3) {}')

    assert codes(diagnostics) == ["VALIDATION_MIXED_PARAMETER_SHAPE"]
    assert diagnostics[0].message == "`Window` mixes named parameter `title` with positional entry 1."


def test_mixed_parameters_in_nested_component_values() -> None:
    diagnostics = validate("Window() { Row(Label(a: 1, 2)) }")

    assert codes(diagnostics) == ["VALIDATION_MIXED_PARAMETER_SHAPE"]
    assert "`Label`" in diagnostics[0].message


def test_mixed_parameters_in_style_values() -> None:
    diagnostics = validate(".a { color: rgb(r: 1, 2, 3) }", ParserOptions(allow_stylesheet_only=True))

    assert codes(diagnostics) == ["VALIDATION_MIXED_PARAMETER_SHAPE"]


def test_named_and_positional_parameters_are_fine() -> None:
    assert validate('Window(title: "x", modal: true) { Label("a", 1) }') == []


# -------------------------
# Relative keys
# -------------------------


def test_mixed_relative_keys_across_siblings() -> None:
    source = (
        "List() {\n"
        "    item(0, Label(${key}))\n"
        '    item(1, Button("OK"))\n'
        "    item(2, Label(${0}))\n"
        "}\n"
    )
    diagnostics = validate(source)

    assert codes(diagnostics) == ["VALIDATION_MIXED_RELATIVE_KEY"]
    assert diagnostics[0].range.start.value == source.index("${0}")
    assert "`${0}`" in diagnostics[0].message
    assert "`${key}`" in diagnostics[0].message


def test_mixed_relative_keys_across_top_level_siblings() -> None:
    source = 'item(0, Label(${key}))\nitem(1, Button("OK"))\nitem(2, Label(${0}))\n'
    diagnostics = validate(source)

    assert sorted(codes(diagnostics)) == [
        "VALIDATION_MIXED_RELATIVE_KEY",
        "VALIDATION_ROOT_CARDINALITY",
        "VALIDATION_ROOT_CARDINALITY",
    ]
    relative = next(d for d in diagnostics if d.code == "VALIDATION_MIXED_RELATIVE_KEY")
    assert relative.range.start.value == source.index("${0}")
    assert "`${key}`" in relative.message


def test_relative_keys_of_one_kind() -> None:
    assert validate(case_source("relative_values_in_template")) == []
    assert validate("Window() { a: ${0.title} Label(${1}) }") == []


def test_relative_scopes_are_independent() -> None:
    assert validate("Card : Frame(${0}) {}\nWindow(${name}) {}\n") == []


def test_relative_keys_in_maps_and_arrays() -> None:
    diagnostics = validate("Window() { data: {a: ${0}, b: [${x}]} }")

    assert codes(diagnostics) == ["VALIDATION_MIXED_RELATIVE_KEY"]


def test_relative_keys_in_one_style_rule() -> None:
    diagnostics = validate(".a { x: ${0} ${k} }\nWindow() {}\n")

    assert codes(diagnostics) == ["VALIDATION_MIXED_RELATIVE_KEY"]


# -------------------------
# Runner
# -------------------------


def test_all_rules_run_and_results_are_sorted() -> None:
    source = 'Window(a: 1, 2) #w { x: ${0} y: ${k} }\nDialog() {}\nPanel() {}\n'
    diagnostics = validate(source)

    assert sorted(codes(diagnostics)) == [
        "VALIDATION_ID_NOT_ALLOWED",
        "VALIDATION_MIXED_PARAMETER_SHAPE",
        "VALIDATION_MIXED_RELATIVE_KEY",
        "VALIDATION_ROOT_CARDINALITY",
    ]
    starts = [diagnostic.range.start.value for diagnostic in diagnostics]
    assert starts == sorted(starts)


def test_default_rules_are_ordered() -> None:
    rules = default_validation_rules()

    assert [rule.code for rule in rules] == [
        "VALIDATION_ID_NOT_ALLOWED",
        "VALIDATION_MIXED_PARAMETER_SHAPE",
        "VALIDATION_MIXED_RELATIVE_KEY",
        "VALIDATION_ROOT_CARDINALITY",
    ]
    assert {type(rule) for rule in rules} == {
        IdScopeRule,
        ParameterShapeRule,
        RelativeKeyRule,
        RootCardinalityRule,
    }


def test_custom_rule_subset() -> None:
    document = document_of("Window() {}\nDialog() #d {}\n")

    assert codes(run_validation(document, rules=[IdScopeRule()])) == ["VALIDATION_ID_NOT_ALLOWED"]
    assert run_validation(document, rules=[RootCardinalityRule()]) == []


@dataclass(frozen=True, slots=True)
class _BadRule:
    code: str = "LINT_SOMETHING"
    name: str = "bad"
    category: str = "validation"

    def run(self, document: Document, options: ParserOptions) -> list[Diagnostic]:
        return []


def test_rule_codes_need_validation_prefix() -> None:
    with pytest.raises(ValueError, match="VALIDATION_"):
        validate_validation_rules((_BadRule(),))


def test_validation_does_not_mutate_document() -> None:
    document = document_of('Window(a: 1, 2) #w { Label(${0}) Label(${k}) }')
    before = repr(document)

    run_validation(document)

    assert repr(document) == before


@pytest.mark.parametrize("case", PARSER_CASES, ids=case_id)
def test_parser_cases_validate(case: SkuiCase) -> None:
    diagnostics = validate(case.source)

    assert (diagnostics == []) is case.strict_should_validate
