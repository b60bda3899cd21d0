from dataclasses import dataclass

import pytest

from skuipy import DocumentError, parse_document, parse_result, run_check, run_format, run_validate
from skuipy.ast import Document
from skuipy.diagnostics import VALIDATION_ROOT_CARDINALITY, Diagnostic
from skuipy.parser import ParseMode, ParserOptions
from skuipy.validate import IdScopeRule
from tests._shared_cases import case_source


def codes(diagnostics: list[Diagnostic]) -> list[str]:
    return [diagnostic.code for diagnostic in diagnostics]


def test_run_validate_returns_only_validator_findings() -> None:
    result = run_validate("Window\nA() {}\nB() {}\n")

    assert codes(result.diagnostics) == ["VALIDATION_ROOT_CARDINALITY"]
    assert codes(result.parse.diagnostics) == ["DECL_MISSING_SUFFIX"]


def test_run_validate_with_custom_rules() -> None:
    result = run_validate("A() {}\nB() #b {}\n", rules=[IdScopeRule()])

    assert codes(result.diagnostics) == ["VALIDATION_ID_NOT_ALLOWED"]


def test_run_validate_without_document() -> None:
    result = run_validate('A("open', rules=[IdScopeRule()])

    assert result.parse.document is None
    assert result.diagnostics == []


def test_run_check_merges_parse_and_validation() -> None:
    result = run_check("Window\nA() {}\nB() {}\n")

    assert codes(result.diagnostics) == ["DECL_MISSING_SUFFIX", "VALIDATION_ROOT_CARDINALITY"]
    assert result.has_errors


def test_run_check_clean_document() -> None:
    result = run_check(case_source("definition_and_root"))

    assert result.diagnostics == []
    assert not result.has_errors


def test_run_check_lex_error() -> None:
    result = run_check("Window() { a: @ }")

    assert codes(result.diagnostics) == ["LEXER_ILLEGAL_CHARACTER"]
    assert result.has_errors


def test_run_check_permissive_mode() -> None:
    source = ".a { x: 1 }\n"

    assert run_check(source).has_errors
    assert not run_check(source, mode=ParseMode.PERMISSIVE).has_errors


def test_run_check_definitions_with_inner_ids() -> None:
    source = case_source("definitions_with_inner_ids")

    strict = run_check(source)
    assert codes(strict.diagnostics) == ["VALIDATION_ROOT_CARDINALITY"]
    assert strict.diagnostics[0].message == "Document has no root component."

    permissive = run_check(source, mode=ParseMode.PERMISSIVE)
    assert permissive.diagnostics == []
    assert permissive.parse.document is not None
    assert [definition.name for definition in permissive.parse.document.definitions] == ["TopPanel", "Main"]


def test_run_check_dedupes_identical_diagnostics() -> None:
    parse = parse_result("Window() {}\nDialog() {}\n")
    duplicate = VALIDATION_ROOT_CARDINALITY.at(parse.validation_diagnostics()[0].range, message="dup")
    parse.validation_diagnostics().extend([duplicate, duplicate])

    result = run_check("", parse=parse)

    assert [diagnostic.message for diagnostic in result.diagnostics].count("dup") == 1


def test_entrypoints_share_one_parse() -> None:
    parse = parse_result(case_source("nested_values_in_body"))

    checked = run_check("", parse=parse)
    validated = run_validate("", parse=parse)
    formatted = run_format("", parse=parse)

    assert checked.parse is parse
    assert validated.parse is parse
    assert formatted.parse is parse
    assert validated.diagnostics == parse.validation_diagnostics()


@pytest.mark.parametrize("entrypoint", [run_check, run_validate, run_format])
def test_parse_and_options_are_exclusive(entrypoint) -> None:
    with pytest.raises(ValueError, match="Pass either parse or options/mode, not both"):
        entrypoint("", options=ParserOptions(), parse=parse_result(""))


def test_parse_document_returns_valid_document() -> None:
    document = parse_document(case_source("single_root_with_children"))

    assert isinstance(document, Document)
    assert document.root is not None
    assert [child.type_name for child in document.root.children] == ["Button", "Label"]


def test_parse_document_raises_document_error() -> None:
    with pytest.raises(DocumentError) as exc_info:
        parse_document("Window\n")

    assert codes(exc_info.value.diagnostics) == ["DECL_MISSING_SUFFIX", "VALIDATION_ROOT_CARDINALITY"]


def test_parse_document_stylesheet_only_in_permissive_mode() -> None:
    document = parse_document("#main { padding: 10 }", mode=ParseMode.PERMISSIVE)

    assert document.components == ()
    assert len(document.styles) == 1


@dataclass(frozen=True, slots=True)
class _AlwaysFlagRoot:
    code: str = "VALIDATION_CUSTOM"
    name: str = "alwaysFlagRoot"
    category: str = "validation"

    def run(self, document: Document, options: ParserOptions) -> list[Diagnostic]:
        root = document.root
        if root is None:
            return []
        return [VALIDATION_ROOT_CARDINALITY.at(root.range, message="custom")]


def test_run_validate_accepts_protocol_rules() -> None:
    result = run_validate("Window() {}", rules=[_AlwaysFlagRoot()])

    assert [diagnostic.message for diagnostic in result.diagnostics] == ["custom"]
