import pytest

from skuipy.diagnostics import (
    DECL_MISSING_SUFFIX,
    VALIDATION_ROOT_CARDINALITY,
    Diagnostic,
    collect_diagnostics,
    has_errors,
    render_diagnostic,
    sort_diagnostics,
)
from skuipy.parser import parse
from skuipy.text import LineCol, LineIndex, TextRange


def test_line_index_lookups() -> None:
    index = LineIndex("ab\ncd\r\nef")

    assert index.line_count == 3
    assert index.line_col(0) == LineCol(0, 0)
    assert index.line_col(4) == LineCol(1, 1)
    assert index.line_col(9) == LineCol(2, 2)
    assert index.line_text(1) == "cd"
    assert index.line_range(2) == TextRange(7, 9)


def test_line_index_rejects_offsets_outside_text() -> None:
    with pytest.raises(ValueError):
        LineIndex("ab").line_col(3)


def test_render_diagnostic_with_context_and_hint() -> None:
    source = "Window() {}\nLabel\n"
    (diagnostic,) = parse(source).diagnostics

    assert render_diagnostic(source, diagnostic) == (
        "error[DECL_MISSING_SUFFIX] 2:1: Expected `(` or `{` after `Label`\n"
        "   1 | Window() {}\n"
        "   2 | Label\n"
        "     | ^^^^^\n"
        f"     = hint: {DECL_MISSING_SUFFIX.hint}"
    )


def test_render_diagnostic_without_context() -> None:
    source = "A() {}\nB() {}"
    diagnostic = VALIDATION_ROOT_CARDINALITY.at(TextRange(7, 13), message="two roots")

    rendered = render_diagnostic(source, diagnostic, context_lines=0).splitlines()

    assert rendered[:3] == [
        "error[VALIDATION_ROOT_CARDINALITY] 2:1: two roots",
        "   2 | B() {}",
        "     | ^^^^^^",
    ]


def test_render_empty_range_gets_one_caret() -> None:
    diagnostic = Diagnostic(code="X", message="m", range=TextRange(2, 2))

    assert render_diagnostic("abc", diagnostic).splitlines()[-1] == "     |   ^"


def test_diagnostic_helpers() -> None:
    warning = Diagnostic(code="W", message="w", range=TextRange(5, 6), severity="warning")
    error = Diagnostic(code="E", message="e", range=TextRange(1, 2))

    assert collect_diagnostics([warning], [], [error]) == [warning, error]
    assert sort_diagnostics([warning, error]) == [error, warning]
    assert has_errors([warning, error])
    assert not has_errors([warning])


def test_spec_builds_diagnostic_with_overrides() -> None:
    diagnostic = DECL_MISSING_SUFFIX.at(TextRange(0, 1), message="custom", severity="warning")

    assert diagnostic.code == "DECL_MISSING_SUFFIX"
    assert diagnostic.message == "custom"
    assert diagnostic.severity == "warning"
    assert diagnostic.category == "declaration"
    assert diagnostic.hint == DECL_MISSING_SUFFIX.hint
    assert not diagnostic.is_error
