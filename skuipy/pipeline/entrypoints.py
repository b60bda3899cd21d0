"""Unified entrypoints that orchestrate parse/validate/format with one parse lifecycle."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from skuipy.diagnostics import Diagnostic, has_errors, sort_diagnostics
from skuipy.format import run_format as _run_format
from skuipy.parser import ParseMode, ParserOptions, parse_result
from skuipy.pipeline.result import SkuiParseResult
from skuipy.pipeline.results import CheckRunResult, FormatRunResult, ValidateRunResult
from skuipy.validate import run_validation

if TYPE_CHECKING:
    from skuipy.ast import Document
    from skuipy.validate import ValidationRule


def run_validate(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: SkuiParseResult | None = None,
    rules: Sequence[ValidationRule] | None = None,
) -> ValidateRunResult:
    """Run validation over one skui parse lifecycle.

    Only validator findings are returned; nothing runs without a document.
    """
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    if rules is None:
        diagnostics = list(resolved_parse.validation_diagnostics())
    elif resolved_parse.document is None:
        diagnostics = []
    else:
        diagnostics = run_validation(resolved_parse.document, rules=rules, options=resolved_parse.options)
    return ValidateRunResult(parse=resolved_parse, diagnostics=diagnostics)


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: SkuiParseResult | None = None,
) -> FormatRunResult:
    """Run formatting over one skui parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    return _run_format(resolved_parse.source_text, parse=resolved_parse)


def run_check(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: SkuiParseResult | None = None,
) -> CheckRunResult:
    """Run parse + validation checks over one skui parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    diagnostics = _dedupe_diagnostics(
        sort_diagnostics([*resolved_parse.diagnostics, *resolved_parse.validation_diagnostics()])
    )
    return CheckRunResult(
        parse=resolved_parse,
        diagnostics=diagnostics,
        has_errors=resolved_parse.document is None or has_errors(diagnostics),
    )


def parse_document(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Document:
    """Parse and validate, returning the document or raising `DocumentError`."""
    return parse_result(text, options=options, mode=mode).require_document()


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: SkuiParseResult | None,
) -> SkuiParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)


def _dedupe_diagnostics(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    deduped: list[Diagnostic] = []
    seen: set[tuple[int, int, str, str]] = set()
    for diagnostic in diagnostics:
        key = (
            diagnostic.range.start.value,
            diagnostic.range.end.value,
            diagnostic.code,
            diagnostic.message,
        )
        if key in seen:
            continue
        seen.add(key)
        deduped.append(diagnostic)
    return deduped
