"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from skuipy.parser.options import ParseMode, ParserOptions
from skuipy.pipeline.result import ParseResultBase, SkuiParseResult
from skuipy.pipeline.results import CheckRunResult, FormatRunResult, ValidateRunResult

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
    from skuipy.pipeline.entrypoints import run_validate as _run_validate

    return _run_validate(text, options=options, mode=mode, parse=parse, rules=rules)


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: SkuiParseResult | None = None,
) -> FormatRunResult:
    from skuipy.pipeline.entrypoints import run_format as _run_format

    return _run_format(text, options=options, mode=mode, parse=parse)


def run_check(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: SkuiParseResult | None = None,
) -> CheckRunResult:
    from skuipy.pipeline.entrypoints import run_check as _run_check

    return _run_check(text, options=options, mode=mode, parse=parse)


def parse_document(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Document:
    from skuipy.pipeline.entrypoints import parse_document as _parse_document

    return _parse_document(text, options=options, mode=mode)


__all__ = [
    "CheckRunResult",
    "FormatRunResult",
    "ParseResultBase",
    "SkuiParseResult",
    "ValidateRunResult",
    "parse_document",
    "run_check",
    "run_format",
    "run_validate",
]
