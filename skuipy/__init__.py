"""Front end for the skui component/style UI language."""

from skuipy.ast import Document
from skuipy.diagnostics import Diagnostic, DocumentError
from skuipy.format import format_document
from skuipy.parser import ParsedDocument, ParseMode, ParserOptions, parse, parse_result
from skuipy.pipeline import (
    SkuiParseResult,
    parse_document,
    run_check,
    run_format,
    run_validate,
)
from skuipy.validate import run_validation

__all__ = [
    "Diagnostic",
    "Document",
    "DocumentError",
    "ParseMode",
    "ParsedDocument",
    "ParserOptions",
    "SkuiParseResult",
    "format_document",
    "parse",
    "parse_document",
    "parse_result",
    "run_check",
    "run_format",
    "run_validate",
    "run_validation",
]
