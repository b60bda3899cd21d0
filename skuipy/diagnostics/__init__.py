"""Diagnostics."""

from skuipy.diagnostics.codes import (
    DECL_DUPLICATE_ID,
    DECL_EXPECTED_TOKEN,
    DECL_MISSING_RBRACE,
    DECL_MISSING_SUFFIX,
    DECL_UNEXPECTED_TOKEN,
    LEXER_ILLEGAL_CHARACTER,
    LEXER_UNTERMINATED_CLOSURE,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    VALIDATION_ID_NOT_ALLOWED,
    VALIDATION_MIXED_PARAMETER_SHAPE,
    VALIDATION_MIXED_RELATIVE_KEY,
    VALIDATION_ROOT_CARDINALITY,
    VALUE_EXPECTED_TOKEN,
    VALUE_EXPECTED_VALUE,
    VALUE_INVALID_COLOR,
    VALUE_INVALID_RELATIVE,
    DiagnosticSpec,
)
from skuipy.diagnostics.diagnostic import Diagnostic, Severity
from skuipy.diagnostics.errors import (
    DeclParseError,
    DocumentError,
    LexError,
    SkuiSyntaxError,
    ValueParseError,
)
from skuipy.diagnostics.report import (
    collect_diagnostics,
    has_errors,
    render_diagnostic,
    sort_diagnostics,
)

__all__ = [
    "DECL_DUPLICATE_ID",
    "DECL_EXPECTED_TOKEN",
    "DECL_MISSING_RBRACE",
    "DECL_MISSING_SUFFIX",
    "DECL_UNEXPECTED_TOKEN",
    "LEXER_ILLEGAL_CHARACTER",
    "LEXER_UNTERMINATED_CLOSURE",
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "VALIDATION_ID_NOT_ALLOWED",
    "VALIDATION_MIXED_PARAMETER_SHAPE",
    "VALIDATION_MIXED_RELATIVE_KEY",
    "VALIDATION_ROOT_CARDINALITY",
    "VALUE_EXPECTED_TOKEN",
    "VALUE_EXPECTED_VALUE",
    "VALUE_INVALID_COLOR",
    "VALUE_INVALID_RELATIVE",
    "DeclParseError",
    "Diagnostic",
    "DiagnosticSpec",
    "DocumentError",
    "LexError",
    "Severity",
    "SkuiSyntaxError",
    "ValueParseError",
    "collect_diagnostics",
    "has_errors",
    "render_diagnostic",
    "sort_diagnostics",
]
