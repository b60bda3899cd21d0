"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

from skuipy.diagnostics.diagnostic import Diagnostic
from skuipy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(
        self,
        range: TextRange,
        *,
        message: str | None = None,
        severity: Severity | None = None,
    ) -> Diagnostic:
        """Build a diagnostic for this code at the given range."""
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=severity if severity is not None else self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote on the same line.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_CLOSURE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_CLOSURE",
    message="Unterminated closure literal.",
    hint="Closures look like `|args| { ... }` with balanced braces.",
    severity="error",
    category="lexer",
)

LEXER_ILLEGAL_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_ILLEGAL_CHARACTER",
    message="Illegal character.",
    severity="error",
    category="lexer",
)

VALUE_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_EXPECTED_VALUE",
    message="Expected a value",
    hint='Values look like: ident, Component(), 123, 1.5, "text", [1, 2], {key: 1}, true, ${0}, #ff0000',
    severity="error",
    category="value",
)

VALUE_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="value",
)

VALUE_INVALID_RELATIVE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_INVALID_RELATIVE",
    message="Invalid relative reference.",
    hint="Use `${0}`, `${name}` or a path such as `${0.title}`.",
    severity="error",
    category="value",
)

VALUE_INVALID_COLOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_INVALID_COLOR",
    message="Invalid hex color.",
    hint="Use 3, 4, 6 or 8 hex digits, e.g. `#ff0000`.",
    severity="error",
    category="value",
)

DECL_MISSING_SUFFIX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECL_MISSING_SUFFIX",
    message="Expected `(` or `{` after identifier",
    hint="Write `Component(...)` for an instantiation or `Selector { ... }` for a style rule.",
    severity="error",
    category="declaration",
)

DECL_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECL_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="declaration",
)

DECL_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECL_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="declaration",
)

DECL_DUPLICATE_ID: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECL_DUPLICATE_ID",
    message="Component already has an id.",
    hint="A component can carry at most one `#id` selector.",
    severity="error",
    category="declaration",
)

DECL_MISSING_RBRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECL_MISSING_RBRACE",
    message="Missing closing brace tolerated in permissive mode",
    severity="warning",
    category="declaration",
)

VALIDATION_ROOT_CARDINALITY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_ROOT_CARDINALITY",
    message="Document must have exactly one root component.",
    hint="Keep a single top-level component without an `#id`; give other top-level components a name (`Name : Component()`).",
    severity="error",
    category="validation",
)

VALIDATION_ID_NOT_ALLOWED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_ID_NOT_ALLOWED",
    message="Id is only allowed on descendants of the root component.",
    severity="error",
    category="validation",
)

VALIDATION_MIXED_PARAMETER_SHAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_MIXED_PARAMETER_SHAPE",
    message="Parameters mix positional and named entries.",
    hint="Use either `(a, b)` or `(key: a, other: b)`.",
    severity="error",
    category="validation",
)

VALIDATION_MIXED_RELATIVE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_MIXED_RELATIVE_KEY",
    message="Relative references mix positional and named keys.",
    hint="Use only `${0}`-style or only `${name}`-style references in one scope.",
    severity="error",
    category="validation",
)
