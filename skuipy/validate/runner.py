"""Validation runner over an assembled document."""

from __future__ import annotations

from collections.abc import Sequence

from skuipy.ast import Document
from skuipy.diagnostics import Diagnostic, sort_diagnostics
from skuipy.parser.options import ParserOptions
from skuipy.validate.rules import (
    ValidationRule,
    default_validation_rules,
    validate_validation_rules,
)


def run_validation(
    document: Document,
    rules: Sequence[ValidationRule] | None = None,
    options: ParserOptions | None = None,
) -> list[Diagnostic]:
    """Run every rule and return all findings sorted by position.

    Rules are independent: one failing never stops the others.
    """
    resolved_rules = tuple(rules) if rules is not None else default_validation_rules()
    validate_validation_rules(resolved_rules)
    resolved_options = options or ParserOptions()

    diagnostics: list[Diagnostic] = []
    for rule in resolved_rules:
        diagnostics.extend(rule.run(document, resolved_options))
    return sort_diagnostics(diagnostics)
