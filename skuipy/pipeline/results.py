"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from skuipy.diagnostics import Diagnostic
from skuipy.pipeline.result import SkuiParseResult


@dataclass(frozen=True, slots=True)
class ValidateRunResult:
    """Result of running validation rules from a shared parse result."""

    parse: SkuiParseResult
    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: SkuiParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of unified parser/validation checks from a shared parse result."""

    parse: SkuiParseResult
    diagnostics: list[Diagnostic]
    has_errors: bool
