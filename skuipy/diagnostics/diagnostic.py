"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from skuipy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser and validator."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"
