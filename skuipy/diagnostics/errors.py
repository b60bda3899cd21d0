"""Exceptions raised while lexing and parsing."""

from __future__ import annotations

from collections.abc import Sequence

from skuipy.diagnostics.diagnostic import Diagnostic


class SkuiSyntaxError(Exception):
    """Base for errors that carry a single diagnostic."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def offset(self) -> int:
        return self.diagnostic.range.start.value


class LexError(SkuiSyntaxError):
    """Malformed character stream. Fatal to the whole document."""


class ValueParseError(SkuiSyntaxError):
    """A value literal does not match the grammar."""


class DeclParseError(SkuiSyntaxError):
    """A declaration or body member does not match the grammar."""


class DocumentError(Exception):
    """Parsing or validation produced errors."""

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        self.diagnostics = list(diagnostics)
        summary = "; ".join(f"{d.code}: {d.message}" for d in self.diagnostics[:3])
        if len(self.diagnostics) > 3:
            summary += f" (+{len(self.diagnostics) - 3} more)"
        super().__init__(summary)
