"""Parse carriers for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from skuipy.diagnostics import DocumentError, has_errors
from skuipy.parser.options import ParserOptions
from skuipy.parser.parsed import ParsedDocument

if TYPE_CHECKING:
    from skuipy.ast import Document
    from skuipy.diagnostics import Diagnostic


@dataclass(slots=True)
class ParseResultBase:
    """Shared parse carrier."""

    source_text: str
    parsed: ParsedDocument

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return self.parsed.has_errors

    @property
    def document(self) -> Document | None:
        return self.parsed.document


@dataclass(slots=True)
class SkuiParseResult(ParseResultBase):
    """Parse result with a lazily computed validation pass."""

    options: ParserOptions
    _validation: list[Diagnostic] | None = field(default=None, init=False, repr=False)

    def validation_diagnostics(self) -> list[Diagnostic]:
        """Validator findings. Empty when lexing failed and there is no document."""
        if self._validation is None:
            if self.parsed.document is None:
                self._validation = []
            else:
                from skuipy.validate import run_validation

                self._validation = run_validation(self.parsed.document, options=self.options)
        return self._validation

    def all_diagnostics(self) -> list[Diagnostic]:
        return [*self.diagnostics, *self.validation_diagnostics()]

    def is_valid(self) -> bool:
        return not self.has_errors and not has_errors(self.validation_diagnostics())

    def require_document(self) -> Document:
        """The document, or `DocumentError` carrying every parse and validation diagnostic."""
        document = self.parsed.document
        if document is None or not self.is_valid():
            raise DocumentError(self.all_diagnostics())
        return document
