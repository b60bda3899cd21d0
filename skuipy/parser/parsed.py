"""Parser output carrier."""

from dataclasses import dataclass, field

from skuipy.ast.model import Document
from skuipy.diagnostics import Diagnostic, has_errors


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Document plus parse diagnostics.

    `document` is None only when lexing failed.
    """

    document: Document | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return self.document is None or has_errors(self.diagnostics)
