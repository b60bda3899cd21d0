"""Declaration-level recovery after a syntax error."""

from dataclasses import dataclass
from enum import StrEnum

from skuipy.lexer import TokenKind
from skuipy.parser.parser import Parser
from skuipy.text import TextRange


class RecoveryError(StrEnum):
    EOF = "eof"
    RECOVERY_DISABLED = "recovery_disabled"


@dataclass(frozen=True, slots=True)
class ParseRecoveryTokenSet:
    """Recover by skipping tokens until a safe token at brace depth zero.

    At least one token is always skipped so a declaration that failed on its
    first token cannot be retried forever.
    """

    recovery_set: frozenset[TokenKind]

    def recover(self, parser: Parser) -> tuple[TextRange | None, RecoveryError | None]:
        if parser.at(TokenKind.EOF):
            return None, RecoveryError.EOF

        if not parser.options.recover_declarations:
            return None, RecoveryError.RECOVERY_DISABLED

        start = parser.position
        parser.bump_any()
        while not parser.at(TokenKind.EOF) and not self.is_at_recovered(parser):
            parser.bump_any()

        return parser.range_from(start), None

    def is_at_recovered(self, parser: Parser) -> bool:
        return parser.depth == 0 and parser.at_set(self.recovery_set)
