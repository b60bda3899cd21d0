"""Top-level grammar loop."""

from typing import Final

from skuipy.ast.model import Declaration
from skuipy.diagnostics import DeclParseError, ValueParseError
from skuipy.lexer import TokenKind
from skuipy.parser.declarations import parse_declaration
from skuipy.parser.parse_recovery import ParseRecoveryTokenSet
from skuipy.parser.parser import Parser, ParserProgress

TOP_LEVEL_RECOVERY: Final[ParseRecoveryTokenSet] = ParseRecoveryTokenSet(
    recovery_set=frozenset({TokenKind.IDENTIFIER, TokenKind.HASH, TokenKind.DOT}),
)


def parse_source_file(p: Parser) -> list[Declaration]:
    """Parse declarations until EOF.

    A failed declaration is recorded as a diagnostic and the parser skips to
    the next token that can start a declaration outside any brackets. With
    recovery disabled the loop stops at the first failure.
    """
    declarations: list[Declaration] = []
    progress = ParserProgress()
    while not p.at(TokenKind.EOF):
        progress.assert_progressing(p)
        if p.eat(TokenKind.SEMICOLON):
            continue
        try:
            declarations.append(parse_declaration(p))
        except (ValueParseError, DeclParseError) as err:
            p.error(err.diagnostic)
            _, recovery_error = TOP_LEVEL_RECOVERY.recover(p)
            if recovery_error is not None:
                break
    return declarations
