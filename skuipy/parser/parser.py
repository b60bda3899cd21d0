"""Recursive-descent parser core."""

from dataclasses import dataclass
from typing import Final, NoReturn

from skuipy.diagnostics import (
    DECL_EXPECTED_TOKEN,
    DeclParseError,
    Diagnostic,
    DiagnosticSpec,
    SkuiSyntaxError,
)
from skuipy.lexer import TokenKind
from skuipy.lexer.tokens import TokenFlags
from skuipy.parser.options import ParserOptions
from skuipy.parser.token_source import TokenSource
from skuipy.text import TextRange, TextSize

_OPENERS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.LBRACE, TokenKind.LBRACKET, TokenKind.LPAREN, TokenKind.DOLLAR_LBRACE}
)
_CLOSERS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.RBRACE, TokenKind.RBRACKET, TokenKind.RPAREN}
)

_KIND_DISPLAY: Final[dict[TokenKind, str]] = {
    TokenKind.EOF: "end of file",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.STRING: "string",
    TokenKind.INT: "integer",
    TokenKind.FLOAT: "number",
    TokenKind.DIMENSION: "dimension",
    TokenKind.CLOSURE: "closure",
    TokenKind.COLON: "`:`",
    TokenKind.SEMICOLON: "`;`",
    TokenKind.COMMA: "`,`",
    TokenKind.DOT: "`.`",
    TokenKind.HASH: "`#`",
    TokenKind.EQUAL: "`=`",
    TokenKind.LBRACE: "`{`",
    TokenKind.RBRACE: "`}`",
    TokenKind.LBRACKET: "`[`",
    TokenKind.RBRACKET: "`]`",
    TokenKind.LPAREN: "`(`",
    TokenKind.RPAREN: "`)`",
    TokenKind.DOLLAR_LBRACE: "`${`",
}


def describe_kind(kind: TokenKind) -> str:
    return _KIND_DISPLAY.get(kind, kind.name.lower())


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    """Token cursor shared by the value and declaration grammars.

    Grammar functions raise `ValueParseError`/`DeclParseError` on the first
    mismatch; recoverable findings are recorded with `error()`.
    """

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._diagnostics: list[Diagnostic] = []
        self._depth = 0
        self._last_end = source.position

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def current_text(self) -> str:
        return self._source.current_text

    @property
    def current_flags(self) -> TokenFlags:
        return self._source.current_flags

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def depth(self) -> int:
        """Number of open `{ [ ( ${` delimiters consumed so far."""
        return self._depth

    @property
    def has_preceding_line_break(self) -> bool:
        return self._source.has_preceding_line_break

    @property
    def has_preceding_trivia(self) -> bool:
        return self._source.has_preceding_trivia

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def nth(self, n: int) -> TokenKind:
        return self._source.nth(n)

    def nth_at(self, n: int, kind: TokenKind) -> bool:
        return self._source.nth(n) == kind

    def nth_range(self, n: int) -> TextRange:
        return self._source.nth_range(n)

    def nth_text(self, n: int) -> str:
        return self._source.nth_text(n)

    def has_nth_preceding_line_break(self, n: int) -> bool:
        return self._source.has_nth_preceding_line_break(n)

    def bump(self) -> None:
        kind = self.current
        if kind == TokenKind.EOF:
            return
        if kind in _OPENERS:
            self._depth += 1
        elif kind in _CLOSERS and self._depth > 0:
            self._depth -= 1
        self._last_end = self.current_range.end
        self._source.bump()

    def bump_any(self) -> None:
        self.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(
        self,
        kind: TokenKind,
        spec: DiagnosticSpec = DECL_EXPECTED_TOKEN,
        error_type: type[SkuiSyntaxError] = DeclParseError,
        *,
        context: str | None = None,
    ) -> TextRange:
        """Consume `kind` and return its range, or raise `error_type`."""
        if self.at(kind):
            token_range = self.current_range
            self.bump()
            return token_range
        message = f"Expected {describe_kind(kind)}"
        if context:
            message += f" {context}"
        message += f", found {self.describe_current()}"
        self.raise_error(spec, error_type, message=message)

    def raise_error(
        self,
        spec: DiagnosticSpec,
        error_type: type[SkuiSyntaxError],
        *,
        message: str | None = None,
        range: TextRange | None = None,
    ) -> NoReturn:
        raise error_type(spec.at(range if range is not None else self.current_range, message=message))

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == diagnostic.range.start and previous.code == diagnostic.code:
                return
        self._diagnostics.append(diagnostic)

    def describe_current(self) -> str:
        kind = self.current
        if kind == TokenKind.EOF:
            return describe_kind(kind)
        if kind in _KIND_DISPLAY and _KIND_DISPLAY[kind].startswith("`"):
            return _KIND_DISPLAY[kind]
        return f"{describe_kind(kind)} `{self.current_text}`"

    def range_from(self, start: TextSize) -> TextRange:
        """Range from `start` to the end of the last consumed token."""
        end = self._last_end if self._last_end >= start else start
        return TextRange.new(start, end)

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics
