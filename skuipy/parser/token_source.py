"""Token source that hides trivia from the parser."""

from skuipy.lexer import BufferedLexer, Token
from skuipy.lexer.tokens import TokenFlags, TokenKind
from skuipy.text import TextRange, TextSize, slice_text_range


class TokenSource:
    """Bridge between lexer and parser that strips trivia.

    Only the facts the grammar needs about skipped trivia are kept: whether
    the current token follows any trivia, and whether it follows a line break.
    """

    def __init__(self, lexer: BufferedLexer) -> None:
        self._lexer = lexer
        self._current_kind: TokenKind = TokenKind.EOF
        self._current_range: TextRange = TextRange.empty(TextSize.from_int(0))
        self._current_flags: TokenFlags = TokenFlags.NONE
        self._preceding_line_break = False
        self._current_has_preceding_trivia = False
        self._next_non_trivia_token()

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return self._current_range

    @property
    def current_flags(self) -> TokenFlags:
        return self._current_flags

    @property
    def current_text(self) -> str:
        if self._current_kind == TokenKind.EOF:
            return ""
        return slice_text_range(self.text, self._current_range)

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def position(self) -> TextSize:
        return self._current_range.start

    @property
    def has_preceding_line_break(self) -> bool:
        return self._preceding_line_break

    @property
    def has_preceding_trivia(self) -> bool:
        return self._current_has_preceding_trivia

    def bump(self) -> None:
        if self._current_kind != TokenKind.EOF:
            self._next_non_trivia_token()

    def nth(self, n: int) -> TokenKind:
        if n == 0:
            return self._current_kind
        lookahead = self._nth_token(n)
        return lookahead.kind if lookahead is not None else TokenKind.EOF

    def nth_range(self, n: int) -> TextRange:
        if n == 0:
            return self._current_range
        lookahead = self._nth_token(n)
        if lookahead is not None:
            return lookahead.range
        return TextRange.empty(self._current_range.end)

    def nth_text(self, n: int) -> str:
        if n == 0:
            return self.current_text
        lookahead = self._nth_token(n)
        if lookahead is None or lookahead.kind == TokenKind.EOF:
            return ""
        return slice_text_range(self.text, lookahead.range)

    def has_nth_preceding_line_break(self, n: int) -> bool:
        if n == 0:
            return self._preceding_line_break
        lookahead = self._nth_token(n)
        return lookahead.has_preceding_line_break() if lookahead is not None else False

    def _nth_token(self, n: int) -> Token | None:
        if self._current_kind == TokenKind.EOF:
            return None
        return self._lexer.nth_non_trivia(n)

    def _next_non_trivia_token(self) -> None:
        self._preceding_line_break = False
        saw_trivia = False

        while True:
            token = self._lexer.next_token()

            if token.kind.is_trivia:
                saw_trivia = True
                if token.kind == TokenKind.NEWLINE:
                    self._preceding_line_break = True
                continue

            self._current_kind = token.kind
            self._current_range = token.range
            self._current_flags = token.flags
            self._current_has_preceding_trivia = saw_trivia
            if token.has_preceding_line_break():
                self._preceding_line_break = True
            break
