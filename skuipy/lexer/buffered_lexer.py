"""Buffered lexer with bounded lookahead."""

from collections import deque

from skuipy.lexer.lexer import Lexer
from skuipy.lexer.tokens import Token, TokenKind


class Lookahead:
    """Stores tokens lexed ahead of the current position, trivia included."""

    def __init__(self) -> None:
        self._all: deque[Token] = deque()
        self._non_trivia: deque[Token] = deque()

    @property
    def is_empty(self) -> bool:
        return not self._all

    def push_back(self, token: Token) -> None:
        if not token.kind.is_trivia:
            self._non_trivia.append(token)
        self._all.append(token)

    def pop_front(self) -> Token | None:
        if not self._all:
            return None
        token = self._all.popleft()
        if not token.kind.is_trivia and self._non_trivia:
            self._non_trivia.popleft()
        return token

    def get_non_trivia(self, index: int) -> Token | None:
        if index < 0 or index >= len(self._non_trivia):
            return None
        return self._non_trivia[index]

    def non_trivia_len(self) -> int:
        return len(self._non_trivia)


class BufferedLexer:
    """Lexer wrapper for lookahead.

    The parser only ever moves forward: lookahead tokens are buffered and
    replayed, never re-lexed.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._inner = lexer
        self._lookahead = Lookahead()
        self._eof: Token | None = None

    @property
    def inner(self) -> Lexer:
        return self._inner

    @property
    def source(self) -> str:
        return self._inner.source

    def next_token(self) -> Token:
        token = self._lookahead.pop_front()
        if token is not None:
            return token
        return self._lex_one()

    def nth_non_trivia(self, n: int) -> Token | None:
        """Return the n-th upcoming non-trivia token (1-based) without consuming it."""
        if n <= 0:
            raise ValueError("n must be >= 1")
        token = self._lookahead.get_non_trivia(n - 1)
        if token is not None:
            return token

        while self._lookahead.non_trivia_len() < n:
            token = self._lex_one()
            self._lookahead.push_back(token)
            if token.kind == TokenKind.EOF:
                break
        return self._lookahead.get_non_trivia(n - 1)

    def _lex_one(self) -> Token:
        if self._eof is not None:
            return self._eof
        token = self._inner.next_token()
        if token.kind == TokenKind.EOF:
            self._eof = token
        return token
