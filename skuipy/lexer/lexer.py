"""Lexer."""

from collections.abc import Iterator
import string
from typing import NoReturn

from skuipy.diagnostics import (
    LEXER_ILLEGAL_CHARACTER,
    LEXER_UNTERMINATED_CLOSURE,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
    LexError,
)
from skuipy.lexer.tokens import Token, TokenFlags, TokenKind
from skuipy.text import TextRange, TextSize, slice_text_range

_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CONTINUE = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)

_PUNCTUATION: dict[str, TokenKind] = {
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "#": TokenKind.HASH,
    "=": TokenKind.EQUAL,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


class Lexer:
    """Lossless lexer that emits trivia and non-trivia tokens.

    Tokens are produced lazily. A malformed character stream raises `LexError`;
    the lexer does not try to resynchronize after it.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self.reset()

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def current_flags(self) -> TokenFlags:
        return self._current_flags

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def reset(self) -> None:
        """Restart lexing from the beginning of the source."""
        self._position = 0
        self._after_newline = False
        self._current_start = TextSize.from_int(0)
        self._current_kind = TokenKind.EOF
        self._current_flags = TokenFlags.NONE

    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            self._current_kind = TokenKind.EOF
            if self._after_newline:
                self._current_flags |= TokenFlags.PRECEDING_LINE_BREAK
            return Token(TokenKind.EOF, TextRange.empty(self._current_start), self._current_flags)

        kind = self._lex_token()
        if not kind.is_trivia and self._after_newline:
            self._current_flags |= TokenFlags.PRECEDING_LINE_BREAK
        self._current_kind = kind

        if not kind.is_trivia:
            self._after_newline = False

        return Token(kind, self.current_range, self._current_flags)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def lex(self) -> list[Token]:
        self.reset()
        return list(self)

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch in ("\r", "\n", "\t", " "):
            return self._consume_newline_or_whitespaces()

        if ch == "/":
            next_ch = self._peek_char()
            if next_ch == "/":
                return self._lex_line_comment()
            if next_ch == "*":
                return self._lex_block_comment()
            self._raise_illegal_character()

        if ch == '"':
            return self._lex_string()

        if ch in _DIGITS or (ch == "-" and self._peek_char() in _DIGITS):
            return self._lex_number()

        if ch in _IDENT_START:
            return self._lex_identifier()

        if ch == "$":
            if self._peek_char() == "{":
                self._advance(2)
                return TokenKind.DOLLAR_LBRACE
            self._raise_illegal_character()

        if ch == "|":
            return self._lex_closure()

        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            self._advance(1)
            return kind

        self._raise_illegal_character()

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "*" and self._peek_char() == "/":
                self._advance(2)
                return TokenKind.COMMENT
            if ch == "\n":
                self._after_newline = True
            self._advance(1)
        self._raise(LEXER_UNTERMINATED_COMMENT)

    def _lex_string(self) -> TokenKind:
        # Consume opening quote
        self._advance(1)
        escaped = False

        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                if escaped:
                    self._current_flags |= TokenFlags.HAS_ESCAPE
                return TokenKind.STRING
            if ch == "\\":
                escaped = True
                self._advance(1)
                if not self.is_eof and self._current_char() not in ("\n", "\r"):
                    self._advance(1)
                continue
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)

        self._raise(LEXER_UNTERMINATED_STRING)

    def _lex_number(self) -> TokenKind:
        if self._current_char() == "-":
            self._advance(1)
        saw_dot = False
        while not self.is_eof:
            ch = self._current_char()
            if ch in _DIGITS:
                self._advance(1)
                continue
            if ch == "." and not saw_dot and self._peek_char() in _DIGITS:
                saw_dot = True
                self._advance(1)
                continue
            break

        if self._current_char() == "%":
            self._advance(1)
            return TokenKind.DIMENSION
        if self._current_char() in string.ascii_letters:
            while self._current_char() in string.ascii_letters:
                self._advance(1)
            return TokenKind.DIMENSION

        return TokenKind.FLOAT if saw_dot else TokenKind.INT

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch in _IDENT_CONTINUE:
                self._advance(1)
                continue
            # Inner hyphens only, so `background-color` is one identifier.
            if ch == "-" and self._peek_char() in _IDENT_CONTINUE:
                self._advance(1)
                continue
            break
        return TokenKind.IDENTIFIER

    def _lex_closure(self) -> TokenKind:
        # |args| { body }
        self._advance(1)
        while not self.is_eof and self._current_char() != "|":
            if self._current_char() in ("\n", "\r"):
                self._raise(LEXER_UNTERMINATED_CLOSURE)
            self._advance(1)
        if self.is_eof:
            self._raise(LEXER_UNTERMINATED_CLOSURE)
        self._advance(1)

        while self._current_char() in (" ", "\t", "\r", "\n"):
            self._advance(1)
        if self._current_char() != "{":
            self._raise(
                LEXER_UNTERMINATED_CLOSURE,
                message="Expected `{` after closure parameters.",
            )

        depth = 0
        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._skip_closure_string()
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    self._advance(1)
                    return TokenKind.CLOSURE
            self._advance(1)

        self._raise(LEXER_UNTERMINATED_CLOSURE)

    def _skip_closure_string(self) -> None:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\\":
                self._advance(2)
                continue
            self._advance(1)
            if ch == '"':
                return

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            self._after_newline = True
            return TokenKind.NEWLINE
        self._consume_whitespaces()
        return TokenKind.WHITESPACE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t":
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return True
        return False

    def _raise_illegal_character(self) -> NoReturn:
        ch = self._current_char()
        start = self._position
        self._advance(1)
        diagnostic = LEXER_ILLEGAL_CHARACTER.at(
            TextRange.from_offsets(start, self._position),
            message=f"Illegal character {ch!r}.",
        )
        raise LexError(diagnostic)

    def _raise(self, spec: DiagnosticSpec, *, message: str | None = None) -> NoReturn:
        diagnostic = spec.at(
            TextRange.new(self._current_start, TextSize.from_int(self._position)),
            message=message,
        )
        raise LexError(diagnostic)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position = min(self._position + steps, len(self._source))


def token_text(
    source: str,
    token: Token,
    null_char_on_eof: bool = False,
) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return "\0" if null_char_on_eof else ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<18} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
