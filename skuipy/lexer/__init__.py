"""Lexer."""

from skuipy.lexer.buffered_lexer import BufferedLexer, Lookahead
from skuipy.lexer.lexer import Lexer, dump_tokens, token_text
from skuipy.lexer.tokens import (
    EOF_TOKEN,
    KEYWORD_FALSE,
    KEYWORD_TRUE,
    Token,
    TokenFlags,
    TokenKind,
)

__all__ = [
    "EOF_TOKEN",
    "KEYWORD_FALSE",
    "KEYWORD_TRUE",
    "BufferedLexer",
    "Lexer",
    "Lookahead",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "token_text",
]
