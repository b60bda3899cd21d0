#!/usr/bin/env python
import argparse
from pathlib import Path

from skuipy.diagnostics import LexError
from skuipy.lexer import Lexer, Token, TokenFlags, TokenKind, token_text


def format_token(idx: int, token: Token, source: str) -> str:
    base = (
        f"[{idx}] kind={token.kind.name} "
        f"text={token_text(source, token)!r} "
        f"span=({token.range.start.value},{token.range.end.value})"
    )
    if token.has_preceding_line_break():
        base += " after_newline"
    if token.kind == TokenKind.STRING and token.flags & TokenFlags.HAS_ESCAPE:
        base += " escaped"
    return base


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the token stream of a skui file")
    parser.add_argument("path", type=Path, help="Source file to lex")
    parser.add_argument("--output", type=Path, default=None, help="Write the dump here instead of stdout")
    parser.add_argument("--no-trivia", action="store_true", help="Skip whitespace, newline and comment tokens")
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    tokens: list[Token] = []
    error: LexError | None = None
    # Lexing stops at the first fatal error; keep what was produced before it.
    lexer = Lexer(text)
    try:
        for token in lexer:
            tokens.append(token)
    except LexError as err:
        error = err

    lines = [
        format_token(idx, token, text)
        for idx, token in enumerate(tokens)
        if not (args.no_trivia and token.kind.is_trivia)
    ]
    if error is not None:
        lines.append(f"LexError {error.code} at offset {error.offset}: {error.diagnostic.message}")

    if args.output is None:
        print("\n".join(lines))
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with args.output.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        print(f"Wrote {len(tokens)} tokens to {args.output}")
    return 1 if error is not None else 0


if __name__ == "__main__":
    raise SystemExit(main())
