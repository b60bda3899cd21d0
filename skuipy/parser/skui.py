"""High-level parse entrypoint for skui source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skuipy.ast.assemble import assemble_document
from skuipy.diagnostics import LexError, collect_diagnostics
from skuipy.lexer import BufferedLexer, Lexer
from skuipy.parser.grammar import parse_source_file
from skuipy.parser.options import ParseMode, ParserOptions
from skuipy.parser.parsed import ParsedDocument
from skuipy.parser.parser import Parser
from skuipy.parser.token_source import TokenSource

if TYPE_CHECKING:
    from skuipy.pipeline import SkuiParseResult


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedDocument:
    resolved_options = _resolve_options(options=options, mode=mode)

    try:
        source = TokenSource(BufferedLexer(Lexer(text)))
        parser = Parser(source, options=resolved_options)
        declarations = parse_source_file(parser)
    except LexError as err:
        return ParsedDocument(document=None, diagnostics=[err.diagnostic])

    return ParsedDocument(
        document=assemble_document(declarations),
        diagnostics=collect_diagnostics(parser.finish()),
    )


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> SkuiParseResult:
    from skuipy.pipeline import SkuiParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    parsed = parse(text, options=resolved_options)
    return SkuiParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )
