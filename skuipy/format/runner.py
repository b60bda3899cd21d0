"""Format runner over a shared skui parse result."""

from __future__ import annotations

from skuipy.format.formatter import format_document
from skuipy.parser import ParseMode, ParserOptions, parse_result
from skuipy.pipeline.result import SkuiParseResult
from skuipy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: SkuiParseResult | None = None,
) -> FormatRunResult:
    """Run formatting from a single parse lifecycle.

    Text that failed to parse is returned unchanged.
    """
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)

    document = resolved_parse.document
    if document is None or resolved_parse.has_errors:
        formatted_text = resolved_parse.source_text
    else:
        formatted_text = format_document(document)
    diagnostics = list(resolved_parse.diagnostics)
    changed = formatted_text != resolved_parse.source_text

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=diagnostics,
        changed=changed,
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: SkuiParseResult | None,
) -> SkuiParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)
