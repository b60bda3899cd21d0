"""Parser infrastructure (token source + recursive-descent grammar)."""

from skuipy.parser.context import BraceContext
from skuipy.parser.declarations import (
    parse_component,
    parse_declaration,
    parse_parameters,
    parse_selectors,
    parse_style_rule,
)
from skuipy.parser.grammar import TOP_LEVEL_RECOVERY, parse_source_file
from skuipy.parser.options import ParseMode, ParserOptions
from skuipy.parser.parse_recovery import ParseRecoveryTokenSet, RecoveryError
from skuipy.parser.parsed import ParsedDocument
from skuipy.parser.parser import Parser, ParserProgress, describe_kind
from skuipy.parser.skui import parse, parse_result
from skuipy.parser.token_source import TokenSource
from skuipy.parser.values import decode_string, parse_value

__all__ = [
    "TOP_LEVEL_RECOVERY",
    "BraceContext",
    "ParseMode",
    "ParseRecoveryTokenSet",
    "ParsedDocument",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "RecoveryError",
    "TokenSource",
    "decode_string",
    "describe_kind",
    "parse",
    "parse_component",
    "parse_declaration",
    "parse_parameters",
    "parse_result",
    "parse_selectors",
    "parse_source_file",
    "parse_style_rule",
    "parse_value",
]
