"""Value grammar.

value :=
    '[' (value ','?)* ']'
  | '{' ((IDENT | STRING) (':' | '=') value ','?)* '}'     (map context only)
  | '${' key (('.' | ',') key)* '}'
  | '#' hex
  | IDENT '(' ...                                        (component)
  | IDENT | STRING | INT | FLOAT | DIMENSION | CLOSURE
"""

import re
from typing import Final

from skuipy.ast.model import (
    ArrayValue,
    BoolValue,
    ClosureValue,
    ColorValue,
    ComponentValue,
    DimensionValue,
    IdentValue,
    IndexKey,
    MapValue,
    NameKey,
    NumberValue,
    RelativeValue,
    StringValue,
    Value,
    ValueKey,
)
from skuipy.diagnostics import (
    VALUE_EXPECTED_TOKEN,
    VALUE_EXPECTED_VALUE,
    VALUE_INVALID_COLOR,
    VALUE_INVALID_RELATIVE,
    ValueParseError,
)
from skuipy.lexer import KEYWORD_FALSE, KEYWORD_TRUE, TokenKind
from skuipy.parser import declarations
from skuipy.parser.context import BraceContext
from skuipy.parser.parser import Parser

_HEX_COLOR_RE = re.compile(r"^(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_DIMENSION_RE = re.compile(r"^(-?\d+(?:\.\d+)?)(%|[A-Za-z]+)$")

_COLOR_PARTS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.IDENTIFIER, TokenKind.INT, TokenKind.DIMENSION}
)

_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def at_component_start(p: Parser) -> bool:
    """`Ident (` with the paren on the same line."""
    return (
        p.at(TokenKind.IDENTIFIER)
        and p.nth_at(1, TokenKind.LPAREN)
        and not p.has_nth_preceding_line_break(1)
    )


def parse_value(p: Parser, context: BraceContext) -> Value:
    """Consume exactly one value and return it."""
    match p.current:
        case TokenKind.LBRACKET:
            return parse_array(p, context)
        case TokenKind.LBRACE:
            if context is BraceContext.MAP_VALUE:
                return parse_map(p)
            p.raise_error(
                VALUE_EXPECTED_VALUE,
                ValueParseError,
                message="Expected a value, found `{` (maps are not allowed here)",
            )
        case TokenKind.DOLLAR_LBRACE:
            return parse_relative(p)
        case TokenKind.HASH:
            return parse_color(p)
        case TokenKind.IDENTIFIER:
            if at_component_start(p):
                start = p.position
                component = declarations.parse_component(p, context)
                return ComponentValue(component, range=p.range_from(start))
            return _parse_ident(p)
        case TokenKind.STRING:
            token_range = p.current_range
            value = decode_string(p.current_text)
            p.bump()
            return StringValue(value, range=token_range)
        case TokenKind.INT:
            token_range = p.current_range
            number = int(p.current_text)
            p.bump()
            return NumberValue(number, range=token_range)
        case TokenKind.FLOAT:
            token_range = p.current_range
            number = float(p.current_text)
            p.bump()
            return NumberValue(number, range=token_range)
        case TokenKind.DIMENSION:
            return _parse_dimension(p)
        case TokenKind.CLOSURE:
            token_range = p.current_range
            source = p.current_text
            p.bump()
            return ClosureValue(source, range=token_range)
        case _:
            p.raise_error(
                VALUE_EXPECTED_VALUE,
                ValueParseError,
                message=f"Expected a value, found {p.describe_current()}",
            )


def parse_array(p: Parser, context: BraceContext) -> ArrayValue:
    start = p.position
    p.bump()  # [
    items: list[Value] = []
    while not p.at(TokenKind.RBRACKET):
        if p.at(TokenKind.EOF):
            p.expect(TokenKind.RBRACKET, VALUE_EXPECTED_TOKEN, ValueParseError, context="to close the array")
        items.append(parse_value(p, context))
        p.eat(TokenKind.COMMA)
    p.bump()  # ]
    return ArrayValue(tuple(items), range=p.range_from(start))


def parse_map(p: Parser) -> MapValue:
    start = p.position
    p.bump()  # {
    entries: dict[str, Value] = {}
    while not p.at(TokenKind.RBRACE):
        if p.at(TokenKind.IDENTIFIER):
            key = p.current_text
        elif p.at(TokenKind.STRING):
            key = decode_string(p.current_text)
        elif p.at(TokenKind.EOF):
            p.expect(TokenKind.RBRACE, VALUE_EXPECTED_TOKEN, ValueParseError, context="to close the map")
        else:
            p.raise_error(
                VALUE_EXPECTED_TOKEN,
                ValueParseError,
                message=f"Expected a map key, found {p.describe_current()}",
            )
        p.bump()
        if not (p.eat(TokenKind.COLON) or p.eat(TokenKind.EQUAL)):
            p.raise_error(
                VALUE_EXPECTED_TOKEN,
                ValueParseError,
                message=f"Expected `:` or `=` after map key `{key}`, found {p.describe_current()}",
            )
        # A repeated key keeps its first position and takes the later value.
        entries[key] = parse_value(p, BraceContext.MAP_VALUE)
        p.eat(TokenKind.COMMA)
    p.bump()  # }
    return MapValue(tuple(entries.items()), range=p.range_from(start))


def parse_relative(p: Parser) -> RelativeValue:
    start = p.position
    p.bump()  # ${
    keys: list[ValueKey] = []
    while True:
        match p.current:
            case TokenKind.INT:
                keys.append(_index_key(p, p.current_text))
                p.bump()
            case TokenKind.FLOAT:
                # `${0.1}` lexes as one number; each part is an index.
                for part in p.current_text.split("."):
                    keys.append(_index_key(p, part))
                p.bump()
            case TokenKind.IDENTIFIER:
                keys.append(NameKey(p.current_text))
                p.bump()
            case _:
                p.raise_error(
                    VALUE_INVALID_RELATIVE,
                    ValueParseError,
                    message=f"Expected an index or a name in relative reference, found {p.describe_current()}",
                )
        if p.eat(TokenKind.DOT) or p.eat(TokenKind.COMMA):
            continue
        break
    p.expect(TokenKind.RBRACE, VALUE_INVALID_RELATIVE, ValueParseError, context="to close the relative reference")
    return RelativeValue(tuple(keys), range=p.range_from(start))


def parse_color(p: Parser) -> ColorValue:
    start = p.position
    p.bump()  # #
    parts: list[str] = []
    while p.at_set(_COLOR_PARTS) and not p.has_preceding_trivia:
        parts.append(p.current_text)
        p.bump()
    text = "".join(parts)
    color_range = p.range_from(start)
    if not _HEX_COLOR_RE.match(text):
        p.raise_error(
            VALUE_INVALID_COLOR,
            ValueParseError,
            message=f"Invalid hex color `#{text}`.",
            range=color_range,
        )
    return ColorValue(text.lower(), range=color_range)


def decode_string(raw: str) -> str:
    """Strip the quotes of a string token and decode its escapes."""
    body = raw[1:-1]
    if "\\" not in body:
        return body
    out: list[str] = []
    index = 0
    while index < len(body):
        ch = body[index]
        if ch == "\\" and index + 1 < len(body):
            escaped = body[index + 1]
            out.append(_ESCAPES.get(escaped, escaped))
            index += 2
            continue
        out.append(ch)
        index += 1
    return "".join(out)


def _parse_ident(p: Parser) -> IdentValue | BoolValue:
    token_range = p.current_range
    text = p.current_text
    p.bump()
    if text == KEYWORD_TRUE:
        return BoolValue(True, range=token_range)
    if text == KEYWORD_FALSE:
        return BoolValue(False, range=token_range)
    return IdentValue(text, range=token_range)


def _parse_dimension(p: Parser) -> DimensionValue:
    token_range = p.current_range
    text = p.current_text
    match = _DIMENSION_RE.match(text)
    if match is None:
        p.raise_error(
            VALUE_EXPECTED_VALUE,
            ValueParseError,
            message=f"Malformed dimension `{text}`",
        )
    p.bump()
    number_text, unit = match.groups()
    number: int | float = float(number_text) if "." in number_text else int(number_text)
    return DimensionValue(number, unit, range=token_range)


def _index_key(p: Parser, text: str) -> IndexKey:
    if not text.isdigit():
        p.raise_error(
            VALUE_INVALID_RELATIVE,
            ValueParseError,
            message=f"Relative index must be a non-negative integer, found `{text}`",
        )
    return IndexKey(int(text))
