"""Declaration grammar: component instantiations, style rules and definitions.

Every decision is made from at most three tokens of lookahead; nothing is
parsed twice.
"""

from typing import Final

from skuipy.ast.model import (
    ArrayValue,
    ClassSelector,
    Component,
    ComponentDefinition,
    IdSelector,
    MixedParameters,
    NamedParameters,
    Parameters,
    PositionalParameters,
    Property,
    Selectors,
    StyleRule,
    StyleSelector,
    TypeSelector,
    Value,
)
from skuipy.diagnostics import (
    DECL_DUPLICATE_ID,
    DECL_EXPECTED_TOKEN,
    DECL_MISSING_RBRACE,
    DECL_MISSING_SUFFIX,
    DECL_UNEXPECTED_TOKEN,
    DeclParseError,
)
from skuipy.lexer import TokenKind
from skuipy.parser import values
from skuipy.parser.context import BraceContext
from skuipy.parser.parser import Parser, ParserProgress

_STYLE_VALUE_END: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.SEMICOLON, TokenKind.COMMA, TokenKind.RBRACE, TokenKind.EOF}
)
_NAMED_ENTRY_OPERATORS: Final[frozenset[TokenKind]] = frozenset({TokenKind.COLON, TokenKind.EQUAL})
_STYLE_SELECTOR_MARKERS: Final[frozenset[TokenKind]] = frozenset({TokenKind.HASH, TokenKind.DOT})


def at_style_rule_start(p: Parser) -> bool:
    """`Ident {`, `#ident ...` or `.ident ...`, or a type followed by `#`/`.` on its line."""
    if p.at(TokenKind.IDENTIFIER):
        if p.nth_at(1, TokenKind.LBRACE):
            return True
        return p.nth(1) in _STYLE_SELECTOR_MARKERS and not p.has_nth_preceding_line_break(1)
    if p.at_set(_STYLE_SELECTOR_MARKERS):
        return p.nth_at(1, TokenKind.IDENTIFIER)
    return False


def at_definition_start(p: Parser) -> bool:
    """`Name : Ident (`."""
    return (
        p.at(TokenKind.IDENTIFIER)
        and p.nth_at(1, TokenKind.COLON)
        and p.nth_at(2, TokenKind.IDENTIFIER)
        and p.nth_at(3, TokenKind.LPAREN)
    )


def parse_component(p: Parser, context: BraceContext = BraceContext.COMPONENT_BODY) -> Component:
    """Parse `Type(params) [#id .class ...] [{ body }]`.

    Inside a style body a component-shaped value such as `rgb(1, 2, 3)` takes
    neither selectors nor a body.
    """
    start = p.position
    type_name = p.current_text
    p.expect(TokenKind.IDENTIFIER, context="for a component type")
    parameters = parse_parameters(p)

    if context is BraceContext.STYLE_BODY:
        return Component(type_name, parameters, range=p.range_from(start))

    selectors = parse_selectors(p)
    properties: tuple[Property, ...] = ()
    children: tuple[Component, ...] = ()
    if p.at(TokenKind.LBRACE):
        properties, children = parse_component_body(p)

    return Component(
        type_name=type_name,
        parameters=parameters,
        selectors=selectors,
        properties=properties,
        children=children,
        range=p.range_from(start),
    )


def parse_parameters(p: Parser) -> Parameters:
    """Parse `( ... )`.

    An entry shaped `name :` or `name =` is named. All named gives
    `NamedParameters`, none gives `PositionalParameters`, both gives
    `MixedParameters` which validation reports.
    """
    start = p.position
    p.expect(TokenKind.LPAREN, context="to open the parameter list")
    entries: list[tuple[str | None, Value]] = []
    progress = ParserProgress()
    while not p.at(TokenKind.RPAREN):
        progress.assert_progressing(p)
        if p.at(TokenKind.EOF):
            p.expect(TokenKind.RPAREN, context="to close the parameter list")
        name: str | None = None
        if p.at(TokenKind.IDENTIFIER) and p.nth(1) in _NAMED_ENTRY_OPERATORS:
            name = p.current_text
            p.bump()
            p.bump()
        entries.append((name, values.parse_value(p, BraceContext.MAP_VALUE)))
        p.eat(TokenKind.COMMA)
    p.bump()  # )
    parameters_range = p.range_from(start)

    named = [entry for entry in entries if entry[0] is not None]
    if not named:
        return PositionalParameters(tuple(value for _, value in entries), range=parameters_range)
    if len(named) == len(entries):
        # A repeated name keeps its first position and takes the later value.
        merged = {name: value for name, value in entries if name is not None}
        return NamedParameters(tuple(merged.items()), range=parameters_range)
    return MixedParameters(tuple(entries), range=parameters_range)


def parse_selectors(p: Parser) -> Selectors:
    """Parse the `#id .class` suffix. It must start on the component's line."""
    component_id: str | None = None
    classes: set[str] = set()
    while p.at(TokenKind.HASH) or p.at(TokenKind.DOT):
        if p.has_preceding_line_break:
            break
        is_id = p.at(TokenKind.HASH)
        marker_range = p.current_range
        p.bump()
        if not p.at(TokenKind.IDENTIFIER) or p.has_preceding_trivia:
            p.raise_error(
                DECL_EXPECTED_TOKEN,
                DeclParseError,
                message=f"Expected a selector name after `{'#' if is_id else '.'}`, found {p.describe_current()}",
            )
        name = p.current_text
        name_range = p.current_range
        p.bump()
        if is_id:
            if component_id is not None:
                p.raise_error(
                    DECL_DUPLICATE_ID,
                    DeclParseError,
                    message=f"Component already has id `{component_id}`; found a second id `{name}`.",
                    range=marker_range.cover(name_range),
                )
            component_id = name
        else:
            classes.add(name)
    return Selectors(id=component_id, classes=frozenset(classes))


def parse_component_body(p: Parser) -> tuple[tuple[Property, ...], tuple[Component, ...]]:
    p.expect(TokenKind.LBRACE, context="to open the component body")
    properties: list[Property] = []
    children: list[Component] = []
    progress = ParserProgress()
    while True:
        while p.eat(TokenKind.SEMICOLON):
            pass
        if p.eat(TokenKind.RBRACE):
            break
        if p.at(TokenKind.EOF):
            _missing_rbrace(p, "component body")
            break
        progress.assert_progressing(p)

        if values.at_component_start(p):
            children.append(parse_component(p, BraceContext.COMPONENT_BODY))
        elif p.at(TokenKind.IDENTIFIER) and p.nth_at(1, TokenKind.COLON):
            properties.append(_parse_component_property(p))
        else:
            p.raise_error(
                DECL_UNEXPECTED_TOKEN,
                DeclParseError,
                message=f"Unexpected {p.describe_current()} in component body; expected `key: value` or a child component",
            )
    return tuple(properties), tuple(children)


def _parse_component_property(p: Parser) -> Property:
    start = p.position
    key = p.current_text
    p.bump()
    p.bump()  # :
    value = values.parse_value(p, BraceContext.MAP_VALUE)
    return Property(key, value, range=p.range_from(start))


def parse_style_rule(p: Parser) -> StyleRule:
    start = p.position
    selectors = _parse_style_selectors(p)
    if not p.at(TokenKind.LBRACE):
        p.expect(TokenKind.LBRACE, context="to open the style rule")
    properties = parse_style_body(p)
    return StyleRule(selectors, properties, range=p.range_from(start))


def _parse_style_selectors(p: Parser) -> tuple[StyleSelector, ...]:
    """Selectors up to `{`, e.g. `Flex .row` or `#ok .primary`. They share one line."""
    selectors = [_parse_style_selector(p)]
    while not p.at(TokenKind.LBRACE) and not p.has_preceding_line_break:
        if not (p.at(TokenKind.IDENTIFIER) or p.at_set(_STYLE_SELECTOR_MARKERS)):
            break
        selectors.append(_parse_style_selector(p))
    return tuple(selectors)


def _parse_style_selector(p: Parser) -> StyleSelector:
    if p.at(TokenKind.IDENTIFIER):
        name = p.current_text
        p.bump()
        return TypeSelector(name)

    is_id = p.at(TokenKind.HASH)
    if not (is_id or p.at(TokenKind.DOT)):
        p.raise_error(
            DECL_UNEXPECTED_TOKEN,
            DeclParseError,
            message=f"Expected a style selector, found {p.describe_current()}",
        )
    p.bump()
    if not p.at(TokenKind.IDENTIFIER):
        p.expect(TokenKind.IDENTIFIER, context="for the selector name")
    name = p.current_text
    p.bump()
    return IdSelector(name) if is_id else ClassSelector(name)


def parse_style_body(p: Parser) -> tuple[Property, ...]:
    """Property entries separated by `;`, `,` or line breaks. No children."""
    p.expect(TokenKind.LBRACE, context="to open the style body")
    properties: list[Property] = []
    progress = ParserProgress()
    while True:
        while p.eat(TokenKind.SEMICOLON) or p.eat(TokenKind.COMMA):
            pass
        if p.eat(TokenKind.RBRACE):
            break
        if p.at(TokenKind.EOF):
            _missing_rbrace(p, "style body")
            break
        progress.assert_progressing(p)
        properties.append(_parse_style_property(p))
    return tuple(properties)


def _parse_style_property(p: Parser) -> Property:
    start = p.position
    if not p.at(TokenKind.IDENTIFIER):
        p.raise_error(
            DECL_UNEXPECTED_TOKEN,
            DeclParseError,
            message=f"Unexpected {p.describe_current()} in style body; expected `key: value`",
        )
    key = p.current_text
    p.bump()
    p.expect(TokenKind.COLON, context=f"after style property `{key}`")

    value_start = p.position
    items = [values.parse_value(p, BraceContext.STYLE_BODY)]
    while not p.at_set(_STYLE_VALUE_END) and not p.has_preceding_line_break:
        items.append(values.parse_value(p, BraceContext.STYLE_BODY))

    value: Value
    if len(items) == 1:
        value = items[0]
    else:
        # `border: 1px solid yellow`
        value = ArrayValue(tuple(items), range=p.range_from(value_start))
    return Property(key, value, range=p.range_from(start))


def parse_definition(p: Parser) -> ComponentDefinition:
    start = p.position
    name = p.current_text
    p.bump()
    p.bump()  # :
    component = parse_component(p, BraceContext.COMPONENT_BODY)
    return ComponentDefinition(name, component, range=p.range_from(start))


def _missing_rbrace(p: Parser, what: str) -> None:
    if p.options.allow_missing_rbrace:
        p.error(
            DECL_MISSING_RBRACE.at(
                p.current_range,
                message=f"Missing `}}` to close the {what}; tolerated in permissive mode",
            )
        )
        return
    p.expect(TokenKind.RBRACE, context=f"to close the {what}")


def parse_declaration(p: Parser):
    """Parse one top-level declaration."""
    if at_definition_start(p):
        return parse_definition(p)
    if values.at_component_start(p):
        return parse_component(p, BraceContext.COMPONENT_BODY)
    if at_style_rule_start(p):
        return parse_style_rule(p)

    if p.at(TokenKind.IDENTIFIER):
        name = p.current_text
        if p.nth_at(1, TokenKind.COLON):
            p.bump()
            p.bump()
            p.raise_error(
                DECL_EXPECTED_TOKEN,
                DeclParseError,
                message=f"Expected a component after `{name} :`, found {p.describe_current()}",
            )
        p.raise_error(
            DECL_MISSING_SUFFIX,
            DeclParseError,
            message=f"Expected `(` or `{{` after `{name}`",
        )
    if p.at(TokenKind.HASH) or p.at(TokenKind.DOT):
        return parse_style_rule(p)

    p.raise_error(
        DECL_UNEXPECTED_TOKEN,
        DeclParseError,
        message=f"Unexpected {p.describe_current()} at top level",
    )
