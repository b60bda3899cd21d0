"""Canonical text rendering of a `Document`.

The output re-parses to an equal document. Within a component body all
properties come before all children; classes are sorted.
"""

from __future__ import annotations

import re
from typing import Final

from skuipy.ast import (
    ArrayValue,
    BoolValue,
    ClassSelector,
    ClosureValue,
    ColorValue,
    Component,
    ComponentDefinition,
    ComponentValue,
    DimensionValue,
    Document,
    IdentValue,
    IdSelector,
    MapValue,
    MixedParameters,
    NamedParameters,
    NumberValue,
    Parameters,
    PositionalParameters,
    Property,
    RelativeValue,
    StringValue,
    StyleRule,
    StyleSelector,
    TypeSelector,
    Value,
)

INDENT: Final[str] = "    "

_BARE_KEY_RE = re.compile(r"^[A-Za-z_](?:[A-Za-z0-9_]|-(?=[A-Za-z0-9_]))*$")
_STRING_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def format_document(document: Document) -> str:
    blocks: list[str] = []
    blocks.extend(format_style_rule(style) for style in document.styles)
    blocks.extend(format_definition(definition) for definition in document.definitions)
    blocks.extend(format_component(component) for component in document.components)
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def format_style_rule(style: StyleRule) -> str:
    head = " ".join(_format_style_selector(selector) for selector in style.selectors)
    if not style.properties:
        return f"{head} {{}}"
    lines = [f"{head} {{"]
    lines.extend(f"{INDENT}{prop.key}: {_format_style_value(prop.value)}" for prop in style.properties)
    lines.append("}")
    return "\n".join(lines)


def format_definition(definition: ComponentDefinition) -> str:
    return f"{definition.name} : {format_component(definition.component)}"


def format_component(component: Component, level: int = 0) -> str:
    head = f"{component.type_name}({format_parameters(component.parameters, level)})"
    selectors = _format_selectors(component)
    if selectors:
        head = f"{head} {selectors}"
    if not component.properties and not component.children:
        return head

    inner = INDENT * (level + 1)
    lines = [f"{head} {{"]
    lines.extend(_format_property(prop, level + 1) for prop in component.properties)
    lines.extend(f"{inner}{format_component(child, level + 1)}" for child in component.children)
    lines.append(f"{INDENT * level}}}")
    return "\n".join(lines)


def format_parameters(parameters: Parameters, level: int = 0) -> str:
    match parameters:
        case PositionalParameters(values=values):
            return ", ".join(format_value(value, level) for value in values)
        case NamedParameters(entries=entries) | MixedParameters(entries=entries):
            return ", ".join(
                format_value(value, level) if name is None else f"{name}: {format_value(value, level)}"
                for name, value in entries
            )


def format_value(value: Value, level: int = 0) -> str:
    match value:
        case IdentValue(name=name):
            return name
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case NumberValue(value=number):
            return format_number(number)
        case StringValue(value=text):
            return format_string(text)
        case DimensionValue(value=number, unit=unit):
            return f"{format_number(number)}{unit}"
        case ColorValue(hex=hex_digits):
            return f"#{hex_digits}"
        case ClosureValue(source=source):
            return source
        case ArrayValue(items=items):
            return "[" + ", ".join(format_value(item, level) for item in items) + "]"
        case MapValue(entries=entries):
            return "{" + ", ".join(f"{_format_key(key)}: {format_value(item, level)}" for key, item in entries) + "}"
        case ComponentValue(component=component):
            return format_component(component, level)
        case RelativeValue():
            return value.display()


def format_number(number: int | float) -> str:
    if isinstance(number, int):
        return str(number)
    text = repr(number)
    if "e" in text or "E" in text:
        text = f"{number:.20f}".rstrip("0")
        if text.endswith("."):
            text += "0"
    return text


def format_string(text: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in text) + '"'


def _format_property(prop: Property, level: int) -> str:
    return f"{INDENT * level}{prop.key}: {format_value(prop.value, level)}"


def _format_style_value(value: Value) -> str:
    # Several values on one line parse back into the same array.
    if isinstance(value, ArrayValue) and len(value.items) > 1:
        return " ".join(format_value(item) for item in value.items)
    return format_value(value)


def _format_style_selector(selector: StyleSelector) -> str:
    match selector:
        case TypeSelector(name=name):
            return name
        case IdSelector(name=name):
            return f"#{name}"
        case ClassSelector(name=name):
            return f".{name}"


def _format_selectors(component: Component) -> str:
    parts: list[str] = []
    if component.id is not None:
        parts.append(f"#{component.id}")
    parts.extend(f".{name}" for name in sorted(component.classes))
    return " ".join(parts)


def _format_key(key: str) -> str:
    return key if _BARE_KEY_RE.match(key) else format_string(key)
