"""Style value interpretation helpers for document consumers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from skuipy.ast.model import (
    ArrayValue,
    ColorValue,
    ComponentValue,
    DimensionValue,
    IdentValue,
    NumberValue,
    Parameters,
    PositionalParameters,
    StringValue,
    Value,
)

type Rgba = tuple[int, int, int, int]


class CssKind(StrEnum):
    UNKNOWN = "unknown"
    KEYWORD = "keyword"
    PX = "px"
    PERCENT = "percent"
    NUMBER = "number"
    IDENT = "ident"
    STRING = "string"
    COLOR = "color"


CSS_KEYWORDS = frozenset({"auto", "none", "inherit"})


@dataclass(frozen=True, slots=True)
class CssValue:
    kind: CssKind
    text: str | None = None
    number: float | None = None
    color: Rgba | None = None

    @property
    def is_unknown(self) -> bool:
        return self.kind == CssKind.UNKNOWN


_UNKNOWN = CssValue(CssKind.UNKNOWN)


def parse_hex_color(digits: str) -> Rgba | None:
    """`f00`, `f00a`, `ff0000` or `ff0000aa` to an RGBA tuple."""
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        return None
    try:
        channels = [int(digits[index : index + 2], 16) for index in range(0, 8, 2)]
    except ValueError:
        return None
    return (channels[0], channels[1], channels[2], channels[3])


def interpret_css_value(value: Value) -> CssValue:
    """Classify one style value the way a toolkit adapter reads it."""
    match value:
        case IdentValue(name=name) if name in CSS_KEYWORDS:
            return CssValue(CssKind.KEYWORD, text=name)
        case IdentValue(name=name):
            return CssValue(CssKind.IDENT, text=name)
        case StringValue(value=text):
            return CssValue(CssKind.STRING, text=text)
        case NumberValue(value=number):
            return CssValue(CssKind.NUMBER, number=float(number))
        case DimensionValue(value=number, unit="px"):
            return CssValue(CssKind.PX, number=float(number))
        case DimensionValue(value=number, unit="%"):
            return CssValue(CssKind.PERCENT, number=float(number))
        case ColorValue(hex=digits):
            color = parse_hex_color(digits)
            if color is None:
                return _UNKNOWN
            return CssValue(CssKind.COLOR, text=digits, color=color)
        case ComponentValue(component=component) if component.type_name in ("rgb", "rgba"):
            color = _rgb_call(component.type_name, component.parameters)
            if color is None:
                return _UNKNOWN
            return CssValue(CssKind.COLOR, color=color)
    return _UNKNOWN


def interpret_css_values(value: Value) -> list[CssValue]:
    """A multi-valued style property (`1px solid yellow`) as separate entries."""
    if isinstance(value, ArrayValue):
        return [interpret_css_value(item) for item in value.items]
    return [interpret_css_value(value)]


def _rgb_call(name: str, parameters: Parameters) -> Rgba | None:
    if not isinstance(parameters, PositionalParameters):
        return None
    expected = 4 if name == "rgba" else 3
    if len(parameters.values) != expected:
        return None

    channels: list[int] = []
    for item in parameters.values:
        if not isinstance(item, NumberValue) or not isinstance(item.value, int):
            return None
        if not 0 <= item.value <= 255:
            return None
        channels.append(item.value)
    if expected == 3:
        channels.append(255)
    return (channels[0], channels[1], channels[2], channels[3])
