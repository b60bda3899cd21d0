import pytest

from skuipy.ast import (
    ColorValue,
    CssKind,
    CssValue,
    DimensionValue,
    IdentValue,
    NumberValue,
    StringValue,
    Value,
    interpret_css_value,
    interpret_css_values,
    parse_hex_color,
)
from skuipy.parser import ParserOptions, parse


def style_value(source: str, key: str) -> Value:
    parsed = parse(source, options=ParserOptions(allow_stylesheet_only=True))
    assert parsed.diagnostics == []
    assert parsed.document is not None
    for prop in parsed.document.styles[0].properties:
        if prop.key == key:
            return prop.value
    raise AssertionError(f"no property {key!r}")


@pytest.mark.parametrize(
    ("digits", "rgba"),
    [
        ("f00", (255, 0, 0, 255)),
        ("f008", (255, 0, 0, 136)),
        ("00ff00", (0, 255, 0, 255)),
        ("0000ff80", (0, 0, 255, 128)),
        ("12345", None),
        ("zzz", None),
    ],
)
def test_parse_hex_color(digits: str, rgba: tuple[int, int, int, int] | None) -> None:
    assert parse_hex_color(digits) == rgba


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (IdentValue("auto"), CssValue(CssKind.KEYWORD, text="auto")),
        (IdentValue("solid"), CssValue(CssKind.IDENT, text="solid")),
        (StringValue("Arial"), CssValue(CssKind.STRING, text="Arial")),
        (NumberValue(2), CssValue(CssKind.NUMBER, number=2.0)),
        (DimensionValue(10, "px"), CssValue(CssKind.PX, number=10.0)),
        (DimensionValue(50, "%"), CssValue(CssKind.PERCENT, number=50.0)),
        (ColorValue("ff0000"), CssValue(CssKind.COLOR, text="ff0000", color=(255, 0, 0, 255))),
    ],
)
def test_interpret_scalar_values(value: Value, expected: CssValue) -> None:
    assert interpret_css_value(value) == expected


def test_unsupported_units_are_unknown() -> None:
    assert interpret_css_value(DimensionValue(1.5, "em")).is_unknown


def test_rgb_calls() -> None:
    source = ".a { c1: rgb(255, 0, 10); c2: rgba(1, 2, 3, 4); bad: rgb(256, 0, 0); short: rgb(1, 2) }"

    assert interpret_css_value(style_value(source, "c1")).color == (255, 0, 10, 255)
    assert interpret_css_value(style_value(source, "c2")).color == (1, 2, 3, 4)
    assert interpret_css_value(style_value(source, "bad")).is_unknown
    assert interpret_css_value(style_value(source, "short")).is_unknown


def test_named_rgb_parameters_are_unknown() -> None:
    source = ".a { c: rgb(r: 1, g: 2, b: 3) }"

    assert interpret_css_value(style_value(source, "c")).is_unknown


def test_multi_valued_property() -> None:
    source = "#list { border: 1px solid #ff0 }"
    kinds = [entry.kind for entry in interpret_css_values(style_value(source, "border"))]

    assert kinds == [CssKind.PX, CssKind.IDENT, CssKind.COLOR]


def test_single_value_is_one_entry() -> None:
    assert interpret_css_values(NumberValue(1)) == [CssValue(CssKind.NUMBER, number=1.0)]
