"""Document model, assembly and walks."""

from skuipy.ast.assemble import assemble_document
from skuipy.ast.css import (
    CSS_KEYWORDS,
    CssKind,
    CssValue,
    interpret_css_value,
    interpret_css_values,
    parse_hex_color,
)
from skuipy.ast.model import (
    NO_RANGE,
    ArrayValue,
    BoolValue,
    ClassSelector,
    ClosureValue,
    ColorValue,
    Component,
    ComponentDefinition,
    ComponentValue,
    Declaration,
    DimensionValue,
    Document,
    IdentValue,
    IdSelector,
    IndexKey,
    MapValue,
    MixedParameters,
    NamedParameters,
    NameKey,
    NumberValue,
    Parameters,
    PositionalParameters,
    Property,
    RelativeValue,
    Selectors,
    StringValue,
    StyleRule,
    StyleSelector,
    TypeSelector,
    Value,
    ValueKey,
    parameter_values,
)
from skuipy.ast.walk import (
    ComponentVisit,
    component_values,
    iter_relatives,
    iter_values,
    walk_components,
    walk_tree,
)

__all__ = [
    "CSS_KEYWORDS",
    "NO_RANGE",
    "ArrayValue",
    "BoolValue",
    "ClassSelector",
    "ClosureValue",
    "ColorValue",
    "Component",
    "ComponentDefinition",
    "ComponentValue",
    "ComponentVisit",
    "CssKind",
    "CssValue",
    "Declaration",
    "DimensionValue",
    "Document",
    "IdSelector",
    "IdentValue",
    "IndexKey",
    "MapValue",
    "MixedParameters",
    "NameKey",
    "NamedParameters",
    "NumberValue",
    "Parameters",
    "PositionalParameters",
    "Property",
    "RelativeValue",
    "Selectors",
    "StringValue",
    "StyleRule",
    "StyleSelector",
    "TypeSelector",
    "Value",
    "ValueKey",
    "assemble_document",
    "component_values",
    "interpret_css_value",
    "interpret_css_values",
    "iter_relatives",
    "iter_values",
    "parameter_values",
    "parse_hex_color",
    "walk_components",
    "walk_tree",
]
