"""Document model produced by the parser.

Every node is a frozen dataclass. Source ranges are carried for diagnostics
but excluded from equality, so two documents that differ only in layout
compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from skuipy.text import ZERO, TextRange

NO_RANGE: Final[TextRange] = TextRange.empty(ZERO)


def _range() -> TextRange:
    return field(default=NO_RANGE, compare=False)


# -------------------------
# Values
# -------------------------


@dataclass(frozen=True, slots=True)
class IdentValue:
    """Bare identifier used as a value, e.g. an enum-like tag `MainFill`."""

    name: str
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class NumberValue:
    """Integer or floating number. `1` and `1.0` stay distinct."""

    value: int | float
    range: TextRange = _range()

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberValue):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))


@dataclass(frozen=True, slots=True)
class StringValue:
    """Quoted text with escapes decoded."""

    value: str
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class DimensionValue:
    """Number with a unit suffix: `10px`, `1.5em`, `50%`."""

    value: int | float
    unit: str
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class ColorValue:
    """Hex color literal without the leading `#`, e.g. `ff0000`."""

    hex: str
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class ClosureValue:
    """Opaque closure source `|args| { ... }`, kept verbatim."""

    source: str
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class ArrayValue:
    items: tuple[Value, ...]
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class MapValue:
    """Ordered key/value pairs. Keys are unique."""

    entries: tuple[tuple[str, Value], ...]
    range: TextRange = _range()

    def get(self, key: str) -> Value | None:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.entries)

    def to_dict(self) -> dict[str, Value]:
        return dict(self.entries)


@dataclass(frozen=True, slots=True)
class ComponentValue:
    """A nested component instantiation used in value position."""

    component: Component
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class IndexKey:
    index: int


@dataclass(frozen=True, slots=True)
class NameKey:
    name: str


type ValueKey = IndexKey | NameKey


@dataclass(frozen=True, slots=True)
class RelativeValue:
    """Placeholder reference such as `${0}`, `${key}` or `${0.title}`.

    The keys are resolved by a consumer, never by the parser.
    """

    keys: tuple[ValueKey, ...]
    range: TextRange = _range()

    @property
    def first_key(self) -> ValueKey:
        return self.keys[0]

    @property
    def is_positional(self) -> bool:
        return isinstance(self.keys[0], IndexKey)

    def display(self) -> str:
        parts = [str(key.index) if isinstance(key, IndexKey) else key.name for key in self.keys]
        return "${" + ".".join(parts) + "}"


type Value = (
    IdentValue
    | BoolValue
    | NumberValue
    | StringValue
    | DimensionValue
    | ColorValue
    | ClosureValue
    | ArrayValue
    | MapValue
    | ComponentValue
    | RelativeValue
)


# -------------------------
# Parameters
# -------------------------


@dataclass(frozen=True, slots=True)
class PositionalParameters:
    values: tuple[Value, ...] = ()
    range: TextRange = _range()

    def get(self, key: int | str) -> Value | None:
        if isinstance(key, int) and 0 <= key < len(self.values):
            return self.values[key]
        return None

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True, slots=True)
class NamedParameters:
    entries: tuple[tuple[str, Value], ...]
    range: TextRange = _range()

    def get(self, key: int | str) -> Value | None:
        if isinstance(key, str):
            for name, value in self.entries:
                if name == key:
                    return value
        return None

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class MixedParameters:
    """Parameter list mixing `key: value` and bare entries.

    Kept as written so validation can report it. Positional lookups count
    only the unnamed entries.
    """

    entries: tuple[tuple[str | None, Value], ...]
    range: TextRange = _range()

    def get(self, key: int | str) -> Value | None:
        if isinstance(key, str):
            for name, value in self.entries:
                if name == key:
                    return value
            return None
        positional = [value for name, value in self.entries if name is None]
        if 0 <= key < len(positional):
            return positional[key]
        return None

    def __len__(self) -> int:
        return len(self.entries)


type Parameters = PositionalParameters | NamedParameters | MixedParameters


def parameter_values(parameters: Parameters) -> tuple[Value, ...]:
    """All parameter values in source order, regardless of shape."""
    match parameters:
        case PositionalParameters(values=values):
            return values
        case NamedParameters(entries=entries) | MixedParameters(entries=entries):
            return tuple(value for _, value in entries)


# -------------------------
# Components and styles
# -------------------------


@dataclass(frozen=True, slots=True)
class Selectors:
    """At most one id plus an unordered set of classes."""

    id: str | None = None
    classes: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return self.id is None and not self.classes


@dataclass(frozen=True, slots=True)
class Property:
    key: str
    value: Value
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class Component:
    """Component instantiation `Type(params) #id .class { properties children }`."""

    type_name: str
    parameters: Parameters = PositionalParameters()
    selectors: Selectors = Selectors()
    properties: tuple[Property, ...] = ()
    children: tuple[Component, ...] = ()
    range: TextRange = _range()

    @property
    def id(self) -> str | None:
        return self.selectors.id

    @property
    def classes(self) -> frozenset[str]:
        return self.selectors.classes

    def get_property(self, key: str) -> Value | None:
        """Last value written for `key`, or None."""
        found: Value | None = None
        for prop in self.properties:
            if prop.key == key:
                found = prop.value
        return found


@dataclass(frozen=True, slots=True)
class ComponentDefinition:
    """Top-level `Name : Component(...)` declaring a reusable component."""

    name: str
    component: Component
    range: TextRange = _range()


@dataclass(frozen=True, slots=True)
class TypeSelector:
    name: str


@dataclass(frozen=True, slots=True)
class IdSelector:
    name: str


@dataclass(frozen=True, slots=True)
class ClassSelector:
    name: str


type StyleSelector = TypeSelector | IdSelector | ClassSelector


@dataclass(frozen=True, slots=True)
class StyleRule:
    """`selectors { properties }`. The selector run is a compound such as `Flex .row`."""

    selectors: tuple[StyleSelector, ...]
    properties: tuple[Property, ...] = ()
    range: TextRange = _range()


type Declaration = Component | ComponentDefinition | StyleRule


@dataclass(frozen=True, slots=True)
class Document:
    """Top-level components, named definitions and style rules in source order."""

    components: tuple[Component, ...] = ()
    definitions: tuple[ComponentDefinition, ...] = ()
    styles: tuple[StyleRule, ...] = ()

    @property
    def root_candidates(self) -> tuple[Component, ...]:
        return tuple(component for component in self.components if component.id is None)

    @property
    def root(self) -> Component | None:
        candidates = self.root_candidates
        if len(candidates) == 1:
            return candidates[0]
        return None

    def definition(self, name: str) -> ComponentDefinition | None:
        for definition in self.definitions:
            if definition.name == name:
                return definition
        return None
