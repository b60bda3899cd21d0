"""Tree walks that carry ancestor context explicitly."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from skuipy.ast.model import (
    ArrayValue,
    Component,
    ComponentDefinition,
    ComponentValue,
    Document,
    MapValue,
    RelativeValue,
    Value,
    parameter_values,
)


@dataclass(frozen=True, slots=True)
class ComponentVisit:
    """A component reached during a walk.

    `ancestors` runs from the top-level component down to the direct parent.
    `owner` is the top-level declaration the component belongs to.
    """

    component: Component
    ancestors: tuple[Component, ...]
    owner: Component | ComponentDefinition
    in_value: bool = False

    @property
    def parent(self) -> Component | None:
        return self.ancestors[-1] if self.ancestors else None

    @property
    def is_top_level(self) -> bool:
        return not self.ancestors


def walk_components(document: Document) -> Iterator[ComponentVisit]:
    """Yield every component of the document's trees and definitions, pre-order.

    Components nested in parameter or property values are visited with the
    component holding the value as their parent.
    """
    for component in document.components:
        yield from walk_tree(component, owner=component)
    for definition in document.definitions:
        yield from walk_tree(definition.component, owner=definition)


def walk_tree(
    component: Component,
    *,
    owner: Component | ComponentDefinition,
    ancestors: tuple[Component, ...] = (),
    in_value: bool = False,
) -> Iterator[ComponentVisit]:
    yield ComponentVisit(component, ancestors, owner, in_value)
    path = (*ancestors, component)
    for value in component_values(component):
        if isinstance(value, ComponentValue):
            yield from walk_tree(value.component, owner=owner, ancestors=path, in_value=True)
    for child in component.children:
        yield from walk_tree(child, owner=owner, ancestors=path)


def component_values(component: Component) -> Iterator[Value]:
    """Parameter and property values of one component, arrays and maps flattened.

    Nested component values are yielded but not entered.
    """
    for value in parameter_values(component.parameters):
        yield from iter_values(value)
    for prop in component.properties:
        yield from iter_values(prop.value)


def iter_values(value: Value) -> Iterator[Value]:
    yield value
    match value:
        case ArrayValue(items=items):
            for item in items:
                yield from iter_values(item)
        case MapValue(entries=entries):
            for _, item in entries:
                yield from iter_values(item)


def iter_relatives(component: Component) -> Iterator[RelativeValue]:
    for value in component_values(component):
        if isinstance(value, RelativeValue):
            yield value
