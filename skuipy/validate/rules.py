"""Validation rules and rule contracts."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from skuipy.ast import (
    Component,
    ComponentDefinition,
    ComponentValue,
    ComponentVisit,
    Document,
    MixedParameters,
    RelativeValue,
    StyleRule,
    iter_relatives,
    iter_values,
    walk_components,
    walk_tree,
)
from skuipy.diagnostics import (
    VALIDATION_ID_NOT_ALLOWED,
    VALIDATION_MIXED_PARAMETER_SHAPE,
    VALIDATION_MIXED_RELATIVE_KEY,
    VALIDATION_ROOT_CARDINALITY,
    Diagnostic,
)
from skuipy.parser.options import ParserOptions
from skuipy.text import ZERO, TextRange


class ValidationRule(Protocol):
    """Structural check over an assembled document. Never mutates it."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    def run(self, document: Document, options: ParserOptions) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class RootCardinalityRule:
    """Exactly one top-level instantiation may lack an id: the root."""

    code: str = VALIDATION_ROOT_CARDINALITY.code
    name: str = "rootCardinality"
    category: str = "validation"

    def run(self, document: Document, options: ParserOptions) -> list[Diagnostic]:
        candidates = document.root_candidates
        if len(candidates) == 1:
            return []

        if not candidates:
            if not document.components:
                if options.allow_stylesheet_only:
                    return []
                return [
                    VALIDATION_ROOT_CARDINALITY.at(
                        TextRange.empty(ZERO),
                        message="Document has no root component.",
                    )
                ]
            first = document.components[0]
            return [
                VALIDATION_ROOT_CARDINALITY.at(
                    first.range,
                    message=(
                        "Document has no root component: every top-level component carries an id "
                        f"(first is `{first.type_name}#{first.id}`)."
                    ),
                )
            ]

        root = candidates[0]
        return [
            VALIDATION_ROOT_CARDINALITY.at(
                extra.range,
                message=(
                    f"Document has {len(candidates)} root components; "
                    f"`{extra.type_name}` competes with `{root.type_name}`."
                ),
            )
            for extra in candidates[1:]
        ]


@dataclass(frozen=True, slots=True)
class IdScopeRule:
    """Ids are allowed on descendants of the root and of definitions.

    Top-level components, the root included, may not carry one, and neither
    may the component a definition declares.
    """

    code: str = VALIDATION_ID_NOT_ALLOWED.code
    name: str = "idScope"
    category: str = "validation"

    def run(self, document: Document, options: ParserOptions) -> list[Diagnostic]:
        root = document.root
        diagnostics: list[Diagnostic] = []
        for visit in walk_components(document):
            component_id = visit.component.id
            if component_id is None or _id_allowed(visit, root):
                continue
            diagnostics.append(
                VALIDATION_ID_NOT_ALLOWED.at(
                    visit.component.range,
                    message=_id_scope_message(visit, component_id, root),
                )
            )
        return diagnostics


def _id_allowed(visit: ComponentVisit, root: Component | None) -> bool:
    if visit.is_top_level:
        return False
    if isinstance(visit.owner, ComponentDefinition):
        return True
    return root is not None and visit.owner is root


def _id_scope_message(visit: ComponentVisit, component_id: str, root: Component | None) -> str:
    type_name = visit.component.type_name
    if isinstance(visit.owner, ComponentDefinition):
        return (
            f"Id `#{component_id}` is not allowed on `{type_name}`, the component definition "
            f"`{visit.owner.name}` declares; place it on a descendant instead."
        )
    if visit.is_top_level:
        return f"Id `#{component_id}` is not allowed on top-level component `{type_name}`; it has no parent."
    if root is None:
        return f"Id `#{component_id}` on `{type_name}` cannot be placed: the document has no single root."
    return f"Id `#{component_id}` on `{type_name}` is outside the root component `{root.type_name}`."


@dataclass(frozen=True, slots=True)
class ParameterShapeRule:
    """A parameter list is fully positional or fully named."""

    code: str = VALIDATION_MIXED_PARAMETER_SHAPE.code
    name: str = "parameterShape"
    category: str = "validation"

    def run(self, document: Document, options: ParserOptions) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for visit in (*walk_components(document), *_walk_style_components(document)):
            parameters = visit.component.parameters
            if not isinstance(parameters, MixedParameters):
                continue
            named = next(name for name, _ in parameters.entries if name is not None)
            positional_index = next(
                index for index, (name, _) in enumerate(parameters.entries) if name is None
            )
            diagnostics.append(
                VALIDATION_MIXED_PARAMETER_SHAPE.at(
                    parameters.range,
                    message=(
                        f"`{visit.component.type_name}` mixes named parameter `{named}` "
                        f"with positional entry {positional_index}."
                    ),
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class RelativeKeyRule:
    """Relative references in one scope use one key kind.

    The top-level components form one sibling scope. Each definition and
    each style rule is a scope of its own. Only the first key of each
    reference is compared.
    """

    code: str = VALIDATION_MIXED_RELATIVE_KEY.code
    name: str = "relativeKey"
    category: str = "validation"

    def run(self, document: Document, options: ParserOptions) -> list[Diagnostic]:
        diagnostics = self._check_scope(
            relative
            for component in document.components
            for relative in _tree_relatives(component, owner=component)
        )
        for definition in document.definitions:
            diagnostics.extend(self._check_scope(_tree_relatives(definition.component, owner=definition)))
        for style in document.styles:
            diagnostics.extend(self._check_scope(_style_relatives(style)))
        return diagnostics

    def _check_scope(self, relatives: Iterator[RelativeValue]) -> list[Diagnostic]:
        first: RelativeValue | None = None
        diagnostics: list[Diagnostic] = []
        for relative in relatives:
            if first is None:
                first = relative
                continue
            if relative.is_positional == first.is_positional:
                continue
            diagnostics.append(
                VALIDATION_MIXED_RELATIVE_KEY.at(
                    relative.range,
                    message=(
                        f"Relative reference `{relative.display()}` uses a {_key_kind(relative)} key "
                        f"but `{first.display()}` uses a {_key_kind(first)} key in the same scope."
                    ),
                )
            )
        return diagnostics


def _key_kind(relative: RelativeValue) -> str:
    return "positional" if relative.is_positional else "named"


def _tree_relatives(
    component: Component,
    *,
    owner: Component | ComponentDefinition,
) -> Iterator[RelativeValue]:
    for visit in walk_tree(component, owner=owner):
        yield from iter_relatives(visit.component)


def _style_relatives(style: StyleRule) -> Iterator[RelativeValue]:
    for prop in style.properties:
        for value in iter_values(prop.value):
            if isinstance(value, RelativeValue):
                yield value
            elif isinstance(value, ComponentValue):
                yield from _tree_relatives(value.component, owner=value.component)


def _walk_style_components(document: Document) -> Iterator[ComponentVisit]:
    for style in document.styles:
        for prop in style.properties:
            for value in iter_values(prop.value):
                if isinstance(value, ComponentValue):
                    yield from walk_tree(value.component, owner=value.component)


def default_validation_rules() -> tuple[ValidationRule, ...]:
    rules: list[ValidationRule] = [
        RootCardinalityRule(),
        IdScopeRule(),
        ParameterShapeRule(),
        RelativeKeyRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_validation_rules(rules: tuple[ValidationRule, ...]) -> None:
    for rule in rules:
        if not rule.code.startswith("VALIDATION_"):
            raise ValueError(
                f"Validation rule `{rule.name}` has invalid code `{rule.code}`; expected `VALIDATION_` prefix."
            )
