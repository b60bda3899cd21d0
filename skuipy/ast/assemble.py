"""Partition parsed top-level declarations into a `Document`."""

from collections.abc import Iterable

from skuipy.ast.model import Component, ComponentDefinition, Declaration, Document, StyleRule


def assemble_document(declarations: Iterable[Declaration]) -> Document:
    """Split declarations by kind, keeping source order within each kind.

    Style rules are not deduplicated and no defaults are filled in.
    """
    components: list[Component] = []
    definitions: list[ComponentDefinition] = []
    styles: list[StyleRule] = []
    for declaration in declarations:
        match declaration:
            case Component():
                components.append(declaration)
            case ComponentDefinition():
                definitions.append(declaration)
            case StyleRule():
                styles.append(declaration)

    return Document(
        components=tuple(components),
        definitions=tuple(definitions),
        styles=tuple(styles),
    )
