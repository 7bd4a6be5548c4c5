"""
Binding element model over the tree-sitter TypeScript syntax tree.

A destructuring element is one entry of an object or array pattern, e.g.
``myInput`` in ``const {myInput} = this``. The types here give that entry
the shape the rewriter works with: an optional property name, the exposed
name, a rest marker and an optional initializer.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from tree_sitter import Node

from reactive_unwrap.parser import SourceFile

PATTERN_TYPES = frozenset({"object_pattern", "array_pattern"})

# Nodes that may sit between a destructuring element and its declaration.
PATTERN_WRAPPER_TYPES = PATTERN_TYPES | {
    "pair_pattern",
    "object_assignment_pattern",
    "assignment_pattern",
    "rest_pattern",
}

PARAMETER_TYPES = frozenset({"required_parameter", "optional_parameter"})

DeclarationKind = Literal["variable", "parameter", "catch", "other"]


@dataclass(frozen=True, eq=False)
class DestructuringElement:
    """One binding position inside an object or array pattern."""

    source: SourceFile
    node: Node
    pattern: Node
    name: Node
    property_name: Optional[Node] = None
    rest: bool = False
    initializer: Optional[Node] = None

    @property
    def in_object_pattern(self) -> bool:
        return self.pattern.type == "object_pattern"

    @property
    def start(self) -> int:
        return self.source.start(self.node)

    @property
    def end(self) -> int:
        return self.source.end(self.node)


@dataclass(frozen=True, eq=False)
class Reference:
    """An identifier token inside a destructuring element."""

    node: Node
    element: DestructuringElement

    @property
    def source(self) -> SourceFile:
        return self.element.source

    @property
    def text(self) -> str:
        return self.source.text_of(self.node)

    @property
    def line(self) -> int:
        return self.node.start_point[0] + 1


@dataclass(frozen=True, eq=False)
class EnclosingDeclaration:
    """
    The declaration owning a destructuring pattern.

    ``node`` is a ``variable_declarator``, a parameter, or the
    ``catch_clause`` itself for a caught-exception pattern. Any other owner
    (a ``for ... of`` header, an assignment expression) is kept with kind
    ``"other"`` so that it can be classified as unsupported.
    """

    source: SourceFile
    node: Node
    kind: DeclarationKind

    @property
    def parent(self) -> Optional[Node]:
        return self.node.parent


def is_pattern(node: Optional[Node]) -> bool:
    return node is not None and node.type in PATTERN_TYPES


def binding_element_of(source: SourceFile, node: Node) -> Optional[DestructuringElement]:
    """
    Return the destructuring element a name token belongs to, or None if
    the token is not a direct part of one.
    """
    parent = node.parent
    if parent is None:
        return None

    if node.type == "shorthand_property_identifier_pattern":
        if parent.type == "object_pattern":
            return _build_element(source, node)
        if parent.type == "object_assignment_pattern" and parent.child_by_field_name("left") == node:
            return _build_element(source, parent)
        return None

    if parent.type == "pair_pattern":
        return _build_element(source, parent)

    if parent.type == "assignment_pattern" and parent.child_by_field_name("left") == node:
        owner = parent.parent
        if owner is not None and owner.type == "pair_pattern":
            return _build_element(source, owner)
        if owner is not None and owner.type == "array_pattern":
            return _build_element(source, parent)
        return None

    if parent.type == "rest_pattern":
        if is_pattern(parent.parent):
            return _build_element(source, parent)
        return None

    if parent.type == "array_pattern" and node.type == "identifier":
        return _build_element(source, node)

    return None


def _build_element(source: SourceFile, node: Node) -> DestructuringElement:
    pattern = node.parent

    if node.type == "pair_pattern":
        value = node.child_by_field_name("value")
        if value.type == "assignment_pattern":
            return DestructuringElement(
                source=source,
                node=node,
                pattern=pattern,
                property_name=node.child_by_field_name("key"),
                name=value.child_by_field_name("left"),
                initializer=value.child_by_field_name("right"),
            )
        return DestructuringElement(
            source=source,
            node=node,
            pattern=pattern,
            property_name=node.child_by_field_name("key"),
            name=value,
        )

    if node.type in ("object_assignment_pattern", "assignment_pattern"):
        return DestructuringElement(
            source=source,
            node=node,
            pattern=pattern,
            name=node.child_by_field_name("left"),
            initializer=node.child_by_field_name("right"),
        )

    if node.type == "rest_pattern":
        return DestructuringElement(
            source=source,
            node=node,
            pattern=pattern,
            name=node.named_children[0],
            rest=True,
        )

    return DestructuringElement(source=source, node=node, pattern=pattern, name=node)


def declaration_of(element: DestructuringElement) -> EnclosingDeclaration:
    """Walk up through nested patterns to the declaration owning ``element``."""
    owner = element.pattern
    while owner.parent is not None and owner.type in PATTERN_WRAPPER_TYPES:
        owner = owner.parent

    if owner.type == "variable_declarator":
        kind = "variable"
    elif owner.type in PARAMETER_TYPES:
        kind = "parameter"
    elif owner.type == "catch_clause":
        kind = "catch"
    else:
        kind = "other"

    return EnclosingDeclaration(source=element.source, node=owner, kind=kind)
