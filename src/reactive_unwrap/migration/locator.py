"""
ReferenceLocator: find destructuring references to named bindings.

Classifying which bindings are reactive inputs belongs to the caller; the
locator only finds name tokens of destructuring elements whose extracted key
matches one of the given names.
"""

from typing import Iterable, List, Optional

from tree_sitter import Node

from reactive_unwrap.logging_config import logger
from reactive_unwrap.parser import SourceFile
from .binding_elements import Reference, binding_element_of

# Tokens that can name the key extracted by a destructuring element.
KEY_TOKEN_TYPES = frozenset({
    "identifier",
    "shorthand_property_identifier_pattern",
    "property_identifier",
    "string",
})


def _key_text(source: SourceFile, node: Node) -> str:
    text = source.text_of(node)
    if node.type == "string":
        return text[1:-1]
    return text


def find_binding_element_references(
    source: SourceFile,
    names: Iterable[str],
    object_patterns_only: bool = False,
) -> List[Reference]:
    """
    Locate references to ``names`` inside destructuring elements.

    For an element with an explicit key (``{myInput: alias}``) the key token
    is the reference; otherwise the exposed name is. Results are in source
    order with at most one reference per element.

    Args:
        source: Parsed file
        names: Binding names to look for
        object_patterns_only: Skip elements of array patterns

    Returns:
        References in document order
    """
    wanted = set(names)
    references: List[Reference] = []
    seen_elements = set()

    for node in source.walk():
        if node.type not in KEY_TOKEN_TYPES:
            continue
        element = binding_element_of(source, node)
        if element is None:
            continue
        if object_patterns_only and not element.in_object_pattern:
            continue

        key: Optional[Node] = element.property_name if element.property_name is not None else element.name
        if key != node:
            continue
        if _key_text(source, node) not in wanted:
            continue

        # String keys are not identifiers; the exposed name stands in for them.
        reference_node = node
        if node.type == "string":
            if element.name.type != "identifier":
                continue
            reference_node = element.name

        span = (element.node.start_byte, element.node.end_byte)
        if span in seen_elements:
            continue
        seen_elements.add(span)
        references.append(Reference(node=reference_node, element=element))

    logger.debug(f"Located {len(references)} destructuring reference(s) in {source.file_path}")
    return references
