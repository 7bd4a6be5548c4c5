"""
Migrates references to reactive inputs captured by destructuring patterns.

E.g. ``const {myInput} = this``.

For references in binding elements, the element is rewritten to expose
the wrapped value under a temporary name, and a statement unwrapping it
into a variable with the original name is inserted. Narrowing then works
naturally in subsequent code and potential aliases need no tracking.

    const {myInput} = this;
    // turns into
    const {myInput: myInput_1} = this;
    const myInput = myInput_1();
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from tree_sitter import Node

from reactive_unwrap.exceptions import PreconditionError
from reactive_unwrap.logging_config import logger
from reactive_unwrap.schemas import Replacement, SkippedReference, TextUpdate
from .binding_elements import DestructuringElement, Reference, declaration_of, is_pattern
from .insertion import BodylessParameter, classify, insert_temporary_variable
from .printer import BindingElement
from .result import MigrationResult
from .unique_names import UniqueNameGenerator

OVERLAP_REASON = "overlaps an earlier edit"


def project_relative_path(file_path: Union[str, Path], project_root: Union[str, Path]) -> str:
    """POSIX path of ``file_path`` relative to ``project_root``."""
    relative = os.path.relpath(os.path.abspath(file_path), os.path.abspath(project_root))
    return Path(relative).as_posix()


def input_field_name_of(element: DestructuringElement):
    """
    The key being extracted: the explicit property name, else the exposed name.

    Raises:
        PreconditionError: If that key is a nested pattern.
    """
    input_field_name = element.property_name if element.property_name is not None else element.name
    if is_pattern(input_field_name):
        source = element.source
        raise PreconditionError(
            "Property of binding element cannot be another pattern.",
            file_path=source.file_path,
            position=source.start(input_field_name),
        )
    return input_field_name


def rewrite_element(reference: Reference, temporary_name: str, input_field_name: Node) -> BindingElement:
    """
    Build the rewritten element exposing ``temporary_name``.

    The exposed-name slot always takes the temporary. The property-name
    slot depends on where the element sits:

    - object pattern, unaliased (``{a}``): the original identifier becomes
      the property name (``{a: a_1}``);
    - object pattern, aliased or literal key (``{a: b}``, ``{'a': b}``): the
      existing key stays (``{a: a_1}``, ``{'a': b_1}``);
    - array pattern (``[a]``) or rest element (``...a``): there is no
      property name (``[a_1]``).
    """
    element = reference.element
    source = element.source

    if element.property_name is not None:
        property_name = source.text_of(element.property_name)
    elif element.in_object_pattern and not element.rest:
        property_name = source.text_of(input_field_name)
    else:
        property_name = None

    initializer = source.text_of(element.initializer) if element.initializer is not None else None
    return BindingElement(
        name=temporary_name,
        property_name=property_name,
        rest=element.rest,
        initializer=initializer,
    )


def _overlaps(first: Replacement, second: Replacement) -> bool:
    """True if one edit would land inside the span the other replaces."""
    return (
        first.file_path == second.file_path
        and first.update.position < second.update.end
        and second.update.position < first.update.end
    )


def _skip(reference: Reference, file_path: str, reason: str) -> SkippedReference:
    logger.error(f"Could not migrate reference {reference.text} in {file_path}")
    return SkippedReference(file_path=file_path, name=reference.text, line=reference.line, reason=reason)


def migrate_binding_element_references(
    references: Iterable[Reference],
    project_root: Union[str, Path],
    name_generator: UniqueNameGenerator,
    result: MigrationResult,
    config: Optional[dict] = None,
) -> List[SkippedReference]:
    """
    Migrate every reference, in iteration order, appending edits to ``result``.

    References without a valid insertion point are logged and skipped; their
    element is left untouched. So are references whose edits would overlap
    an edit already collected, e.g. an element nested inside an element
    that is being rewritten. Parameters of the same expression-bodied arrow
    function share one synthesized block holding all their unwrap
    statements. The skipped references are returned.

    Raises:
        PreconditionError: If a reference's property name is itself a
            nested pattern.
    """
    skipped: List[SkippedReference] = []
    # (file, function span) -> (index of the block-opening edit, unwrap statements)
    arrow_blocks: Dict[Tuple[str, int, int], Tuple[int, List[str]]] = {}

    for reference in references:
        element: DestructuringElement = reference.element
        source = element.source
        declaration = declaration_of(element)
        file_path = project_relative_path(source.file_path, project_root)
        input_field_name = input_field_name_of(element)

        element_span = Replacement(
            file_path=file_path,
            update=TextUpdate(position=element.start, end=element.end, to_insert=""),
        )
        if any(_overlaps(element_span, existing) for existing in result.replacements):
            skipped.append(_skip(reference, file_path, OVERLAP_REASON))
            continue

        temporary_name = name_generator.generate(reference.text, element.node, source)
        new_binding = rewrite_element(reference, temporary_name, input_field_name)
        element_replacement = Replacement(
            file_path=file_path,
            update=TextUpdate(
                position=element.start,
                end=element.end,
                to_insert=result.printer.render(new_binding, source),
            ),
        )
        unwrap_statement = f"const {source.text_of(element.name)} = {temporary_name}();"

        context = classify(declaration)
        block_key = None
        if isinstance(context, BodylessParameter):
            block_key = (file_path, source.start(context.function), source.end(context.function))

        if block_key in arrow_blocks:
            index, statements = arrow_blocks[block_key]
            statements.append(unwrap_statement)
            opening, _ = insert_temporary_variable(declaration, file_path, statements, config=config)
            result.replacements[index] = opening
            result.replacements.append(element_replacement)
            logger.debug(f"Migrated reference {reference.text} in {file_path} as '{temporary_name}'")
            continue

        replacements = insert_temporary_variable(declaration, file_path, unwrap_statement, config=config)
        if replacements is None:
            skipped.append(_skip(reference, file_path, getattr(context, "reason", "unsupported")))
            continue
        if any(_overlaps(new, existing) for new in replacements for existing in result.replacements):
            skipped.append(_skip(reference, file_path, OVERLAP_REASON))
            continue

        if block_key is not None:
            arrow_blocks[block_key] = (len(result.replacements) + 1, [unwrap_statement])
        result.replacements.extend([element_replacement, *replacements])
        logger.debug(f"Migrated reference {reference.text} in {file_path} as '{temporary_name}'")

    return skipped
