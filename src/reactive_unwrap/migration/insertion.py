"""
Insertion point resolution for unwrap statements.

Given the declaration that owns a destructuring pattern, decide where a
statement such as ``const myInput = myInput_1();`` can legally go and
compute the text edits (offsets and indentation) that place it there.

Indentation is always copied from an existing, already indented anchor
node: the declaration list, the first statement of a block, or the
statement enclosing an arrow function.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from tree_sitter import Node

from reactive_unwrap.config import MIGRATION_CONFIG
from reactive_unwrap.logging_config import logger
from reactive_unwrap.schemas import Replacement, TextUpdate
from .binding_elements import EnclosingDeclaration

DECLARATION_LIST_TYPES = frozenset({"lexical_declaration", "variable_declaration"})

# Function-like nodes whose ``body`` field may hold a statement block.
BLOCK_FUNCTION_TYPES = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "method_definition",
    "arrow_function",
})

DECLARATION_STATEMENT_TYPES = frozenset({
    "lexical_declaration",
    "variable_declaration",
    "function_declaration",
    "generator_function_declaration",
    "class_declaration",
    "abstract_class_declaration",
    "interface_declaration",
    "enum_declaration",
    "type_alias_declaration",
    "ambient_declaration",
    "internal_module",
    "module",
})


@dataclass(frozen=True, eq=False)
class ListDeclaration:
    """Declarator inside a ``const``/``let``/``var`` statement."""
    declaration_list: Node
    statement: Node


@dataclass(frozen=True, eq=False)
class BlockParameter:
    """Parameter (or caught exception) of something with a block body."""
    block: Node


@dataclass(frozen=True, eq=False)
class BodylessParameter:
    """Parameter of an arrow function whose body is a single expression."""
    function: Node
    body: Node


@dataclass(frozen=True)
class Unsupported:
    reason: str


InsertionContext = Union[ListDeclaration, BlockParameter, BodylessParameter, Unsupported]


def context_name(context: InsertionContext) -> str:
    if isinstance(context, ListDeclaration):
        return "list-declaration"
    if isinstance(context, BlockParameter):
        return "block-parameter"
    if isinstance(context, BodylessParameter):
        return "bodyless-parameter"
    return "unsupported"


def _is_setter(node: Node) -> bool:
    return node.type == "method_definition" and any(child.type == "set" for child in node.children)


def body_block_of(node: Node) -> Optional[Node]:
    """Gets the body block of a given node, if available."""
    if node.type in BLOCK_FUNCTION_TYPES and not _is_setter(node):
        body = node.child_by_field_name("body")
        if body is not None and body.type == "statement_block":
            return body
    if node.type == "catch_clause":
        return node.child_by_field_name("body")
    if node.parent is not None and node.parent.type == "catch_clause":
        return node.parent.child_by_field_name("body")
    return None


def is_statement(node: Node) -> bool:
    if node.type == "statement_block":
        return False
    return node.type.endswith("_statement") or node.type in DECLARATION_STATEMENT_TYPES


def nearest_statement(node: Node) -> Optional[Node]:
    current = node
    while current is not None and not is_statement(current):
        current = current.parent
    if current is not None and current.parent is not None and current.parent.type == "export_statement":
        return current.parent
    return current


def first_statement(block: Node) -> Optional[Node]:
    for child in block.named_children:
        if child.type != "comment":
            return child
    return None


def _lines(leading_space: str, snippets: List[str]) -> str:
    return "".join(f"\n{leading_space}{snippet}" for snippet in snippets)


def classify(declaration: EnclosingDeclaration) -> InsertionContext:
    """Sort a declaration into exactly one insertion context."""
    if declaration.kind == "variable":
        declaration_list = declaration.parent
        if declaration_list is None or declaration_list.type not in DECLARATION_LIST_TYPES:
            return Unsupported("variable declarator outside of a declaration list")
        statement = declaration_list
        owner = declaration_list.parent
        if owner is not None and owner.type == "for_statement":
            return Unsupported("declaration list in a for-loop header")
        if owner is not None and owner.type == "export_statement":
            statement = owner
        return ListDeclaration(declaration_list=declaration_list, statement=statement)

    if declaration.kind == "catch":
        block = body_block_of(declaration.node)
        if block is None:
            return Unsupported("catch clause without a block")
        return BlockParameter(block=block)

    if declaration.kind == "parameter":
        parameters = declaration.parent
        function = parameters.parent if parameters is not None else None
        if function is None:
            return Unsupported("parameter without an owning function")

        block = body_block_of(function)
        if block is not None:
            return BlockParameter(block=block)

        if function.type == "arrow_function":
            body = function.child_by_field_name("body")
            if body is not None and body.type != "statement_block":
                return BodylessParameter(function=function, body=body)

        return Unsupported(f"parameter of '{function.type}' without a usable body")

    return Unsupported(f"pattern owned by '{declaration.node.type}'")


def insert_temporary_variable(
    declaration: EnclosingDeclaration,
    file_path: str,
    to_insert: Union[str, Sequence[str]],
    config: Optional[dict] = None,
) -> Optional[List[Replacement]]:
    """
    Inserts the given code snippet after the given variable or
    parameter declaration.

    ``to_insert`` may also be a sequence of snippets; they are placed one
    per line, in order, at the same location. If this is a parameter of an
    arrow function without a block, a block is added. Returns None if no
    valid location exists.
    """
    snippets = [to_insert] if isinstance(to_insert, str) else list(to_insert)
    config = {**MIGRATION_CONFIG, **(config or {})}
    source = declaration.source
    context = classify(declaration)
    logger.debug(f"Insertion context for line {declaration.node.start_point[0] + 1}: {context_name(context)}")

    # The snippet goes after the whole statement so co-declared
    # bindings are not affected.
    if isinstance(context, ListDeclaration):
        leading_space = " " * source.column(context.declaration_list)
        position = source.end(context.statement)
        return [
            Replacement(
                file_path=file_path,
                update=TextUpdate(position=position, end=position, to_insert=_lines(leading_space, snippets)),
            ),
        ]

    # New first statement of the block.
    if isinstance(context, BlockParameter):
        first = first_statement(context.block)
        if first is not None:
            leading_space_count = source.column(first)
        else:
            leading_space_count = source.column(context.block) + config["block_indent_offset"]
        leading_space = " " * leading_space_count
        position = source.start(context.block) + 1
        return [
            Replacement(
                file_path=file_path,
                update=TextUpdate(position=position, end=position, to_insert=_lines(leading_space, snippets)),
            ),
        ]

    # Arrow function without a block: create one.
    if isinstance(context, BodylessParameter):
        spacing_node = nearest_statement(context.function) or context.function
        column = source.column(spacing_node)
        block_space = " " * column
        content_space = " " * (column + config["content_indent_offset"])
        body_start = source.start(context.body)
        body_end = source.end(context.body)
        body_text = source.text_of(context.body)
        return [
            Replacement(
                file_path=file_path,
                update=TextUpdate(
                    position=body_start,
                    end=body_end,
                    to_insert=f"{{{_lines(content_space, snippets)}\n{content_space}return {body_text};",
                ),
            ),
            Replacement(
                file_path=file_path,
                update=TextUpdate(position=body_end, end=body_end, to_insert=f"\n{block_space}}}"),
            ),
        ]

    if isinstance(context, Unsupported):
        logger.debug(f"No insertion point: {context.reason}")
        return None

    raise TypeError(f"Unknown insertion context: {context!r}")
