"""
UniqueNameGenerator: collision-free names for temporary variables.

All bookkeeping lives in a NameRegistry that the caller creates and owns.
Share one registry across a batch so two references never receive the same
temporary in overlapping scopes. The registry is not thread-safe.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from tree_sitter import Node

from reactive_unwrap.config import MIGRATION_CONFIG
from reactive_unwrap.logging_config import logger
from reactive_unwrap.parser import SourceFile

# Nodes that open a new lexical scope.
SCOPE_TYPES = frozenset({
    "program",
    "statement_block",
    "class_body",
    "catch_clause",
    "for_statement",
    "for_in_statement",
    "arrow_function",
    "function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "generator_function_declaration",
    "method_definition",
})

# Tokens whose text may name a binding, directly or through a property.
NAME_TOKEN_TYPES = frozenset({
    "identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "property_identifier",
    "type_identifier",
})

FileKey = Tuple[str, int, int]
ScopeKey = Tuple[int, int]


def scope_of(node: Node) -> Node:
    """Nearest ancestor (or the node itself) that opens a lexical scope."""
    current = node
    while current.parent is not None and current.type not in SCOPE_TYPES:
        current = current.parent
    return current


class NameRegistry:
    """Claimed names, per file and per scope span."""

    def __init__(self):
        self._claimed: Dict[FileKey, Dict[ScopeKey, Set[str]]] = {}
        self._file_names: Dict[FileKey, Set[str]] = {}

    @staticmethod
    def _file_key(source: SourceFile) -> FileKey:
        return (source.file_path, len(source.text), hash(source.text))

    def names_in_file(self, source: SourceFile) -> Set[str]:
        """Every name-like token in the file, computed once per file."""
        key = self._file_key(source)
        if key not in self._file_names:
            self._file_names[key] = {
                source.text_of(node)
                for node in source.walk()
                if node.type in NAME_TOKEN_TYPES
            }
        return self._file_names[key]

    def is_claimed(self, source: SourceFile, scope: Node, name: str) -> bool:
        """
        True if ``name`` was claimed in ``scope``, in a scope enclosing it,
        or in a scope nested inside it.
        """
        start, end = scope.start_byte, scope.end_byte
        for (claimed_start, claimed_end), names in self._claimed.get(self._file_key(source), {}).items():
            overlaps = claimed_start < end and start < claimed_end
            if overlaps and name in names:
                return True
        return False

    def claim(self, source: SourceFile, scope: Node, name: str) -> None:
        scopes = self._claimed.setdefault(self._file_key(source), {})
        scopes.setdefault((scope.start_byte, scope.end_byte), set()).add(name)


class UniqueNameGenerator:
    """
    Generate names that collide with no binding visible from an anchor node.

    A candidate is free when no token in the file already spells it and no
    overlapping scope has claimed it. Candidates are tried in order: the
    base name, ``base + suffix`` for each fallback suffix, then
    ``base_1``, ``base_2``, ...
    """

    def __init__(
        self,
        registry: Optional[NameRegistry] = None,
        fallback_suffixes: Optional[Iterable[str]] = None,
        separator: Optional[str] = None,
    ):
        self.registry = registry if registry is not None else NameRegistry()
        if fallback_suffixes is None:
            fallback_suffixes = MIGRATION_CONFIG["name_fallback_suffixes"]
        self.fallback_suffixes: List[str] = list(fallback_suffixes)
        self.separator = separator if separator is not None else MIGRATION_CONFIG["numeric_suffix_separator"]

    def generate(self, base: str, anchor: Node, source: SourceFile) -> str:
        scope = scope_of(anchor)
        taken = self.registry.names_in_file(source)

        def claim_if_available(candidate: str) -> bool:
            if candidate in taken or self.registry.is_claimed(source, scope, candidate):
                return False
            self.registry.claim(source, scope, candidate)
            return True

        if claim_if_available(base):
            return base

        for suffix in self.fallback_suffixes:
            candidate = f"{base}{suffix}"
            if claim_if_available(candidate):
                logger.debug(f"Generated name '{candidate}' for '{base}'")
                return candidate

        counter = 1
        while True:
            candidate = f"{base}{self.separator}{counter}"
            if claim_if_available(candidate):
                logger.debug(f"Generated name '{candidate}' for '{base}'")
                return candidate
            counter += 1
