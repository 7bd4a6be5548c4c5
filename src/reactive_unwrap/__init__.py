"""
reactive-unwrap - Destructuring rewrite engine for reactive inputs

Rewrites TypeScript destructuring patterns that capture reactive inputs so
that each input is unwrapped into a plain local variable.
"""

__version__ = "0.1.0"

from reactive_unwrap.migration import (
    MigrationFacade,
    MigrationResult,
    NameRegistry,
    UniqueNameGenerator,
    find_binding_element_references,
    insert_temporary_variable,
    migrate_binding_element_references,
)
from reactive_unwrap.parser import parse_file, parse_source
from reactive_unwrap.schemas import Replacement, TextUpdate

__all__ = [
    "__version__",
    "MigrationFacade",
    "MigrationResult",
    "NameRegistry",
    "UniqueNameGenerator",
    "find_binding_element_references",
    "insert_temporary_variable",
    "migrate_binding_element_references",
    "parse_file",
    "parse_source",
    "Replacement",
    "TextUpdate",
]
