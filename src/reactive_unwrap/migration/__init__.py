"""
Migration package: rewrite destructured reactive inputs into unwrapped locals.

    const {myInput} = this;
    // becomes
    const {myInput: myInput_1} = this;
    const myInput = myInput_1();
"""

from .binding_elements import (
    DestructuringElement,
    EnclosingDeclaration,
    Reference,
    binding_element_of,
    declaration_of,
)
from .insertion import (
    BlockParameter,
    BodylessParameter,
    InsertionContext,
    ListDeclaration,
    Unsupported,
    body_block_of,
    classify,
    context_name,
    insert_temporary_variable,
)
from .facade import MigrationFacade
from .locator import find_binding_element_references
from .object_expansion import (
    migrate_binding_element_references,
    project_relative_path,
    rewrite_element,
)
from .printer import BindingElement, BindingElementPrinter
from .result import MigrationResult
from .unique_names import NameRegistry, UniqueNameGenerator

__all__ = [
    "MigrationFacade",

    # Model
    "Reference",
    "DestructuringElement",
    "EnclosingDeclaration",
    "binding_element_of",
    "declaration_of",
    "find_binding_element_references",

    # Insertion contexts
    "InsertionContext",
    "ListDeclaration",
    "BlockParameter",
    "BodylessParameter",
    "Unsupported",
    "body_block_of",
    "classify",
    "context_name",
    "insert_temporary_variable",

    # Rewriting
    "migrate_binding_element_references",
    "rewrite_element",
    "project_relative_path",
    "BindingElement",
    "BindingElementPrinter",
    "MigrationResult",
    "NameRegistry",
    "UniqueNameGenerator",
]
