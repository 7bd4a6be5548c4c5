from dataclasses import dataclass, field
from typing import List

from reactive_unwrap.schemas import Replacement
from .printer import BindingElementPrinter


@dataclass
class MigrationResult:
    """
    Shared sink for a migration pass.

    ``replacements`` grows by appending. The one in-place change is the
    rewriter merging another unwrap statement into a block it synthesized
    earlier in the same pass. Edits never overlap; the caller applies them
    afterwards.
    """

    printer: BindingElementPrinter = field(default_factory=BindingElementPrinter)
    replacements: List[Replacement] = field(default_factory=list)

    def for_file(self, file_path: str) -> List[Replacement]:
        return [r for r in self.replacements if r.file_path == file_path]
