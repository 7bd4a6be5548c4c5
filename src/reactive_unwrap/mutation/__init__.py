"""
Mutation package: apply collected text edits in memory and check the result.

Nothing here writes to disk; callers decide what to do with the rewritten
text.
"""

from .editor import TextEditor, apply_replacements
from .validator import CodeValidator

__all__ = [
    "TextEditor",
    "CodeValidator",
    "apply_replacements",
]
