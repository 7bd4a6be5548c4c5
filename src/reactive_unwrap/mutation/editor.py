"""
TextEditor: apply character-offset replacements to source text.
"""

import difflib
from typing import Iterable, List, Union

from reactive_unwrap.logging_config import logger
from reactive_unwrap.schemas import Replacement, TextUpdate


def apply_replacements(text: str, updates: Iterable[Union[Replacement, TextUpdate]]) -> str:
    """
    Apply non-overlapping updates to ``text``.

    Updates are applied from the end of the text backwards so earlier
    offsets stay valid. An insertion at the end of a replaced span lands
    after the replacement text, and insertions sharing a position keep
    their original order.
    """
    indexed = []
    for index, update in enumerate(updates):
        if isinstance(update, Replacement):
            update = update.update
        if not 0 <= update.position <= update.end <= len(text):
            raise ValueError(
                f"Update [{update.position}, {update.end}) is outside the text (length {len(text)})"
            )
        indexed.append((update.position, update.end, index, update))

    for _, _, _, update in sorted(indexed, key=lambda item: item[:3], reverse=True):
        text = text[:update.position] + update.to_insert + text[update.end:]

    return text


class TextEditor:
    """
    Apply replacements for a file and render the change as a diff.

    Features:
    - Line ending preservation (LF/CRLF)
    - Unified diffs with truncation of large additions
    """

    def apply(self, original_content: str, replacements: Iterable[Replacement]) -> str:
        """
        Apply replacements, keeping the original line ending style.

        Inserted snippets always use LF; they are converted when the file
        uses CRLF.
        """
        replacements = list(replacements)
        line_ending = self._detect_line_ending(original_content)
        modified_content = apply_replacements(original_content, replacements)
        modified_content = self._normalize_line_endings(modified_content, line_ending)
        logger.debug(f"Applied {len(replacements)} replacement(s)")
        return modified_content

    def _detect_line_ending(self, content: str) -> str:
        """
        Detect line ending style (LF vs CRLF).

        Returns:
            '\r\n' for CRLF, '\n' for LF
        """
        if '\r\n' in content:
            return '\r\n'
        return '\n'

    def _normalize_line_endings(self, content: str, line_ending: str) -> str:
        # First convert all to LF
        content = content.replace('\r\n', '\n')
        # Then convert to target if CRLF
        if line_ending == '\r\n':
            content = content.replace('\n', '\r\n')
        return content

    def generate_unified_diff(
        self,
        file_path: str,
        original_content: str,
        modified_content: str,
        max_diff_lines: int = 200
    ) -> str:
        """
        Generate unified diff between original and modified content.

        Args:
            file_path: Path to file (for diff header)
            original_content: Original file content
            modified_content: Modified file content
            max_diff_lines: Maximum diff lines before truncation

        Returns:
            Unified diff string (possibly truncated)
        """
        original_lines = original_content.splitlines(keepends=True)
        modified_lines = modified_content.splitlines(keepends=True)

        # Mark a missing final newline the way diff/patch expect it
        diff_lines = [
            line if line.endswith('\n') else line + '\n\\ No newline at end of file\n'
            for line in difflib.unified_diff(
                original_lines,
                modified_lines,
                fromfile=f"a/{file_path}",
                tofile=f"b/{file_path}",
            )
        ]

        if len(diff_lines) > max_diff_lines:
            return self._truncate_large_diff(diff_lines, max_diff_lines)

        return ''.join(diff_lines)

    def _truncate_large_diff(self, diff_lines: List[str], max_lines: int) -> str:
        """
        Keep the first ``max_lines`` lines and note how many were dropped.
        """
        kept = diff_lines[:max_lines]
        dropped = len(diff_lines) - len(kept)
        kept.append(f"[... {dropped} diff lines truncated ...]\n")
        return ''.join(kept)
