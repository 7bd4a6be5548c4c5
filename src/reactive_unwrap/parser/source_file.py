"""
SourceFile: a parsed TypeScript file with offset helpers.

tree-sitter reports UTF-8 byte offsets while edits are expressed as
character offsets into the original text, so every position handed out
by this module is converted first.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from tree_sitter import Node, Tree


@dataclass
class SourceFile:
    """A parsed source file plus the text it was parsed from."""

    file_path: str
    text: str
    language: str
    tree: Tree
    _data: bytes = field(init=False, repr=False)
    _ascii: bool = field(init=False, repr=False)

    def __post_init__(self):
        self._data = self.text.encode("utf8")
        self._ascii = len(self._data) == len(self.text)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        return self.root.has_error

    def offset(self, byte_offset: int) -> int:
        """Convert a byte offset into a character offset."""
        if self._ascii:
            return byte_offset
        return len(self._data[:byte_offset].decode("utf8", errors="replace"))

    def start(self, node: Node) -> int:
        return self.offset(node.start_byte)

    def end(self, node: Node) -> int:
        return self.offset(node.end_byte)

    def column(self, node: Node) -> int:
        """Character column of the first token of ``node`` on its line."""
        byte_column = node.start_point[1]
        if self._ascii:
            return byte_column
        line_start = node.start_byte - byte_column
        return len(self._data[line_start:node.start_byte].decode("utf8", errors="replace"))

    def text_of(self, node: Node) -> str:
        return self._data[node.start_byte:node.end_byte].decode("utf8")

    def walk(self, node: Optional[Node] = None) -> Iterator[Node]:
        """Pre-order traversal of every node below ``node`` (root by default)."""
        stack = [node or self.root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))
