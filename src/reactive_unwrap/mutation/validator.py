"""
CodeValidator: syntax verification of rewritten TypeScript.
"""

from typing import List, Tuple

from tree_sitter import Node

from reactive_unwrap.logging_config import logger
from reactive_unwrap.parser import get_parser


class CodeValidator:
    """
    Re-parse rewritten code and report ERROR or MISSING nodes.
    """

    def validate_syntax(self, code: str, language: str = "typescript") -> Tuple[bool, List[str]]:
        """
        Validate syntax by parsing and checking for ERROR nodes.

        Args:
            code: Code to validate
            language: Grammar name ("typescript" or "tsx")

        Returns:
            (is_valid, error_messages)
        """
        tree = get_parser(language).parse(bytes(code, "utf8"))
        error_nodes = self._find_error_nodes(tree.root_node)

        if error_nodes:
            errors = []
            for error_node in error_nodes:
                line = error_node.start_point[0] + 1
                col = error_node.start_point[1] + 1
                kind = "Missing token" if error_node.is_missing else "Syntax error"
                errors.append(f"{kind} at line {line}, column {col}")
            logger.debug(f"Syntax validation found {len(errors)} problem(s)")
            return False, errors

        return True, []

    def _find_error_nodes(self, node: Node) -> List[Node]:
        """
        Recursively find all ERROR and MISSING nodes in the AST.
        """
        errors = []
        if node.type == "ERROR" or node.is_missing:
            errors.append(node)

        for child in node.children:
            errors.extend(self._find_error_nodes(child))

        return errors
