from typing import Callable, Iterator, List, Optional, Tuple

from tree_sitter import Node

from .node_types import COMMENT_TYPES


class ASTWalker:
    """Utilities for traversing and searching the JavaScript/TypeScript AST"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a depth-first traversal of the AST"""
        for current, _parent in ASTWalker.iter_with_parent(node):
            callback(current)

    @staticmethod
    def iter_with_parent(root: Node) -> Iterator[Tuple[Node, Optional[Node]]]:
        """Yield (node, parent) pairs in source order, the root paired with None.

        Iterative so that deeply nested sources do not hit the recursion limit.
        """
        stack: List[Tuple[Node, Optional[Node]]] = [(root, None)]
        while stack:
            node, parent = stack.pop()
            yield node, parent
            stack.extend((child, node) for child in reversed(node.children))

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        results = []

        def check(n):
            if n.type == type_name:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def named_content_children(node: Node) -> List[Node]:
        """Named children that are not comments: the members, statements or cases of a body."""
        return [child for child in node.named_children if child.type not in COMMENT_TYPES]

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        if isinstance(source, str):
            source = source.encode("utf-8")
        return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
