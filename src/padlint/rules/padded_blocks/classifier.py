"""Maps a construct node, given its parent, to a ConstructKind."""

from typing import Callable, Optional

from tree_sitter import Node

from padlint_tree_sitter import node_types as nt

from ...errors import UnknownConstructError
from .options import ConstructKind


def _is_for_of(parent: Node) -> bool:
    operator = parent.child_by_field_name("operator")
    if operator is not None:
        return operator.type == "of"
    return any(child.type == "of" for child in parent.children)


# Ordered; the first predicate matching a statement_block's parent wins
BLOCK_SPECIALIZATIONS: tuple[tuple[ConstructKind, Callable[[Node], bool]], ...] = (
    (ConstructKind.IF_ELSE_BLOCK, lambda p: p.type in (nt.IF_STATEMENT, nt.ELSE_CLAUSE)),
    (ConstructKind.FOR_BLOCK, lambda p: p.type == nt.FOR_STATEMENT),
    (ConstructKind.FOR_IN_BLOCK, lambda p: p.type == nt.FOR_IN_STATEMENT and not _is_for_of(p)),
    (ConstructKind.FOR_OF_BLOCK, lambda p: p.type == nt.FOR_IN_STATEMENT and _is_for_of(p)),
    (ConstructKind.WHILE_BLOCK, lambda p: p.type == nt.WHILE_STATEMENT),
    (ConstructKind.DO_WHILE_BLOCK, lambda p: p.type == nt.DO_STATEMENT),
    (ConstructKind.FUNCTION_DECLARATION_BLOCK, lambda p: p.type in nt.FUNCTION_DECLARATION_TYPES),
    (ConstructKind.FUNCTION_EXPRESSION_BLOCK, lambda p: p.type in nt.FUNCTION_EXPRESSION_TYPES),
    (ConstructKind.ARROW_FUNCTION_BLOCK, lambda p: p.type == nt.ARROW_FUNCTION),
    (ConstructKind.TRY_BLOCK, lambda p: p.type in (nt.TRY_STATEMENT, nt.FINALLY_CLAUSE)),
    (ConstructKind.CATCH_BLOCK, lambda p: p.type == nt.CATCH_CLAUSE),
)


def is_interface_body(node: Node, parent: Optional[Node]) -> bool:
    if node.type == nt.INTERFACE_BODY:
        return True
    return node.type == nt.OBJECT_TYPE and parent is not None and parent.type == nt.INTERFACE_DECLARATION


def classify_block(parent: Optional[Node]) -> ConstructKind:
    if parent is not None:
        for kind, matches in BLOCK_SPECIALIZATIONS:
            if matches(parent):
                return kind
    return ConstructKind.GENERIC_BLOCK


def classify(node: Node, parent: Optional[Node]) -> ConstructKind:
    """Return the construct kind of ``node``.

    Raises UnknownConstructError for nodes that are not constructs at all.
    """
    if node.type == nt.STATEMENT_BLOCK:
        return classify_block(parent)
    if node.type == nt.OBJECT:
        return ConstructKind.OBJECT_LITERAL
    if node.type == nt.SWITCH_STATEMENT:
        return ConstructKind.SWITCH_BODY
    if node.type == nt.CLASS_BODY:
        return ConstructKind.CLASS_BODY
    if is_interface_body(node, parent):
        return ConstructKind.INTERFACE_BODY
    raise UnknownConstructError(node.type, parent.type if parent is not None else None)
