"""Locates the logical first and last content tokens of a construct.

Comments sharing a line with the opening delimiter (or with the closing one)
belong to the delimiter, not to the content. So ``{ // note`` followed by a
blank line still counts as padded.
"""

from dataclasses import dataclass

from tree_sitter import Node

from padlint_tree_sitter import SourceCode, Token
from padlint_tree_sitter import node_types as nt

from ...ast_utils import is_comment_token


@dataclass(frozen=True)
class BoundaryTokens:
    before: Token
    first_content: Token
    last_content: Token
    after: Token


def get_open_brace(node: Node, source_code: SourceCode) -> Token:
    """The opening delimiter. A switch statement starts with ``switch``, so use the token before its first case."""
    if node.type == nt.SWITCH_STATEMENT:
        body = node.child_by_field_name("body")
        first_case = next(c for c in body.named_children if c.type in nt.SWITCH_CASE_TYPES)
        return source_code.get_token_before(first_case)
    return source_code.get_first_token(node)


def get_first_block_token(open_brace: Token, source_code: SourceCode) -> Token:
    prev = first = open_brace
    while True:
        prev, first = first, source_code.get_token_after(first, include_comments=True)
        if not (is_comment_token(first) and first.loc.start.line == prev.loc.end.line):
            return first


def get_last_block_token(close_brace: Token, source_code: SourceCode) -> Token:
    next_token = last = close_brace
    while True:
        next_token, last = last, source_code.get_token_before(last, include_comments=True)
        if not (is_comment_token(last) and last.loc.end.line == next_token.loc.start.line):
            return last


def locate_boundaries(node: Node, source_code: SourceCode) -> BoundaryTokens:
    first_content = get_first_block_token(get_open_brace(node, source_code), source_code)
    last_content = get_last_block_token(source_code.get_last_token(node), source_code)
    return BoundaryTokens(
        before=source_code.get_token_before(first_content, include_comments=True),
        first_content=first_content,
        last_content=last_content,
        after=source_code.get_token_after(last_content, include_comments=True),
    )
