"""Token store over a tree-sitter tree.

The queries mirror what a lint rule expects from its host: the first and last
token of a node, and the token immediately before or after a node or token,
optionally counting comments as tokens. Tree-sitter reports byte offsets and
byte columns; everything here is converted to character offsets so that edits
can be applied to the decoded ``str`` source.
"""

from bisect import bisect_left, bisect_right
from typing import Iterator, List

from tree_sitter import Node

from .models import ParseResult, Position, SourceLocation, Token
from .node_types import COMMENT_TYPES

LINE_COMMENT = "Line"
BLOCK_COMMENT = "Block"


class SourceCode:
    def __init__(self, parse_result: ParseResult):
        self.text = parse_result.source
        self.tree = parse_result.tree
        self.ast = parse_result.tree.root_node
        self.dialect = parse_result.dialect
        # tree-sitter advances rows on '\n' only
        self.lines = self.text.split("\n")
        self._encoded_lines = [line.encode("utf-8") for line in self.lines]
        self._line_starts: List[int] = []
        offset = 0
        for line in self.lines:
            self._line_starts.append(offset)
            offset += len(line) + 1

        self.tokens_and_comments: List[Token] = [self._to_token(leaf) for leaf in self._leaves()]
        self._starts = [token.range[0] for token in self.tokens_and_comments]
        self._ends = [token.range[1] for token in self.tokens_and_comments]

    @property
    def comments(self) -> List[Token]:
        return [t for t in self.tokens_and_comments if t.type in (LINE_COMMENT, BLOCK_COMMENT)]

    def get_text(self, node: Node | Token | None = None) -> str:
        if node is None:
            return self.text
        start, end = self.get_range(node)
        return self.text[start:end]

    def get_range(self, node: Node | Token) -> tuple[int, int]:
        if isinstance(node, Token):
            return node.range
        return self._offset(node.start_point), self._offset(node.end_point)

    def get_first_token(self, node: Node, include_comments: bool = False) -> Token | None:
        start, end = self.get_range(node)
        index = bisect_left(self._starts, start)
        while index < len(self.tokens_and_comments):
            token = self.tokens_and_comments[index]
            if token.range[1] > end:
                return None
            if include_comments or not _is_comment(token):
                return token
            index += 1
        return None

    def get_last_token(self, node: Node, include_comments: bool = False) -> Token | None:
        start, end = self.get_range(node)
        index = bisect_right(self._ends, end) - 1
        while index >= 0:
            token = self.tokens_and_comments[index]
            if token.range[0] < start:
                return None
            if include_comments or not _is_comment(token):
                return token
            index -= 1
        return None

    def get_token_before(self, node: Node | Token, include_comments: bool = False) -> Token | None:
        start = self.get_range(node)[0]
        index = bisect_right(self._ends, start) - 1
        while index >= 0:
            token = self.tokens_and_comments[index]
            if include_comments or not _is_comment(token):
                return token
            index -= 1
        return None

    def get_token_after(self, node: Node | Token, include_comments: bool = False) -> Token | None:
        end = self.get_range(node)[1]
        index = bisect_left(self._starts, end)
        while index < len(self.tokens_and_comments):
            token = self.tokens_and_comments[index]
            if include_comments or not _is_comment(token):
                return token
            index += 1
        return None

    def _leaves(self) -> Iterator[Node]:
        # The root itself is never a token, even for an empty program
        stack = list(reversed(self.ast.children))
        while stack:
            node = stack.pop()
            if node.child_count == 0:
                # Zero-width leaves are MISSING nodes inserted by error recovery
                if node.end_byte > node.start_byte:
                    yield node
            else:
                stack.extend(reversed(node.children))

    def _to_token(self, leaf: Node) -> Token:
        start, end = self._offset(leaf.start_point), self._offset(leaf.end_point)
        value = self.text[start:end]
        token_type = leaf.type
        if leaf.type in COMMENT_TYPES:
            token_type = LINE_COMMENT if value.startswith(("//", "<!--", "-->")) else BLOCK_COMMENT
        loc = SourceLocation(self._position(leaf.start_point), self._position(leaf.end_point))
        return Token(type=token_type, value=value, loc=loc, range=(start, end))

    def _char_column(self, row: int, byte_column: int) -> int:
        if row >= len(self.lines):
            return byte_column
        encoded = self._encoded_lines[row]
        if len(encoded) == len(self.lines[row]):
            return byte_column
        return len(encoded[:byte_column].decode("utf-8", errors="ignore"))

    def _position(self, point) -> Position:
        row, byte_column = point
        return Position(line=row + 1, column=self._char_column(row, byte_column))

    def _offset(self, point) -> int:
        row, byte_column = point
        if row >= len(self._line_starts):
            return len(self.text)
        return self._line_starts[row] + self._char_column(row, byte_column)


def _is_comment(token: Token) -> bool:
    return token.type in (LINE_COMMENT, BLOCK_COMMENT)
