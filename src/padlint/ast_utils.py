"""Line and comment predicates over tokens."""

from padlint_tree_sitter import BLOCK_COMMENT, LINE_COMMENT, Token


def is_comment_token(token: Token) -> bool:
    return token.type in (LINE_COMMENT, BLOCK_COMMENT)


def is_token_on_same_line(left: Token, right: Token) -> bool:
    """True if ``left`` ends on the line where ``right`` starts."""
    return left.loc.end.line == right.loc.start.line


def lines_between(first: Token, second: Token) -> int:
    """Line distance from the end of ``first`` to the start of ``second``."""
    return second.loc.start.line - first.loc.end.line


def detect_linebreak(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"
