from dataclasses import dataclass, field
from typing import List

from tree_sitter import Tree


@dataclass(frozen=True)
class Position:
    """A point in the source: 1-based line, 0-based character column."""

    line: int
    column: int


@dataclass(frozen=True)
class SourceLocation:
    start: Position
    end: Position


@dataclass(frozen=True)
class Token:
    """A lexical token or comment, located both by line/column and by character offsets"""

    type: str  # tree-sitter leaf type, or 'Line' / 'Block' for comments
    value: str
    loc: SourceLocation
    range: tuple[int, int]


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: str
    dialect: str
    errors: List[str] = field(default_factory=list)
