"""Tree-sitter parsing and token access for JavaScript and TypeScript sources."""

from .ast_walker import ASTWalker
from .models import ParseResult, Position, SourceLocation, Token
from .parser import Dialect, JSParser
from .source_code import BLOCK_COMMENT, LINE_COMMENT, SourceCode

__all__ = [
    "ASTWalker",
    "BLOCK_COMMENT",
    "Dialect",
    "JSParser",
    "LINE_COMMENT",
    "ParseResult",
    "Position",
    "SourceCode",
    "SourceLocation",
    "Token",
]
