"""Tree-sitter front end for JavaScript, TypeScript and TSX sources."""

import logging
from enum import Enum
from pathlib import Path
from typing import List

import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from .ast_walker import ASTWalker
from .models import ParseResult
from .node_types import ERROR

logger = logging.getLogger(__name__)


class Dialect(str, Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"

    @classmethod
    def for_path(cls, path: Path | str) -> "Dialect":
        suffix = Path(path).suffix.lower()
        if suffix in (".ts", ".mts", ".cts"):
            return cls.TYPESCRIPT
        if suffix == ".tsx":
            return cls.TSX
        return cls.JAVASCRIPT

    def language(self) -> Language:
        if self is Dialect.TYPESCRIPT:
            return Language(tsts.language_typescript())
        if self is Dialect.TSX:
            return Language(tsts.language_tsx())
        return Language(tsjs.language())


class JSParser:
    """Parses JavaScript-family sources into tree-sitter trees"""

    def __init__(self, dialect: Dialect = Dialect.JAVASCRIPT):
        self.dialect = dialect
        self.language = dialect.language()
        self.parser = Parser(self.language)

    def parse_string(self, source: str) -> ParseResult:
        tree = self.parser.parse(source.encode("utf-8"))
        errors = self._collect_errors(tree.root_node, source)
        if errors:
            logger.debug("%d syntax error(s) in %s source", len(errors), self.dialect.value)
        return ParseResult(tree=tree, source=source, dialect=self.dialect.value, errors=errors)

    @classmethod
    def parse_file(cls, file_path: Path, dialect: Dialect | None = None) -> ParseResult:
        parser = cls(dialect or Dialect.for_path(file_path))
        return parser.parse_string(file_path.read_text(encoding="utf-8"))

    def _collect_errors(self, root: Node, source: str) -> List[str]:
        if not root.has_error:
            return []
        errors = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == ERROR or node.is_missing:
                line, column = node.start_point
                snippet = ASTWalker.get_text(node, source).strip().splitlines()
                near = snippet[0][:20] if snippet else node.type
                errors.append(f"{line + 1}:{column}: syntax error near '{near}'")
                continue
            if node.has_error:
                stack.extend(reversed(node.children))
        return errors
