import pytest

from padlint.autofix import AutoFixEngine
from padlint.engine import LinterEngine
from padlint_tree_sitter import Dialect, JSParser, SourceCode


def make_engine(style=None, allow_single_line_blocks=None):
    options = {}
    if style is not None:
        options["style"] = style
    if allow_single_line_blocks is not None:
        options["allowSingleLineBlocks"] = allow_single_line_blocks
    return LinterEngine({"padded-blocks": options})


@pytest.fixture
def lint():
    """lint(source, style, allow_single_line_blocks=None, dialect=...) -> issues"""

    def _lint(source, style="always", allow_single_line_blocks=None, dialect=Dialect.JAVASCRIPT):
        engine = make_engine(style, allow_single_line_blocks)
        return engine.lint_string(source, dialect=dialect)

    return _lint


@pytest.fixture
def fix():
    """fix(source, style, ...) -> FixResult after the autofix loop converged"""

    def _fix(source, style="always", allow_single_line_blocks=None, dialect=Dialect.JAVASCRIPT):
        engine = make_engine(style, allow_single_line_blocks)
        return AutoFixEngine().fix_string(engine, source, dialect=dialect)

    return _fix


@pytest.fixture
def source_code():
    def _source_code(source, dialect=Dialect.JAVASCRIPT):
        return SourceCode(JSParser(dialect).parse_string(source))

    return _source_code
