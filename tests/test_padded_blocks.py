"""End-to-end behaviour of the padded-blocks rule through the linter engine."""

import pytest

from padlint.rules.padded_blocks import ALWAYS_PAD_BLOCK, NEVER_PAD_BLOCK
from padlint_tree_sitter import Dialect


def test_if_block_always(lint, fix):
    source = "if (a) {\nfoo();\n}"
    issues = lint(source, {"ifsAndElses": "always"})

    assert len(issues) == 2
    assert all(i.message_id == ALWAYS_PAD_BLOCK for i in issues)
    assert all(i.message == "Block must be padded by blank lines." for i in issues)
    assert (issues[0].line, issues[0].column, issues[0].end_line, issues[0].end_column) == (1, 7, 2, 0)
    assert (issues[1].line, issues[1].column, issues[1].end_line, issues[1].end_column) == (2, 6, 3, 0)
    assert all(i.auto_fixable for i in issues)

    result = fix(source, {"ifsAndElses": "always"})
    assert result.source == "if (a) {\n\nfoo();\n\n}"
    assert result.issues == []


def test_switch_never(lint, fix):
    source = "switch (a) {\n\ncase 1:\nbreak;\n\n}"
    issues = lint(source, {"switches": "never"})

    assert len(issues) == 2
    assert all(i.message_id == NEVER_PAD_BLOCK for i in issues)

    result = fix(source, {"switches": "never"})
    assert result.source == "switch (a) {\ncase 1:\nbreak;\n}"
    assert result.issues == []


def test_attached_comment_does_not_hide_top_padding(lint):
    source = "function f() { // note\n\n  x; }"
    issues = lint(source, "always")

    # Only the bottom is unpadded
    assert len(issues) == 1
    assert issues[0].line == 3


def test_single_line_block_exception(lint):
    source = "function f() { x; }"
    assert lint(source, "always", allow_single_line_blocks=True) == []
    assert len(lint(source, "always")) == 2


def test_single_line_exception_does_not_cover_multiline_blocks(lint):
    source = "function f() {\n  x;\n}"
    assert len(lint(source, "always", allow_single_line_blocks=True)) == 2


def test_top_and_bottom_reported_independently(lint):
    issues = lint("function f() {\n\n  x;\n}", "always")
    assert len(issues) == 1
    assert issues[0].line == 3


def test_unconfigured_kinds_are_not_checked(lint):
    assert lint("function f() {\nreturn 1;\n}", {"objects": "always"}) == []
    assert lint("function f() {\n\nreturn 1;\n\n}", {"objects": "never"}) == []


def test_blocks_key_covers_only_generic_blocks(lint):
    source = "function f() {\n  {\n    x();\n  }\n}"
    issues = lint(source, {"blocks": "always"})
    assert [i.line for i in issues] == [2, 3]
    assert lint("if (a) {\n  x();\n}", {"blocks": "always"}) == []


def test_default_style_is_always(lint):
    assert len(lint("function f() {\n  x;\n}", None)) == 2


def test_empty_constructs_are_skipped(lint):
    source = "function f() {}\nconst o = {};\nclass A {}\nswitch (a) {}\nfunction g() {\n  // only a comment\n}"
    assert lint(source, "always") == []


def test_else_block(lint):
    source = "if (a) {\n\n  x();\n\n} else {\n  y();\n}"
    issues = lint(source, {"ifsAndElses": "always"})
    assert [i.line for i in issues] == [5, 6]


def test_object_literal_never(lint, fix):
    source = "const o = {\n\n  a: 1,\n\n};"
    assert len(lint(source, {"objects": "never"})) == 2
    assert fix(source, {"objects": "never"}).source == "const o = {\n  a: 1,\n};"


def test_class_body_and_method(lint):
    source = "class A {\n  m() {\n    x();\n  }\n}"
    assert len(lint(source, {"classes": "always"})) == 2
    assert len(lint(source, {"functionExpressions": "always"})) == 2
    assert lint(source, {"functionDeclarations": "always"}) == []


@pytest.mark.parametrize(
    "key, expected",
    [("forInLoops", 0), ("forOfLoops", 2), ("forLoops", 0)],
)
def test_for_of_loop_kind(lint, key, expected):
    source = "for (const v of list) {\n  x(v);\n}"
    assert len(lint(source, {key: "always"})) == expected


def test_arrow_function(lint):
    source = "const f = () => {\n  x();\n};"
    assert len(lint(source, {"arrowFunctions": "always"})) == 2
    assert lint(source, {"arrowFunctions": "never"}) == []


def test_try_catch_finally(lint):
    source = "try {\n  a();\n} catch (e) {\n  b();\n} finally {\n  c();\n}"
    assert len(lint(source, {"trys": "always"})) == 4
    assert len(lint(source, {"catches": "always"})) == 2


def test_typescript_interface(lint, fix):
    source = "interface I {\n  a: string;\n}"
    issues = lint(source, {"interfaces": "always"}, dialect=Dialect.TYPESCRIPT)
    assert len(issues) == 2
    result = fix(source, {"interfaces": "always"}, dialect=Dialect.TYPESCRIPT)
    assert result.source == "interface I {\n\n  a: string;\n\n}"


@pytest.mark.parametrize(
    "source",
    [
        "namespace N {\n  const x = 1;\n}",
        'declare module "m" {\n  export const x = 1;\n}',
    ],
)
def test_typescript_module_bodies_are_not_blocks(lint, source):
    assert lint(source, "always", dialect=Dialect.TYPESCRIPT) == []
    assert lint(source, {"blocks": "never"}, dialect=Dialect.TYPESCRIPT) == []


def test_blocks_inside_namespace_are_checked(lint):
    source = "namespace N {\n  function f() {\n    x();\n  }\n}"
    issues = lint(source, {"functionDeclarations": "always"}, dialect=Dialect.TYPESCRIPT)
    assert [i.line for i in issues] == [2, 3]


def test_never_with_comment_at_start_of_padded_line(fix):
    source = "function f() {\n\n  /* lead */ x;\n}"
    assert fix(source, "never").source == "function f() {\n  /* lead */ x;\n}"


def test_never_with_comment_abutting_closing_brace(fix):
    source = "function f() {\n  x;\n\n  /* c */ }"
    assert fix(source, "never").source == "function f() {\n  x;\n  /* c */ }"


def test_never_with_trailing_comment_on_last_line(fix):
    source = "function f() {\n  x; /* tail */\n\n}"
    assert fix(source, "never").source == "function f() {\n  x; /* tail */\n}"


def test_non_ascii_source_is_fixed_by_character_offsets(fix):
    source = 'function f() {\n  s = "é";\n}'
    assert fix(source, "always").source == 'function f() {\n\n  s = "é";\n\n}'


@pytest.mark.parametrize(
    "source, style",
    [
        ("function f() { x; }", "always"),
        ("function f() {\n\n\n\n  x;\n\n\n}", "never"),
        ("class A {\n  m() {\n    if (a) {\n      b();\n    }\n  }\n}", "always"),
        ("class A {\n\n  m() {\n\n    if (a) {\n\n      b();\n\n    }\n\n  }\n\n}", "never"),
        ("const o = { a: { b: 1 } };", "always"),
        ("switch (a) { // c\ncase 1: { x(); }\n}", "always"),
    ],
)
def test_fixes_converge(lint, fix, source, style):
    result = fix(source, style)
    assert result.issues == []
    assert lint(result.source, style) == []
    # Fixing an already fixed source changes nothing
    assert fix(result.source, style).source == result.source
