import logging
from enum import Enum
from pathlib import Path
from typing import Iterable

import typer

from padlint.autofix import AutoFixEngine
from padlint.engine import LinterEngine
from padlint.errors import ConfigError
from padlint_tree_sitter import Dialect, JSParser

from .config import LintConfig
from .converters import internal_issue_to_lint_issue

app = typer.Typer(help="padlint - blank-line padding checks for JavaScript and TypeScript blocks")

SOURCE_SUFFIXES = {".js", ".mjs", ".cjs", ".jsx", ".ts", ".mts", ".cts", ".tsx"}
SKIPPED_DIRS = {"node_modules", ".git"}
PADDED_BLOCKS = "padded-blocks"


class Style(str, Enum):
    always = "always"
    never = "never"


def collect_files(paths: Iterable[Path]) -> list[Path]:
    """Expand directories into the JavaScript/TypeScript files below them"""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(
                sorted(
                    p
                    for p in path.rglob("*")
                    if p.suffix in SOURCE_SUFFIXES
                    and p.is_file()
                    and not SKIPPED_DIRS.intersection(p.relative_to(path).parts)
                )
            )
        else:
            files.append(path)
    return files


@app.command()
def lint(
    files: list[Path] = typer.Argument(..., help="Files or directories to lint"),
    config_file: Path | None = typer.Option(None, "--config", help="Path to config file"),
    style: Style | None = typer.Option(None, help="Padding policy for every construct kind"),
    allow_single_line_blocks: bool | None = typer.Option(
        None, "--allow-single-line-blocks/--no-allow-single-line-blocks", help="Skip constructs that fit on one line"
    ),
    dialect: Dialect | None = typer.Option(None, help="Force a grammar instead of guessing from the extension"),
    fix: bool = typer.Option(False, help="Automatically fix issues"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run linter on JavaScript/TypeScript files"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = LintConfig(config_file)
        if config_file is not None and config.path is None:
            raise ConfigError(f"Config file not found: {config_file}")
        options = config.rule_options(
            PADDED_BLOCKS,
            style=style.value if style else None,
            allowSingleLineBlocks=allow_single_line_blocks,
        )
        engine = LinterEngine({PADDED_BLOCKS: options}, select=config.select, ignore=config.ignore)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=2)

    autofix = AutoFixEngine()
    all_issues = []
    failed_files = 0
    fixed_total = 0

    for file_path in collect_files(files):
        try:
            if fix:
                result = autofix.fix_file(engine, file_path, dialect)
                if result.modified:
                    typer.echo(f"  🔧 Applied {result.fixed_count} fix(es) in {file_path}")
                    fixed_total += result.fixed_count
                current_issues = result.issues
            else:
                current_issues = engine.lint_file(file_path, dialect)
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"ERROR: {file_path}: {e}")
            failed_files += 1
            continue
        all_issues.extend(current_issues)

    external_issues = [internal_issue_to_lint_issue(i) for i in all_issues]
    for issue in external_issues:
        suffix = " (fixable)" if issue.auto_fixable else ""
        typer.echo(
            f"{issue.severity}: {issue.file_path}:{issue.line_number}:{issue.column} "
            f"[{issue.rule_id}] {issue.message}{suffix}"
        )

    fixable = sum(1 for i in external_issues if i.auto_fixable)
    typer.echo(f"\nTotal issues found: {len(external_issues)} ({fixable} fixable, {fixed_total} fixed)")

    if external_issues or failed_files:
        raise typer.Exit(code=1)


@app.command("dump-ast")
def dump_ast(
    file: Path = typer.Argument(..., help="File to parse"),
    dialect: Dialect | None = typer.Option(None, help="Force a grammar instead of guessing from the extension"),
):
    """Print the tree-sitter tree of a file"""
    result = JSParser.parse_file(file, dialect)

    def dump_tree(node, indent=0):
        start, end = node.start_point, node.end_point
        typer.echo("  " * indent + f"{node.type} [{start[0] + 1}:{start[1]} - {end[0] + 1}:{end[1]}]")
        for child in node.children:
            dump_tree(child, indent + 1)

    dump_tree(result.tree.root_node)
    for error in result.errors:
        typer.echo(f"ERROR: {error}")


if __name__ == "__main__":
    app()
