from typer.testing import CliRunner

from padlint_cli.main import app, collect_files

runner = CliRunner()

UNPADDED = "function f() {\n  x();\n}\n"


def write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_cli_lint_help():
    result = runner.invoke(app, ["lint", "--help"])
    assert result.exit_code == 0
    assert "Run linter on JavaScript/TypeScript files" in result.stdout


def test_cli_lint_reports_issues(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    file_path = write(tmp_path / "a.js", UNPADDED)

    result = runner.invoke(app, ["lint", str(file_path), "--style", "always"])
    assert result.exit_code == 1
    assert "STYLE:" in result.stdout
    assert f"{file_path}:1:14 [padded-blocks] Block must be padded by blank lines. (fixable)" in result.stdout
    assert "Total issues found: 2" in result.stdout


def test_cli_lint_clean_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    file_path = write(tmp_path / "a.js", UNPADDED)

    result = runner.invoke(app, ["lint", str(file_path), "--style", "never"])
    assert result.exit_code == 0
    assert "Total issues found: 0" in result.stdout


def test_cli_fix_rewrites_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    file_path = write(tmp_path / "a.js", UNPADDED)

    result = runner.invoke(app, ["lint", str(file_path), "--style", "always", "--fix"])
    assert result.exit_code == 0
    assert "Applied 2 fix(es)" in result.stdout
    assert file_path.read_text(encoding="utf-8") == "function f() {\n\n  x();\n\n}\n"


def test_cli_uses_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    file_path = write(tmp_path / "a.js", UNPADDED)
    config = write(tmp_path / "custom.toml", '[tool.padlint.rules.padded-blocks]\nstyle = { objects = "always" }\n')

    result = runner.invoke(app, ["lint", str(file_path), "--config", str(config)])
    assert result.exit_code == 0


def test_cli_single_line_flag(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    file_path = write(tmp_path / "a.js", "function f() { x(); }\n")

    result = runner.invoke(app, ["lint", str(file_path), "--style", "always", "--allow-single-line-blocks"])
    assert result.exit_code == 0


def test_cli_invalid_config_exits_2(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    file_path = write(tmp_path / "a.js", UNPADDED)
    config = write(tmp_path / "bad.toml", '[tool.padlint.rules.padded-blocks]\nstyle = "sometimes"\n')

    result = runner.invoke(app, ["lint", str(file_path), "--config", str(config)])
    assert result.exit_code == 2


def test_cli_missing_config_exits_2(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    file_path = write(tmp_path / "a.js", UNPADDED)

    result = runner.invoke(app, ["lint", str(file_path), "--config", str(tmp_path / "nope.toml")])
    assert result.exit_code == 2


def test_cli_unreadable_file_is_reported(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["lint", str(tmp_path / "missing.js")])
    assert result.exit_code == 1
    assert "ERROR:" in result.stdout


def test_collect_files_skips_node_modules(tmp_path):
    write(tmp_path / "src" / "a.js", UNPADDED)
    write(tmp_path / "src" / "b.tsx", UNPADDED)
    write(tmp_path / "src" / "notes.txt", "")
    write(tmp_path / "node_modules" / "lib" / "c.js", UNPADDED)

    files = collect_files([tmp_path])
    assert [f.relative_to(tmp_path).as_posix() for f in files] == ["src/a.js", "src/b.tsx"]


def test_cli_dump_ast(tmp_path):
    file_path = write(tmp_path / "a.js", "a;\n")
    result = runner.invoke(app, ["dump-ast", str(file_path)])
    assert result.exit_code == 0
    assert result.stdout.startswith("program [1:0")
    assert "expression_statement" in result.stdout


def test_cli_dialect_option_overrides_extension(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    file_path = write(tmp_path / "types.js", "interface I {\n  a: string;\n}\n")

    result = runner.invoke(app, ["lint", str(file_path), "--style", "always", "--dialect", "typescript"])
    assert result.exit_code == 1
    assert "parse-error" not in result.stdout
    assert "Total issues found: 2" in result.stdout
