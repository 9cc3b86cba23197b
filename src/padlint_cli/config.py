import tomllib
from pathlib import Path
from typing import Any

from padlint.errors import ConfigError

DEFAULT_CONFIG_NAMES = (".padlint.toml", "pyproject.toml")


class LintConfig:
    """Handles loading of .padlint.toml / pyproject.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.select: list[str] = []
        self.ignore: list[str] = []
        self.rules: dict[str, dict[str, Any]] = {}
        self.path: Path | None = None

        if config_path is None:
            config_path = self.discover(Path.cwd())
        if config_path and config_path.exists():
            self._load_from_file(config_path)

    @staticmethod
    def discover(start: Path) -> Path | None:
        """Nearest config file in ``start`` or its parents; pyproject.toml only counts with a [tool.padlint] table."""
        for directory in (start, *start.parents):
            for name in DEFAULT_CONFIG_NAMES:
                candidate = directory / name
                if not candidate.is_file():
                    continue
                if name == "pyproject.toml" and "padlint" not in _read_toml(candidate).get("tool", {}):
                    continue
                return candidate
        return None

    def _load_from_file(self, path: Path):
        data = _read_toml(path)
        lint_data = data.get("tool", {}).get("padlint")
        if lint_data is None:
            lint_data = {} if path.name == "pyproject.toml" else data

        self.path = path
        self.select = _string_list(lint_data.get("select", self.select), "select", path)
        self.ignore = _string_list(lint_data.get("ignore", self.ignore), "ignore", path)
        rules = lint_data.get("rules", {})
        if not isinstance(rules, dict):
            raise ConfigError(f"{path}: 'rules' must be a table")
        for rule_id, options in rules.items():
            if not isinstance(options, dict):
                raise ConfigError(f"{path}: options of rule '{rule_id}' must be a table")
        self.rules = {rule_id: dict(options) for rule_id, options in rules.items()}

    def rule_options(self, rule_id: str, **overrides: Any) -> dict[str, Any]:
        """Options of one rule, with non-None command-line overrides applied on top"""
        options = dict(self.rules.get(rule_id, {}))
        options.update({key: value for key, value in overrides.items() if value is not None})
        return options


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def _string_list(value: Any, key: str, path: Path) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{path}: '{key}' must be a list of strings")
    return value
