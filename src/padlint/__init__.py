"""
padlint - blank-line padding checks for JavaScript and TypeScript blocks

This package provides:
- The padded-blocks rule (statement blocks, objects, switches, classes, interfaces)
- A linter engine over tree-sitter parse trees
- An autofix loop that applies rule edits until the source converges
"""

__version__ = "0.1.0"

from .autofix import AutoFixEngine, FixResult
from .engine import LinterEngine
from .errors import ConfigError, PadlintError, UnknownConstructError
from .models import InternalIssue, Severity, TextEdit
from .registry import RuleRegistry

__all__ = [
    "AutoFixEngine",
    "ConfigError",
    "FixResult",
    "InternalIssue",
    "LinterEngine",
    "PadlintError",
    "RuleRegistry",
    "Severity",
    "TextEdit",
    "UnknownConstructError",
]
