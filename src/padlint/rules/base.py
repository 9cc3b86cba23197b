from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from padlint_tree_sitter import SourceCode

from ..models import InternalIssue, Severity, TextEdit


@dataclass
class RuleContext:
    """Everything a rule sees while checking one file."""

    file_path: Path
    source_code: SourceCode
    options: Any = None


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'padded-blocks')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name."""
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Default severity for this rule."""
        pass

    @property
    def auto_fixable(self) -> bool:
        """Can this rule automatically fix violations?"""
        return False

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    def validate_options(self, options: Any) -> Any:
        """Check raw options and return them in the form ``check`` expects.

        Raises ConfigError for options the rule cannot accept.
        """
        return options

    @abstractmethod
    def check(self, context: RuleContext) -> list[InternalIssue]:
        """Run the check and return found issues."""
        pass

    # Helper method for consistent issue creation
    def _create_issue(
        self,
        file_path: Path,
        line: int,
        message: str,
        column: int = 0,
        end_line: int | None = None,
        end_column: int | None = None,
        message_id: str | None = None,
        fix: TextEdit | None = None,
    ) -> InternalIssue:
        """Helper to create an issue with rule defaults."""
        return InternalIssue(
            file_path=file_path,
            line=line,
            rule_id=self.rule_id,
            message=message,
            severity=self.severity,
            auto_fixable=self.auto_fixable and fix is not None,
            column=column,
            end_line=end_line,
            end_column=end_column,
            message_id=message_id,
            fix=fix,
        )
