from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    INFO = "info"


@dataclass(frozen=True)
class TextEdit:
    """Replace the characters in ``range`` (start, end offsets) with ``text``."""

    range: tuple[int, int]
    text: str


@dataclass
class InternalIssue:
    """Internal representation of a linting issue"""

    file_path: Path
    line: int
    rule_id: str
    message: str
    severity: Severity
    auto_fixable: bool
    column: int = 0
    end_line: int | None = None
    end_column: int | None = None
    message_id: str | None = None
    fix: TextEdit | None = None
