import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from padlint_tree_sitter import Dialect

from .engine import LinterEngine
from .models import InternalIssue

logger = logging.getLogger(__name__)


@dataclass
class FixResult:
    source: str
    passes: int
    fixed_count: int
    issues: List[InternalIssue] = field(default_factory=list)

    @property
    def modified(self) -> bool:
        return self.fixed_count > 0


class AutoFixEngine:
    """Applies rule fixes and re-lints until the source converges"""

    def __init__(self, max_passes: int = 10):
        self.max_passes = max_passes

    def apply_fixes(self, source: str, issues: List[InternalIssue]) -> tuple[str, int]:
        """Applies non-overlapping fix edits in a single pass.

        Returns the new source and the number of edits applied. An edit that
        overlaps one already applied is left for a later pass.
        """
        edits = sorted(
            (issue.fix for issue in issues if issue.auto_fixable and issue.fix is not None),
            key=lambda e: e.range,
        )
        result = []
        last_offset = 0
        applied = 0
        for edit in edits:
            start, end = edit.range
            if start < last_offset:
                logger.debug("Skipping overlapping edit at %d-%d", start, end)
                continue
            logger.debug("Applying edit at %d-%d: %r", start, end, edit.text)
            result.append(source[last_offset:start])
            result.append(edit.text)
            last_offset = end
            applied += 1
        result.append(source[last_offset:])
        return "".join(result), applied

    def fix_string(
        self,
        engine: LinterEngine,
        source: str,
        file_path: Path | str = "<input>",
        dialect: Dialect | None = None,
    ) -> FixResult:
        passes = 0
        fixed_count = 0
        issues = engine.lint_string(source, file_path, dialect)

        while passes < self.max_passes:
            fixable = [i for i in issues if i.auto_fixable]
            if not fixable:
                break
            passes += 1
            new_source, applied = self.apply_fixes(source, fixable)
            logger.debug("%s: pass %d applied %d edit(s)", file_path, passes, applied)
            if new_source == source:
                break
            source = new_source
            fixed_count += applied
            issues = engine.lint_string(source, file_path, dialect)

        if passes == self.max_passes and any(i.auto_fixable for i in issues):
            logger.warning("%s: reached max fix passes (%d)", file_path, self.max_passes)

        return FixResult(source=source, passes=passes, fixed_count=fixed_count, issues=issues)

    def fix_file(self, engine: LinterEngine, file_path: Path, dialect: Dialect | None = None) -> FixResult:
        """Fix a file in place; the file is only rewritten when something changed."""
        source = file_path.read_text(encoding="utf-8")
        result = self.fix_string(engine, source, file_path, dialect)
        if result.source != source:
            file_path.write_text(result.source, encoding="utf-8")
        return result
