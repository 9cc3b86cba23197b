import logging
from pathlib import Path
from typing import Any, Iterable, List

from padlint_tree_sitter import Dialect, JSParser, SourceCode

from .models import InternalIssue, Severity
from .registry import RuleRegistry
from .rules.base import RuleContext

logger = logging.getLogger(__name__)

PARSE_ERROR_RULE_ID = "parse-error"


class LinterEngine:
    """Core engine: parses a source and runs the enabled rules over it"""

    def __init__(
        self,
        rule_options: dict[str, Any] | None = None,
        registry: RuleRegistry | None = None,
        select: Iterable[str] | None = None,
        ignore: Iterable[str] | None = None,
    ):
        self.registry = registry or RuleRegistry()
        self.rules = self.registry.get_enabled_rules(select=select, ignore=ignore)
        raw_options = rule_options or {}
        # Validate up front so a bad configuration fails before any file is read
        self.rule_options = {rule.rule_id: rule.validate_options(raw_options.get(rule.rule_id)) for rule in self.rules}
        self._parsers: dict[Dialect, JSParser] = {}

    def lint_string(
        self, source: str, file_path: Path | str = "<input>", dialect: Dialect | None = None
    ) -> List[InternalIssue]:
        """Run all enabled rules on a source string"""
        file_path = Path(file_path)
        dialect = dialect or Dialect.for_path(file_path)
        parse_result = self._parser_for(dialect).parse_string(source)

        if parse_result.errors:
            logger.warning("%s: %d syntax error(s), rules skipped", file_path, len(parse_result.errors))
            return [self._parse_error_issue(file_path, error) for error in parse_result.errors]

        source_code = SourceCode(parse_result)
        issues: List[InternalIssue] = []
        for rule in self.rules:
            context = RuleContext(
                file_path=file_path, source_code=source_code, options=self.rule_options[rule.rule_id]
            )
            found = rule.check(context)
            logger.debug("%s: %s found %d issue(s)", file_path, rule.rule_id, len(found))
            issues.extend(found)

        return sorted(issues, key=lambda x: (x.line, x.column, x.rule_id))

    def lint_file(self, file_path: Path, dialect: Dialect | None = None) -> List[InternalIssue]:
        """Run all enabled rules on a file"""
        source = file_path.read_text(encoding="utf-8")
        return self.lint_string(source, file_path, dialect)

    def _parser_for(self, dialect: Dialect) -> JSParser:
        if dialect not in self._parsers:
            self._parsers[dialect] = JSParser(dialect)
        return self._parsers[dialect]

    def _parse_error_issue(self, file_path: Path, error: str) -> InternalIssue:
        position, _, message = error.partition(": ")
        line, _, column = position.partition(":")
        return InternalIssue(
            file_path=file_path,
            line=int(line),
            column=int(column),
            rule_id=PARSE_ERROR_RULE_ID,
            message=message,
            severity=Severity.ERROR,
            auto_fixable=False,
        )
