from padlint.models import InternalIssue

from .models import LintIssue


def internal_issue_to_lint_issue(issue: InternalIssue) -> LintIssue:
    """Convert an internal dataclass issue to an external Pydantic issue"""
    return LintIssue(
        severity=issue.severity.value.upper(),  # dataclass uses 'style', the report uses 'STYLE'
        file_path=str(issue.file_path),
        line_number=issue.line,
        column=issue.column + 1,  # editors count columns from 1
        end_line=issue.end_line,
        end_column=issue.end_column + 1 if issue.end_column is not None else None,
        rule_id=issue.rule_id,
        message=issue.message,
        auto_fixable=issue.auto_fixable,
    )
