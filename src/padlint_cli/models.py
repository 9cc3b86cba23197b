from typing import Optional

from pydantic import BaseModel


class LintIssue(BaseModel):
    severity: str
    file_path: str
    line_number: int
    column: int
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    rule_id: str
    message: str
    auto_fixable: bool = False
