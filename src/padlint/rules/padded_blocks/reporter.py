"""Compares observed padding with the policy and builds fixes."""

from dataclasses import dataclass
from typing import List

from padlint_tree_sitter import Position, SourceCode

from ...ast_utils import detect_linebreak, is_token_on_same_line
from ...fixer import RuleFixer
from ...models import TextEdit
from .boundaries import BoundaryTokens
from .padding import PaddingObservation

ALWAYS_PAD_BLOCK = "alwaysPadBlock"
NEVER_PAD_BLOCK = "neverPadBlock"

MESSAGES = {
    ALWAYS_PAD_BLOCK: "Block must be padded by blank lines.",
    NEVER_PAD_BLOCK: "Block must not be padded by blank lines.",
}


@dataclass(frozen=True)
class PaddingViolation:
    start: Position
    end: Position
    message_id: str
    fix: TextEdit

    @property
    def message(self) -> str:
        return MESSAGES[self.message_id]


def report_padding(
    boundaries: BoundaryTokens,
    observation: PaddingObservation,
    requires_padding: bool,
    allow_single_line_blocks: bool,
    source_code: SourceCode,
) -> List[PaddingViolation]:
    """Return zero, one or two violations: top first, then bottom."""
    before, first = boundaries.before, boundaries.first_content
    last, after = boundaries.last_content, boundaries.after

    if allow_single_line_blocks and is_token_on_same_line(before, after):
        return []

    text = source_code.text
    top_gap = text[before.range[1] : first.range[0]]
    bottom_gap = text[last.range[1] : after.range[0]]
    violations = []

    if requires_padding:
        if not observation.top_padded:
            violations.append(
                PaddingViolation(
                    start=before.loc.start,
                    end=first.loc.start,
                    message_id=ALWAYS_PAD_BLOCK,
                    fix=RuleFixer.insert_text_after(before, detect_linebreak(top_gap)),
                )
            )
        if not observation.bottom_padded:
            violations.append(
                PaddingViolation(
                    start=last.loc.end,
                    end=after.loc.start,
                    message_id=ALWAYS_PAD_BLOCK,
                    fix=RuleFixer.insert_text_before(after, detect_linebreak(bottom_gap)),
                )
            )
    else:
        # The replaced range stops at the start of the content token's line,
        # so the indentation in front of it survives the edit.
        if observation.top_padded:
            violations.append(
                PaddingViolation(
                    start=before.loc.start,
                    end=first.loc.start,
                    message_id=NEVER_PAD_BLOCK,
                    fix=RuleFixer.replace_text_range(
                        before.range[1], first.range[0] - first.loc.start.column, detect_linebreak(top_gap)
                    ),
                )
            )
        if observation.bottom_padded:
            violations.append(
                PaddingViolation(
                    start=last.loc.end,
                    end=after.loc.start,
                    message_id=NEVER_PAD_BLOCK,
                    fix=RuleFixer.replace_text_range(
                        last.range[1], after.range[0] - after.loc.start.column, detect_linebreak(bottom_gap)
                    ),
                )
            )

    return violations
