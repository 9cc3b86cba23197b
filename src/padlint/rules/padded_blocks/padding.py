from dataclasses import dataclass

from padlint_tree_sitter import Token

from ...ast_utils import lines_between
from .boundaries import BoundaryTokens


@dataclass(frozen=True)
class PaddingObservation:
    top_padded: bool
    bottom_padded: bool


def is_padding_between_tokens(first: Token, second: Token) -> bool:
    """At least one fully blank line separates the two tokens."""
    return lines_between(first, second) >= 2


def observe_padding(boundaries: BoundaryTokens) -> PaddingObservation:
    return PaddingObservation(
        top_padded=is_padding_between_tokens(boundaries.before, boundaries.first_content),
        bottom_padded=is_padding_between_tokens(boundaries.last_content, boundaries.after),
    )
