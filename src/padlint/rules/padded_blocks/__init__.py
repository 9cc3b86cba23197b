"""The ``padded-blocks`` rule: blank-line padding just inside braces."""

from .boundaries import BoundaryTokens, locate_boundaries
from .classifier import classify
from .options import ConstructKind, PaddingPolicy, resolve_options
from .padding import PaddingObservation, observe_padding
from .reporter import ALWAYS_PAD_BLOCK, MESSAGES, NEVER_PAD_BLOCK, PaddingViolation, report_padding
from .rule import PaddedBlocksRule
from .schema import PaddedBlocksOptions, parse_options

__all__ = [
    "ALWAYS_PAD_BLOCK",
    "BoundaryTokens",
    "ConstructKind",
    "MESSAGES",
    "NEVER_PAD_BLOCK",
    "PaddedBlocksOptions",
    "PaddedBlocksRule",
    "PaddingObservation",
    "PaddingPolicy",
    "PaddingViolation",
    "classify",
    "locate_boundaries",
    "observe_padding",
    "parse_options",
    "report_padding",
    "resolve_options",
]
