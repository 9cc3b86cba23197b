from .base import BaseRule, RuleContext
from .padded_blocks import PaddedBlocksRule

__all__ = ["BaseRule", "RuleContext", "PaddedBlocksRule"]
