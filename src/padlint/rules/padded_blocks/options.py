"""Construct kinds and resolution of rule options into a padding policy."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

ALWAYS = "always"
NEVER = "never"


class ConstructKind(Enum):
    """Every kind of construct the rule can check, valued by its option key."""

    GENERIC_BLOCK = "blocks"
    IF_ELSE_BLOCK = "ifsAndElses"
    FOR_BLOCK = "forLoops"
    FOR_IN_BLOCK = "forInLoops"
    FOR_OF_BLOCK = "forOfLoops"
    WHILE_BLOCK = "whileLoops"
    DO_WHILE_BLOCK = "doWhileLoops"
    FUNCTION_DECLARATION_BLOCK = "functionDeclarations"
    FUNCTION_EXPRESSION_BLOCK = "functionExpressions"
    ARROW_FUNCTION_BLOCK = "arrowFunctions"
    TRY_BLOCK = "trys"
    CATCH_BLOCK = "catches"
    OBJECT_LITERAL = "objects"
    SWITCH_BODY = "switches"
    CLASS_BODY = "classes"
    INTERFACE_BODY = "interfaces"

    @property
    def option_key(self) -> str:
        return self.value

    @property
    def is_block(self) -> bool:
        return self not in NON_BLOCK_KINDS


NON_BLOCK_KINDS = frozenset(
    {
        ConstructKind.OBJECT_LITERAL,
        ConstructKind.SWITCH_BODY,
        ConstructKind.CLASS_BODY,
        ConstructKind.INTERFACE_BODY,
    }
)


@dataclass(frozen=True)
class PaddingPolicy:
    """Resolved, read-only configuration of one rule instance.

    ``required`` maps each checked kind to True (padding required) or False
    (padding forbidden). Kinds missing from it are not checked at all.
    """

    required: Mapping[ConstructKind, bool] = field(default_factory=dict)
    allow_single_line_blocks: bool = False

    def __post_init__(self):
        object.__setattr__(self, "required", MappingProxyType(dict(self.required)))

    def observes(self, kind: ConstructKind) -> bool:
        return kind in self.required

    def requires_padding(self, kind: ConstructKind) -> bool:
        return self.required[kind]

    @property
    def observes_blocks(self) -> bool:
        return any(kind.is_block for kind in self.required)


def resolve_options(
    style: str | Mapping[str, str] | None = None,
    allow_single_line_blocks: bool = False,
) -> PaddingPolicy:
    """Turn the rule's option values into a PaddingPolicy.

    ``style`` is either "always"/"never", applied to every kind, or a mapping
    from option keys to "always"/"never" where only the named kinds are
    checked. No style at all means "always". Inputs are assumed validated.
    """
    if style is None:
        style = ALWAYS

    if isinstance(style, str):
        should_pad = style == ALWAYS
        required = {kind: should_pad for kind in ConstructKind}
    else:
        required = {
            kind: style[kind.option_key] == ALWAYS
            for kind in ConstructKind
            if kind.option_key in style
        }

    return PaddingPolicy(required=required, allow_single_line_blocks=allow_single_line_blocks is True)
