"""Validation of raw ``padded-blocks`` options."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError, model_validator

from ...errors import ConfigError

PaddingValue = Literal["always", "never"]


class PaddingPolicyTable(BaseModel):
    """Per-kind form of the style option. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    blocks: Optional[PaddingValue] = None
    ifsAndElses: Optional[PaddingValue] = None
    forLoops: Optional[PaddingValue] = None
    forInLoops: Optional[PaddingValue] = None
    forOfLoops: Optional[PaddingValue] = None
    whileLoops: Optional[PaddingValue] = None
    doWhileLoops: Optional[PaddingValue] = None
    functionDeclarations: Optional[PaddingValue] = None
    functionExpressions: Optional[PaddingValue] = None
    arrowFunctions: Optional[PaddingValue] = None
    trys: Optional[PaddingValue] = None
    catches: Optional[PaddingValue] = None
    objects: Optional[PaddingValue] = None
    switches: Optional[PaddingValue] = None
    classes: Optional[PaddingValue] = None
    interfaces: Optional[PaddingValue] = None

    @model_validator(mode="after")
    def _require_one_key(self):
        if not self.model_dump(exclude_none=True):
            raise ValueError("at least one construct kind must be configured")
        return self


class PaddedBlocksOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    style: Union[PaddingValue, PaddingPolicyTable] = "always"
    allowSingleLineBlocks: StrictBool = False

    def style_value(self) -> str | dict[str, str]:
        if isinstance(self.style, PaddingPolicyTable):
            return self.style.model_dump(exclude_none=True)
        return self.style


def parse_options(raw: Any) -> PaddedBlocksOptions:
    """Validate raw options, accepting a model, a mapping, a bare style string or None."""
    if isinstance(raw, PaddedBlocksOptions):
        return raw
    if raw is None:
        raw = {}
    elif isinstance(raw, str):
        raw = {"style": raw}
    try:
        return PaddedBlocksOptions.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid options for padded-blocks: {e}") from e
