"""Layout configuration snapshots consumed by the renderer."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from capsulegen.common.enums import Entity, LogoPosition, SplitStyle
from capsulegen.constants import (
    DEFAULT_BORDER_COLOR,
    DEFAULT_FRAME_BORDER_COLOR,
    DEFAULT_SPLIT_ANGLE,
)

HEX_COLOR_RE = re.compile(r"^#([0-9A-Fa-f]{3}){1,2}$")


def validate_hex_color(value: str) -> str:
    """Accept ``#rgb`` or ``#rrggbb`` colour strings.

    Raises:
        ValueError: If the value is not a hex colour
    """
    if not HEX_COLOR_RE.match(value):
        raise ValueError(f"invalid hex colour: {value!r}")
    return value


class SplitConfig(BaseModel):
    """How the two backgrounds share the frame."""

    model_config = ConfigDict(frozen=True)

    style: SplitStyle = SplitStyle.DIAGONAL
    angle_degrees: float = Field(
        DEFAULT_SPLIT_ANGLE, description="Seam angle, only used by the diagonal style"
    )
    border_width: float = Field(0.0, ge=0, description="Separator thickness in pixels")
    border_color: str = DEFAULT_BORDER_COLOR
    swap_backgrounds: bool = False

    @field_validator("border_color")
    @classmethod
    def check_border_color(cls, v: str) -> str:
        return validate_hex_color(v)


class LogoScales(BaseModel):
    """Uniform logo scale per logical entity."""

    model_config = ConfigDict(frozen=True)

    game1: float = 1.0
    game2: float = 1.0

    def for_entity(self, entity: Entity) -> float:
        """Scale for *entity*; non-positive values fall back to 1."""
        scale = self.game1 if entity is Entity.GAME1 else self.game2
        return scale if scale > 0 else 1.0


class LogoConfig(BaseModel):
    """Logo placement settings."""

    model_config = ConfigDict(frozen=True)

    position: LogoPosition = LogoPosition.CENTER
    swap_logos: bool = False
    scales: LogoScales = Field(default_factory=LogoScales)


class FrameBorderConfig(BaseModel):
    """Optional outline drawn around the whole frame, above everything else."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(0, ge=0, description="Visible band width in pixels (0 disables)")
    color: str = DEFAULT_FRAME_BORDER_COLOR

    @field_validator("color")
    @classmethod
    def check_color(cls, v: str) -> str:
        return validate_hex_color(v)
