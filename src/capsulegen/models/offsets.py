"""Per-entity pan/zoom and logo placement state.

The caller owns these records; the engine only reads them and the drag
mapper returns updated copies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from capsulegen.common.enums import Entity


class PanZoomOffset(BaseModel):
    """Background pan/zoom inside its region.

    ``x``/``y`` are shifts in destination pixels; ``scale`` multiplies the
    automatic cover scale.
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(0.0, description="Horizontal shift in destination pixels")
    y: float = Field(0.0, description="Vertical shift in destination pixels")
    scale: float = Field(1.0, description="Zoom multiplier on top of the fitted scale")

    @property
    def effective_scale(self) -> float:
        """Scale usable as a divisor; non-positive values fall back to 1."""
        return self.scale if self.scale > 0 else 1.0


class LogoPlacementOffset(BaseModel):
    """Pixel shift applied on top of a computed logo position."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class EntityOffsets(BaseModel):
    """Both offset records owned by one entity."""

    model_config = ConfigDict(frozen=True)

    background: PanZoomOffset = Field(default_factory=PanZoomOffset)
    logo: LogoPlacementOffset = Field(default_factory=LogoPlacementOffset)


class Offsets(BaseModel):
    """Offset state for both entities."""

    model_config = ConfigDict(frozen=True)

    game1: EntityOffsets = Field(default_factory=EntityOffsets)
    game2: EntityOffsets = Field(default_factory=EntityOffsets)

    def for_entity(self, entity: Entity) -> EntityOffsets:
        return self.game1 if entity is Entity.GAME1 else self.game2

    def replace_entity(self, entity: Entity, offsets: EntityOffsets) -> Offsets:
        """Return a copy with one entity's offsets replaced."""
        return self.model_copy(update={entity.value: offsets})
