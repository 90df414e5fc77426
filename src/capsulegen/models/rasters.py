"""Raster slots for the two entities and the swap resolution shared by all
drawing stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from PIL import Image

from capsulegen.common.enums import Entity


@dataclass
class EntityRasters:
    """Decoded images owned by one entity; either may still be missing."""

    background: Optional[Image.Image] = None
    logo: Optional[Image.Image] = None


@dataclass
class RasterSet:
    """Rasters for both entities."""

    game1: EntityRasters = field(default_factory=EntityRasters)
    game2: EntityRasters = field(default_factory=EntityRasters)

    def __getitem__(self, entity: Entity) -> EntityRasters:
        return self.game1 if entity is Entity.GAME1 else self.game2

    @property
    def ready(self) -> bool:
        """True when all four rasters are loaded."""
        return all(
            slot.background is not None and slot.logo is not None
            for slot in (self.game1, self.game2)
        )


def resolve_assignment(swap: bool) -> tuple[Entity, Entity]:
    """Return the entities drawn at the first and second positions.

    Every per-position lookup (image, offset, scale) goes through this
    function so a swap always moves them together.
    """
    if swap:
        return (Entity.GAME2, Entity.GAME1)
    return (Entity.GAME1, Entity.GAME2)
