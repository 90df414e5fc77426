# src/capsulegen/assets/protocols.py
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from PIL import Image

from capsulegen.common.enums import AssetRole, Entity
from capsulegen.models.rasters import EntityRasters, RasterSet


@runtime_checkable
class RasterSource(Protocol):
    """Protocol for whatever supplies decoded images.

    Fetching, searching and caching live behind this interface; the renderer
    only sees the resolved image or None.
    """

    def load(self, entity: Entity, role: AssetRole) -> Optional[Image.Image]:
        """Return the image for a slot, or None if it is not available.

        Args:
            entity: game1 or game2
            role: Background or logo
        """
        ...


def load_rasters(source: RasterSource) -> RasterSet:
    """Ask *source* for all four slots."""
    return RasterSet(
        **{
            entity.value: EntityRasters(
                background=source.load(entity, AssetRole.BACKGROUND),
                logo=source.load(entity, AssetRole.LOGO),
            )
            for entity in Entity
        }
    )


class MockRasterSource:
    """In-memory RasterSource for testing."""

    def __init__(
        self, images: Optional[dict[tuple[Entity, AssetRole], Image.Image]] = None
    ) -> None:
        self.images = images or {}
        self.load_calls: list[tuple[Entity, AssetRole]] = []

    def load(self, entity: Entity, role: AssetRole) -> Optional[Image.Image]:
        """Record the call and return the stored image, if any."""
        self.load_calls.append((entity, role))
        return self.images.get((entity, role))

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.load_calls = []


def create_mock_raster_source(
    images: Optional[dict[tuple[Entity, AssetRole], Image.Image]] = None,
) -> MockRasterSource:
    """Create and return a mock raster source for testing."""
    return MockRasterSource(images)
