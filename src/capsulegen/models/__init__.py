"""Value types shared by the composition engine."""

from capsulegen.models.config import FrameBorderConfig, LogoConfig, LogoScales, SplitConfig
from capsulegen.models.geometry import Frame, Point, Projection, Rect
from capsulegen.models.offsets import (
    EntityOffsets,
    LogoPlacementOffset,
    Offsets,
    PanZoomOffset,
)
from capsulegen.models.rasters import EntityRasters, RasterSet, resolve_assignment

__all__ = [
    "EntityOffsets",
    "EntityRasters",
    "Frame",
    "FrameBorderConfig",
    "LogoConfig",
    "LogoPlacementOffset",
    "LogoScales",
    "Offsets",
    "PanZoomOffset",
    "Point",
    "Projection",
    "RasterSet",
    "Rect",
    "SplitConfig",
    "resolve_assignment",
]
