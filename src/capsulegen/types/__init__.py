"""Type definitions for capsulegen."""

from .raster import RasterLike

__all__ = ["RasterLike"]
