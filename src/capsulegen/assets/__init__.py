"""Raster sources feeding the renderer."""

from capsulegen.assets.files import FileRasterSource
from capsulegen.assets.protocols import MockRasterSource, RasterSource, load_rasters

__all__ = ["FileRasterSource", "MockRasterSource", "RasterSource", "load_rasters"]
