"""Structural type for decoded rasters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RasterLike(Protocol):
    """Anything with pixel dimensions.

    ``PIL.Image.Image`` satisfies this; geometry code only needs the size,
    so tests can pass lightweight stand-ins.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...
