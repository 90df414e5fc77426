"""Plain geometry records in frame-pixel space."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position in pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class Frame:
    """Output canvas size in pixels."""

    width: int
    height: int

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    def to_rect(self) -> Rect:
        """Return the whole frame as a rectangle."""
        return Rect(0, 0, self.width, self.height)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; also used for logo bounding boxes."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, px: float, py: float) -> bool:
        """Check whether a point lies inside the rectangle, edges included."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def to_box(self) -> tuple[int, int, int, int]:
        """Snap to whole pixels as a Pillow ``(left, top, right, bottom)`` box."""
        left = round_half_up(self.x)
        top = round_half_up(self.y)
        return (
            left,
            top,
            max(left, round_half_up(self.right)),
            max(top, round_half_up(self.bottom)),
        )


@dataclass(frozen=True)
class Projection:
    """What to blit: a source sample rectangle and where it lands."""

    source: Rect
    dest: Rect


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)
