"""Stateful pointer drag built on the pure mapper functions."""

from __future__ import annotations

from typing import Mapping, Optional

from capsulegen.common.enums import Entity
from capsulegen.interaction.mapper import (
    HitTarget,
    Viewport,
    apply_drag,
    frame_delta,
    hit_test,
    to_frame_space,
)
from capsulegen.models.config import SplitConfig
from capsulegen.models.geometry import Frame, Point, Rect
from capsulegen.models.offsets import Offsets


class DragSession:
    """Track one press-move-release gesture.

    The anchor only advances when a move produced a non-zero whole-pixel
    delta, so slow drags accumulate instead of rounding away.
    """

    def __init__(self, limit: Optional[float] = None) -> None:
        self.limit = limit
        self.target: Optional[HitTarget] = None
        self._anchor: Optional[Point] = None

    @property
    def active(self) -> bool:
        return self.target is not None

    def begin(
        self,
        client: Point,
        viewport: Viewport,
        frame: Frame,
        boxes: Mapping[Entity, Rect],
        split_config: SplitConfig,
    ) -> HitTarget:
        """Start dragging whatever lies under *client*."""
        point = to_frame_space(client, viewport, frame)
        self.target = hit_test(point, boxes, split_config, frame)
        self._anchor = client
        return self.target

    def move(
        self, client: Point, viewport: Viewport, frame: Frame, offsets: Offsets
    ) -> Optional[Offsets]:
        """Apply pointer movement since the last accepted move.

        Returns:
            Updated offsets, or None when inactive or nothing moved
        """
        if self.target is None or self._anchor is None:
            return None
        delta = frame_delta(self._anchor, client, viewport, frame)
        if delta.x == 0 and delta.y == 0:
            return None
        self._anchor = client
        return apply_drag(self.target.mode, self.target.entity, delta, offsets, self.limit)

    def end(self) -> None:
        self.target = None
        self._anchor = None
