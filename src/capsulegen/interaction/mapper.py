"""Map pointer input back onto entities and offsets.

Uses the same split geometry conventions as the compositor and the logo
boxes returned by the last render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Mapping, Optional

from capsulegen.common.enums import DragMode, Entity, SplitStyle
from capsulegen.models.config import SplitConfig
from capsulegen.models.geometry import Frame, Point, Rect, round_half_up
from capsulegen.models.offsets import Offsets
from capsulegen.models.rasters import resolve_assignment

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Where the frame is displayed, in client (display) coordinates."""

    left: float
    top: float
    width: float
    height: float

    def scale_to(self, frame: Frame) -> tuple[float, float]:
        """Frame pixels per display pixel on each axis."""
        sx = frame.width / self.width if self.width > 0 else 1.0
        sy = frame.height / self.height if self.height > 0 else 1.0
        return (sx, sy)


@dataclass(frozen=True)
class HitTarget:
    """What a pointer press would drag."""

    mode: DragMode
    entity: Entity


def to_frame_space(client: Point, viewport: Viewport, frame: Frame) -> Point:
    """Convert a display-space pointer position to frame pixels."""
    sx, sy = viewport.scale_to(frame)
    return Point((client.x - viewport.left) * sx, (client.y - viewport.top) * sy)


def frame_delta(previous: Point, current: Point, viewport: Viewport, frame: Frame) -> Point:
    """Pointer movement between two display positions, in whole frame pixels."""
    sx, sy = viewport.scale_to(frame)
    return Point(
        round_half_up((current.x - previous.x) * sx),
        round_half_up((current.y - previous.y) * sy),
    )


def hit_test(
    point: Point,
    boxes: Mapping[Entity, Rect],
    split_config: SplitConfig,
    frame: Frame,
) -> HitTarget:
    """Classify a frame-space point.

    Logos are tested first, game1 before game2, since they are drawn on top.
    Otherwise the background side is picked from the relative position. The
    diagonal test is a fixed anti-diagonal and does not follow the split
    angle. Points outside the frame go through the same formulas.
    """
    for entity in (Entity.GAME1, Entity.GAME2):
        box = boxes.get(entity)
        if box is not None and box.contains(point.x, point.y):
            return HitTarget(DragMode.LOGO, entity)

    rel_x = point.x / frame.width if frame.width else 0.0
    rel_y = point.y / frame.height if frame.height else 0.0

    if split_config.style is SplitStyle.HORIZONTAL:
        first_position = rel_y < 0.5
    elif split_config.style is SplitStyle.VERTICAL:
        first_position = rel_x < 0.5
    else:
        first_position = rel_x + rel_y < 1

    first, second = resolve_assignment(split_config.swap_backgrounds)
    return HitTarget(DragMode.BACKGROUND, first if first_position else second)


def _clamp(value: float, limit: Optional[float]) -> float:
    if limit is None:
        return value
    return max(-limit, min(limit, value))


def apply_drag(
    mode: DragMode,
    entity: Entity,
    delta: Point,
    offsets: Offsets,
    limit: Optional[float] = None,
) -> Offsets:
    """Add a frame-space delta to the dragged entity's offset.

    Offsets are already in destination pixels, so the delta is applied 1:1.

    Args:
        mode: Logo or background layer
        entity: Entity being dragged
        delta: Movement in frame pixels
        offsets: Current offset state
        limit: Optional symmetric bound for the resulting x/y

    Returns:
        New offset state; *offsets* is not modified
    """
    current = offsets.for_entity(entity)
    if mode is DragMode.LOGO:
        moved = current.logo.model_copy(
            update={
                "x": _clamp(current.logo.x + delta.x, limit),
                "y": _clamp(current.logo.y + delta.y, limit),
            }
        )
        updated = current.model_copy(update={"logo": moved})
    else:
        moved_bg = current.background.model_copy(
            update={
                "x": _clamp(current.background.x + delta.x, limit),
                "y": _clamp(current.background.y + delta.y, limit),
            }
        )
        updated = current.model_copy(update={"background": moved_bg})

    logger.debug("Drag %s/%s by (%s, %s)", mode.value, entity.value, delta.x, delta.y)
    return offsets.replace_entity(entity, updated)
