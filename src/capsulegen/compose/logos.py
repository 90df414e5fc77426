"""Logo sizing, placement and quality-preserving downscale."""

from __future__ import annotations

import logging
from typing import Final, Mapping, Optional

from PIL import Image

from capsulegen.common.enums import Entity, LogoPosition, SplitStyle
from capsulegen.constants import LOGO_GAP, MAX_LOGO_HEIGHT_RATIO
from capsulegen.models.config import LogoConfig
from capsulegen.models.geometry import Frame, Point, Rect, round_half_up
from capsulegen.models.offsets import Offsets
from capsulegen.models.rasters import RasterSet, resolve_assignment
from capsulegen.types.raster import RasterLike

logger: Final = logging.getLogger(__name__)


def logo_dimensions(logo: RasterLike, max_height: float, scale: float) -> tuple[float, float]:
    """Size a logo keeping its aspect ratio.

    The natural height is capped at *max_height* but never enlarged to it;
    *scale* is then applied uniformly.

    Returns:
        Tuple of (width, height) in frame pixels
    """
    aspect = logo.width / logo.height
    height = min(max_height, logo.height) * scale
    return (height * aspect, height)


def logo_position(
    style: SplitStyle,
    frame: Frame,
    width: float,
    height: float,
    second: bool,
) -> Point:
    """Top-left corner of a logo placed inside its split region."""
    fw, fh = frame.width, frame.height
    anchor = 0.75 if second else 0.25

    if style is SplitStyle.HORIZONTAL:
        return Point((fw - width) / 2, fh * anchor - height / 2)
    if style is SplitStyle.VERTICAL:
        return Point(fw * anchor - width / 2, (fh - height) / 2)
    return Point(fw * anchor - width / 2, fh * anchor - height / 2)


def _is_drawable(logo: Optional[RasterLike]) -> bool:
    return logo is not None and logo.width > 0 and logo.height > 0


def layout_logos(
    frame: Frame,
    logos: Mapping[Entity, Optional[RasterLike]],
    style: SplitStyle,
    config: LogoConfig,
    offsets: Offsets,
) -> dict[Entity, Rect]:
    """Compute logo boxes without drawing.

    The entity shown at each position comes from :func:`resolve_assignment`;
    its own scale and placement offset travel with it, and the result is
    keyed by that entity. Missing logos get no box.

    Args:
        frame: Output frame
        logos: Logo raster per entity
        style: Split style (used by split-relative placement)
        config: Logo configuration
        offsets: Offset state

    Returns:
        Bounding boxes keyed by logical entity
    """
    max_height = frame.height * MAX_LOGO_HEIGHT_RATIO
    slots: list[tuple[Entity, float, float]] = []
    for entity in resolve_assignment(config.swap_logos):
        logo = logos.get(entity)
        if not _is_drawable(logo):
            logger.debug("No logo for %s; skipping", entity.value)
            continue
        width, height = logo_dimensions(logo, max_height, config.scales.for_entity(entity))
        slots.append((entity, width, height))

    first_entity = resolve_assignment(config.swap_logos)[0]
    boxes: dict[Entity, Rect] = {}

    if config.position is LogoPosition.CENTER:
        total_width = sum(w for _, w, _ in slots) + LOGO_GAP * (len(slots) - 1)
        x = (frame.width - total_width) / 2
        for entity, width, height in slots:
            shift = offsets.for_entity(entity).logo
            boxes[entity] = Rect(
                x + shift.x, (frame.height - height) / 2 + shift.y, width, height
            )
            x += width + LOGO_GAP
        return boxes

    for entity, width, height in slots:
        pos = logo_position(style, frame, width, height, second=entity is not first_entity)
        shift = offsets.for_entity(entity).logo
        boxes[entity] = Rect(pos.x + shift.x, pos.y + shift.y, width, height)
    return boxes


def downscale_plan(
    source_size: tuple[int, int], dest_width: float, dest_height: float
) -> list[tuple[int, int]]:
    """Resize steps for drawing a logo at the destination size.

    Sources more than twice the destination on either axis go through an
    intermediate image at exactly twice the destination size.
    """
    dw, dh = round_half_up(dest_width), round_half_up(dest_height)
    src_w, src_h = source_size
    if src_w > dest_width * 2 or src_h > dest_height * 2:
        return [(dw * 2, dh * 2), (dw, dh)]
    return [(dw, dh)]


def draw_smooth_logo(canvas: Image.Image, logo: Optional[Image.Image], box: Rect) -> bool:
    """Resize *logo* into *box* and composite it onto *canvas*.

    Returns:
        True if the logo was drawn
    """
    if not _is_drawable(logo):
        return False
    plan = downscale_plan(logo.size, box.width, box.height)
    dw, dh = plan[-1]
    if dw <= 0 or dh <= 0:
        logger.debug("Logo box %s rounds to nothing; skipping", box)
        return False

    resized = logo if logo.mode == "RGBA" else logo.convert("RGBA")
    for size in plan:
        resized = resized.resize(size, Image.Resampling.LANCZOS)

    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    layer.paste(resized, (round_half_up(box.x), round_half_up(box.y)))
    canvas.alpha_composite(layer)
    return True


def draw_logos(
    canvas: Image.Image,
    frame: Frame,
    rasters: RasterSet,
    style: SplitStyle,
    config: LogoConfig,
    offsets: Offsets,
) -> dict[Entity, Rect]:
    """Draw both logos and return the boxes that were actually painted."""
    logos = {entity: rasters[entity].logo for entity in Entity}
    boxes = layout_logos(frame, logos, style, config, offsets)

    painted: dict[Entity, Rect] = {}
    for entity, box in boxes.items():
        if draw_smooth_logo(canvas, logos[entity], box):
            painted[entity] = box
    return painted
