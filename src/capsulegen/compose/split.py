"""Split the frame between two backgrounds and draw the separator."""

from __future__ import annotations

import logging
import math
from typing import Final

from PIL import Image, ImageDraw

from capsulegen.common.enums import FitMode, SplitStyle
from capsulegen.models.config import SplitConfig
from capsulegen.models.geometry import Frame, Point, Rect, round_half_up
from capsulegen.models.offsets import Offsets
from capsulegen.models.rasters import RasterSet, resolve_assignment
from capsulegen.compose.projector import draw_image_fitted

logger: Final = logging.getLogger(__name__)


def split_regions(frame: Frame, config: SplitConfig) -> tuple[Rect, Rect]:
    """Destination rectangles for the first and second backgrounds.

    Straight splits give up half the border width on each side of the
    midline. Both diagonal regions are the whole frame; the second one is
    clipped later.
    """
    half_border = config.border_width / 2
    width, height = frame.width, frame.height

    if config.style is SplitStyle.HORIZONTAL:
        half = height / 2
        return (
            Rect(0, 0, width, half - half_border),
            Rect(0, half + half_border, width, half - half_border),
        )
    if config.style is SplitStyle.VERTICAL:
        half = width / 2
        return (
            Rect(0, 0, half - half_border, height),
            Rect(half + half_border, 0, half - half_border, height),
        )
    return (frame.to_rect(), frame.to_rect())


def diagonal_line(frame: Frame, angle_degrees: float) -> tuple[Point, Point]:
    """End points of the seam through the frame centre.

    The segment is as long as the frame diagonal, so it leaves the frame on
    both ends whatever the angle.
    """
    angle = angle_degrees * math.pi / 180
    center = frame.center
    radius = math.hypot(frame.width, frame.height) / 2
    dx = radius * math.cos(angle)
    dy = radius * math.sin(angle)
    return (
        Point(center.x - dx, center.y - dy),
        Point(center.x + dx, center.y + dy),
    )


def diagonal_clip_polygon(frame: Frame, angle_degrees: float) -> list[Point]:
    """Polygon covering the part of the frame where the second background shows.

    Starts with the seam and closes through two frame corners picked by the
    quadrant of the angle.
    """
    start, end = diagonal_line(frame, angle_degrees)
    width, height = frame.width, frame.height
    angle = angle_degrees * math.pi / 180

    points = [start, end]
    if angle <= math.pi / 2:
        points += [Point(width, end.y), Point(width, height), Point(0, height), Point(0, start.y)]
    elif angle <= math.pi:
        points += [Point(end.x, height), Point(0, height), Point(0, 0), Point(start.x, 0)]
    elif angle <= 1.5 * math.pi:
        points += [Point(0, end.y), Point(0, 0), Point(width, 0), Point(width, start.y)]
    else:
        points += [Point(end.x, 0), Point(width, 0), Point(width, height), Point(start.x, height)]
    return points


def polygon_mask(frame: Frame, polygon: list[Point]) -> Image.Image:
    """Rasterise *polygon* into an "L" mask the size of the frame."""
    mask = Image.new("L", frame.size, 0)
    ImageDraw.Draw(mask).polygon([(p.x, p.y) for p in polygon], fill=255)
    return mask


def separator_rect(frame: Frame, config: SplitConfig) -> Rect | None:
    """Bar drawn between straight splits, or None for diagonal splits."""
    bw = config.border_width
    if config.style is SplitStyle.HORIZONTAL:
        return Rect(0, frame.height / 2 - bw / 2, frame.width, bw)
    if config.style is SplitStyle.VERTICAL:
        return Rect(frame.width / 2 - bw / 2, 0, bw, frame.height)
    return None


def draw_border(canvas: Image.Image, frame: Frame, config: SplitConfig) -> None:
    """Draw the separator; a non-positive width draws nothing."""
    if config.border_width <= 0:
        return

    draw = ImageDraw.Draw(canvas)
    bar = separator_rect(frame, config)
    if bar is not None:
        left, top, right, bottom = bar.to_box()
        if right > left and bottom > top:
            draw.rectangle((left, top, right - 1, bottom - 1), fill=config.border_color)
        return

    start, end = diagonal_line(frame, config.angle_degrees)
    draw.line(
        [(start.x, start.y), (end.x, end.y)],
        fill=config.border_color,
        width=max(1, round_half_up(config.border_width)),
    )


def draw_split_backgrounds(
    canvas: Image.Image,
    frame: Frame,
    config: SplitConfig,
    rasters: RasterSet,
    offsets: Offsets,
) -> None:
    """Draw both backgrounds and the separator onto *canvas*.

    The first/second entities come from :func:`resolve_assignment`, which
    selects image and pan/zoom offset together.
    """
    first, second = resolve_assignment(config.swap_backgrounds)
    first_region, second_region = split_regions(frame, config)

    draw_image_fitted(
        canvas,
        rasters[first].background,
        first_region,
        FitMode.COVER,
        offsets.for_entity(first).background,
    )

    clip = None
    if config.style is SplitStyle.DIAGONAL:
        clip = polygon_mask(frame, diagonal_clip_polygon(frame, config.angle_degrees))

    draw_image_fitted(
        canvas,
        rasters[second].background,
        second_region,
        FitMode.COVER,
        offsets.for_entity(second).background,
        clip=clip,
    )

    draw_border(canvas, frame, config)
    logger.debug(
        "Drew %s split (first=%s, second=%s, border=%s)",
        config.style.value,
        first.value,
        second.value,
        config.border_width,
    )
