"""Full frame rendering: backgrounds, then logos, then the frame border."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Optional

from PIL import Image, ImageDraw

from capsulegen.common.enums import Entity
from capsulegen.compose.logos import draw_logos
from capsulegen.compose.split import draw_split_backgrounds
from capsulegen.models.config import FrameBorderConfig, LogoConfig, SplitConfig
from capsulegen.models.geometry import Frame, Rect
from capsulegen.models.offsets import Offsets
from capsulegen.models.rasters import RasterSet

logger: Final = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """A drawn frame and the logo boxes painted into it.

    ``bounding_boxes`` belongs to this render only; callers replace their
    copy with it rather than merging.
    """

    image: Image.Image
    bounding_boxes: dict[Entity, Rect] = field(default_factory=dict)


def draw_frame_border(canvas: Image.Image, config: FrameBorderConfig) -> None:
    """Outline the canvas with a band *config.width* pixels wide."""
    if config.width <= 0:
        return
    width, height = canvas.size
    ImageDraw.Draw(canvas).rectangle(
        (0, 0, width - 1, height - 1), outline=config.color, width=config.width
    )


def render(
    frame: Frame,
    rasters: RasterSet,
    split_config: SplitConfig,
    logo_config: LogoConfig,
    offsets: Offsets,
    frame_border: Optional[FrameBorderConfig] = None,
) -> RenderResult:
    """Compose one frame.

    Missing rasters only skip their own draw; nothing here raises for bad
    input geometry.

    Args:
        frame: Output size
        rasters: Background and logo per entity
        split_config: Background split settings
        logo_config: Logo settings
        offsets: Pan/zoom and logo offsets per entity
        frame_border: Optional outer border

    Returns:
        RenderResult with the RGBA image and logo bounding boxes
    """
    canvas = Image.new("RGBA", (max(frame.width, 0), max(frame.height, 0)), (0, 0, 0, 0))
    if frame.width <= 0 or frame.height <= 0:
        logger.debug("Empty frame %s; nothing to draw", frame)
        return RenderResult(canvas)

    draw_split_backgrounds(canvas, frame, split_config, rasters, offsets)
    boxes = draw_logos(canvas, frame, rasters, split_config.style, logo_config, offsets)

    if frame_border is not None:
        draw_frame_border(canvas, frame_border)

    logger.debug(
        "Rendered %dx%d frame with logos %s",
        frame.width,
        frame.height,
        sorted(entity.value for entity in boxes),
    )
    return RenderResult(canvas, boxes)
