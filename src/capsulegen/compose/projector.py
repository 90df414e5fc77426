"""Fit a source image into a destination rectangle under pan/zoom."""

from __future__ import annotations

import logging
from typing import Final, Optional

from PIL import Image, ImageChops, ImageDraw

from capsulegen.common.enums import FitMode
from capsulegen.models.geometry import Projection, Rect
from capsulegen.models.offsets import PanZoomOffset
from capsulegen.types.raster import RasterLike

logger: Final = logging.getLogger(__name__)


def project(
    image: Optional[RasterLike],
    dest: Rect,
    mode: FitMode = FitMode.COVER,
    offset: Optional[PanZoomOffset] = None,
) -> Optional[Projection]:
    """Work out which part of *image* lands where inside *dest*.

    Cover mode keeps *dest* and picks a source window; pan offsets are in
    destination pixels and move the window the opposite way, so dragging the
    pointer drags the picture. The window is clamped into the image only on
    the axes where it is smaller than the image, which leaves zoomed-out
    windows free to overflow.

    Contain mode keeps the whole source and shrinks/moves the destination.

    Args:
        image: Source raster, or None when not loaded
        dest: Destination rectangle in frame pixels
        mode: Fit mode
        offset: Pan/zoom state (defaults to no pan, scale 1)

    Returns:
        The projection, or None when there is nothing to draw
    """
    if image is None or image.width <= 0 or image.height <= 0:
        return None
    if dest.is_empty:
        return None

    offset = offset or PanZoomOffset()
    user_scale = offset.effective_scale
    img_w, img_h = float(image.width), float(image.height)

    if mode is FitMode.COVER:
        total_scale = max(dest.width / img_w, dest.height / img_h) * user_scale

        sw = dest.width / total_scale
        sh = dest.height / total_scale
        sx = (img_w - sw) / 2 - offset.x / total_scale
        sy = (img_h - sh) / 2 - offset.y / total_scale

        if sw < img_w:
            sx = max(0.0, min(img_w - sw, sx))
        if sh < img_h:
            sy = max(0.0, min(img_h - sh, sy))

        return Projection(source=Rect(sx, sy, sw, sh), dest=dest)

    scale = min(dest.width / img_w, dest.height / img_h) * user_scale
    dw = img_w * scale
    dh = img_h * scale
    dx = dest.x + (dest.width - dw) / 2 + offset.x
    dy = dest.y + (dest.height - dh) / 2 + offset.y
    return Projection(source=Rect(0, 0, img_w, img_h), dest=Rect(dx, dy, dw, dh))


def visible_window(image_size: tuple[int, int], projection: Projection) -> Optional[Projection]:
    """Trim *projection* to the part of its source window that lies on the image.

    Zoomed-out or panned windows can reach past the image edges; the trimmed
    source maps onto the matching sub-rectangle of the destination, and the
    rest of the destination stays empty.

    Returns:
        The trimmed projection, or None if the window misses the image
    """
    src, dst = projection.source, projection.dest
    img_w, img_h = image_size
    x0, y0 = max(src.x, 0.0), max(src.y, 0.0)
    x1, y1 = min(src.right, float(img_w)), min(src.bottom, float(img_h))
    if x1 <= x0 or y1 <= y0:
        return None

    scale_x = dst.width / src.width
    scale_y = dst.height / src.height
    return Projection(
        source=Rect(x0, y0, x1 - x0, y1 - y0),
        dest=Rect(
            dst.x + (x0 - src.x) * scale_x,
            dst.y + (y0 - src.y) * scale_y,
            (x1 - x0) * scale_x,
            (y1 - y0) * scale_y,
        ),
    )


def blit(
    canvas: Image.Image,
    image: Image.Image,
    projection: Projection,
    clip: Optional[Image.Image] = None,
) -> bool:
    """Draw *projection* of *image* onto an RGBA *canvas*.

    The visible part of the source window is resized with LANCZOS into its
    whole-pixel destination box, then composited through a mask of the
    destination rectangle and the optional *clip*.

    Args:
        canvas: RGBA canvas, modified in place
        image: Source image
        projection: Source/destination pair from :func:`project`
        clip: Optional "L" mask of canvas size limiting where pixels land

    Returns:
        True if anything was drawn
    """
    left, top, right, bottom = projection.dest.to_box()
    if right <= left or bottom <= top:
        return False

    visible = visible_window(image.size, projection)
    if visible is None:
        return False
    part_left, part_top, part_right, part_bottom = visible.dest.to_box()
    if part_right <= part_left or part_bottom <= part_top:
        return False

    src = visible.source
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    sample = rgba.resize(
        (part_right - part_left, part_bottom - part_top),
        Image.Resampling.LANCZOS,
        box=(src.x, src.y, src.right, src.bottom),
    )

    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    layer.paste(sample, (part_left, part_top))

    mask = Image.new("L", canvas.size, 0)
    ImageDraw.Draw(mask).rectangle((left, top, right - 1, bottom - 1), fill=255)
    if clip is not None:
        mask = ImageChops.multiply(mask, clip)

    layer.putalpha(ImageChops.multiply(layer.getchannel("A"), mask))
    canvas.alpha_composite(layer)
    return True


def draw_image_fitted(
    canvas: Image.Image,
    image: Optional[Image.Image],
    dest: Rect,
    mode: FitMode = FitMode.COVER,
    offset: Optional[PanZoomOffset] = None,
    clip: Optional[Image.Image] = None,
) -> Optional[Projection]:
    """Project *image* into *dest* and draw it.

    Returns:
        The projection that was drawn, or None if the draw was skipped
    """
    projection = project(image, dest, mode, offset)
    if projection is None or image is None:
        logger.debug("Skipping fitted draw into %s: no image or empty destination", dest)
        return None
    if offset is not None and offset.scale <= 0:
        logger.debug("Non-positive scale %s treated as 1", offset.scale)
    if not blit(canvas, image, projection, clip):
        return None
    return projection
