import math

import pytest
from PIL import Image

from capsulegen.common.enums import SplitStyle
from capsulegen.compose.split import (
    diagonal_clip_polygon,
    diagonal_line,
    draw_split_backgrounds,
    polygon_mask,
    separator_rect,
    split_regions,
)
from capsulegen.models.config import SplitConfig
from capsulegen.models.geometry import Frame, Rect
from capsulegen.models.offsets import EntityOffsets, Offsets, PanZoomOffset
from capsulegen.models.rasters import EntityRasters, RasterSet

from conftest import BLUE, RED, near

MAIN = Frame(1232, 706)
WHITE = (255, 255, 255, 255)


def blank(frame: Frame) -> Image.Image:
    return Image.new("RGBA", frame.size, (0, 0, 0, 0))


def test_horizontal_regions_give_up_half_border_each() -> None:
    first, second = split_regions(MAIN, SplitConfig(style=SplitStyle.HORIZONTAL, border_width=4))
    assert first == Rect(0, 0, 1232, 351)
    assert second == Rect(0, 355, 1232, 351)


def test_vertical_regions_give_up_half_border_each() -> None:
    first, second = split_regions(
        Frame(1000, 500), SplitConfig(style=SplitStyle.VERTICAL, border_width=10)
    )
    assert first == Rect(0, 0, 495, 500)
    assert second == Rect(505, 0, 495, 500)


def test_diagonal_regions_cover_whole_frame() -> None:
    first, second = split_regions(MAIN, SplitConfig(style=SplitStyle.DIAGONAL, border_width=8))
    assert first == second == MAIN.to_rect()


@pytest.mark.parametrize("angle", [0, 30, 45, 90, 135, 180, 225, 270, 315])
def test_diagonal_line_passes_through_centre(angle) -> None:
    start, end = diagonal_line(MAIN, angle)
    assert (start.x + end.x) / 2 == pytest.approx(MAIN.width / 2)
    assert (start.y + end.y) / 2 == pytest.approx(MAIN.height / 2)
    assert math.hypot(end.x - start.x, end.y - start.y) == pytest.approx(
        math.hypot(MAIN.width, MAIN.height)
    )


@pytest.mark.parametrize("angle", [0, 45, 90, 135, 180, 270])
def test_diagonal_clip_covers_half_the_frame(angle) -> None:
    frame = Frame(400, 200)
    mask = polygon_mask(frame, diagonal_clip_polygon(frame, angle))
    covered = mask.histogram()[255]
    assert covered == pytest.approx(frame.area / 2, rel=0.01)


def test_diagonal_clip_starts_with_seam() -> None:
    polygon = diagonal_clip_polygon(MAIN, 45)
    assert tuple(polygon[:2]) == diagonal_line(MAIN, 45)


def test_separator_rect_is_centred() -> None:
    config = SplitConfig(style=SplitStyle.HORIZONTAL, border_width=4)
    assert separator_rect(MAIN, config) == Rect(0, 351, 1232, 4)
    assert separator_rect(MAIN, config.model_copy(update={"style": SplitStyle.DIAGONAL})) is None


def test_straight_split_paints_both_regions_and_border(rasters) -> None:
    canvas = blank(MAIN)
    config = SplitConfig(style=SplitStyle.HORIZONTAL, border_width=4)
    draw_split_backgrounds(canvas, MAIN, config, rasters, Offsets())

    assert near(canvas.getpixel((600, 100)), RED)
    assert near(canvas.getpixel((600, 600)), BLUE)
    assert canvas.getpixel((10, 352)) == WHITE


def test_swapped_backgrounds_change_places(rasters) -> None:
    canvas = blank(MAIN)
    config = SplitConfig(style=SplitStyle.VERTICAL, swap_backgrounds=True)
    draw_split_backgrounds(canvas, MAIN, config, rasters, Offsets())

    assert near(canvas.getpixel((100, 300)), BLUE)
    assert near(canvas.getpixel((1100, 300)), RED)


def test_zero_border_draws_nothing() -> None:
    canvas = blank(MAIN)
    config = SplitConfig(style=SplitStyle.DIAGONAL, border_width=0)
    draw_split_backgrounds(canvas, MAIN, config, RasterSet(), Offsets())
    assert canvas.getchannel("A").getbbox() is None


def test_diagonal_border_is_drawn_without_backgrounds() -> None:
    canvas = blank(MAIN)
    config = SplitConfig(style=SplitStyle.DIAGONAL, border_width=6)
    draw_split_backgrounds(canvas, MAIN, config, RasterSet(), Offsets())
    assert canvas.getpixel((616, 353)) == WHITE


def test_diagonal_split_clips_second_background(rasters) -> None:
    frame = Frame(400, 200)
    canvas = blank(frame)
    config = SplitConfig(style=SplitStyle.DIAGONAL, angle_degrees=45)
    draw_split_backgrounds(canvas, frame, config, rasters, Offsets())

    assert near(canvas.getpixel((10, 190)), BLUE)
    assert near(canvas.getpixel((390, 10)), RED)


def test_missing_background_leaves_region_transparent(rasters) -> None:
    rasters.game2 = EntityRasters(background=None, logo=rasters.game2.logo)
    canvas = blank(MAIN)
    draw_split_backgrounds(
        canvas, MAIN, SplitConfig(style=SplitStyle.HORIZONTAL), rasters, Offsets()
    )

    assert near(canvas.getpixel((600, 100)), RED)
    assert canvas.getpixel((600, 600))[3] == 0


@pytest.mark.parametrize("style", list(SplitStyle))
def test_swap_equals_relabelled_inputs(style) -> None:
    """Swapping positions is the same as exchanging the two entities' inputs."""
    frame = Frame(320, 180)
    img_a = Image.linear_gradient("L").resize((300, 200)).convert("RGBA")
    img_b = Image.radial_gradient("L").convert("RGBA")
    off_a = EntityOffsets(background=PanZoomOffset(x=25, y=-10, scale=1.3))
    off_b = EntityOffsets(background=PanZoomOffset(x=-40, y=5, scale=0.8))

    swapped = blank(frame)
    draw_split_backgrounds(
        swapped,
        frame,
        SplitConfig(style=style, angle_degrees=30, border_width=3, swap_backgrounds=True),
        RasterSet(game1=EntityRasters(background=img_a), game2=EntityRasters(background=img_b)),
        Offsets(game1=off_a, game2=off_b),
    )

    relabelled = blank(frame)
    draw_split_backgrounds(
        relabelled,
        frame,
        SplitConfig(style=style, angle_degrees=30, border_width=3),
        RasterSet(game1=EntityRasters(background=img_b), game2=EntityRasters(background=img_a)),
        Offsets(game1=off_b, game2=off_a),
    )

    assert swapped.tobytes() == relabelled.tobytes()
