from capsulegen.common.enums import Entity, SplitStyle
from capsulegen.compose.renderer import draw_frame_border, render
from capsulegen.models.config import FrameBorderConfig, LogoConfig, SplitConfig
from capsulegen.models.geometry import Frame, Rect
from capsulegen.models.offsets import Offsets
from capsulegen.models.rasters import EntityRasters, RasterSet

from conftest import RED, checkerboard, near, solid

MAIN = Frame(1232, 706)
HORIZONTAL = SplitConfig(style=SplitStyle.HORIZONTAL, border_width=4)
FRAME_BLUE = (102, 192, 244, 255)


def test_render_full_frame(rasters) -> None:
    result = render(MAIN, rasters, HORIZONTAL, LogoConfig(), Offsets())

    assert result.image.size == (1232, 706)
    assert result.image.mode == "RGBA"
    assert result.bounding_boxes == {
        Entity.GAME1: Rect(106, 253, 600, 200),
        Entity.GAME2: Rect(726, 253, 400, 200),
    }
    assert near(result.image.getpixel((20, 20)), RED)


def test_logos_are_drawn_over_backgrounds(rasters) -> None:
    result = render(MAIN, rasters, HORIZONTAL, LogoConfig(), Offsets())
    pixel = result.image.getpixel((406, 300))
    assert pixel[1] > 250 and pixel[0] < 5


def test_render_without_rasters_is_transparent() -> None:
    result = render(MAIN, RasterSet(), SplitConfig(), LogoConfig(), Offsets())
    assert result.bounding_boxes == {}
    assert result.image.getchannel("A").getbbox() is None


def test_render_empty_frame() -> None:
    result = render(Frame(0, 100), RasterSet(), HORIZONTAL, LogoConfig(), Offsets())
    assert result.image.size == (0, 100)
    assert result.bounding_boxes == {}


def test_missing_background_only_skips_its_region(rasters) -> None:
    rasters.game2 = EntityRasters(background=None, logo=rasters.game2.logo)
    result = render(MAIN, rasters, HORIZONTAL, LogoConfig(), Offsets())

    assert near(result.image.getpixel((20, 20)), RED)
    assert result.image.getpixel((20, 680))[3] == 0
    assert set(result.bounding_boxes) == {Entity.GAME1, Entity.GAME2}


def test_frame_border_is_drawn_last(rasters) -> None:
    border = FrameBorderConfig(width=3)
    result = render(MAIN, rasters, HORIZONTAL, LogoConfig(), Offsets(), border)

    assert result.image.getpixel((0, 0)) == FRAME_BLUE
    assert result.image.getpixel((2, 100)) == FRAME_BLUE
    assert result.image.getpixel((1231, 705)) == FRAME_BLUE
    assert near(result.image.getpixel((10, 100)), RED)


def test_zero_width_frame_border_is_skipped() -> None:
    canvas = solid((10, 10), RED)
    draw_frame_border(canvas, FrameBorderConfig(width=0))
    assert canvas.getpixel((0, 0)) == RED


def test_small_capsule_downscale_is_anti_aliased() -> None:
    board = checkerboard(2000, 1200)
    rasters = RasterSet(
        game1=EntityRasters(background=board), game2=EntityRasters(background=board)
    )
    result = render(Frame(462, 174), rasters, HORIZONTAL, LogoConfig(), Offsets())

    low, high = result.image.convert("L").crop((20, 10, 440, 75)).getextrema()
    assert low >= 110
    assert high <= 145
