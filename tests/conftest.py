import pytest
from PIL import Image

from capsulegen.common.enums import AssetRole, Entity
from capsulegen.models.rasters import EntityRasters, RasterSet

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)
YELLOW = (255, 255, 0, 255)


def solid(size: tuple[int, int], color: tuple[int, int, int, int]) -> Image.Image:
    return Image.new("RGBA", size, color)


@pytest.fixture
def images() -> dict[tuple[Entity, AssetRole], Image.Image]:
    """Four solid rasters: red/blue backgrounds, green/yellow logos."""
    return {
        (Entity.GAME1, AssetRole.BACKGROUND): solid((1920, 1080), RED),
        (Entity.GAME1, AssetRole.LOGO): solid((600, 200), GREEN),
        (Entity.GAME2, AssetRole.BACKGROUND): solid((1920, 1080), BLUE),
        (Entity.GAME2, AssetRole.LOGO): solid((400, 200), YELLOW),
    }


@pytest.fixture
def rasters(images) -> RasterSet:
    return RasterSet(
        game1=EntityRasters(
            background=images[(Entity.GAME1, AssetRole.BACKGROUND)],
            logo=images[(Entity.GAME1, AssetRole.LOGO)],
        ),
        game2=EntityRasters(
            background=images[(Entity.GAME2, AssetRole.BACKGROUND)],
            logo=images[(Entity.GAME2, AssetRole.LOGO)],
        ),
    )


def near(pixel: tuple[int, ...], color: tuple[int, ...], tolerance: int = 2) -> bool:
    """Compare colours allowing for resampling rounding."""
    return all(abs(a - b) <= tolerance for a, b in zip(pixel, color))


def checkerboard(width: int, height: int) -> Image.Image:
    """Alternating black and white pixels, the worst case for aliasing."""
    even = bytes([0, 255]) * (width // 2)
    odd = bytes([255, 0]) * (width // 2)
    return Image.frombytes("L", (width, height), (even + odd) * (height // 2)).convert("RGBA")
