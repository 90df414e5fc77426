import pytest
from pydantic import ValidationError

from capsulegen.common.enums import AssetRole, Entity
from capsulegen.errors import AssetLoadError, CapsuleGenError
from capsulegen.models import (
    EntityOffsets,
    FrameBorderConfig,
    LogoPlacementOffset,
    Offsets,
    PanZoomOffset,
    RasterSet,
    Rect,
    SplitConfig,
    resolve_assignment,
)
from capsulegen.models.config import validate_hex_color
from capsulegen.models.geometry import Frame, Point, round_half_up


@pytest.mark.parametrize(
    "value, expected", [(2.5, 3), (2.4999, 2), (-2.5, -2), (-2.6, -3), (0.5, 1)]
)
def test_round_half_up(value, expected) -> None:
    assert round_half_up(value) == expected


class TestRect:
    def test_contains_is_inclusive(self) -> None:
        rect = Rect(10, 20, 30, 40)
        assert rect.contains(10, 20)
        assert rect.contains(40, 60)
        assert not rect.contains(40.01, 60)
        assert not rect.contains(9.99, 30)

    def test_to_box(self) -> None:
        assert Rect(0.5, 1.4, 10, 10).to_box() == (1, 1, 11, 11)
        assert Rect(5, 5, -3, 2).to_box() == (5, 5, 5, 7)

    def test_is_empty(self) -> None:
        assert Rect(0, 0, 0, 5).is_empty
        assert not Rect(0, 0, 1, 1).is_empty


def test_frame_properties() -> None:
    frame = Frame(1414, 464)
    assert frame.area == 1414 * 464
    assert frame.center == Point(707, 232)
    assert frame.to_rect() == Rect(0, 0, 1414, 464)


def test_resolve_assignment() -> None:
    assert resolve_assignment(False) == (Entity.GAME1, Entity.GAME2)
    assert resolve_assignment(True) == (Entity.GAME2, Entity.GAME1)


def test_raster_set_ready() -> None:
    assert not RasterSet().ready


class TestOffsets:
    def test_effective_scale(self) -> None:
        assert PanZoomOffset(scale=0).effective_scale == 1.0
        assert PanZoomOffset(scale=-3).effective_scale == 1.0
        assert PanZoomOffset(scale=2.5).effective_scale == 2.5

    def test_replace_entity_returns_copy(self) -> None:
        offsets = Offsets()
        moved = EntityOffsets(logo=LogoPlacementOffset(x=4, y=2))
        updated = offsets.replace_entity(Entity.GAME2, moved)

        assert updated.for_entity(Entity.GAME2) == moved
        assert updated.game1 == offsets.game1
        assert offsets.game2.logo.x == 0

    def test_offsets_are_frozen(self) -> None:
        with pytest.raises(ValidationError):
            PanZoomOffset().x = 5


class TestColors:
    @pytest.mark.parametrize("value", ["#fff", "#66C0F4", "#000000"])
    def test_valid(self, value) -> None:
        assert validate_hex_color(value) == value

    @pytest.mark.parametrize("value", ["fff", "#ffff", "#12345g", "white", ""])
    def test_invalid(self, value) -> None:
        with pytest.raises(ValueError):
            validate_hex_color(value)

    def test_config_models_validate_colors(self) -> None:
        with pytest.raises(ValidationError):
            SplitConfig(border_color="blue")
        with pytest.raises(ValidationError):
            FrameBorderConfig(color="#12")

    def test_negative_border_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SplitConfig(border_width=-1)


def test_asset_load_error_message() -> None:
    cause = OSError("truncated")
    err = AssetLoadError(Entity.GAME1, AssetRole.LOGO, "art/logo.png", cause)

    assert isinstance(err, CapsuleGenError)
    assert str(err) == "Cannot load game1 logo from art/logo.png"
    assert err.original_error is cause
