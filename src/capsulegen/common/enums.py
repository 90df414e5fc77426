from enum import Enum


class Entity(str, Enum):
    """One of the two logical sides of the capsule."""

    GAME1 = "game1"
    GAME2 = "game2"


class AssetRole(str, Enum):
    """Role a raster plays for an entity."""

    BACKGROUND = "background"
    LOGO = "logo"


class SplitStyle(str, Enum):
    """How the frame is divided between the two backgrounds."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class LogoPosition(str, Enum):
    """Where logos are placed."""

    CENTER = "center"  # side by side in the middle of the frame
    SPLIT = "split"  # one logo per split region


class FitMode(str, Enum):
    """How an image is fitted into a destination rectangle."""

    COVER = "cover"  # fill the rectangle, crop overflow
    CONTAIN = "contain"  # fit entirely, leave margins


class DragMode(str, Enum):
    """Which layer a pointer drag moves."""

    LOGO = "logo"
    BACKGROUND = "background"
