"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from capsulegen.common.enums import Entity, LogoPosition, SplitStyle
from capsulegen.constants import (
    DEFAULT_BORDER_COLOR,
    DEFAULT_FORMAT,
    DEFAULT_FRAME_BORDER_COLOR,
    DEFAULT_SPLIT_ANGLE,
    OUTPUT_FORMATS,
)
from capsulegen.models.config import validate_hex_color
from capsulegen.models.offsets import LogoPlacementOffset, PanZoomOffset

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class GameSettings(BaseModel):
    """Assets and offsets for one side of the capsule."""

    name: str = Field("", description="Display name, used in the output file name")
    background: Path | None = Field(None, description="Background image file")
    logo: Path | None = Field(None, description="Logo image file")
    background_offset: PanZoomOffset = Field(default_factory=PanZoomOffset)
    logo_offset: LogoPlacementOffset = Field(default_factory=LogoPlacementOffset)
    logo_scale: float = Field(1.0, gt=0, description="Logo scale (1.0 = 100%)")


class SplitSettings(BaseModel):
    """Background split options as the user enters them."""

    style: SplitStyle = SplitStyle.DIAGONAL
    angle: float = Field(DEFAULT_SPLIT_ANGLE, ge=0, le=360, description="Diagonal angle")
    border_width: int = Field(
        0, ge=0, description="Border width at package-header size; scaled per format"
    )
    border_color: str = DEFAULT_BORDER_COLOR
    swap_backgrounds: bool = False

    @field_validator("border_color")
    @classmethod
    def check_border_color(cls, v: str) -> str:
        return validate_hex_color(v)


class LogoSettings(BaseModel):
    """Logo placement options."""

    position: LogoPosition = LogoPosition.CENTER
    swap: bool = False


class FrameBorderSettings(BaseModel):
    """Outer frame options."""

    width: int = Field(0, ge=0, description="Frame border width in pixels")
    color: str = DEFAULT_FRAME_BORDER_COLOR

    @field_validator("color")
    @classmethod
    def check_color(cls, v: str) -> str:
        return validate_hex_color(v)


class UserSettings(BaseModel):
    """User settings for a capsule composition. Every field has a default,
    so an empty config.yaml renders a blank main capsule."""

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/capsulegen/config.yaml").expanduser(),
        Path("/etc/capsulegen/config.yaml"),
    ]

    format: str = Field(DEFAULT_FORMAT, description="Output preset key")
    game1: GameSettings = Field(default_factory=GameSettings)
    game2: GameSettings = Field(default_factory=GameSettings)
    split: SplitSettings = Field(default_factory=SplitSettings)
    logos: LogoSettings = Field(default_factory=LogoSettings)
    frame_border: FrameBorderSettings = Field(default_factory=FrameBorderSettings)
    drag_limit: int | None = Field(
        None, gt=0, description="Clamp dragged offsets to +/- this many pixels"
    )
    output_dir: Path = Field(Path("output"), description="Where images are written")

    # ---- validators ----
    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"unknown format {v!r}; choose from {', '.join(OUTPUT_FORMATS)}")
        return v

    # ---- convenience methods ----
    def game(self, entity: Entity) -> GameSettings:
        """Settings for one entity."""
        return self.game1 if entity is Entity.GAME1 else self.game2

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("CAPSULEGEN_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from CAPSULEGEN_CONFIG not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set CAPSULEGEN_CONFIG."
                    )

        # Load and parse config
        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
