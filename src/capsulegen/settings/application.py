"""Internal application settings derived from user settings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

from capsulegen.constants import (
    BORDER_REFERENCE_AREA,
    OUTPUT_FORMATS,
    PREVIEW_HTML_NAME,
    OutputFormat,
)
from capsulegen.models.config import FrameBorderConfig, LogoConfig, LogoScales, SplitConfig
from capsulegen.models.geometry import Frame, round_half_up
from capsulegen.models.offsets import EntityOffsets, Offsets
from capsulegen.settings.user import UserSettings
from capsulegen.utils.file import bundle_filename


def scaled_border_width(base_width: float, frame: Frame) -> int:
    """Scale a border authored at package-header size to *frame*.

    The factor is the square root of the area ratio, so the border keeps the
    same visual weight on small and large presets.
    """
    factor = math.sqrt(frame.area / BORDER_REFERENCE_AREA)
    return round_half_up(base_width * factor)


@dataclass
class AppPaths:
    """Output file locations."""

    output_dir: Path
    image_name: str
    preview_html: str = PREVIEW_HTML_NAME

    @property
    def image_path(self) -> Path:
        return self.output_dir / self.image_name

    @property
    def preview_path(self) -> Path:
        return self.output_dir / self.preview_html

    @classmethod
    def from_user_settings(cls, user: UserSettings) -> AppPaths:
        """Create paths from user settings."""
        return cls(
            output_dir=user.output_dir,
            image_name=bundle_filename(user.game1.name, user.game2.name, user.format),
        )


class ApplicationSettings:
    """Engine snapshot built from user settings.

    Turns the user-facing values (preset key, base border width, per-game
    sections) into the records the renderer and mapper consume.

    Examples:
        user_settings = UserSettings.load()
        app_settings = ApplicationSettings(user_settings)
        result = render(
            app_settings.frame,
            rasters,
            app_settings.split_config,
            app_settings.logo_config,
            app_settings.offsets,
        )
    """

    def __init__(self, user_settings: UserSettings, paths: AppPaths | None = None):
        """Initialize application settings with configuration sources."""
        self.user = user_settings
        self.paths = paths or AppPaths.from_user_settings(user_settings)

    @property
    def output_format(self) -> OutputFormat:
        return OUTPUT_FORMATS[self.user.format]

    @property
    def frame(self) -> Frame:
        fmt = self.output_format
        return Frame(fmt.width, fmt.height)

    @property
    def split_config(self) -> SplitConfig:
        split = self.user.split
        return SplitConfig(
            style=split.style,
            angle_degrees=split.angle,
            border_width=scaled_border_width(split.border_width, self.frame),
            border_color=split.border_color,
            swap_backgrounds=split.swap_backgrounds,
        )

    @property
    def logo_config(self) -> LogoConfig:
        return LogoConfig(
            position=self.user.logos.position,
            swap_logos=self.user.logos.swap,
            scales=LogoScales(game1=self.user.game1.logo_scale, game2=self.user.game2.logo_scale),
        )

    @property
    def offsets(self) -> Offsets:
        """Initial offsets as configured; the controller owns them afterwards."""
        return Offsets(
            game1=EntityOffsets(
                background=self.user.game1.background_offset, logo=self.user.game1.logo_offset
            ),
            game2=EntityOffsets(
                background=self.user.game2.background_offset, logo=self.user.game2.logo_offset
            ),
        )

    @property
    def frame_border(self) -> FrameBorderConfig:
        border = self.user.frame_border
        return FrameBorderConfig(width=border.width, color=border.color)
