"""Load rasters from local files named in the settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Optional

from PIL import Image, UnidentifiedImageError

from capsulegen.common.enums import AssetRole, Entity
from capsulegen.errors import AssetLoadError
from capsulegen.settings.user import UserSettings

logger: Final = logging.getLogger(__name__)


class FileRasterSource:
    """RasterSource backed by paths from :class:`UserSettings`.

    Unset or missing paths give None so the render degrades; files that
    exist but cannot be decoded raise :class:`AssetLoadError`.
    """

    def __init__(self, user_settings: UserSettings, base_dir: Optional[Path] = None) -> None:
        """Initialize the source.

        Args:
            user_settings: Settings naming the asset files
            base_dir: Directory relative paths are resolved against (default: cwd)
        """
        self.user_settings = user_settings
        self.base_dir = base_dir or Path.cwd()

    def path_for(self, entity: Entity, role: AssetRole) -> Optional[Path]:
        game = self.user_settings.game(entity)
        path = game.background if role is AssetRole.BACKGROUND else game.logo
        if path is None:
            return None
        path = path.expanduser()
        return path if path.is_absolute() else self.base_dir / path

    def load(self, entity: Entity, role: AssetRole) -> Optional[Image.Image]:
        path = self.path_for(entity, role)
        if path is None:
            logger.debug("No %s configured for %s", role.value, entity.value)
            return None
        if not path.exists():
            logger.warning("%s %s not found: %s", entity.value, role.value, path)
            return None

        try:
            with Image.open(path) as img:
                img.load()
                return img.convert("RGBA")
        except (UnidentifiedImageError, OSError) as exc:
            raise AssetLoadError(entity, role, path, exc) from exc
