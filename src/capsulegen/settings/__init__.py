"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
- ApplicationSettings: Engine snapshot and paths derived from user settings
"""

from capsulegen.settings.application import AppPaths, ApplicationSettings, scaled_border_width
from capsulegen.settings.user import GameSettings, UserSettings

__all__ = [
    "AppPaths",
    "ApplicationSettings",
    "GameSettings",
    "UserSettings",
    "scaled_border_width",
]
