"""Shared enumerations."""

from capsulegen.common.enums import (
    AssetRole,
    DragMode,
    Entity,
    FitMode,
    LogoPosition,
    SplitStyle,
)

__all__ = ["AssetRole", "DragMode", "Entity", "FitMode", "LogoPosition", "SplitStyle"]
