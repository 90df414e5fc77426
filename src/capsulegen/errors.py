"""Exception classes for the layers around the composition engine.

The engine itself degrades instead of raising; these cover asset loading
and similar host-side failures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from capsulegen.common.enums import AssetRole, Entity


class CapsuleGenError(Exception):
    """Base class for capsulegen errors."""


class AssetLoadError(CapsuleGenError):
    """Raised when an asset file exists but cannot be decoded."""

    def __init__(
        self,
        entity: Entity,
        role: AssetRole,
        path: Path,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with the failing slot.

        Args:
            entity: Entity the asset belongs to
            role: Background or logo
            path: File that failed to load
            original_error: The underlying exception
        """
        super().__init__(f"Cannot load {entity.value} {role.value} from {path}")
        self.entity = entity
        self.role = role
        self.path = path
        self.original_error = original_error
