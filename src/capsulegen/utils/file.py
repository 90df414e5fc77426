"""File utility functions."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def sanitize_filename(name: str) -> str:
    """Reduce *name* to lowercase letters, digits and single dashes.

    Args:
        name: Free-form text such as a game title

    Returns:
        Sanitized name, possibly empty
    """
    slug = re.sub(r"[^a-z0-9]", "-", name, flags=re.IGNORECASE).lower()
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def bundle_filename(game1_name: str, game2_name: str, format_key: str) -> str:
    """Output file name for a composed capsule, e.g. ``portal-half-life-bundle-main-capsule.png``."""
    first = sanitize_filename(game1_name or "game1") or "game1"
    second = sanitize_filename(game2_name or "game2") or "game2"
    return f"{first}-{second}-bundle-{format_key}.png"
