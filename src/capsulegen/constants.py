from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class OutputFormat:
    """Named output preset (store image slot)."""

    key: str
    width: int
    height: int
    label: str


# Output presets, in pixels
OUTPUT_FORMATS: Final[dict[str, OutputFormat]] = {
    fmt.key: fmt
    for fmt in (
        OutputFormat("main-capsule", 1232, 706, "Main Capsule"),
        OutputFormat("header-capsule", 920, 430, "Header Capsule"),
        OutputFormat("small-capsule", 462, 174, "Small Capsule"),
        OutputFormat("package-header", 1414, 464, "Package Header"),
    )
}
DEFAULT_FORMAT: Final = "main-capsule"

# Border widths are authored against the package header size
BORDER_REFERENCE_AREA: Final = 1414 * 464

# Logo layout
LOGO_GAP: Final = 20
MAX_LOGO_HEIGHT_RATIO: Final = 0.3

# Default colours
DEFAULT_BORDER_COLOR: Final = "#ffffff"
DEFAULT_FRAME_BORDER_COLOR: Final = "#66c0f4"
DEFAULT_SPLIT_ANGLE: Final = 45.0

# Output file names
PREVIEW_HTML_NAME: Final = "capsule-preview.html"
