"""Image composition engine: fitted projection, split backgrounds and logos."""

from capsulegen.compose.logos import draw_logos, layout_logos
from capsulegen.compose.projector import draw_image_fitted, project
from capsulegen.compose.renderer import RenderResult, render
from capsulegen.compose.split import draw_split_backgrounds

__all__ = [
    "RenderResult",
    "draw_image_fitted",
    "draw_logos",
    "draw_split_backgrounds",
    "layout_logos",
    "project",
    "render",
]
