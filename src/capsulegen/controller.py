# filepath: src/capsulegen/controller.py
"""Core controller for capsule generation."""

from __future__ import annotations

import logging
import tempfile
import webbrowser
from pathlib import Path
from typing import Final

from PIL import Image

from capsulegen.assets.files import FileRasterSource
from capsulegen.assets.protocols import RasterSource, load_rasters
from capsulegen.common.enums import AssetRole, Entity
from capsulegen.compose.renderer import RenderResult, render
from capsulegen.display.preview import PreviewRenderer
from capsulegen.interaction.drag import DragSession
from capsulegen.interaction.mapper import HitTarget, Viewport, hit_test
from capsulegen.models.geometry import Point, Rect
from capsulegen.models.offsets import Offsets
from capsulegen.models.rasters import RasterSet
from capsulegen.settings.application import ApplicationSettings
from capsulegen.settings.user import UserSettings
from capsulegen.utils.file import ensure_directory_exists

TEST_CONFIG_YAML = """\
format: main-capsule
game1:
  name: "First Game"
game2:
  name: "Second Game"
split:
  style: horizontal
  border_width: 4
logos:
  position: center
"""

logger: Final = logging.getLogger(__name__)


class CapsuleGenerator:
    """Main controller class for composing capsules.

    This class plays the caller's role around the engine:
    - Loading configuration and rasters
    - Owning the per-entity offset state
    - Rendering frames and keeping the bounding boxes of the latest render
    - Turning pointer drags into offset updates and re-rendering
    - Writing the PNG and the HTML preview
    """

    def __init__(
        self,
        config_path: Path | None = None,
        user_settings: UserSettings | None = None,
        raster_source: RasterSource | None = None,
        preview_renderer: PreviewRenderer | None = None,
        debug: bool = False,
    ):
        """Initialize the generator.

        Args:
            config_path: Path to config.yaml (ignored if user_settings is given)
            user_settings: Already-loaded settings
            raster_source: Optional custom raster source
            preview_renderer: Optional custom preview renderer
            debug: Enable debug logging
        """
        # Configure logging
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.config: UserSettings = user_settings or UserSettings.load(config_path)
        self.settings = ApplicationSettings(self.config)

        base_dir = config_path.parent if config_path else None
        self.raster_source = raster_source or FileRasterSource(self.config, base_dir)
        self.preview_renderer = preview_renderer or PreviewRenderer()

        self.offsets: Offsets = self.settings.offsets
        self.rasters: RasterSet = RasterSet()
        self.bounding_boxes: dict[Entity, Rect] = {}
        self.last_result: RenderResult | None = None
        self.drag = DragSession(limit=self.config.drag_limit)

    def load_rasters(self) -> RasterSet:
        """Fetch all four rasters from the raster source."""
        self.rasters = load_rasters(self.raster_source)
        if not self.rasters.ready:
            logger.info("Not all images are loaded yet; output will be partial")
        return self.rasters

    def render(self) -> RenderResult:
        """Render with the current offsets and replace the stored bounding boxes."""
        result = render(
            self.settings.frame,
            self.rasters,
            self.settings.split_config,
            self.settings.logo_config,
            self.offsets,
            self.settings.frame_border,
        )
        self.last_result = result
        self.bounding_boxes = dict(result.bounding_boxes)
        return result

    def auto_render(self) -> RenderResult | None:
        """Render only when every raster is available."""
        if not self.rasters.ready:
            logger.debug("Skipping render: images missing")
            return None
        return self.render()

    def save(self, output_path: Path | None = None) -> Path:
        """Render with the current state and write the PNG.

        Returns:
            Path of the written image
        """
        result = self.render()
        path = output_path or self.settings.paths.image_path
        ensure_directory_exists(path.parent)
        result.image.save(path, format="PNG")
        logger.info("Wrote %s", path)
        return path

    def write_preview(self, open_browser: bool = False) -> Path:
        """Write the PNG and an HTML preview next to it.

        Returns:
            Path of the HTML page
        """
        image_path = self.save()
        context = self.preview_renderer.build_context(
            image_path.name,
            self.settings.frame,
            self.bounding_boxes,
            self.offsets,
            title=self.settings.output_format.label,
        )
        html_path = self.preview_renderer.write_preview(self.settings.paths.preview_path, **context)

        if open_browser:
            try:
                webbrowser.open_new_tab(html_path.resolve().as_uri())
            except Exception as exc:
                logger.debug("Could not open browser: %s", exc)
        return html_path

    def target_at(self, point: Point) -> HitTarget:
        """Classify a frame-space point against the latest render."""
        return hit_test(point, self.bounding_boxes, self.settings.split_config, self.settings.frame)

    def begin_drag(self, client: Point, viewport: Viewport) -> HitTarget:
        """Start a pointer drag at a display-space position."""
        return self.drag.begin(
            client,
            viewport,
            self.settings.frame,
            self.bounding_boxes,
            self.settings.split_config,
        )

    def drag_to(self, client: Point, viewport: Viewport) -> bool:
        """Continue the drag; re-render when the offsets changed.

        Returns:
            True if the offsets changed
        """
        updated = self.drag.move(client, viewport, self.settings.frame, self.offsets)
        if updated is None:
            return False
        self.offsets = updated
        self.auto_render()
        return True

    def end_drag(self) -> None:
        self.drag.end()

    @classmethod
    def create_for_testing(
        cls,
        config_path: Path | None = None,
        images: dict[tuple[Entity, AssetRole], Image.Image] | None = None,
        raster_source: RasterSource | None = None,
    ) -> CapsuleGenerator:
        """Create a CapsuleGenerator configured for testing.

        Args:
            config_path: Path to config file (creates default if None)
            images: In-memory images keyed by (entity, role)
            raster_source: Raster source to use instead of *images*

        Returns:
            CapsuleGenerator instance configured for testing
        """
        from capsulegen.assets.protocols import MockRasterSource

        if config_path is None:
            # Create temp config file with reasonable defaults
            with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as temp:
                temp_path = Path(temp.name)
                temp_path.write_text(TEST_CONFIG_YAML)
                config_path = temp_path

        source = raster_source or MockRasterSource(images)
        generator = cls(config_path=config_path, raster_source=source)
        generator.load_rasters()
        return generator
