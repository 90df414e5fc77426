"""HTML preview of a composed capsule."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, select_autoescape

from capsulegen.common.enums import Entity
from capsulegen.models.geometry import Frame, Rect, round_half_up
from capsulegen.models.offsets import Offsets


def area_coords(box: Rect) -> str:
    """Image-map ``coords`` for a bounding box."""
    left, top, right, bottom = box.to_box()
    return f"{left},{top},{right},{bottom}"


class PreviewRenderer:
    """Renders the preview page for a composed image.

    The page shows the PNG at its intrinsic size with an image map whose
    areas are the logo bounding boxes from the same render, plus the current
    offsets for each entity.
    """

    # Preview page template using Jinja2 syntax
    PREVIEW_TEMPLATE = """<!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <title>{{ title }}</title>
        <style>
            body {
                font-family: sans-serif;
                background-color: #1b2838;
                color: #c7d5e0;
                padding: 24px;
            }
            img {
                display: block;
                margin-bottom: 16px;
            }
            table {
                border-collapse: collapse;
            }
            td, th {
                border: 1px solid #2a475e;
                padding: 4px 10px;
                text-align: right;
            }
        </style>
    </head>
    <body>
        <h1>{{ title }}</h1>
        <img src="{{ image_name }}" width="{{ width }}" height="{{ height }}"
             usemap="#logos" alt="{{ title }}">
        <map name="logos">
        {% for entity, coords in areas %}
            <area shape="rect" coords="{{ coords }}" alt="{{ entity }} logo" title="{{ entity }} logo">
        {% endfor %}
        </map>
        <table>
            <tr><th>Entity</th><th>Background x</th><th>Background y</th><th>Zoom</th><th>Logo x</th><th>Logo y</th></tr>
        {% for row in rows %}
            <tr>
                <th>{{ row.entity }}</th>
                <td>{{ row.bg_x }}</td>
                <td>{{ row.bg_y }}</td>
                <td>{{ row.zoom }}%</td>
                <td>{{ row.logo_x }}</td>
                <td>{{ row.logo_y }}</td>
            </tr>
        {% endfor %}
        </table>
    </body>
    </html>"""

    def __init__(self, template: str | None = None) -> None:
        """Initialize the preview renderer.

        Args:
            template: Custom preview template (uses default if None)
        """
        self.env = Environment(autoescape=select_autoescape(["html"], default_for_string=True))
        self.template = self.env.from_string(template or self.PREVIEW_TEMPLATE)

    def build_context(
        self,
        image_name: str,
        frame: Frame,
        boxes: Mapping[Entity, Rect],
        offsets: Offsets,
        title: str = "Capsule preview",
    ) -> dict[str, Any]:
        """Build the template context.

        Args:
            image_name: PNG file name, relative to the HTML file
            frame: Frame size of the image
            boxes: Logo bounding boxes from the render that produced the image
            offsets: Offsets used for that render
            title: Page title

        Returns:
            Template context dictionary
        """
        rows = []
        for entity in Entity:
            current = offsets.for_entity(entity)
            rows.append(
                {
                    "entity": entity.value,
                    "bg_x": round_half_up(current.background.x),
                    "bg_y": round_half_up(current.background.y),
                    "zoom": round_half_up(current.background.scale * 100),
                    "logo_x": round_half_up(current.logo.x),
                    "logo_y": round_half_up(current.logo.y),
                }
            )

        return {
            "title": title,
            "image_name": image_name,
            "width": frame.width,
            "height": frame.height,
            "areas": [
                (entity.value, area_coords(boxes[entity])) for entity in Entity if entity in boxes
            ],
            "rows": rows,
        }

    def render_preview(self, **context: Any) -> str:
        """Render the preview template with the provided context."""
        return self.template.render(**context)

    def write_preview(self, output_path: Path, **context: Any) -> Path:
        """Render and write the preview page.

        Returns:
            Path of the written HTML file
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_preview(**context), encoding="utf-8")
        return output_path
