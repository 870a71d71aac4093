"""HTML/SVG rendering of turtle paths."""

import math
from html import escape
from typing import Iterable

from .config import CanvasConfig
from .turtle import Segment


def _num(value: float) -> str:
    # 250.0 -> "250"
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class HtmlRenderer:
    """Renders segments onto a fixed-size SVG canvas inside an HTML page."""

    def __init__(self, canvas: CanvasConfig | None = None):
        self.canvas = canvas or CanvasConfig()

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Map plane coordinates so the origin lands at the canvas center."""
        c = self.canvas
        return x * c.scale + c.width / 2, y * c.scale + c.height / 2

    def render_line(self, segment: Segment) -> str:
        x1, y1 = self.to_screen(segment.start.x, segment.start.y)
        x2, y2 = self.to_screen(segment.end.x, segment.end.y)
        return (
            f'<line x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" y2="{_num(y2)}" '
            f'stroke="{escape(str(getattr(segment.color, "value", segment.color)))}" stroke-width="{_num(self.canvas.stroke_width)}"/>'
        )

    def render(self, segments: Iterable[Segment]) -> str:
        """Convert segments to a self-contained HTML document."""
        c = self.canvas
        svg_content = "".join(self.render_line(s) for s in segments)

        lines = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            f"    <title>{escape(c.title)}</title>",
            "    <style>",
            "        body { margin: 0; }",
            "    </style>",
            "</head>",
            "<body>",
            f'    <svg width="{c.width}" height="{c.height}" style="background-color:{escape(c.background)};">',
            f"        {svg_content}",
            "    </svg>",
            "</body>",
            "</html>",
        ]
        return "\n".join(lines)
