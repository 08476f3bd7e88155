"""Layout description rendering: formatting primitives, style extractors, renderer."""

from figscribe.render.formatting import format_number, indent, opacity_percent, rgba
from figscribe.render.renderer import render_node, render_nodes
from figscribe.render.styles import (
    background_color,
    border_color,
    border_radius,
    border_width,
    padding,
    shadows,
)

__all__ = [
    "background_color",
    "border_color",
    "border_radius",
    "border_width",
    "format_number",
    "indent",
    "opacity_percent",
    "padding",
    "render_node",
    "render_nodes",
    "rgba",
    "shadows",
]
