"""Style extractors. Each returns a fixed fallback instead of failing."""

from __future__ import annotations

from figscribe.nodes.models import MIXED, FrameNode, Paint, StyledNode
from figscribe.render.formatting import format_number, rgba

TRANSPARENT = "transparent"
ZERO_PX = "0px"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _first_solid_color(paints: list[Paint] | str | None) -> str:
    if not paints or paints == MIXED:
        return TRANSPARENT
    first = paints[0]
    if first.type != "SOLID" or first.color is None:
        return TRANSPARENT
    opacity = 1 if first.opacity is None else first.opacity
    return rgba(first.color, opacity)


def border_width(node: object) -> str:
    weight = getattr(node, "stroke_weight", None)
    if _is_number(weight):
        return f"{format_number(weight)}px"
    return ZERO_PX


def border_color(node: object) -> str:
    return _first_solid_color(getattr(node, "strokes", None))


def border_radius(node: object) -> str:
    radius = getattr(node, "corner_radius", None)
    if _is_number(radius):
        return f"{format_number(radius)}px"
    return ZERO_PX


def background_color(node: object) -> str:
    """Color of the first fill; text nodes use it as the text color."""
    return _first_solid_color(getattr(node, "fills", None))


def padding(node: object) -> str:
    """CSS-order padding (top right bottom left), or ``0px`` for non-frames."""
    if not isinstance(node, FrameNode):
        return ZERO_PX
    sides = (node.padding_top, node.padding_right, node.padding_bottom, node.padding_left)
    return " ".join(f"{format_number(side or 0)}px" for side in sides)


def shadows(node: object) -> list[str]:
    """One entry per visible drop shadow, in list order.

    The color's own alpha channel is ignored; only the effect opacity
    (default 1) reaches the ``rgba()`` value.
    """
    if not isinstance(node, StyledNode) or not node.effects:
        return []
    return [
        f"{format_number(effect.offset.x)}px {format_number(effect.offset.y)}px "
        f"{format_number(effect.radius)}px "
        f"{rgba(effect.color, 1 if effect.opacity is None else effect.opacity)}"
        for effect in node.effects
        if effect.type == "DROP_SHADOW" and effect.visible
    ]
