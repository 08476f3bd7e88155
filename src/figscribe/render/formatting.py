"""Formatting primitives: numbers, opacity, colors and indentation."""

from __future__ import annotations

import math
import textwrap
from decimal import ROUND_HALF_UP, Context, Decimal

from figscribe.nodes.models import RGB

_TWO_PLACES = Decimal("0.01")
# Wide enough for any finite double at two decimal places.
_CONTEXT = Context(prec=400)


def format_number(value: float) -> str:
    """Round to two decimals and drop trailing zeros.

    Rounds half away from zero on the exact binary value, so the result does
    not depend on locale or on Python's banker's rounding.
    """
    if not math.isfinite(value):
        return str(value)
    rounded = Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP, context=_CONTEXT)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def opacity_percent(opacity: float) -> int:
    """0.5 -> 50."""
    return _round_half_up(opacity * 100)


def _format_alpha(alpha: float) -> str:
    if float(alpha).is_integer():
        return str(int(alpha))
    return repr(float(alpha))


def rgba(color: RGB, opacity: float = 1) -> str:
    """Render a normalized color as ``rgba(R, G, B, A)``.

    Channels are scaled to 0-255; the alpha is the raw fraction.
    """
    r = _round_half_up(color.r * 255)
    g = _round_half_up(color.g * 255)
    b = _round_half_up(color.b * 255)
    return f"rgba({r}, {g}, {b}, {_format_alpha(opacity)})"


def indent(text: str, width: int = 2) -> str:
    """Prefix every non-blank line of ``text`` with ``width`` spaces."""
    if width <= 0:
        return text
    return textwrap.indent(text, " " * width)
