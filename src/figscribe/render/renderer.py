"""Node-variant renderer: turns a node tree into an indented bullet description.

Every visible node yields one line starting with ``- `` (or an
``Unknown node type`` line for unmodelled kinds). Containers follow their line
with the rendered children, indented one level deeper per nesting depth.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from figscribe.nodes.models import (
    MIXED,
    BaseSceneNode,
    FrameNode,
    GroupNode,
    LetterSpacing,
    LineHeight,
    LineNode,
    Node,
    SectionNode,
    ShapeNode,
    TextNode,
    VectorNode,
)
from figscribe.render import styles
from figscribe.render.formatting import format_number, indent, opacity_percent

logger = logging.getLogger(__name__)

CHILD_INDENT = 2

# Everything str.splitlines() treats as a line boundary; text content must stay on one line.
_LINE_BREAKS = re.compile("\r\n|[\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029]")


def render_nodes(nodes: Sequence[Node], *, indent_width: int = CHILD_INDENT) -> str:
    """Render the visible nodes in order, one block per node, newline-joined.

    ``indent_width`` is the number of spaces each nesting level adds.
    """
    return "\n".join(
        render_node(node, indent_width=indent_width) for node in nodes if node.visible
    )


def render_node(node: Node, *, indent_width: int = CHILD_INDENT) -> str:
    """Render a single node regardless of its visibility flag."""
    match node:
        case ShapeNode():
            return _render_shape(node)
        case GroupNode():
            return _render_group(node, indent_width)
        case FrameNode():
            return _render_frame(node, indent_width)
        case TextNode():
            return _render_text(node)
        case LineNode():
            return _render_line(node)
        case VectorNode():
            return _render_vector(node)
        case SectionNode():
            return _render_section(node, indent_width)
        case _:
            logger.warning("no renderer for node type %s", node.type)
            return f"Unknown node type: {node.type}"


# -- shared pieces -----------------------------------------------------------


def _component_name(node: BaseSceneNode) -> str:
    return f" (Component Name: {node.name})" if node.name else ""


def _dimensions(node: BaseSceneNode) -> str:
    return f"{format_number(node.width)}x{format_number(node.height)}px"


def _position(node: BaseSceneNode) -> str:
    return f"({format_number(node.x)},{format_number(node.y)})px"


def _opacity(node: BaseSceneNode) -> int:
    return opacity_percent(1 if node.opacity is None else node.opacity)


def _children_block(children: Sequence[Node], indent_width: int) -> str:
    """Render each child on its own, drop empty renders, indent the result."""
    rendered = (render_nodes([child], indent_width=indent_width) for child in children)
    return indent("\n".join(text for text in rendered if text), indent_width)


# -- variants ----------------------------------------------------------------


def _render_shape(node: ShapeNode) -> str:
    shadow = ", ".join(styles.shadows(node))
    return (
        f"- A {node.type.lower()}{_component_name(node)} with dimensions {_dimensions(node)}, "
        f"positioned at {_position(node)}, with background color {styles.background_color(node)}, "
        f"border width {styles.border_width(node)} color {styles.border_color(node)}, "
        f"opacity at {_opacity(node)}%, border radius {styles.border_radius(node)}, "
        f"and shadow {shadow}."
    )


def _render_group(node: GroupNode, indent_width: int) -> str:
    return (
        f"- A group{_component_name(node)} with {len(node.children)} children, "
        f"dimensions {_dimensions(node)}, positioned at {_position(node)}, "
        f"with properties:\n{_children_block(node.children, indent_width)}"
    )


def _layout_info(node: FrameNode) -> str:
    if node.layout_mode in (None, "NONE"):
        return "Layout mode: NONE"
    return (
        f"Layout mode: {node.layout_mode}, "
        f"Alignment: {node.primary_axis_align_items}/{node.counter_axis_align_items}, "
        f"Padding: {styles.padding(node)}"
    )


def _render_frame(node: FrameNode, indent_width: int) -> str:
    return (
        f"- A {node.type.lower()} frame{_component_name(node)} with {len(node.children)} children, "
        f"dimensions {_dimensions(node)}, positioned at {_position(node)}, "
        f"{_layout_info(node)}:\n{_children_block(node.children, indent_width)}"
    )


def _render_section(node: SectionNode, indent_width: int) -> str:
    return (
        f"- A section node{_component_name(node)} with {len(node.children)} children, "
        f"dimensions {_dimensions(node)}, positioned at {_position(node)}:\n"
        f"{_children_block(node.children, indent_width)}"
    )


def _line_height(value: LineHeight | float | str | None) -> str:
    if isinstance(value, LineHeight):
        if value.unit == "AUTO" or value.value is None:
            return "auto"
        return f"{format_number(value.value)}{value.unit}"
    if isinstance(value, (int, float)):
        return format_number(value)
    return "auto"


def _letter_spacing(value: LetterSpacing | float | str | None) -> str:
    if isinstance(value, LetterSpacing):
        return f"{format_number(value.value)}{value.unit}"
    if isinstance(value, (int, float)):
        return format_number(value)
    return "normal"


def _render_text(node: TextNode) -> str:
    content = _LINE_BREAKS.sub(r"\\n", node.characters)
    if node.font_name is None or node.font_name == MIXED:
        family, style = "Unknown", "Unknown"
    else:
        family, style = node.font_name.family, node.font_name.style
    font_size = node.font_size if isinstance(node.font_size, (int, float)) else 0
    return (
        f'- Text node{_component_name(node)} with content: "{content}", '
        f"font size {format_number(font_size)}px, font family {family}, font style {style}, "
        f"alignment {node.text_align_horizontal or 'LEFT'}, "
        f"color {styles.background_color(node)}, opacity at {_opacity(node)}%, "
        f"line height {_line_height(node.line_height)}, "
        f"and letter spacing {_letter_spacing(node.letter_spacing)}."
    )


def _render_line(node: LineNode) -> str:
    end_x = format_number(node.x + node.width)
    end_y = format_number(node.y + node.height)
    weight = node.stroke_weight if isinstance(node.stroke_weight, (int, float)) else 0
    return (
        f"- A line{_component_name(node)} from {_position(node)} to ({end_x},{end_y})px, "
        f"with stroke width {format_number(weight)}px, color {styles.border_color(node)}, "
        f"and opacity at {_opacity(node)}%."
    )


def _render_vector(node: VectorNode) -> str:
    return (
        f"- A vector node{_component_name(node)} with dimensions {_dimensions(node)}, "
        f"positioned at {_position(node)}."
    )
