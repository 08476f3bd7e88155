"""Pydantic models for design nodes as exported by the host tool."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel

# The host marks attributes that differ across sub-elements (e.g. a text node
# with two font sizes) with this value instead of a single concrete one.
MIXED = "MIXED"
Mixed = Literal["MIXED"]


class _HostModel(BaseModel):
    """Accepts both snake_case and the host's camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RGB(_HostModel):
    r: float = Field(ge=0, le=1)
    g: float = Field(ge=0, le=1)
    b: float = Field(ge=0, le=1)


class RGBA(RGB):
    a: float = Field(default=1.0, ge=0, le=1)


class Vector2(_HostModel):
    x: float = 0
    y: float = 0


class Paint(_HostModel):
    """A single fill or stroke entry. Only SOLID paints carry a color."""

    type: str = "SOLID"
    color: RGB | None = None
    opacity: float | None = Field(default=None, ge=0, le=1)
    visible: bool = True


class Effect(_HostModel):
    type: str
    visible: bool = True
    radius: float = 0
    color: RGBA = Field(default_factory=lambda: RGBA(r=0, g=0, b=0))
    opacity: float | None = Field(default=None, ge=0, le=1)
    offset: Vector2 = Field(default_factory=Vector2)


class FontName(_HostModel):
    family: str
    style: str


class LineHeight(_HostModel):
    unit: Literal["AUTO", "PIXELS", "PERCENT"] = "AUTO"
    value: float | None = None


class LetterSpacing(_HostModel):
    unit: Literal["PIXELS", "PERCENT"] = "PIXELS"
    value: float = 0


class BaseSceneNode(_HostModel):
    """Attributes shared by every node kind."""

    type: str
    id: str | None = None
    name: str = ""
    visible: bool = True
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    opacity: float | None = Field(default=None, ge=0, le=1)


class StyledNode(BaseSceneNode):
    """Nodes that carry paint, stroke and effect attributes."""

    fills: list[Paint] | Mixed | None = None
    strokes: list[Paint] | None = None
    stroke_weight: float | Mixed | None = None
    corner_radius: float | Mixed | None = None
    effects: list[Effect] | None = None


class ShapeNode(StyledNode):
    type: Literal["RECTANGLE", "ELLIPSE"]


class LineNode(StyledNode):
    type: Literal["LINE"] = "LINE"


class VectorNode(StyledNode):
    type: Literal["VECTOR"] = "VECTOR"


class TextNode(StyledNode):
    type: Literal["TEXT"] = "TEXT"
    characters: str = ""
    font_size: float | Mixed | None = None
    font_name: FontName | Mixed | None = None
    text_align_horizontal: str | None = None
    line_height: LineHeight | float | Mixed | None = None
    letter_spacing: LetterSpacing | float | Mixed | None = None


class GroupNode(StyledNode):
    type: Literal["GROUP"] = "GROUP"
    children: list[Node] = Field(default_factory=list)


class FrameNode(StyledNode):
    """Frames and the component family, which share the auto-layout attributes."""

    type: Literal["FRAME", "COMPONENT", "COMPONENT_SET", "INSTANCE"] = "FRAME"
    children: list[Node] = Field(default_factory=list)
    layout_mode: str | None = "NONE"
    primary_axis_align_items: str | None = None
    counter_axis_align_items: str | None = None
    padding_top: float | None = None
    padding_right: float | None = None
    padding_bottom: float | None = None
    padding_left: float | None = None


class SectionNode(StyledNode):
    type: Literal["SECTION"] = "SECTION"
    children: list[Node] = Field(default_factory=list)


class OtherNode(BaseSceneNode):
    """Any node kind not modelled above (stars, slices, stickies...)."""

    model_config = ConfigDict(extra="allow")


_KIND_TAGS: dict[str, str] = {
    "RECTANGLE": "shape",
    "ELLIPSE": "shape",
    "LINE": "line",
    "TEXT": "text",
    "VECTOR": "vector",
    "GROUP": "group",
    "FRAME": "frame",
    "COMPONENT": "frame",
    "COMPONENT_SET": "frame",
    "INSTANCE": "frame",
    "SECTION": "section",
}

SUPPORTED_KINDS: frozenset[str] = frozenset(_KIND_TAGS)


def _node_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if not isinstance(kind, str):
        return "other"
    return _KIND_TAGS.get(kind, "other")


Node = Annotated[
    Union[
        Annotated[ShapeNode, Tag("shape")],
        Annotated[LineNode, Tag("line")],
        Annotated[TextNode, Tag("text")],
        Annotated[VectorNode, Tag("vector")],
        Annotated[GroupNode, Tag("group")],
        Annotated[FrameNode, Tag("frame")],
        Annotated[SectionNode, Tag("section")],
        Annotated[OtherNode, Tag("other")],
    ],
    Discriminator(_node_tag),
]

GroupNode.model_rebuild()
FrameNode.model_rebuild()
SectionNode.model_rebuild()
