"""Typed design-node tree: models, loading and selection filtering."""

from figscribe.nodes.loader import load_nodes, parse_nodes
from figscribe.nodes.models import (
    MIXED,
    RGB,
    RGBA,
    SUPPORTED_KINDS,
    Effect,
    FontName,
    FrameNode,
    GroupNode,
    LetterSpacing,
    LineHeight,
    LineNode,
    Mixed,
    Node,
    OtherNode,
    Paint,
    SectionNode,
    ShapeNode,
    TextNode,
    Vector2,
    VectorNode,
)
from figscribe.nodes.selection import select_supported

__all__ = [
    "MIXED",
    "RGB",
    "RGBA",
    "SUPPORTED_KINDS",
    "Effect",
    "FontName",
    "FrameNode",
    "GroupNode",
    "LetterSpacing",
    "LineHeight",
    "LineNode",
    "Mixed",
    "Node",
    "OtherNode",
    "Paint",
    "SectionNode",
    "ShapeNode",
    "TextNode",
    "Vector2",
    "VectorNode",
    "load_nodes",
    "parse_nodes",
    "select_supported",
]
