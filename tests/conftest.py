"""Shared test fixtures for figscribe."""

import pytest

from figscribe.config.models import FigscribeConfig
from figscribe.nodes.models import (
    RGB,
    Effect,
    FontName,
    FrameNode,
    GroupNode,
    LineHeight,
    Paint,
    ShapeNode,
    TextNode,
)


@pytest.fixture
def red_rectangle():
    return ShapeNode(
        type="RECTANGLE",
        name="Card",
        x=10,
        y=20,
        width=100,
        height=50.5,
        opacity=1,
        fills=[Paint(type="SOLID", color=RGB(r=1, g=0, b=0))],
        strokes=[Paint(type="SOLID", color=RGB(r=0, g=0, b=0), opacity=0.5)],
        stroke_weight=2,
        corner_radius=8,
        effects=[
            Effect(
                type="DROP_SHADOW",
                radius=4,
                offset={"x": 0, "y": 2},
                color={"r": 0, "g": 0, "b": 0},
                opacity=0.25,
            ),
        ],
    )


@pytest.fixture
def label_text():
    return TextNode(
        name="Label",
        characters="Sign in",
        font_size=14,
        font_name=FontName(family="Inter", style="Bold"),
        text_align_horizontal="CENTER",
        fills=[Paint(type="SOLID", color=RGB(r=1, g=1, b=1))],
        line_height=LineHeight(unit="PIXELS", value=20),
    )


@pytest.fixture
def button_frame(red_rectangle, label_text):
    """An auto-layout component with a background and a label."""
    return FrameNode(
        type="COMPONENT",
        name="Button",
        width=120,
        height=40,
        layout_mode="HORIZONTAL",
        primary_axis_align_items="CENTER",
        counter_axis_align_items="CENTER",
        padding_top=8,
        padding_right=16,
        padding_bottom=8,
        padding_left=16,
        children=[red_rectangle, label_text],
    )


@pytest.fixture
def nested_group(button_frame):
    return GroupNode(name="Toolbar", width=300, height=60, children=[button_frame])


@pytest.fixture
def sample_export():
    """A camelCase selection export as the host plugin would post it."""
    return [
        {
            "type": "FRAME",
            "name": "Login",
            "x": 0,
            "y": 0,
            "width": 320,
            "height": 480,
            "layoutMode": "VERTICAL",
            "primaryAxisAlignItems": "MIN",
            "counterAxisAlignItems": "CENTER",
            "paddingTop": 24,
            "paddingLeft": 24,
            "children": [
                {
                    "type": "TEXT",
                    "name": "Title",
                    "characters": "Welcome\nback",
                    "fontSize": 24,
                    "fontName": {"family": "Inter", "style": "Regular"},
                    "lineHeight": {"unit": "AUTO"},
                    "letterSpacing": "MIXED",
                },
                {"type": "STAR", "name": "Sparkle", "pointCount": 5},
                {"type": "RECTANGLE", "name": "Hidden", "visible": False},
            ],
        },
        {"type": "SLICE", "name": "Export area"},
    ]


@pytest.fixture
def sample_config():
    return FigscribeConfig()
