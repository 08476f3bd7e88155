"""Tests for figscribe.nodes — models, loading and selection filtering."""

import json

import pytest
import yaml
from pydantic import ValidationError

from figscribe.nodes.loader import load_nodes, parse_nodes
from figscribe.nodes.models import (
    MIXED,
    FrameNode,
    LineHeight,
    OtherNode,
    ShapeNode,
    TextNode,
)
from figscribe.nodes.selection import select_supported


# ── models ──────────────────────────────────────────────────────────


class TestNodeModels:
    def test_kinds_dispatch_to_variants(self, sample_export):
        nodes = parse_nodes(sample_export)
        assert isinstance(nodes[0], FrameNode)
        assert isinstance(nodes[1], OtherNode)
        title, star, hidden = nodes[0].children
        assert isinstance(title, TextNode)
        assert isinstance(star, OtherNode)
        assert isinstance(hidden, ShapeNode)

    def test_camel_case_fields(self, sample_export):
        frame = parse_nodes(sample_export)[0]
        assert frame.layout_mode == "VERTICAL"
        assert frame.primary_axis_align_items == "MIN"
        assert frame.padding_top == 24
        assert frame.padding_right is None

    def test_snake_case_fields(self):
        (frame,) = parse_nodes([{"type": "FRAME", "layout_mode": "HORIZONTAL", "padding_top": 4}])
        assert frame.layout_mode == "HORIZONTAL"
        assert frame.padding_top == 4

    def test_mixed_sentinel_kept(self, sample_export):
        title = parse_nodes(sample_export)[0].children[0]
        assert title.letter_spacing == MIXED
        assert isinstance(title.line_height, LineHeight)

    def test_unknown_kind_keeps_extra_attributes(self, sample_export):
        star = parse_nodes(sample_export)[0].children[1]
        assert star.type == "STAR"
        assert star.name == "Sparkle"

    @pytest.mark.parametrize("kind", [["RECTANGLE"], {"name": "FRAME"}, 7, None])
    def test_non_string_kind_is_validation_error(self, kind):
        with pytest.raises(ValidationError):
            parse_nodes([{"type": kind}])

    def test_visibility_defaults_true(self):
        (node,) = parse_nodes([{"type": "VECTOR"}])
        assert node.visible is True

    def test_opacity_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            parse_nodes([{"type": "RECTANGLE", "opacity": 1.5}])

    def test_rectangle_requires_type(self):
        with pytest.raises(ValidationError):
            ShapeNode()

    def test_single_node_mapping(self):
        nodes = parse_nodes({"type": "LINE", "width": 10})
        assert len(nodes) == 1
        assert nodes[0].width == 10

    def test_selection_wrapper(self, sample_export):
        assert len(parse_nodes({"selection": sample_export})) == 2
        assert len(parse_nodes({"nodes": sample_export})) == 2

    def test_empty_document(self):
        assert parse_nodes(None) == []
        assert parse_nodes([]) == []


# ── loader ──────────────────────────────────────────────────────────


class TestLoadNodes:
    def test_loads_json(self, tmp_path, sample_export):
        path = tmp_path / "selection.json"
        path.write_text(json.dumps(sample_export))
        nodes = load_nodes(path)
        assert [n.type for n in nodes] == ["FRAME", "SLICE"]

    def test_loads_yaml(self, tmp_path, sample_export):
        path = tmp_path / "selection.yaml"
        path.write_text(yaml.safe_dump({"selection": sample_export}))
        nodes = load_nodes(str(path))
        assert nodes[0].children[0].characters == "Welcome\nback"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_nodes(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("  bad:\nyaml: [unterminated")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_nodes(path)

    def test_invalid_nodes(self, tmp_path):
        path = tmp_path / "nodes.json"
        path.write_text(json.dumps([{"type": "TEXT", "fontSize": "huge"}]))
        with pytest.raises(ValueError, match="Invalid nodes"):
            load_nodes(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_nodes(tmp_path / "missing.json")


# ── selection ───────────────────────────────────────────────────────


class TestSelectSupported:
    def test_drops_unsupported_kinds(self, sample_export):
        nodes = select_supported(parse_nodes(sample_export))
        assert [n.type for n in nodes] == ["FRAME"]

    def test_keeps_invisible_supported_nodes(self):
        nodes = parse_nodes([
            {"type": "RECTANGLE", "visible": False},
            {"type": "STICKY"},
            {"type": "ELLIPSE"},
        ])
        assert [n.type for n in select_supported(nodes)] == ["RECTANGLE", "ELLIPSE"]

    def test_every_supported_kind(self):
        kinds = [
            "RECTANGLE", "ELLIPSE", "LINE", "TEXT", "VECTOR", "GROUP", "FRAME",
            "INSTANCE", "COMPONENT", "COMPONENT_SET", "SECTION",
        ]
        nodes = parse_nodes([{"type": k} for k in kinds])
        assert [n.type for n in select_supported(nodes)] == kinds

    def test_empty_selection(self):
        assert select_supported([]) == []
