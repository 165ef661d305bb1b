"""Tests for SVG rendering and color policies."""

import xml.etree.ElementTree as ET

import pytest

from flow_sankey.layout.engine import compute_layout
from flow_sankey.parser.mermaid import parse_sankey_mermaid
from flow_sankey.parser.model import SankeyGraph
from flow_sankey.render.colors import hex_to_rgb, palette_node_fill, with_alpha
from flow_sankey.render.svg import render_svg
from flow_sankey.themes import DARK_THEME, DEFAULT_THEME, THEMES


def _render_simple(theme=DEFAULT_THEME, **kwargs):
    graph = parse_sankey_mermaid(
        "%%sankey title: Test\n"
        "sankey-beta\n"
        "Input,Middle,10\n"
        "Middle,Output,10\n"
    )
    compute_layout(graph, 400, 300)
    return render_svg(graph, theme, **kwargs)


def test_render_produces_valid_svg():
    svg = _render_simple()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_contains_title():
    assert "Test" in _render_simple()


def test_render_contains_node_labels():
    svg = _render_simple()
    assert "Input" in svg
    assert "Middle" in svg
    assert "Output" in svg


def test_render_without_labels():
    svg = _render_simple(show_labels=False)
    assert "Input" not in svg


def test_render_default_colors():
    svg = _render_simple()
    assert "#18a0fb" in svg
    assert "rgba(24, 160, 251, 0.3)" in svg


def test_render_theme_background():
    assert DARK_THEME.background_color in _render_simple(DARK_THEME)


def test_render_custom_fills():
    svg = _render_simple(node_fill=lambda n: "#abcdef", link_fill=lambda l: "#fedcba")
    assert "#abcdef" in svg
    assert "#fedcba" in svg
    assert "#18a0fb" not in svg


def test_render_links_before_nodes():
    svg = _render_simple()
    root = ET.fromstring(svg)
    tags = [el.tag.split("}")[-1] for el in root.iter() if el.tag.split("}")[-1] in ("path", "rect")]
    # background rect, two link paths, then three node rects
    assert tags == ["rect", "path", "path", "rect", "rect", "rect"]


def test_render_color_overrides():
    graph = parse_sankey_mermaid(
        "%%sankey color: A | #ff0000\n"
        "sankey-beta\n"
        "A,B,1\n"
    )
    compute_layout(graph, 200, 100)
    svg = render_svg(graph, DEFAULT_THEME)
    assert "#ff0000" in svg
    assert "rgba(255, 0, 0, 0.3)" in svg


def test_render_empty_graph():
    graph = compute_layout(SankeyGraph(), 400, 300)
    svg = render_svg(graph, DEFAULT_THEME)
    assert "svg" in svg


@pytest.mark.parametrize("name", sorted(THEMES))
def test_render_every_theme(name):
    svg = _render_simple(THEMES[name])
    ET.fromstring(svg)


def test_palette_cycles_by_index():
    fill = palette_node_fill(DARK_THEME)
    graph = compute_layout(
        SankeyGraph.from_records([(f"n{i}", f"n{i + 1}", 1) for i in range(7)]), 800, 200
    )
    colors = [fill(node) for node in graph.nodes]
    assert colors[0] == DARK_THEME.node_palette[0]
    assert colors[6] == DARK_THEME.node_palette[0]
    assert colors[1] == DARK_THEME.node_palette[1]


def test_hex_to_rgb():
    assert hex_to_rgb("#18a0fb") == (24, 160, 251)
    assert hex_to_rgb("#fff") == (255, 255, 255)
    with pytest.raises(ValueError):
        hex_to_rgb("#12345")


def test_with_alpha():
    assert with_alpha("#000000", 0.5) == "rgba(0, 0, 0, 0.5)"
    assert with_alpha("steelblue", 0.5) == "steelblue"


def test_render_crowded_layer_has_no_negative_sizes():
    graph = SankeyGraph.from_records([("R", f"L{i}", 1) for i in range(30)])
    compute_layout(graph, 400, 200)
    svg = render_svg(graph, DEFAULT_THEME)
    root = ET.fromstring(svg)
    for el in root.iter():
        if el.tag.split("}")[-1] == "rect":
            assert float(el.get("height")) >= 0
