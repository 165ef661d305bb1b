"""SVG generation for Sankey diagrams using drawsvg."""

from __future__ import annotations

import logging

import drawsvg as draw

from flow_sankey.parser.model import SankeyGraph
from flow_sankey.render.colors import (
    LinkFill,
    NodeFill,
    palette_node_fill,
    source_link_fill,
)
from flow_sankey.render.constants import CANVAS_PADDING, TITLE_BASELINE, TITLE_HEIGHT
from flow_sankey.render.scene import LinkRibbon, NodeRect, paint_scene
from flow_sankey.render.style import Theme

logger = logging.getLogger(__name__)


def render_svg(
    graph: SankeyGraph,
    theme: Theme,
    padding: float = CANVAS_PADDING,
    node_fill: NodeFill | None = None,
    link_fill: LinkFill | None = None,
    show_labels: bool = True,
) -> str:
    """Render a laid-out Sankey graph to an SVG string.

    ``node_fill`` and ``link_fill`` default to the theme's color policy
    (palette by node index, links tinted like their source node).
    """
    if not graph.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    if node_fill is None:
        node_fill = palette_node_fill(theme, graph.node_colors)
    if link_fill is None:
        link_fill = source_link_fill(theme, graph.nodes, node_fill)

    top = padding + (TITLE_HEIGHT if graph.title else 0.0)
    svg_width = int(graph.width + padding * 2)
    svg_height = int(graph.height + top + padding)

    d = draw.Drawing(svg_width, svg_height)

    # Background
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    # Title
    if graph.title:
        d.append(draw.Text(
            graph.title,
            theme.title_font_size,
            padding, TITLE_BASELINE,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    scene = paint_scene(graph, node_fill, link_fill)
    for item in scene:
        if isinstance(item, LinkRibbon):
            _render_link(d, item, padding, top)
        else:
            _render_node(d, item, theme, padding, top)

    if show_labels:
        _render_labels(d, graph, theme, padding, top)

    logger.debug("Rendered %d paint primitives", len(scene))
    return d.as_svg()


def _render_link(
    d: draw.Drawing,
    ribbon: LinkRibbon,
    dx: float,
    dy: float,
) -> None:
    """Render a link ribbon as a filled closed path."""
    path = draw.Path(fill=ribbon.color, stroke="none")
    for cmd in ribbon.path.commands:
        coords = [c for x, y in cmd.points for c in (x + dx, y + dy)]
        if cmd.op == "M":
            path.M(*coords)
        elif cmd.op == "C":
            path.C(*coords)
        elif cmd.op == "L":
            path.L(*coords)
        elif cmd.op == "Z":
            path.Z()
    d.append(path)


def _render_node(
    d: draw.Drawing,
    rect: NodeRect,
    theme: Theme,
    dx: float,
    dy: float,
) -> None:
    """Render a node as a filled rectangle."""
    d.append(draw.Rectangle(
        rect.x + dx, rect.y + dy,
        rect.width, rect.height,
        fill=rect.color,
        stroke=theme.node_stroke,
        stroke_width=theme.node_stroke_width,
    ))


def _render_labels(
    d: draw.Drawing,
    graph: SankeyGraph,
    theme: Theme,
    dx: float,
    dy: float,
) -> None:
    """Render node names beside their rectangles.

    Labels sit right of the node, except in the last layer where they
    sit left of it so they stay inside the diagram.
    """
    max_layer = max(node.layer for node in graph.nodes)
    for node in graph.nodes:
        if node.layer == max_layer and max_layer > 0:
            x = node.x0 - theme.label_gap
            anchor = "end"
        else:
            x = node.x1 + theme.label_gap
            anchor = "start"

        d.append(draw.Text(
            node.name,
            theme.label_font_size,
            x + dx, node.center + dy,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor=anchor,
            dominant_baseline="central",
        ))
