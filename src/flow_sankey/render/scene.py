"""Paint list for a laid-out Sankey graph.

The scene is the renderer-independent output of a layout: one filled
ribbon per link followed by one filled rectangle per node, so that links
are painted under nodes.
"""

from __future__ import annotations

from dataclasses import dataclass

from flow_sankey.layout.paths import LinkPath, link_path
from flow_sankey.parser.model import SankeyGraph, SankeyLink, SankeyNode
from flow_sankey.render.colors import LinkFill, NodeFill


@dataclass
class LinkRibbon:
    """A filled link outline and its color."""

    link: SankeyLink
    path: LinkPath
    color: str


@dataclass
class NodeRect:
    """A filled node rectangle and its color."""

    node: SankeyNode
    x: float
    y: float
    width: float
    height: float
    color: str


Primitive = LinkRibbon | NodeRect


def paint_scene(
    graph: SankeyGraph,
    node_fill: NodeFill,
    link_fill: LinkFill,
) -> list[Primitive]:
    """Return the paint list in link-then-node order.

    Each callback is called exactly once per link or node.
    """
    scene: list[Primitive] = []

    for link in graph.links:
        scene.append(LinkRibbon(
            link=link,
            path=link_path(graph.nodes, link),
            color=link_fill(link),
        ))

    for node in graph.nodes:
        scene.append(NodeRect(
            node=node,
            x=node.x0,
            y=node.y0,
            width=node.x1 - node.x0,
            height=node.y1 - node.y0,
            color=node_fill(node),
        ))

    return scene
