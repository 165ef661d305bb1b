"""Node value, position and relaxation for Sankey layout.

Horizontal position follows the node layer. Vertical position starts as
a proportional partition of the rectangle height within each layer, then
relaxation passes nudge connected nodes toward each other's centers.
"""

from __future__ import annotations

__all__ = [
    "compute_node_values",
    "group_layers",
    "layer_padding",
    "position_nodes_horizontally",
    "position_nodes_vertically",
    "relax",
    "relax_left_to_right",
    "relax_right_to_left",
    "resolve_collisions",
]

import logging

from flow_sankey.layout.constants import (
    ITERATIONS,
    MIN_LAYER_DENOMINATOR,
    NODE_PADDING,
    NODE_THICKNESS,
    RELAXATION_FACTOR,
)
from flow_sankey.parser.model import SankeyLink, SankeyNode

logger = logging.getLogger(__name__)


def compute_node_values(nodes: list[SankeyNode], links: list[SankeyLink]) -> None:
    """Set each node's value to max(outgoing sum, incoming sum)."""
    out_values = [0.0] * len(nodes)
    in_values = [0.0] * len(nodes)
    for link in links:
        out_values[link.source] += link.value
        in_values[link.target] += link.value

    for node in nodes:
        node.value = max(out_values[node.index], in_values[node.index])


def position_nodes_horizontally(
    nodes: list[SankeyNode],
    width: float,
    node_thickness: float = NODE_THICKNESS,
) -> None:
    """Spread layers evenly so the last layer's right edge meets ``width``."""
    if not nodes:
        return

    max_layer = max(node.layer for node in nodes)
    kx = (width - node_thickness) / max_layer if max_layer > 0 else 0.0

    for node in nodes:
        node.x0 = node.layer * kx
        node.x1 = node.x0 + node_thickness


def group_layers(nodes: list[SankeyNode]) -> list[list[SankeyNode]]:
    """Group nodes by layer, each group in index order."""
    if not nodes:
        return []
    max_layer = max(node.layer for node in nodes)
    layers: list[list[SankeyNode]] = [[] for _ in range(max_layer + 1)]
    for node in nodes:
        layers[node.layer].append(node)
    return layers


def layer_padding(count: int, height: float, node_padding: float = NODE_PADDING) -> float:
    """Gap between adjacent nodes in a layer of ``count`` nodes.

    Shrinks ``node_padding`` when the gaps alone would exceed ``height``,
    so crowded layers get zero-height nodes rather than negative ones.
    """
    if count < 2:
        return node_padding
    return min(node_padding, height / (count - 1))


def position_nodes_vertically(
    nodes: list[SankeyNode],
    height: float,
    node_padding: float = NODE_PADDING,
) -> None:
    """Stack each layer's nodes top to bottom, sized by value.

    A layer's nodes share ``height`` minus the padding between them in
    proportion to their values. A layer whose values sum to zero splits
    that space equally instead. Gaps come from layer_padding().
    """
    for layer in group_layers(nodes):
        if not layer:
            continue

        padding = layer_padding(len(layer), height, node_padding)
        available = max(height - (len(layer) - 1) * padding, 0.0)
        total_value = sum(node.value for node in layer)

        y = 0.0
        if total_value == 0:
            share = available / len(layer)
            for node in layer:
                node.y0 = y
                node.y1 = y + share
                y = node.y1 + padding
            continue

        ky = available / max(total_value, MIN_LAYER_DENOMINATOR)
        for node in layer:
            node.y0 = y
            node.y1 = y + node.value * ky
            y = node.y1 + padding


def _shift(node: SankeyNode, dy: float) -> None:
    height = node.y1 - node.y0
    node.y0 += dy
    node.y1 = node.y0 + height


def relax_left_to_right(
    nodes: list[SankeyNode],
    links: list[SankeyLink],
    factor: float = RELAXATION_FACTOR,
) -> None:
    """Nudge each link's target toward its source, one link at a time."""
    for link in links:
        source = nodes[link.source]
        target = nodes[link.target]
        _shift(target, (source.center - target.center) * factor)


def relax_right_to_left(
    nodes: list[SankeyNode],
    links: list[SankeyLink],
    factor: float = RELAXATION_FACTOR,
) -> None:
    """Nudge each link's source toward its target, one link at a time."""
    for link in links:
        source = nodes[link.source]
        target = nodes[link.target]
        _shift(source, (target.center - source.center) * factor)


def resolve_collisions(
    nodes: list[SankeyNode],
    height: float,
    node_padding: float = NODE_PADDING,
) -> None:
    """Remove vertical overlap within each layer and keep nodes in bounds.

    Each layer is sorted by ``y0``, swept top-down pushing nodes below
    their upper neighbour (plus padding), then swept bottom-up pulling
    nodes back above ``height``. Node heights are never changed.
    """
    for layer in group_layers(nodes):
        if not layer:
            continue
        ordered = sorted(layer, key=lambda node: (node.y0, node.index))
        padding = layer_padding(len(ordered), height, node_padding)

        y = 0.0
        for node in ordered:
            dy = y - node.y0
            if dy > 0:
                _shift(node, dy)
            y = node.y1 + padding

        y = height
        for node in reversed(ordered):
            dy = node.y1 - y
            if dy > 0:
                _shift(node, -dy)
            y = node.y0 - padding


def relax(
    nodes: list[SankeyNode],
    links: list[SankeyLink],
    height: float,
    node_padding: float = NODE_PADDING,
    iterations: int = ITERATIONS,
    collisions: bool = True,
) -> None:
    """Run ``iterations`` rounds of left-to-right then right-to-left passes.

    With ``collisions`` set, each round ends with resolve_collisions().
    """
    for _ in range(iterations):
        relax_left_to_right(nodes, links)
        relax_right_to_left(nodes, links)
        if collisions:
            resolve_collisions(nodes, height, node_padding)

    logger.debug("Ran %d relaxation iterations", iterations)
