"""Layout coordinator: graph building, depth assignment, placement and link stacking.

Every pass recomputes the whole layout from the graph's flow records and
replaces the graph's node and link lists. Nothing is mutated until all
preconditions hold and the depth assignment has succeeded.
"""

from __future__ import annotations

import logging

from flow_sankey.layout.builder import build_graph
from flow_sankey.layout.constants import ITERATIONS, NODE_PADDING, NODE_THICKNESS
from flow_sankey.layout.depths import assign_depths
from flow_sankey.layout.paths import compute_link_positions
from flow_sankey.layout.solver import (
    compute_node_values,
    position_nodes_horizontally,
    position_nodes_vertically,
    relax,
)
from flow_sankey.parser.model import SankeyGraph

logger = logging.getLogger(__name__)


def _check_preconditions(
    width: float,
    height: float,
    node_thickness: float,
    node_padding: float,
    iterations: int,
) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(
            f"Layout rectangle must have positive size, got {width}x{height}"
        )
    if node_thickness < 0:
        raise ValueError(f"node_thickness must be >= 0, got {node_thickness}")
    if node_padding < 0:
        raise ValueError(f"node_padding must be >= 0, got {node_padding}")
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")


def compute_layout(
    graph: SankeyGraph,
    width: float,
    height: float,
    node_thickness: float = NODE_THICKNESS,
    node_padding: float = NODE_PADDING,
    iterations: int = ITERATIONS,
    resolve_collisions: bool = True,
) -> SankeyGraph:
    """Compute node rectangles and link geometry for a width x height area.

    Stages run strictly in order: build nodes and links from the flow
    records, assign depths (layers), compute node values, place nodes
    horizontally by layer and vertically by proportional partition, relax
    vertical positions, and finally stack links on their nodes.

    Args:
        graph: The Sankey graph; its ``nodes`` and ``links`` are replaced.
        width: Width of the target rectangle.
        height: Height of the target rectangle.
        node_thickness: Horizontal size of every node rectangle.
        node_padding: Vertical gap between nodes of the same layer.
        iterations: Number of relaxation rounds (0 keeps the partition).
        resolve_collisions: Remove overlap within layers after each round.

    Returns the same graph, for chaining.
    """
    _check_preconditions(width, height, node_thickness, node_padding, iterations)

    nodes, links = build_graph(graph.records)
    depths = assign_depths(nodes, links)
    for node in nodes:
        node.depth = depths[node.index]
        node.layer = node.depth

    compute_node_values(nodes, links)
    position_nodes_horizontally(nodes, width, node_thickness)
    position_nodes_vertically(nodes, height, node_padding)
    relax(
        nodes,
        links,
        height,
        node_padding=node_padding,
        iterations=iterations,
        collisions=resolve_collisions,
    )
    compute_link_positions(nodes, links)

    graph.nodes = nodes
    graph.links = links
    graph.width = width
    graph.height = height

    logger.debug(
        "Laid out %d nodes in %d layers, %d links (%gx%g)",
        len(nodes),
        max((n.layer for n in nodes), default=-1) + 1,
        len(links),
        width,
        height,
    )
    return graph
