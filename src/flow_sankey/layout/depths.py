"""Depth assignment for Sankey layout (X-coordinate layering).

Breadth-first traversal from source nodes (nodes without incoming links).
A node reached again through a longer path has its depth raised and is
re-enqueued, so every node settles at its longest distance from a source
and every link points rightward.
"""

from __future__ import annotations

__all__ = ["CycleError", "assign_depths"]

import logging
from collections import deque

import networkx as nx

from flow_sankey.parser.model import SankeyLink, SankeyNode

logger = logging.getLogger(__name__)


class CycleError(ValueError):
    """Raised when depth assignment detects a cycle reachable from a source."""

    def __init__(self, message: str, cycle: list[str] | None = None) -> None:
        super().__init__(message)
        self.cycle = cycle or []


def assign_depths(
    nodes: list[SankeyNode],
    links: list[SankeyLink],
) -> list[int]:
    """Compute each node's depth (longest path length from a source).

    Self-loop links are ignored, since a node cannot precede itself.
    Nodes that no source reaches (e.g. members of a closed cycle) keep
    depth 0. A node may be re-enqueued at most ``len(nodes)`` times; going
    past that can only happen on a cycle and raises CycleError.

    Returns a list of depths indexed by node index.
    """
    n = len(nodes)
    depths = [0] * n
    visited = [False] * n
    enqueued = [0] * n
    queue: deque[int] = deque()

    for node in nodes:
        if _is_source(node, links):
            queue.append(node.index)
            visited[node.index] = True

    while queue:
        idx = queue.popleft()
        candidate = depths[idx] + 1

        for link_idx in nodes[idx].source_links:
            target = links[link_idx].target
            if target == idx:
                continue

            if not visited[target]:
                visited[target] = True
            elif candidate <= depths[target]:
                continue

            depths[target] = candidate
            enqueued[target] += 1
            if enqueued[target] > n:
                raise _cycle_error(nodes, links, nodes[target].name)
            queue.append(target)

    unreached = [node.name for node in nodes if not visited[node.index]]
    if unreached:
        logger.debug("Nodes unreachable from any source: %s", unreached)

    return depths


def _cycle_error(
    nodes: list[SankeyNode],
    links: list[SankeyLink],
    offending: str,
) -> CycleError:
    """Build a CycleError describing a cycle reachable from a source node."""
    G = nx.DiGraph()
    G.add_nodes_from(node.name for node in nodes)
    for link in links:
        if link.source != link.target:
            G.add_edge(nodes[link.source].name, nodes[link.target].name)

    sources = [node.name for node in nodes if _is_source(node, links)]
    try:
        edges = nx.find_cycle(G, source=sources or None)
    except nx.NetworkXNoCycle:
        return CycleError(f"Flow graph contains a cycle through '{offending}'")

    cycle = [u for u, _ in edges]
    path = " -> ".join(cycle + [cycle[0]])
    return CycleError(f"Flow graph contains a cycle: {path}", cycle=cycle)


def _is_source(node: SankeyNode, links: list[SankeyLink]) -> bool:
    """A source has no incoming links other than self-loops."""
    return all(links[i].source == node.index for i in node.target_links)
