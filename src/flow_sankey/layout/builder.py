"""Graph construction: flow records to indexed nodes and links.

Node indices are dense and assigned in first-seen order, scanning each
record's source before its target. Link indices follow record order and
are recorded on both endpoint nodes.
"""

from __future__ import annotations

__all__ = ["build_graph"]

import logging
from typing import Iterable

from flow_sankey.parser.model import FlowRecord, SankeyLink, SankeyNode

logger = logging.getLogger(__name__)


def build_graph(
    records: Iterable[FlowRecord],
) -> tuple[list[SankeyNode], list[SankeyLink]]:
    """Build the node and link lists for a sequence of flow records.

    Parallel records between the same pair stay separate links. Values are
    not validated: zero and negative values propagate unchanged.

    Returns (nodes, links).
    """
    node_map: dict[str, int] = {}
    nodes: list[SankeyNode] = []
    links: list[SankeyLink] = []

    def node_index(name: str) -> int:
        idx = node_map.get(name)
        if idx is None:
            idx = len(nodes)
            node_map[name] = idx
            nodes.append(SankeyNode(name=name, index=idx))
        return idx

    for record in records:
        source = node_index(record.source)
        target = node_index(record.target)

        link_idx = len(links)
        nodes[source].source_links.append(link_idx)
        nodes[target].target_links.append(link_idx)
        links.append(SankeyLink(source=source, target=target, value=record.value))

        if record.value < 0:
            logger.warning(
                "Negative flow value %s for %s -> %s",
                record.value, record.source, record.target,
            )
        if source == target:
            logger.warning("Self-loop flow on node %s", record.source)

    logger.debug("Built %d nodes and %d links", len(nodes), len(links))
    return nodes, links
