"""Data model for Sankey flow graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class FlowRecord:
    """A weighted directed flow between two named entities (layout input)."""

    source: str
    target: str
    value: float


@dataclass
class SankeyNode:
    """A node in the flow network, drawn as a rectangle."""

    name: str
    index: int
    # Populated by layout engine
    layer: int = 0
    depth: int = 0
    value: float = 0.0
    x0: float = 0.0
    x1: float = 0.0
    y0: float = 0.0
    y1: float = 0.0
    source_links: list[int] = field(default_factory=list)  # outgoing
    target_links: list[int] = field(default_factory=list)  # incoming

    @property
    def height(self) -> float:
        """Vertical extent of the node rectangle."""
        return self.y1 - self.y0

    @property
    def center(self) -> float:
        """Vertical center of the node rectangle."""
        return (self.y0 + self.y1) / 2.0


@dataclass
class SankeyLink:
    """A directed weighted flow between two nodes, drawn as a ribbon.

    ``width`` is the ribbon thickness at the source node and
    ``target_width`` the thickness at the target node; they differ when the
    two endpoint nodes scale their value to different heights.
    """

    source: int
    target: int
    value: float
    y0: float = 0.0
    y1: float = 0.0
    width: float = 0.0
    target_width: float = 0.0

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass
class SankeyGraph:
    """Complete Sankey diagram definition plus the last computed layout."""

    title: str = ""
    style: str = "default"
    records: list[FlowRecord] = field(default_factory=list)
    # node name -> CSS color, from %%sankey color: directives
    node_colors: dict[str, str] = field(default_factory=dict)
    # Populated by layout engine (replaced wholesale on every pass)
    nodes: list[SankeyNode] = field(default_factory=list)
    links: list[SankeyLink] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_records(cls, records: Iterable[FlowRecord | tuple], **kwargs) -> SankeyGraph:
        """Build a graph from FlowRecords or ``(source, target, value)`` tuples."""
        graph = cls(**kwargs)
        for record in records:
            if isinstance(record, FlowRecord):
                graph.add_record(record)
            else:
                graph.add_flow(*record)
        return graph

    def add_record(self, record: FlowRecord) -> None:
        self.records.append(record)

    def add_flow(self, source: str, target: str, value: float) -> None:
        self.records.append(FlowRecord(source=source, target=target, value=value))

    def node_names(self) -> list[str]:
        """Return node names in first-seen order (sources before targets)."""
        names: list[str] = []
        seen: set[str] = set()
        for record in self.records:
            for name in (record.source, record.target):
                if name not in seen:
                    names.append(name)
                    seen.add(name)
        return names

    def node(self, name: str) -> SankeyNode | None:
        """Return the computed node with the given name, or None."""
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def outgoing(self, node: SankeyNode) -> list[SankeyLink]:
        return [self.links[i] for i in node.source_links]

    def incoming(self, node: SankeyNode) -> list[SankeyLink]:
        return [self.links[i] for i in node.target_links]
