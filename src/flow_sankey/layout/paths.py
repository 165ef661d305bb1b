"""Link stacking and ribbon outlines for Sankey links.

Links are stacked on both endpoint nodes in link construction order,
each taking a slice of the node height proportional to its value. The
ribbon outline is a closed path: a cubic S-curve along the top edge, a
vertical line down the target side, and a mirrored S-curve back along the
bottom edge.
"""

from __future__ import annotations

__all__ = ["LinkPath", "compute_link_positions", "link_path"]

from dataclasses import dataclass, field

from flow_sankey.parser.model import SankeyLink, SankeyNode

Point = tuple[float, float]


@dataclass
class PathCommand:
    """One drawing command of a link outline.

    ``op`` is ``"M"`` (move), ``"C"`` (cubic Bezier: two control points
    then the end point), ``"L"`` (line) or ``"Z"`` (close).
    """

    op: str
    points: list[Point] = field(default_factory=list)


@dataclass
class LinkPath:
    """Closed outline of a link ribbon, ready for filled rendering."""

    link: SankeyLink
    commands: list[PathCommand]

    def to_svg(self, dx: float = 0.0, dy: float = 0.0) -> str:
        """Format as SVG path data, optionally translated by (dx, dy)."""
        parts = []
        for cmd in self.commands:
            coords = " ".join(f"{_fmt(x + dx)},{_fmt(y + dy)}" for x, y in cmd.points)
            parts.append(f"{cmd.op}{coords}" if coords else cmd.op)
        return " ".join(parts)


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def compute_link_positions(nodes: list[SankeyNode], links: list[SankeyLink]) -> None:
    """Set each link's widths and its stacked offsets at both endpoints.

    Each node keeps two cursors starting at its ``y0``: one for outgoing
    links and one for incoming links. A node with zero value gives its
    links zero width on that side.
    """
    out_cursor = [node.y0 for node in nodes]
    in_cursor = [node.y0 for node in nodes]

    for link in links:
        source = nodes[link.source]
        target = nodes[link.target]

        link.width = (
            link.value * source.height / source.value if source.value > 0 else 0.0
        )
        link.y0 = out_cursor[link.source]
        out_cursor[link.source] += link.width

        link.target_width = (
            link.value * target.height / target.value if target.value > 0 else 0.0
        )
        link.y1 = in_cursor[link.target]
        in_cursor[link.target] += link.target_width


def link_path(nodes: list[SankeyNode], link: SankeyLink) -> LinkPath:
    """Build the closed ribbon outline for a positioned link."""
    x0 = nodes[link.source].x1
    x1 = nodes[link.target].x0
    xi = (x0 + x1) / 2.0

    y0_bottom = link.y0 + link.width
    y1_bottom = link.y1 + link.target_width

    return LinkPath(
        link=link,
        commands=[
            PathCommand("M", [(x0, link.y0)]),
            PathCommand("C", [(xi, link.y0), (xi, link.y1), (x1, link.y1)]),
            PathCommand("L", [(x1, y1_bottom)]),
            PathCommand("C", [(xi, y1_bottom), (xi, y0_bottom), (x0, y0_bottom)]),
            PathCommand("Z"),
        ],
    )
