"""Color policies mapping nodes and links to fill colors.

A color policy is a pair of plain callables, ``node_fill(node)`` and
``link_fill(link)``, each returning a CSS color string. palette_node_fill()
and source_link_fill() build the default pair from a theme; callers may
pass their own.
"""

from __future__ import annotations

from typing import Callable

from flow_sankey.parser.model import SankeyLink, SankeyNode
from flow_sankey.render.style import Theme

NodeFill = Callable[[SankeyNode], str]
LinkFill = Callable[[SankeyLink], str]


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Parse ``#rgb`` or ``#rrggbb`` into an (r, g, b) tuple."""
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Not a hex color: {color!r}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def with_alpha(color: str, alpha: float) -> str:
    """Return ``color`` as an rgba() string with the given alpha.

    Colors that are not hex (named colors, rgba() already) come back
    unchanged.
    """
    if not color.startswith("#"):
        return color
    r, g, b = hex_to_rgb(color)
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def palette_node_fill(
    theme: Theme,
    overrides: dict[str, str] | None = None,
) -> NodeFill:
    """Color nodes by cycling the theme palette over node index.

    ``overrides`` maps node names to colors and wins over the palette.
    """
    palette = theme.node_palette or [theme.default_color]
    overrides = dict(overrides or {})

    def node_fill(node: SankeyNode) -> str:
        return overrides.get(node.name, palette[node.index % len(palette)])

    return node_fill


def source_link_fill(
    theme: Theme,
    nodes: list[SankeyNode],
    node_fill: NodeFill,
) -> LinkFill:
    """Color links like their source node, at the theme's link opacity."""

    def link_fill(link: SankeyLink) -> str:
        return with_alpha(node_fill(nodes[link.source]), theme.link_opacity)

    return link_fill
