"""Theme and style constants for Sankey rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a Sankey diagram."""

    name: str
    background_color: str
    node_palette: list[str]
    node_stroke: str
    node_stroke_width: float
    link_opacity: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    # Fallback when a color policy has nothing better
    default_color: str = "#6b7280"
    label_gap: float = 6.0
