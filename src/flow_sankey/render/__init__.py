"""Rendering of laid-out Sankey graphs."""

from flow_sankey.render.scene import paint_scene
from flow_sankey.render.svg import render_svg

__all__ = ["paint_scene", "render_svg"]
