"""Sankey layout: depth layering, node placement, relaxation and link paths."""

from flow_sankey.layout.depths import CycleError
from flow_sankey.layout.engine import compute_layout
from flow_sankey.layout.paths import LinkPath, link_path

__all__ = ["CycleError", "LinkPath", "compute_layout", "link_path"]
