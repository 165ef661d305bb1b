"""flow-sankey: Sankey diagram layout and SVG rendering."""

__version__ = "0.1.0"
