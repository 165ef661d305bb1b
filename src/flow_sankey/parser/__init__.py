"""Parsers for Sankey flow definitions."""

from flow_sankey.parser.mermaid import parse_sankey_mermaid

__all__ = ["parse_sankey_mermaid"]
