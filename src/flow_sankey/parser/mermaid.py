"""Parser for Mermaid sankey-beta definitions with %%sankey directives.

Uses a simple line-by-line approach rather than a full grammar parser:
each non-comment line after the ``sankey-beta`` header is a CSV row
``source,target,value``. Fields may be double-quoted to embed commas,
with ``""`` as an escaped quote, as in Mermaid.
"""

from __future__ import annotations

import csv
import logging
import math

from flow_sankey.parser.model import FlowRecord, SankeyGraph

logger = logging.getLogger(__name__)

_HEADERS = ("sankey-beta", "sankey")


def _check_unsupported_input(text: str) -> None:
    """Detect common unsupported input formats and raise helpful errors."""
    lines = [line.strip() for line in text.strip().split("\n")]
    has_graph = any(
        line.startswith("graph ") or line.startswith("flowchart ") for line in lines
    )
    has_header = any(line in _HEADERS for line in lines)

    if has_graph and not has_header:
        raise ValueError(
            "This looks like a Mermaid graph/flowchart definition. "
            "Sankey diagrams start with a 'sankey-beta' line followed by "
            "'source,target,value' rows."
        )


def parse_sankey_mermaid(text: str) -> SankeyGraph:
    """Parse a Mermaid sankey-beta definition with %%sankey directives."""
    _check_unsupported_input(text)

    graph = SankeyGraph()

    for lineno, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        # Sankey directives
        if stripped.startswith("%%sankey"):
            _parse_directive(stripped, graph)
            continue

        # Skip regular comments and the diagram header
        if stripped.startswith("%%") or stripped in _HEADERS:
            continue

        graph.add_record(_parse_row(stripped, lineno))

    logger.debug("Parsed %d flow records", len(graph.records))
    return graph


def _parse_directive(line: str, graph: SankeyGraph) -> None:
    """Parse a %%sankey directive line."""
    content = line[len("%%sankey") :].strip()

    if content.startswith("title:"):
        graph.title = content[len("title:") :].strip()
    elif content.startswith("style:"):
        graph.style = content[len("style:") :].strip()
    elif content.startswith("color:"):
        parts = content[len("color:") :].strip().split("|")
        if len(parts) >= 2:
            graph.node_colors[parts[0].strip()] = parts[1].strip()
    else:
        logger.warning("Ignoring unknown %%sankey directive: %s", content)


def _parse_row(line: str, lineno: int) -> FlowRecord:
    """Parse one ``source,target,value`` CSV row."""
    fields = next(csv.reader([line], skipinitialspace=True))
    if len(fields) != 3:
        raise ValueError(
            f"Line {lineno}: expected 'source,target,value', "
            f"got {len(fields)} field(s): {line!r}"
        )

    source, target, raw_value = (f.strip() for f in fields)
    if not source or not target:
        raise ValueError(f"Line {lineno}: empty node name in {line!r}")

    try:
        value = float(raw_value)
    except ValueError:
        raise ValueError(
            f"Line {lineno}: flow value {raw_value!r} is not a number"
        ) from None
    if not math.isfinite(value):
        raise ValueError(
            f"Line {lineno}: flow value {raw_value!r} is not a finite number"
        )

    return FlowRecord(source=source, target=target, value=value)
