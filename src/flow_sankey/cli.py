"""CLI for flow-sankey."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from flow_sankey import __version__
from flow_sankey.layout import compute_layout
from flow_sankey.layout.constants import ITERATIONS, NODE_PADDING, NODE_THICKNESS
from flow_sankey.parser import parse_sankey_mermaid
from flow_sankey.parser.model import SankeyGraph
from flow_sankey.render import render_svg
from flow_sankey.render.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from flow_sankey.themes import THEMES


def _load(input_file: Path) -> SankeyGraph:
    """Parse an input file, turning parse errors into a clean exit."""
    try:
        return parse_sankey_mermaid(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """flow-sankey: Generate Sankey diagram SVGs from Mermaid sankey-beta definitions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default=None,
              help="Visual theme (default: the file's style directive, else default)")
@click.option("--width", type=float, default=DEFAULT_WIDTH,
              help=f"Diagram width in pixels (default: {DEFAULT_WIDTH:g})")
@click.option("--height", type=float, default=DEFAULT_HEIGHT,
              help=f"Diagram height in pixels (default: {DEFAULT_HEIGHT:g})")
@click.option("--node-width", type=float, default=NODE_THICKNESS,
              help=f"Node thickness (default: {NODE_THICKNESS:g})")
@click.option("--node-padding", type=float, default=NODE_PADDING,
              help=f"Vertical padding between nodes (default: {NODE_PADDING:g})")
@click.option("--iterations", type=click.IntRange(min=0), default=ITERATIONS,
              help=f"Relaxation iterations (default: {ITERATIONS})")
@click.option("--no-labels", is_flag=True, help="Do not draw node names.")
def render(
    input_file: Path,
    output: Path | None,
    theme: str | None,
    width: float,
    height: float,
    node_width: float,
    node_padding: float,
    iterations: int,
    no_labels: bool,
) -> None:
    """Render a Mermaid sankey-beta definition to SVG."""
    graph = _load(input_file)

    try:
        compute_layout(graph, width, height, node_thickness=node_width,
                       node_padding=node_padding, iterations=iterations)
    except ValueError as e:
        click.echo(f"Layout error: {e}", err=True)
        raise SystemExit(1)

    if theme is None:
        theme = graph.style if graph.style in THEMES else "default"
    svg = render_svg(graph, THEMES[theme], show_labels=not no_labels)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(graph.nodes)} nodes, "
               f"{len(graph.links)} links -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a Mermaid sankey-beta definition."""
    graph = _load(input_file)

    errors = []

    for i, record in enumerate(graph.records, start=1):
        if record.value < 0:
            errors.append(f"Flow {i} ({record.source} -> {record.target}) "
                          f"has negative value {record.value:g}")
        if record.source == record.target:
            errors.append(f"Flow {i} is a self-loop on '{record.source}'")

    # Check that every color override names a node
    names = set(graph.node_names())
    for name in graph.node_colors:
        if name not in names:
            errors.append(f"Color directive references unknown node '{name}'")

    if graph.style not in THEMES:
        errors.append(f"Unknown style '{graph.style}' "
                      f"(available: {', '.join(THEMES)})")

    try:
        compute_layout(graph, DEFAULT_WIDTH, DEFAULT_HEIGHT)
    except ValueError as e:
        errors.append(str(e))

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    layer_count = max((n.layer for n in graph.nodes), default=-1) + 1
    click.echo(f"Valid: {len(graph.nodes)} nodes, "
               f"{len(graph.links)} links, "
               f"{layer_count} layers")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a Mermaid sankey-beta definition."""
    graph = _load(input_file)
    try:
        compute_layout(graph, DEFAULT_WIDTH, DEFAULT_HEIGHT)
    except ValueError as e:
        click.echo(f"Layout error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Title: {graph.title or '(none)'}")
    click.echo(f"Style: {graph.style}")
    click.echo(f"Flows: {len(graph.records)}")
    click.echo(f"Nodes: {len(graph.nodes)}")
    for node in graph.nodes:
        click.echo(f"  [{node.layer}] {node.name}: {node.value:g} "
                   f"({len(node.target_links)} in, {len(node.source_links)} out)")
    click.echo(f"Layers: {max((n.layer for n in graph.nodes), default=-1) + 1}")
