#!/usr/bin/env python3
"""Audit the topology fixtures and examples: lay each one out, check it, draw it.

Every .mmd file is laid out once per ``--iterations`` value and run through
the layout checks in tests/layout_validator.py. The layout from the last
iteration count is written as SVG (and PNG with ``--png``).

Usage:
    python scripts/render_topologies.py [-i 0 -i 6] [--width W] [--height H] [--png]
"""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path

import click

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))
sys.path.insert(0, str(project_root / "tests"))

from layout_validator import Severity, validate_layout  # noqa: E402

from flow_sankey.layout.engine import compute_layout  # noqa: E402
from flow_sankey.parser.mermaid import parse_sankey_mermaid  # noqa: E402
from flow_sankey.parser.model import SankeyGraph  # noqa: E402
from flow_sankey.render.svg import render_svg  # noqa: E402
from flow_sankey.themes import THEMES  # noqa: E402

SOURCES = [
    project_root / "tests" / "fixtures" / "topologies",
    project_root / "examples",
]


def audit(
    text: str, width: float, height: float, iteration_counts: tuple[int, ...]
) -> tuple[SankeyGraph, Counter]:
    """Lay out ``text`` at each iteration count and tally violations by check.

    Counter keys are ``(iterations, check, severity)``. The returned graph
    holds the layout for the last iteration count.
    """
    tally: Counter = Counter()
    graph = parse_sankey_mermaid(text)
    for iterations in iteration_counts:
        compute_layout(graph, width, height, iterations=iterations)
        for violation in validate_layout(graph):
            tally[(iterations, violation.check, violation.severity)] += 1
    return graph, tally


@click.command()
@click.option("-i", "--iterations", "iteration_counts", type=click.IntRange(min=0),
              multiple=True, default=(0, 6), show_default=True,
              help="Relaxation iteration counts to check (repeatable).")
@click.option("--width", type=float, default=800.0, show_default=True)
@click.option("--height", type=float, default=500.0, show_default=True)
@click.option("-o", "--output-dir", type=click.Path(path_type=Path),
              default=Path("/tmp/flow_sankey_topology_renders"), show_default=True)
@click.option("--png", is_flag=True, help="Also write PNGs (needs cairosvg).")
def main(iteration_counts, width, height, output_dir, png):
    """Check layout invariants on every fixture and render the results."""
    if png:
        try:
            import cairosvg
        except ImportError:
            raise click.UsageError("--png needs cairosvg: pip install 'flow-sankey[png]'")

    files = [p for source in SOURCES for p in sorted(source.glob("*.mmd"))]
    output_dir.mkdir(parents=True, exist_ok=True)
    click.echo(f"Checking {len(files)} files at iterations "
               f"{', '.join(map(str, iteration_counts))}, {width:g}x{height:g}")

    failed = 0
    for path in files:
        try:
            graph, tally = audit(path.read_text(), width, height, iteration_counts)
        except ValueError as e:
            failed += 1
            click.echo(f"  FAIL    {path.stem}: {e}")
            continue

        errors = sum(n for (_, _, sev), n in tally.items() if sev == Severity.ERROR)
        status = "FAIL" if errors else ("WARN" if tally else "OK")
        failed += bool(errors)
        click.echo(f"  {status:<6}  {path.stem}: {len(graph.nodes)} nodes, "
                   f"{len(graph.links)} links")
        for (iterations, check, severity), count in sorted(
            tally.items(), key=lambda item: (item[0][0], item[0][1])
        ):
            click.echo(f"          iterations={iterations} {check}: "
                       f"{count} {severity.value}(s)")

        theme = THEMES.get(graph.style, THEMES["default"])
        svg = render_svg(graph, theme)
        (output_dir / f"{path.stem}.svg").write_text(svg)
        if png:
            cairosvg.svg2png(bytestring=svg.encode(),
                             write_to=str(output_dir / f"{path.stem}.png"), scale=2)

    click.echo(f"\n{len(files) - failed}/{len(files)} clean, outputs in {output_dir}/")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
