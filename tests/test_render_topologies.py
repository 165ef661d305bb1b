"""Tests for the fixture audit script."""

import importlib.util
from pathlib import Path

from click.testing import CliRunner
from layout_validator import Severity

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "render_topologies.py"

_spec = importlib.util.spec_from_file_location("render_topologies", SCRIPT)
render_topologies = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(render_topologies)


def test_audit_clean_layout():
    graph, tally = render_topologies.audit("sankey-beta\nA,B,10\nA,C,5\nB,D,10\n",
                                           400, 300, (0, 6))
    assert len(graph.nodes) == 4
    assert not tally


def test_audit_crowded_layer_is_clean():
    text = "sankey-beta\n" + "".join(f"R,L{i},1\n" for i in range(30))
    _, tally = render_topologies.audit(text, 400, 200, (0, 6))
    assert not [key for key in tally if key[2] == Severity.ERROR]


def test_main_renders_every_fixture(tmp_path):
    runner = CliRunner()
    result = runner.invoke(render_topologies.main, ["-o", str(tmp_path), "-i", "1"])
    assert result.exit_code == 0, result.output
    svgs = sorted(p.stem for p in tmp_path.glob("*.svg"))
    assert "diamond" in svgs
    assert "energy" in svgs
    assert "OK" in result.output
    assert "FAIL" not in result.output
