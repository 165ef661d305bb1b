"""Tests for the CLI entry points."""

from pathlib import Path

from click.testing import CliRunner

from flow_sankey.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
ENERGY_MMD = EXAMPLES_DIR / "energy.mmd"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(ENERGY_MMD), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    content = out.read_text()
    assert "<svg" in content
    assert "Converter" in content


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    mmd = tmp_path / "test.mmd"
    mmd.write_text(ENERGY_MMD.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(mmd)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()
    assert "6 nodes, 5 links" in result.output


def test_render_with_options(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(ENERGY_MMD), "-o", str(out),
        "--theme", "default", "--width", "600", "--height", "400",
        "--node-width", "30", "--node-padding", "40", "--iterations", "8",
        "--no-labels",
    ])
    assert result.exit_code == 0, result.output
    content = out.read_text()
    assert "#18a0fb" in content
    assert "Converter" not in content


def test_render_svg_ends_with_newline(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(ENERGY_MMD), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text().endswith("\n")


def test_render_negative_iterations_rejected(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(ENERGY_MMD), "--iterations", "-1"])
    assert result.exit_code != 0


def test_render_cycle_reports_error(tmp_path):
    mmd = tmp_path / "cycle.mmd"
    mmd.write_text("sankey-beta\nS,A,1\nA,B,1\nB,A,1\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(mmd)])
    assert result.exit_code == 1
    assert "cycle" in result.output


def test_render_parse_error(tmp_path):
    bad = tmp_path / "bad.mmd"
    bad.write_text("sankey-beta\nA,B\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_render_nonexistent_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "/nonexistent/file.mmd"])
    assert result.exit_code != 0


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(ENERGY_MMD)])
    assert result.exit_code == 0, result.output
    assert "Valid: 6 nodes, 5 links, 3 layers" in result.output


def test_validate_reports_problems(tmp_path):
    bad = tmp_path / "bad.mmd"
    bad.write_text(
        "%%sankey color: Ghost | #000000\n"
        "sankey-beta\n"
        "A,B,-1\n"
        "B,B,2\n"
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "negative value" in result.output
    assert "self-loop" in result.output
    assert "Ghost" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(ENERGY_MMD)])
    assert result.exit_code == 0, result.output
    assert "Title: Energy conversion" in result.output
    assert "Nodes: 6" in result.output
    assert "[1] Converter: 100" in result.output
    assert "Layers: 3" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_verbose_flag(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "render", str(ENERGY_MMD), "-o", str(out)])
    assert result.exit_code == 0, result.output
