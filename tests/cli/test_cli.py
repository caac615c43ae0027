from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from schemagraph.cli.main import app

runner = CliRunner()

DOC = """<diagram>
  <node id="a" label="Alpha" x="0" y="0" type="rectangle"/>
  <node id="b" label="Beta" x="150" y="0" type="circle"/>
  <edge source="a" target="b" type="dotted"/>
  <edge source="a" target="ghost"/>
</diagram>"""


def test_inspect_prints_graph_and_diagnostics(tmp_path: Path) -> None:
    path = tmp_path / "diagram.xml"
    path.write_text(DOC)

    result = runner.invoke(app, ["--log-level", "WARNING", "inspect", str(path)])

    assert result.exit_code == 0, result.output
    assert "nodes: 2" in result.output
    assert "a  rectangle  'Alpha'  at (0, 0)  size 100x50" in result.output
    assert "a -> b  dotted" in result.output
    assert "edges: 1" in result.output
    assert "EDANGLING_EDGE" in result.output


def test_inspect_fails_on_malformed_input(tmp_path: Path) -> None:
    path = tmp_path / "broken.csv"
    path.write_text("id,label,x,y,type\na,A,0,0,circle\n")

    result = runner.invoke(app, ["inspect", str(path)])

    assert result.exit_code == 1
    assert "Invalid CSV format" in result.output


@pytest.mark.usefixtures("prefect_backend")
def test_run_prints_summary(tmp_path: Path) -> None:
    path = tmp_path / "diagram.xml"
    path.write_text(DOC)
    out_dir = tmp_path / "out"

    result = runner.invoke(app, ["--log-level", "WARNING", "run", str(path), "--output-dir", str(out_dir)])

    assert result.exit_code == 0, result.output
    assert '"edge_count": 1' in result.output
    assert (out_dir / "import_report.json").exists()


@pytest.mark.usefixtures("prefect_backend")
def test_run_exits_nonzero_on_failed_import(tmp_path: Path) -> None:
    result = runner.invoke(app, ["run", str(tmp_path / "missing.xml")])
    assert result.exit_code == 1
    assert "EREAD" in result.output
