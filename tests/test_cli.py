"""CLI tests using typer's CliRunner."""
import json

from typer.testing import CliRunner

from topograph.cli import app
from topograph.config import Config, TorusParams, save_config

runner = CliRunner()


def test_generate_prints_metrics():
    result = runner.invoke(app, ["generate", "hypercube", "--dimension", "3"])

    assert result.exit_code == 0, result.output
    assert "Diameter" in result.output
    assert "1.714" in result.output


def test_generate_writes_json(tmp_path):
    output = tmp_path / "ring.json"
    result = runner.invoke(
        app, ["generate", "ring", "--nodes", "12", "--skip", "6", "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data["nodes"]) == 12
    assert len(data["edges"]) == 18
    assert data["metrics"]["is_connected"] is True


def test_generate_unknown_type_fails():
    result = runner.invoke(app, ["generate", "star"])
    assert result.exit_code == 1
    assert "Unknown topology type" in result.output


def test_run_from_config(tmp_path):
    path = tmp_path / "torus.yaml"
    save_config(Config(name="small-torus", topology=TorusParams(rows=3, cols=3)), path)

    result = runner.invoke(app, ["run", str(path)])

    assert result.exit_code == 0, result.output
    assert "small-torus" in result.output
    assert "Hops" in result.output


def test_run_missing_config_fails(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1


def test_path_command():
    result = runner.invoke(app, ["path", "ring", "0", "6", "--nodes", "12"])

    assert result.exit_code == 0, result.output
    assert "6 hops" in result.output


def test_list_components():
    result = runner.invoke(app, ["list-components"])
    assert result.exit_code == 0
    for name in ("ring", "mesh", "torus", "hypercube"):
        assert name in result.output


def test_run_reports_clamping_from_config_parsing(tmp_path):
    path = tmp_path / "ring.yaml"
    path.write_text("topology:\n  type: ring\n  nodes: 12\n  skip: 99\n", encoding="utf-8")

    result = runner.invoke(app, ["run", str(path)])

    assert result.exit_code == 0, result.output
    assert "Provided skip 99 adjusted to 50" in result.output
    assert "Provided skip 50 adjusted to 6" in result.output
