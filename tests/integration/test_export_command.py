"""Integration tests for the export CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from platecut.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestExportCommand:
    """Tests for `platecut export`."""

    def test_exports_all_formats(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                str(FIXTURES_PATH / "kitchen.json"),
                "--output-dir", str(tmp_path),
            ],
        )

        assert result.exit_code == 0, result.output
        json_path = tmp_path / "kitchen_json.json"
        svg_path = tmp_path / "kitchen_svg.svg"
        assert json.loads(json_path.read_text())["summary"]["total_pieces_placed"] == 5
        assert svg_path.read_text().startswith("<svg")
        assert "JSON:" in result.output
        assert "SVG:" in result.output

    def test_selected_format_and_name(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                str(FIXTURES_PATH / "kitchen.json"),
                "--formats", "svg",
                "--output-dir", str(tmp_path),
                "--name", "batch",
            ],
        )
        assert result.exit_code == 0, result.output
        assert [p.name for p in tmp_path.iterdir()] == ["batch_svg.svg"]

    def test_unknown_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                str(FIXTURES_PATH / "kitchen.json"),
                "--formats", "json,dxf",
                "--output-dir", str(tmp_path),
            ],
        )
        assert result.exit_code == 1
        assert "Unknown formats: dxf" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["export", str(FIXTURES_PATH / "invalid_json.json"), "--output-dir", str(tmp_path)],
        )
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
