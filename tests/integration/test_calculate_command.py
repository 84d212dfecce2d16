"""Integration tests for the calculate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from platecut.cli.main import app, parse_cut

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestParseCut:
    """Tests for command line cut parsing."""

    def test_width_and_height(self) -> None:
        assert parse_cut("600x1000", 3) == {
            "id": 3,
            "width": 600,
            "height": 1000,
            "quantity": 1,
        }

    def test_with_quantity(self) -> None:
        assert parse_cut("600X1000x5", 1)["quantity"] == 5

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="expected WxH or WxHxQ"):
            parse_cut("600 by 1000", 1)


class TestCalculateCommand:
    """Tests for `platecut calculate`."""

    def test_cli_only_text_report(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "--plate-width", "1200",
                "--plate-height", "3000",
                "--cut", "600x1000x5",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "CUTTING SUMMARY" in result.output
        assert "Plates required:   1" in result.output
        assert "1: 5 of 5 placed" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "--plate-width", "500",
                "--plate-height", "500",
                "--cut", "500x500x2",
                "--format", "json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["summary"]["plates_required"] == 2
        assert data["summary"]["efficiency_percent"] == 100.0
        assert data["requests"] == [{"request_id": 1, "requested": 2, "placed": 2}]

    def test_config_file(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "--config", str(FIXTURES_PATH / "kitchen.json")]
        )
        assert result.exit_code == 0, result.output
        assert "83.33%" in result.output

    def test_config_output_format_is_used(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "--config", str(FIXTURES_PATH / "with_warnings.json")]
        )
        assert result.exit_code == 0
        assert "+---" in result.output

    def test_cli_overrides_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "--config", str(FIXTURES_PATH / "with_warnings.json"),
                "--allow-rotation",
                "--format", "json",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["unplaced"] == []
        assert {"request_id": "beam", "requested": 1, "placed": 1} in data["requests"]

    def test_unplaced_pieces_warn_but_succeed(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "calculate",
                "--plate-width", "100",
                "--plate-height", "100",
                "--cut", "150x150",
            ],
        )
        assert result.exit_code == 0
        assert "1 piece(s) could not be placed" in result.output

    def test_svg_written_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "layout.svg"
        result = runner.invoke(
            app,
            [
                "calculate",
                "--config", str(FIXTURES_PATH / "kitchen.json"),
                "--format", "svg",
                "--output", str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Report written to" in result.output
        assert output.read_text().startswith("<svg")

    def test_missing_plate_is_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calculate", "--cut", "10x10"])
        assert result.exit_code == 1
        assert "--plate-width and --plate-height are required" in result.output

    def test_missing_cuts_is_error(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "--plate-width", "10", "--plate-height", "10"]
        )
        assert result.exit_code == 1
        assert "at least one --cut" in result.output

    def test_malformed_cut_is_error(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["calculate", "--plate-width", "10", "--plate-height", "10", "--cut", "abc"],
        )
        assert result.exit_code == 1
        assert "Invalid cut 'abc'" in result.output

    def test_invalid_config_is_error(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["calculate", "--config", str(FIXTURES_PATH / "invalid_width.json")]
        )
        assert result.exit_code == 1
        assert "requests[0].width" in result.output

    def test_verbose_configures_logging(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(
            "platecut.cli.main.logging.basicConfig",
            lambda **kwargs: calls.append(kwargs),
        )
        result = runner.invoke(
            app,
            [
                "calculate",
                "--plate-width", "100",
                "--plate-height", "100",
                "--cut", "10x10",
                "--verbose",
            ],
        )
        assert result.exit_code == 0
        assert calls and calls[0]["level"] == 10
