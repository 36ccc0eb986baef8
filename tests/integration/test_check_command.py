"""Integration tests for the check CLI command."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from roomfit.cli.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestCheckCommand:
    """Tests for evaluating scenario files."""

    def test_item_fits(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["check", str(scenarios_path / "room_sofa_fits.json")])

        assert result.exit_code == 0
        assert "3-Seater Sofa (sofa-1)" in result.output
        assert "✓ Fits!" in result.output

    def test_item_too_wide(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(
            app, ["check", str(scenarios_path / "room_table_too_wide.json")]
        )

        assert result.exit_code == 2
        assert "Scale:     150%" in result.output
        assert "✗ Too wide for room (240 cm > 160 cm)" in result.output

    def test_blocked_by_obstacle(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["check", str(scenarios_path / "smart_blocked.json")])

        assert result.exit_code == 2
        assert "✗ Blocked by face (92% confidence)" in result.output

    def test_clear_floor(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(
            app, ["check", str(scenarios_path / "realtime_clear_floor.json")]
        )

        assert result.exit_code == 0
        assert "✓ Clear floor space detected - Safe to place here" in result.output

    def test_checks_skipped_without_viewport(
        self, runner: CliRunner, scenarios_path: Path
    ) -> None:
        result = runner.invoke(
            app, ["check", str(scenarios_path / "image_without_viewport.json")]
        )

        assert result.exit_code == 0
        assert "Size:      90 x 45 x 25 cm" in result.output
        assert "✓ Clear space detected" in result.output

    def test_json_output(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(
            app,
            ["check", str(scenarios_path / "smart_blocked.json"), "--format", "json"],
        )

        assert result.exit_code == 2
        data = json.loads(result.output)
        assert data["item"] == "table-2"
        assert data["result"]["code"] == "blocked"
        assert data["result"]["blocking_region"]["confidence"] == 0.92

    def test_unknown_format(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(
            app, ["check", str(scenarios_path / "room_sofa_fits.json"), "-f", "xml"]
        )

        assert result.exit_code == 1
        assert "Unknown format: xml" in result.output

    def test_unknown_preset(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["check", str(scenarios_path / "unknown_preset.json")])

        assert result.exit_code == 1
        assert "Unknown catalog item 'bed-9'" in result.output

    def test_invalid_scenario(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["check", str(scenarios_path / "invalid_schema.json")])

        assert result.exit_code == 1
        assert "regions[0].confidence" in result.output

    def test_inconsistent_overrides(self, runner: CliRunner, tmp_path: Path) -> None:
        scenario = tmp_path / "overrides.json"
        scenario.write_text(
            json.dumps(
                {
                    "mode": "smart",
                    "item": {"preset": "sofa-1"},
                    "evaluator": {"scale_min": 2.0},
                }
            )
        )
        result = runner.invoke(app, ["check", str(scenario)])

        assert result.exit_code == 1
        assert "Error:" in result.output
