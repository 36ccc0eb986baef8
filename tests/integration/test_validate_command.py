"""Integration tests for the validate CLI command.

These tests verify the validate command end to end:
- Clean scenarios pass with exit code 0
- Advisory warnings pass with exit code 2
- Load failures and unresolved presets fail with exit code 1
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from roomfit.cli.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_clean_scenario(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(scenarios_path / "room_sofa_fits.json")])

        assert result.exit_code == 0
        assert "Validation passed. Scenario is valid." in result.output

    def test_warnings(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(
            app, ["validate", str(scenarios_path / "image_without_viewport.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "item.custom.depth" in result.output
        assert "Suggestion: Add viewport.width and viewport.height" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_unknown_preset(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(scenarios_path / "unknown_preset.json")])

        assert result.exit_code == 1
        assert "item.preset: Unknown catalog item 'bed-9'" in result.output
        assert "Validation failed: 1 error(s)" in result.output

    def test_file_not_found(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(scenarios_path / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(scenarios_path / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line " in result.output

    def test_schema_error(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(scenarios_path / "invalid_schema.json")])

        assert result.exit_code == 1
        assert "regions[0].confidence" in result.output
        assert "Value: 1.5" in result.output
