"""Integration tests for the catalog, modes and fit CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from roomfit.cli.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestCatalogCommand:
    """Tests for listing presets."""

    def test_text(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["catalog"])

        assert result.exit_code == 0
        assert "FURNITURE CATALOG" in result.output
        assert "Coffee Table" in result.output

    def test_json(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["catalog", "--format", "json"])

        assert result.exit_code == 0
        items = json.loads(result.output)
        assert [item["id"] for item in items][:2] == ["sofa-1", "table-1"]
        assert items[2] == {
            "id": "shelf-1",
            "name": "Bookshelf",
            "category": "shelf",
            "width": 80.0,
            "height": 180.0,
            "depth": 35.0,
            "color": "#A0522D",
        }


class TestModesCommand:
    def test_lists_every_mode(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["modes"])

        assert result.exit_code == 0
        for name in ("room", "room_3d", "image", "smart", "ai", "realtime", "cloud_vision"):
            assert name in result.output


class TestFitCommand:
    """Tests for the quick room check."""

    def test_scaled_table_too_wide(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["fit", "--item", "table-1", "-w", "160", "-h", "250", "-d", "300", "--scale", "1.5"],
        )

        assert result.exit_code == 2
        assert "✗ Too wide for room (240 cm > 160 cm)" in result.output

    def test_fits(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["fit", "--item", "sofa-2", "--room-width", "150", "--room-height", "250", "--room-depth", "90"],
        )

        assert result.exit_code == 0
        assert "✓ Fits!" in result.output

    def test_height_only_checked_when_asked(self, runner: CliRunner) -> None:
        args = ["fit", "--item", "shelf-1", "-w", "300", "-h", "150", "-d", "300"]

        assert runner.invoke(app, args).exit_code == 0
        result = runner.invoke(app, [*args, "--include-height"])
        assert result.exit_code == 2
        assert "Too tall for room (180 cm > 150 cm)" in result.output

    def test_unknown_item(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["fit", "--item", "bed-9", "-w", "300", "-h", "250", "-d", "300"]
        )

        assert result.exit_code == 1
        assert "Catalog item not found: bed-9" in result.output

    def test_invalid_room(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["fit", "--item", "sofa-1", "-w", "0", "-h", "250", "-d", "300"]
        )

        assert result.exit_code == 1
        assert "Room dimensions must be positive" in result.output

    def test_invalid_scale(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["fit", "--item", "sofa-1", "-w", "300", "-h", "250", "-d", "300", "-s", "0"]
        )

        assert result.exit_code == 1
        assert "Scale must be a positive finite number" in result.output
