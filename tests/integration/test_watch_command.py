"""Integration tests for the watch CLI command."""

from pathlib import Path

import pytest
from pytest_httpx import HTTPXMock
from typer.testing import CliRunner

from roomfit.cli.main import app

pytestmark = pytest.mark.integration

ENDPOINT = "https://inference.test/models/detr"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def frame_file(tmp_path: Path) -> Path:
    path = tmp_path / "frame.jpg"
    path.write_bytes(b"\xff\xd8jpeg")
    return path


class TestWatchCommand:
    """Tests for watching the verdict while obstacles refresh."""

    def test_fixed_zone_blocks_every_tick(
        self, runner: CliRunner, scenarios_path: Path
    ) -> None:
        result = runner.invoke(
            app,
            ["watch", str(scenarios_path / "smart_blocked.json"), "-n", "2", "-i", "0.01"],
        )

        assert result.exit_code == 2
        assert "Watching smart mode: 2 refreshes every 0.01s" in result.output
        assert "[1] ✗ Blocked by face zone (100% confidence)" in result.output
        assert "[2] ✗ Blocked by face zone (100% confidence)" in result.output

    def test_grid_leaves_floor_clear(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "watch",
                str(scenarios_path / "realtime_clear_floor.json"),
                "--ticks",
                "3",
                "--interval",
                "0.01",
                "--seed",
                "42",
            ],
        )

        assert result.exit_code == 0
        assert "[3] ✓ Clear floor space detected" in result.output

    def test_mode_without_detector(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["watch", str(scenarios_path / "room_sofa_fits.json")])

        assert result.exit_code == 1
        assert "needs a viewport" in result.output

    def test_room_mode_with_viewport(self, runner: CliRunner, tmp_path: Path) -> None:
        scenario = tmp_path / "room.json"
        scenario.write_text(
            '{"mode": "room", "item": {"preset": "sofa-1"},'
            ' "viewport": {"width": 400, "height": 800}}'
        )
        result = runner.invoke(app, ["watch", str(scenario)])

        assert result.exit_code == 1
        assert "mode 'room' does not use a detector" in result.output

    def test_missing_file(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(app, ["watch", str(scenarios_path / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_endpoint_needs_frame(self, runner: CliRunner, scenarios_path: Path) -> None:
        result = runner.invoke(
            app,
            ["watch", str(scenarios_path / "realtime_clear_floor.json"), "--endpoint", ENDPOINT],
        )

        assert result.exit_code == 1
        assert "--endpoint and --frame must be given together" in result.output


class TestWatchRemoteDetector:
    """Tests for watching with a remote inference endpoint."""

    def test_remote_detection_blocks(
        self,
        runner: CliRunner,
        scenarios_path: Path,
        frame_file: Path,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(
            url=ENDPOINT,
            method="POST",
            json=[
                {
                    "label": "dog",
                    "score": 0.88,
                    "box": {"xmin": 150, "ymin": 650, "xmax": 250, "ymax": 750},
                }
            ],
        )

        result = runner.invoke(
            app,
            [
                "watch",
                str(scenarios_path / "realtime_clear_floor.json"),
                "-n",
                "1",
                "-i",
                "30",
                "--endpoint",
                ENDPOINT,
                "--frame",
                str(frame_file),
                "--token",
                "secret",
            ],
        )

        assert result.exit_code == 2
        assert "[1] ✗ Blocked by dog (88% confidence)" in result.output
        assert httpx_mock.get_request().headers["Authorization"] == "Bearer secret"

    def test_falls_back_when_endpoint_fails(
        self,
        runner: CliRunner,
        scenarios_path: Path,
        frame_file: Path,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(url=ENDPOINT, method="POST", status_code=503)

        result = runner.invoke(
            app,
            [
                "watch",
                str(scenarios_path / "realtime_clear_floor.json"),
                "-n",
                "1",
                "-i",
                "30",
                "--endpoint",
                ENDPOINT,
                "--frame",
                str(frame_file),
            ],
        )

        assert result.exit_code == 0
        assert "[1] ✓ Clear floor space detected" in result.output
