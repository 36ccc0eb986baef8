"""Pytest configuration and shared fixtures for roomfit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from roomfit.domain import (
    Dimensions,
    FurnitureCategory,
    FurnitureItem,
    Viewport,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "scenarios"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or REST surfaces end to end"
    )


@pytest.fixture
def scenarios_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def table() -> FurnitureItem:
    """The Dining Table preset (160 x 75 x 90 cm)."""
    return FurnitureItem(
        id="table-1",
        name="Dining Table",
        category=FurnitureCategory.TABLE,
        dimensions=Dimensions(width=160, height=75, depth=90),
        color="#654321",
    )


@pytest.fixture
def small_item() -> FurnitureItem:
    """A 100 x 50 x 40 cm box, easy to reason about on screen."""
    return FurnitureItem(
        id="box",
        name="Box",
        category=FurnitureCategory.CUSTOM,
        dimensions=Dimensions(width=100, height=50, depth=40),
    )


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(width=400, height=800)
