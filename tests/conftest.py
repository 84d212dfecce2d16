"""Pytest configuration and shared fixtures for platecut tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from platecut.domain import CutRequest, PackingEngine, StockPlate

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def engine() -> PackingEngine:
    """Create a fresh packing engine."""
    return PackingEngine()


@pytest.fixture
def standard_plate() -> StockPlate:
    """Create a 1200x3000 mm plate."""
    return StockPlate(width=1200, height=3000)


@pytest.fixture
def door_request() -> CutRequest:
    """Five 600x1000 mm doors."""
    return CutRequest(id=1, width=600, height=1000, quantity=5)


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON configuration fixtures."""
    return FIXTURES_PATH
