"""Pytest configuration and shared fixtures for sitecabins tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitecabins.domain import WorkingSet

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "layouts"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def working_set() -> WorkingSet:
    """An empty working set over the default catalogue."""
    return WorkingSet()


@pytest.fixture
def layouts_path() -> Path:
    """Directory holding the JSON layout fixtures."""
    return FIXTURES_PATH
