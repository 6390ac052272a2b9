"""Pytest configuration and shared fixtures for the map pattern codec."""

from pathlib import Path
from typing import Generator

import pytest

from cgpattern.pattern.map_pattern import MAP_SIZE, MapPattern
from cgpattern.pattern.prefab import Prefab
from cgpattern.utils.logging_setup import shutdown_logging


def make_text(heights: str = "0" * MAP_SIZE, prefabs: str = "0" * MAP_SIZE) -> str:
    """Join a height section and a prefab section the way files separate them."""
    return f"{heights}\n\n{prefabs}\n"


# ============================================================================
# Pattern Fixtures
# ============================================================================

@pytest.fixture
def default_pattern() -> MapPattern:
    """All-zero, all-empty pattern."""
    return MapPattern.default()


@pytest.fixture
def mixed_pattern() -> MapPattern:
    """Pattern using every prefab and levels that need each token form."""
    pattern = MapPattern.default()
    levels = [0, 5, 9, 10, -1, -9, -50, 50, 42, -17]
    prefabs = list(Prefab)
    for index in range(MAP_SIZE):
        pattern.set_level_at_index(index, levels[index % len(levels)])
        pattern.set_prefab_at_index(index, prefabs[index % len(prefabs)])
    return pattern


@pytest.fixture
def pattern_file(tmp_path: Path, mixed_pattern: MapPattern) -> Path:
    """mixed_pattern saved to disk."""
    return mixed_pattern.save_pattern(tmp_path / "mixed")


# ============================================================================
# Logging
# ============================================================================

@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Close handlers left behind by setup_logging calls."""
    yield
    shutdown_logging()
