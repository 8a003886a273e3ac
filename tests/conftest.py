"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def scripted_random():
    """Factory for a RandomSource that returns a fixed sequence of draws.

    Each call to ``random_int`` pops the next value; the requested range is
    recorded in ``calls``. Running out of values fails the test.
    """
    from forest_fire.random_source import RandomSource

    class ScriptedRandom(RandomSource):
        def __init__(self, values):
            super().__init__()
            self.values = list(values)
            self.calls = []

        def random_int(self, low, high):
            self.calls.append((low, high))
            if not self.values:
                raise AssertionError(f"unexpected draw from [{low}, {high})")
            return self.values.pop(0)

    return ScriptedRandom


@pytest.fixture
def sample_grid_size():
    """Provide a standard grid size for tests."""
    return (5, 5)
