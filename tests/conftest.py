import random
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


class ScriptedRandom(random.Random):
    """Random generator that replays a fixed list of samples and records each draw."""

    def __init__(self, samples):
        super().__init__(0)
        self.samples = list(samples)
        self.draws = 0

    def random(self):
        value = self.samples[self.draws]
        self.draws += 1
        return value


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def sample_grid_size():
    """Provide a standard (width, height) grid size for tests."""
    return (10, 10)
