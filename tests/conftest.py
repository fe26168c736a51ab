import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from swordmerge.core.rng import RNG  # noqa: E402
from swordmerge.persistence.manager import SaveManager  # noqa: E402
from swordmerge.systems.grid import GridStore  # noqa: E402


class FixedRNG(RNG):
    """RNG that replays a fixed sequence of draws."""

    def __init__(self, *draws: float) -> None:
        super().__init__(seed=0)
        self._draws = list(draws)

    def random(self) -> float:
        return self._draws.pop(0)


@pytest.fixture
def grid() -> GridStore:
    return GridStore()


@pytest.fixture
def save_manager(tmp_path: Path) -> SaveManager:
    return SaveManager(root=tmp_path / "saves")


@pytest.fixture
def fixed_rng():
    return FixedRNG
