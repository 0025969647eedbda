import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


class FixedRng:
    """Stand-in for random.Random with fixed draws."""

    def __init__(self, index: int = 0, offset: float = 0.0):
        self.index = index
        self.offset = offset
        self.randrange_calls = 0

    def randrange(self, n):
        self.randrange_calls += 1
        return self.index

    def uniform(self, a, b):
        return self.offset


@pytest.fixture
def fixed_rng():
    return FixedRng
