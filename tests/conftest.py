import sys, os

import pytest

# Ensure the repository root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from life.models import build_config
from tests.helpers import FakeClock


@pytest.fixture
def small_config():
    # 10x10 board of 4px cells, seeded so boards are reproducible
    return build_config({
        'width': 40,
        'height': 40,
        'cells_per_row': 10,
        'fps': 5,
        'density': 0.3,
        'seed': 7
    }, env={})


@pytest.fixture
def clock():
    return FakeClock()

