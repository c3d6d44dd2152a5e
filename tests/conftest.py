from pathlib import Path

import pytest

from road_router.domain.entities.geography import Point
from road_router.io.map_loader import load_road_map

DATA_DIR = Path(__file__).parent / "data"
SIMPLE_MAP = DATA_DIR / "simpletest.map"


@pytest.fixture
def simple_graph():
    """9 intersections, 22 directed segments."""
    return load_road_map(SIMPLE_MAP)


@pytest.fixture
def simple_start():
    return Point(1.0, 1.0)


@pytest.fixture
def simple_goal():
    return Point(8.0, -1.0)
