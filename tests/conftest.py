"""
Shared test fixtures for the cagepack tests.
"""
import os
import sys
from pathlib import Path

# Rendering tests must not need a display
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

# Add src/ to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cagepack.core.pieces import base_pieces, candidate_pieces
from cagepack.core.rotation import Coordinate, Rotation
from cagepack.search import Search


@pytest.fixture
def piece1():
    """The first base piece, built from the (-1, -1, -1) corner."""
    return base_pieces()[0]


@pytest.fixture
def piece2():
    return base_pieces()[1]


@pytest.fixture
def flipped_piece1(piece1):
    """piece1 turned 180 degrees about x; disjoint from piece1."""
    half_turn_x = Rotation(((1, 0, 0), (0, -1, 0), (0, 0, -1)))
    return piece1.rotate(half_turn_x)


@pytest.fixture
def candidates():
    return candidate_pieces()


@pytest.fixture
def all_cells():
    return [
        Coordinate(x, y, z)
        for x in (-1, 0, 1)
        for y in (-1, 0, 1)
        for z in (-1, 0, 1)
    ]


@pytest.fixture(scope="session")
def full_search():
    """One full search, shared by every test that needs its results."""
    search = Search()
    results = search.run()
    return search, results
