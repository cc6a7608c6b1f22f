"""Tests for occupancy masks."""
import pytest

from cagepack.core.hitmap import (
    CELL_COUNT,
    FULL_MASK,
    Hitmap,
    coordinate_to_index,
    index_to_coordinate,
)
from cagepack.core.rotation import ALL_ROTATIONS, Coordinate, GeometryError


class TestIndexMapping:

    def test_bijection_onto_27_indices(self, all_cells):
        indices = [coordinate_to_index(c) for c in all_cells]
        assert sorted(indices) == list(range(CELL_COUNT))

    def test_round_trip(self, all_cells):
        for index in range(CELL_COUNT):
            assert coordinate_to_index(index_to_coordinate(index)) == index
        for cell in all_cells:
            assert index_to_coordinate(coordinate_to_index(cell)) == cell

    def test_known_indices(self):
        assert coordinate_to_index(Coordinate(-1, -1, -1)) == 0
        assert coordinate_to_index(Coordinate(0, 0, 0)) == 13
        assert coordinate_to_index(Coordinate(1, 1, 1)) == 26
        assert coordinate_to_index(Coordinate(1, -1, 0)) == 11

    @pytest.mark.parametrize("coord", [
        Coordinate(2, 0, 0),
        Coordinate(0, -2, 0),
        Coordinate(0, 0, 5),
    ])
    def test_out_of_cube_coordinate_raises(self, coord):
        with pytest.raises(GeometryError):
            coordinate_to_index(coord)

    def test_out_of_range_index_raises(self):
        with pytest.raises(GeometryError):
            index_to_coordinate(27)
        with pytest.raises(GeometryError):
            index_to_coordinate(-1)


class TestHitmap:

    def test_only_low_27_bits(self):
        assert Hitmap(FULL_MASK).cell_count() == 27
        with pytest.raises(GeometryError):
            Hitmap(1 << 27)

    def test_from_coordinates_and_back(self):
        cells = [Coordinate(-1, -1, -1), Coordinate(1, 0, 1), Coordinate(0, 1, -1)]
        hitmap = Hitmap.from_coordinates(cells)
        assert len(hitmap) == 3
        assert set(hitmap.coordinates()) == set(cells)
        assert Coordinate(1, 0, 1) in hitmap
        assert Coordinate(0, 0, 0) not in hitmap

    def test_coordinates_order(self):
        hitmap = Hitmap.from_coordinates([Coordinate(0, -1, -1), Coordinate(-1, 1, 0)])
        assert hitmap.coordinates() == [Coordinate(-1, 1, 0), Coordinate(0, -1, -1)]

    def test_identity_rotation_is_noop(self, piece1):
        assert piece1.rotate(ALL_ROTATIONS[0]) == piece1

    def test_rotate_then_inverse_restores(self, piece1, piece2):
        for R in ALL_ROTATIONS:
            assert piece1.rotate(R).rotate(R.inverse()) == piece1
            assert piece2.rotate(R).rotate(R.inverse()) == piece2

    def test_rotation_preserves_cell_count(self, piece1):
        for R in ALL_ROTATIONS:
            assert piece1.rotate(R).cell_count() == 7

    def test_shift(self):
        hitmap = Hitmap.from_coordinates([Coordinate(-1, 0, 0)])
        assert hitmap.shift(Coordinate(1, 0, 0)) == Hitmap.from_coordinates([Coordinate(0, 0, 0)])

    def test_shift_out_of_cube_raises(self, piece1):
        with pytest.raises(GeometryError):
            piece1.shift(Coordinate(-1, 0, 0))

    def test_union_and_overlap(self):
        a = Hitmap(0b011)
        b = Hitmap(0b110)
        c = Hitmap(0b100)
        assert (a | c).bits == 0b111
        assert a.union(c) == a | c
        assert a.overlaps(b)
        assert not a.overlaps(c)

    def test_ordering_by_value(self):
        assert Hitmap(1) < Hitmap(2)
        assert sorted([Hitmap(8), Hitmap(1), Hitmap(4)]) == [Hitmap(1), Hitmap(4), Hitmap(8)]

    def test_empty(self):
        assert Hitmap.empty().bits == 0
        assert Hitmap.empty().coordinates() == []
