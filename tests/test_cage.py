"""Tests for cage packing, the fit test and canonicalization."""
import pytest

from cagepack.core.cage import Cage, ErrorCode, piece_cell_lists
from cagepack.core.hitmap import Hitmap
from cagepack.core.rotation import ALL_ROTATIONS, Coordinate, Rotation


class TestAdd:

    def test_add_to_empty(self, piece1):
        empty = Cage()
        result = empty.add(piece1)
        assert result.success
        assert result.error == ErrorCode.OK
        assert result.cage.hitmap == piece1
        assert result.cage.pieces == (piece1,)
        # The original cage is untouched
        assert empty.hitmap == Hitmap.empty()
        assert empty.pieces == ()

    def test_overlap_does_not_fit(self, piece1, piece2):
        cage = Cage().add(piece1).cage
        result = cage.add(piece2)
        assert not result.success
        assert result.error == ErrorCode.COLLISION
        assert result.cage is None
        assert result.message

    def test_fails_iff_masks_share_a_cell(self, piece1, candidates):
        cage = Cage().add(piece1).cage
        for piece in candidates:
            result = cage.add(piece)
            assert result.success == (piece1.bits & piece.bits == 0)
            assert cage.fits(piece) == result.success

    def test_add_is_commutative(self, piece1, flipped_piece1):
        assert not piece1.overlaps(flipped_piece1)
        ab = Cage().add(piece1).cage.add(flipped_piece1).cage
        ba = Cage().add(flipped_piece1).cage.add(piece1).cage
        assert ab.hitmap == ba.hitmap == piece1 | flipped_piece1
        assert ab == ba
        assert hash(ab) == hash(ba)

    def test_pieces_kept_sorted(self, piece1, flipped_piece1):
        cage = Cage.from_pieces([flipped_piece1, piece1])
        assert list(cage.pieces) == sorted([piece1, flipped_piece1])

    def test_arbitrary_masks(self):
        a = Hitmap(0b1)
        b = Hitmap(0b10)
        cage = Cage.from_pieces([a, b])
        assert cage.piece_count == 2

    def test_from_pieces_collision_raises(self, piece1):
        with pytest.raises(ValueError):
            Cage.from_pieces([piece1, piece1])

    def test_terminal(self, piece1):
        cage = Cage().add(piece1).cage
        assert cage.is_terminal([piece1])
        assert not Cage().is_terminal([piece1])
        assert Cage().is_terminal([])


class TestCanonicalize:

    def test_idempotent(self, piece1, flipped_piece1):
        canon = Cage.from_pieces([piece1, flipped_piece1]).canonicalize()
        assert canon.canonicalize() == canon

    def test_minimal_mask(self, piece1, flipped_piece1):
        cage = Cage.from_pieces([piece1, flipped_piece1])
        canon = cage.canonicalize()
        for R in ALL_ROTATIONS:
            assert canon.hitmap <= cage.hitmap.rotate(R)

    def test_pieces_follow_mask(self, piece1, flipped_piece1):
        canon = Cage.from_pieces([piece1, flipped_piece1]).canonicalize()
        union = Hitmap.empty()
        for piece in canon.pieces:
            union = union | piece
        assert union == canon.hitmap
        assert list(canon.pieces) == sorted(canon.pieces)

    def test_rotated_copies_share_representative(self, piece1):
        expected = Cage.from_pieces([piece1]).canonicalize()
        for R in ALL_ROTATIONS:
            assert Cage.from_pieces([piece1.rotate(R)]).canonicalize() == expected

    def test_rotated_cage_canonicalizes_to_same(self, piece1, flipped_piece1):
        cage = Cage.from_pieces([piece1, flipped_piece1])
        canon = cage.canonicalize()
        for R in ALL_ROTATIONS:
            assert cage.rotate(R).canonicalize() == canon

    def test_symmetric_mask_with_asymmetric_pieces(self):
        # A straight edge row, split 2 + 1; the mask is symmetric under the
        # half turn that reverses the row, the pieces are not
        pair = Hitmap.from_coordinates([Coordinate(-1, -1, -1), Coordinate(0, -1, -1)])
        single = Hitmap.from_coordinates([Coordinate(1, -1, -1)])
        cage = Cage.from_pieces([pair, single])
        half_turn = Rotation(((-1, 0, 0), (0, 0, 1), (0, 1, 0)))
        assert cage.hitmap.rotate(half_turn) == cage.hitmap
        assert cage.rotate(half_turn) != cage

        canon = cage.canonicalize()
        for R in ALL_ROTATIONS:
            assert cage.rotate(R).canonicalize() == canon

    def test_empty_cage(self):
        assert Cage().canonicalize() == Cage()


class TestSerialization:

    def test_to_dict(self, piece1):
        data = Cage.from_pieces([piece1]).to_dict()
        assert data["mask"] == piece1.bits
        assert len(data["pieces"]) == 1
        assert len(data["pieces"][0]["cells"]) == 7

    def test_piece_cell_lists(self, piece1):
        cells = piece_cell_lists(Cage.from_pieces([piece1]))
        assert cells == [[c.to_tuple() for c in piece1.coordinates()]]
