"""
Piece shapes and the candidate set used by the search.
"""

from enum import Enum
from typing import FrozenSet, List, Sequence, Tuple

from cagepack.core.hitmap import Hitmap
from cagepack.core.rotation import ALL_ROTATIONS, Coordinate, Rotation, X, Y, Z


class Move(Enum):
    """One step of a piece outline."""
    PLUS_X = "+x"
    PLUS_Y = "+y"
    PLUS_Z = "+z"
    RESET = "reset"


_STEPS = {
    Move.PLUS_X: X,
    Move.PLUS_Y: Y,
    Move.PLUS_Z: Z,
}

START_CORNER = Coordinate(-1, -1, -1)

BASE_PIECE_MOVES: Tuple[Move, ...] = (
    Move.PLUS_X, Move.PLUS_X, Move.PLUS_Z,
    Move.RESET, Move.PLUS_Z,
    Move.RESET, Move.PLUS_Y, Move.PLUS_Y,
)

# The only translation of the base piece that keeps it inside the cube
BASE_PIECE_SHIFT = Z


def build_piece(moves: Sequence[Move], start: Coordinate = START_CORNER) -> Hitmap:
    """
    Fold a list of moves into a piece mask.

    The start cell is marked first. A step advances the current cell and marks
    it; ``RESET`` returns to ``start`` without marking anything.

    Args:
        moves: Moves to apply in order
        start: Starting cell

    Returns:
        The occupied cells as a Hitmap
    """
    hitmap = Hitmap.empty().add(start)
    current = start
    for move in moves:
        if move is Move.RESET:
            current = start
            continue
        current = current.shift(_STEPS[move])
        hitmap = hitmap.add(current)
    return hitmap


def base_pieces() -> Tuple[Hitmap, Hitmap]:
    first = build_piece(BASE_PIECE_MOVES)
    return first, first.shift(BASE_PIECE_SHIFT)


def candidate_pieces(rotations: Sequence[Rotation] = ALL_ROTATIONS) -> FrozenSet[Hitmap]:
    """Every orientation of both base pieces, deduplicated by mask."""
    return frozenset(
        piece.rotate(rotation)
        for piece in base_pieces()
        for rotation in rotations
    )


def sorted_candidates(rotations: Sequence[Rotation] = ALL_ROTATIONS) -> List[Hitmap]:
    return sorted(candidate_pieces(rotations))
