"""
Cage state: the pieces packed so far and their combined occupancy.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from cagepack.core.hitmap import Hitmap
from cagepack.core.rotation import ALL_ROTATIONS, Rotation


class ErrorCode(Enum):
    """Outcome of a placement attempt."""
    OK = "OK"
    COLLISION = "Collision"


@dataclass(frozen=True)
class Cage:
    """
    Immutable packing state.

    ``pieces`` is always sorted by mask value, so two cages holding the same
    pieces compare and hash equal regardless of insertion order.
    """
    hitmap: Hitmap = field(default_factory=Hitmap.empty)
    pieces: Tuple[Hitmap, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "pieces", tuple(sorted(self.pieces)))

    @staticmethod
    def from_pieces(pieces: Iterable[Hitmap]) -> "Cage":
        """Pack pieces one by one.

        Raises:
            ValueError: If any piece collides with an earlier one.
        """
        cage = Cage()
        for piece in pieces:
            result = cage.add(piece)
            if not result.success:
                raise ValueError(result.message)
            cage = result.cage
        return cage

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

    def fits(self, piece: Hitmap) -> bool:
        return not self.hitmap.overlaps(piece)

    def add(self, piece: Hitmap) -> "PlacementResult":
        """
        Try to place a piece.

        Args:
            piece: Mask of the oriented piece

        Returns:
            PlacementResult; on success ``cage`` holds the new state, on a
            collision ``success`` is False and this cage is unchanged.
        """
        # Any shared cell means it can't fit
        if not self.fits(piece):
            return PlacementResult(
                success=False,
                error=ErrorCode.COLLISION,
                message=f"Collision on cells {self.hitmap.bits & piece.bits:#x}",
            )

        return PlacementResult(
            success=True,
            error=ErrorCode.OK,
            cage=Cage(self.hitmap | piece, self.pieces + (piece,)),
        )

    def is_terminal(self, candidates: Iterable[Hitmap]) -> bool:
        return not any(self.fits(piece) for piece in candidates)

    def rotate(self, rotation: Rotation) -> "Cage":
        return Cage(
            self.hitmap.rotate(rotation),
            tuple(piece.rotate(rotation) for piece in self.pieces),
        )

    def canonicalize(self, rotations: Sequence[Rotation] = ALL_ROTATIONS) -> "Cage":
        """
        Pick the rotation with the smallest ``(mask, pieces)`` as the representative.

        A rotation replaces the current best only when it is strictly smaller:
        first by mask value, then, on an equal mask, by the sorted tuple of
        co-rotated pieces. Every rotated copy of a packing therefore lands on
        the same cage.
        """
        canon = self
        for rotation in rotations:
            rotated_hitmap = self.hitmap.rotate(rotation)
            if rotated_hitmap > canon.hitmap:
                continue
            rotated = Cage(
                rotated_hitmap,
                tuple(piece.rotate(rotation) for piece in self.pieces),
            )
            if (rotated.hitmap, rotated.pieces) < (canon.hitmap, canon.pieces):
                canon = rotated
        return canon

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mask": self.hitmap.bits,
            "pieces": [
                {
                    "mask": piece.bits,
                    "cells": [list(c.to_tuple()) for c in piece.coordinates()],
                }
                for piece in self.pieces
            ],
        }


@dataclass
class PlacementResult:
    """Result of ``Cage.add``."""
    success: bool
    error: ErrorCode
    cage: Optional[Cage] = None
    message: str = ""


def piece_cell_lists(cage: Cage) -> List[List[Tuple[int, int, int]]]:
    """Occupied cells of each piece, as plain tuples."""
    return [[c.to_tuple() for c in piece.coordinates()] for piece in cage.pieces]
