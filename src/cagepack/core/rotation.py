"""
Coordinates and the proper rotation group of the cube (Rot24).

The 24 rotations are generated once at import time and exposed as the
immutable tuple ``ALL_ROTATIONS``. Everything downstream takes the rotation
set as an argument that defaults to this tuple.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np


Matrix = Tuple[Tuple[int, int, int], Tuple[int, int, int], Tuple[int, int, int]]


class GeometryError(ValueError):
    """A geometry precondition was violated (out-of-range cell, bad matrix)."""


@dataclass(frozen=True)
class Coordinate:
    """A cell of the cube; each component is one of -1, 0, 1."""
    x: int
    y: int
    z: int

    def shift(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    @staticmethod
    def from_list(lst: Sequence[int]) -> "Coordinate":
        return Coordinate(int(lst[0]), int(lst[1]), int(lst[2]))


# Unit steps along each axis
X = Coordinate(1, 0, 0)
Y = Coordinate(0, 1, 0)
Z = Coordinate(0, 0, 1)


@dataclass(frozen=True)
class Rotation:
    """A 3x3 integer rotation matrix, compared and hashed by its entries."""
    matrix: Matrix

    def __post_init__(self):
        if len(self.matrix) != 3 or any(len(row) != 3 for row in self.matrix):
            raise GeometryError(f"Rotation matrix must be 3x3, got {self.matrix}")

    @staticmethod
    def from_array(array: np.ndarray) -> "Rotation":
        rows = tuple(tuple(int(v) for v in row) for row in np.asarray(array))
        return Rotation(rows)

    @staticmethod
    def identity() -> "Rotation":
        return Rotation.from_array(np.eye(3, dtype=int))

    def as_array(self) -> np.ndarray:
        return np.array(self.matrix, dtype=int)

    def multiply(self, other: "Rotation") -> "Rotation":
        """Matrix product ``self @ other``."""
        return Rotation.from_array(self.as_array() @ other.as_array())

    def inverse(self) -> "Rotation":
        # Orthonormal, so the inverse is the transpose
        return Rotation.from_array(self.as_array().T)

    def determinant(self) -> int:
        return int(round(np.linalg.det(self.as_array())))

    def is_identity(self) -> bool:
        return self == Rotation.identity()

    def rotate(self, coord: Coordinate) -> Coordinate:
        """Matrix-vector product, in plain integer arithmetic."""
        m = self.matrix
        return Coordinate(
            m[0][0] * coord.x + m[0][1] * coord.y + m[0][2] * coord.z,
            m[1][0] * coord.x + m[1][1] * coord.y + m[1][2] * coord.z,
            m[2][0] * coord.x + m[2][1] * coord.y + m[2][2] * coord.z,
        )


def generate_24_rotations() -> List[Rotation]:
    """
    Generate the 24 proper rotations of the cube.

    Composes 4 x 4 x 4 powers of the quarter turns about x, y and z
    (``x @ y @ z``) and keeps the distinct results. The 64 products collapse
    to exactly 24 matrices, the order of the cube's rotation group.

    Returns:
        The rotations, identity first, the rest ordered by matrix entries.

    Raises:
        GeometryError: If the generated set is not 24 proper rotations.
    """
    # Rotate 90 degrees about the x axis
    Rx90 = np.array([
        [1, 0, 0],
        [0, 0, -1],
        [0, 1, 0]
    ], dtype=int)

    # Rotate 90 degrees about the y axis
    Ry90 = np.array([
        [0, 0, 1],
        [0, 1, 0],
        [-1, 0, 0]
    ], dtype=int)

    # Rotate 90 degrees about the z axis
    Rz90 = np.array([
        [0, -1, 0],
        [1, 0, 0],
        [0, 0, 1]
    ], dtype=int)

    I = np.eye(3, dtype=int)

    unique = set()
    x = I
    for _ in range(4):
        x = x @ Rx90
        y = I
        for _ in range(4):
            y = y @ Ry90
            z = I
            for _ in range(4):
                z = z @ Rz90
                unique.add(Rotation.from_array(x @ y @ z))

    if len(unique) != 24:
        raise GeometryError(f"Expected 24 rotations, generated {len(unique)}")

    for R in unique:
        array = R.as_array()
        if not np.array_equal(array @ array.T, I) or R.determinant() != 1:
            raise GeometryError(f"Not a proper rotation: {R.matrix}")

    return sorted(unique, key=lambda R: (not R.is_identity(), R.matrix))


# Precomputed once, shared read-only
ALL_ROTATIONS: Tuple[Rotation, ...] = tuple(generate_24_rotations())


def get_rotation(rot_index: int) -> Rotation:
    """
    Get a rotation by index.
    rot_index: 0-23
    """
    if not 0 <= rot_index < len(ALL_ROTATIONS):
        raise ValueError(f"Rotation index must be 0-23, got {rot_index}")
    return ALL_ROTATIONS[rot_index]
