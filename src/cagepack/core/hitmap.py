"""
Occupancy masks for the 3x3x3 cube.

A ``Hitmap`` packs the 27 cells into the low 27 bits of an int, using
``index = (x+1) + 3*(y+1) + 9*(z+1)``.
"""

from dataclasses import dataclass
from typing import Iterable, List

from cagepack.core.rotation import Coordinate, GeometryError, Rotation


CELL_COUNT = 27
FULL_MASK = (1 << CELL_COUNT) - 1

_AXIS = (-1, 0, 1)


def coordinate_to_index(coord: Coordinate) -> int:
    """Map a cell to its bit index in [0, 27).

    Raises:
        GeometryError: If any component is outside {-1, 0, 1}.
    """
    if coord.x not in _AXIS or coord.y not in _AXIS or coord.z not in _AXIS:
        raise GeometryError(f"Coordinate out of cube: {coord.to_tuple()}")
    return (coord.x + 1) + 3 * (coord.y + 1) + 9 * (coord.z + 1)


def index_to_coordinate(index: int) -> Coordinate:
    if not 0 <= index < CELL_COUNT:
        raise GeometryError(f"Cell index must be 0-26, got {index}")
    return Coordinate(index % 3 - 1, (index // 3) % 3 - 1, index // 9 - 1)


@dataclass(frozen=True, order=True)
class Hitmap:
    """Immutable bitmask of occupied cells, ordered by its integer value."""
    bits: int = 0

    def __post_init__(self):
        if self.bits & ~FULL_MASK:
            raise GeometryError(f"Hitmap has bits outside the cube: {self.bits:#x}")

    @staticmethod
    def empty() -> "Hitmap":
        return Hitmap(0)

    @staticmethod
    def from_coordinates(coords: Iterable[Coordinate]) -> "Hitmap":
        bits = 0
        for coord in coords:
            bits |= 1 << coordinate_to_index(coord)
        return Hitmap(bits)

    def add(self, coord: Coordinate) -> "Hitmap":
        return Hitmap(self.bits | (1 << coordinate_to_index(coord)))

    def coordinates(self) -> List[Coordinate]:
        """Decode the occupied cells, x outermost, then y, then z."""
        coords = []
        for x in _AXIS:
            for y in _AXIS:
                for z in _AXIS:
                    coord = Coordinate(x, y, z)
                    if self.bits & (1 << coordinate_to_index(coord)):
                        coords.append(coord)
        return coords

    def rotate(self, rotation: Rotation) -> "Hitmap":
        return Hitmap.from_coordinates(rotation.rotate(c) for c in self.coordinates())

    def shift(self, vector: Coordinate) -> "Hitmap":
        return Hitmap.from_coordinates(c.shift(vector) for c in self.coordinates())

    def union(self, other: "Hitmap") -> "Hitmap":
        return Hitmap(self.bits | other.bits)

    def overlaps(self, other: "Hitmap") -> bool:
        return self.bits & other.bits != 0

    def cell_count(self) -> int:
        return bin(self.bits).count("1")

    def __or__(self, other: "Hitmap") -> "Hitmap":
        return self.union(other)

    def __len__(self) -> int:
        return self.cell_count()

    def __contains__(self, coord: Coordinate) -> bool:
        return bool(self.bits & (1 << coordinate_to_index(coord)))
