"""
Core modules for cagepack.

- Coordinates and the 24 cube rotations
- Occupancy bitmasks
- Piece shapes and the candidate set
- Cage state, fit test and canonicalization
- Configuration management
"""

from cagepack.core.rotation import (
    ALL_ROTATIONS, Coordinate, GeometryError, Rotation,
    generate_24_rotations, get_rotation,
)
from cagepack.core.hitmap import Hitmap, coordinate_to_index, index_to_coordinate
from cagepack.core.pieces import Move, base_pieces, build_piece, candidate_pieces
from cagepack.core.cage import Cage, ErrorCode, PlacementResult
from cagepack.core.config import SearchConfig, load_config, create_default_config, validate_config

__all__ = [
    # Geometry
    "ALL_ROTATIONS", "Coordinate", "GeometryError", "Rotation",
    "generate_24_rotations", "get_rotation",
    # Occupancy
    "Hitmap", "coordinate_to_index", "index_to_coordinate",
    # Pieces
    "Move", "base_pieces", "build_piece", "candidate_pieces",
    # Cage
    "Cage", "ErrorCode", "PlacementResult",
    # Config
    "SearchConfig", "load_config", "create_default_config", "validate_config",
]
