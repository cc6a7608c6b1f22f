"""
cagepack: maximal packings of 7-cell polycubes in a 3x3x3 cage

Enumerates every way to keep adding rigid pieces to a 3x3x3 cube until no
further piece fits, collapses packings that are rotations of one another, and
reports the ones that use a given number of pieces.

Example Usage:
```python
from cagepack import Search

search = Search()
for cage in search.solutions(piece_count=3):
    print([c.to_tuple() for c in cage.pieces[0].coordinates()])
```

Command-line Usage:
```bash
cagepack
cagepack --workers 4 --output-dir logs/ --verbose
```
"""

from cagepack.core.config import SearchConfig, load_config, validate_config
from cagepack.core.cage import Cage, ErrorCode, PlacementResult
from cagepack.core.hitmap import Hitmap
from cagepack.core.rotation import ALL_ROTATIONS, Coordinate, GeometryError, Rotation
from cagepack.search import Search, SearchStats, filter_by_piece_count

__version__ = "0.1.0"

__all__ = [
    "ALL_ROTATIONS",
    "Cage",
    "Coordinate",
    "ErrorCode",
    "GeometryError",
    "Hitmap",
    "PlacementResult",
    "Rotation",
    "Search",
    "SearchConfig",
    "SearchStats",
    "filter_by_piece_count",
    "load_config",
    "validate_config",
]
