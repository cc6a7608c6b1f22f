"""Backtracking search over cage packings, with optional process fan-out."""

from __future__ import annotations

import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from cagepack.core.cage import Cage
from cagepack.core.hitmap import Hitmap
from cagepack.core.pieces import candidate_pieces
from cagepack.core.rotation import ALL_ROTATIONS, Rotation


@dataclass
class SearchStats:
    expanded: int = 0
    placements_tried: int = 0
    collisions: int = 0
    terminal_states: int = 0
    canonical_results: int = 0
    elapsed_seconds: float = 0.0

    def absorb(self, other: "SearchStats") -> None:
        """Add another branch's counters into this one."""
        self.expanded += other.expanded
        self.placements_tried += other.placements_tried
        self.collisions += other.collisions
        self.terminal_states += other.terminal_states

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _explore(
    root: Cage,
    candidates: Sequence[Hitmap],
    rotations: Sequence[Rotation],
    stats: SearchStats,
) -> Set[Cage]:
    fringe: List[Cage] = [root]
    canonical_end_states: Set[Cage] = set()

    while fringe:
        cage = fringe.pop()
        stats.expanded += 1

        is_end_state = True
        for piece in candidates:
            stats.placements_tried += 1
            result = cage.add(piece)
            if not result.success:
                stats.collisions += 1
                continue
            is_end_state = False
            fringe.append(result.cage)

        if is_end_state:
            stats.terminal_states += 1
            canonical_end_states.add(cage.canonicalize(rotations))

    return canonical_end_states


def _explore_branch(
    root: Cage,
    candidates: Tuple[Hitmap, ...],
    rotations: Tuple[Rotation, ...],
) -> Tuple[Set[Cage], SearchStats]:
    """Worker entry point: explore one subtree in a separate process."""
    stats = SearchStats()
    results = _explore(root, candidates, rotations, stats)
    return results, stats


class Search:
    """
    Enumerates maximal packings of the candidate pieces into the cube.

    Every terminal cage (one no candidate still fits into) is canonicalized
    and collected in a set, so rotated copies of a packing count once.
    Interior states are not deduplicated.
    """

    def __init__(
        self,
        candidates: Optional[Iterable[Hitmap]] = None,
        rotations: Sequence[Rotation] = ALL_ROTATIONS,
    ):
        self.rotations: Tuple[Rotation, ...] = tuple(rotations)
        if candidates is None:
            candidates = candidate_pieces(self.rotations)
        # Sibling order doesn't affect results; sorting keeps runs reproducible
        self.candidates: Tuple[Hitmap, ...] = tuple(sorted(set(candidates)))
        self.stats = SearchStats()

    def run(self, workers: int = 1) -> Set[Cage]:
        """
        Explore every packing reachable from the empty cage.

        Args:
            workers: Number of processes; above 1 the root's children are
                explored in parallel.

        Returns:
            Set of canonical terminal cages
        """
        start = time.time()
        self.stats = SearchStats()

        if workers <= 1:
            results = _explore(Cage(), self.candidates, self.rotations, self.stats)
        else:
            results = self._run_parallel(workers)

        self.stats.canonical_results = len(results)
        self.stats.elapsed_seconds = time.time() - start
        return results

    def _run_parallel(self, workers: int) -> Set[Cage]:
        root = Cage()
        self.stats.expanded += 1
        branches = []
        for piece in self.candidates:
            self.stats.placements_tried += 1
            result = root.add(piece)
            if result.success:
                branches.append(result.cage)
            else:
                self.stats.collisions += 1

        if not branches:
            self.stats.terminal_states += 1
            return {root.canonicalize(self.rotations)}

        results: Set[Cage] = set()
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(_explore_branch, branch, self.candidates, self.rotations)
                for branch in branches
            ]
            for future in as_completed(futures):
                branch_results, branch_stats = future.result()
                results |= branch_results
                self.stats.absorb(branch_stats)
        return results

    def solutions(self, piece_count: int = 3, workers: int = 1) -> List[Cage]:
        return filter_by_piece_count(self.run(workers=workers), piece_count)

    def is_maximal(self, cage: Cage) -> bool:
        return cage.is_terminal(self.candidates)


def filter_by_piece_count(results: Iterable[Cage], count: int) -> List[Cage]:
    """Cages with exactly ``count`` pieces, in a stable order."""
    return sorted(
        (cage for cage in results if cage.piece_count == count),
        key=lambda cage: (cage.hitmap, cage.pieces),
    )
