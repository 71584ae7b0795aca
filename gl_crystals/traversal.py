"""
Crystal Traversal Module

Enumerates the crystal of GL(n) below a highest-weight vertex: every vertex
reachable through the lowering operators f_1 .. f_{n-1}, each exactly once.

Crystals grow like multinomial coefficients, so the walk never stores the
graph. It keeps one working word, mutates it to descend along an edge and
undoes that single letter to backtrack. Besides the set of vertices already
seen, memory is proportional to the depth of the walk.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Any, Iterator, List, Optional, Sequence

from .edge import edge_target
from .errors import assert_or_crash
from .lattice import hw_to_partition, is_lattice_word
from .partition import Partition, Vertex, partition_to_hw, vertex_height

logger = logging.getLogger(__name__)


@dataclass
class TraversalStats:
    """Counters filled in by a single walk."""
    visited: int = 0
    max_depth: int = 0
    finished: bool = False


def _check_start(n: int, start: Sequence[int]) -> None:
    assert_or_crash(is_lattice_word(start), f"start vertex {list(start)} is not a lattice word")
    assert_or_crash(vertex_height(start) <= n,
                    f"start vertex {list(start)} does not fit in GL({n})")


def walk_crystal(n: int, start: Sequence[int],
                 stats: Optional[TraversalStats] = None) -> Iterator[Vertex]:
    """
    Walk the GL(n) crystal generated by ``start`` depth first.

    The start vertex comes first, then every other vertex in order of
    discovery. Each yielded vertex is an immutable tuple snapshot, so callers
    may keep it; the engine's working buffer is never exposed. Stop early by
    simply not consuming the rest of the iterator.

    Args:
        n: Rank of the general linear group
        start: Highest-weight vertex with no letter above n
        stats: Optional counters updated while the walk runs

    Returns:
        Iterator over the vertices of the crystal

    Raises:
        PreconditionViolation: If ``start`` is not a lattice word or does not
            fit in GL(n). Checked before the iterator is returned.
    """
    _check_start(n, start)
    return _walk(n, tuple(start), stats if stats is not None else TraversalStats())


def _walk(n: int, start: Vertex, stats: TraversalStats) -> Iterator[Vertex]:
    working: List[int] = list(start)
    seen = {start}
    stats.visited = 1
    yield start

    # path[d] is the position changed to reach depth d + 1; resume[d] is the
    # operator to try next once we are back at depth d
    path: List[int] = []
    resume: List[int] = []
    next_i = 1

    while True:
        if next_i >= n:
            if not path:
                break
            working[path.pop()] -= 1
            next_i = resume.pop()
            continue

        edge = edge_target(next_i, working)
        if edge is None:
            next_i += 1
            continue

        working[edge.position] = edge.letter
        key = tuple(working)
        if key in seen:
            working[edge.position] = next_i
            next_i += 1
            continue

        seen.add(key)
        stats.visited += 1
        yield key

        path.append(edge.position)
        resume.append(next_i + 1)
        if len(path) > stats.max_depth:
            stats.max_depth = len(path)
        next_i = 1

    stats.finished = True
    logger.debug("Expanded crystal of %s in GL(%d): %d vertices, max depth %d",
                 list(start), n, stats.visited, stats.max_depth)


def traverse(n: int, start: Sequence[int], visitor: Callable[[Vertex], Any]) -> int:
    """
    Call ``visitor`` once on every vertex of the crystal below ``start``.

    Returns:
        Number of vertices visited
    """
    count = 0
    for vertex in walk_crystal(n, start):
        visitor(vertex)
        count += 1
    return count


def expand_in_gl(n: int, start: Sequence[int]) -> List[Vertex]:
    """Materialize the whole crystal below ``start`` as a list."""
    return list(walk_crystal(n, start))


class Crystal:
    """
    Restartable view of the GL(n) crystal below a highest-weight vertex.

    Iterating runs a fresh traversal each time; nothing computed by one
    iteration is kept for the next.
    """

    def __init__(self, n: int, start: Sequence[int]):
        _check_start(n, start)
        self.n = n
        self.start: Vertex = tuple(start)

    @classmethod
    def from_partition(cls, n: int, part: Sequence[int]) -> "Crystal":
        """Crystal generated by the canonical highest-weight word of ``part``."""
        return cls(n, partition_to_hw(part))

    @property
    def highest_weight(self) -> Partition:
        return hw_to_partition(self.start)

    def __iter__(self) -> Iterator[Vertex]:
        return _walk(self.n, self.start, TraversalStats())

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"Crystal(n={self.n}, start={list(self.start)})"

    def count(self) -> int:
        """Number of vertices, found by walking the crystal."""
        return sum(1 for _ in self)

    def dimension(self) -> int:
        """Number of vertices, from the hook-length formula."""
        from .tensor import dimension_in_gl
        return dimension_in_gl(self.n, self.highest_weight)

    def contains(self, vertex: Sequence[int]) -> bool:
        """Check whether ``vertex`` is reachable from the highest weight."""
        target = tuple(vertex)
        if len(target) != len(self.start):
            return False
        return any(v == target for v in self)

    def get_crystal_summary(self) -> Dict[str, Any]:
        """Get a summary of one full traversal."""
        stats = TraversalStats()
        for _ in _walk(self.n, self.start, stats):
            pass
        return {
            "n": self.n,
            "highest_weight": list(self.highest_weight),
            "word_length": len(self.start),
            "vertices": stats.visited,
            "max_depth": stats.max_depth,
            "dimension": self.dimension(),
        }
