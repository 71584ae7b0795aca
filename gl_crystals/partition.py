"""
Partition Primitives

Value-level helpers for partitions and crystal vertices. A partition is a
weakly decreasing tuple of positive integers; a vertex is a word over the
letters 1..n, stored as a tuple once it leaves the traversal engine.
"""

from typing import List, Sequence, Tuple

from .constants import FIRST_LETTER
from .errors import assert_or_crash

Partition = Tuple[int, ...]
Vertex = Tuple[int, ...]


def is_partition(nums: Sequence[int]) -> bool:
    """Check that ``nums`` is weakly decreasing with a positive last entry."""
    for i in range(1, len(nums)):
        if nums[i - 1] < nums[i]:
            return False

    if len(nums) > 0 and nums[-1] <= 0:
        return False

    return True


def compare_lists(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Compare two integer sequences lexicographically.

    A proper prefix sorts before the longer sequence.

    Returns:
        -1, 0 or 1
    """
    for x, y in zip(a, b):
        if x < y:
            return -1
        if x > y:
            return 1
    if len(a) < len(b):
        return -1
    if len(a) > len(b):
        return 1
    return 0


def partition_key(part: Sequence[int]) -> Tuple[int, ...]:
    """Sort key agreeing with compare_lists."""
    return tuple(part)


def partition_to_hw(part: Sequence[int]) -> Vertex:
    """
    Produce the canonical highest-weight vertex of a partition.

    Row i contributes part[i] copies of the letter i + 1, rows in order, so
    [4, 2, 1] becomes (1, 1, 1, 1, 2, 2, 3).
    """
    assert_or_crash(is_partition(part), f"{list(part)} is not a partition")

    v: List[int] = []
    for i, length in enumerate(part):
        v.extend([i + FIRST_LETTER] * length)
    return tuple(v)


def vertex_height(v: Sequence[int]) -> int:
    """Largest letter in the vertex (0 for the empty vertex)."""
    return max(v, default=0)


def weight(v: Sequence[int]) -> Tuple[int, ...]:
    """Number of occurrences of each letter 1..height(v)."""
    counts = [0] * vertex_height(v)
    for letter in v:
        counts[letter - FIRST_LETTER] += 1
    return tuple(counts)


def hook_length(part: Sequence[int], i: int, j: int) -> int:
    """Hook length of the 0-indexed cell (i, j) of a partition."""
    k = 0
    while i + k + 1 < len(part) and part[i + k + 1] > j:
        k += 1
    return k + part[i] - j


def format_partition(part: Sequence[int]) -> str:
    """Render a partition as ``[4, 3, 3]``."""
    return "[" + ", ".join(str(x) for x in part) + "]"
