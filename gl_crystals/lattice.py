"""
Lattice Word Recognizer

A vertex is highest-weight exactly when it is a lattice word: reading left to
right, each letter adds a cell to the row it names and every intermediate
shape is still a partition. The word 11231 passes through [1], [2], [2, 1],
[2, 1, 1] and [3, 1, 1], so it is a lattice word.

Failure is returned as None. The recognizer runs once per visited vertex
during a tensor product, so it must stay cheap and exception free.
"""

from typing import List, Optional, Sequence

from .errors import assert_or_crash
from .partition import Partition


def extend(base: Sequence[int], word: Sequence[int]) -> Optional[Partition]:
    """
    Grow ``base`` one cell per letter of ``word``.

    Args:
        base: Starting partition (empty for a from-scratch check); not modified
        word: Letters to add, left to right

    Returns:
        The grown partition, or None as soon as a letter would break the
        partition shape
    """
    partition: List[int] = list(base)

    for num in word:
        if num - 1 == len(partition):
            partition.append(1)
        elif num == 1:
            partition[0] += 1
        elif num - 1 > len(partition):
            return None
        elif partition[num - 2] > partition[num - 1]:
            partition[num - 1] += 1
        else:
            return None

    return tuple(partition)


def hw_to_maybe_partition(v: Sequence[int]) -> Optional[Partition]:
    """Partition of a highest-weight vertex, or None if ``v`` is not one."""
    return extend((), v)


def is_lattice_word(v: Sequence[int]) -> bool:
    """Test whether a crystal vertex is highest-weight."""
    return extend((), v) is not None


def hw_to_partition(v: Sequence[int]) -> Partition:
    """Convert a vertex known to be highest-weight into its partition."""
    result = extend((), v)
    assert_or_crash(result is not None, f"Given vertex {list(v)} was not a partition")
    return result
