"""
Tensor Product and Dimension Module

Decomposes tensor products of GL(n) irreducibles and computes their
dimensions.

All highest-weight vertices of A ⊗ B come from the highest weight of A
followed by some vertex of the crystal B, so a product is computed by
walking B once and keeping the vertices that still read as a lattice word
after the highest weight of A.
"""

import logging
from typing import List, Sequence

import numpy as np

from .constants import MIN_GL_RANK
from .errors import assert_or_crash
from .lattice import extend, is_lattice_word
from .partition import Partition, Vertex, hook_length, is_partition, partition_to_hw
from .traversal import walk_crystal

logger = logging.getLogger(__name__)


def hook_lengths(part: Sequence[int]) -> np.ndarray:
    """Hook lengths of all cells in row-major reading order."""
    return np.array(
        [hook_length(part, i, j) for i, row in enumerate(part) for j in range(row)],
        dtype=np.float64,
    )


def dimension_symmetric(part: Sequence[int]) -> int:
    """
    Dimension of the irreducible representation of the symmetric group.

    Hook length formula, accumulated in floating point; the final rounding
    recovers the exact integer.
    """
    assert_or_crash(is_partition(part), f"{list(part)} is not a partition")

    hooks = hook_lengths(part)
    ranks = np.arange(1, len(hooks) + 1, dtype=np.float64)
    return int(round(float(np.prod(ranks / hooks))))


def dimension_in_gl(n: int, part: Sequence[int]) -> int:
    """
    Dimension of the irreducible representation of GL(n).

    Product over the cells (i, j) of (n + j - i) / hook(i, j). Partitions
    with more than n rows give 0.
    """
    assert_or_crash(is_partition(part), f"{list(part)} is not a partition")

    contents = np.array(
        [n + j - i for i, row in enumerate(part) for j in range(row)],
        dtype=np.float64,
    )
    return int(round(float(np.prod(contents / hook_lengths(part)))))


def tensor_hw_with_crystal(v: Sequence[int], crystal: Sequence[Sequence[int]]) -> List[Vertex]:
    """
    Highest-weight vertices of ``v`` tensored with an expanded crystal.

    Args:
        v: A highest-weight vertex
        crystal: Vertices of the second factor

    Returns:
        The concatenations ``v + c`` that are lattice words
    """
    result: List[Vertex] = []
    for c in crystal:
        tensor_elem = tuple(v) + tuple(c)
        if is_lattice_word(tensor_elem):
            result.append(tensor_elem)
    return result


def tensor_partitions(n: int, left: Sequence[int], right: Sequence[int]) -> List[Partition]:
    """
    Decompose the tensor product of two GL(n) irreducibles.

    Args:
        n: Rank of the general linear group, at least 2
        left: Partition with at most n rows
        right: Partition with at most n rows

    Returns:
        One partition per irreducible summand; a partition appears as many
        times as its multiplicity
    """
    assert_or_crash(n >= MIN_GL_RANK, f"GL({n}) is below the minimum rank {MIN_GL_RANK}")
    assert_or_crash(is_partition(left) and is_partition(right),
                    f"{list(left)} and {list(right)} must both be partitions")
    assert_or_crash(len(left) <= n and len(right) <= n,
                    f"{list(left)} and {list(right)} must have at most {n} rows")

    # Walk the crystal of the smaller representation
    if dimension_in_gl(n, left) < dimension_in_gl(n, right):
        left, right = right, left
        logger.debug("Swapped factors, expanding %s in GL(%d)", list(right), n)

    base = tuple(left)
    result: List[Partition] = []
    for vertex in walk_crystal(n, partition_to_hw(right)):
        part = extend(base, vertex)
        if part is not None:
            result.append(part)
    return result
