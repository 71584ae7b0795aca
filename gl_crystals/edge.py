"""
Crystal Edge Operator

The lowering operator f_i either moves a vertex to a new vertex (changing one
letter i into i + 1) or kills it. Inside a tensor power of the basic crystal
it reads every i as "(" and every i + 1 as ")", ignores other letters, and
acts on the leftmost "(" that is never closed.

Only the bottom of the bracket stack is ever needed, so the scan keeps a
running balance and the position where the current unmatched run started.
"""

from typing import List, NamedTuple, Optional, Sequence

from .partition import Vertex


class Edge(NamedTuple):
    """Where f_i acts: ``vertex[position]`` becomes ``letter``."""
    position: int
    letter: int


def edge_target(i: int, vertex: Sequence[int]) -> Optional[Edge]:
    """
    Locate the letter f_i would change, without touching the vertex.

    Args:
        i: Operator index, 1..n-1
        vertex: Word to scan

    Returns:
        Edge for the leftmost unmatched i, or None when f_i kills the vertex
    """
    closer = i + 1
    depth = 0
    bottom = -1

    for j, letter in enumerate(vertex):
        if letter == i:
            if depth == 0:
                bottom = j
            depth += 1
        elif letter == closer and depth > 0:
            depth -= 1

    if depth == 0:
        return None
    return Edge(bottom, closer)


def apply_edge(vertex: List[int], edge: Edge) -> None:
    """Apply an edge to a mutable vertex in place."""
    vertex[edge.position] = edge.letter


def crystal_f(i: int, vertex: Sequence[int]) -> Optional[Vertex]:
    """Return f_i(vertex) as a fresh vertex, or None if f_i kills it."""
    edge = edge_target(i, vertex)
    if edge is None:
        return None

    result = list(vertex)
    apply_edge(result, edge)
    return tuple(result)
