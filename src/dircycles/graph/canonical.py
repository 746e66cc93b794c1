"""Canonical forms for cycles.

A cycle is stored as the list of its nodes with the closing arc
implicit, so [0, 1, 2], [1, 2, 0] and [2, 0, 1] all describe the same
directed cycle.  canonical_rotation() picks the rotation that starts at
the smallest node.

A bidirected cycle (every consecutive pair, wraparound included, has
arcs both ways) is also the same cycle as its reversal: [0, 1, 2] and
[0, 2, 1] walk the same triangle in opposite directions.
canonical_bidirected() folds both orientations into one representative
by looking at the two neighbors of the smallest node and walking
towards the smaller of them.
"""
from __future__ import annotations

from typing import Sequence

from dircycles.graph.matrix import AdjacencyMatrix


def reverse_cycle(cycle: Sequence[int]) -> list[int]:
    return list(reversed(cycle))


def canonical_rotation(cycle: Sequence[int]) -> list[int]:
    """Rotate *cycle* so that its minimum node comes first."""
    if len(cycle) <= 1:
        return list(cycle)
    m = min(range(len(cycle)), key=cycle.__getitem__)
    return list(cycle[m:]) + list(cycle[:m])


def is_bidirected(graph: AdjacencyMatrix, cycle: Sequence[int]) -> bool:
    """True iff every consecutive pair of *cycle* is linked both ways.

    The pair (last, first) is included.  Sequences shorter than two
    nodes are never bidirected.
    """
    k = len(cycle)
    if k <= 1:
        return False
    for pos in range(k):
        a = cycle[pos]
        b = cycle[(pos + 1) % k]
        if not (graph.has_arc(a, b) and graph.has_arc(b, a)):
            return False
    return True


def canonical_bidirected(graph: AdjacencyMatrix, cycle: Sequence[int]) -> list[int]:
    """One representative for a bidirected cycle and its reversal.

    With m the position of the smallest node, compare its successor
    and predecessor on the cycle.  If the successor is larger, the
    cycle is reversed before rotating, so the result always starts at
    the minimum and steps next to its smaller neighbor.

    Cycles that are not bidirected are returned as a plain copy; only
    rotation, not reflection, makes them equal to another list.
    """
    k = len(cycle)
    if k <= 1 or not is_bidirected(graph, cycle):
        return list(cycle)
    m = min(range(k), key=cycle.__getitem__)
    pred = cycle[m - 1]
    succ = cycle[(m + 1) % k]
    if succ > pred:
        return canonical_rotation(reverse_cycle(cycle))
    return canonical_rotation(cycle)
