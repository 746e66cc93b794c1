"""Tests for cycle canonical forms."""
from __future__ import annotations

import itertools

import pytest

from dircycles.graph.canonical import (
    canonical_bidirected,
    canonical_rotation,
    is_bidirected,
    reverse_cycle,
)
from dircycles.graph.matrix import AdjacencyMatrix


def _undirected_ring(n: int) -> AdjacencyMatrix:
    edges = []
    for i in range(n):
        j = (i + 1) % n
        edges += [(i, j), (j, i)]
    return AdjacencyMatrix.from_edges(n, edges)


class TestRotation:
    def test_rotates_min_first(self) -> None:
        assert canonical_rotation([3, 1, 2]) == [1, 2, 3]
        assert canonical_rotation([2, 5, 0, 4]) == [0, 4, 2, 5]

    def test_already_canonical(self) -> None:
        assert canonical_rotation([0, 1, 2]) == [0, 1, 2]

    def test_all_rotations_agree(self) -> None:
        cycle = [4, 7, 1, 9, 3]
        forms = {
            tuple(canonical_rotation(cycle[k:] + cycle[:k]))
            for k in range(len(cycle))
        }
        assert forms == {(1, 9, 3, 4, 7)}

    @pytest.mark.parametrize("short", [[], [5]])
    def test_short_sequences(self, short: list[int]) -> None:
        assert canonical_rotation(short) == short

    def test_returns_new_list(self) -> None:
        cycle = [0, 1]
        assert canonical_rotation(cycle) is not cycle

    def test_reverse(self) -> None:
        assert reverse_cycle([0, 1, 2]) == [2, 1, 0]
        assert reverse_cycle((3,)) == [3]


class TestBidirected:
    def test_directed_triangle_is_not(self, triangle: AdjacencyMatrix) -> None:
        assert not is_bidirected(triangle, [0, 1, 2])

    def test_mutual_pair_is(self, mutual_pair: AdjacencyMatrix) -> None:
        assert is_bidirected(mutual_pair, [0, 1])
        assert is_bidirected(mutual_pair, [1, 0])

    def test_wraparound_checked(self) -> None:
        m = _undirected_ring(4)
        m.set_arc(0, 3, False)
        # 0-1, 1-2, 2-3 reciprocated, 3 -> 0 one way only
        assert not is_bidirected(m, [0, 1, 2, 3])

    def test_short_never_bidirected(self, mutual_pair: AdjacencyMatrix) -> None:
        assert not is_bidirected(mutual_pair, [0])
        assert not is_bidirected(mutual_pair, [])


class TestCanonicalBidirected:
    def test_both_orientations_fold(self, complete4: AdjacencyMatrix) -> None:
        for cycle in itertools.permutations(range(4)):
            forward = list(cycle)
            assert canonical_bidirected(complete4, forward) == canonical_bidirected(
                complete4, reverse_cycle(forward)
            )

    def test_walks_towards_smaller_neighbor(self) -> None:
        m = _undirected_ring(5)
        assert canonical_bidirected(m, [0, 1, 2, 3, 4]) == [0, 1, 2, 3, 4]
        assert canonical_bidirected(m, [0, 4, 3, 2, 1]) == [0, 1, 2, 3, 4]
        assert canonical_bidirected(m, [3, 2, 1, 0, 4]) == [0, 1, 2, 3, 4]

    def test_min_at_end(self, complete4: AdjacencyMatrix) -> None:
        # min at the last position: its successor wraps to the front
        assert canonical_bidirected(complete4, [2, 3, 1, 0]) == [0, 1, 3, 2]
        assert canonical_bidirected(complete4, [3, 2, 0]) == [0, 2, 3]

    def test_pair(self, mutual_pair: AdjacencyMatrix) -> None:
        assert canonical_bidirected(mutual_pair, [1, 0]) == [0, 1]

    def test_rotations_and_reflections_collapse(self) -> None:
        m = _undirected_ring(6)
        base = [0, 1, 2, 3, 4, 5]
        forms = set()
        for seq in (base, reverse_cycle(base)):
            for k in range(6):
                forms.add(tuple(canonical_bidirected(m, seq[k:] + seq[:k])))
        assert forms == {(0, 1, 2, 3, 4, 5)}

    def test_not_bidirected_returned_unchanged(self, triangle: AdjacencyMatrix) -> None:
        assert canonical_bidirected(triangle, [1, 2, 0]) == [1, 2, 0]
