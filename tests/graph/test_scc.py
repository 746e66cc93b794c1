"""Tests for Tarjan's strongly connected components."""
from __future__ import annotations

import random

import pytest

from dircycles.graph.matrix import AdjacencyMatrix, InvalidGraphError
from dircycles.graph.scc import strongly_connected_components


def _reachability(m: AdjacencyMatrix) -> list[set[int]]:
    """Brute-force transitive closure: reach[i] = nodes reachable from i."""
    n = m.size
    reach = [set(m.successors(i)) | {i} for i in range(n)]
    changed = True
    while changed:
        changed = False
        for i in range(n):
            extra = set()
            for j in reach[i]:
                extra |= reach[j]
            if not extra <= reach[i]:
                reach[i] |= extra
                changed = True
    return reach


class TestScenarios:
    def test_triangle_is_one_component(self, triangle: AdjacencyMatrix) -> None:
        assert strongly_connected_components(triangle) == [{0, 1, 2}]

    def test_two_disjoint_pairs(self, two_pairs: AdjacencyMatrix) -> None:
        comps = strongly_connected_components(two_pairs)
        assert len(comps) == 2
        assert sorted(sorted(c) for c in comps) == [[0, 1], [2, 3]]

    def test_single_node(self, single_node: AdjacencyMatrix) -> None:
        assert strongly_connected_components(single_node) == [{0}]

    def test_dag_gives_singletons(self) -> None:
        m = AdjacencyMatrix.from_edges(4, [(0, 1), (1, 2), (2, 3), (0, 3)])
        comps = strongly_connected_components(m)
        assert sorted(sorted(c) for c in comps) == [[0], [1], [2], [3]]

    def test_completion_order(self) -> None:
        """A sink component finishes before the component that reaches it."""
        m = AdjacencyMatrix.from_edges(4, [(0, 1), (1, 0), (1, 2), (2, 3), (3, 2)])
        comps = strongly_connected_components(m)
        assert comps == [{2, 3}, {0, 1}]

    def test_self_loop_ignored(self) -> None:
        m = AdjacencyMatrix.from_edges(2, [(0, 0), (0, 1)])
        comps = strongly_connected_components(m)
        assert sorted(sorted(c) for c in comps) == [[0], [1]]

    def test_accepts_nested_rows(self) -> None:
        comps = strongly_connected_components([[0, 1], [1, 0]])
        assert comps == [{0, 1}]

    def test_rejects_invalid_rows(self) -> None:
        with pytest.raises(InvalidGraphError):
            strongly_connected_components([[0, 2], [1, 0]])


class TestProperties:
    def test_partition_random(self, make_random) -> None:
        rng = random.Random(7)
        for _ in range(60):
            n = rng.randint(1, 12)
            m = make_random(n, rng.choice([0.1, 0.2, 0.4]), rng)
            comps = strongly_connected_components(m)
            seen: set[int] = set()
            for comp in comps:
                assert comp, "empty component"
                assert not (seen & comp), "components overlap"
                seen |= comp
            assert seen == set(range(n))

    def test_matches_mutual_reachability(self, make_random) -> None:
        rng = random.Random(11)
        for _ in range(60):
            n = rng.randint(1, 10)
            m = make_random(n, 0.25, rng)
            reach = _reachability(m)
            comp_of = {}
            for idx, comp in enumerate(strongly_connected_components(m)):
                for node in comp:
                    comp_of[node] = idx
            for a in range(n):
                for b in range(n):
                    mutual = b in reach[a] and a in reach[b]
                    assert (comp_of[a] == comp_of[b]) == mutual, (
                        f"nodes {a}, {b}: mutual={mutual}"
                    )

    def test_long_cycle_does_not_recurse(self) -> None:
        """A 1500-node ring is deeper than the default recursion limit."""
        n = 1500
        m = AdjacencyMatrix.from_edges(n, [(i, (i + 1) % n) for i in range(n)])
        comps = strongly_connected_components(m)
        assert comps == [set(range(n))]
