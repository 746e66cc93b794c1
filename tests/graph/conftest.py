"""Shared fixtures for graph tests."""
from __future__ import annotations

import random

import pytest

from dircycles.graph.matrix import AdjacencyMatrix


@pytest.fixture
def triangle() -> AdjacencyMatrix:
    """0 -> 1 -> 2 -> 0"""
    return AdjacencyMatrix.from_edges(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def mutual_pair() -> AdjacencyMatrix:
    """0 <-> 1"""
    return AdjacencyMatrix.from_edges(2, [(0, 1), (1, 0)])


@pytest.fixture
def two_pairs() -> AdjacencyMatrix:
    """0 <-> 1 and 2 <-> 3, nothing between the groups."""
    return AdjacencyMatrix.from_edges(4, [(0, 1), (1, 0), (2, 3), (3, 2)])


@pytest.fixture
def single_node() -> AdjacencyMatrix:
    return AdjacencyMatrix(1)


@pytest.fixture
def complete4() -> AdjacencyMatrix:
    """Every ordered pair of distinct nodes among 0..3 is an arc."""
    return AdjacencyMatrix.from_edges(
        4, [(i, j) for i in range(4) for j in range(4) if i != j]
    )


@pytest.fixture
def make_random():
    """Factory for reproducible random digraphs (self-loops included)."""

    def _make(n: int, density: float, rng: random.Random) -> AdjacencyMatrix:
        m = AdjacencyMatrix(n)
        for i in range(n):
            for j in range(n):
                if rng.random() < density:
                    m.set_arc(i, j)
        return m

    return _make
