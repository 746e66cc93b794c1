"""Path queries between two nodes by depth-first search.

An arc u -> v is traversable when the matrix has it and, for an
undirected query (directed=False), the matrix also has v -> u.  That
lets the same adjacency matrix describe a mixed graph: reciprocated
pairs act as undirected edges, lone arcs as directed ones.
"""
from __future__ import annotations

from typing import Iterator, Sequence

from dircycles.graph.matrix import AdjacencyMatrix, as_matrix


def _traversable(m: AdjacencyMatrix, node: int, directed: bool) -> Iterator[int]:
    for succ in m.successors(node):
        if directed or m.has_arc(succ, node):
            yield succ


def find_path(
    graph: AdjacencyMatrix | Sequence[Sequence[int]],
    start: int,
    end: int,
    directed: bool = True,
) -> list[int]:
    """Return one path [start, ..., end], or [] if none exists.

    Each node is visited at most once, so this is O(n^2) on the dense
    matrix.  A path from a node to itself is reported as [].
    """
    m = as_matrix(graph)
    m.check_node(start)
    m.check_node(end)
    if start == end:
        return []

    visited = {start}
    path = [start]
    iters: list[Iterator[int]] = [_traversable(m, start, directed)]
    while iters:
        succ = next(iters[-1], None)
        if succ is None:
            iters.pop()
            path.pop()
            continue
        if succ in visited:
            continue
        visited.add(succ)
        path.append(succ)
        if succ == end:
            return path
        iters.append(_traversable(m, succ, directed))
    return []


def all_paths(
    graph: AdjacencyMatrix | Sequence[Sequence[int]],
    start: int,
    end: int,
    directed: bool = True,
) -> list[list[int]]:
    """Every simple path from *start* to *end*, in DFS discovery order.

    A node is only blocked while it is on the current path, so the
    number of results can be exponential in the node count.  The
    path from a node to itself is the single path [start].
    """
    m = as_matrix(graph)
    m.check_node(start)
    m.check_node(end)
    if start == end:
        return [[start]]

    found: list[list[int]] = []
    path = [start]
    on_path = {start}
    iters: list[Iterator[int]] = [_traversable(m, start, directed)]
    while iters:
        succ = next(iters[-1], None)
        if succ is None:
            iters.pop()
            on_path.discard(path.pop())
            continue
        if succ in on_path:
            continue
        if succ == end:
            found.append(path + [succ])
            continue
        path.append(succ)
        on_path.add(succ)
        iters.append(_traversable(m, succ, directed))
    return found
