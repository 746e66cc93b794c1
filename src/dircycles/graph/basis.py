"""Cycle basis from DFS spanning trees of strongly connected components.

For every SCC with more than one node:
  1.  Restrict the graph to the component (induced subgraph).
  2.  DFS from the first node that has an outgoing arc.  Every arc the
      DFS walks is classified: TREE if it discovered its target,
      BACK if the target had already been visited.
  3.  Each BACK arc (tail, head) closes a cycle with the tree path
      head -> ... -> tail.  That path, head first, is one basis cycle.

The result is one cycle per back edge, which is what a DFS-tree cycle
basis gives you.  It is not a minimum-weight basis, and a reciprocated
pair i <-> j only shows up as a 2-cycle when the DFS happens to walk
one direction as a tree arc and the other as a back arc.

Arcs marked BACK are really any non-tree arcs: in a directed DFS they
can also be forward arcs (to a descendant) or cross arcs (to a node in
a finished branch).  Neither has a tree path from head to tail, so
neither closes a simple cycle on its own; those arcs are skipped.
"""
from __future__ import annotations

import array
import logging
from typing import Iterator, Sequence

from dircycles.graph.matrix import AdjacencyMatrix, as_matrix
from dircycles.graph.scc import strongly_connected_components

log = logging.getLogger(__name__)

NONE, TREE, BACK = 0, 1, -1


class SpanningTree:
    """Tri-valued n x n matrix: 0 no arc, 1 tree arc, -1 non-tree arc."""

    __slots__ = ("_n", "_cells", "root")

    def __init__(self, size: int, root: int | None = None) -> None:
        self._n = size
        self._cells = array.array("b", bytes(size * size))
        self.root = root

    def mark(self, src: int, dst: int, kind: int) -> None:
        self._cells[src * self._n + dst] = kind

    def kind(self, src: int, dst: int) -> int:
        return self._cells[src * self._n + dst]

    def children(self, node: int) -> Iterator[int]:
        """Tree-arc targets of *node*, ascending."""
        base = node * self._n
        for j in range(self._n):
            if self._cells[base + j] == TREE and j != node:
                yield j

    def back_edges(self) -> list[tuple[int, int]]:
        """Every -1 entry as (tail, head), in row-major order."""
        n = self._n
        return [
            (i, j)
            for i in range(n)
            for j in range(n)
            if self._cells[i * n + j] == BACK
        ]

    def tree_only(self) -> AdjacencyMatrix:
        """The tree arcs alone as a 0/1 matrix (non-tree arcs dropped)."""
        m = AdjacencyMatrix(self._n)
        n = self._n
        for i in range(n):
            for j in self.children(i):
                m.set_arc(i, j)
        return m

    def rows(self) -> list[list[int]]:
        n = self._n
        return [list(self._cells[i * n:(i + 1) * n]) for i in range(n)]

    @property
    def size(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return (
            f"SpanningTree(root={self.root}, "
            f"back_edges={len(self.back_edges())})"
        )


def spanning_tree_with_back_edges(graph: AdjacencyMatrix) -> SpanningTree:
    """DFS *graph* from its first node with an outgoing arc.

    Only nodes reachable from that root get classified; callers pass a
    single SCC, where that is every node of the component.  A graph
    with no arcs yields an empty tree with root None.
    """
    n = graph.size
    adj = [tuple(graph.successors(i)) for i in range(n)]
    root = next((i for i in range(n) if adj[i]), None)
    tree = SpanningTree(n, root)
    if root is None:
        return tree

    visited = [False] * n
    visited[root] = True
    frames: list[tuple[int, int]] = [(root, 0)]
    while frames:
        node, nxt = frames[-1]
        succs = adj[node]
        for pos in range(nxt, len(succs)):
            succ = succs[pos]
            if not visited[succ]:
                tree.mark(node, succ, TREE)
                visited[succ] = True
                frames[-1] = (node, pos + 1)
                frames.append((succ, 0))
                break
            tree.mark(node, succ, BACK)
        else:
            frames.pop()
    return tree


def tree_path(tree: SpanningTree, start: int, end: int) -> list[int]:
    """Path from *start* down to *end* along tree arcs, both ends included.

    Returns [start] when start == end and [] when *end* is not in the
    subtree of *start*.
    """
    if start == end:
        return [start]
    path = [start]
    iters: list[Iterator[int]] = [tree.children(start)]
    while iters:
        child = next(iters[-1], None)
        if child is None:
            iters.pop()
            path.pop()
            continue
        path.append(child)
        if child == end:
            return path
        iters.append(tree.children(child))
    return []


def component_cycles(graph: AdjacencyMatrix, component: set[int]) -> list[list[int]]:
    """Basis cycles of one SCC, in back-edge discovery order."""
    if len(component) <= 1:
        return []
    tree = spanning_tree_with_back_edges(graph.subgraph(component))
    cycles: list[list[int]] = []
    for tail, head in tree.back_edges():
        path = tree_path(tree, head, tail)
        if not path:
            log.debug(
                "Skipping non-tree arc %d -> %d: %d is not an ancestor of %d",
                tail, head, head, tail,
            )
            continue
        cycles.append(path)
    return cycles


def cycle_basis(
    graph: AdjacencyMatrix | Sequence[Sequence[int]],
) -> list[list[int]]:
    """One simple cycle per back edge of each nontrivial SCC.

    Components are processed in the order strongly_connected_components
    returns them; singleton components contribute nothing.
    """
    m = as_matrix(graph)
    cycles: list[list[int]] = []
    for component in strongly_connected_components(m):
        cycles.extend(component_cycles(m, component))
    return cycles


minimum_cycles = cycle_basis
