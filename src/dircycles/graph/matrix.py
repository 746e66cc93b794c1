"""Dense adjacency matrix over integer node ids 0..n-1.

The matrix is stored as one contiguous bytearray addressed by
``row * n + col``.  A 1 at (i, j) means there is an arc i -> j.  The
diagonal is stored like any other cell, but every algorithm in this
package ignores self-loops, so callers never need to clear it.

Validation happens once, at construction.  After that the algorithms
can index freely: a matrix that exists is square, non-empty and 0/1.
Each AdjacencyMatrix owns its buffer; copy() and subgraph() hand back
new buffers, never views.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Sequence


class GraphError(ValueError):
    """Base class for invalid graph input."""


class InvalidGraphError(GraphError):
    """Raised when a matrix is empty, non-square or has non-0/1 entries."""


class InvalidNodeError(GraphError, IndexError):
    """Raised when a node id falls outside 0..n-1."""

    def __init__(self, node: object, size: int) -> None:
        self.node = node
        self.size = size
        super().__init__(
            f"Node {node!r} out of range for graph with {size} node(s)"
        )


class AdjacencyMatrix:
    """Owned, bounds-checked n x n 0/1 matrix.

    Usage:
        m = AdjacencyMatrix.from_edges(3, [(0, 1), (1, 2), (2, 0)])
        m.has_arc(2, 0)      # True
        list(m.successors(0))  # [1]
    """

    __slots__ = ("_n", "_cells")

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidGraphError(f"Graph size must be an int, got {size!r}")
        if size <= 0:
            raise InvalidGraphError(f"Graph size must be positive, got {size}")
        self._n = size
        self._cells = bytearray(size * size)

    # ---- construction ----------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> AdjacencyMatrix:
        """Build a matrix from a nested sequence of 0/1 values.

        Raises InvalidGraphError if *rows* is empty, not square, or holds
        anything other than 0 and 1 (bools are accepted).
        """
        n = len(rows)
        if n == 0:
            raise InvalidGraphError("Graph must have at least one node")
        m = cls(n)
        for i, row in enumerate(rows):
            try:
                width = len(row)
            except TypeError:
                raise InvalidGraphError(
                    f"Row {i} is {row!r}, not a sequence of entries"
                ) from None
            if width != n:
                raise InvalidGraphError(
                    f"Matrix is not square: row {i} has {width} "
                    f"entries, expected {n}"
                )
            base = i * n
            for j, value in enumerate(row):
                if value not in (0, 1):
                    raise InvalidGraphError(
                        f"Entry ({i}, {j}) is {value!r}; entries must be 0 or 1"
                    )
                m._cells[base + j] = int(value)
        return m

    @classmethod
    def from_edges(
        cls, size: int, edges: Iterable[tuple[int, int]]
    ) -> AdjacencyMatrix:
        """Build a *size*-node matrix with an arc for each (src, dst) pair."""
        m = cls(size)
        for src, dst in edges:
            m.set_arc(src, dst)
        return m

    # ---- mutation --------------------------------------------------------

    def set_arc(self, src: int, dst: int, present: bool = True) -> None:
        self.check_node(src)
        self.check_node(dst)
        self._cells[src * self._n + dst] = 1 if present else 0

    # ---- queries ---------------------------------------------------------

    def has_arc(self, src: int, dst: int) -> bool:
        self.check_node(src)
        self.check_node(dst)
        return self._cells[src * self._n + dst] == 1

    def successors(self, node: int) -> Iterator[int]:
        """Targets of arcs leaving *node*, ascending, self-loop excluded."""
        self.check_node(node)
        n = self._n
        base = node * n
        cells = self._cells
        for j in range(n):
            if cells[base + j] and j != node:
                yield j

    def rows(self) -> list[list[int]]:
        n = self._n
        return [list(self._cells[i * n:(i + 1) * n]) for i in range(n)]

    def copy(self) -> AdjacencyMatrix:
        m = AdjacencyMatrix(self._n)
        m._cells[:] = self._cells
        return m

    def subgraph(self, nodes: Iterable[int]) -> AdjacencyMatrix:
        """Induced subgraph on *nodes*, same size, every other cell zeroed.

        Node ids are preserved, so results computed on the subgraph can
        be read directly against the original graph.
        """
        n = self._n
        keep = set()
        for node in nodes:
            self.check_node(node)
            keep.add(node)
        m = AdjacencyMatrix(n)
        src = self._cells
        dst = m._cells
        for i in keep:
            base = i * n
            for j in keep:
                dst[base + j] = src[base + j]
        return m

    @property
    def size(self) -> int:
        return self._n

    @property
    def arc_count(self) -> int:
        """Number of arcs, self-loops excluded."""
        n = self._n
        diagonal = sum(self._cells[i * n + i] for i in range(n))
        return sum(self._cells) - diagonal

    # ---- helpers ---------------------------------------------------------

    def check_node(self, node: int) -> None:
        """Raise InvalidNodeError unless *node* is an int in 0..n-1."""
        if isinstance(node, bool) or not isinstance(node, int):
            raise InvalidNodeError(node, self._n)
        if not 0 <= node < self._n:
            raise InvalidNodeError(node, self._n)

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self._n

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyMatrix):
            return NotImplemented
        return self._n == other._n and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AdjacencyMatrix(nodes={self._n}, arcs={self.arc_count})"


def as_matrix(graph: AdjacencyMatrix | Sequence[Sequence[int]]) -> AdjacencyMatrix:
    """Accept either an AdjacencyMatrix or nested rows; validate the latter."""
    if isinstance(graph, AdjacencyMatrix):
        return graph
    return AdjacencyMatrix.from_rows(graph)
