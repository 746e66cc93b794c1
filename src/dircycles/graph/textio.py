"""Plain-text adjacency matrix format.

Layout (whitespace-insensitive):

    3
    0 1 0
    0 0 1
    1 0 0

The first token is the node count n, followed by n*n entries in
row-major order.  Line breaks are cosmetic; the reader only counts
tokens.  Anything after the last entry is an error, so a truncated or
padded file is caught instead of silently producing the wrong graph.
"""
from __future__ import annotations

from typing import Iterable, TextIO

from dircycles.graph.matrix import AdjacencyMatrix, InvalidGraphError


def parse_matrix(text: str) -> AdjacencyMatrix:
    """Parse the text format into a validated AdjacencyMatrix."""
    tokens = text.split()
    if not tokens:
        raise InvalidGraphError("Empty input: expected a node count")
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise InvalidGraphError(f"Non-integer token in matrix input: {exc}") from None

    n = values[0]
    if n <= 0:
        raise InvalidGraphError(f"Graph size must be positive, got {n}")
    entries = values[1:]
    if len(entries) != n * n:
        raise InvalidGraphError(
            f"Expected {n * n} matrix entries for {n} node(s), got {len(entries)}"
        )
    rows = [entries[i * n:(i + 1) * n] for i in range(n)]
    return AdjacencyMatrix.from_rows(rows)


def read_matrix(stream: TextIO) -> AdjacencyMatrix:
    return parse_matrix(stream.read())


def format_matrix(matrix: AdjacencyMatrix) -> str:
    """Render one row per line, each entry right-aligned in width 2."""
    return "\n".join(
        " ".join(f"{value:>2}" for value in row) for row in matrix.rows()
    )


def dump_matrix(matrix: AdjacencyMatrix) -> str:
    """Serialize in the format parse_matrix() reads back."""
    lines = [str(matrix.size)]
    lines.extend(" ".join(str(v) for v in row) for row in matrix.rows())
    return "\n".join(lines) + "\n"


def format_cycle(cycle: Iterable[int]) -> str:
    return " ".join(str(node) for node in cycle)
