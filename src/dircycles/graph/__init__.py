"""Cycle analysis on dense directed adjacency matrices."""

from dircycles.graph.basis import (
    SpanningTree,
    component_cycles,
    cycle_basis,
    minimum_cycles,
    spanning_tree_with_back_edges,
    tree_path,
)
from dircycles.graph.canonical import (
    canonical_bidirected,
    canonical_rotation,
    is_bidirected,
    reverse_cycle,
)
from dircycles.graph.enumerator import CycleEnumerator, EnumeratorState
from dircycles.graph.matrix import (
    AdjacencyMatrix,
    GraphError,
    InvalidGraphError,
    InvalidNodeError,
)
from dircycles.graph.paths import all_paths, find_path
from dircycles.graph.scc import strongly_connected_components
from dircycles.graph.textio import (
    dump_matrix,
    format_cycle,
    format_matrix,
    parse_matrix,
    read_matrix,
)

__all__ = [
    "AdjacencyMatrix",
    "CycleEnumerator",
    "EnumeratorState",
    "GraphError",
    "InvalidGraphError",
    "InvalidNodeError",
    "SpanningTree",
    "all_paths",
    "canonical_bidirected",
    "canonical_rotation",
    "component_cycles",
    "cycle_basis",
    "dump_matrix",
    "find_path",
    "format_cycle",
    "format_matrix",
    "is_bidirected",
    "minimum_cycles",
    "parse_matrix",
    "read_matrix",
    "reverse_cycle",
    "spanning_tree_with_back_edges",
    "strongly_connected_components",
    "tree_path",
]
