"""Strongly connected components via Tarjan's algorithm.

Each node gets two numbers during a single DFS:
  index    -- the order in which the DFS discovered the node
  lowlink  -- the smallest index reachable from the node through its
              DFS subtree plus at most one arc back to a node that is
              still on the component stack

Nodes are pushed on the component stack as they are discovered.  When
a node finishes with lowlink == index it is the root of a component:
everything above it on the stack (and the node itself) is popped off
as one SCC.

The DFS is driven by an explicit stack of (node, next-neighbor) frames
rather than Python recursion, so a long chain of nodes cannot hit the
interpreter's recursion limit.  Visiting order is still exactly that of
the recursive formulation: roots in ascending id order, neighbors in
ascending id order.
"""
from __future__ import annotations

from typing import Sequence

from dircycles.graph.matrix import AdjacencyMatrix, as_matrix

UNDEFINED = -1


def strongly_connected_components(
    graph: AdjacencyMatrix | Sequence[Sequence[int]],
) -> list[set[int]]:
    """Partition the nodes of *graph* into strongly connected components.

    Components come out in completion order (a component is emitted
    before any component that can reach it).  Every node appears in
    exactly one component; isolated nodes form singleton components.
    """
    m = as_matrix(graph)
    n = m.size
    adj = [tuple(m.successors(i)) for i in range(n)]
    index = [UNDEFINED] * n
    lowlink = [UNDEFINED] * n
    stack: list[int] = []
    on_stack: set[int] = set()
    components: list[set[int]] = []
    counter = 0

    for root in range(n):
        if index[root] != UNDEFINED:
            continue

        index[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        frames: list[tuple[int, int]] = [(root, 0)]

        while frames:
            node, nxt = frames[-1]
            recursed = False
            succs = adj[node]
            for pos in range(nxt, len(succs)):
                succ = succs[pos]
                if index[succ] == UNDEFINED:
                    # descend; resume this node after succ on the way back
                    frames[-1] = (node, pos + 1)
                    index[succ] = lowlink[succ] = counter
                    counter += 1
                    stack.append(succ)
                    on_stack.add(succ)
                    frames.append((succ, 0))
                    recursed = True
                    break
                if succ in on_stack:
                    lowlink[node] = min(lowlink[node], index[succ])
            if recursed:
                continue

            frames.pop()
            if lowlink[node] == index[node]:
                component: set[int] = set()
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    component.add(member)
                    if member == node:
                        break
                components.append(component)
            if frames:
                parent, _ = frames[-1]
                lowlink[parent] = min(lowlink[parent], lowlink[node])

    return components
