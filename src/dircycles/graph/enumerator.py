"""Resumable enumeration of all simple cycles, shortest first.

The search grows simple paths breadth-first.  The frontier starts with
one single-node path per node.  Each step pops the oldest path P:

  *  if P has at least two nodes and the graph has the arc
     P[-1] -> P[0], then P is a cycle (the closing arc stays implicit);
  *  P is extended by every successor i of P[-1] that is larger than
     P[0] and not already on P, and the extensions go to the back of
     the frontier.

Only extending with nodes larger than the first one means each cycle
is grown from exactly one of its rotations, the one starting at its
smallest node, so no rotation is reported twice.  Because the frontier
is FIFO and every extension adds exactly one node, paths leave the
frontier in nondecreasing length, and so do the cycles.

A bidirected cycle still shows up twice, once per direction: [0, 1, 2]
and [0, 2, 1] are both grown from 0.  With dedup_bidirected on, each
bidirected cycle longer than two nodes is reduced to its canonical
form and only the first orientation found is reported.

Cycles are pulled one at a time with next_cycle(), so a caller can stop
whenever it has seen enough.  The frontier can grow exponentially on
dense graphs; min_length, iter_cycles(max_length=..., max_steps=...)
or simply dropping the enumerator are the ways to bound the work.

An instance is not thread-safe.  Wrap it in a lock if several threads
pull from the same enumerator.
"""
from __future__ import annotations

import enum
import logging
from collections import deque
from typing import Iterator, Sequence

from dircycles.graph.canonical import (
    canonical_bidirected,
    canonical_rotation,
    is_bidirected,
)
from dircycles.graph.matrix import AdjacencyMatrix, as_matrix

log = logging.getLogger(__name__)


class EnumeratorState(enum.Enum):
    UNBOUND = "unbound"            # no graph; bind() before use
    INITIALIZED = "initialized"    # bound, no step taken yet
    EXPANDING = "expanding"        # frontier still has paths
    DRAINING = "draining"          # frontier empty, cycles still buffered
    EXHAUSTED = "exhausted"        # nothing left to report


class CycleEnumerator:
    """Pull-based simple-cycle enumerator over a private graph copy.

    Usage:
        gen = CycleEnumerator(matrix, min_length=2, dedup_bidirected=True)
        cycle = gen.next_cycle()
        while cycle:
            print(cycle)
            cycle = gen.next_cycle()
    """

    __slots__ = (
        "_graph", "_succ", "_frontier", "_ready", "_seen",
        "_steps", "_min_length", "_dedup",
    )

    def __init__(
        self,
        graph: AdjacencyMatrix | Sequence[Sequence[int]] | None = None,
        *,
        min_length: int = 1,
        dedup_bidirected: bool = False,
    ) -> None:
        self._graph: AdjacencyMatrix | None = None
        self._succ: list[tuple[int, ...]] = []
        self._frontier: deque[tuple[int, ...]] = deque()
        self._ready: deque[tuple[int, ...]] = deque()
        self._seen: set[tuple[int, ...]] = set()
        self._steps = 0
        self._min_length = 1
        self._dedup = bool(dedup_bidirected)
        self.min_length = min_length
        if graph is not None:
            self.bind(graph)

    # ---- lifecycle -------------------------------------------------------

    def bind(self, graph: AdjacencyMatrix | Sequence[Sequence[int]]) -> None:
        """Copy *graph* and restart the search on it.

        Frontier, buffered cycles, the dedup set and the step counter
        are all cleared first; options (min_length, dedup) are kept.
        """
        m = as_matrix(graph).copy()
        self.reset()
        self._graph = m
        self._succ = [tuple(m.successors(i)) for i in range(m.size)]
        self._frontier.extend((i,) for i in range(m.size))
        log.debug("Bound cycle enumerator to %r", m)

    def reset(self) -> None:
        """Drop the graph and every piece of search state."""
        self._graph = None
        self._succ = []
        self._frontier.clear()
        self._ready.clear()
        self._seen.clear()
        self._steps = 0

    # ---- the search ------------------------------------------------------

    def advance_step(self) -> bool:
        """Process one frontier path.  Returns False if the frontier is empty.

        The step counter goes up on every call, including the ones that
        find nothing to do.
        """
        graph = self._require_graph()
        self._steps += 1
        if not self._frontier:
            return False

        path = self._frontier.popleft()
        first = path[0]
        last = path[-1]

        if len(path) > 1 and graph.has_arc(last, first):
            self._found(graph, path)

        on_path = set(path)
        for succ in self._succ[last]:
            if succ > first and succ not in on_path:
                self._frontier.append(path + (succ,))
        return True

    def _found(self, graph: AdjacencyMatrix, cycle: tuple[int, ...]) -> None:
        if len(cycle) < self._min_length:
            return
        if self._dedup and len(cycle) > 2 and is_bidirected(graph, cycle):
            key = tuple(canonical_bidirected(graph, cycle))
            if key in self._seen:
                return
            self._seen.add(key)
        self._ready.append(cycle)

    def next_cycle(self) -> list[int]:
        """Return the next cycle, or [] once every cycle has been reported.

        Buffered cycles are handed out first.  Otherwise steps are run
        until one turns up or the frontier runs dry.  After exhaustion
        this returns [] immediately without taking more steps.
        """
        self._require_graph()
        if self._ready:
            return list(self._ready.popleft())
        while not self._ready and self._frontier:
            self.advance_step()
        if not self._ready:
            log.debug("Cycle enumeration exhausted after %d steps", self._steps)
            return []
        return list(self._ready.popleft())

    def iter_cycles(
        self,
        max_length: int | None = None,
        max_steps: int | None = None,
    ) -> Iterator[list[int]]:
        """Yield cycles until exhaustion or until a bound is hit.

        *max_length* stops the search once the oldest frontier path is
        longer than it: paths leave the frontier in nondecreasing length,
        so no cycle of length <= max_length can follow.  A buffered cycle
        over the bound is left in place for the next call.  *max_steps*
        caps the total value of step_count; the search stops before
        taking a step beyond it.
        """
        self._require_graph()
        while True:
            while not self._ready and self._frontier:
                if max_length is not None and len(self._frontier[0]) > max_length:
                    log.debug("No cycle of length <= %d left", max_length)
                    return
                if max_steps is not None and self._steps >= max_steps:
                    log.debug("Step budget of %d reached", max_steps)
                    return
                self.advance_step()
            if not self._ready:
                log.debug("Cycle enumeration exhausted after %d steps", self._steps)
                return
            if max_length is not None and len(self._ready[0]) > max_length:
                return
            yield list(self._ready.popleft())

    def __iter__(self) -> Iterator[list[int]]:
        return self.iter_cycles()

    # ---- canonical forms -------------------------------------------------

    def is_bidirected(self, cycle: Sequence[int]) -> bool:
        return is_bidirected(self._require_graph(), cycle)

    def canonical_bidirected(self, cycle: Sequence[int]) -> list[int]:
        return canonical_bidirected(self._require_graph(), cycle)

    @staticmethod
    def canonical_rotation(cycle: Sequence[int]) -> list[int]:
        return canonical_rotation(cycle)

    # ---- options ---------------------------------------------------------

    @property
    def min_length(self) -> int:
        return self._min_length

    @min_length.setter
    def min_length(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"min_length must be at least 1, got {value}")
        self._min_length = value

    @property
    def dedup_bidirected(self) -> bool:
        return self._dedup

    @dedup_bidirected.setter
    def dedup_bidirected(self, value: bool) -> None:
        self._dedup = bool(value)

    # ---- introspection ---------------------------------------------------

    @property
    def graph(self) -> AdjacencyMatrix:
        """A copy of the bound graph."""
        return self._require_graph().copy()

    @property
    def step_count(self) -> int:
        return self._steps

    @property
    def frontier_size(self) -> int:
        return len(self._frontier)

    @property
    def pending(self) -> int:
        """Cycles found but not yet returned."""
        return len(self._ready)

    @property
    def seen_bidirected(self) -> frozenset[tuple[int, ...]]:
        """Canonical forms of the bidirected cycles reported so far."""
        return frozenset(self._seen)

    @property
    def state(self) -> EnumeratorState:
        if self._graph is None:
            return EnumeratorState.UNBOUND
        if self._frontier:
            if self._steps == 0:
                return EnumeratorState.INITIALIZED
            return EnumeratorState.EXPANDING
        if self._ready:
            return EnumeratorState.DRAINING
        return EnumeratorState.EXHAUSTED

    def _require_graph(self) -> AdjacencyMatrix:
        if self._graph is None:
            raise RuntimeError("Call bind() before running the enumerator")
        return self._graph

    def __repr__(self) -> str:
        return (
            f"CycleEnumerator(state={self.state.value}, steps={self._steps}, "
            f"frontier={len(self._frontier)}, pending={len(self._ready)})"
        )
