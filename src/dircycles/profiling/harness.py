"""Profiling harness for cycle enumeration.

Runs a CycleEnumerator to exhaustion (or to a step/length bound) and
reports counters and wall-clock time, optionally under cProfile.  The
frontier of the breadth-first search is what blows up on dense graphs,
so the report includes the step count next to the number of cycles:
steps per cycle is the number to watch when a graph gets slow.
"""
from __future__ import annotations

import cProfile
import io
import pstats
import random
import time
from dataclasses import dataclass

from dircycles.graph.enumerator import CycleEnumerator, EnumeratorState
from dircycles.graph.matrix import AdjacencyMatrix


@dataclass(slots=True)
class EnumerationResult:
    """Counters and timing from one enumeration run."""
    nodes: int
    arcs: int
    cycles_found: int
    steps: int
    longest_cycle: int
    dedup_set_size: int
    exhausted: bool           # False if a bound stopped the run early
    total_time_ms: float
    cycles_per_sec: float
    cprofile_stats: str | None = None


def random_matrix(n: int, density: float, seed: int = 42) -> AdjacencyMatrix:
    """Reproducible random digraph: each off-diagonal arc with prob *density*."""
    rng = random.Random(seed)
    m = AdjacencyMatrix(n)
    for i in range(n):
        for j in range(n):
            if i != j and rng.random() < density:
                m.set_arc(i, j)
    return m


def run_enumeration(
    matrix: AdjacencyMatrix,
    *,
    min_length: int = 2,
    dedup_bidirected: bool = True,
    max_length: int | None = None,
    max_steps: int | None = None,
    profile: bool = False,
) -> EnumerationResult:
    """Enumerate the cycles of *matrix* and return timing data.

    If profile=True, wraps the run in cProfile and includes the top
    functions by cumulative time in the result.
    """
    gen = CycleEnumerator(
        matrix, min_length=min_length, dedup_bidirected=dedup_bidirected
    )
    counts = {"cycles": 0, "longest": 0}

    def _run() -> None:
        for cycle in gen.iter_cycles(max_length=max_length, max_steps=max_steps):
            counts["cycles"] += 1
            counts["longest"] = max(counts["longest"], len(cycle))

    stats_text = None
    t0 = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(20)
        stats_text = s.getvalue()
    else:
        _run()
    elapsed_ms = (time.perf_counter() - t0) * 1000

    return EnumerationResult(
        nodes=matrix.size,
        arcs=matrix.arc_count,
        cycles_found=counts["cycles"],
        steps=gen.step_count,
        longest_cycle=counts["longest"],
        dedup_set_size=len(gen.seen_bidirected),
        exhausted=gen.state is EnumeratorState.EXHAUSTED,
        total_time_ms=elapsed_ms,
        cycles_per_sec=(
            counts["cycles"] / (elapsed_ms / 1000) if elapsed_ms > 0 else 0.0
        ),
        cprofile_stats=stats_text,
    )
