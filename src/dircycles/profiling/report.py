"""Report generation for enumeration profiling results."""
from __future__ import annotations

from dircycles.profiling.harness import EnumerationResult


def format_report(result: EnumerationResult, label: str = "Enumeration") -> str:
    """Format an EnumerationResult as a readable report string."""
    steps_per_cycle = (
        f"{result.steps / result.cycles_found:,.1f}"
        if result.cycles_found else "n/a"
    )
    lines = [
        f"=== {label} ===",
        f"Graph:             {result.nodes} nodes, {result.arcs:,} arcs",
        f"Cycles found:      {result.cycles_found:,}",
        f"Longest cycle:     {result.longest_cycle}",
        f"Search steps:      {result.steps:,}",
        f"Steps per cycle:   {steps_per_cycle}",
        f"Bidirected seen:   {result.dedup_set_size:,}",
        f"Exhausted:         {'yes' if result.exhausted else 'no (bound hit)'}",
        f"Total time:        {result.total_time_ms:.1f} ms",
        f"Throughput:        {result.cycles_per_sec:,.0f} cycles/sec",
    ]
    return "\n".join(lines)
