"""Profiling harness for the cycle enumerator."""

from dircycles.profiling.harness import (
    EnumerationResult,
    random_matrix,
    run_enumeration,
)
from dircycles.profiling.report import format_report

__all__ = [
    "EnumerationResult",
    "format_report",
    "random_matrix",
    "run_enumeration",
]
