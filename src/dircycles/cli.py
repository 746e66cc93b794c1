"""dircycles CLI entry point.

Usage: dircycles [-i FILE] [command] < matrix.txt

The matrix is read in the plain-text format of dircycles.graph.textio:
the node count followed by the n*n 0/1 entries.
"""
import argparse
import logging
import sys

from dircycles.graph.matrix import AdjacencyMatrix

log = logging.getLogger(__name__)


def _add_scc_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        "scc",
        help="Print the strongly connected components, one per line.",
    )


def _add_basis_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        "basis",
        help="Print one cycle per back edge of each component's DFS tree.",
    )


def _add_cycles_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "cycles",
        help="List every simple directed cycle, shortest first.",
    )
    p.add_argument(
        "max_length", type=int, nargs="?", default=None,
        help="Stop after the last cycle of this length (default: no limit)",
    )
    p.add_argument(
        "--min-length", type=int, default=2,
        help="Skip cycles shorter than this (default: 2)",
    )
    p.add_argument(
        "--no-dedup", action="store_true",
        help="Report both orientations of bidirected cycles.",
    )
    p.add_argument(
        "--max-steps", type=int, default=None,
        help="Give up after this many search steps (default: no limit)",
    )


def _add_path_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "path",
        help="Find a path between two nodes.",
    )
    p.add_argument("start", type=int, help="Start node id")
    p.add_argument("end", type=int, help="End node id")
    p.add_argument(
        "--undirected", action="store_true",
        help="Only follow arcs that are reciprocated.",
    )
    p.add_argument(
        "--all", action="store_true",
        help="Print every simple path instead of just one.",
    )


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "profile",
        help="Profile cycle enumeration on a random graph (no input read).",
    )
    p.add_argument(
        "--nodes", type=int, default=10,
        help="Number of nodes (default: 10)",
    )
    p.add_argument(
        "--density", type=float, default=0.3,
        help="Probability of each off-diagonal arc (default: 0.3)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--max-steps", type=int, default=None,
        help="Stop the search after this many steps (default: no limit)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _read_input(args: argparse.Namespace) -> AdjacencyMatrix:
    from dircycles.graph.textio import read_matrix

    if args.input is None or args.input == "-":
        return read_matrix(sys.stdin)
    with open(args.input, encoding="utf-8") as fh:
        return read_matrix(fh)


def _run_scc(args: argparse.Namespace) -> None:
    from dircycles.graph.scc import strongly_connected_components
    from dircycles.graph.textio import format_cycle

    for component in strongly_connected_components(_read_input(args)):
        print(format_cycle(sorted(component)))


def _run_basis(args: argparse.Namespace) -> None:
    from dircycles.graph.basis import cycle_basis
    from dircycles.graph.textio import format_cycle, format_matrix

    matrix = _read_input(args)
    print(format_matrix(matrix))
    print("Basis cycles:")
    for cycle in cycle_basis(matrix):
        print(f"    {format_cycle(cycle)}")


def _run_cycles(args: argparse.Namespace) -> None:
    from dircycles.graph.enumerator import CycleEnumerator
    from dircycles.graph.textio import format_cycle, format_matrix

    matrix = _read_input(args)
    gen = CycleEnumerator(
        matrix,
        min_length=args.min_length,
        dedup_bidirected=not args.no_dedup,
    )
    print(format_matrix(matrix))
    for cycle in gen.iter_cycles(
        max_length=args.max_length, max_steps=args.max_steps
    ):
        print(format_cycle(cycle))
    log.info(
        "Search took %d steps, %d bidirected cycles folded",
        gen.step_count, len(gen.seen_bidirected),
    )


def _run_path(args: argparse.Namespace) -> None:
    from dircycles.graph.paths import all_paths, find_path
    from dircycles.graph.textio import format_cycle

    matrix = _read_input(args)
    directed = not args.undirected
    if args.all:
        for path in all_paths(matrix, args.start, args.end, directed=directed):
            print(format_cycle(path))
    else:
        print(format_cycle(find_path(matrix, args.start, args.end, directed=directed)))


def _run_profile(args: argparse.Namespace) -> None:
    from dircycles.profiling.harness import random_matrix, run_enumeration
    from dircycles.profiling.report import format_report

    matrix = random_matrix(args.nodes, args.density, seed=args.seed)
    result = run_enumeration(
        matrix, max_steps=args.max_steps, profile=args.cprofile
    )
    print(format_report(result))
    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)


_COMMANDS = {
    "scc": _run_scc,
    "basis": _run_basis,
    "cycles": _run_cycles,
    "path": _run_path,
    "profile": _run_profile,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dircycles",
        description="Strongly connected components and simple cycles "
                    "of a directed graph given as an adjacency matrix.",
    )
    parser.add_argument(
        "-i", "--input", default=None,
        help="Matrix file to read (default: stdin)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log search progress to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_scc_parser(subparsers)
    _add_basis_parser(subparsers)
    _add_cycles_parser(subparsers)
    _add_path_parser(subparsers)
    _add_profile_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        _COMMANDS[args.command](args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
