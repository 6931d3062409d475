"""
Command-line entry point.

    salesman --graph-file samples/cities.txt --algorithm exact
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from salesman.core.errors import TourError
from salesman.core.loader import load_graph
from salesman.engine.tour_engine import TourEngine
from salesman.solver.cancel import CancelToken
from salesman.solver.registry import DEFAULT_ALGORITHM, create_solver, list_algorithms

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="salesman",
        description="Solve the traveling salesman problem with an algorithm of your choosing.",
    )
    parser.add_argument(
        "-g",
        "--graph-file",
        required=True,
        metavar="PATH",
        help="file with the input graph",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        default=DEFAULT_ALGORITHM,
        help=(
            "which algorithm to run: "
            + ", ".join(list_algorithms())
            + " (or 1 / 2)"
        ),
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="abort the solve after this many seconds",
    )
    parser.add_argument(
        "-c",
        "--compare",
        action="store_true",
        help="run every algorithm and report each result",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser


def _print_result(result: dict) -> None:
    print(f"Path: {result['formatted_path']}")
    print(f"Cost of this path is: {result['cost']}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    try:
        solver = create_solver(args.algorithm)
    except KeyError as exc:
        logger.error("Please input a valid algorithm.")
        print(exc.args[0], file=sys.stderr)
        return 2

    cancel = CancelToken(args.timeout) if args.timeout is not None else None
    engine = TourEngine(solver)

    try:
        graph = load_graph(args.graph_file)
        logger.info("Graph size: %d", len(graph))

        if args.compare:
            comparison = engine.compare(graph, cancel=cancel)
            for name, entry in comparison["results"].items():
                print(f"[{name}]")
                if "error" in entry:
                    print(entry["error"])
                else:
                    _print_result(entry)
            if comparison["best"] is None:
                return 1
            return 0

        _print_result(engine.solve(graph, cancel))
    except TourError as exc:
        print(f"{type(exc).__name__}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
