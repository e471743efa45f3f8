"""Module entry point for `python -m gridroute`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from gridroute.app import (
    build_summary,
    configure_logging,
    resolve_board_path,
    resolve_log_level,
    run_board_search,
)
from gridroute.core.errors import GridRouteError
from gridroute.core.search import PathMarking
from gridroute.core.tiles import Coordinate
from gridroute.render.board_view import render_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find a route across a board with A*.")
    parser.add_argument(
        "board",
        type=Path,
        nargs="?",
        default=None,
        help="Board file to search (defaults to $GRIDROUTE_BOARD or boards/1.board).",
    )
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        default=(0, 0),
        help="Start cell.",
    )
    parser.add_argument(
        "--goal",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        required=True,
        help="Goal cell.",
    )
    parser.add_argument(
        "--marking",
        choices=[marking.value for marking in PathMarking],
        default=PathMarking.ROUTE.value,
        help="Mark only the route found, or every expanded cell, as path.",
    )
    parser.add_argument(
        "--no-endpoints",
        action="store_true",
        help="Do not stamp start/finish markers on success.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the search summary as JSON instead of the board view.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to $GRIDROUTE_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()

    try:
        configure_logging(resolve_log_level(args.log_level))
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    board_path = resolve_board_path(args.board)
    start = Coordinate(*args.start)
    goal = Coordinate(*args.goal)

    try:
        result = run_board_search(
            board_path,
            start,
            goal,
            marking=PathMarking(args.marking),
            mark_endpoints=not args.no_endpoints,
        )
    except (OSError, GridRouteError) as exc:
        raise SystemExit(str(exc)) from exc

    summary = build_summary(result, start, goal)
    if args.json:
        console.print_json(summary.model_dump_json())
    else:
        console.print(render_result(result, start=start, goal=goal))

    return 0 if result.found else 1


if __name__ == "__main__":
    raise SystemExit(main())
