"""Application entry for loading a board and running a search."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from gridroute.core.board_loader import load_board
from gridroute.core.contracts import SearchSummary, summarize
from gridroute.core.search import PathMarking, SearchResult, search
from gridroute.core.tiles import Coordinate, grid_size
from gridroute.render.board_view import board_rows

DEFAULT_BOARD = Path("boards/1.board")
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def resolve_board_path(value: Path | None) -> Path:
    if value is not None:
        return value
    env_value = os.getenv("GRIDROUTE_BOARD")
    return Path(env_value) if env_value else DEFAULT_BOARD


def resolve_log_level(value: str | None) -> int:
    name = (value or os.getenv("GRIDROUTE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}.")
    return level


def configure_logging(level: int, *, console: Console | None = None) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True))],
        force=True,
    )


def run_board_search(
    board_path: Path,
    start: Coordinate,
    goal: Coordinate,
    *,
    marking: PathMarking = PathMarking.ROUTE,
    mark_endpoints: bool = True,
) -> SearchResult:
    grid = load_board(board_path)
    rows, cols = grid_size(grid)
    logger.debug("Loaded board %s (%dx%d)", board_path, rows, cols)
    return search(grid, start, goal, marking=marking, mark_endpoints=mark_endpoints)


def build_summary(
    result: SearchResult, start: Coordinate, goal: Coordinate
) -> SearchSummary:
    return summarize(result, start, goal, board=board_rows(result.grid))
