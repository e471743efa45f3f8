"""A* route planning over tile grids."""

from gridroute.core.board_loader import load_board, parse_board, parse_line
from gridroute.core.contracts import CoordinateModel, SearchSummary, summarize
from gridroute.core.errors import (
    BoardFormatError,
    GridRouteError,
    InvalidEndpointError,
    InvalidGridError,
)
from gridroute.core.search import (
    Node,
    OpenList,
    PathMarking,
    SearchResult,
    SearchState,
    admit,
    expand,
    heuristic,
    is_open,
    search,
    select_best,
)
from gridroute.core.tiles import Coordinate, Grid, TileState

__all__ = [
    "BoardFormatError",
    "Coordinate",
    "CoordinateModel",
    "Grid",
    "GridRouteError",
    "InvalidEndpointError",
    "InvalidGridError",
    "Node",
    "OpenList",
    "PathMarking",
    "SearchResult",
    "SearchState",
    "SearchSummary",
    "TileState",
    "admit",
    "expand",
    "heuristic",
    "is_open",
    "load_board",
    "parse_board",
    "parse_line",
    "search",
    "select_best",
    "summarize",
]
