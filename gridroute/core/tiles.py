"""Tile states, coordinates and grid helpers shared by the planner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gridroute.core.errors import InvalidGridError


class TileState(str, Enum):
    FREE = "free"
    BLOCKED = "blocked"
    CLOSED = "closed"
    PATH = "path"
    START = "start"
    FINISH = "finish"


Grid = list[list[TileState]]


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    def shifted(self, d_row: int, d_col: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.col + d_col)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


def in_bounds(grid: Grid, coord: Coordinate) -> bool:
    if coord.row < 0 or coord.row >= len(grid):
        return False
    return 0 <= coord.col < len(grid[coord.row])


def tile_at(grid: Grid, coord: Coordinate) -> TileState:
    return grid[coord.row][coord.col]


def set_tile(grid: Grid, coord: Coordinate, state: TileState) -> None:
    grid[coord.row][coord.col] = state


def validate_grid(grid: Grid) -> None:
    """Reject grids that are ragged or have zero-width rows.

    An empty grid (no rows) is accepted here; the search driver treats it as a
    grid with no route rather than a structural error.
    """
    if not grid:
        return
    width = len(grid[0])
    if width == 0:
        raise InvalidGridError("Grid rows must contain at least one tile.")
    for index, row in enumerate(grid):
        if len(row) != width:
            raise InvalidGridError(
                f"Grid row {index} has {len(row)} tiles, expected {width}."
            )


def grid_size(grid: Grid) -> tuple[int, int]:
    if not grid:
        return (0, 0)
    return (len(grid), len(grid[0]))
