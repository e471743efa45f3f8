"""Rich rendering for tile grids and search results."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridroute.core.search import SearchResult
from gridroute.core.tiles import Coordinate, Grid, TileState

TILE_GLYPHS = {
    TileState.FREE: "0",
    TileState.BLOCKED: "#",
    TileState.CLOSED: ".",
    TileState.PATH: "P",
    TileState.START: "S",
    TileState.FINISH: "F",
}

TILE_STYLES = {
    TileState.FREE: "grey70",
    TileState.BLOCKED: "bright_magenta",
    TileState.CLOSED: "grey50",
    TileState.PATH: "bold bright_cyan",
    TileState.START: "bold bright_green",
    TileState.FINISH: "bold bright_yellow",
}


def cell_string(tile: TileState) -> str:
    return TILE_GLYPHS[tile]


def board_rows(grid: Grid) -> list[str]:
    return [" ".join(cell_string(tile) for tile in row) for row in grid]


def render_board_lines(grid: Grid) -> list[Text]:
    lines: list[Text] = []
    for row in grid:
        line = Text()
        for x, tile in enumerate(row):
            if x:
                line.append(" ")
            line.append(cell_string(tile), style=TILE_STYLES[tile])
        lines.append(line)
    return lines


def render_board(grid: Grid, *, title: str = "Board") -> RenderableType:
    if not grid:
        return Panel(Text("Empty board."), title=title)
    return Panel(Group(*render_board_lines(grid)), title=title, expand=False)


def render_result(
    result: SearchResult, *, start: Coordinate, goal: Coordinate
) -> RenderableType:
    summary = Table(title="Search Summary", show_header=False)
    summary.add_column("Field")
    summary.add_column("Value")
    summary.add_row("Status", "Path found" if result.found else "No path found")
    summary.add_row("Start", _format_coordinate(start))
    summary.add_row("Goal", _format_coordinate(goal))
    summary.add_row("Route length", str(len(result.route)))
    summary.add_row("Cost", "-" if result.cost is None else str(result.cost))
    summary.add_row("Expansions", str(result.expansions))
    return Group(render_board(result.grid), summary)


def _format_coordinate(coord: Coordinate) -> str:
    return f"({coord.row}, {coord.col})"
