"""Load tile grids from plain-text board files."""

from __future__ import annotations

from pathlib import Path

from gridroute.core.errors import BoardFormatError, InvalidGridError
from gridroute.core.tiles import Grid, TileState


def parse_line(line: str) -> list[TileState]:
    """Parse one board row such as ``0,1,0,0,0,0,``.

    ``0`` is a free tile and any other integer is blocked. A row written
    without commas is read one character per tile.
    """
    text = line.strip()
    if "," in text:
        tokens = [token.strip() for token in text.split(",")]
    else:
        tokens = [char for char in text if not char.isspace()]
    row: list[TileState] = []
    for token in tokens:
        if not token:
            continue
        try:
            value = int(token)
        except ValueError as exc:
            raise BoardFormatError(f"Invalid board cell {token!r}.") from exc
        row.append(TileState.FREE if value == 0 else TileState.BLOCKED)
    return row


def parse_board(text: str) -> Grid:
    grid: Grid = []
    width: int | None = None
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            row = parse_line(line)
        except BoardFormatError as exc:
            raise BoardFormatError(f"Line {line_number}: {exc}") from exc
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise InvalidGridError(
                f"Line {line_number} has {len(row)} cells, expected {width}."
            )
        grid.append(row)
    return grid


def load_board(path: Path) -> Grid:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing board file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise BoardFormatError(f"Board file {path} is not UTF-8 text.") from exc
    return parse_board(text)
