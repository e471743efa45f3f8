"""Grid-based pathfinding (A*) over a mutable tile grid."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from enum import Enum

from gridroute.core.errors import InvalidEndpointError
from gridroute.core.tiles import (
    Coordinate,
    Grid,
    TileState,
    in_bounds,
    set_tile,
    tile_at,
    validate_grid,
)

logger = logging.getLogger(__name__)

# up, left, down, right
DELTAS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


class SearchState(str, Enum):
    """Driver states. Only ``FOUND`` and ``EXHAUSTED`` end up on a result."""

    SEEDED = "seeded"
    EXPANDING = "expanding"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class PathMarking(str, Enum):
    ROUTE = "route"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class Node:
    coordinate: Coordinate
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SearchResult:
    grid: Grid
    state: SearchState
    route: list[Coordinate] = field(default_factory=list)
    expansions: int = 0
    cost: int | None = None

    @property
    def found(self) -> bool:
        return self.state == SearchState.FOUND


class OpenList:
    """Frontier ordered by f, first-in-first-out among equal f."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Node]] = []
        self._sequence = 0

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.f, self._sequence, node))
        self._sequence += 1

    def pop(self) -> Node:
        _, _, node = heapq.heappop(self._heap)
        return node

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def heuristic(a: Coordinate, b: Coordinate) -> int:
    return abs(b.row - a.row) + abs(b.col - a.col)


def is_open(coord: Coordinate, grid: Grid) -> bool:
    if not in_bounds(grid, coord):
        return False
    return tile_at(grid, coord) == TileState.FREE


def expand(current: Node, grid: Grid, goal: Coordinate) -> list[Node]:
    neighbors: list[Node] = []
    for d_row, d_col in DELTAS:
        candidate = current.coordinate.shifted(d_row, d_col)
        if not is_open(candidate, grid):
            continue
        neighbors.append(
            Node(
                coordinate=candidate,
                g=current.g + 1,
                h=heuristic(candidate, goal),
            )
        )
    return neighbors


def admit(node: Node, open_list: OpenList, grid: Grid) -> None:
    open_list.push(node)
    set_tile(grid, node.coordinate, TileState.CLOSED)


def select_best(open_list: OpenList) -> Node:
    return open_list.pop()


def search(
    grid: Grid,
    start: Coordinate,
    goal: Coordinate,
    *,
    marking: PathMarking = PathMarking.ROUTE,
    mark_endpoints: bool = True,
) -> SearchResult:
    """Run A* from ``start`` to ``goal``, mutating ``grid`` in place.

    Admitted cells become ``CLOSED``. With ``PathMarking.ROUTE`` the route found
    is traced back from the goal and marked ``PATH``; with
    ``PathMarking.EXPANDED`` every expanded cell is marked ``PATH`` as it is
    selected. A cell is admitted at most once and is never relaxed to a cheaper
    cost afterwards.

    Raises ``InvalidGridError`` for ragged grids and ``InvalidEndpointError``
    when an endpoint is off the grid or not free. Both are raised before the
    grid is touched. An empty grid yields an exhausted result.
    """
    if not grid:
        logger.info("No path found.")
        return SearchResult(grid=grid, state=SearchState.EXHAUSTED)
    validate_grid(grid)
    _validate_endpoint(grid, start, "start")
    _validate_endpoint(grid, goal, "goal")

    open_list = OpenList()
    came_from: dict[Coordinate, Coordinate | None] = {start: None}
    admit(Node(coordinate=start, g=0, h=heuristic(start, goal)), open_list, grid)
    expansions = 0
    logger.debug("Search %s at %s", SearchState.SEEDED.value, start.as_tuple())
    logger.debug("Search %s toward %s", SearchState.EXPANDING.value, goal.as_tuple())

    while open_list:
        current = select_best(open_list)
        logger.debug(
            "Selected %s g=%d h=%d (open=%d)",
            current.coordinate.as_tuple(),
            current.g,
            current.h,
            len(open_list),
        )
        if marking == PathMarking.EXPANDED:
            set_tile(grid, current.coordinate, TileState.PATH)

        if current.coordinate == goal:
            route = _reconstruct_route(came_from, goal)
            if marking == PathMarking.ROUTE:
                for coord in route:
                    set_tile(grid, coord, TileState.PATH)
            if mark_endpoints:
                set_tile(grid, start, TileState.START)
                set_tile(grid, goal, TileState.FINISH)
            logger.info(
                "Path found: cost=%d expansions=%d", current.g, expansions
            )
            return SearchResult(
                grid=grid,
                state=SearchState.FOUND,
                route=route,
                expansions=expansions,
                cost=current.g,
            )

        for neighbor in expand(current, grid, goal):
            came_from[neighbor.coordinate] = current.coordinate
            admit(neighbor, open_list, grid)
        expansions += 1

    logger.info("No path found.")
    return SearchResult(grid=grid, state=SearchState.EXHAUSTED, expansions=expansions)


def _validate_endpoint(grid: Grid, coord: Coordinate, label: str) -> None:
    if not in_bounds(grid, coord):
        raise InvalidEndpointError(
            f"The {label} {coord.as_tuple()} is outside the grid."
        )
    state = tile_at(grid, coord)
    if state != TileState.FREE:
        raise InvalidEndpointError(
            f"The {label} {coord.as_tuple()} is on a {state.value} tile."
        )


def _reconstruct_route(
    came_from: dict[Coordinate, Coordinate | None],
    current: Coordinate,
) -> list[Coordinate]:
    route: list[Coordinate] = [current]
    previous = came_from[current]
    while previous is not None:
        route.append(previous)
        previous = came_from[previous]
    route.reverse()
    return route
