"""Serializable search summaries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gridroute.core.search import SearchResult, SearchState
from gridroute.core.tiles import Coordinate


class CoordinateModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    row: int
    col: int

    @classmethod
    def from_coordinate(cls, coord: Coordinate) -> "CoordinateModel":
        return cls(row=coord.row, col=coord.col)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.row, self.col)


class SearchSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    found: bool
    state: SearchState
    start: CoordinateModel
    goal: CoordinateModel
    route: list[CoordinateModel] = Field(default_factory=list)
    cost: int | None = None
    expansions: int = 0
    board: list[str] = Field(default_factory=list)


def summarize(
    result: SearchResult,
    start: Coordinate,
    goal: Coordinate,
    *,
    board: list[str] | None = None,
) -> SearchSummary:
    return SearchSummary(
        found=result.found,
        state=result.state,
        start=CoordinateModel.from_coordinate(start),
        goal=CoordinateModel.from_coordinate(goal),
        route=[CoordinateModel.from_coordinate(coord) for coord in result.route],
        cost=result.cost,
        expansions=result.expansions,
        board=board or [],
    )
