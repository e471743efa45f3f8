"""Errors raised for malformed grids, endpoints and board files."""

from __future__ import annotations


class GridRouteError(ValueError):
    """Base class for structural input errors."""


class InvalidGridError(GridRouteError):
    pass


class InvalidEndpointError(GridRouteError):
    pass


class BoardFormatError(GridRouteError):
    pass
