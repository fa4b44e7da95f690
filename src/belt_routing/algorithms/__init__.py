"""Algorithm layer: Baseline ordering, route solvers and solver selection."""

from .baseline import ordinal_route
from .exact import brute_force
from .heuristic import nearest_neighbour, nearest_neighbour_from
from .selection import Strategy, select_route

__all__ = [
    "ordinal_route",
    "brute_force",
    "nearest_neighbour",
    "nearest_neighbour_from",
    "Strategy",
    "select_route",
]
