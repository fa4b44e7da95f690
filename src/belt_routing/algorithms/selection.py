from __future__ import annotations

import logging
from enum import Enum

from ..core.cache import DistanceCache
from ..core.config import SOLVER_DEFAULT, SolverConfig
from ..core.routes import Route
from .baseline import ordinal_route
from .exact import brute_force
from .heuristic import nearest_neighbour


class Strategy(str, Enum):
    """How to order the places of a cloud."""

    BASELINE = "baseline"
    AUTO = "auto"
    EXACT = "exact"
    HEURISTIC = "heuristic"


def select_route(
    cache: DistanceCache,
    strategy: Strategy = Strategy.AUTO,
    config: SolverConfig = SOLVER_DEFAULT,
) -> Route:
    """Route through all places of the cache.

    BASELINE returns the ordinal route. AUTO picks the exact solver for fewer
    than ``config.exact_threshold`` places and the heuristic otherwise; EXACT
    and HEURISTIC force one of them. Up to two places need no search.

    Parameters
    ----------
    cache : DistanceCache
        Places and distances of one cloud
    strategy : Strategy
        Ordering strategy
    config : SolverConfig
        Solver dispatch settings

    Returns
    -------
    Route
        Total distance and ordered ids
    """
    strategy = Strategy(strategy)
    if strategy is Strategy.BASELINE:
        return ordinal_route(cache)

    ids = cache.ids
    if len(ids) < 2:
        return Route(distance=0.0, ids=ids)
    if len(ids) == 2:
        return Route(distance=cache.route_distance(ids), ids=ids)

    if strategy is Strategy.AUTO:
        if len(ids) < config.exact_threshold:
            strategy = Strategy.EXACT
        else:
            strategy = Strategy.HEURISTIC
    logging.debug("Routing %s places with %s solver", len(ids), strategy.value)

    if strategy is Strategy.EXACT:
        return brute_force(cache, ids)
    return nearest_neighbour(cache, ids)


__all__ = ["Strategy", "select_route"]
