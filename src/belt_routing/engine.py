"""Library contract of the route engine.

>>> from belt_routing.core import DistanceCache
>>> cache = DistanceCache()
>>> add_point(cache, 1, "Alpha I - Asteroid Belt 1", (0.0, 0.0, 0.0))
<Upsert.INSERTED: 'inserted'>
>>> add_point(cache, 2, "Alpha I - Asteroid Belt 2", (1.0, 0.0, 0.0))
<Upsert.INSERTED: 'inserted'>
>>> compute_route(cache)
Route(distance=1.0, ids=[1, 2])
"""

from __future__ import annotations

from typing import Sequence

from .algorithms import Strategy, select_route
from .core import SOLVER_DEFAULT, DistanceCache, Position, Route, SolverConfig, Upsert


def add_point(
    cache: DistanceCache,
    place_id: int,
    name: str,
    position: Position | Sequence[float],
) -> Upsert:
    """Add a place to the cache, reporting whether an id was replaced."""
    return cache.add(place_id, name, position)


def compute_route(
    cache: DistanceCache,
    strategy: Strategy = Strategy.AUTO,
    config: SolverConfig | None = None,
) -> Route:
    """Compute the baseline or shortest route through all places of the cache."""
    return select_route(cache, strategy=strategy, config=config or SOLVER_DEFAULT)


def distance(cache: DistanceCache, id_a: int, id_b: int) -> float | None:
    """Cached distance between two places, None if unknown."""
    return cache.distance_between(id_a, id_b)


__all__ = ["add_point", "compute_route", "distance", "Strategy", "Upsert"]
