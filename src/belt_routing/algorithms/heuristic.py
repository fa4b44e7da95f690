from __future__ import annotations

from typing import Sequence

import numpy as np

from ..core.cache import DistanceCache
from ..core.routes import Route


def _closest(cache: DistanceCache, origin: int, candidates) -> int:
    """Candidate closest to origin, lowest id on ties."""

    def _key(pid):
        dist = cache.distance_between(origin, pid)
        return (np.inf if dist is None else dist, pid)

    return min(candidates, key=_key)


def nearest_neighbour_from(
    cache: DistanceCache, start: int, ids: Sequence[int]
) -> list:
    """Greedy ordering of ids beginning at start.

    Repeatedly appends the remaining place closest to the last one on the route.
    """
    route = [start]
    remaining = set(ids) - {start}
    while remaining:
        closest = _closest(cache, route[-1], remaining)
        remaining.remove(closest)
        route.append(closest)
    return route


def nearest_neighbour(cache: DistanceCache, ids: Sequence[int]) -> Route:
    """Best greedy route over all possible starting places.

    Every id is tried as start, in ascending order, and the shortest of the
    resulting routes is returned; earlier starts win ties.

    Parameters
    ----------
    cache : DistanceCache
        Distances between the places
    ids : sequence of int
        Distinct place ids to visit

    Returns
    -------
    Route
        Length and ordering of the best greedy route
    """
    ids = sorted(ids)
    if not ids:
        return Route(distance=0.0, ids=[])

    min_dist = np.inf
    min_route = None
    for start in ids:
        route = nearest_neighbour_from(cache, start, ids)
        dist = cache.route_distance(route)
        if dist < min_dist:
            min_dist = dist
            min_route = route
    return Route(distance=float(min_dist), ids=min_route)


__all__ = ["nearest_neighbour", "nearest_neighbour_from"]
