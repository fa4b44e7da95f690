from __future__ import annotations

from itertools import permutations
from typing import Sequence

import numpy as np

from ..core.cache import DistanceCache
from ..core.routes import Route


def brute_force(cache: DistanceCache, ids: Sequence[int]) -> Route:
    """Shortest open path through ids by trying every permutation.

    A path and its reverse have the same length, so only one of the two is
    scored. Permutations are generated in lexicographic order of the sorted
    ids; one whose first id is larger than its last is the reverse of an
    earlier one and is skipped. This scores n!/2 permutations for n > 1 ids.

    The first permutation reaching the minimum wins.

    Parameters
    ----------
    cache : DistanceCache
        Distances between the places
    ids : sequence of int
        Distinct place ids to visit

    Returns
    -------
    Route
        Minimal distance and the corresponding ordering
    """
    ids = sorted(ids)
    if len(ids) < 2:
        return Route(distance=0.0, ids=list(ids))

    minimal = np.inf
    best = None
    for path in permutations(ids):
        if path[0] > path[-1]:
            continue
        dist = cache.route_distance(path)
        if dist < minimal:
            minimal = dist
            best = path
    return Route(distance=float(minimal), ids=list(best))


__all__ = ["brute_force"]
