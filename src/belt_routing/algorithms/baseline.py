from __future__ import annotations

from ..core.cache import DistanceCache
from ..core.routes import Route


def ordinal_route(cache: DistanceCache) -> Route:
    """Route visiting places in the order their names suggest.

    Places are sorted by (group ordinal, sub-index) of their label key with the
    id breaking remaining ties. This is a reference ordering, not an
    optimization.

    Raises
    ------
    MalformedLabelError, InvalidOrdinalError
        If a name does not fit the key extractor of the cache
    """
    ids = sorted(cache.places, key=lambda pid: (cache.label_key(pid), pid))
    return Route(distance=cache.route_distance(ids), ids=ids)


__all__ = ["ordinal_route"]
