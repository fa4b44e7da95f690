"""Human-readable rendering of routes."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..core.cache import DistanceCache
from ..core.routes import Route


def format_distance(
    distance_meters: float, unit_meters: float = 1_000_000.0, unit_label: str = "Mm"
) -> str:
    """Distance rounded to whole units (halves away from zero), e.g. ``"12 Mm"``."""
    value = distance_meters / unit_meters
    rounded = np.sign(value) * np.floor(np.abs(value) + 0.5)
    return f"{int(rounded)} {unit_label}"


def route_legs_frame(cache: DistanceCache, route: Route) -> pd.DataFrame:
    """One row per visited place with leg and cumulative distances.

    The leg distance of the first place is zero.
    """
    ids = list(route.ids)
    legs = [0.0] + [
        cache.distance_between(a, b) or 0.0 for a, b in zip(ids[:-1], ids[1:])
    ]
    return pd.DataFrame(
        {
            "step": np.arange(1, len(ids) + 1),
            "id": ids,
            "name": [cache.get_name(pid) or "" for pid in ids],
            "leg_distance": legs[: len(ids)],
            "cumulative_distance": np.cumsum(legs[: len(ids)]),
        }
    )


def format_route(
    cache: DistanceCache,
    route: Route,
    unit_meters: float = 1_000_000.0,
    unit_label: str = "Mm",
) -> list[str]:
    """Warp instructions for a route.

    A route through a single place has no legs and no total length line.
    """
    lines = []
    for row in route_legs_frame(cache, route).itertuples(index=False):
        line = f"{row.step:>2} Warp to `{row.name}`"
        if row.step > 1:
            line += " - " + format_distance(row.leg_distance, unit_meters, unit_label)
        lines.append(line)
    if len(route.ids) > 1:
        lines.append(
            "The length of the route: "
            + format_distance(route.distance, unit_meters, unit_label)
        )
    return lines
