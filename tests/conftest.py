"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from belt_routing.core import DistanceCache


def make_cache(positions, names=None):
    """Cache with ids 1..n at the given positions."""
    cache = DistanceCache()
    for n, position in enumerate(positions, start=1):
        name = names[n - 1] if names else f"Test I - Asteroid Belt {n}"
        cache.add(n, name, position)
    return cache


@pytest.fixture
def collinear_cache():
    """Four places at x = 0, 1, 2, 3 added out of spatial order."""
    cache = DistanceCache()
    for place_id, x in ((1, 2.0), (2, 0.0), (3, 3.0), (4, 1.0)):
        cache.add(place_id, f"Test I - Asteroid Belt {place_id}", (x, 0.0, 0.0))
    return cache


@pytest.fixture
def random_positions():
    """Factory for reproducible random positions."""

    def _positions(n, seed=42):
        rng = np.random.default_rng(seed)
        return [tuple(p) for p in rng.uniform(-1e9, 1e9, size=(n, 3))]

    return _positions
