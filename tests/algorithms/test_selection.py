import belt_routing.algorithms.selection as selection
from belt_routing.algorithms import Strategy, select_route
from belt_routing.core import DistanceCache, SolverConfig

from conftest import make_cache

import numpy as np
import pytest


def _forbid(name):
    def _raise(*args, **kwargs):
        raise AssertionError(f"{name} should not be called")

    return _raise


def test_select_route_empty():
    assert select_route(DistanceCache()) == (0.0, [])


def test_select_route_single():
    cache = DistanceCache()
    cache.add(1, "System I - Asteroid Belt 1", (0.0, 0.0, 0.0))
    assert select_route(cache) == (0.0, [1])


def test_select_route_two_places():
    cache = DistanceCache()
    cache.add(2, "System I - Asteroid Belt 2", (1.0, 0.0, 0.0))
    cache.add(1, "System I - Asteroid Belt 1", (0.0, 0.0, 0.0))
    distance, route = select_route(cache)
    assert distance == 1.0
    assert route in ([1, 2], [2, 1])


def test_select_route_growing_line():
    cache = DistanceCache()
    expected = [0.0, 0.0, 1.0, 2.0, 3.0]
    assert select_route(cache).distance == expected[0]
    for n in range(1, 5):
        cache.add(n, f"System I - Asteroid Belt {n}", (float(n - 1), 0.0, 0.0))
        assert select_route(cache).distance == expected[n]


def test_select_route_small_cloud_is_exact(collinear_cache, monkeypatch):
    monkeypatch.setattr(selection, "nearest_neighbour", _forbid("nearest_neighbour"))
    assert select_route(collinear_cache).distance == 3.0


def test_select_route_large_cloud_is_heuristic(random_positions, monkeypatch):
    cache = make_cache(random_positions(10))
    monkeypatch.setattr(selection, "brute_force", _forbid("brute_force"))
    distance, route = select_route(cache)
    assert sorted(route) == cache.ids
    assert np.isclose(distance, cache.route_distance(route))


def test_select_route_nine_places_is_exact(random_positions, monkeypatch):
    cache = make_cache(random_positions(9))
    monkeypatch.setattr(selection, "nearest_neighbour", _forbid("nearest_neighbour"))
    _, route = select_route(cache)
    assert sorted(route) == cache.ids


def test_select_route_lowered_threshold(collinear_cache, monkeypatch):
    monkeypatch.setattr(selection, "brute_force", _forbid("brute_force"))
    distance, route = select_route(
        collinear_cache, config=SolverConfig(exact_threshold=4)
    )
    assert distance == 3.0
    xs = np.array([collinear_cache.places[pid].position.x for pid in route])
    assert np.all(np.diff(xs) > 0) or np.all(np.diff(xs) < 0)


@pytest.mark.parametrize("strategy", [Strategy.EXACT, Strategy.HEURISTIC, "exact"])
def test_select_route_forced_strategy(collinear_cache, strategy):
    assert select_route(collinear_cache, strategy=strategy).distance == 3.0


def test_select_route_baseline():
    cache = DistanceCache()
    cache.add(1, "System II - Asteroid Belt 1", (0.0, 0.0, 0.0))
    cache.add(2, "System I - Asteroid Belt 1", (5.0, 0.0, 0.0))
    cache.add(3, "System I - Asteroid Belt 2", (1.0, 0.0, 0.0))
    assert select_route(cache, Strategy.BASELINE) == (5.0, [2, 3, 1])
    assert select_route(cache, Strategy.AUTO) == (5.0, [1, 3, 2])


def test_select_route_auto_ignores_malformed_labels(collinear_cache):
    collinear_cache.add(5, "???", (4.0, 0.0, 0.0))
    assert select_route(collinear_cache).distance == 4.0


def test_solver_config_rejects_tiny_threshold():
    with pytest.raises(ValueError):
        SolverConfig(exact_threshold=2)
