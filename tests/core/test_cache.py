from belt_routing.core import DistanceCache, LabelKey, Position, Upsert, distance

from conftest import make_cache

import numpy as np
import pytest


def test_cache_empty():
    cache = DistanceCache()
    assert len(cache) == 0
    assert cache.ids == []
    assert cache.distance_between(0, 1) is None


def test_cache_two_places():
    cache = DistanceCache()
    cache.add(1, "System I - Asteroid Belt 1", Position(0.0, 0.0, 0.0))
    cache.add(2, "System I - Asteroid Belt 2", Position(1.0, 0.0, 0.0))

    assert cache.distance_between(1, 2) == 1.0
    assert cache.distance_between(2, 1) == 1.0


def test_cache_accepts_tuples():
    cache = DistanceCache()
    cache.add(1, "a", (0, 0, 0))
    cache.add(2, "b", [0, 3, 4])
    assert cache.distance_between(1, 2) == 5.0
    assert cache.places[2].position == Position(0.0, 3.0, 4.0)


def test_cache_is_dense_and_symmetric(random_positions):
    positions = random_positions(8)
    cache = make_cache(positions)
    for a in cache.ids:
        for b in cache.ids:
            assert cache.distance_between(a, b) is not None
            assert cache.distance_between(a, b) == cache.distance_between(b, a)
    assert np.isclose(
        cache.distance_between(3, 7),
        distance(Position(*positions[2]), Position(*positions[6])),
    )


def test_cache_self_distance():
    cache = make_cache([(1.0, 2.0, 3.0)])
    assert cache.distance_between(1, 1) == 0.0
    assert cache.distance_between(2, 2) is None


def test_cache_unknown_id():
    cache = make_cache([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)])
    assert cache.distance_between(1, 99) is None
    assert cache.distance_between(99, 1) is None


def test_cache_add_reports_insert_and_replace():
    cache = DistanceCache()
    assert cache.add(1, "a", (0.0, 0.0, 0.0)) is Upsert.INSERTED
    assert cache.add(2, "b", (1.0, 0.0, 0.0)) is Upsert.INSERTED
    assert cache.add(1, "a moved", (5.0, 0.0, 0.0)) is Upsert.REPLACED

    assert len(cache) == 2
    assert cache.get_name(1) == "a moved"
    assert cache.distance_between(1, 2) == 4.0
    assert cache.distance_between(2, 1) == 4.0
    assert cache.distance_between(1, 1) == 0.0


def test_cache_replace_logs_warning(caplog):
    cache = DistanceCache()
    cache.add(1, "a", (0.0, 0.0, 0.0))
    with caplog.at_level("WARNING"):
        cache.add(1, "b", (0.0, 0.0, 0.0))
    assert "replaced" in caplog.text


def test_cache_membership_and_names():
    cache = make_cache([(0.0, 0.0, 0.0)], names=["Somewhere I - Asteroid Belt 1"])
    assert 1 in cache
    assert 2 not in cache
    assert cache.get_name(1) == "Somewhere I - Asteroid Belt 1"
    assert cache.get_name(2) is None


def test_cache_add_many():
    cache = DistanceCache()
    results = cache.add_many([(3, "c", (0, 0, 0)), (1, "a", (0, 0, 1))])
    assert results == [Upsert.INSERTED, Upsert.INSERTED]
    assert cache.ids == [1, 3]


def test_add_does_not_parse_labels():
    cache = DistanceCache()
    cache.add(1, "not a belt name", (0.0, 0.0, 0.0))
    cache.add(2, "", (0.0, 0.0, 1.0))
    assert cache.distance_between(1, 2) == 1.0


def test_label_key_uses_extractor():
    cache = DistanceCache(key_extractor=lambda name: LabelKey(len(name), 0))
    cache.add(1, "abc", (0.0, 0.0, 0.0))
    assert cache.label_key(1) == LabelKey(3, 0)


def test_route_distance_empty_and_single():
    cache = make_cache([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)])
    assert cache.route_distance([]) == 0.0
    assert cache.route_distance([1]) == 0.0


def test_route_distance_open_path(collinear_cache):
    # x: 1 -> 2.0, 2 -> 0.0, 3 -> 3.0, 4 -> 1.0
    assert collinear_cache.route_distance([2, 4, 1, 3]) == 3.0
    assert collinear_cache.route_distance([3, 4, 1, 2]) == 5.0
    assert collinear_cache.route_distance((1, 2)) == 2.0


def test_route_distance_counts_missing_as_zero(collinear_cache, caplog):
    with caplog.at_level("WARNING"):
        total = collinear_cache.route_distance([2, 4, 99, 3])
    assert total == 1.0
    assert collinear_cache.missing_distance_count == 2
    assert "99" in caplog.text


def test_route_distance_without_missing_keeps_counter(collinear_cache):
    collinear_cache.route_distance([1, 2, 3, 4])
    assert collinear_cache.missing_distance_count == 0
