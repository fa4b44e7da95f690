"""Symmetric pairwise distance table over the places of one cloud."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Sequence

from .geometry import Position, distance
from .labels import KeyExtractor, LabelKey, parse_label
from .routes import Place


class Upsert(Enum):
    """Outcome of adding a place to a DistanceCache."""

    INSERTED = "inserted"
    REPLACED = "replaced"


class DistanceCache:
    """Places of one cloud and the distances between all of them.

    The table is kept dense: after every ``add``, there is a distance between
    the new place and every other place, stored in both directions.

    Parameters
    ----------
    key_extractor : callable, optional
        Maps a display name to a LabelKey for the ordinal baseline.
        Defaults to ``parse_label``.
    """

    def __init__(self, key_extractor: KeyExtractor = parse_label):
        self.key_extractor = key_extractor
        self.places: dict[int, Place] = {}
        self.distances: dict[int, dict[int, float]] = {}
        self.missing_distance_count = 0

    def __len__(self):
        return len(self.places)

    def __contains__(self, place_id):
        return place_id in self.places

    @property
    def ids(self) -> list:
        """Ids of all places in ascending order."""
        return sorted(self.places)

    def get_name(self, place_id: int) -> str | None:
        place = self.places.get(place_id)
        return None if place is None else place.name

    def label_key(self, place_id: int) -> LabelKey:
        """Ordinal sort key of a place, parsed from its name."""
        return self.key_extractor(self.places[place_id].name)

    def add(self, place_id: int, name: str, position: Position) -> Upsert:
        """Add a place or replace the place with the same id.

        Parameters
        ----------
        place_id : int
            Caller-assigned id
        name : str
            Display name (not parsed here)
        position : Position or sequence of 3 floats
            Location of the place

        Returns
        -------
        Upsert
            INSERTED for a new id, REPLACED if an existing place was overwritten
        """
        place = Place(
            id=place_id, name=name, position=Position.from_sequence(position)
        )

        old = self.places.pop(place_id, None)
        if old is not None:
            for other in self.distances.pop(place_id, {}):
                self.distances.get(other, {}).pop(place_id, None)

        row = self.distances.setdefault(place_id, {})
        for other_id, other in self.places.items():
            dist = distance(place.position, other.position)
            logging.debug("Distance between %s and %s - %s", name, other.name, dist)
            row[other_id] = dist
            self.distances.setdefault(other_id, {})[place_id] = dist

        self.places[place_id] = place

        if old is not None:
            logging.warning("The old value for %s was replaced: %s", place_id, old)
            return Upsert.REPLACED
        return Upsert.INSERTED

    def add_many(self, places: Iterable[tuple]) -> list:
        """Add (id, name, position) triples in order."""
        return [self.add(*place) for place in places]

    def distance_between(self, a: int, b: int) -> float | None:
        """Distance between two places, None if unknown."""
        if a == b:
            return 0.0 if a in self.places else None
        return self.distances.get(a, {}).get(b)

    def route_distance(self, route: Sequence[int]) -> float:
        """Total length of the open path visiting ids in order.

        Pairs without a known distance count as zero. This keeps a single
        foreign id from aborting the scoring, but under-reports the length,
        so every miss is counted in ``missing_distance_count`` and logged.
        """
        total = 0.0
        for a, b in zip(route[:-1], route[1:]):
            dist = self.distance_between(a, b)
            if dist is None:
                self.missing_distance_count += 1
                logging.warning("No distance between %s and %s, counting 0", a, b)
                continue
            total += dist
        return total


__all__ = ["Upsert", "DistanceCache"]
