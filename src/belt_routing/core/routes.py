from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .geometry import Position


@dataclass(frozen=True)
class Place:
    """A labeled point of a cloud."""

    id: int
    name: str
    position: Position


class Route(NamedTuple):
    """Open path through a cloud and its total length.

    Unpacks and compares like a plain ``(distance, ids)`` tuple.
    """

    distance: float
    ids: list

    @property
    def size(self) -> int:
        """Number of places visited."""
        return len(self.ids)

    def to_dict(self) -> dict:
        """Return a JSON-friendly representation."""
        return {"distance": float(self.distance), "ids": [int(i) for i in self.ids]}

    @classmethod
    def from_dict(cls, data: dict) -> Route:
        """Construct Route from dict with 'distance' and 'ids' keys."""
        return cls(distance=float(data["distance"]), ids=list(data["ids"]))
