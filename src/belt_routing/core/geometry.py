from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Position:
    """Position in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_sequence(cls, xyz: Sequence[float] = None):
        """Construct from any (x, y, z) sequence."""
        if isinstance(xyz, Position):
            return xyz
        x, y, z = xyz
        return cls(x=float(x), y=float(y), z=float(z))

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def __str__(self):
        return f"({self.x}, {self.y}, {self.z})"


def distance(a: Position, b: Position) -> float:
    """Euclidean distance between two positions.

    Parameters
    ----------
    a : Position
        First position
    b : Position
        Second position

    Returns
    -------
    float
        Norm of the component-wise difference
    """
    diff = np.subtract(a.to_tuple(), b.to_tuple())
    return float(np.sqrt((diff**2).sum()))
