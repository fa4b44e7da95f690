"""Core layer: Positions, labels, distance cache and route scoring."""

from .geometry import Position, distance
from .labels import (
    LABEL_TOKEN_COUNT,
    InvalidOrdinalError,
    KeyExtractor,
    LabelKey,
    MalformedLabelError,
    parse_label,
    parse_roman,
    parse_unsigned,
)
from .routes import Place, Route
from .cache import DistanceCache, Upsert
from .config import EXACT_THRESHOLD_DEFAULT, SOLVER_DEFAULT, SolverConfig

__all__ = [
    "Position",
    "distance",
    "LABEL_TOKEN_COUNT",
    "InvalidOrdinalError",
    "KeyExtractor",
    "LabelKey",
    "MalformedLabelError",
    "parse_label",
    "parse_roman",
    "parse_unsigned",
    "Place",
    "Route",
    "DistanceCache",
    "Upsert",
    "EXACT_THRESHOLD_DEFAULT",
    "SOLVER_DEFAULT",
    "SolverConfig",
]
