"""User-facing/app layer: Loading clouds, routing them and rendering the result."""

from .routing import (
    CloudResult,
    RoutingResult,
    StageLog,
    RoutingLog,
    RoutingApp,
)
from .config import InputConfig, OutputConfig, RoutingConfig
from .data import clouds_from_frame, clouds_from_records, load_clouds, read_points_table
from .display import format_distance, format_route, route_legs_frame
from .cli import build_config

__all__ = [
    "CloudResult",
    "RoutingResult",
    "StageLog",
    "RoutingLog",
    "RoutingApp",
    "InputConfig",
    "OutputConfig",
    "RoutingConfig",
    "clouds_from_frame",
    "clouds_from_records",
    "load_clouds",
    "read_points_table",
    "format_distance",
    "format_route",
    "route_legs_frame",
    "build_config",
]
