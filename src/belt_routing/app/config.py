from __future__ import annotations

from dataclasses import dataclass

from ..core.config import SolverConfig


@dataclass(frozen=True)
class InputConfig:
    """Where to read the places from and how the table is laid out."""

    points_path: str | None = None
    file_format: str | None = None  # "csv" or "json", guessed from suffix if None
    cloud_column: str = "cloud"
    id_column: str = "id"
    name_column: str = "name"
    position_columns: tuple[str, str, str] = ("x", "y", "z")


@dataclass(frozen=True)
class OutputConfig:
    """Display settings."""

    distance_unit_meters: float = 1_000_000.0
    unit_label: str = "Mm"
    output_path: str | None = None

    def __post_init__(self):
        if self.distance_unit_meters <= 0:
            raise ValueError("distance_unit_meters needs to be positive.")


@dataclass(frozen=True)
class RoutingConfig:
    """Top-level configuration consumed by the routing application."""

    input: InputConfig = InputConfig()
    output: OutputConfig = OutputConfig()
    solver: SolverConfig = SolverConfig()
    show_ordinal: bool = True
    show_shortest: bool = True
