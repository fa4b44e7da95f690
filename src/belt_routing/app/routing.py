from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
import json
import logging
from pathlib import Path
from typing import Any, Sequence

import numpy as np
import pandas as pd

from ..algorithms import Strategy, select_route
from ..core.cache import DistanceCache
from ..core.labels import InvalidOrdinalError, MalformedLabelError
from ..core.routes import Route
from .config import RoutingConfig
from .data import load_clouds
from .display import format_route


@dataclass
class CloudResult:
    """Routes found for one cloud."""

    names: dict[int, str]
    ordinal: Route | None = None
    shortest: Route | None = None

    @property
    def size(self) -> int:
        return len(self.names)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "names": {str(pid): name for pid, name in self.names.items()},
            "ordinal": self.ordinal.to_dict() if self.ordinal else None,
            "shortest": self.shortest.to_dict() if self.shortest else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> CloudResult:
        return cls(
            names={int(pid): name for pid, name in data["names"].items()},
            ordinal=Route.from_dict(data["ordinal"]) if data.get("ordinal") else None,
            shortest=(
                Route.from_dict(data["shortest"]) if data.get("shortest") else None
            ),
        )


@dataclass
class StageLog:
    """Record of a single routing stage event."""

    name: str
    metrics: dict[str, Any]
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec="seconds")
    )

    def to_record(self) -> dict[str, Any]:
        """Return a flat record with stage, timestamp, and metrics."""
        return {
            "stage": self.name,
            "timestamp": self.timestamp,
            **self.metrics,
        }


@dataclass
class RoutingLog:
    """Configuration and stage metrics of a routing run."""

    config: dict[str, Any]
    stages: list[StageLog] = field(default_factory=list)

    def add_stage(self, name: str, **metrics: Any) -> None:
        """Append a stage log entry."""
        self.stages.append(StageLog(name=name, metrics=dict(metrics)))

    def stages_named(self, name: str) -> list[StageLog]:
        """Return all stage logs matching the provided name."""
        return [stage for stage in self.stages if stage.name == name]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert logs to a pandas DataFrame.

        Includes all stages with columns: stage, timestamp, and metric keys.
        """
        records = [s.to_record() for s in self.stages]
        if not records:
            return pd.DataFrame(columns=["stage", "timestamp"])

        df = pd.DataFrame(records)
        df["timestamp"] = pd.to_datetime(df["timestamp"], errors="coerce")
        return df

    def to_dict(self) -> dict[str, Any]:
        """Return log contents as plain dict."""
        return {
            "config": self.config,
            "stages": [
                {
                    "name": stage.name,
                    "metrics": stage.metrics,
                    "timestamp": stage.timestamp,
                }
                for stage in self.stages
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> RoutingLog:
        return cls(
            config=data.get("config", {}),
            stages=[
                StageLog(
                    name=stage["name"],
                    metrics=stage.get("metrics", {}),
                    timestamp=stage.get("timestamp", ""),
                )
                for stage in data.get("stages", [])
            ],
        )


def _default(obj: Any):
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj)!r} is not serialisable")


@dataclass
class RoutingResult:
    """Container returned by RoutingApp.run."""

    clouds: list[CloudResult] = field(default_factory=list)
    logs: RoutingLog | None = None

    @property
    def total_shortest_distance(self) -> float:
        return float(sum(c.shortest.distance for c in self.clouds if c.shortest))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "clouds": [cloud.to_dict() for cloud in self.clouds],
            "log": self.logs.to_dict() if self.logs else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RoutingResult:
        """Reconstruct RoutingResult from dictionary."""
        log_data = data.get("log")
        return cls(
            clouds=[CloudResult.from_dict(c) for c in data.get("clouds", [])],
            logs=RoutingLog.from_dict(log_data) if log_data else None,
        )

    def to_msgpack(self) -> bytes:
        """Serialize to MessagePack binary format."""
        import msgpack

        return msgpack.packb(self.to_dict(), use_bin_type=True, default=_default)

    @classmethod
    def from_msgpack(cls, data: bytes) -> RoutingResult:
        """Deserialize from MessagePack binary format."""
        import msgpack

        return cls.from_dict(msgpack.unpackb(data, raw=False))

    def dump_json(self, path: Path | str, *, indent: int = 2) -> None:
        """Write routes and logs to JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            json.dump(self.to_dict(), fh, indent=indent, default=_default)

    @classmethod
    def load_json(cls, path: Path | str) -> RoutingResult:
        """Load a RoutingResult from disk."""
        with Path(path).open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        return cls.from_dict(data)


class RoutingApp:
    """Computes ordinal and shortest routes for every cloud of a system."""

    def __init__(self, config: RoutingConfig = RoutingConfig()):
        self.config = config
        self.log = RoutingLog(config=asdict(config))

    def run(self, clouds: Sequence[DistanceCache] | None = None) -> RoutingResult:
        """Route all clouds.

        Parameters
        ----------
        clouds : sequence of DistanceCache, optional
            Clouds to route. Loaded from ``config.input`` if not given.

        Returns
        -------
        RoutingResult
            Routes per cloud and the stage log
        """
        if clouds is None:
            clouds = load_clouds(self.config.input)
        self._log_stage_metrics("run", clouds=len(clouds))

        result = RoutingResult(
            clouds=[self.route_cloud(cache, n) for n, cache in enumerate(clouds)],
            logs=self.log,
        )
        self._log_stage_metrics(
            "done",
            clouds=len(result.clouds),
            total_shortest_distance=result.total_shortest_distance,
        )
        return result

    def route_cloud(self, cache: DistanceCache, index: int = 0) -> CloudResult:
        """Ordinal and shortest route of a single cloud."""
        result = CloudResult(names={pid: cache.get_name(pid) for pid in cache.ids})
        missing_before = cache.missing_distance_count

        if self.config.show_ordinal:
            try:
                result.ordinal = select_route(cache, Strategy.BASELINE)
            except (MalformedLabelError, InvalidOrdinalError) as err:
                logging.warning("No ordinal route for cloud %s: %s", index, err)

        if self.config.show_shortest:
            result.shortest = select_route(
                cache, Strategy.AUTO, config=self.config.solver
            )

        self._log_stage_metrics(
            "cloud",
            index=index,
            places=len(cache),
            ordinal_distance=result.ordinal.distance if result.ordinal else np.nan,
            shortest_distance=result.shortest.distance if result.shortest else np.nan,
            missing_distances=cache.missing_distance_count - missing_before,
        )
        return result

    def render(self, clouds: Sequence[DistanceCache], result: RoutingResult) -> list:
        """Text sections listing the ordinal and the shortest routes."""
        out = self.config.output
        lines = []
        sections = (("Ordinal route", "ordinal"), ("Shortest route", "shortest"))
        for title, attr in sections:
            routes = [getattr(r, attr) for r in result.clouds]
            if not any(route is not None for route in routes):
                continue
            lines.append(f"\n\t-=[{title}]=-")
            for cache, route in zip(clouds, routes):
                if route is None:
                    continue
                lines.extend(
                    format_route(
                        cache,
                        route,
                        unit_meters=out.distance_unit_meters,
                        unit_label=out.unit_label,
                    )
                )
        return lines

    def _log_stage_metrics(self, name: str, **metrics: Any) -> None:
        """Convenience wrapper for stage-level logging."""
        timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        logging.info("%s [%s] %s", name, timestamp, metrics)
        self.log.add_stage(name=name, **metrics)
