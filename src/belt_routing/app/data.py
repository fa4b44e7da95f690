"""Load clouds of places from CSV or JSON tables."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from ..core.cache import DistanceCache, Upsert
from ..core.labels import KeyExtractor, parse_label
from .config import InputConfig

INPUT_CONFIG_DEFAULT = InputConfig()


def read_points_table(
    path: Path | str, file_format: str | None = None
) -> pd.DataFrame:
    """Read a table of places.

    Parameters
    ----------
    path : Path or str
        CSV file or JSON file holding a list of records
    file_format : str, optional
        "csv" or "json"; guessed from the file suffix if not given

    Returns
    -------
    pd.DataFrame
        One row per place
    """
    path = Path(path)
    file_format = (file_format or path.suffix.lstrip(".")).lower()
    if file_format == "csv":
        return pd.read_csv(path)
    if file_format == "json":
        return pd.read_json(path, orient="records")
    raise ValueError(f"Unknown points file format: {file_format!r}")


def clouds_from_frame(
    df: pd.DataFrame,
    input_config: InputConfig = INPUT_CONFIG_DEFAULT,
    key_extractor: KeyExtractor = parse_label,
) -> list[DistanceCache]:
    """Group rows by cloud and build one DistanceCache per cloud.

    Clouds keep the order of their first appearance. Without a cloud column,
    all rows form a single cloud.
    """
    cfg = input_config
    required = [cfg.id_column, cfg.name_column, *cfg.position_columns]
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"Points table lacks columns: {missing}")
    if df[required].isnull().values.any():
        bad_rows = df.index[df[required].isnull().any(axis=1)].tolist()
        raise ValueError(f"Points table has empty values in rows {bad_rows}")

    if cfg.cloud_column in df.columns:
        grouped = df.groupby(cfg.cloud_column, sort=False, dropna=False)
        groups = [group for _, group in grouped]
    else:
        groups = [df]

    clouds = []
    for group in groups:
        cache = DistanceCache(key_extractor=key_extractor)
        for record in group.to_dict(orient="records"):
            upsert = cache.add(
                int(record[cfg.id_column]),
                str(record[cfg.name_column]),
                tuple(float(record[col]) for col in cfg.position_columns),
            )
            if upsert is Upsert.REPLACED:
                logging.warning(
                    "Duplicate id %s in points table", record[cfg.id_column]
                )
        if len(cache):
            clouds.append(cache)
    logging.info("Loaded %s clouds", len(clouds))
    return clouds


def clouds_from_records(
    records: Iterable[dict],
    input_config: InputConfig = INPUT_CONFIG_DEFAULT,
    key_extractor: KeyExtractor = parse_label,
) -> list[DistanceCache]:
    """Build clouds from in-memory records with the same keys as the table columns."""
    records = list(records)
    if not records:
        return []
    return clouds_from_frame(
        pd.DataFrame.from_records(records),
        input_config=input_config,
        key_extractor=key_extractor,
    )


def load_clouds(
    input_config: InputConfig,
    key_extractor: KeyExtractor = parse_label,
) -> list[DistanceCache]:
    """Read the points file named in input_config and build its clouds."""
    if input_config.points_path is None:
        raise ValueError("No points_path configured.")
    df = read_points_table(input_config.points_path, input_config.file_format)
    return clouds_from_frame(df, input_config=input_config, key_extractor=key_extractor)
