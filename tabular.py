"""Helpers for running polygon queries over tables of points."""
from __future__ import annotations

import logging
from typing import Dict, Final, Mapping, Tuple

import pandas as pd

from geom import Polygon
from vector import Vector

logger = logging.getLogger(__name__)

COORDINATE_COLUMNS: Final[Tuple[str, str]] = ("x", "y")
"""Column names every point table is normalised to."""


def normalize_coordinates(df: pd.DataFrame, mapping: Mapping[str, str]) -> pd.DataFrame:
    """Rename the mapped coordinate columns to x/y and check that they are numeric.

    Raises ValueError when a coordinate has no source column, when the two
    coordinates share a source, or when an unmapped column already uses
    the name x or y.
    """

    unmapped = [c for c in COORDINATE_COLUMNS if c not in mapping]
    if unmapped:
        raise ValueError(f"No source column chosen for coordinate(s): {', '.join(unmapped)}.")

    sources = [mapping[c] for c in COORDINATE_COLUMNS]
    if len(set(sources)) != len(sources):
        raise ValueError(f"x and y must come from different columns, both map to '{sources[0]}'.")

    rename_map: Dict[str, str] = {}
    for target, source in zip(COORDINATE_COLUMNS, sources):
        if source not in df.columns:
            raise ValueError(f"Point table has no column '{source}' to use as {target}.")
        if target in df.columns and target not in sources:
            raise ValueError(
                f"Point table already has a '{target}' column that is not mapped; "
                "rename or drop it first."
            )
        rename_map[source] = target

    normalized = df.rename(columns=rename_map).copy()

    for coordinate in COORDINATE_COLUMNS:
        original = normalized[coordinate]
        normalized[coordinate] = pd.to_numeric(original, errors="coerce").astype(float)
        # Only values that failed conversion count; NaN already present is kept.
        failed = normalized[coordinate].isna() & original.notna()
        if failed.any():
            raise ValueError(
                f"Coordinate '{coordinate}' has {int(failed.sum())} value(s) that are not numbers."
            )

    return normalized


def _require_coordinates(df: pd.DataFrame) -> None:
    absent = [c for c in COORDINATE_COLUMNS if c not in df.columns]
    if absent:
        raise ValueError(
            f"Point table lacks column(s) {', '.join(absent)}; run normalize_coordinates first."
        )


def polygon_from_frame(df: pd.DataFrame) -> Polygon:
    """Build a polygon from the x/y rows of a table, in row order."""

    _require_coordinates(df)
    if df.empty:
        raise ValueError("Vertex table is empty. Add at least one vertex row.")
    return Polygon.from_pairs(list(zip(df["x"].astype(float), df["y"].astype(float))))


def classify_points(
    df: pd.DataFrame, polygon: Polygon, column: str = "inside"
) -> pd.DataFrame:
    """Append a boolean column recording whether each row's point is contained."""

    _require_coordinates(df)
    classified = df.copy()
    classified[column] = pd.Series(
        [polygon.contains_xy(x, y) for x, y in zip(df["x"], df["y"])],
        index=df.index,
        dtype=bool,
    )
    logger.debug(
        "Classified %d points, %d inside", len(classified), int(classified[column].sum())
    )
    return classified


def nearest_vertices(df: pd.DataFrame, polygon: Polygon) -> pd.DataFrame:
    """Append nearest_x/nearest_y columns holding each row's closest polygon vertex."""

    _require_coordinates(df)
    nearest = [
        polygon.nearest_vertex(Vector(float(x), float(y)))
        for x, y in zip(df["x"], df["y"])
    ]
    result = df.copy()
    result["nearest_x"] = pd.Series([v.x for v in nearest], index=df.index, dtype=float)
    result["nearest_y"] = pd.Series([v.y for v in nearest], index=df.index, dtype=float)
    return result


def containment_summary(df: pd.DataFrame, column: str = "inside") -> pd.DataFrame:
    """Count inside and outside rows of a classified table."""

    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found; run classify_points first.")

    flags = df[column].astype(bool)
    total = len(flags)
    inside = int(flags.sum())
    summary = pd.DataFrame(
        {"points": [inside, total - inside]},
        index=pd.Index(["INSIDE", "OUTSIDE"], name=column),
    )
    summary["share%"] = (summary["points"] / total * 100).round(1) if total else 0.0
    return summary
