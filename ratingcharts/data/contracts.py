"""Chart input contracts.

Dataclasses describing what callers hand to the renderers, plus the
coercion from plain mappings (as decoded from JSON) into them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import pandas as pd

from ratingcharts.formatting import plain_number

logger = logging.getLogger(__name__)

TABLE_COLUMN_KEYS: tuple[str, ...] = ("timestamp", "value", "deviation")


@dataclass(frozen=True)
class RatingPoint:
    """One rating observation.

    Attributes:
        value: Rating value.
        timestamp: When the rating was recorded.
        deviation: Symmetric uncertainty around the value; None counts as 0.
    """

    value: float
    timestamp: datetime
    deviation: float | None = None


@dataclass(frozen=True)
class RatingSummary:
    """Input of the rating gauge.

    Attributes:
        value: Current rating value.
        value_trend: Change of the value; its sign picks the trend marker.
        deviation: Current deviation; the deviation part is omitted when None.
        deviation_trend: Change of the deviation.
        max_deviation: Deviation rendered with the darkest grey.
    """

    value: float
    value_trend: float
    deviation: float | None = None
    deviation_trend: float = 0.0
    max_deviation: float = 0.0


@dataclass(frozen=True)
class TableColumn:
    """A table column: which record field to show, under which header."""

    key: str
    header: str

    def __post_init__(self) -> None:
        if self.key not in TABLE_COLUMN_KEYS:
            raise ValueError(
                f"Invalid column key {self.key!r}. "
                f"Must be one of {list(TABLE_COLUMN_KEYS)}."
            )


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


def to_point(record: RatingPoint | Mapping[str, Any]) -> RatingPoint:
    """Accept a RatingPoint or a mapping with value/timestamp/deviation."""
    if isinstance(record, RatingPoint):
        return record
    return RatingPoint(
        value=float(record["value"]),
        timestamp=pd.Timestamp(record["timestamp"]),
        deviation=record.get("deviation"),
    )


def to_summary(data: RatingSummary | Mapping[str, Any]) -> RatingSummary:
    if isinstance(data, RatingSummary):
        return data
    deviation = data.get("deviation")
    return RatingSummary(
        value=float(data["value"]),
        value_trend=float(data.get("value_trend", 0.0)),
        deviation=None if deviation is None else float(deviation),
        deviation_trend=float(data.get("deviation_trend", 0.0)),
        max_deviation=float(data.get("max_deviation", 0.0)),
    )


def to_column(column: TableColumn | Mapping[str, str]) -> TableColumn:
    if isinstance(column, TableColumn):
        return column
    return TableColumn(key=column["key"], header=column["header"])


def points_frame(
    records: Iterable[RatingPoint | Mapping[str, Any]],
    fill_deviation: bool = True,
) -> pd.DataFrame:
    """Rating points as a DataFrame sorted by ascending timestamp.

    The sort works on a new frame; *records* is left untouched.

    Args:
        records: Rating points or equivalent mappings.
        fill_deviation: Replace missing deviations with 0.

    Returns:
        DataFrame with columns value, deviation, timestamp and a fresh
        RangeIndex.
    """
    points = [to_point(r) for r in records]
    frame = pd.DataFrame({
        "value": pd.Series([p.value for p in points], dtype=float),
        "deviation": pd.Series([p.deviation for p in points], dtype=float),
        "timestamp": pd.to_datetime(pd.Series([p.timestamp for p in points], dtype=object)),
    })
    if fill_deviation:
        frame["deviation"] = frame["deviation"].fillna(0.0)
    return frame.sort_values("timestamp", kind="stable").reset_index(drop=True)


def iso_timestamp(value: datetime) -> str:
    return pd.Timestamp(value).isoformat()


def cell_text(value: Any) -> str:
    """Table cell text; missing values render as an empty cell."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return iso_timestamp(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isnan(value):
            return ""
        return plain_number(value)
    return str(value)
