"""Chart input records."""

from __future__ import annotations

from ratingcharts.data.contracts import (
    RatingPoint,
    RatingSummary,
    TableColumn,
    points_frame,
    to_column,
    to_point,
    to_summary,
)

__all__ = [
    "RatingPoint",
    "RatingSummary",
    "TableColumn",
    "points_frame",
    "to_column",
    "to_point",
    "to_summary",
]
