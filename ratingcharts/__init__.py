"""Interactive rating charts drawn with matplotlib."""

from __future__ import annotations

from ratingcharts.charts import (
    render_histogram,
    render_line_graph,
    render_rating,
    render_spider_graph,
    render_table,
)

__version__ = "0.1.0"

__all__ = [
    "render_histogram",
    "render_line_graph",
    "render_rating",
    "render_spider_graph",
    "render_table",
]
