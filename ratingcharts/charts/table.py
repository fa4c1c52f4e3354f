"""Rating history as a table with a coloured header row."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from functools import partial
from typing import Any

from matplotlib.figure import Figure
from matplotlib.table import Table

from ratingcharts.config import TableConfig
from ratingcharts.data.contracts import (
    RatingPoint,
    TableColumn,
    cell_text,
    points_frame,
    to_column,
)
from ratingcharts.surface import FONT_FAMILY, PixelCanvas, prepare_canvas

logger = logging.getLogger(__name__)

TABLE_FONT_SIZE_PX: float = 18
HEADER_HEIGHT_PX: float = 40
ROW_HEIGHT_PX: float = 30
CELL_PADDING_PX: float = 10
TITLE_BAND_PX: float = 30

EVEN_ROW_COLOR: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.1)


def _has_timestamp(record: RatingPoint | Mapping[str, Any]) -> bool:
    if isinstance(record, RatingPoint):
        return record.timestamp is not None
    return record.get("timestamp") is not None


def _column_widths(
    canvas: PixelCanvas,
    columns: Sequence[TableColumn],
    body: Sequence[Sequence[str]],
) -> list[float]:
    """Natural pixel width of each column, padding included."""
    widths = []
    for j, column in enumerate(columns):
        texts = [column.header] + [row[j] for row in body]
        widest = max(canvas.text_width(t, TABLE_FONT_SIZE_PX) for t in texts)
        widths.append(widest + 2 * CELL_PADDING_PX)
    return widths


def row_capacity(max_height: float) -> int:
    """Body rows that fit under the header within *max_height* pixels."""
    return max(math.floor((max_height - HEADER_HEIGHT_PX) / ROW_HEIGHT_PX), 0)


def render_table(
    rows: Iterable[RatingPoint | Mapping[str, Any]],
    columns: Iterable[TableColumn | Mapping[str, str]],
    config: TableConfig | None = None,
) -> Figure:
    """Table of rating records, oldest first.

    Each column shows one record field (timestamp as ISO text, value or
    deviation) under its header. Body rows alternate between
    ``config.row_color(0.15)`` and a light grey; the header uses
    ``config.row_color(1.0)`` with white text.

    Args:
        rows: Rating points or mappings. Records without a timestamp are
            skipped with a warning.
        columns: Columns to show, in order.
        config: Table options; defaults when None.

    Returns:
        The rendered figure. The table is as wide as its content within
        the configured bounds; rows that do not fit ``size.max_height``
        are left out with a warning.
    """
    config = config or TableConfig()
    size = config.size
    columns = [to_column(c) for c in columns]

    records = list(rows)
    kept = [r for r in records if _has_timestamp(r)]
    if len(kept) < len(records):
        logger.warning("Skipped %d table rows without timestamp", len(records) - len(kept))
    frame = points_frame(kept, fill_deviation=False)

    capacity = row_capacity(size.max_height)
    if len(frame) > capacity:
        logger.warning(
            "Table height limit %gpx fits %d of %d rows", size.max_height, capacity, len(frame),
        )
        frame = frame.iloc[:capacity]

    title_band = TITLE_BAND_PX if config.title else 0
    table_height = 0.0
    if columns:
        table_height = min(
            max(HEADER_HEIGHT_PX + len(frame) * ROW_HEIGHT_PX, size.min_height),
            size.max_height,
        )
    height = max(title_band + config.margin_top + table_height, 1)
    width = size.max_width

    canvas = prepare_canvas(config.target, width, height)

    if config.title:
        canvas.text(
            width / 2, TITLE_BAND_PX / 2, config.title,
            ha="center", va="center", fontweight="bold", gid="title",
        )

    if not columns:
        logger.debug("Table: no columns, nothing to draw")
        return canvas.figure

    body = [
        [cell_text(record[c.key]) for c in columns]
        for record in frame.to_dict("records")
    ]
    widths = _column_widths(canvas, columns, body)
    table_width = min(max(sum(widths), size.min_width), size.max_width)

    top = title_band + config.margin_top
    table = Table(
        canvas.ax,
        bbox=(0, 1 - (top + table_height) / height, table_width / width, table_height / height),
    )
    header_color = config.row_color(1.0)
    odd_color = config.row_color(0.15)
    for j, (column, w) in enumerate(zip(columns, widths, strict=True)):
        cell = table.add_cell(
            0, j, width=w, height=HEADER_HEIGHT_PX, text=column.header,
            loc="center", facecolor=header_color, edgecolor="white",
        )
        cell.get_text().set_color("white")
        cell.get_text().set_fontfamily(FONT_FAMILY)
        cell.set_gid("header")
        canvas.hover.bind(cell, partial(config.header_tooltip, column.header.lower()))

    for i, texts in enumerate(body, start=1):
        # Body rows count from 0 for the colour alternation.
        facecolor = odd_color if (i - 1) % 2 else EVEN_ROW_COLOR
        for j, (text, w) in enumerate(zip(texts, widths, strict=True)):
            cell = table.add_cell(
                i, j, width=w, height=ROW_HEIGHT_PX, text=text,
                loc="left", facecolor=facecolor, edgecolor="white",
            )
            cell.get_text().set_fontfamily(FONT_FAMILY)
            cell.set_gid("cell")

    table.auto_set_font_size(False)
    table.set_fontsize(canvas.px_to_pt(TABLE_FONT_SIZE_PX))
    canvas.ax.add_table(table)

    logger.debug(
        "Table: %d rows x %d columns, %gx%g px",
        len(body), len(columns), table_width, table_height,
    )
    return canvas.figure
