"""Single rating gauge: value, deviation and their trends."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from ratingcharts.config import RatingConfig
from ratingcharts.data.contracts import RatingSummary, to_summary
from ratingcharts.formatting import deviation_color_value, format_number, grayscale_rgb
from ratingcharts.surface import PixelCanvas, prepare_canvas

logger = logging.getLogger(__name__)

# Layout, as fractions of the chart height.
VALUE_BASELINE: float = 0.65
VALUE_TREND_TOP: float = 0.36
VALUE_TREND_SIZE: float = 0.19
DEVIATION_TOP: float = 0.41
DEVIATION_TREND_TOP: float = 0.385
DEVIATION_TREND_SIZE: float = 0.125
TITLE_Y: float = 0.1

DEVIATION_FONT_SCALE: float = 0.75


def font_size_px(height: float) -> float:
    """Value font size for a gauge of the given height."""
    return 72 * (height / 200)


def trend_marker(
    canvas: PixelCanvas,
    x: float,
    y: float,
    size: float,
    trend: float,
    color: Any,
    gid: str,
) -> Polygon:
    """Triangle in the ``size`` square at (x, y); points up when trend > 0."""
    if trend > 0:
        vertices = [(x, y + size), (x + size, y + size), (x + size / 2, y)]
    else:
        vertices = [(x, y), (x + size, y), (x + size / 2, y + size)]
    marker = Polygon(vertices, closed=True, facecolor=color, edgecolor="none", gid=gid)
    canvas.ax.add_patch(marker)
    return marker


def render_rating(
    summary: RatingSummary | Mapping[str, Any],
    config: RatingConfig | None = None,
) -> Figure:
    """Render a rating value with its deviation and trend markers.

    The value is shown with four characters. When the summary carries a
    deviation, it follows as ``±`` plus three characters in a grey tone
    that darkens towards ``max_deviation``.

    Args:
        summary: Rating summary or an equivalent mapping.
        config: Chart options; defaults when None.

    Returns:
        The rendered figure.
    """
    config = config or RatingConfig()
    summary = to_summary(summary)
    tooltips = config.tooltips
    width, height = config.width, config.height

    canvas = prepare_canvas(config.target, width, height)
    font_px = font_size_px(height)
    deviation_font_px = font_px * DEVIATION_FONT_SCALE

    value_label = format_number(summary.value, 4)
    value_width = canvas.text_width(value_label, font_px)
    value_trend_width = height * VALUE_TREND_SIZE
    deviation_trend_width = height * DEVIATION_TREND_SIZE

    has_deviation = summary.deviation is not None
    deviation_label = format_number(summary.deviation, 3) if has_deviation else ""
    sign_width = canvas.text_width("±", deviation_font_px) if has_deviation else 0.0
    deviation_width = (
        canvas.text_width("±" + deviation_label, deviation_font_px) if has_deviation else 0.0
    )

    total_width = value_width + value_trend_width + deviation_width + deviation_trend_width
    left = (width - total_width) / 2

    value_text = canvas.text(
        left + value_width / 2, height * VALUE_BASELINE, value_label,
        size_px=font_px, ha="center", va="baseline", color="black", gid="value",
    )
    canvas.hover.bind(value_text, partial(tooltips.value, summary.value))

    value_trend = trend_marker(
        canvas, left + value_width, height * VALUE_TREND_TOP, value_trend_width,
        summary.value_trend, "black", "value-trend",
    )
    canvas.hover.bind(value_trend, partial(tooltips.value_trend, summary.value_trend))

    if has_deviation:
        color = grayscale_rgb(
            deviation_color_value(summary.deviation, summary.max_deviation),
        )
        deviation_left = left + value_width + value_trend_width
        canvas.text(
            deviation_left, height * DEVIATION_TOP, "±",
            size_px=deviation_font_px, ha="left", va="top", color=color, gid="deviation-sign",
        )
        deviation_text = canvas.text(
            deviation_left + sign_width, height * DEVIATION_TOP, deviation_label,
            size_px=deviation_font_px, ha="left", va="top", color=color, gid="deviation",
        )
        canvas.hover.bind(deviation_text, partial(tooltips.deviation, summary.deviation))

        deviation_trend = trend_marker(
            canvas, deviation_left + deviation_width, height * DEVIATION_TREND_TOP,
            deviation_trend_width, summary.deviation_trend, color, "deviation-trend",
        )
        canvas.hover.bind(
            deviation_trend, partial(tooltips.deviation_trend, summary.deviation_trend),
        )

    canvas.text(
        width / 2, height * TITLE_Y, config.title,
        ha="center", va="center", fontweight="bold", gid="title",
    )

    logger.debug(
        "Rating: value %s (trend %s), deviation %s of max %s",
        summary.value, summary.value_trend, summary.deviation, summary.max_deviation,
    )
    return canvas.figure
