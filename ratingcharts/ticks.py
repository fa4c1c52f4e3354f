"""Tick selection for numeric and time axes."""

from __future__ import annotations

import logging
import math
from datetime import datetime

import pandas as pd
from matplotlib.ticker import MaxNLocator

logger = logging.getLogger(__name__)

# Upper bound on ticks for count axes.
MAX_NUMERIC_TICKS: int = 10

# Above this many days the time axis stops labelling every day.
MAX_TIME_TICKS: int = 8

_NICE_STEPS = [1, 2, 2.5, 5, 10]


def tick_count(max_value: float, bound: int = MAX_NUMERIC_TICKS) -> int:
    """Number of ticks for an axis whose data maximum is *max_value*.

    Uses the maximum itself when it is below *bound*, so an axis counting
    three items gets three ticks rather than ten.
    """
    if not max_value > 0:
        return 0
    return int(max_value) if max_value < bound else bound


def numeric_ticks(
    domain: tuple[float, float],
    count: int,
    integer: bool = False,
) -> list[float]:
    """Pick round-valued ticks splitting the domain into at most *count* steps.

    Both domain ends are included when they fall on the step, so a count
    axis over ``(0, m)`` with ``count=m`` is labelled ``0, 1, ..., m``.

    Args:
        domain: Axis interval; order does not matter.
        count: Maximum number of intervals between ticks.
        integer: Restrict ticks to whole numbers (count axes).

    Returns:
        Ascending tick values inside the domain, at most ``count + 1``.
        A degenerate domain yields its single value; a non-positive
        *count* yields nothing.
    """
    lo, hi = sorted((float(domain[0]), float(domain[1])))
    if count <= 0:
        return []
    if lo == hi or not math.isfinite(lo) or not math.isfinite(hi):
        return [lo]

    locator = MaxNLocator(nbins=count, steps=_NICE_STEPS, integer=integer)
    tolerance = (hi - lo) * 1e-9
    ticks = [
        float(t) for t in locator.tick_values(lo, hi)
        if lo - tolerance <= t <= hi + tolerance
    ]
    return ticks[:count + 1]


def span_in_days(start: datetime, end: datetime) -> float:
    """Fractional number of days between two timestamps."""
    return (end - start).total_seconds() / 86_400


def time_ticks(
    start: datetime,
    end: datetime,
    max_ticks: int = MAX_TIME_TICKS,
) -> list[pd.Timestamp]:
    """Day-boundary ticks between *start* (inclusive) and *end* (exclusive).

    Spans longer than *max_ticks* days are stepped every
    ``ceil(span / max_ticks)`` days; shorter spans get one tick per day.

    Args:
        start: First timestamp on the axis.
        end: Last timestamp on the axis.
        max_ticks: Tick cap for long spans.

    Returns:
        Tick timestamps. Never empty: a zero span, or one without a
        day boundary inside it, yields ``[start]``.
    """
    first = pd.Timestamp(start)
    span = span_in_days(start, end)
    if span <= 0:
        return [first]

    count = max_ticks if span > max_ticks else span
    step = max(math.ceil(span / count), 1)

    ticks = list(pd.date_range(
        start=first.ceil("D"), end=pd.Timestamp(end),
        freq=f"{step}D", inclusive="left",
    ))
    if not ticks:
        logger.debug("No day boundary between %s and %s", start, end)
        return [first]
    return ticks
