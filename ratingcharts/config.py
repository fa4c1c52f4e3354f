"""Chart configuration dataclasses.

Every field has a default and each config validates itself once on
construction, so renderers never deal with partial options. Tooltip
callbacks are grouped per chart into small capability objects whose
members all default to ``empty_text``; an element whose callback returns
an empty string never shows a tooltip.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any

from matplotlib.colors import is_color_like
from matplotlib.figure import Figure

DEFAULT_COLOR: str = "navy"

# Histogram resolution; the x axis asks for a quarter as many ticks.
DEFAULT_BIN_COUNT: int = 80


def empty_text(*_args: Any) -> str:
    """Tooltip producer used when the caller supplies none."""
    return ""


def navy_rgba(alpha: float) -> tuple[float, float, float, float]:
    """Default table colour: navy at the given opacity."""
    return (0.0, 0.0, 128 / 255, alpha)


def _require_callables(obj: Any) -> None:
    for f in fields(obj):
        value = getattr(obj, f.name)
        if not callable(value):
            raise ValueError(
                f"{type(obj).__name__}.{f.name} must be callable, "
                f"got {type(value).__name__}."
            )


def _require_color(owner: str, color: Any) -> None:
    if not is_color_like(color):
        raise ValueError(f"{owner}.color {color!r} is not a valid colour.")


def _require_target(owner: str, target: Any) -> None:
    if target is not None and not isinstance(target, Figure):
        raise ValueError(
            f"{owner}.target must be a matplotlib Figure or None, "
            f"got {type(target).__name__}."
        )


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Margins:
    """Pixel margins around the plotting area."""

    top: float = 40
    right: float = 40
    bottom: float = 40
    left: float = 40

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(
                    f"Margins.{f.name} must be non-negative, got {getattr(self, f.name)}."
                )


@dataclass(frozen=True)
class Size:
    """Canvas size in pixels."""

    width: float = 700
    height: float = 400

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Size must be positive, got {self.width}x{self.height}."
            )


@dataclass(frozen=True)
class Titles:
    title: str = ""
    x_axis_title: str = ""
    y_axis_title: str = ""


@dataclass(frozen=True)
class TableSize:
    """Bounds on the rendered table, in pixels."""

    max_height: float = 400
    max_width: float = 700
    min_height: float = 0
    min_width: float = 0

    def __post_init__(self) -> None:
        if self.max_height <= 0 or self.max_width <= 0:
            raise ValueError(
                f"TableSize maxima must be positive, "
                f"got {self.max_width}x{self.max_height}."
            )
        if self.min_height < 0 or self.min_width < 0:
            raise ValueError("TableSize minima must be non-negative.")
        if self.min_height > self.max_height or self.min_width > self.max_width:
            raise ValueError(
                f"TableSize minima ({self.min_width}x{self.min_height}) exceed "
                f"maxima ({self.max_width}x{self.max_height})."
            )


# ---------------------------------------------------------------------------
# Tooltip capabilities
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HistogramTooltips:
    """Histogram tooltip texts.

    Attributes:
        user_info: ``(formatted_value, percentage_below) -> str``.
        x_axis: ``(min_value, max_value) -> str``.
        y_axis: ``(min_count, max_count) -> str``.
    """

    user_info: Callable[[str, str], str] = empty_text
    x_axis: Callable[[float, float], str] = empty_text
    y_axis: Callable[[float, float], str] = empty_text

    def __post_init__(self) -> None:
        _require_callables(self)


@dataclass(frozen=True)
class LineGraphTooltips:
    """Line graph tooltip texts.

    Attributes:
        area: ``() -> str`` for the deviation band.
        data: ``(value, deviation, iso_timestamp) -> str``.
        lower_deviation: ``(value - deviation, iso_timestamp) -> str``.
        upper_deviation: ``(value + deviation, iso_timestamp) -> str``.
        x_axis: ``(iso_start, iso_end) -> str``.
        y_axis: ``(min_value, max_value) -> str``.
    """

    area: Callable[[], str] = empty_text
    data: Callable[[float, float, str], str] = empty_text
    lower_deviation: Callable[[float, str], str] = empty_text
    upper_deviation: Callable[[float, str], str] = empty_text
    x_axis: Callable[[str, str], str] = empty_text
    y_axis: Callable[[float, float], str] = empty_text

    def __post_init__(self) -> None:
        _require_callables(self)


@dataclass(frozen=True)
class RatingTooltips:
    deviation: Callable[[float], str] = empty_text
    deviation_trend: Callable[[float], str] = empty_text
    value: Callable[[float], str] = empty_text
    value_trend: Callable[[float], str] = empty_text

    def __post_init__(self) -> None:
        _require_callables(self)


# ---------------------------------------------------------------------------
# Chart configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HistogramConfig:
    """Histogram options.

    Attributes:
        target: Figure to draw into; a new figure when None.
        color: Bar, highlight line and annotation colour.
        user_info: ``(formatted_value, percentage_below) -> str`` for the
            annotation next to the highlight line; newlines split lines.
        margins: Pixel margins.
        size: Canvas size.
        titles: Chart and axis titles.
        tooltips: Tooltip producers.
        bin_count: Number of histogram bins.
    """

    target: Figure | None = None
    color: str = DEFAULT_COLOR
    user_info: Callable[[str, str], str] = empty_text
    margins: Margins = field(default_factory=Margins)
    size: Size = field(default_factory=lambda: Size(700, 400))
    titles: Titles = field(default_factory=Titles)
    tooltips: HistogramTooltips = field(default_factory=HistogramTooltips)
    bin_count: int = DEFAULT_BIN_COUNT

    def __post_init__(self) -> None:
        _require_target("HistogramConfig", self.target)
        _require_color("HistogramConfig", self.color)
        if not callable(self.user_info):
            raise ValueError("HistogramConfig.user_info must be callable.")
        if self.bin_count < 1:
            raise ValueError(
                f"HistogramConfig.bin_count must be at least 1, got {self.bin_count}."
            )


@dataclass(frozen=True)
class LineGraphConfig:
    target: Figure | None = None
    color: str = DEFAULT_COLOR
    margins: Margins = field(default_factory=Margins)
    size: Size = field(default_factory=lambda: Size(640, 400))
    titles: Titles = field(default_factory=Titles)
    tooltips: LineGraphTooltips = field(default_factory=LineGraphTooltips)

    def __post_init__(self) -> None:
        _require_target("LineGraphConfig", self.target)
        _require_color("LineGraphConfig", self.color)


@dataclass(frozen=True)
class RatingConfig:
    """Rating gauge options. The height is always half the width."""

    target: Figure | None = None
    title: str = ""
    tooltips: RatingTooltips = field(default_factory=RatingTooltips)
    width: float = 400

    def __post_init__(self) -> None:
        _require_target("RatingConfig", self.target)
        if self.width <= 0:
            raise ValueError(f"RatingConfig.width must be positive, got {self.width}.")

    @property
    def height(self) -> float:
        return self.width * 0.5


@dataclass(frozen=True)
class SpiderGraphConfig:
    """Spider graph options.

    Attributes:
        tooltip: ``(concept, value) -> str`` for each data point.
    """

    target: Figure | None = None
    color: str = DEFAULT_COLOR
    margins: Margins = field(default_factory=Margins)
    tooltip: Callable[[str, float], str] = empty_text
    size: Size = field(default_factory=lambda: Size(500, 500))
    title: str = ""

    def __post_init__(self) -> None:
        _require_target("SpiderGraphConfig", self.target)
        _require_color("SpiderGraphConfig", self.color)
        if not callable(self.tooltip):
            raise ValueError("SpiderGraphConfig.tooltip must be callable.")


@dataclass(frozen=True)
class TableConfig:
    """Table options.

    Attributes:
        margin_top: Gap between title and table, in pixels.
        header_tooltip: ``(lower_case_header) -> str``.
        row_color: ``(alpha) -> colour`` for the header (alpha 1.0) and
            odd rows (alpha 0.15).
    """

    target: Figure | None = None
    margin_top: float = 10
    header_tooltip: Callable[[str], str] = empty_text
    row_color: Callable[[float], Any] = navy_rgba
    size: TableSize = field(default_factory=TableSize)
    title: str = ""

    def __post_init__(self) -> None:
        _require_target("TableConfig", self.target)
        if self.margin_top < 0:
            raise ValueError(
                f"TableConfig.margin_top must be non-negative, got {self.margin_top}."
            )
        if not callable(self.header_tooltip):
            raise ValueError("TableConfig.header_tooltip must be callable.")
        if not callable(self.row_color):
            raise ValueError("TableConfig.row_color must be callable.")
        if not is_color_like(self.row_color(1.0)):
            raise ValueError(
                f"TableConfig.row_color(1.0) returned {self.row_color(1.0)!r}, "
                "which is not a valid colour."
            )
