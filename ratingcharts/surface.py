"""Pixel canvas on a matplotlib figure.

Charts are laid out in pixels with y growing downwards. A canvas is a
single borderless axes spanning the whole figure whose data limits equal
the figure size in pixels, so scale output can be drawn directly.
Each prepared figure carries one hover dispatcher; preparing the same
figure again disconnects it before the figure is cleared.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.artist import Artist
from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle
from matplotlib.text import Text

from ratingcharts.tooltip import HoverDispatcher, TooltipController

logger = logging.getLogger(__name__)

DPI: int = 100
FONT_FAMILY: list[str] = ["Georgia", "DejaVu Serif", "serif"]
FONT_SIZE_PX: float = 16
AXIS_FONT_SIZE_PX: float = 10
TICK_SIZE_PX: float = 6
TICK_PADDING_PX: float = 3

# Depth of the invisible hover band along an axis.
AXIS_HIT_DEPTH_PX: float = 24
LEFT_AXIS_HIT_DEPTH_PX: float = 40

# Figure -> dispatcher of its latest render. Both sides are weak; the
# figure's own callback registry owns the dispatcher.
_HOVER: weakref.WeakKeyDictionary[Figure, weakref.ref[HoverDispatcher]] = (
    weakref.WeakKeyDictionary()
)


@dataclass
class PixelCanvas:
    """One render's drawing surface and its hover wiring."""

    figure: Figure
    ax: Axes
    width: float
    height: float
    tooltip: TooltipController
    hover: HoverDispatcher

    def px_to_pt(self, px: float) -> float:
        return px * 72 / self.figure.dpi

    def text(
        self,
        x: float,
        y: float,
        s: str,
        size_px: float = FONT_SIZE_PX,
        **kwargs: Any,
    ) -> Text:
        kwargs.setdefault("fontfamily", FONT_FAMILY)
        return self.ax.text(x, y, s, fontsize=self.px_to_pt(size_px), **kwargs)

    def line(
        self,
        xs: Sequence[float],
        ys: Sequence[float],
        width_px: float = 1,
        **kwargs: Any,
    ) -> Artist:
        (artist,) = self.ax.plot(xs, ys, linewidth=self.px_to_pt(width_px), **kwargs)
        return artist

    def text_width(self, s: str, size_px: float = FONT_SIZE_PX) -> float:
        """Rendered width of *s* in pixels."""
        probe = self.text(0, 0, s, size_px=size_px)
        renderer = self.figure.canvas.get_renderer()  # type: ignore[attr-defined]
        width = probe.get_window_extent(renderer=renderer).width
        probe.remove()
        return float(width)

    def hit_box(self, x: float, y: float, width: float, height: float, gid: str) -> Rectangle:
        """Transparent rectangle used as a hover target."""
        box = Rectangle(
            (x, y), width, height,
            facecolor=(0, 0, 0, 0), edgecolor="none", gid=gid,
        )
        self.ax.add_patch(box)
        return box


def prepare_canvas(target: Figure | None, width: float, height: float) -> PixelCanvas:
    """Clear (or create) a figure and set it up as a pixel canvas.

    Args:
        target: Figure to reuse, or None for a new pyplot figure.
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        The canvas, with a fresh tooltip connected to the figure.
    """
    if target is None:
        figure = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
    else:
        figure = target
        release(figure)
        figure.clear()
        figure.set_size_inches(width / figure.dpi, height / figure.dpi)

    if not hasattr(figure.canvas, "get_renderer"):
        FigureCanvasAgg(figure)

    ax = figure.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()

    annotation = ax.annotate(
        "", xy=(0, 0), xycoords="figure pixels",
        fontsize=FONT_SIZE_PX * 72 / figure.dpi, fontfamily=FONT_FAMILY,
        bbox={"boxstyle": "round,pad=0.3", "facecolor": "white", "edgecolor": "black"},
        zorder=100, annotation_clip=False,
    )
    tooltip = TooltipController(annotation)
    hover = HoverDispatcher(figure, tooltip)
    hover.connect()
    _HOVER[figure] = weakref.ref(hover)

    logger.debug("Prepared %gx%g px canvas", width, height)
    return PixelCanvas(figure, ax, width, height, tooltip, hover)


def release(figure: Figure) -> None:
    """Disconnect the hover dispatcher of a previous render, if any."""
    ref = _HOVER.pop(figure, None)
    hover = ref() if ref is not None else None
    if hover is not None:
        hover.disconnect()


def hover_of(figure: Figure) -> HoverDispatcher | None:
    """Hover dispatcher of the latest render into *figure*."""
    ref = _HOVER.get(figure)
    return ref() if ref is not None else None


def find_by_gid(figure: Figure, gid: str) -> list[Artist]:
    """All artists in *figure* tagged with *gid*, in drawing order."""
    return figure.findobj(lambda a: a.get_gid() == gid)


def tick_label(value: float) -> str:
    return f"{value:g}"


# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------


def draw_bottom_axis(
    canvas: PixelCanvas,
    extent: tuple[float, float],
    y: float,
    positions: Sequence[float],
    labels: Sequence[str],
    gid: str = "x-axis",
) -> Rectangle:
    """Horizontal axis with ticks below the line.

    Args:
        canvas: Target canvas.
        extent: Pixel x range of the axis line.
        y: Pixel y of the axis line.
        positions: Pixel x of each tick.
        labels: Text of each tick.
        gid: Tag of the returned hover target.

    Returns:
        The hover target covering the axis band.
    """
    x0, x1 = extent
    canvas.line(
        [x0, x0, x1, x1], [y + TICK_SIZE_PX, y, y, y + TICK_SIZE_PX],
        color="black",
    )
    for px, label in zip(positions, labels, strict=True):
        canvas.line([px, px], [y, y + TICK_SIZE_PX], color="black")
        canvas.text(
            px, y + TICK_SIZE_PX + TICK_PADDING_PX, label,
            size_px=AXIS_FONT_SIZE_PX, ha="center", va="top",
        )
    return canvas.hit_box(min(x0, x1), y, abs(x1 - x0), AXIS_HIT_DEPTH_PX, gid)


def draw_left_axis(
    canvas: PixelCanvas,
    extent: tuple[float, float],
    x: float,
    positions: Sequence[float],
    labels: Sequence[str],
    gid: str = "y-axis",
) -> Rectangle:
    """Vertical axis with ticks to the left of the line."""
    y0, y1 = extent
    canvas.line(
        [x - TICK_SIZE_PX, x, x, x - TICK_SIZE_PX], [y0, y0, y1, y1],
        color="black",
    )
    for py, label in zip(positions, labels, strict=True):
        canvas.line([x - TICK_SIZE_PX, x], [py, py], color="black")
        canvas.text(
            x - TICK_SIZE_PX - TICK_PADDING_PX, py, label,
            size_px=AXIS_FONT_SIZE_PX, ha="right", va="center",
        )
    top = min(y0, y1)
    return canvas.hit_box(
        x - LEFT_AXIS_HIT_DEPTH_PX, top, LEFT_AXIS_HIT_DEPTH_PX, abs(y1 - y0), gid,
    )
