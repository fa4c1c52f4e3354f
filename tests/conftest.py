"""Shared fixtures: headless backend, figure cleanup, simulated pointer."""

from __future__ import annotations

from collections.abc import Generator

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from matplotlib.artist import Artist
from matplotlib.backend_bases import LocationEvent, MouseEvent
from matplotlib.figure import Figure


class Pointer:
    """Drives a figure's hover callbacks the way a mouse would."""

    def move_display(self, fig: Figure, x: float, y: float) -> None:
        event = MouseEvent("motion_notify_event", fig.canvas, x, y)
        fig.canvas.callbacks.process("motion_notify_event", event)

    def move(self, fig: Figure, x: float, y: float) -> None:
        """Move to canvas pixel (x, y), y growing downwards."""
        fig.canvas.draw()
        dx, dy = fig.axes[0].transData.transform((x, y))
        self.move_display(fig, dx, dy)

    def over(self, fig: Figure, artist: Artist) -> None:
        """Move to the centre of *artist* as drawn."""
        fig.canvas.draw()
        bbox = artist.get_window_extent(fig.canvas.get_renderer())
        self.move_display(fig, (bbox.x0 + bbox.x1) / 2, (bbox.y0 + bbox.y1) / 2)

    def leave(self, fig: Figure) -> None:
        event = LocationEvent("figure_leave_event", fig.canvas, 0, 0)
        fig.canvas.callbacks.process("figure_leave_event", event)


@pytest.fixture()
def pointer() -> Pointer:
    return Pointer()


@pytest.fixture(autouse=True)
def _close_figures() -> Generator[None, None, None]:
    """Close all matplotlib figures after each test."""
    yield
    plt.close("all")
