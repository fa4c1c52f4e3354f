"""Shared hover tooltip for a rendered chart.

Each render creates one ``TooltipController`` and one
``HoverDispatcher``. Every interactive artist of the chart is bound to
the dispatcher with its own text producer, so at most one tooltip is
visible per chart.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matplotlib.artist import Artist
    from matplotlib.backend_bases import Event, MouseEvent
    from matplotlib.figure import Figure
    from matplotlib.text import Annotation

logger = logging.getLogger(__name__)


@dataclass
class TooltipState:
    """Visibility, figure-pixel position and text of the tooltip."""

    visible: bool = False
    x: float = 0.0
    y: float = 0.0
    text: str = ""

    @property
    def opacity(self) -> float:
        return 1.0 if self.visible else 0.0


class TooltipController:
    """Two-state (hidden/visible) tooltip.

    When an annotation is attached, every transition is mirrored onto it.
    Hiding keeps the last text and position; they are never observed
    while the annotation is transparent.
    """

    def __init__(self, annotation: Annotation | None = None) -> None:
        self.state = TooltipState()
        self._annotation = annotation
        self._sync()

    @property
    def visible(self) -> bool:
        return self.state.visible

    @property
    def opacity(self) -> float:
        return self.state.opacity

    @property
    def text(self) -> str:
        return self.state.text

    @property
    def position(self) -> tuple[float, float]:
        return (self.state.x, self.state.y)

    def show(self, position: tuple[float, float], text: str) -> None:
        """Show *text* at *position*; an empty text leaves the state as is."""
        if text == "":
            return
        self.state.visible = True
        self.state.x, self.state.y = float(position[0]), float(position[1])
        self.state.text = text
        self._sync()

    def hide(self) -> None:
        self.state.visible = False
        self._sync()

    def _sync(self) -> None:
        annotation = self._annotation
        if annotation is None:
            return

        position = self.position
        annotation.set_text(self.state.text)
        annotation.xy = position
        annotation.xyann = position
        annotation.set_alpha(self.opacity)
        bbox = annotation.get_bbox_patch()
        if bbox is not None:
            bbox.set_alpha(self.opacity)
        annotation.set_visible(self.state.visible)

        figure = annotation.get_figure()
        if figure is not None and figure.canvas is not None:
            figure.canvas.draw_idle()


TextProducer = Callable[[], str]


class HoverDispatcher:
    """Routes pointer motion over bound artists to one tooltip.

    Entering a bound artist shows the text its producer returns; leaving
    it hides the tooltip. Where bound artists overlap, the one bound last
    wins.
    """

    def __init__(self, figure: Figure, tooltip: TooltipController) -> None:
        self.figure = figure
        self.tooltip = tooltip
        self._bindings: list[tuple[Artist, TextProducer]] = []
        self._hovered: Artist | None = None
        self._cids: list[int] = []

    @property
    def hovered(self) -> Artist | None:
        return self._hovered

    @property
    def artists(self) -> list[Artist]:
        return [artist for artist, _ in self._bindings]

    def bind(self, artist: Artist, producer: TextProducer) -> Artist:
        """Make *artist* interactive; returns it for chaining."""
        self._bindings.append((artist, producer))
        return artist

    def connect(self) -> None:
        # Closures are held strongly by the figure's callback registry,
        # which keeps the dispatcher alive exactly as long as the figure.
        canvas = self.figure.canvas
        self._cids = [
            canvas.mpl_connect("motion_notify_event", lambda event: self.on_motion(event)),
            canvas.mpl_connect("figure_leave_event", lambda event: self.on_leave(event)),
        ]

    def disconnect(self) -> None:
        for cid in self._cids:
            self.figure.canvas.mpl_disconnect(cid)
        self._cids = []
        self._hovered = None

    def target_at(self, event: MouseEvent) -> tuple[Artist, TextProducer] | None:
        """Topmost bound artist under the pointer, with its producer."""
        for artist, producer in reversed(self._bindings):
            if not artist.get_visible():
                continue
            hit, _ = artist.contains(event)
            if hit:
                return artist, producer
        return None

    def on_motion(self, event: MouseEvent) -> None:
        target = self.target_at(event)
        artist = target[0] if target is not None else None
        if artist is self._hovered:
            return

        if self._hovered is not None:
            self.tooltip.hide()
        self._hovered = artist

        if target is not None:
            text = target[1]()
            logger.debug("Hover on %s (gid=%s)", type(artist).__name__, artist.get_gid())
            self.tooltip.show((event.x, event.y), text)

    def on_leave(self, event: Event) -> None:
        if self._hovered is not None:
            self._hovered = None
            self.tooltip.hide()
