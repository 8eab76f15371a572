"""Interactive state of a scope screen: cursors, markers, mouse and wheel handling."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Sequence

from .cursors import CursorShape, ScopeCursor, cursor_vertices, snap_marker
from .graph import ChannelGraph, Graph, GraphHistory
from .grid import DIVS_SUB, DIVS_TIME, DIVS_VOLTAGE
from .view import ViewSettings

log = logging.getLogger(__name__)

Point = tuple[float, float]
Vertex = tuple[float, float, float]
MarkerListener = Callable[[int, int], None]
MeasurementListener = Callable[["Point | None", bool], None]


class MouseButton(enum.Flag):
    """Mouse buttons, combinable to describe the buttons held down."""

    NONE = 0
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()


class ScopeView:
    """The scope screen's cursors and how the pointer moves their markers.

    Cursor 0 is the horizontal (time) cursor whose markers also set the zoom
    range; it is followed by one cursor per voltage channel and one per
    spectrum channel. Listeners in ``marker_moved_listeners`` receive the
    cursor index and marker index; listeners in
    ``cursor_measurement_listeners`` receive a position in divisions (or
    None) and whether a right-button measurement is active.
    """

    def __init__(
        self,
        horizontal: ScopeCursor,
        voltage: Sequence[ScopeCursor] = (),
        spectrum: Sequence[ScopeCursor] = (),
        view: ViewSettings | None = None,
        *,
        zoomed: bool = False,
        width: int = 100,
        height: int = 80,
        trigger_position: float = 0.5,
        margin_left: float = -DIVS_TIME / 2,
        margin_right: float = DIVS_TIME / 2,
    ) -> None:
        self.view = view if view is not None else ViewSettings()
        self.zoomed = zoomed
        self.width = width
        self.height = height
        self.trigger_position = trigger_position
        self.margin_left = margin_left
        self.margin_right = margin_right
        self.cursors: list[ScopeCursor] = [horizontal, *voltage, *spectrum]
        self.selected_cursor = 0
        self.selected_marker: int | None = None
        self.right_mouse_inside = False
        self.visible = True
        self.history = GraphHistory()
        self.marker_vertices: list[list[Vertex]] = [[] for _ in self.cursors]
        self.marker_moved_listeners: list[MarkerListener] = []
        self.cursor_measurement_listeners: list[MeasurementListener] = []
        self.update_cursor()

    @classmethod
    def create_normal(cls, horizontal: ScopeCursor, *args, **kwargs) -> ScopeView:
        """A view of the full screen."""
        return cls(horizontal, *args, zoomed=False, **kwargs)

    @classmethod
    def create_zoomed(cls, horizontal: ScopeCursor, *args, **kwargs) -> ScopeView:
        """A view magnifying the range between the horizontal markers."""
        return cls(horizontal, *args, zoomed=True, **kwargs)

    # -- notifications ---------------------------------------------------

    def _marker_moved(self, cursor: int, marker: int) -> None:
        for listener in self.marker_moved_listeners:
            listener(cursor, marker)

    def _cursor_measurement(self, position: Point | None = None, status: bool = False) -> None:
        for listener in self.cursor_measurement_listeners:
            listener(position, status)

    # -- geometry ----------------------------------------------------------

    def marker(self, index: int) -> float:
        """Horizontal position of a marker of the time cursor, in divisions."""
        return self.cursors[0].pos[index][0]

    def pos_to_scope_pos(self, x: float, y: float) -> Point:
        """Convert a widget pixel position to divisions (x -5..5, y 4..-4)."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("view size must be positive")
        sx = (x - self.width / 2.0) * DIVS_TIME / self.width
        sy = (self.height / 2.0 - y) * DIVS_VOLTAGE / self.height
        if self.zoomed:
            m1, m2 = sorted((self.marker(0), self.marker(1)))
            sx = m1 + (0.5 + sx / DIVS_TIME) * (m2 - m1)
        return sx, sy

    def _inside(self, x: float, y: float) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _locked(self) -> bool:
        """The zoomed view cannot move the time markers that define it."""
        return self.zoomed and self.selected_cursor == 0

    def _set_marker(self, marker: int, position: Point) -> None:
        self.cursors[self.selected_cursor].pos[marker] = (float(position[0]), float(position[1]))

    # -- cursors -------------------------------------------------------------

    def select_cursor(self, index: int) -> None:
        """Make a cursor the one moved by the pointer."""
        if not 0 <= index < len(self.cursors):
            raise IndexError(f"no cursor {index}")
        self.selected_cursor = index
        self.update_cursor(index)

    def update_cursor(self, index: int = 0) -> None:
        """Recompute the outline of one cursor, or of all when index is 0."""
        if index > 0:
            self.marker_vertices[index] = cursor_vertices(self.cursors[index])
        else:
            self.marker_vertices = [cursor_vertices(cursor) for cursor in self.cursors]

    def set_visible(self, visible: bool) -> None:
        """Show or hide the view, ending any measurement in progress."""
        if not visible and self.right_mouse_inside:
            self._cursor_measurement()
        self.right_mouse_inside = False
        self.visible = visible

    def show_data(
        self,
        voltage: Sequence[ChannelGraph],
        histogram: Sequence[ChannelGraph] = (),
        spectrum: Sequence[ChannelGraph] = (),
    ) -> Graph:
        """Add a new frame of traces, keeping as many as phosphor depth allows."""
        return self.history.push(voltage, histogram, spectrum, depth=self.view.digital_phosphor_draws())

    # -- pointer ----------------------------------------------------------

    def _right_mouse(self, x: float, y: float) -> None:
        if self._inside(x, y):
            self.right_mouse_inside = True
            self._cursor_measurement(self.pos_to_scope_pos(x, y), True)
        else:
            self.right_mouse_inside = False
            self._cursor_measurement()

    def mouse_press(
        self, x: float, y: float, button: MouseButton, buttons: MouseButton | None = None
    ) -> None:
        """Grab the marker near the pointer, or start a measurement with the right button."""
        if buttons is None:
            buttons = button
        position = self.pos_to_scope_pos(x, y)
        if not self._locked() and button == MouseButton.LEFT:
            cursor = self.cursors[self.selected_cursor]
            self.selected_marker = snap_marker(cursor, position[0], position[1], 1.0 / DIVS_SUB)
            if self.selected_marker is not None:
                self._set_marker(self.selected_marker, position)
                if self.selected_cursor == 0:
                    self._marker_moved(self.selected_cursor, self.selected_marker)
        elif buttons & MouseButton.RIGHT:
            self._right_mouse(x, y)

    def mouse_move(self, x: float, y: float, buttons: MouseButton) -> None:
        """Drag the grabbed marker, or both markers if none was grabbed."""
        position = self.pos_to_scope_pos(x, y)
        if not self._locked() and buttons & MouseButton.LEFT:
            if self.selected_marker is None:
                # Dragging from outside any snap area moves both markers.
                for marker in (0, 1):
                    self._set_marker(marker, position)
                    self._marker_moved(self.selected_cursor, marker)
                    self.selected_marker = marker
            else:
                self._set_marker(self.selected_marker, position)
                self._marker_moved(self.selected_cursor, self.selected_marker)
        elif buttons & MouseButton.RIGHT:
            self._right_mouse(x, y)

    def mouse_release(self, x: float, y: float, button: MouseButton) -> None:
        """Drop the grabbed marker and end any measurement."""
        if not self._locked() and button == MouseButton.LEFT:
            if self.selected_marker is not None:
                self._set_marker(self.selected_marker, self.pos_to_scope_pos(x, y))
                self._marker_moved(self.selected_cursor, self.selected_marker)
            self.selected_marker = None
        if self.right_mouse_inside:
            self._cursor_measurement()
        self.right_mouse_inside = False

    def mouse_double_click(
        self, x: float, y: float, buttons: MouseButton, ctrl: bool = False, shift: bool = False
    ) -> None:
        """Left: place markers around the pointer (10x, or 100x with ctrl).

        With shift the markers are centred on the trigger position. Right:
        move both markers to the screen margins.
        """
        if self._locked():
            return
        if buttons & MouseButton.LEFT:
            if self.selected_marker is not None:
                return
            px, py = self.pos_to_scope_pos(x, y)
            half = 0.05 if ctrl else 0.5
            if shift:
                px, py = 10 * self.trigger_position - 5, 0.0
            self._set_marker(0, (px - half, py))
            self._marker_moved(self.selected_cursor, 0)
            self._set_marker(1, (px + half, py))
            self._marker_moved(self.selected_cursor, 1)
            self.selected_marker = None
        elif buttons & MouseButton.RIGHT:
            self._set_marker(0, (self.margin_left, 0.0))
            self._set_marker(1, (self.margin_right, 0.0))
            self._marker_moved(self.selected_cursor, 0)
            self._marker_moved(self.selected_cursor, 1)

    def wheel(self, delta: float, ctrl: bool = False, shift: bool = False) -> None:
        """Zoom (ctrl) or shift the marker range; one wheel click is 120 units."""
        if self.selected_marker is not None:
            return
        cursor = self.cursors[self.selected_cursor]
        (m1, y0), (m2, y1) = cursor.pos
        if m1 > m2:
            m1, m2 = m2, m1
        step = delta / 1200.0
        dm = m2 - m1
        if ctrl:
            if (step > 0 and dm <= 1) or (step < 0 and dm <= 0.99):
                step *= 0.1
            if step < 0 or dm >= 5 * step:
                m1 += step
                m2 -= step
            else:
                mid = (m1 + m2) / 2
                m1, m2 = mid - 0.01, mid + 0.01
        else:
            if step < 0:
                step = max(step, self.margin_left - m1)
            else:
                step = min(step, self.margin_right - m2)
            if shift:
                step *= (m2 - m1) if m2 - m1 < 0.1 else 0.1
            m1 += step
            m2 += step
        cursor.pos = [(m1, y0), (m2, y1)]
        self._marker_moved(self.selected_cursor, 0)
        self._marker_moved(self.selected_cursor, 1)
        self.selected_marker = None

    @property
    def shape(self) -> CursorShape:
        """Shape of the selected cursor."""
        return self.cursors[self.selected_cursor].shape