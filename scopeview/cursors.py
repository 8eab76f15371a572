"""Measurement cursors: their on-screen outline and marker snapping."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .grid import DIVS_SUB, DIVS_TIME, DIVS_VOLTAGE

Point = tuple[float, float]
Vertex = tuple[float, float, float]

Z_ORDER = 1.0


class CursorShape(enum.Enum):
    """How a cursor is drawn and which coordinates its markers measure."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2
    RECTANGULAR = 3


def _default_pos() -> list[Point]:
    return [(-1.0, -1.0), (1.0, 1.0)]


@dataclass
class ScopeCursor:
    """A cursor given by two marker positions in screen divisions."""

    shape: CursorShape = CursorShape.NONE
    pos: list[Point] = field(default_factory=_default_pos)

    def __post_init__(self) -> None:
        if len(self.pos) != 2:
            raise ValueError("a cursor has exactly two markers")
        self.pos = [(float(x), float(y)) for x, y in self.pos]


def cursor_vertices(
    cursor: ScopeCursor, divs_time: float = DIVS_TIME, divs_voltage: float = DIVS_VOLTAGE
) -> list[Vertex]:
    """The four corners of the cursor outline, in drawing order."""
    (x0, y0), (x1, y1) = cursor.pos
    z = Z_ORDER
    if cursor.shape is CursorShape.NONE:
        return [
            (-divs_time, -divs_voltage, z),
            (-divs_time, divs_voltage, z),
            (divs_time, divs_voltage, z),
            (divs_time, -divs_voltage, z),
        ]
    if cursor.shape is CursorShape.VERTICAL:
        return [(x0, -divs_voltage, z), (x0, divs_voltage, z), (x1, divs_voltage, z), (x1, -divs_voltage, z)]
    if cursor.shape is CursorShape.HORIZONTAL:
        return [(-divs_time, y0, z), (divs_time, y0, z), (divs_time, y1, z), (-divs_time, y1, z)]
    # Rectangle: keep a consistent winding whatever the diagonal's direction.
    if (x1 - x0) * (y1 - y0) > 0.0:
        return [(x0, y0, z), (x1, y0, z), (x1, y1, z), (x0, y1, z)]
    return [(x0, y0, z), (x0, y1, z), (x1, y1, z), (x1, y0, z)]


def snap_marker(cursor: ScopeCursor, x: float, y: float, snap: float = 1.0 / DIVS_SUB) -> int | None:
    """Index of the marker within ``snap`` of (x, y), or None.

    For a rectangular cursor the markers' y coordinates are swapped when the
    nearest marker in x is not the nearest in y, so the grabbed corner is the
    one under the pointer.
    """
    (x0, y0), (x1, y1) = cursor.pos
    dx0, dx1 = abs(x0 - x), abs(x1 - x)
    dy0, dy1 = abs(y0 - y), abs(y1 - y)

    if cursor.shape is CursorShape.RECTANGULAR:
        if min(dx0, dx1) < snap and min(dy0, dy1) < snap:
            if (dx0 < dx1 and dy0 > dy1) or (dx0 > dx1 and dy0 < dy1):
                cursor.pos = [(x0, y1), (x1, y0)]
            return 0 if dx0 < dx1 else 1
        return None
    if cursor.shape is CursorShape.VERTICAL:
        if dx0 < dx1:
            return 0 if dx0 < snap else None
        return 1 if dx1 < snap else None
    if cursor.shape is CursorShape.HORIZONTAL:
        if dy0 < dy1:
            return 0 if dy0 < snap else None
        return 1 if dy1 < snap else None
    return None