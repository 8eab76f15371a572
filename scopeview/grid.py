"""Vertex lists for the scope graticule and the trigger level line."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Vertex = tuple[float, float, float]

DIVS_TIME = 10.0
DIVS_VOLTAGE = 8.0
DIVS_SUB = 5


@dataclass
class Grid:
    """Graticule sections: dots (points), axes (lines), border (loop), trigger (lines)."""

    dots: list[Vertex] = field(default_factory=list)
    axes: list[Vertex] = field(default_factory=list)
    border: list[Vertex] = field(default_factory=list)
    trigger: list[Vertex] = field(default_factory=list)

    @property
    def counts(self) -> tuple[int, int, int, int]:
        """Vertex counts of the four sections, in drawing-buffer order."""
        return len(self.dots), len(self.axes), len(self.border), len(self.trigger)


def _below(limit: float) -> range:
    """Positive integers strictly below ``limit``."""
    return range(1, max(1, math.ceil(limit)))


def _cross(x: float, y: float, size: float = 0.05) -> list[Vertex]:
    """Four small crosses at (+-x, +-y)."""
    out: list[Vertex] = []
    for xs in (-1.0, 1.0):
        for ys in (-1.0, 1.0):
            out += [
                (xs * (x - size), ys * y, 0.0),
                (xs * (x + size), ys * y, 0.0),
                (xs * x, ys * (y - size), 0.0),
                (xs * x, ys * (y + size), 0.0),
            ]
    return out


def generate_grid(
    divs_time: float = DIVS_TIME, divs_voltage: float = DIVS_VOLTAGE, divs_sub: int = DIVS_SUB
) -> Grid:
    """Build the static graticule centred on the origin."""
    if divs_sub <= 0:
        raise ValueError("divs_sub must be positive")
    half_t = divs_time / 2
    half_v = divs_voltage / 2
    grid = Grid()

    for vdiv in _below(half_t):
        for dot in _below(half_v * divs_sub):
            pos = dot / divs_sub
            grid.dots += [(-vdiv, -pos, 0.0), (-vdiv, pos, 0.0), (vdiv, -pos, 0.0), (vdiv, pos, 0.0)]
    for hdiv in _below(half_v):
        for dot in _below(half_t * divs_sub):
            if dot % divs_sub == 0:
                continue  # already on a vertical dot line
            pos = dot / divs_sub
            grid.dots += [(-pos, -hdiv, 0.0), (pos, -hdiv, 0.0), (-pos, hdiv, 0.0), (pos, hdiv, 0.0)]

    grid.axes += [(-half_t, 0.0, 0.0), (half_t, 0.0, 0.0)]
    grid.axes += [(0.0, -half_v, 0.0), (0.0, half_v, 0.0)]
    for line in _below(half_t * divs_sub):
        pos = line / divs_sub
        grid.axes += [(pos, -0.05, 0.0), (pos, 0.05, 0.0), (-pos, -0.05, 0.0), (-pos, 0.05, 0.0)]
    for line in _below(half_v * divs_sub):
        pos = line / divs_sub
        grid.axes += [(-0.05, pos, 0.0), (0.05, pos, 0.0), (-0.05, -pos, 0.0), (0.05, -pos, 0.0)]
    for vdiv in _below(half_t):
        for hdiv in _below(half_v):
            grid.axes += _cross(float(vdiv), float(hdiv))
    for hdiv in _below(half_v):
        for vdiv in _below(half_t):
            if vdiv % divs_sub == 0:
                continue
            grid.axes += _cross(float(vdiv), float(hdiv))

    grid.border = [
        (-half_t, -half_v, 0.0),
        (half_t, -half_v, 0.0),
        (half_t, half_v, 0.0),
        (-half_t, half_v, 0.0),
    ]
    return grid


def trigger_line(value: float, gain: float, offset: float, divs_time: float = DIVS_TIME) -> list[Vertex]:
    """Horizontal line across the screen at a trigger level given in volts."""
    if gain == 0:
        raise ValueError("gain must not be zero")
    y = value / gain + offset
    return [(-divs_time / 2, y, 0.0), (divs_time / 2, y, 0.0)]