"""Packed vertex buffers for traces and a history of recent graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

Vertex = tuple[float, float, float]
ChannelGraph = Sequence[Vertex]


@dataclass(frozen=True)
class Span:
    """A run of vertices inside a graph's buffer: start offset and vertex count."""

    offset: int = 0
    count: int = 0

    @property
    def end(self) -> int:
        """Offset just past the last vertex of the span."""
        return self.offset + self.count


@dataclass
class Graph:
    """All traces of one frame packed into a single vertex buffer.

    The buffer holds, channel after channel, the voltage, histogram and
    spectrum vertices of that channel; each kind has one span per channel.
    """

    allocated: int = 0
    buffer: list[Vertex] = field(default_factory=list)
    voltage: list[Span] = field(default_factory=list)
    histogram: list[Span] = field(default_factory=list)
    spectrum: list[Span] = field(default_factory=list)

    def write_data(
        self,
        voltage: Sequence[ChannelGraph],
        histogram: Sequence[ChannelGraph] = (),
        spectrum: Sequence[ChannelGraph] = (),
    ) -> None:
        """Replace the buffer contents with the given per-channel vertex lists."""
        needed = sum(len(g) for group in (voltage, histogram, spectrum) for g in group)
        if needed > self.allocated:
            self.allocated = needed

        buffer: list[Vertex] = []
        spans: dict[str, list[Span]] = {"voltage": [], "histogram": [], "spectrum": []}
        groups = (("voltage", voltage), ("histogram", histogram), ("spectrum", spectrum))
        channels = max(len(voltage), len(histogram), len(spectrum))
        for channel in range(channels):
            for kind, group in groups:
                if channel < len(group):
                    vertices = group[channel]
                    spans[kind].append(Span(len(buffer), len(vertices)))
                    buffer.extend(tuple(v) for v in vertices)

        self.buffer = buffer
        self.voltage = spans["voltage"]
        self.histogram = spans["histogram"]
        self.spectrum = spans["spectrum"]


class GraphHistory:
    """The most recent graphs, newest first, for digital phosphor display."""

    def __init__(self) -> None:
        self._graphs: deque[Graph] = deque()

    def push(
        self,
        voltage: Sequence[ChannelGraph],
        histogram: Sequence[ChannelGraph] = (),
        spectrum: Sequence[ChannelGraph] = (),
        depth: int = 1,
    ) -> Graph:
        """Store a new frame in front, keeping at most ``depth`` graphs; return it."""
        if depth < 1:
            raise ValueError("depth must be at least 1")
        while len(self._graphs) > depth:
            self._graphs.pop()
        if len(self._graphs) < depth:
            self._graphs.append(Graph())
        # The oldest graph is reused for the newest frame.
        self._graphs.rotate(1)
        front = self._graphs[0]
        front.write_data(voltage, histogram, spectrum)
        return front

    def __iter__(self) -> Iterator[Graph]:
        return iter(self._graphs)

    def __len__(self) -> int:
        return len(self._graphs)