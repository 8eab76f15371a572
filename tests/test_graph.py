import pytest

from scopeview.graph import Graph, GraphHistory, Span


def _trace(n, y=0.0):
    return [(float(i), y, 0.0) for i in range(n)]


def test_spans_are_contiguous_and_cover_buffer():
    graph = Graph()
    voltage = [_trace(3), _trace(2)]
    histogram = [_trace(4)]
    spectrum = [_trace(5), _trace(1)]
    graph.write_data(voltage, histogram, spectrum)
    spans = sorted(graph.voltage + graph.histogram + graph.spectrum, key=lambda s: s.offset)
    position = 0
    for span in spans:
        assert span.offset == position
        position = span.end
    assert position == len(graph.buffer)


def test_channel_interleaving_order():
    graph = Graph()
    v0, v1 = _trace(2, 1.0), _trace(2, 2.0)
    h0 = _trace(1, 3.0)
    s0, s1 = _trace(3, 4.0), _trace(1, 5.0)
    graph.write_data([v0, v1], [h0], [s0, s1])
    assert graph.buffer == v0 + h0 + s0 + v1 + s1
    assert graph.voltage[1] == Span(len(v0) + len(h0) + len(s0), len(v1))


def test_span_contents_match_input():
    graph = Graph()
    voltage = [_trace(3, 7.0)]
    spectrum = [_trace(2, 8.0)]
    graph.write_data(voltage, (), spectrum)
    v = graph.voltage[0]
    s = graph.spectrum[0]
    assert graph.buffer[v.offset : v.end] == voltage[0]
    assert graph.buffer[s.offset : s.end] == spectrum[0]
    assert graph.histogram == []


def test_allocation_grows_but_never_shrinks():
    graph = Graph()
    graph.write_data([_trace(10)])
    assert graph.allocated == 10
    graph.write_data([_trace(4)])
    assert graph.allocated == 10
    assert len(graph.buffer) == 4
    graph.write_data([_trace(6), _trace(6)])
    assert graph.allocated == 12


def test_history_limited_by_depth_and_newest_first():
    history = GraphHistory()
    for n in range(1, 6):
        history.push([_trace(n)], depth=3)
    assert len(history) == 3
    counts = [g.voltage[0].count for g in history]
    assert counts == [5, 4, 3]


def test_history_reuses_oldest_graph():
    history = GraphHistory()
    first = history.push([_trace(1)], depth=2)
    second = history.push([_trace(2)], depth=2)
    third = history.push([_trace(3)], depth=2)
    assert third is first
    assert list(history) == [first, second]


def test_history_shrinks_when_depth_drops():
    history = GraphHistory()
    for n in range(1, 5):
        history.push([_trace(n)], depth=4)
    assert len(history) == 4
    newest = history.push([_trace(9)], depth=1)
    assert len(history) == 1
    assert list(history) == [newest]
    assert newest.voltage[0].count == 9


def test_history_rejects_zero_depth():
    history = GraphHistory()
    with pytest.raises(ValueError):
        history.push([_trace(1)], depth=0)