import pytest

from scopeview.cursors import CursorShape, ScopeCursor, cursor_vertices, snap_marker


def test_cursor_requires_two_markers():
    with pytest.raises(ValueError):
        ScopeCursor(CursorShape.VERTICAL, [(0.0, 0.0)])


def test_none_shape_covers_double_extent():
    cursor = ScopeCursor(CursorShape.NONE, [(0.5, 0.5), (1.5, 1.5)])
    verts = cursor_vertices(cursor, 10.0, 8.0)
    xs = {v[0] for v in verts}
    ys = {v[1] for v in verts}
    assert xs == {-10.0, 10.0}
    assert ys == {-8.0, 8.0}
    assert all(v[2] == 1.0 for v in verts)


def test_vertical_vertices_span_full_height():
    cursor = ScopeCursor(CursorShape.VERTICAL, [(-2.0, 0.3), (3.0, -0.7)])
    verts = cursor_vertices(cursor, 10.0, 8.0)
    assert verts == [(-2.0, -8.0, 1.0), (-2.0, 8.0, 1.0), (3.0, 8.0, 1.0), (3.0, -8.0, 1.0)]


def test_horizontal_vertices_span_full_width():
    cursor = ScopeCursor(CursorShape.HORIZONTAL, [(0.1, -1.0), (0.2, 2.0)])
    verts = cursor_vertices(cursor, 10.0, 8.0)
    assert verts == [(-10.0, -1.0, 1.0), (10.0, -1.0, 1.0), (10.0, 2.0, 1.0), (-10.0, 2.0, 1.0)]


@pytest.mark.parametrize(
    "pos",
    [[(-1.0, -2.0), (3.0, 4.0)], [(-1.0, 4.0), (3.0, -2.0)], [(3.0, 4.0), (-1.0, -2.0)]],
)
def test_rectangle_corners_are_the_box(pos):
    cursor = ScopeCursor(CursorShape.RECTANGULAR, pos)
    verts = cursor_vertices(cursor)
    corners = {(v[0], v[1]) for v in verts}
    (x0, y0), (x1, y1) = pos
    assert corners == {(x0, y0), (x0, y1), (x1, y0), (x1, y1)}
    assert verts[0][:2] == (x0, y0)
    assert verts[2][:2] == (x1, y1)
    # consecutive corners share one coordinate: an outline, not a diagonal
    for a, b in zip(verts, verts[1:] + verts[:1]):
        assert a[0] == b[0] or a[1] == b[1]


def test_vertical_snap_picks_nearest_in_range():
    cursor = ScopeCursor(CursorShape.VERTICAL, [(-2.0, 0.0), (2.0, 0.0)])
    assert snap_marker(cursor, -1.95, 3.0) == 0
    assert snap_marker(cursor, 2.1, -3.0) == 1
    assert snap_marker(cursor, 0.0, 0.0) is None


def test_horizontal_snap_uses_y():
    cursor = ScopeCursor(CursorShape.HORIZONTAL, [(0.0, -1.0), (0.0, 1.0)])
    assert snap_marker(cursor, 4.0, -1.05) == 0
    assert snap_marker(cursor, -4.0, 0.95) == 1
    assert snap_marker(cursor, 0.0, 0.0) is None


def test_none_shape_never_snaps():
    cursor = ScopeCursor(CursorShape.NONE, [(0.0, 0.0), (1.0, 1.0)])
    assert snap_marker(cursor, 0.0, 0.0) is None


def test_rectangle_snap_without_swap():
    cursor = ScopeCursor(CursorShape.RECTANGULAR, [(-1.0, -1.0), (1.0, 1.0)])
    assert snap_marker(cursor, 0.95, 1.05) == 1
    assert cursor.pos == [(-1.0, -1.0), (1.0, 1.0)]


def test_rectangle_snap_swaps_y_at_off_corner():
    cursor = ScopeCursor(CursorShape.RECTANGULAR, [(-1.0, -1.0), (1.0, 1.0)])
    assert snap_marker(cursor, -1.0, 1.0) == 0
    assert cursor.pos == [(-1.0, 1.0), (1.0, -1.0)]


def test_rectangle_snap_needs_both_coordinates_close():
    cursor = ScopeCursor(CursorShape.RECTANGULAR, [(-1.0, -1.0), (1.0, 1.0)])
    assert snap_marker(cursor, -1.0, 0.0) is None
    assert cursor.pos == [(-1.0, -1.0), (1.0, 1.0)]


def test_custom_snap_distance():
    cursor = ScopeCursor(CursorShape.VERTICAL, [(0.0, 0.0), (5.0, 0.0)])
    assert snap_marker(cursor, 1.0, 0.0) is None
    assert snap_marker(cursor, 1.0, 0.0, snap=1.5) == 0