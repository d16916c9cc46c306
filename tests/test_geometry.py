# File: tests/test_geometry.py
"""
Test the geometry kernel (vectors, lines, frames, polygons).

The bridge layout depends on two conventions lining up:
- Line.offset(+d) moves to the RIGHT of travel
- Line.transform_at(u) has its local +x pointing to the RIGHT of travel

If either flips, girders and frame corners stop meeting. These tests pin
both down.
"""

import numpy as np
import pytest

from truss_bridge.geometry import (
    InvalidGeometryError,
    Line,
    Polygon,
    Transform,
    Vector3,
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
)


def test_vector_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)

    assert a + b == Vector3(5.0, 7.0, 9.0)
    assert b - a == Vector3(3.0, 3.0, 3.0)
    assert -a == Vector3(-1.0, -2.0, -3.0)
    assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
    assert 2.0 * a == Vector3(2.0, 4.0, 6.0)
    assert a.dot(b) == pytest.approx(32.0)
    assert X_AXIS.cross(Y_AXIS).is_almost_equal_to(Z_AXIS)

    print("✓ Vector arithmetic works")


def test_vector_length_and_unitize():
    v = Vector3(3.0, 4.0, 0.0)
    assert v.length() == pytest.approx(5.0)
    assert v.unitized().is_almost_equal_to(Vector3(0.6, 0.8, 0.0))

    with pytest.raises(InvalidGeometryError):
        Vector3(0.0, 0.0, 0.0).unitized()

    print("✓ Vector length / unitize works")


def test_is_almost_equal_to_tolerance():
    a = Vector3(1.0, 1.0, 1.0)
    assert a.is_almost_equal_to(Vector3(1.0 + 1e-7, 1.0, 1.0 - 1e-7))
    assert not a.is_almost_equal_to(Vector3(1.001, 1.0, 1.0))
    assert a.is_almost_equal_to(Vector3(1.001, 1.0, 1.0), tolerance=0.01)


def test_line_basics():
    line = Line(Vector3(0, 0, 0), Vector3(3, 4, 0))

    assert line.length() == pytest.approx(5.0)
    assert line.direction().is_almost_equal_to(Vector3(0.6, 0.8, 0.0))
    assert line.point_at(0.5).is_almost_equal_to(Vector3(1.5, 2.0, 0.0))
    # Extrapolates beyond the ends
    assert line.point_at(2.0).is_almost_equal_to(Vector3(6.0, 8.0, 0.0))


def test_zero_length_line_has_no_direction():
    line = Line(Vector3(1, 1, 1), Vector3(1, 1, 1))
    assert line.length() == 0.0
    with pytest.raises(InvalidGeometryError):
        line.direction()


def test_offset_goes_right_of_travel():
    """
    Walking along +x, the right-hand side is -y.
    """
    line = Line(Vector3(0, 0, 0), Vector3(10, 0, 0))

    right = line.offset(2.0)
    assert right.start.is_almost_equal_to(Vector3(0, -2, 0))
    assert right.end.is_almost_equal_to(Vector3(10, -2, 0))

    left = line.offset(-2.0)
    assert left.start.is_almost_equal_to(Vector3(0, 2, 0))

    flipped = line.offset(2.0, flip=True)
    assert flipped.start.is_almost_equal_to(left.start)

    print("✓ Offset direction is right of travel")


def test_offset_of_sloped_line_is_horizontal():
    """
    The offset vector stays in the XY plane and keeps its full distance,
    so a sloped line offsets by exactly `distance` horizontally.
    """
    line = Line(Vector3(0, 0, 0), Vector3(10, 0, 5))
    right = line.offset(3.0)

    delta = right.start - line.start
    assert delta.z == pytest.approx(0.0)
    assert delta.length() == pytest.approx(3.0)
    assert right.length() == pytest.approx(line.length())


def test_offset_vertical_line_raises():
    line = Line(Vector3(0, 0, 0), Vector3(0, 0, 5))
    with pytest.raises(InvalidGeometryError):
        line.offset(1.0)


def test_transform_at_axes_on_horizontal_line():
    """
    Local frame of a +x line: x to the right (-y), y up (+z), z backwards (-x).
    """
    line = Line(Vector3(0, 0, 0), Vector3(10, 0, 0))
    t = line.transform_at(0.3)

    assert t.origin.is_almost_equal_to(Vector3(3, 0, 0))
    assert t.x_axis.is_almost_equal_to(Vector3(0, -1, 0))
    assert t.y_axis.is_almost_equal_to(Vector3(0, 0, 1))
    assert t.z_axis.is_almost_equal_to(Vector3(-1, 0, 0))


def test_transform_at_is_orthonormal_on_sloped_line():
    line = Line(Vector3(1, 2, 0), Vector3(11, 7, 4))
    t = line.transform_at(0.5)

    M = t.as_matrix()[:3, :3]
    np.testing.assert_allclose(M.T @ M, np.eye(3), atol=1e-12)
    # x stays horizontal, y has an upward component
    assert t.x_axis.z == pytest.approx(0.0)
    assert t.y_axis.z > 0.0
    # Right-handed
    assert np.linalg.det(M) == pytest.approx(1.0)


def test_transform_offset_and_frame_agree():
    """
    The +w/2 corner of a local frame lies on the +w/2 offset of the line.
    """
    line = Line(Vector3(0, 0, 0), Vector3(8, 6, 0))
    t = line.transform_at(0.25)
    corner = t.of_point(Vector3(1.5, 0.0))
    right = line.offset(1.5)

    assert corner.is_almost_equal_to(right.point_at(0.25))


def test_transform_from_z_vertical_falls_back_to_x():
    t = Transform.from_z(Vector3(0, 0, 0), Z_AXIS)
    assert t.x_axis.is_almost_equal_to(X_AXIS)
    assert t.y_axis.is_almost_equal_to(Y_AXIS)


def test_transform_moved_returns_new_frame():
    t = Transform()
    moved = t.moved(Vector3(0, 0, 2))
    assert moved.origin == Vector3(0, 0, 2)
    assert t.origin == Vector3(0, 0, 0)
    assert moved.of_point(Vector3(1, 0, 0)).is_almost_equal_to(Vector3(1, 0, 2))


def test_rectangle_vertices_and_segments():
    rect = Polygon.rectangle(4.0, 3.0)

    assert rect.vertices[0] == Vector3(-2.0, -1.5)
    assert rect.vertices[2] == Vector3(2.0, 1.5)

    segs = rect.segments()
    assert len(segs) == 4
    assert [s.length() for s in segs] == pytest.approx([4.0, 3.0, 4.0, 3.0])
    # Closed: last edge ends where the first starts
    assert segs[-1].end == segs[0].start
    assert rect.area() == pytest.approx(12.0)

    print("✓ Rectangle segments and area work")


def test_rectangle_from_corners():
    rect = Polygon.rectangle_from_corners(Vector3(-2.0, 0.1), Vector3(2.0, 0.2))
    assert rect.area() == pytest.approx(0.4)
    ys = sorted({v.y for v in rect.vertices})
    assert ys == pytest.approx([0.1, 0.2])


def test_degenerate_polygons_raise():
    with pytest.raises(InvalidGeometryError):
        Polygon.rectangle(0.0, 3.0)
    with pytest.raises(InvalidGeometryError):
        Polygon.rectangle(4.0, -1.0)
    with pytest.raises(InvalidGeometryError):
        Polygon((Vector3(0, 0), Vector3(1, 0)))


def test_polygon_transformed():
    rect = Polygon.rectangle(2.0, 2.0)
    t = Transform().moved(Vector3(5, 5, 5))
    moved = rect.transformed(t)

    assert moved.vertices[0].is_almost_equal_to(Vector3(4, 4, 5))
    # Area is measured in the polygon's own XY plane
    assert rect.area() == pytest.approx(4.0)


if __name__ == "__main__":
    test_vector_arithmetic()
    test_vector_length_and_unitize()
    test_offset_goes_right_of_travel()
    test_rectangle_vertices_and_segments()
    print("\n✅ All geometry tests passed!")
