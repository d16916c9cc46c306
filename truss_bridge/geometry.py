# truss_bridge/geometry.py
"""
GEOMETRY: Points, Lines, Frames and Polygons
============================================

PURPOSE:
--------
This module provides the small geometry kernel the bridge generator is
built on:
- Vector3: a point or direction in 3D space
- Line: a straight segment (centerlines, girders, braces)
- Transform: a local coordinate frame (origin + three unit axes)
- Polygon: a planar outline (cross-sections, frame rectangles)

All math is done with numpy; the dataclasses are frozen so that geometry
can never be mutated after it has been placed into a model.

COORDINATE CONVENTIONS:
-----------------------
- Global frame is right-handed: x=east, y=north, z=up.
- A line's local frame (Line.transform_at) looks BACK along the line:

      z_local = -direction            (pointing back toward the start)
      x_local = unit(Z x z_local)     (horizontal, to the RIGHT of travel)
      y_local = z_local x x_local     (perpendicular to the line, "up")

  so a cross-section drawn in local XY sits upright across the path, with
  +x on the right-hand side and +y above the centerline.

- Line.offset() uses the same "right of travel" direction, so an offset of
  +w/2 lands exactly on the +w/2 corner of a cross-section at that station.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np


EPSILON = 1e-5  # Point comparison tolerance (m)


class InvalidGeometryError(ValueError):
    """Raised when geometry is degenerate (zero length, zero area, ...)."""
    pass


@dataclass(frozen=True)
class Vector3:
    """
    A point or direction in 3D space.

    Examples:
    ---------
    >>> a = Vector3(1.0, 2.0, 0.0)
    >>> b = Vector3(0.0, 0.0, 3.0)
    >>> (a + b).z
    3.0
    >>> Vector3(3.0, 4.0, 0.0).length()
    5.0
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, arr) -> "Vector3":
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: "Vector3") -> float:
        return float(np.dot(self.as_array(), other.as_array()))

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3.from_array(np.cross(self.as_array(), other.as_array()))

    def length(self) -> float:
        return float(np.linalg.norm(self.as_array()))

    def unitized(self) -> "Vector3":
        """
        Return the unit vector in the same direction.

        Raises:
        -------
        InvalidGeometryError
            If the vector has (near) zero length and has no direction.
        """
        L = self.length()
        if L <= EPSILON * EPSILON:
            raise InvalidGeometryError(f"Cannot unitize zero-length vector {self}")
        return self * (1.0 / L)

    def is_almost_equal_to(self, other: "Vector3", tolerance: float = EPSILON) -> bool:
        return bool(np.allclose(self.as_array(), other.as_array(), rtol=0.0, atol=tolerance))


ORIGIN = Vector3(0.0, 0.0, 0.0)
X_AXIS = Vector3(1.0, 0.0, 0.0)
Y_AXIS = Vector3(0.0, 1.0, 0.0)
Z_AXIS = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Transform:
    """
    A local coordinate frame: an origin plus three orthonormal axes.

    Points expressed in local coordinates are mapped to global coordinates
    with of_point():

        p_global = origin + x_axis * p.x + y_axis * p.y + z_axis * p.z
    """
    origin: Vector3 = ORIGIN
    x_axis: Vector3 = X_AXIS
    y_axis: Vector3 = Y_AXIS
    z_axis: Vector3 = Z_AXIS

    @classmethod
    def from_z(cls, origin: Vector3, z: Vector3) -> "Transform":
        """
        Build a frame from an origin and a z axis.

        x is chosen horizontal (Z x z); when z is vertical there is no
        unique horizontal direction and global X is used instead.
        """
        z = z.unitized()
        if abs(z.dot(Z_AXIS)) >= 1.0 - EPSILON:
            x = X_AXIS
        else:
            x = Z_AXIS.cross(z).unitized()
        y = z.cross(x).unitized()
        return cls(origin, x, y, z)

    @classmethod
    def from_xz(cls, origin: Vector3, x: Vector3, z: Vector3) -> "Transform":
        """Build a frame from an origin, an x axis and a z axis (y = z x x)."""
        x = x.unitized()
        z = z.unitized()
        y = z.cross(x).unitized()
        return cls(origin, x, y, z)

    def of_vector(self, v: Vector3) -> Vector3:
        return self.x_axis * v.x + self.y_axis * v.y + self.z_axis * v.z

    def of_point(self, p: Vector3) -> Vector3:
        return self.origin + self.of_vector(p)

    def moved(self, v: Vector3) -> "Transform":
        """Return a copy of this frame with its origin translated by v."""
        return Transform(self.origin + v, self.x_axis, self.y_axis, self.z_axis)

    def as_matrix(self) -> np.ndarray:
        """4x4 homogeneous matrix (columns are x, y, z, origin)."""
        M = np.eye(4)
        M[:3, 0] = self.x_axis.as_array()
        M[:3, 1] = self.y_axis.as_array()
        M[:3, 2] = self.z_axis.as_array()
        M[:3, 3] = self.origin.as_array()
        return M


@dataclass(frozen=True)
class Line:
    """
    A straight segment from start to end.

    Parameters:
    -----------
    start : Vector3
        First endpoint
    end : Vector3
        Second endpoint

    Notes:
    ------
    - Parameter u runs from 0 (start) to 1 (end); point_at() and
      transform_at() extrapolate linearly outside that range.
    - direction() raises InvalidGeometryError for a zero-length line.
    """
    start: Vector3
    end: Vector3

    def length(self) -> float:
        return (self.end - self.start).length()

    def direction(self) -> Vector3:
        d = self.end - self.start
        if d.length() <= EPSILON * EPSILON:
            raise InvalidGeometryError(
                f"Line has zero length (start and end at same location: "
                f"({self.start.x}, {self.start.y}, {self.start.z}))"
            )
        return d.unitized()

    def point_at(self, u: float) -> Vector3:
        return self.start + (self.end - self.start) * u

    def transform_at(self, u: float) -> Transform:
        """Local frame at parameter u (see module docstring for the axes)."""
        return Transform.from_z(self.point_at(u), -self.direction())

    def translated(self, v: Vector3) -> "Line":
        return Line(self.start + v, self.end + v)

    def offset(self, distance: float, flip: bool = False) -> "Line":
        """
        Offset the line horizontally by `distance`.

        Positive distances move to the right of travel. The offset vector
        lies in the XY plane (it is not tilted with the slope of the line),
        and both endpoints move by the same vector.

        Raises:
        -------
        InvalidGeometryError
            If the line is vertical (no horizontal direction to offset in).
        """
        side = self.direction().cross(Z_AXIS)
        if side.length() <= EPSILON:
            raise InvalidGeometryError("Cannot offset a vertical line horizontally")
        side = side.unitized()
        if flip:
            side = -side
        return self.translated(side * distance)


@dataclass(frozen=True)
class Polygon:
    """
    A closed planar outline defined by its vertices (last connects to first).

    Polygons are usually built in local XY (z=0) and then placed into the
    world with transformed().
    """
    vertices: Tuple[Vector3, ...]

    def __post_init__(self):
        if len(self.vertices) < 3:
            raise InvalidGeometryError(
                f"Polygon needs at least 3 vertices, got {len(self.vertices)}"
            )

    @classmethod
    def from_points(cls, points: Sequence[Vector3]) -> "Polygon":
        return cls(tuple(points))

    @classmethod
    def rectangle(cls, width: float, height: float) -> "Polygon":
        """
        Rectangle centered on the origin in the XY plane.

        Vertex order (counter-clockwise):
            (-w/2, -h/2) -> (w/2, -h/2) -> (w/2, h/2) -> (-w/2, h/2)
        """
        if width <= 0.0 or height <= 0.0:
            raise InvalidGeometryError(
                f"Rectangle needs positive width and height, got {width} x {height}"
            )
        hw, hh = width / 2.0, height / 2.0
        return cls.rectangle_from_corners(Vector3(-hw, -hh), Vector3(hw, hh))

    @classmethod
    def rectangle_from_corners(cls, lower: Vector3, upper: Vector3) -> "Polygon":
        """Axis-aligned rectangle in the XY plane from its min and max corners."""
        if upper.x - lower.x <= 0.0 or upper.y - lower.y <= 0.0:
            raise InvalidGeometryError(
                f"Rectangle corners do not span an area: {lower} -> {upper}"
            )
        return cls((
            Vector3(lower.x, lower.y),
            Vector3(upper.x, lower.y),
            Vector3(upper.x, upper.y),
            Vector3(lower.x, upper.y),
        ))

    def transformed(self, t: Transform) -> "Polygon":
        return Polygon(tuple(t.of_point(v) for v in self.vertices))

    def segments(self) -> List[Line]:
        """One Line per edge, in vertex order, including the closing edge."""
        n = len(self.vertices)
        return [Line(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    def area(self) -> float:
        """Area of the outline in its own XY plane (shoelace formula)."""
        xs = np.array([v.x for v in self.vertices])
        ys = np.array([v.y for v in self.vertices])
        return float(0.5 * abs(np.dot(xs, np.roll(ys, -1)) - np.dot(ys, np.roll(xs, -1))))
