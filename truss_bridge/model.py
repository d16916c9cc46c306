# truss_bridge/model.py
"""
MODEL DEFINITIONS: Members, Solids and the Model Container
==========================================================

PURPOSE:
--------
This module defines what the generator emits:
- Beam: a straight steel member with a resolved profile
- SweptSolid: a cross-section swept along a line (the deck slab)
- Mass: a cross-section extruded along a local z axis (abutments)
- ModelCurve: a non-structural reference line (abutment depth lines)
- Model: the append-only collection holding all of the above

ENGINEERING CONTEXT:
--------------------
A truss bridge model is mostly members. Each member is a centerline plus
a cross-section (profile). The profile is resolved BEFORE the member is
created; a Beam cannot exist without one.

Members are tagged with a role so downstream code (takeoff, drawings,
tests) can ask for "the girders" or "the braces" without re-deriving
them from geometry:

    GIRDER  - the four chords running the full span
    FRAME   - the four edges of each cross-section frame
    BRACE   - the diagonals between consecutive frames
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Type

from .catalog import LIGHT_CONCRETE, STEEL, Material, Profile
from .geometry import ORIGIN, Z_AXIS, Line, Polygon, Transform, Vector3


class MemberRole(Enum):
    GIRDER = "girder"
    FRAME = "frame"
    BRACE = "brace"


@dataclass(frozen=True)
class Beam:
    """
    A straight structural member.

    Parameters:
    -----------
    curve : Line
        Member centerline
    profile : Profile
        Resolved cross-section (default or override)
    role : MemberRole
        Which layout step produced the member
    material : Material
        Defaults to STEEL
    name : str
        Optional display name
    id : int or None
        Index of the beam in its model (set by the generator)
    """
    curve: Line
    profile: Profile
    role: MemberRole
    material: Material = STEEL
    name: str = ""
    id: Optional[int] = None

    def __post_init__(self):
        if self.profile is None:
            raise ValueError(f"Beam {self.name or self.curve} has no profile")

    def length(self) -> float:
        return self.curve.length()


@dataclass(frozen=True)
class SweptSolid:
    """
    A planar profile swept along a line.

    The profile is drawn in the local XY plane of the curve's frame
    (see Line.transform_at), so local +y is "up" and local +x is the
    right-hand side of the path. `rotation` spins the profile about the
    curve, in degrees, counter-clockwise in that local plane.
    """
    profile: Polygon
    curve: Line
    material: Material = LIGHT_CONCRETE
    name: str = ""
    start_setback: float = 0.0
    end_setback: float = 0.0
    rotation: float = 0.0

    def _trimmed(self) -> Line:
        L = self.curve.length()
        u0 = self.start_setback / L
        u1 = 1.0 - self.end_setback / L
        return Line(self.curve.point_at(u0), self.curve.point_at(u1))

    def _rotated_profile(self) -> Polygon:
        if self.rotation == 0.0:
            return self.profile
        a = math.radians(self.rotation)
        spin = Transform.from_xz(ORIGIN, Vector3(math.cos(a), math.sin(a), 0.0), Z_AXIS)
        return self.profile.transformed(spin)

    def vertices(self) -> Tuple[List[Vector3], List[Vector3]]:
        """(start ring, end ring) of the swept solid in world coordinates."""
        path = self._trimmed()
        profile = self._rotated_profile()
        start = profile.transformed(path.transform_at(0.0))
        end = profile.transformed(path.transform_at(1.0))
        return list(start.vertices), list(end.vertices)

    def volume(self) -> float:
        return self.profile.area() * self._trimmed().length()


@dataclass(frozen=True)
class Mass:
    """A planar profile extruded `height` along the transform's z axis."""
    profile: Polygon
    height: float
    material: Material
    transform: Transform
    name: str = ""

    def vertices(self) -> Tuple[List[Vector3], List[Vector3]]:
        """(bottom ring, top ring) of the extrusion in world coordinates."""
        bottom = self.profile.transformed(self.transform)
        top_frame = self.transform.moved(self.transform.z_axis * self.height)
        top = self.profile.transformed(top_frame)
        return list(bottom.vertices), list(top.vertices)

    def volume(self) -> float:
        return self.profile.area() * self.height


@dataclass(frozen=True)
class ModelCurve:
    """A reference curve; carries no section and is not a member."""
    curve: Line
    name: str = ""


class Model:
    """
    Append-only collection of generated elements.

    Elements are stored in the order they were added. There is no remove
    or replace; once generation returns, the model belongs to the caller.

    Example:
    --------
    >>> model = Model()
    >>> model.add_element(ModelCurve(Line(Vector3(), Vector3(1, 0, 0))))
    >>> len(model)
    1
    """

    def __init__(self):
        self._elements: list = []

    def add_element(self, element) -> None:
        self._elements.append(element)

    @property
    def elements(self) -> tuple:
        return tuple(self._elements)

    def of_type(self, cls: Type) -> list:
        return [e for e in self._elements if isinstance(e, cls)]

    def beams(self, role: Optional[MemberRole] = None) -> List[Beam]:
        beams = self.of_type(Beam)
        if role is None:
            return beams
        return [b for b in beams if b.role == role]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator:
        return iter(self._elements)
