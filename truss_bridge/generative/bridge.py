# truss_bridge/generative/bridge.py
r"""
TRUSS BRIDGE GENERATOR: Parametric Box-Truss Bridges
====================================================

PURPOSE:
--------
Generate the structural model of a box-truss bridge from a handful of
geometric inputs: a centerline, an end elevation, a width, a height, a list
of abutment locations and optional per-member profile overrides.

ENGINEERING CONTEXT:
--------------------
The bridge is a rectangular "tube" of steel running along the path:

        upper-left  o-----------------------o  upper-right
                    |\                     /|
                    | \    frame (W x H)  / |     <- repeated every
                    |  \                 /  |        station_step
         lower-left o-----------------------o lower-right
                         deck slab on top of the centerline

The generator creates, in order:
1. The ELEVATED PATH: the input path with its end raised to end_elevation
2. The DECK: a thin slab swept along the elevated path
3. Four GIRDERS (chords): lower/upper x left/right, running the full span
4. FRAMES: a W x H rectangle of 4 members at each station along the path
5. BRACES: two diagonals between each pair of consecutive frames
6. ABUTMENTS: a concrete mass under each requested support location

It also reports two metrics:
- span_length: length of the RAW input path (independent of end elevation)
- total_steel_length: sum of member lengths (deck and abutments excluded)

STATIONS:
---------
Stations are visited by repeated addition, i = 0, step, 2*step, ... while
i <= L. A path of length 9 with step 3 gets stations at 0, 3, 6 and 9
(4 stations); a path of length 10 gets the same 4 stations and no frame
at the far end.

PROFILE OVERRIDES:
------------------
A ProfileOverride identifies a member by its centerline endpoints. Any
member whose start and end match (within tolerance) gets the named
profile instead of its default. The first matching override wins. An
override naming a profile the catalog does not carry is an error.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Literal, Optional, Tuple

from ..catalog import (
    LIGHT_CONCRETE,
    Profile,
    ProfileNotFoundError,
    WideFlangeCatalog,
    WideFlangeProfileType,
)
from ..config import CONFIG
from ..geometry import EPSILON, InvalidGeometryError, Line, Polygon, Transform, Vector3, Z_AXIS
from ..model import Beam, Mass, MemberRole, Model, ModelCurve, SweptSolid


@dataclass(frozen=True)
class ProfileOverride:
    """
    Replace the profile of the member whose centerline matches `identity`.

    Parameters:
    -----------
    identity : Line
        Centerline of the member to override (start and end must match)
    profile_name : str
        Catalog name of the replacement profile, e.g. "W12x50"
    """
    identity: Line
    profile_name: str


@dataclass
class TrussBridgeParams:
    """
    Parameters defining a truss bridge.

    Geometry:
    ---------
    path : Line
        Horizontal alignment of the bridge centerline. Only the XY of the
        end point is used for layout; its Z is replaced by end_elevation.
    end_elevation : float
        Elevation of the far end of the centerline (m)
    width : float
        Out-to-out width of the truss box (m)
    height : float
        Height of the truss box, lower to upper chord (m)

    Supports:
    ---------
    abutment_locations : List[Vector3]
        Requested support points. Each is projected onto the path; points
        projecting beyond either end give extrapolated abutments.

    Profiles:
    ---------
    overrides : Optional[List[ProfileOverride]]
        Per-member profile replacements (matched by centerline)
    primary_profile, secondary_profile : WideFlangeProfileType
        Defaults for girders and for frames/braces

    Layout constants:
    -----------------
    station_step : float
        Distance between frame stations (m)
    deck_offset, deck_thickness : float
        Slab position above the centerline and slab thickness (m)
    abutment_ground_z, abutment_margin, abutment_thickness : float
        Abutment bottom elevation, extra width beyond the deck, and size
        along the path (m)

    Policies:
    ---------
    steel_length_policy : str
        How the four girders count toward total steel length:
        - 'path': 4 × elevated path length
        - 'member': sum of each girder's own length
    brace_layout : str
        - 'mirrored': left brace uses the left-side corners
        - 'legacy': left brace repeats the right brace's centerline
          and override key (two coincident braces per bay)
    """
    # Geometry
    path: Line
    end_elevation: float = 0.0
    width: float = 4.0
    height: float = 3.0

    # Supports
    abutment_locations: List[Vector3] = field(default_factory=list)

    # Profiles
    overrides: Optional[List[ProfileOverride]] = None
    primary_profile: WideFlangeProfileType = CONFIG.primary_profile
    secondary_profile: WideFlangeProfileType = CONFIG.secondary_profile

    # Layout constants
    station_step: float = CONFIG.station_step
    deck_offset: float = CONFIG.deck_offset
    deck_thickness: float = CONFIG.deck_thickness
    abutment_ground_z: float = CONFIG.abutment_ground_z
    abutment_margin: float = CONFIG.abutment_margin
    abutment_thickness: float = CONFIG.abutment_thickness
    tolerance: float = CONFIG.tolerance

    # Policies
    steel_length_policy: Literal['path', 'member'] = 'path'
    brace_layout: Literal['mirrored', 'legacy'] = 'mirrored'


@dataclass(frozen=True)
class AbutmentPlacement:
    """Where a requested abutment location ended up on the path."""
    location: Vector3
    distance: float  # along the elevated path from its start (m)
    parameter: float  # distance / L, may fall outside [0, 1]
    point: Vector3  # projected point on the elevated path
    depth_line: Line  # from ground reference up to the path


@dataclass
class TrussBridgeOutputs:
    """
    Result of a generation run.

    Attributes:
        model:              All generated elements
        span_length:        Length of the raw input path (m)
        total_steel_length: Sum of member lengths (m)
        elevated_path:      Centerline used for the layout
        stations:           Distances along the path where frames were built
        abutments:          One placement record per requested location
    """
    model: Model
    span_length: float
    total_steel_length: float
    elevated_path: Line
    stations: List[float] = field(default_factory=list)
    abutments: List[AbutmentPlacement] = field(default_factory=list)


# ============================================================================
# PROFILE RESOLUTION
# ============================================================================

def match_profile_with_override(
    line: Line,
    default_profile: Profile,
    overrides: Optional[List[ProfileOverride]],
    catalog: WideFlangeCatalog,
    tolerance: float = EPSILON,
) -> Profile:
    """
    Resolve the profile for a member centerline.

    Parameters:
    -----------
    line : Line
        The member centerline
    default_profile : Profile
        Profile to use when no override matches
    overrides : Optional[List[ProfileOverride]]
        Candidate overrides; the first whose identity matches start-to-start
        and end-to-end within `tolerance` is used
    catalog : WideFlangeCatalog
        Used to look up the override's profile by name

    Returns:
    --------
    Profile
        The override's profile, or default_profile

    Raises:
    -------
    ProfileNotFoundError
        If the matching override names a profile the catalog does not have
    """
    if not overrides:
        return default_profile

    for override in overrides:
        seg = override.identity
        if seg.start.is_almost_equal_to(line.start, tolerance) and \
                seg.end.is_almost_equal_to(line.end, tolerance):
            profile = catalog.get_profile_by_name(override.profile_name)
            if profile is None:
                raise ProfileNotFoundError(
                    f"Override profile '{override.profile_name}' is not in the catalog "
                    f"(member {_fmt_line(line)})"
                )
            return profile

    return default_profile


def _fmt_line(line: Line) -> str:
    s, e = line.start, line.end
    return f"({s.x:.3f}, {s.y:.3f}, {s.z:.3f}) -> ({e.x:.3f}, {e.y:.3f}, {e.z:.3f})"


# ============================================================================
# LAYOUT STEPS
# ============================================================================

def _validate_params(params: TrussBridgeParams) -> None:
    """Reject inputs that cannot produce a bridge."""
    if params.path.length() <= EPSILON:
        raise InvalidGeometryError(
            f"Bridge path has zero length: {_fmt_line(params.path)}"
        )
    horizontal = params.path.end - params.path.start
    if Vector3(horizontal.x, horizontal.y, 0.0).length() <= EPSILON:
        raise InvalidGeometryError(
            f"Bridge path is vertical and has no horizontal alignment: {_fmt_line(params.path)}"
        )
    # Same threshold Line.offset applies to the girders
    elevated = elevated_path_of(params.path, params.end_elevation)
    if elevated.direction().cross(Z_AXIS).length() <= EPSILON:
        raise InvalidGeometryError(
            f"Bridge path is too close to vertical after raising its end to "
            f"{params.end_elevation}: {_fmt_line(elevated)}"
        )
    if params.width <= 0.0:
        raise InvalidGeometryError(f"Bridge width must be positive, got {params.width}")
    if params.height <= 0.0:
        raise InvalidGeometryError(f"Bridge height must be positive, got {params.height}")
    if params.station_step <= 0.0:
        raise InvalidGeometryError(f"Station step must be positive, got {params.station_step}")

    if params.steel_length_policy not in CONFIG.steel_length_policies:
        raise ValueError(f"Unknown steel_length_policy: {params.steel_length_policy}")
    if params.brace_layout not in CONFIG.brace_layouts:
        raise ValueError(f"Unknown brace_layout: {params.brace_layout}")


def elevated_path_of(path: Line, end_elevation: float) -> Line:
    """The input path with its end point moved to `end_elevation`."""
    return Line(path.start, Vector3(path.end.x, path.end.y, end_elevation))


def _layout_deck(model: Model, params: TrussBridgeParams, elevated_path: Line) -> None:
    hw = params.width / 2.0
    section = Polygon.rectangle_from_corners(
        Vector3(-hw, params.deck_offset),
        Vector3(hw, params.deck_offset + params.deck_thickness),
    )
    model.add_element(SweptSolid(
        profile=section,
        curve=elevated_path,
        material=LIGHT_CONCRETE,
        name="Bridge Deck",
    ))


def _layout_girders(
    model: Model,
    params: TrussBridgeParams,
    elevated_path: Line,
    primary: Profile,
    catalog: WideFlangeCatalog,
) -> float:
    """Add the four chords. Returns their contribution to steel length."""
    hw = params.width / 2.0
    up = Vector3(0.0, 0.0, params.height)

    right = elevated_path.offset(hw)
    left = elevated_path.offset(-hw)
    chords = [
        ("Right Girder", right),
        ("Left Girder", left),
        ("Upper Right Girder", right.translated(up)),
        ("Upper Left Girder", left.translated(up)),
    ]

    for name, curve in chords:
        profile = match_profile_with_override(
            curve, primary, params.overrides, catalog, params.tolerance)
        model.add_element(Beam(curve=curve, profile=profile, role=MemberRole.GIRDER,
                               name=name, id=len(model)))

    if params.steel_length_policy == 'path':
        # All four chords are counted at the centerline length
        return 4.0 * elevated_path.length()
    return sum(curve.length() for _, curve in chords)


def _stations(length: float, step: float) -> Iterator[float]:
    """Distances 0, step, 2*step, ... up to and including `length`."""
    i = 0.0
    while i <= length:
        yield i
        i += step


def _station_frame(elevated_path: Line, distance: float, length: float, height: float) -> Transform:
    t = elevated_path.transform_at(distance / length)
    return t.moved(Vector3(0.0, 0.0, height / 2.0))


def _brace_lines(
    t: Transform,
    t_prev: Transform,
    width: float,
    height: float,
    layout: str,
) -> Tuple[Line, Line, Line, Line]:
    """
    Centerlines for the two braces of a bay, plus the centerline each one
    is matched against for overrides.

    Returns (right, right_key, left, left_key).
    """
    hw, hh = width / 2.0, height / 2.0
    right = Line(t.of_point(Vector3(hw, hh)), t_prev.of_point(Vector3(hw, -hh)))
    if layout == 'legacy':
        return right, right, right, right
    left = Line(t.of_point(Vector3(-hw, hh)), t_prev.of_point(Vector3(-hw, -hh)))
    return right, right, left, left


def _layout_frames_and_braces(
    model: Model,
    params: TrussBridgeParams,
    elevated_path: Line,
    secondary: Profile,
    catalog: WideFlangeCatalog,
) -> Tuple[float, List[float]]:
    """
    Walk the stations, adding a frame at each and braces between them.

    Returns (steel length added, station distances).
    """
    L = elevated_path.length()
    rectangle = Polygon.rectangle(params.width, params.height)
    steel_length = 0.0
    stations = []
    t_prev = None

    for i in _stations(L, params.station_step):
        t = _station_frame(elevated_path, i, L, params.height)

        for s in rectangle.transformed(t).segments():
            profile = match_profile_with_override(
                s, secondary, params.overrides, catalog, params.tolerance)
            model.add_element(Beam(curve=s, profile=profile, role=MemberRole.FRAME,
                                   name=f"Frame {len(stations)}", id=len(model)))
            steel_length += s.length()

        if t_prev is not None:
            right, right_key, left, left_key = _brace_lines(
                t, t_prev, params.width, params.height, params.brace_layout)
            for name, curve, key in (("Right Brace", right, right_key),
                                     ("Left Brace", left, left_key)):
                profile = match_profile_with_override(
                    key, secondary, params.overrides, catalog, params.tolerance)
                brace = Beam(curve=curve, profile=profile, role=MemberRole.BRACE,
                             name=name, id=len(model))
                model.add_element(brace)
                steel_length += brace.length()

        stations.append(i)
        t_prev = t

    return steel_length, stations


def _place_abutments(
    model: Model,
    params: TrussBridgeParams,
    elevated_path: Line,
) -> List[AbutmentPlacement]:
    """Project each requested location onto the path and drop a mass to ground."""
    L = elevated_path.length()
    path_dir = elevated_path.direction()
    shape = Polygon.rectangle(params.width + params.abutment_margin, params.abutment_thickness)
    placements = []

    for location in params.abutment_locations:
        distance = path_dir.dot(location - elevated_path.start)
        p = elevated_path.start + path_dir * distance
        depth_line = Line(Vector3(p.x, p.y, params.abutment_ground_z), p)
        model.add_element(ModelCurve(curve=depth_line, name="Abutment Depth"))

        u = distance / L
        path_t = elevated_path.transform_at(u)
        final_t = Transform.from_xz(depth_line.start, path_t.x_axis, Z_AXIS)
        model.add_element(Mass(
            profile=shape,
            height=depth_line.length(),
            material=LIGHT_CONCRETE,
            transform=final_t,
            name="Abutment",
        ))

        placements.append(AbutmentPlacement(
            location=location,
            distance=distance,
            parameter=u,
            point=p,
            depth_line=depth_line,
        ))

    return placements


# ============================================================================
# ENTRY POINT
# ============================================================================

def generate_truss_bridge(
    params: TrussBridgeParams,
    catalog: Optional[WideFlangeCatalog] = None,
) -> TrussBridgeOutputs:
    """
    Generate a complete truss bridge model from parameters.

    Parameters:
    -----------
    params : TrussBridgeParams
        Design parameters for the bridge
    catalog : Optional[WideFlangeCatalog]
        Profile lookup service. A fresh full catalog is used if omitted.

    Returns:
    --------
    TrussBridgeOutputs
        The model plus span length and total steel length

    Raises:
    -------
    InvalidGeometryError
        Zero-length or vertical path, non-positive width/height/step
    ProfileNotFoundError
        An override names a profile the catalog does not carry

    Example:
    --------
    >>> path = Line(Vector3(0, 0, 0), Vector3(30, 0, 0))
    >>> out = generate_truss_bridge(TrussBridgeParams(path=path, width=4, height=3))
    >>> out.span_length
    30.0
    """
    _validate_params(params)
    if catalog is None:
        catalog = WideFlangeCatalog()

    model = Model()
    elevated_path = elevated_path_of(params.path, params.end_elevation)

    _layout_deck(model, params, elevated_path)

    primary = catalog.get_profile_by_type(params.primary_profile)
    secondary = catalog.get_profile_by_type(params.secondary_profile)

    total_steel_length = 0.0
    total_steel_length += _layout_girders(model, params, elevated_path, primary, catalog)

    frame_length, stations = _layout_frames_and_braces(
        model, params, elevated_path, secondary, catalog)
    total_steel_length += frame_length

    abutments = _place_abutments(model, params, elevated_path)

    return TrussBridgeOutputs(
        model=model,
        span_length=params.path.length(),
        total_steel_length=total_steel_length,
        elevated_path=elevated_path,
        stations=stations,
        abutments=abutments,
    )


def compute_member_lengths(model: Model) -> List[Tuple[int, float]]:
    """
    Compute lengths of all members for cut list.

    Returns:
    --------
    List of (member index, length) tuples sorted by length, where the index
    refers to model.beams()
    """
    lengths = [(idx, beam.length()) for idx, beam in enumerate(model.beams())]
    return sorted(lengths, key=lambda x: x[1])


def compute_length_bins(
    lengths: List[Tuple[int, float]],
    tolerance: float = 0.005  # 5mm tolerance
) -> Dict[str, List[int]]:
    """
    Group members into length bins for fabrication.

    Members within `tolerance` of a bin's reference length share the bin.
    Fewer bins = fewer distinct cuts.

    Returns:
    --------
    Dict mapping bin label, e.g. "L1 (3000mm)", to member indices
    """
    bins: List[Tuple[float, List[int]]] = []

    for idx, length in lengths:
        for ref_length, members in bins:
            if abs(length - ref_length) <= tolerance:
                members.append(idx)
                break
        else:
            bins.append((length, [idx]))

    return {
        f"L{n + 1} ({ref_length*1000:.0f}mm)": members
        for n, (ref_length, members) in enumerate(bins)
    }
