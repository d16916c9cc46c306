"""
CATALOG: MATERIALS AND WIDE-FLANGE PROFILES
===========================================

PURPOSE:
--------
This module defines the materials and the steel profile catalog the bridge
generator draws its members from. Instead of hardcoding flange and web
dimensions for every member, members reference a named W shape and the
catalog resolves it.

WHY A CATALOG SERVICE?
----------------------
1. **Overrides by name**: Users swap a member's profile by writing a name
   like "W12x50". The catalog is the single place that turns that name into
   dimensions (or reports that no such shape exists).

2. **Takeoff**: Steel weight = area × length × density. Having the area on
   the profile makes this a one-liner per member.

3. **No ambient state**: The generator receives a catalog instance as an
   argument. Tests can pass a reduced catalog; nothing is looked up from a
   process-wide singleton.

ENGINEERING CONTEXT:
--------------------
W shapes are designated by nominal depth (in) × weight (lb/ft), e.g.
W14x22 is ~14 in deep and weighs 22 lb/ft. Dimensions below are from the
AISC Steel Construction Manual, converted to metres.

- Primary members (the four chords) default to W14x22.
- Secondary members (frames and braces) default to W8x48.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .geometry import Polygon, Vector3


INCH = 0.0254  # m


class ProfileNotFoundError(LookupError):
    """Raised when a profile name cannot be resolved by the catalog."""
    pass


@dataclass(frozen=True)
class Material:
    """
    Material used for display and takeoff.

    Parameters:
    -----------
    name : str
        Human-readable name (e.g., "Steel", "Light Concrete")
    color : Tuple[float, float, float, float]
        RGBA, each component 0-1
    density : float
        Material density (kg/m³), used to compute weight = density × volume
    """
    name: str
    color: Tuple[float, float, float, float]
    density: float  # kg/m³


STEEL = Material(name="Steel", color=(0.6, 0.6, 0.65, 1.0), density=7850.0)

LIGHT_CONCRETE = Material(name="Light Concrete", color=(1.0, 1.0, 1.0, 1.0), density=1800.0)


@dataclass(frozen=True)
class Profile:
    """
    A wide-flange (I-shaped) cross-section.

    Parameters:
    -----------
    name : str
        AISC designation, e.g. "W14x22"
    depth : float
        Overall depth d (m)
    flange_width : float
        Flange width bf (m)
    web_thickness : float
        Web thickness tw (m)
    flange_thickness : float
        Flange thickness tf (m)

    Notes:
    ------
    Area is computed from the plate dimensions (fillets ignored), so it is
    slightly below the tabulated AISC area.
    """
    name: str
    depth: float
    flange_width: float
    web_thickness: float
    flange_thickness: float

    @property
    def area(self) -> float:
        web_height = self.depth - 2.0 * self.flange_thickness
        return 2.0 * self.flange_width * self.flange_thickness + web_height * self.web_thickness

    def outline(self) -> Polygon:
        """The 12-point I-shape outline, centered on the origin."""
        hd = self.depth / 2.0
        hb = self.flange_width / 2.0
        hw = self.web_thickness / 2.0
        yf = hd - self.flange_thickness
        return Polygon.from_points([
            Vector3(-hb, -hd), Vector3(hb, -hd), Vector3(hb, -yf), Vector3(hw, -yf),
            Vector3(hw, yf), Vector3(hb, yf), Vector3(hb, hd), Vector3(-hb, hd),
            Vector3(-hb, yf), Vector3(-hw, yf), Vector3(-hw, -yf), Vector3(-hb, -yf),
        ])


class WideFlangeProfileType(Enum):
    W6x15 = "W6x15"
    W8x31 = "W8x31"
    W8x48 = "W8x48"
    W10x33 = "W10x33"
    W12x26 = "W12x26"
    W12x50 = "W12x50"
    W14x22 = "W14x22"
    W14x48 = "W14x48"
    W16x36 = "W16x36"
    W18x50 = "W18x50"
    W21x62 = "W21x62"
    W24x76 = "W24x76"


# ============================================================================
# PROFILE DEFINITIONS
# ============================================================================

# (d, bf, tw, tf) in inches, AISC Manual Table 1-1
_W_SHAPES_IN: Dict[WideFlangeProfileType, Tuple[float, float, float, float]] = {
    WideFlangeProfileType.W6x15: (5.99, 5.99, 0.230, 0.260),
    WideFlangeProfileType.W8x31: (8.00, 8.00, 0.285, 0.435),
    WideFlangeProfileType.W8x48: (8.50, 8.11, 0.400, 0.685),
    WideFlangeProfileType.W10x33: (9.73, 7.96, 0.290, 0.435),
    WideFlangeProfileType.W12x26: (12.2, 6.49, 0.230, 0.380),
    WideFlangeProfileType.W12x50: (12.2, 8.08, 0.370, 0.640),
    WideFlangeProfileType.W14x22: (13.7, 5.00, 0.230, 0.335),
    WideFlangeProfileType.W14x48: (13.8, 8.03, 0.340, 0.595),
    WideFlangeProfileType.W16x36: (15.9, 6.99, 0.295, 0.430),
    WideFlangeProfileType.W18x50: (18.0, 7.50, 0.355, 0.570),
    WideFlangeProfileType.W21x62: (21.0, 8.24, 0.400, 0.615),
    WideFlangeProfileType.W24x76: (23.9, 8.99, 0.440, 0.680),
}


def _make_profile(profile_type: WideFlangeProfileType) -> Profile:
    d, bf, tw, tf = _W_SHAPES_IN[profile_type]
    return Profile(
        name=profile_type.value,
        depth=d * INCH,
        flange_width=bf * INCH,
        web_thickness=tw * INCH,
        flange_thickness=tf * INCH,
    )


class WideFlangeCatalog:
    """
    Read-only lookup service for W shapes.

    Two lookups, matching how members get their profiles:
    - get_profile_by_type(): defaults, always succeeds
    - get_profile_by_name(): user overrides, returns None for unknown names

    A reduced catalog (built from a subset of profile_types) only narrows
    the NAME lookup and `in`. get_profile_by_type() still builds any
    enumerated shape on demand, so the generator's defaults resolve even
    when `CONFIG.secondary_profile.value in catalog` is False. To limit
    the shapes a bridge may use, restrict the overrides, not the defaults.

    Example:
    --------
    >>> catalog = WideFlangeCatalog()
    >>> catalog.get_profile_by_type(WideFlangeProfileType.W14x22).name
    'W14x22'
    >>> catalog.get_profile_by_name("W99x1") is None
    True
    """

    def __init__(self, profile_types: Optional[Iterable[WideFlangeProfileType]] = None):
        if profile_types is None:
            profile_types = list(WideFlangeProfileType)
        self._profiles: Dict[str, Profile] = {
            t.value: _make_profile(t) for t in profile_types
        }

    def get_profile_by_type(self, profile_type: WideFlangeProfileType) -> Profile:
        profile = self._profiles.get(profile_type.value)
        if profile is None:
            # Reduced catalogs still know every enumerated shape
            profile = _make_profile(profile_type)
        return profile

    def get_profile_by_name(self, name: str) -> Optional[Profile]:
        return self._profiles.get(name)

    def names(self) -> List[str]:
        return list(self._profiles)

    def __contains__(self, name: str) -> bool:
        return name in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)
