# truss_bridge/config.py
"""
Generator configuration and defaults.
"""

from dataclasses import dataclass
from typing import List

from .catalog import WideFlangeProfileType
from .geometry import EPSILON


@dataclass
class BridgeConfig:
    """Global generator configuration."""

    # Frame stations
    station_step: float = 3.0  # m between cross-section frames

    # Deck slab (measured from the elevated centerline)
    deck_offset: float = 0.1  # m, underside of slab above centerline
    deck_thickness: float = 0.1  # m

    # Abutments
    abutment_ground_z: float = -5.0  # m, bottom of every abutment
    abutment_margin: float = 2.0  # m, added to deck width
    abutment_thickness: float = 2.0  # m, along the path

    # Default profiles
    primary_profile: WideFlangeProfileType = WideFlangeProfileType.W14x22
    secondary_profile: WideFlangeProfileType = WideFlangeProfileType.W8x48

    # Override matching
    tolerance: float = EPSILON

    # Available options
    steel_length_policies: List[str] = None
    brace_layouts: List[str] = None

    def __post_init__(self):
        if self.steel_length_policies is None:
            self.steel_length_policies = ['path', 'member']
        if self.brace_layouts is None:
            self.brace_layouts = ['mirrored', 'legacy']


# Global config instance
CONFIG = BridgeConfig()
