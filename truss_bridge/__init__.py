# truss_bridge - Parametric Truss Bridge Generator
"""
TRUSS-BRIDGE: A Parametric Bridge Geometry Generator
====================================================

This package provides:
- A one-shot generator for box-truss bridges (deck, chords, frames,
  braces, abutments)
- A wide-flange profile catalog with per-member overrides
- Steel takeoff tables and 2D/3D drawings of the result

ARCHITECTURE:
-------------
    geometry.py     Vector3, Line, Transform, Polygon (numpy-backed)
    catalog.py      Materials and W-shape profiles
    model.py        Beam, SweptSolid, Mass, ModelCurve, Model
    config.py       Generator defaults (station step, deck, abutments)
    generative/     The bridge generator
    takeoff.py      Member schedule and steel takeoff (pandas)
    viz/            Plotly 3D viewer, matplotlib plan/elevation
"""

from .geometry import Vector3, Line, Transform, Polygon, InvalidGeometryError
from .catalog import WideFlangeCatalog, WideFlangeProfileType, ProfileNotFoundError
from .generative import generate_truss_bridge, TrussBridgeParams, ProfileOverride

__version__ = "0.1.0"
