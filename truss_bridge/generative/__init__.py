# truss_bridge/generative - Parametric Bridge Generators
"""
GENERATIVE: Parametric Bridge Generators
========================================

This package turns a handful of geometric inputs into a structural model.

Available Generators:
---------------------
- bridge: Box-truss bridge along a straight path

USAGE:
------
    from truss_bridge.generative import generate_truss_bridge, TrussBridgeParams
    from truss_bridge.geometry import Line, Vector3

    params = TrussBridgeParams(
        path=Line(Vector3(0, 0, 0), Vector3(30, 0, 0)),
        end_elevation=1.5,
        width=4.0, height=3.0,
        abutment_locations=[Vector3(0, 0, 0), Vector3(30, 0, 0)],
    )

    out = generate_truss_bridge(params)
    print(out.span_length, out.total_steel_length)
"""

from .bridge import (
    generate_truss_bridge,
    match_profile_with_override,
    AbutmentPlacement,
    ProfileOverride,
    TrussBridgeOutputs,
    TrussBridgeParams,
)

__all__ = [
    'generate_truss_bridge',
    'match_profile_with_override',
    'AbutmentPlacement',
    'ProfileOverride',
    'TrussBridgeOutputs',
    'TrussBridgeParams',
]
