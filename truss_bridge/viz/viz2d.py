# truss_bridge/viz/viz2d.py
"""
2D DRAWINGS: Plan and Elevation
===============================

Quick matplotlib drawings of a generated bridge, in the spirit of a
general arrangement sheet:
- plot_bridge_plan(): looking down (X-Y)
- plot_bridge_elevation(): looking from the side, horizontal axis is the
  distance along the alignment
"""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from ..geometry import Vector3
from ..model import Mass, MemberRole, Model, ModelCurve, SweptSolid


COLORS = {
    MemberRole.GIRDER: '#2C3E50',
    MemberRole.FRAME: '#E67E22',
    MemberRole.BRACE: '#27AE60',
    'deck': '#BDC3C7',
    'abutment': '#95A5A6',
    'reference': '#7F8C8D',
}


def _alignment(model: Model):
    """Origin and horizontal unit direction of the bridge, from the deck."""
    decks = model.of_type(SweptSolid)
    if decks:
        path = decks[0].curve
    else:
        beams = model.beams(MemberRole.GIRDER)
        if not beams:
            raise ValueError("Model has no deck or girders to define an alignment")
        path = beams[0].curve
    d = path.end - path.start
    horizontal = np.array([d.x, d.y])
    horizontal = horizontal / np.linalg.norm(horizontal)
    return path.start, horizontal


def _station(p: Vector3, origin: Vector3, horizontal: np.ndarray) -> float:
    return float(np.dot([p.x - origin.x, p.y - origin.y], horizontal))


def plot_bridge_plan(model: Model, ax: Optional[plt.Axes] = None, title: str = "Plan"):
    """
    Draw the bridge in plan (X-Y).

    Returns:
    --------
    plt.Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))

    for deck in model.of_type(SweptSolid):
        start, end = deck.vertices()
        ring = [start[0], start[1], end[1], end[0], start[0]]
        ax.fill([p.x for p in ring], [p.y for p in ring],
                color=COLORS['deck'], alpha=0.5, zorder=1, label='Deck')

    for mass in model.of_type(Mass):
        bottom, _ = mass.vertices()
        ring = bottom + [bottom[0]]
        ax.fill([p.x for p in ring], [p.y for p in ring],
                color=COLORS['abutment'], alpha=0.8, zorder=2)

    for role in MemberRole:
        for n, beam in enumerate(model.beams(role)):
            s, e = beam.curve.start, beam.curve.end
            ax.plot([s.x, e.x], [s.y, e.y], color=COLORS[role], lw=1.5, zorder=3,
                    label=role.value.capitalize() if n == 0 else None)

    ax.set_aspect('equal')
    ax.set_xlabel('X (m)')
    ax.set_ylabel('Y (m)')
    ax.set_title(title)
    ax.legend(loc='upper right', fontsize=8)
    ax.grid(True, alpha=0.3)
    return ax


def plot_bridge_elevation(model: Model, ax: Optional[plt.Axes] = None, title: str = "Elevation"):
    """
    Draw the bridge in elevation (distance along alignment vs Z).

    Returns:
    --------
    plt.Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))

    origin, horizontal = _alignment(model)

    for mass in model.of_type(Mass):
        bottom, top = mass.vertices()
        stations = [_station(p, origin, horizontal) for p in bottom]
        s0, s1 = min(stations), max(stations)
        z0, z1 = bottom[0].z, top[0].z
        ax.fill([s0, s1, s1, s0], [z0, z0, z1, z1],
                color=COLORS['abutment'], alpha=0.8, zorder=1)

    for curve in model.of_type(ModelCurve):
        s, e = curve.curve.start, curve.curve.end
        ax.plot([_station(s, origin, horizontal), _station(e, origin, horizontal)],
                [s.z, e.z], color=COLORS['reference'], lw=1, ls='--', zorder=2)

    for role in MemberRole:
        for n, beam in enumerate(model.beams(role)):
            s, e = beam.curve.start, beam.curve.end
            ax.plot([_station(s, origin, horizontal), _station(e, origin, horizontal)],
                    [s.z, e.z], color=COLORS[role], lw=1.5, zorder=3,
                    label=role.value.capitalize() if n == 0 else None)

    ax.set_xlabel('Distance along alignment (m)')
    ax.set_ylabel('Z (m)')
    ax.set_title(title)
    ax.legend(loc='upper right', fontsize=8)
    ax.grid(True, alpha=0.3)
    return ax
