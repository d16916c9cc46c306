# truss_bridge/viz/viz3d.py
"""
3D VISUALIZATION: Interactive Bridge Viewer
===========================================

PURPOSE:
--------
Create interactive 3D visualizations of generated bridges using Plotly:
- Members drawn as lines, colored by role or by profile
- Deck slab and abutments drawn as solid meshes
- Abutment depth lines drawn dashed
- Export to HTML for sharing

WHY PLOTLY?
-----------
- Interactive (rotate, zoom, pan)
- Works in Jupyter notebooks and as standalone HTML
- No CAD viewer needed to check a generated layout
"""

import os
from typing import Dict, List, Literal, Optional, Sequence, Tuple

import plotly.graph_objects as go

from ..geometry import Vector3
from ..model import Beam, Mass, MemberRole, Model, ModelCurve, SweptSolid


ROLE_COLORS = {
    MemberRole.GIRDER: 'steelblue',
    MemberRole.FRAME: 'darkorange',
    MemberRole.BRACE: 'seagreen',
}

PROFILE_PALETTE = [
    '#1f77b4', '#ff7f0e', '#2ca02c', '#d62728', '#9467bd',
    '#8c564b', '#e377c2', '#7f7f7f', '#bcbd22', '#17becf',
]


def _rgba(color: Tuple[float, float, float, float]) -> str:
    r, g, b, a = color
    return f'rgba({int(255 * r)}, {int(255 * g)}, {int(255 * b)}, {a})'


def _prism_mesh(bottom: Sequence[Vector3], top: Sequence[Vector3]):
    """
    Triangulate a prism given its two matching vertex rings.

    Returns x, y, z vertex lists and i, j, k triangle index lists.
    """
    n = len(bottom)
    pts = list(bottom) + list(top)
    x = [p.x for p in pts]
    y = [p.y for p in pts]
    z = [p.z for p in pts]
    i, j, k = [], [], []

    # Sides: one quad (two triangles) per edge
    for a in range(n):
        b = (a + 1) % n
        i += [a, a]
        j += [b, b + n]
        k += [b + n, a + n]

    # Caps: triangle fans
    for c in range(1, n - 1):
        i += [0, n]
        j += [c, n + c + 1]
        k += [c + 1, n + c]

    return x, y, z, i, j, k


def _member_color(beam: Beam, color_by: str, profile_colors: Dict[str, str]) -> str:
    if color_by == 'profile':
        return profile_colors[beam.profile.name]
    return ROLE_COLORS[beam.role]


def create_bridge_figure(
    model: Model,
    title: str = "Truss Bridge",
    color_by: Literal['role', 'profile'] = 'role',
    show_deck: bool = True,
    show_abutments: bool = True,
    show_curves: bool = True,
) -> go.Figure:
    """
    Create a Plotly figure for a generated bridge model.

    Parameters:
    -----------
    model : Model
        Output of generate_truss_bridge()
    title : str
        Plot title
    color_by : str
        How to color members:
        - 'role': girders / frames / braces
        - 'profile': one color per distinct profile name
    show_deck, show_abutments, show_curves : bool
        Toggle the non-member elements

    Returns:
    --------
    go.Figure
        Plotly figure object (can be shown or saved)
    """
    if color_by not in ('role', 'profile'):
        raise ValueError(f"Unknown color_by: {color_by}")

    fig = go.Figure()
    beams = model.beams()

    # =========================================================================
    # DRAW MEMBERS
    # =========================================================================

    profile_names = sorted({b.profile.name for b in beams})
    profile_colors = {
        name: PROFILE_PALETTE[n % len(PROFILE_PALETTE)] for n, name in enumerate(profile_names)
    }

    # One trace per color group; None breaks the polyline between members
    groups: Dict[str, Dict[str, List]] = {}
    for beam in beams:
        key = beam.profile.name if color_by == 'profile' else beam.role.value
        g = groups.setdefault(key, {'x': [], 'y': [], 'z': [], 'color': None})
        g['color'] = _member_color(beam, color_by, profile_colors)
        s, e = beam.curve.start, beam.curve.end
        g['x'].extend([s.x, e.x, None])
        g['y'].extend([s.y, e.y, None])
        g['z'].extend([s.z, e.z, None])

    for key, g in groups.items():
        fig.add_trace(go.Scatter3d(
            x=g['x'], y=g['y'], z=g['z'],
            mode='lines',
            line=dict(color=g['color'], width=5),
            name=key.capitalize() if color_by == 'role' else key,
            hoverinfo='name',
        ))

    # =========================================================================
    # DRAW SOLIDS
    # =========================================================================

    if show_deck:
        for deck in model.of_type(SweptSolid):
            x, y, z, i, j, k = _prism_mesh(*deck.vertices())
            fig.add_trace(go.Mesh3d(
                x=x, y=y, z=z, i=i, j=j, k=k,
                color=_rgba(deck.material.color),
                opacity=0.6,
                name=deck.name or 'Deck',
                showlegend=True,
            ))

    if show_abutments:
        for n, mass in enumerate(model.of_type(Mass)):
            x, y, z, i, j, k = _prism_mesh(*mass.vertices())
            fig.add_trace(go.Mesh3d(
                x=x, y=y, z=z, i=i, j=j, k=k,
                color='lightgray',
                opacity=0.8,
                name=f'{mass.name or "Mass"} {n}',
                showlegend=(n == 0),
            ))

    if show_curves:
        for curve in model.of_type(ModelCurve):
            s, e = curve.curve.start, curve.curve.end
            fig.add_trace(go.Scatter3d(
                x=[s.x, e.x], y=[s.y, e.y], z=[s.z, e.z],
                mode='lines',
                line=dict(color='gray', width=2, dash='dash'),
                name=curve.name or 'Curve',
                showlegend=False,
                hoverinfo='skip',
            ))

    # =========================================================================
    # LAYOUT
    # =========================================================================

    fig.update_layout(
        title=dict(text=title, font=dict(size=16)),
        scene=dict(
            xaxis=dict(title='X (m)'),
            yaxis=dict(title='Y (m)'),
            zaxis=dict(title='Z (m)'),
            aspectmode='data',
            camera=dict(
                eye=dict(x=1.5, y=-1.5, z=0.8),
            ),
        ),
        showlegend=True,
        legend=dict(x=0.02, y=0.98),
        margin=dict(l=0, r=0, t=40, b=0),
    )

    return fig


def plot_bridge_3d(
    model: Model,
    title: str = "Truss Bridge",
    outpath: Optional[str] = None,
    show: bool = True,
    **kwargs
) -> go.Figure:
    """
    Create and optionally display/save a 3D bridge visualization.

    Parameters:
    -----------
    model, title:
        See create_bridge_figure()
    outpath : Optional[str]
        If provided, save as HTML file
    show : bool
        Whether to display the figure (default: True)
    **kwargs:
        Additional arguments passed to create_bridge_figure()

    Example:
    --------
    >>> fig = plot_bridge_3d(out.model, title="Creek Crossing",
    ...                      outpath="artifacts/bridge.html", show=False)
    """
    fig = create_bridge_figure(model, title=title, **kwargs)

    if outpath:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        fig.write_html(outpath)
        print(f"3D visualization saved to: {outpath}")

    if show:
        fig.show()

    return fig
