# truss_bridge/viz - Visualization Tools
"""
VIZ: Drawings of Generated Bridges
==================================

This package provides visualization tools:
- viz2d: Plan and elevation drawings (matplotlib)
- viz3d: Interactive 3D viewer (Plotly)
"""

from .viz2d import plot_bridge_elevation, plot_bridge_plan
from .viz3d import create_bridge_figure, plot_bridge_3d

__all__ = ['plot_bridge_elevation', 'plot_bridge_plan', 'create_bridge_figure', 'plot_bridge_3d']
