#!/usr/bin/env python3
"""
RUN_TRUSS_BRIDGE: Generate a Box-Truss Bridge
=============================================

This demo shows the complete generation workflow:
1. Define the alignment, size and supports
2. Override the profile of one chord
3. Generate the model
4. Print metrics and a steel takeoff
5. Save an interactive 3D view and a plan/elevation sheet

Run with:
    python demos/run_truss_bridge.py
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from truss_bridge.geometry import Line, Vector3
from truss_bridge.generative import ProfileOverride, TrussBridgeParams, generate_truss_bridge
from truss_bridge.generative.bridge import compute_length_bins, compute_member_lengths, elevated_path_of
from truss_bridge.model import MemberRole
from truss_bridge.takeoff import steel_takeoff
from truss_bridge.viz import plot_bridge_3d, plot_bridge_elevation, plot_bridge_plan


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def main():
    print_header("TRUSS BRIDGE GENERATOR")

    # =========================================================================
    # STEP 1: DEFINE INPUTS
    # =========================================================================
    print_header("STEP 1: Define Inputs")

    path = Line(Vector3(0.0, 0.0, 0.0), Vector3(30.0, 10.0, 0.0))
    end_elevation = 1.5
    width = 5.0
    height = 3.5

    print(f"\nPath:          ({path.start.x}, {path.start.y}) -> ({path.end.x}, {path.end.y})")
    print(f"End elevation: {end_elevation:.2f} m")
    print(f"Box:           {width:.2f} m wide x {height:.2f} m high")

    abutments = [path.start, path.end]
    print(f"Abutments:     {len(abutments)} (one at each end)")

    # =========================================================================
    # STEP 2: OVERRIDE ONE CHORD
    # =========================================================================
    print_header("STEP 2: Profile Override")

    # The upper-left chord is the elevated path offset left and raised
    upper_left = elevated_path_of(path, end_elevation).offset(-width / 2).translated(
        Vector3(0.0, 0.0, height))
    overrides = [ProfileOverride(identity=upper_left, profile_name="W12x50")]
    print("\nUpper-left chord -> W12x50")

    # =========================================================================
    # STEP 3: GENERATE
    # =========================================================================
    print_header("STEP 3: Generate")

    params = TrussBridgeParams(
        path=path,
        end_elevation=end_elevation,
        width=width,
        height=height,
        abutment_locations=abutments,
        overrides=overrides,
    )
    out = generate_truss_bridge(params)
    model = out.model

    print(f"\nElements:  {len(model)}")
    for role in MemberRole:
        print(f"  {role.value:8s} {len(model.beams(role)):4d}")
    print(f"Stations:  {len(out.stations)} (every {params.station_step:.1f} m)")

    # =========================================================================
    # RESULTS
    # =========================================================================
    print_header("RESULTS: Metrics")

    print(f"\n  Span length:        {out.span_length:8.3f} m")
    print(f"  Total steel length: {out.total_steel_length:8.3f} m")

    for n, placement in enumerate(out.abutments):
        print(f"  Abutment {n}: {placement.distance:7.3f} m along path, "
              f"depth {placement.depth_line.length():.3f} m")

    print_header("RESULTS: Steel Takeoff")
    print()
    print(steel_takeoff(model).to_string(index=False))

    bins = compute_length_bins(compute_member_lengths(model))
    print(f"\n  Distinct cut lengths: {len(bins)}")

    # =========================================================================
    # DRAWINGS
    # =========================================================================
    print_header("DRAWINGS")

    fig, (ax_plan, ax_elev) = plt.subplots(2, 1, figsize=(12, 8))
    plot_bridge_plan(model, ax=ax_plan)
    plot_bridge_elevation(model, ax=ax_elev)
    fig.tight_layout()
    Path("artifacts").mkdir(exist_ok=True)
    fig.savefig("artifacts/truss_bridge_ga.png", dpi=150)
    print("\nPlan/elevation saved to: artifacts/truss_bridge_ga.png")

    plot_bridge_3d(model, title="Truss Bridge", outpath="artifacts/truss_bridge.html", show=False)


if __name__ == "__main__":
    main()
