#!/usr/bin/env python3
"""
RUN_FURNITURE_SINGLE: Generate One Piece of Lattice Furniture
=============================================================

This demo walks one design through the whole pipeline:
1. Define the furniture (archetype, dimensions, pattern)
2. Generate the joint/strut network
3. Build serpentine strut centerlines
4. Print a cut list summary and print estimates

Run with:
    python demos/run_furniture_single.py
    python demos/run_furniture_single.py Recliner Voronoi
"""

import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lattice_craft import FurnitureParams, generate_furniture
from lattice_craft.config import CONFIG
from lattice_craft.fabrication import (
    FabricationParams,
    build_strut_paths,
    compute_length_bins,
    compute_tube_lengths,
    estimate_fabrication,
)
from lattice_craft.logging_config import setup_logging


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def main():
    setup_logging()

    archetype = sys.argv[1] if len(sys.argv) > 1 else 'Chair'
    pattern = sys.argv[2] if len(sys.argv) > 2 else 'Linear'

    # =========================================================================
    # STEP 1: DEFINE THE DESIGN
    # =========================================================================
    print_header(f"STEP 1: {archetype} / {pattern}")

    params = FurnitureParams(
        width=CONFIG.default_width,
        height=CONFIG.default_height,
        depth=CONFIG.default_depth,
        seat_height=CONFIG.default_seat_height,
        pattern=pattern,
    )
    fab = FabricationParams()

    print(f"  Width:       {params.width:.2f} m")
    print(f"  Height:      {params.height:.2f} m")
    print(f"  Depth:       {params.depth:.2f} m")
    print(f"  Seat height: {params.seat_height:.2f} m")
    print(f"  Pattern:     {params.pattern.value}")

    # =========================================================================
    # STEP 2: GENERATE NETWORK
    # =========================================================================
    print_header("STEP 2: Generate Joint/Strut Network")

    network = generate_furniture(archetype, params, seed=42)
    print(f"  Joints: {network.n_nodes}")
    print(f"  Struts: {network.n_edges}")

    if network.n_edges == 0:
        print("\n  No struts generated; nothing to fabricate.")
        return

    pts = network.points()
    lo, hi = pts.min(axis=0), pts.max(axis=0)
    print(f"  Extent:  x [{lo[0]:+.3f}, {hi[0]:+.3f}]"
          f"  y [{lo[1]:+.3f}, {hi[1]:+.3f}]"
          f"  z [{lo[2]:+.3f}, {hi[2]:+.3f}]")

    # =========================================================================
    # STEP 3: SERPENTINE STRUTS
    # =========================================================================
    print_header("STEP 3: Serpentine Strut Paths")

    paths = build_strut_paths(network, params.pattern, fab)
    print(f"  Buildable struts: {len(paths)} of {network.n_edges}")
    if paths:
        ratios = np.array([p.path_length / p.length for p in paths])
        print(f"  Path / straight length: mean {ratios.mean():.3f}, max {ratios.max():.3f}")

    # =========================================================================
    # STEP 4: CUT LIST AND ESTIMATES
    # =========================================================================
    print_header("STEP 4: Cut List and Print Estimates")

    lengths = compute_tube_lengths(paths)
    bins = compute_length_bins(lengths, tolerance=0.010)
    print(f"  Unique printed tube lengths (10mm tolerance): {len(bins)}")
    for name, edge_ids in list(bins.items())[:10]:
        print(f"    {name}: {len(edge_ids)} struts")
    if len(bins) > 10:
        print(f"    ... and {len(bins) - 10} more")

    stats = estimate_fabrication(network, params.pattern, fab, paths=paths)
    print(f"\n  Filament length: {stats.filament_length:.2f} m")
    print(f"  Core length:     {stats.core_length:.2f} m")
    print(f"  Volume:          {stats.volume_cm3:.1f} cm^3")
    print(f"  Weight:          {stats.weight_g:.1f} g")
    print(f"  Cost:            ${stats.cost:.2f}")
    print(f"  Skipped struts:  {stats.n_degenerate} degenerate, {stats.n_too_short} too short for a tube")

    print("\n✓ Done")


if __name__ == "__main__":
    main()
