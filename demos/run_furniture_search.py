#!/usr/bin/env python3
"""
RUN_FURNITURE_SEARCH: Batch Exploration with Pareto Frontier
============================================================

This demo shows the design exploration workflow:
1. Generate random furniture variants (archetype x pattern x dimensions)
2. Evaluate each for fabrication metrics (weight, cost, part variety)
3. Identify Pareto-optimal designs (best trade-offs)
4. Summarize per archetype and pattern

Run with:
    python demos/run_furniture_search.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lattice_craft.config import CONFIG
from lattice_craft.explore import pareto_mask, run_batch_exploration, summarize_by_pattern
from lattice_craft.logging_config import setup_logging


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def main():
    setup_logging()

    print_header("FURNITURE LATTICE DESIGN SPACE EXPLORATION")
    print("\nExploring the trade-off space between:")
    print("  - Filament weight (cost)")
    print("  - Unique strut lengths (fabrication simplicity)")
    print("  - Strut count (lattice redundancy)")

    # =========================================================================
    # STEP 1: RUN BATCH EXPLORATION
    # =========================================================================
    print_header("STEP 1: Generate and Evaluate Designs")

    n_designs = CONFIG.default_n_designs
    seed = 42

    print(f"\nGenerating {n_designs} random furniture variants...")
    print("(Volumetric patterns take longer than skeletal ones)\n")

    df = run_batch_exploration(n=n_designs, seed=seed, show_progress=True)

    n_success = int(df['ok'].sum())
    n_failed = len(df) - n_success
    print(f"\n  Completed: {n_success} successful, {n_failed} failed")

    # =========================================================================
    # STEP 2: COMPUTE PARETO FRONTIER
    # =========================================================================
    print_header("STEP 2: Identify Pareto-Optimal Designs")

    mask = pareto_mask(df)
    pareto = df[mask].sort_values('weight_g')
    print(f"\n  Pareto-optimal designs: {len(pareto)}")

    columns = ['archetype', 'pattern', 'width', 'height', 'depth',
               'n_edges', 'n_length_bins', 'weight_g', 'cost']
    if len(pareto) > 0:
        print()
        print(pareto[columns].head(15).to_string(
            index=False,
            float_format=lambda v: f"{v:.2f}",
        ))

    # =========================================================================
    # STEP 3: SUMMARY BY ARCHETYPE AND PATTERN
    # =========================================================================
    print_header("STEP 3: Mean Metrics per Archetype / Pattern")

    summary = summarize_by_pattern(df)
    print()
    print(summary.to_string(index=False, float_format=lambda v: f"{v:.1f}"))

    print("\n✓ Done")


if __name__ == "__main__":
    main()
