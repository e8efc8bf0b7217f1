# lattice_craft/explore.py
"""
EXPLORE: Batch Design Exploration for Furniture Lattices
========================================================

PURPOSE:
--------
Generate and evaluate many furniture variants, then identify the
Pareto-optimal ones (best trade-offs between print cost and part count).

WORKFLOW:
---------
1. Sample random archetypes, patterns and dimensions
2. Generate each joint/strut network
3. Compute fabrication metrics (lengths, bins, filament, weight, cost)
4. Flag empty or unbuildable designs
5. Identify the Pareto frontier within each archetype

OBJECTIVES (what we optimize):
------------------------------
- MINIMIZE: Weight (filament cost proxy)
- MINIMIZE: Unique printed tube lengths (fewer distinct parts)
- MAXIMIZE: Strut count (a denser, more redundant lattice)

A seeded numpy Generator drives both the sampling and the randomized
generators, so a batch is reproducible from its seed.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .config import CONFIG
from .fabrication import (
    FabricationParams,
    build_strut_paths,
    compute_length_bins,
    compute_member_lengths,
    compute_tube_lengths,
    estimate_fabrication,
)
from .generative import generate_furniture
from .model import Archetype, FurnitureParams, as_archetype

logger = logging.getLogger(__name__)


@dataclass
class DesignMetrics:
    """
    Metrics extracted from one generated design.

    Geometry:
    ---------
    n_nodes, n_edges : int
        Graph size
    n_degenerate : int
        Struts shorter than MIN_STRUT_LENGTH (skipped by meshing)

    Fabrication:
    ------------
    total_length : float
        Sum of straight strut lengths (m)
    n_length_bins : int
        Number of distinct printed tube lengths at 10mm tolerance
    max_member_length, min_member_length : float
        Longest / shortest straight strut (m)
    filament_length : float
        Summed serpentine centerline length (m)
    weight_g, cost : float
        PLA estimates
    """
    n_nodes: int
    n_edges: int
    n_degenerate: int
    total_length: float
    n_length_bins: int
    max_member_length: float
    min_member_length: float
    filament_length: float
    weight_g: float
    cost: float


_METRIC_COLUMNS = list(DesignMetrics.__dataclass_fields__)


def evaluate_design(
    archetype,
    params: FurnitureParams,
    fab: Optional[FabricationParams] = None,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[bool, Optional[DesignMetrics], str]:
    """
    Evaluate a single design.

    Returns:
    --------
    success : bool
        True if the design produced at least one strut
    metrics : Optional[DesignMetrics]
        Extracted metrics (None if failed)
    reason : str
        Empty if success, failure message otherwise
    """
    if fab is None:
        fab = FabricationParams()

    network = generate_furniture(archetype, params, rng=rng)
    if network.n_edges == 0:
        return False, None, "empty: no struts generated"

    lengths = [L for _, L in compute_member_lengths(network)]
    paths = build_strut_paths(network, params.pattern, fab)
    bins = compute_length_bins(compute_tube_lengths(paths), tolerance=0.010)  # 10mm
    stats = estimate_fabrication(network, params.pattern, fab, paths=paths)

    metrics = DesignMetrics(
        n_nodes=network.n_nodes,
        n_edges=network.n_edges,
        n_degenerate=stats.n_degenerate,
        total_length=float(sum(lengths)),
        n_length_bins=len(bins),
        max_member_length=max(lengths),
        min_member_length=min(lengths),
        filament_length=stats.filament_length,
        weight_g=stats.weight_g,
        cost=stats.cost,
    )
    return True, metrics, ""


def sample_furniture_params(
    rng: np.random.Generator,
    n: int,
    archetypes: Optional[List[str]] = None,
    patterns: Optional[List[str]] = None,
    dimension_range: Optional[Tuple[float, float]] = None,
) -> List[Tuple[Archetype, FurnitureParams]]:
    """
    Sample random furniture variants.

    The seat height is drawn between 30% and 70% of the sampled height.
    """
    archetypes = archetypes or CONFIG.archetypes
    patterns = patterns or CONFIG.patterns
    lo, hi = dimension_range or CONFIG.explore_dimension_range

    variants = []
    for _ in range(n):
        archetype = as_archetype(str(rng.choice(archetypes)))
        height = rng.uniform(lo, hi)
        params = FurnitureParams(
            width=rng.uniform(lo, hi),
            height=height,
            depth=rng.uniform(lo, hi),
            seat_height=rng.uniform(0.3 * height, 0.7 * height),
            pattern=str(rng.choice(patterns)),
        )
        variants.append((archetype, params))

    return variants


def run_batch_exploration(
    n: int = 50,
    seed: int = 42,
    show_progress: bool = True,
    fab: Optional[FabricationParams] = None,
    **sample_kwargs
) -> pd.DataFrame:
    """
    Run batch exploration of furniture designs.

    Parameters:
    -----------
    n : int
        Number of variants to generate and evaluate
    seed : int
        Random seed for reproducibility
    show_progress : bool
        Whether to show a progress bar
    fab : FabricationParams, optional
        Tube settings used for the filament estimates
    **sample_kwargs
        Passed to sample_furniture_params()

    Returns:
    --------
    pd.DataFrame
        One row per variant: parameters, 'ok', 'reason' and metric columns
        (NaN for failed designs)
    """
    rng = np.random.default_rng(seed)
    variants = sample_furniture_params(rng, n, **sample_kwargs)

    results = []
    iterator = tqdm(variants, desc="Evaluating") if show_progress else variants

    for archetype, params in iterator:
        success, metrics, reason = evaluate_design(archetype, params, fab=fab, rng=rng)
        if not success:
            logger.warning("Design %s/%s failed: %s",
                           archetype.value, params.pattern.value, reason)

        row = {
            'archetype': archetype.value,
            'pattern': params.pattern.value,
            'width': params.width,
            'height': params.height,
            'depth': params.depth,
            'seat_height': params.seat_height,
            'ok': success,
            'reason': reason,
        }
        if success and metrics:
            row.update(asdict(metrics))
        else:
            row.update({col: np.nan for col in _METRIC_COLUMNS})

        results.append(row)

    return pd.DataFrame(results)


def _non_dominated(costs: np.ndarray) -> np.ndarray:
    """
    Rows of `costs` (lower is better in every column) that no other row
    dominates. Pairwise comparison by broadcasting: (n, n, k) booleans.
    """
    no_worse = (costs[:, None, :] <= costs[None, :, :]).all(axis=2)
    better = (costs[:, None, :] < costs[None, :, :]).any(axis=2)
    # dominates[j, i]: design j dominates design i
    dominates = no_worse & better
    return ~dominates.any(axis=0)


def pareto_mask(
    df: pd.DataFrame,
    objectives: Optional[List[Tuple[str, str]]] = None,
    by: Optional[str] = 'archetype',
) -> pd.Series:
    """
    Pareto frontier mask over successful designs.

    A chair and a vase do not compete: by default the frontier is computed
    separately within each archetype, so every furniture kind keeps its own
    best trade-offs. Pass by=None to rank the whole table together.

    Parameters:
    -----------
    df : pd.DataFrame
        Results with an 'ok' column and the objective columns
    objectives : List[Tuple[str, str]]
        (column, 'min' or 'max') pairs.
        Default: minimize weight_g, minimize n_length_bins, maximize n_edges
    by : str, optional
        Column to group by before ranking; ignored when df lacks it

    Returns:
    --------
    pd.Series
        Boolean mask aligned with df.index
    """
    if objectives is None:
        objectives = [
            ('weight_g', 'min'),
            ('n_length_bins', 'min'),
            ('n_edges', 'max'),
        ]

    result = pd.Series(False, index=df.index)
    successful = df[df['ok'] == True]
    if len(successful) == 0:
        return result

    for col, _ in objectives:
        if col not in df.columns:
            raise ValueError(f"Column '{col}' not found in DataFrame. Available: {df.columns.tolist()}")

    signs = np.array([-1.0 if direction == 'max' else 1.0 for _, direction in objectives])
    costs = successful[[col for col, _ in objectives]].to_numpy(dtype=float) * signs

    if by is not None and by in successful.columns:
        groups = successful.groupby(by, sort=False).indices.values()
    else:
        groups = [np.arange(len(successful))]

    for rows in groups:
        result.loc[successful.index[rows]] = _non_dominated(costs[rows])
    return result


def summarize_by_pattern(df: pd.DataFrame) -> pd.DataFrame:
    """Mean metrics per (archetype, pattern) over successful designs."""
    ok = df[df['ok'] == True]
    columns: Dict[str, str] = {
        'n_nodes': 'mean',
        'n_edges': 'mean',
        'filament_length': 'mean',
        'weight_g': 'mean',
        'n_length_bins': 'mean',
    }
    return ok.groupby(['archetype', 'pattern']).agg(columns).reset_index()
