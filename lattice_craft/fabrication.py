# lattice_craft/fabrication.py
"""
FABRICATION: Strut Paths, Cut Lengths and Print Estimates
=========================================================

PURPOSE:
--------
Bridge from a joint/strut network to what a printer (or a mesher) needs:

1. Per strut, a serpentine tube centerline: trimmed back from the joint
   spheres, sampled as a Bezier, deformed by serpentinize()
2. Straight member and printed tube lengths, and length bins (how many
   distinct parts?)
3. Filament length, volume, weight and cost estimates for PLA

Meshing the tubes and joints is NOT done here; StrutPath.points is the
centerline a tube mesher sweeps its profile along.

PATTERN-DEPENDENT WAVE DENSITY:
-------------------------------
The wave frequency scales with strut length so long and short struts look
alike, times a per-pattern multiplier (dense infills get fewer waves):

    frequency = fab.frequency * L * PATTERN_FREQUENCY_MULTIPLIER[pattern]
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .kernel.curves import safe_unit, sample_bezier
from .kernel.serpentine import serpentinize
from .model import NetworkData, PatternFamily, as_pattern

logger = logging.getLogger(__name__)

MIN_STRUT_LENGTH = 0.001      # shorter struts are skipped
MIN_TUBE_SPAN = 0.01          # joint-trimmed span below which no tube is built
JOINT_RADIUS_FACTOR = 1.6     # joint sphere radius / strut radius
JOINT_INSET_FACTOR = 0.8      # tube end inset / joint radius

PLA_DENSITY = 1.24            # g/cm^3
PLA_COST_PER_KG = 20.0        # $

PATTERN_FREQUENCY_MULTIPLIER: Dict[PatternFamily, float] = {
    PatternFamily.LINEAR: 1.5,
    PatternFamily.GYROID: 2.0,
    PatternFamily.VORONOI: 1.0,
    PatternFamily.TRIANGULAR: 0.8,
}


@dataclass
class FabricationParams:
    """
    Tube and wave settings.

    Wave:
    -----
    frequency : float
        Wave density (waves per unit strut length, before the pattern multiplier)
    amplitude : float
        Peak lateral offset of the serpentine (m)
    taper_length : float
        Fraction of each strut over which the wave fades in/out at the joints

    Tube:
    -----
    thickness : float
        Strut tube radius (m); joints are spheres of 1.6x this radius
    segments : int
        Bezier intervals per strut
    structural_core : bool
        Whether a straight solid core runs inside each strut
    core_thickness : float
        Core radius (m)
    """
    frequency: float = 15.0
    amplitude: float = 0.04
    thickness: float = 0.02
    segments: int = 40
    taper_length: float = 0.2
    structural_core: bool = True
    core_thickness: float = 0.008

    @property
    def joint_radius(self) -> float:
        return self.thickness * JOINT_RADIUS_FACTOR


@dataclass
class StrutPath:
    """Serpentine centerline for one strut."""
    edge_id: int
    ni: int
    nj: int
    length: float          # straight joint-to-joint length
    points: np.ndarray     # (segments + 1, 3) centerline

    @property
    def path_length(self) -> float:
        return float(np.sum(np.linalg.norm(np.diff(self.points, axis=0), axis=1)))


@dataclass
class FabricationStats:
    """
    Print estimates for one network.

    filament_length is the summed serpentine centerline length (m);
    volume / weight / cost assume a solid tube of radius fab.thickness.
    core_length sums the straight joint-to-joint cores (m).

    Skipped struts are split by cause: n_degenerate edges are shorter than
    MIN_STRUT_LENGTH (coincident joints, self-loops) and get nothing;
    n_too_short edges keep their core but leave no room for a tube between
    the joint spheres.
    """
    n_joints: int
    n_struts: int
    n_degenerate: int
    n_too_short: int
    filament_length: float
    core_length: float
    volume_cm3: float
    weight_g: float
    cost: float

    @property
    def n_skipped(self) -> int:
        return self.n_degenerate + self.n_too_short


def strut_path(a, b, pattern, fab: FabricationParams) -> Optional[np.ndarray]:
    """
    Serpentine centerline between joints a and b.

    Parameters:
    -----------
    a, b : array-like, shape (3,)
        Joint centers
    pattern : PatternFamily or str
        Selects the frequency multiplier
    fab : FabricationParams

    Returns:
    --------
    np.ndarray or None
        (fab.segments + 1, 3) points, or None when the strut is degenerate
        or too short to leave room for a tube between the joint spheres
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    vec = b - a
    L = np.linalg.norm(vec)
    if L < MIN_STRUT_LENGTH:
        return None

    direction = safe_unit(vec)
    inset = fab.joint_radius * JOINT_INSET_FACTOR
    start = a + direction * inset
    end = b - direction * inset
    if np.linalg.norm(end - start) <= MIN_TUBE_SPAN:
        return None

    h0 = start + (end - start) * 0.33
    h1 = start + (end - start) * 0.66
    base = sample_bezier(start, h0, h1, end, fab.segments)

    frequency = fab.frequency * L * PATTERN_FREQUENCY_MULTIPLIER[as_pattern(pattern)]
    return serpentinize(base, frequency, fab.amplitude, fab.taper_length)


def build_strut_paths(
    network: NetworkData,
    pattern,
    fab: Optional[FabricationParams] = None,
) -> List[StrutPath]:
    """
    Centerlines for every buildable strut, in edge order.

    Degenerate and too-short struts are skipped silently; duplicates are
    kept (each edge gets its own path).
    """
    if fab is None:
        fab = FabricationParams()

    paths = []
    for edge_id, (i, j) in enumerate(network.edges):
        a, b = network.nodes[i], network.nodes[j]
        points = strut_path(a, b, pattern, fab)
        if points is None:
            continue
        paths.append(StrutPath(
            edge_id=edge_id,
            ni=i,
            nj=j,
            length=float(np.linalg.norm(b - a)),
            points=points,
        ))

    logger.debug("Built %d strut paths from %d edges", len(paths), network.n_edges)
    return paths


def compute_member_lengths(network: NetworkData) -> List[Tuple[int, float]]:
    """
    Straight length of every strut, for a cut list.

    Returns:
    --------
    List of (edge_id, length) tuples sorted by length
    """
    lengths = []
    for edge_id, (i, j) in enumerate(network.edges):
        L = float(np.linalg.norm(network.nodes[j] - network.nodes[i]))
        lengths.append((edge_id, L))

    return sorted(lengths, key=lambda x: x[1])


def compute_tube_lengths(paths: List[StrutPath]) -> List[Tuple[int, float]]:
    """
    Printed centerline length of every built tube, sorted by length.

    This is what the printer actually lays down per strut: joint-trimmed and
    lengthened by the serpentine wave. Two struts with equal straight length
    and pattern print identical tubes, so binning these lengths counts the
    distinct parts in a print batch.
    """
    return sorted(((p.edge_id, p.path_length) for p in paths), key=lambda item: item[1])


def compute_length_bins(
    lengths: List[Tuple[int, float]],
    tolerance: float = 0.005,
) -> Dict[str, List[int]]:
    """
    Group struts of (nearly) equal length.

    Lengths are walked in ascending order; a bin opens at its shortest
    member and takes every following length up to `tolerance` above it.
    Works on straight member lengths or printed tube lengths alike.

    Parameters:
    -----------
    lengths : list of (edge_id, length)
        From compute_member_lengths() or compute_tube_lengths()
    tolerance : float
        Bin width in meters (5mm default)

    Returns:
    --------
    Dict mapping bin name (e.g. "L1 (250mm)") to the edge ids in that bin,
    bins ordered from shortest to longest
    """
    if not lengths:
        return {}

    edge_ids = np.array([edge_id for edge_id, _ in lengths])
    values = np.array([length for _, length in lengths], dtype=float)
    order = np.argsort(values, kind='stable')
    edge_ids, values = edge_ids[order], values[order]

    bins: Dict[str, List[int]] = {}
    start = 0
    while start < len(values):
        ref = values[start]
        stop = int(np.searchsorted(values, ref + tolerance, side='right'))
        name = f"L{len(bins) + 1} ({ref * 1000:.0f}mm)"
        bins[name] = [int(e) for e in edge_ids[start:stop]]
        start = stop

    return bins


def estimate_fabrication(
    network: NetworkData,
    pattern,
    fab: Optional[FabricationParams] = None,
    paths: Optional[List[StrutPath]] = None,
) -> FabricationStats:
    """
    Filament, weight and cost estimate for printing the serpentine struts.

    Only the serpentine tubes count toward filament length, matching what a
    slicer sees for the strut bodies. The straight structural core runs
    joint to joint inside every non-degenerate strut, including struts too
    short to leave room for a tube between their joint spheres.

    Parameters:
    -----------
    network : NetworkData
    pattern : PatternFamily or str
    fab : FabricationParams, optional
    paths : list of StrutPath, optional
        Reuse paths already built by build_strut_paths() with the same fab
    """
    if fab is None:
        fab = FabricationParams()
    if paths is None:
        paths = build_strut_paths(network, pattern, fab)

    member_lengths = [L for _, L in compute_member_lengths(network)]
    n_degenerate = sum(1 for L in member_lengths if L < MIN_STRUT_LENGTH)

    filament_length = sum(p.path_length for p in paths)
    if fab.structural_core:
        core_length = sum(L for L in member_lengths if L >= MIN_STRUT_LENGTH)
    else:
        core_length = 0.0

    volume_m3 = filament_length * np.pi * fab.thickness ** 2
    volume_cm3 = volume_m3 * 1e6
    weight_g = volume_cm3 * PLA_DENSITY
    cost = (weight_g / 1000.0) * PLA_COST_PER_KG

    return FabricationStats(
        n_joints=network.n_nodes,
        n_struts=len(paths),
        n_degenerate=n_degenerate,
        n_too_short=network.n_edges - len(paths) - n_degenerate,
        filament_length=float(filament_length),
        core_length=float(core_length),
        volume_cm3=float(volume_cm3),
        weight_g=float(weight_g),
        cost=float(cost),
    )
