# lattice_craft/kernel/serpentine.py
"""
SERPENTINE DEFORMATION: Wavy Strut Centerlines
==============================================

PURPOSE:
--------
Turn a sampled strut path into an undulating tube centerline for printing.
Each sample is pushed sideways along a parallel-transported normal by

    d(u) = sin(2 pi f u) * A * envelope(u)

where u in [0, 1] is the normalized arc length, f the wave frequency, A the
amplitude. The taper envelope fades the wave out near both ends so the
deformed strut meets its joints on the straight axis.

ORDER MATTERS:
--------------
Tangents are point-local, but each normal depends on the previous one. The
deformation is therefore a left fold over the polyline carrying the state
(tangent, normal) from point to point.
"""

import numpy as np

from .curves import EPS, initial_normal_from_tangent, transport_normal


def taper_envelope(u: float, taper_fraction: float) -> float:
    """
    Displacement multiplier at normalized position u.

    1.0 in the interior, linear ramps from 0 across the first and last
    taper_fraction of the path, each ramp eased by smoothstep.
    A non-positive taper_fraction disables the ramps.
    """
    if taper_fraction <= 0:
        return 1.0
    envelope = 1.0
    if u < taper_fraction:
        envelope = u / taper_fraction
    elif u > 1.0 - taper_fraction:
        envelope = (1.0 - u) / taper_fraction
    return envelope * envelope * (3.0 - 2.0 * envelope)


def _tangent_at(points: np.ndarray, i: int) -> np.ndarray:
    # One-sided at the ends, centered difference inside
    if i == 0:
        return points[1] - points[0]
    if i == len(points) - 1:
        return points[-1] - points[-2]
    return points[i + 1] - points[i - 1]


def serpentinize(
    points,
    frequency: float,
    amplitude: float,
    taper_fraction: float = 0.15,
) -> np.ndarray:
    """
    Displace a polyline sideways into a tapered sine wave.

    Parameters:
    -----------
    points : array-like, shape (n, 3)
        Sampled path, typically from sample_bezier()
    frequency : float
        Number of full waves over the path length
    amplitude : float
        Peak lateral displacement (same units as points)
    taper_fraction : float
        Fraction of the path at each end over which the wave ramps in/out

    Returns:
    --------
    np.ndarray, shape (n, 3)
        Deformed path. Paths with fewer than 3 points or (near) zero length
        come back unchanged.
    """
    points = np.array(points, dtype=float)
    if len(points) < 3:
        return points

    seg_lengths = np.linalg.norm(np.diff(points, axis=0), axis=1)
    cumulative = np.concatenate([[0.0], np.cumsum(seg_lengths)])
    total = cumulative[-1]
    if total < EPS:
        return points

    prev_t = points[1] - points[0]
    prev_n = initial_normal_from_tangent(prev_t)

    out = np.empty_like(points)
    for i in range(len(points)):
        t = _tangent_at(points, i)
        n = transport_normal(prev_t, t, prev_n)

        u = cumulative[i] / total
        envelope = taper_envelope(u, taper_fraction)
        disp = np.sin(2.0 * np.pi * frequency * u) * amplitude * envelope

        out[i] = points[i] + n * disp
        prev_t, prev_n = t, n

    return out
