# lattice_craft/kernel/curves.py
"""
CURVES & FRAMES: Bezier Sampling and Parallel Transport
=======================================================

PURPOSE:
--------
Helpers that turn a straight strut into a sampled path and carry a normal
vector along it without twisting:

- safe_unit:                  normalize with a fallback for zero vectors
- initial_normal_from_tangent: any normal perpendicular to a tangent
- transport_normal:           rotate a normal from one tangent to the next
- cubic_bezier_point:         Bernstein-basis evaluation
- sample_bezier:              evenly t-spaced samples of a cubic Bezier

PARALLEL TRANSPORT:
-------------------
Frenet frames flip wherever curvature vanishes (straight runs, inflection
points). Parallel transport avoids that: at each step the normal is rotated by
the smallest rotation taking the previous tangent into the current one:

    axis  = normalize(a x b)
    angle = acos(clamp(a . b, -1, 1))
    n'    = R(axis, angle) n

then re-orthogonalized against the new tangent (Gram-Schmidt) so rounding
errors cannot accumulate over long polylines.

All vectors are numpy arrays of shape (3,). Inputs are never modified.
"""

import numpy as np

EPS = 1e-9

_X_AXIS = np.array([1.0, 0.0, 0.0])
_Y_AXIS = np.array([0.0, 1.0, 0.0])
_Z_AXIS = np.array([0.0, 0.0, 1.0])


def safe_unit(v, fallback=None) -> np.ndarray:
    """
    Return v / |v|, or a copy of fallback when |v| < 1e-9.

    Parameters:
    -----------
    v : array-like, shape (3,)
        Vector to normalize
    fallback : array-like, optional
        Returned (copied, not normalized) for degenerate input.
        Default: +x axis

    Examples:
    ---------
    >>> safe_unit([3.0, 4.0, 0.0])
    array([0.6, 0.8, 0. ])
    >>> safe_unit([0.0, 0.0, 0.0], fallback=[0.0, 2.0, 0.0])
    array([0., 2., 0.])
    """
    v = np.asarray(v, dtype=float)
    length = np.linalg.norm(v)
    if length < EPS:
        if fallback is None:
            return _X_AXIS.copy()
        return np.array(fallback, dtype=float)
    return v / length


def initial_normal_from_tangent(t) -> np.ndarray:
    """
    Build a unit normal perpendicular to tangent t.

    Crosses t with +z; when t is within ~23 degrees of +z (|dot| > 0.92) the
    reference switches to +x so the cross product stays well conditioned.
    """
    tn = safe_unit(t)
    up = _Z_AXIS
    if abs(np.dot(tn, up)) > 0.92:
        up = _X_AXIS
    return safe_unit(np.cross(tn, up), _Y_AXIS)


def _rotate_vector(vector: np.ndarray, axis: np.ndarray, angle: float) -> np.ndarray:
    """Rotate vector around unit axis by angle radians (Rodrigues)."""
    cos_theta = np.cos(angle)
    sin_theta = np.sin(angle)
    return (
        vector * cos_theta
        + np.cross(axis, vector) * sin_theta
        + axis * np.dot(axis, vector) * (1.0 - cos_theta)
    )


def transport_normal(prev_t, curr_t, prev_n) -> np.ndarray:
    """
    Parallel-transport a normal from tangent prev_t to tangent curr_t.

    Parameters:
    -----------
    prev_t, curr_t : array-like, shape (3,)
        Previous and current tangents (need not be unit length)
    prev_n : array-like, shape (3,)
        Normal attached to prev_t

    Returns:
    --------
    np.ndarray
        Unit normal perpendicular to curr_t. When the tangents are parallel
        the rotation is the identity and prev_n comes back unchanged.
    """
    prev_n = np.asarray(prev_n, dtype=float)
    a = safe_unit(prev_t)
    b = safe_unit(curr_t)

    axis = np.cross(a, b)
    axis_len = np.linalg.norm(axis)
    if axis_len < EPS:
        return prev_n.copy()
    axis = axis / axis_len

    angle = np.arccos(np.clip(np.dot(a, b), -1.0, 1.0))
    n = _rotate_vector(prev_n, axis, angle)

    # Gram-Schmidt against the new tangent
    n = n - b * np.dot(n, b)
    return safe_unit(n, prev_n)


def cubic_bezier_point(p0, p1, p2, p3, t: float) -> np.ndarray:
    """Evaluate a cubic Bezier at parameter t in [0, 1]."""
    it = 1.0 - t
    b0 = it * it * it
    b1 = 3.0 * it * it * t
    b2 = 3.0 * it * t * t
    b3 = t * t * t
    return (
        np.asarray(p0, dtype=float) * b0
        + np.asarray(p1, dtype=float) * b1
        + np.asarray(p2, dtype=float) * b2
        + np.asarray(p3, dtype=float) * b3
    )


def sample_bezier(p0, h0, h1, p3, samples: int) -> np.ndarray:
    """
    Sample a cubic Bezier at samples + 1 evenly spaced parameters.

    Spacing is uniform in t, not in arc length.

    Parameters:
    -----------
    p0, p3 : array-like, shape (3,)
        End points
    h0, h1 : array-like, shape (3,)
        Control handles
    samples : int
        Number of intervals

    Returns:
    --------
    np.ndarray, shape (samples + 1, 3)
        First row is p0, last row is p3
    """
    t = np.arange(samples + 1, dtype=float) / samples
    it = 1.0 - t
    basis = np.stack([it**3, 3 * it**2 * t, 3 * it * t**2, t**3], axis=1)
    control = np.array([p0, h0, h1, p3], dtype=float)
    return basis @ control
