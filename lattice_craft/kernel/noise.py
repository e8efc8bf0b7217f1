# lattice_craft/kernel/noise.py
"""
VALUE NOISE: Deterministic Hash + Smooth 3D Noise
=================================================

PURPOSE:
--------
A tiny noise layer for organic perturbations:
- hash3:      integer lattice cell -> pseudo-random scalar in [0, 1)
- noise3:     smooth scalar field (trilinear blend of hashed corners)
- noise_vec3: three decorrelated noise channels as a vector in [-0.5, 0.5]^3

Everything here is a pure function of its inputs. There is no seed and no
global state: the same coordinates always give the same value.

HOW IT WORKS:
-------------
    1. Split each coordinate into cell index (floor) and fraction
    2. Ease each fraction with smoothstep: t^2 (3 - 2t)
    3. Hash the 8 corners of the containing cell
    4. Blend the corner values trilinearly using the eased fractions

At integer coordinates all fractions are zero, so the blend collapses to the
corner hash itself.
"""

import math

import numpy as np

_MASK32 = 0xFFFFFFFF

# Per-channel coordinate offsets for noise_vec3
_CHANNEL_OFFSETS = (
    (12.7, 78.2, 3.1),
    (45.1, 10.5, 91.7),
    (8.3, 63.9, 27.4),
)


def hash3(x: int, y: int, z: int) -> float:
    """
    Hash an integer lattice cell to a scalar in [0, 1).

    All arithmetic wraps to 32-bit unsigned, so negative cells hash as well
    as positive ones.

    Examples:
    ---------
    >>> hash3(0, 0, 0)
    0.0
    >>> 0.0 <= hash3(-3, 7, 11) < 1.0
    True
    """
    n = (int(x) * 374761393 + int(y) * 668265263 + int(z) * 2147483647) & _MASK32
    n ^= n >> 13
    n = (n * 1274126177) & _MASK32
    n ^= n >> 16
    return n / 4294967296.0


def _smoothstep(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def noise3(x: float, y: float, z: float) -> float:
    """
    Smooth 3D value noise in [0, 1).

    Parameters:
    -----------
    x, y, z : float
        Sample position (lattice spacing is 1.0)

    Returns:
    --------
    float
        Interpolated noise value
    """
    xi, yi, zi = math.floor(x), math.floor(y), math.floor(z)
    u = _smoothstep(x - xi)
    v = _smoothstep(y - yi)
    w = _smoothstep(z - zi)

    v000 = hash3(xi, yi, zi)
    v100 = hash3(xi + 1, yi, zi)
    v010 = hash3(xi, yi + 1, zi)
    v110 = hash3(xi + 1, yi + 1, zi)
    v001 = hash3(xi, yi, zi + 1)
    v101 = hash3(xi + 1, yi, zi + 1)
    v011 = hash3(xi, yi + 1, zi + 1)
    v111 = hash3(xi + 1, yi + 1, zi + 1)

    x00 = _lerp(v000, v100, u)
    x10 = _lerp(v010, v110, u)
    x01 = _lerp(v001, v101, u)
    x11 = _lerp(v011, v111, u)

    y0 = _lerp(x00, x10, v)
    y1 = _lerp(x01, x11, v)
    return _lerp(y0, y1, w)


def noise_vec3(p, scale: float) -> np.ndarray:
    """
    Vector-valued noise: one noise3 sample per channel, centered on zero.

    Each channel samples the same scaled point shifted by its own fixed
    offset so the three components are decorrelated.

    Parameters:
    -----------
    p : array-like, shape (3,)
        Sample position
    scale : float
        Frequency multiplier applied to p before sampling

    Returns:
    --------
    np.ndarray, shape (3,)
        Components in [-0.5, 0.5)
    """
    px, py, pz = (float(c) * scale for c in p)
    return np.array([
        noise3(px + ox, py + oy, pz + oz) - 0.5
        for ox, oy, oz in _CHANNEL_OFFSETS
    ])
