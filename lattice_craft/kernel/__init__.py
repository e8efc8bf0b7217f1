# lattice_craft/kernel - Numerical utilities shared by every generator
"""
KERNEL: NOISE, CURVES AND FRAMES
================================

The archetype-agnostic numerical layer. Nothing in here knows about furniture:

- noise.py       Integer hash, smooth value noise, vector noise
- curves.py      Safe normalization, Bezier sampling, parallel transport
- serpentine.py  Tapered sine deformation of a sampled strut path
"""

from .noise import hash3, noise3, noise_vec3
from .curves import (
    safe_unit,
    initial_normal_from_tangent,
    transport_normal,
    cubic_bezier_point,
    sample_bezier,
)
from .serpentine import serpentinize, taper_envelope

__all__ = [
    'hash3', 'noise3', 'noise_vec3',
    'safe_unit', 'initial_normal_from_tangent', 'transport_normal',
    'cubic_bezier_point', 'sample_bezier',
    'serpentinize', 'taper_envelope',
]
