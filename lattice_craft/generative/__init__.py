# lattice_craft/generative - Furniture Topology Generators
"""
GENERATIVE: Furniture Lattice Generators
========================================

This package turns an archetype and a set of dimensions into a joint/strut
network. The key idea: one classifier per archetype defines the solid, and a
pattern family decides how that solid becomes struts.

Available Generators:
---------------------
- classifier: implicit volume per archetype
- volumetric: Gyroid, Voronoi and Triangular infill of a classifier volume
- skeletal:   hand-designed 'Linear' topology per archetype
- furniture:  generate_furniture(), the dispatching entry point

USAGE:
------
    from lattice_craft.generative import generate_furniture
    from lattice_craft.model import FurnitureParams

    params = FurnitureParams(
        width=0.6, height=0.9, depth=0.6,
        seat_height=0.45,
        pattern='Triangular',
    )

    network = generate_furniture('Chair', params)
"""

from .classifier import is_inside, classify_grid
from .furniture import generate_furniture

__all__ = ['generate_furniture', 'is_inside', 'classify_grid']
