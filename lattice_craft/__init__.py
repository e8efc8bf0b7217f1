# lattice_craft - Printable Furniture Lattice Synthesis
"""
LATTICECRAFT: Joint/Strut Lattices for 3D-Printed Furniture
===========================================================

This package provides:
- Implicit volumes for nine furniture archetypes
- Lattice infill patterns (Gyroid, Voronoi, Triangular) and hand-designed
  skeletons (Linear)
- Serpentine strut centerlines via parallel-transported frames
- Fabrication estimates and batch design exploration

ARCHITECTURE:
-------------
    kernel/            Archetype-agnostic numerics (noise, curves, serpentine)
    model.py           NetworkData, FurnitureParams, Archetype, PatternFamily
    generative/        Classifier, volumetric and skeletal generators
    fabrication.py     Strut paths, cut lengths, filament/weight/cost
    explore.py         Batch exploration and Pareto filtering
    config.py          Defaults and parameter ranges
    logging_config.py  Package logger setup
"""

from .model import Archetype, FurnitureParams, NetworkData, PatternFamily
from .generative import generate_furniture, is_inside
from .kernel import noise3, noise_vec3, sample_bezier, serpentinize

__version__ = "0.1.0"

__all__ = [
    'Archetype', 'FurnitureParams', 'NetworkData', 'PatternFamily',
    'generate_furniture', 'is_inside',
    'noise3', 'noise_vec3', 'sample_bezier', 'serpentinize',
]
