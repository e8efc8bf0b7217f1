# lattice_craft/config.py
"""
Configuration defaults and parameter ranges.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class LatticeConfig:
    """Global configuration."""

    # Metadata
    app_name: str = "LatticeCraft"
    app_subtitle: str = "Printable Furniture Lattice Generator"
    version: str = "0.1.0"

    # Default dimensions (meters)
    default_width: float = 0.6
    default_height: float = 0.9
    default_depth: float = 0.6
    default_seat_height: float = 0.45

    # Dimension ranges
    dimension_range: Tuple[float, float] = (0.2, 3.0)
    seat_height_range: Tuple[float, float] = (0.1, 1.2)

    # Fabrication ranges
    frequency_range: Tuple[float, float] = (1.0, 40.0)
    amplitude_range: Tuple[float, float] = (0.0, 0.15)
    taper_range: Tuple[float, float] = (0.0, 0.5)
    thickness_range: Tuple[float, float] = (0.005, 0.05)
    segments_range: Tuple[int, int] = (10, 100)
    core_thickness_range: Tuple[float, float] = (0.002, 0.02)

    # Exploration settings
    default_n_designs: int = 50
    max_n_designs: int = 500
    # Keeps O(n^2) Voronoi linking and gyroid grids small during batch runs
    explore_dimension_range: Tuple[float, float] = (0.3, 1.2)

    # Available options
    archetypes: List[str] = None
    patterns: List[str] = None

    def __post_init__(self):
        if self.archetypes is None:
            self.archetypes = [
                'Chair', 'Table', 'Stool', 'Bench', 'Shelf', 'Vase',
                'Recliner', 'Lamp', 'Mobius',
            ]
        if self.patterns is None:
            self.patterns = ['Linear', 'Triangular', 'Gyroid', 'Voronoi']


# Global config instance
CONFIG = LatticeConfig()
