# lattice_craft/generative/classifier.py
"""
SHAPE CLASSIFIER: Implicit Volume per Archetype
===============================================

PURPOSE:
--------
Answer "is this point part of the furniture's solid?" for each archetype.
The volumetric pattern generators fill whatever region this predicate
accepts, so the classifier IS the furniture's shape in volume mode.

SHAPES:
-------
- Table:  top slab + four corner legs
- Chair:  four legs to seat height + seat slab + rear backrest slab
- Stool:  cylinder tapering from radius width/1.5 (floor) to width/2 (top)
- Bench:  top slab + two full-depth side legs
- Vase:   cylinder with a half-sine bulge and a slight linear flare
- other:  (Shelf, Recliner, Lamp, Mobius) the full bounding box

All tests are inclusive (<=), not strict. Every formula works elementwise on
numpy arrays so whole sample grids are classified in one call.
"""

from typing import Callable, Dict

import numpy as np

from ..model import Archetype, FurnitureParams, as_archetype


def _in_box(x, y, z, bx, by, bz, bw, bh, bd):
    """Axis-aligned box centered on (bx, bz) in plan, spanning [by, by + bh] in y."""
    return (
        (np.abs(x - bx) <= bw / 2)
        & (y >= by) & (y <= by + bh)
        & (np.abs(z - bz) <= bd / 2)
    )


def _in_corner_legs(x, y, z, params: FurnitureParams, leg_thick: float, leg_height: float):
    w2 = params.width / 2
    d2 = params.depth / 2
    half = leg_thick / 2
    inside = np.zeros(np.broadcast(x, y, z).shape, dtype=bool)
    for cx in (-w2 + half, w2 - half):
        for cz in (d2 - half, -d2 + half):
            inside = inside | _in_box(x, y, z, cx, 0.0, cz, leg_thick, leg_height, leg_thick)
    return inside


def _inside_table(x, y, z, params: FurnitureParams):
    leg_thick = params.width * 0.15
    top_thick = params.height * 0.1

    in_top = _in_box(x, y, z, 0.0, params.height - top_thick, 0.0,
                     params.width, top_thick, params.depth)
    return in_top | _in_corner_legs(x, y, z, params, leg_thick, params.height)


def _inside_chair(x, y, z, params: FurnitureParams):
    leg_thick = params.width * 0.12
    seat_thick = params.height * 0.08
    back_thick = params.depth * 0.15
    seat = params.seat_height

    in_legs = _in_corner_legs(x, y, z, params, leg_thick, seat)
    in_seat = _in_box(x, y, z, 0.0, seat, 0.0, params.width, seat_thick, params.depth)
    in_back = _in_box(x, y, z, 0.0, seat, -params.depth / 2 + back_thick / 2,
                      params.width, params.height - seat, back_thick)
    return in_legs | in_seat | in_back


def _inside_stool(x, y, z, params: FurnitureParams):
    r_top = params.width / 2
    r_bot = params.width / 1.5
    r = r_bot + (r_top - r_bot) * (y / params.height)
    return (x * x + z * z <= r * r) & (y >= 0) & (y <= params.height)


def _inside_bench(x, y, z, params: FurnitureParams):
    top_thick = params.height * 0.15
    leg_thick = params.width * 0.1
    w2 = params.width / 2

    in_top = _in_box(x, y, z, 0.0, params.height - top_thick, 0.0,
                     params.width, top_thick, params.depth)
    in_leg_l = _in_box(x, y, z, -w2 + leg_thick / 2, 0.0, 0.0,
                       leg_thick, params.height, params.depth)
    in_leg_r = _in_box(x, y, z, w2 - leg_thick / 2, 0.0, 0.0,
                       leg_thick, params.height, params.depth)
    return in_top | in_leg_l | in_leg_r


def _inside_vase(x, y, z, params: FurnitureParams):
    base_radius = params.width * 0.4
    t = y / params.height
    r = base_radius + np.sin(t * np.pi) * 0.3 + t * 0.1
    return (x * x + z * z <= r * r) & (y >= 0) & (y <= params.height)


def _inside_bounding_box(x, y, z, params: FurnitureParams):
    return _in_box(x, y, z, 0.0, 0.0, 0.0, params.width, params.height, params.depth)


CLASSIFIERS: Dict[Archetype, Callable] = {
    Archetype.TABLE: _inside_table,
    Archetype.CHAIR: _inside_chair,
    Archetype.STOOL: _inside_stool,
    Archetype.BENCH: _inside_bench,
    Archetype.VASE: _inside_vase,
    # No bespoke volume for these: infill the bounding box
    Archetype.SHELF: _inside_bounding_box,
    Archetype.RECLINER: _inside_bounding_box,
    Archetype.LAMP: _inside_bounding_box,
    Archetype.MOBIUS: _inside_bounding_box,
}


def classify_grid(archetype, x, y, z, params: FurnitureParams) -> np.ndarray:
    """
    Elementwise membership for broadcastable coordinate arrays.

    Parameters:
    -----------
    archetype : Archetype or str
    x, y, z : array-like
        Coordinates (broadcast against each other)
    params : FurnitureParams

    Returns:
    --------
    np.ndarray of bool
        Broadcast shape of x, y, z
    """
    classifier = CLASSIFIERS[as_archetype(archetype)]
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    z = np.asarray(z, dtype=float)
    return np.asarray(classifier(x, y, z, params), dtype=bool)


def is_inside(archetype, point, params: FurnitureParams) -> bool:
    """
    True when point lies inside the archetype's solid region.

    Examples:
    ---------
    >>> p = FurnitureParams(width=1.0, height=1.0, depth=1.0)
    >>> is_inside('Table', (0.0, 0.95, 0.0), p)
    True
    >>> is_inside('Table', (0.0, 0.5, 0.0), p)
    False
    """
    x, y, z = point
    return bool(classify_grid(archetype, x, y, z, params))
