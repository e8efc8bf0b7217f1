# lattice_craft/generative/volumetric.py
"""
VOLUMETRIC PATTERNS: Filling a Classifier Volume with a Lattice
===============================================================

PURPOSE:
--------
Three strategies that sample an archetype's implicit volume (see
classifier.py) and emit a joint/strut graph. None of them builds a closed
surface; the output is always a NetworkData.

TOPOLOGIES:
-----------
- Gyroid:     axis-aligned lattice restricted to the shell around the gyroid
              zero level set  sin(x)cos(y) + sin(y)cos(z) + sin(z)cos(x) = 0
- Voronoi:    uniformly scattered, jittered points joined to every neighbor
              closer than ~1.8x the expected nearest-neighbor spacing
- Triangular: regular grid with orthogonal, face-diagonal and space-diagonal
              struts (a triangulated space frame)

GRID INDEXING:
--------------
Grid cells are keyed by their (ix, iy, iz) triple. Kept nodes are numbered in
x-major, then y, then z order, the order numpy's C-order flattening uses.

COST:
-----
Grid patterns are O(nx * ny * nz); the Voronoi connection step is O(n^2) in
accepted points, bounded by the density constant (hundreds of points for
furniture-sized volumes).
"""

import logging
import math
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from ..model import FurnitureParams, NetworkData
from .classifier import classify_grid

logger = logging.getLogger(__name__)

# Gyroid
GYROID_RESOLUTION = 0.08     # grid step
GYROID_SCALE = 8.0           # pattern frequency
GYROID_SHELL = 0.5           # keep |f| below this

# Voronoi
VORONOI_DENSITY = 600.0      # points per cubic unit
VORONOI_MIN_POINTS = 50
VORONOI_ATTEMPT_FACTOR = 10
VORONOI_JITTER = 0.05
VORONOI_LINK_FACTOR = 1.8

# Triangular
TRIANGULAR_CELL = 0.15

GYROID_OFFSETS = ((1, 0, 0), (0, 1, 0), (0, 0, 1))

TRIANGULAR_OFFSETS = (
    (1, 0, 0), (0, 1, 0), (0, 0, 1),    # orthogonal
    (1, 1, 0), (1, 0, 1), (0, 1, 1),    # face diagonals
    (1, 1, 1),                          # space diagonal
)


def gyroid_field(gx, gy, gz):
    """Gyroid implicit function at (already scaled) coordinates."""
    return (
        np.sin(gx) * np.cos(gy)
        + np.sin(gy) * np.cos(gz)
        + np.sin(gz) * np.cos(gx)
    )


def _grid_network(
    keep: np.ndarray,
    coords: Tuple[np.ndarray, np.ndarray, np.ndarray],
    offsets: Sequence[Tuple[int, int, int]],
) -> NetworkData:
    """
    Turn a boolean grid mask into a lattice graph.

    Every kept cell becomes a node; each node is linked to the kept cells at
    the given forward offsets.
    """
    network = NetworkData()
    node_map: Dict[Tuple[int, int, int], int] = {}
    wx, wy, wz = coords

    for ix, iy, iz in np.argwhere(keep):
        cell = (int(ix), int(iy), int(iz))
        node_map[cell] = network.add_node(wx[ix], wy[iy], wz[iz])

    for (ix, iy, iz), node_id in node_map.items():
        for dx, dy, dz in offsets:
            neighbor = node_map.get((ix + dx, iy + dy, iz + dz))
            if neighbor is not None:
                network.link(node_id, neighbor)

    return network


def generate_gyroid(archetype, params: FurnitureParams) -> NetworkData:
    """
    Lattice on the gyroid shell inside the archetype volume.

    The grid covers the bounding box plus one cell of padding on every side,
    with a fixed step (independent of params).
    """
    res = GYROID_RESOLUTION
    nx = math.ceil(params.width / res) + 2
    ny = math.ceil(params.height / res) + 2
    nz = math.ceil(params.depth / res) + 2

    wx = -params.width / 2 - res + np.arange(nx) * res
    wy = -res + np.arange(ny) * res
    wz = -params.depth / 2 - res + np.arange(nz) * res
    X, Y, Z = np.meshgrid(wx, wy, wz, indexing='ij')

    inside = classify_grid(archetype, X, Y, Z, params)
    shell = np.abs(gyroid_field(X * GYROID_SCALE, Y * GYROID_SCALE, Z * GYROID_SCALE)) < GYROID_SHELL

    network = _grid_network(inside & shell, (wx, wy, wz), GYROID_OFFSETS)
    logger.debug("Gyroid %s: grid %dx%dx%d -> %d nodes, %d edges",
                 archetype, nx, ny, nz, network.n_nodes, network.n_edges)
    return network


def generate_triangular(archetype, params: FurnitureParams) -> NetworkData:
    """
    Space-frame lattice: grid points inside the volume, linked along the
    7 forward offsets (orthogonal + face diagonals + space diagonal).

    The grid includes both boundaries of the bounding box.
    """
    cell = TRIANGULAR_CELL
    nx = math.ceil(params.width / cell)
    ny = math.ceil(params.height / cell)
    nz = math.ceil(params.depth / cell)

    wx = -params.width / 2 + np.arange(nx + 1) * cell
    wy = 0.0 + np.arange(ny + 1) * cell
    wz = -params.depth / 2 + np.arange(nz + 1) * cell
    X, Y, Z = np.meshgrid(wx, wy, wz, indexing='ij')

    inside = classify_grid(archetype, X, Y, Z, params)

    network = _grid_network(inside, (wx, wy, wz), TRIANGULAR_OFFSETS)
    logger.debug("Triangular %s: grid %dx%dx%d -> %d nodes, %d edges",
                 archetype, nx + 1, ny + 1, nz + 1, network.n_nodes, network.n_edges)
    return network


def voronoi_target_count(params: FurnitureParams) -> int:
    """Requested point count: max(50, floor(volume * density))."""
    return max(VORONOI_MIN_POINTS, math.floor(params.bounding_volume * VORONOI_DENSITY))


def voronoi_link_threshold(params: FurnitureParams) -> float:
    """Link distance: 1.8x the expected spacing (volume / count)^(1/3)."""
    target = voronoi_target_count(params)
    return VORONOI_LINK_FACTOR * (params.bounding_volume / target) ** (1.0 / 3.0)


def generate_voronoi(
    archetype,
    params: FurnitureParams,
    rng: Optional[np.random.Generator] = None,
) -> NetworkData:
    """
    Scattered-point proximity graph.

    Points are rejection-sampled uniformly in the bounding box, kept when the
    classifier accepts them, and jittered slightly. Sampling stops at the
    target count or after 10x target attempts, whichever comes first; a
    short count is expected for thin shapes, not an error.

    Parameters:
    -----------
    archetype : Archetype or str
    params : FurnitureParams
    rng : np.random.Generator, optional
        Source of randomness. Pass a seeded generator for reproducible output.

    Returns:
    --------
    NetworkData
        Every pair closer than voronoi_link_threshold() is linked, in
        row-major (i < j) order.
    """
    if rng is None:
        rng = np.random.default_rng()

    width, height, depth = params.width, params.height, params.depth
    target = voronoi_target_count(params)
    max_attempts = target * VORONOI_ATTEMPT_FACTOR

    network = NetworkData()
    attempts = 0
    while network.n_nodes < target and attempts < max_attempts:
        attempts += 1
        x = (rng.random() - 0.5) * width
        y = rng.random() * height
        z = (rng.random() - 0.5) * depth

        if classify_grid(archetype, x, y, z, params):
            px = x + (rng.random() - 0.5) * VORONOI_JITTER
            py = y + (rng.random() - 0.5) * VORONOI_JITTER
            pz = z + (rng.random() - 0.5) * VORONOI_JITTER
            network.add_node(px, py, pz)

    if network.n_nodes < target:
        logger.debug("Voronoi %s: attempt budget exhausted, %d of %d points",
                     archetype, network.n_nodes, target)

    # Brute force, one row at a time to keep memory linear in n
    points = network.points()
    threshold = voronoi_link_threshold(params)
    for i in range(len(points) - 1):
        dist = np.linalg.norm(points[i + 1:] - points[i], axis=1)
        for j in np.flatnonzero(dist < threshold):
            network.link(i, i + 1 + j)

    logger.debug("Voronoi %s: %d nodes, %d edges", archetype, network.n_nodes, network.n_edges)
    return network
