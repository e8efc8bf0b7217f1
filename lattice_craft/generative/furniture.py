# lattice_craft/generative/furniture.py
"""
FURNITURE GENERATOR: Archetype + Pattern -> Joint/Strut Network
===============================================================

The single entry point tying the generators together:

    Linear pattern      -> the archetype's skeletal builder
    Gyroid / Voronoi /  -> the volumetric generator, sampling the
    Triangular             archetype's classifier

Archetypes without a bespoke volume (Shelf, Recliner, Lamp, Mobius) infill
their bounding box in volumetric mode.
"""

import logging
from typing import Mapping, Optional, Union

import numpy as np

from ..model import Archetype, FurnitureParams, NetworkData, PatternFamily, as_archetype
from .skeletal import SKELETAL_BUILDERS
from .volumetric import generate_gyroid, generate_triangular, generate_voronoi

logger = logging.getLogger(__name__)


def generate_furniture(
    archetype: Union[Archetype, str],
    params: Union[FurnitureParams, Mapping],
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> NetworkData:
    """
    Generate the joint/strut network for one piece of furniture.

    Parameters:
    -----------
    archetype : Archetype or str
        'Chair', 'Table', 'Stool', 'Bench', 'Shelf', 'Vase', 'Recliner',
        'Lamp' or 'Mobius'
    params : FurnitureParams or mapping
        Dimensions and pattern family. A mapping is passed through
        FurnitureParams.from_mapping().
    rng : np.random.Generator, optional
        Randomness for the Voronoi scatter and the Recliner jitter
    seed : int, optional
        Convenience: build rng = default_rng(seed) when rng is not given

    Returns:
    --------
    NetworkData
        Fresh graph; every edge index is < len(nodes)

    Example:
    --------
    >>> params = FurnitureParams(width=0.4, height=0.45, depth=0.4,
    ...                          seat_height=0.2, pattern='Linear')
    >>> net = generate_furniture('Stool', params)
    >>> net.n_nodes, net.n_edges
    (16, 16)
    """
    archetype = as_archetype(archetype)
    if not isinstance(params, FurnitureParams):
        params = FurnitureParams.from_mapping(params)
    if rng is None:
        rng = np.random.default_rng(seed)

    pattern = params.pattern
    if pattern is PatternFamily.GYROID:
        network = generate_gyroid(archetype, params)
    elif pattern is PatternFamily.TRIANGULAR:
        network = generate_triangular(archetype, params)
    elif pattern is PatternFamily.VORONOI:
        network = generate_voronoi(archetype, params, rng=rng)
    else:
        network = SKELETAL_BUILDERS[archetype](params, rng)

    logger.debug("Generated %s/%s: %d nodes, %d edges",
                 archetype.value, pattern.value, network.n_nodes, network.n_edges)
    return network
