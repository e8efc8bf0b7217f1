# lattice_craft/model.py
"""
MODEL DEFINITIONS: NetworkData, FurnitureParams and the closed variant sets
===========================================================================

PURPOSE:
--------
This module defines the data every generator produces or consumes:
- NetworkData:     joints (nodes) and struts (edges) of a printable lattice
- FurnitureParams: the overall dimensions and the pattern family
- Archetype:       the nine furniture kinds
- PatternFamily:   the four topology strategies

FABRICATION CONTEXT:
--------------------
A NetworkData is a PIN-JOINTED SKELETON, not a mesh:
- Each node becomes a printed spherical joint
- Each edge becomes a (possibly serpentine) printed tube between two joints
- The graph is a multiset: duplicate edges and self-loops are allowed and are
  left for the downstream mesher to tolerate

Coordinate system: y is up, the footprint spans x (width) and z (depth),
centered on the origin. The floor is y = 0.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import List, Mapping, Tuple

import numpy as np


class PatternFamily(Enum):
    """
    Topology strategy.

    - LINEAR:     hand-designed skeleton per archetype
    - GYROID:     lattice restricted to a gyroid-surface shell
    - VORONOI:    scattered points joined by proximity
    - TRIANGULAR: space-frame grid with face and space diagonals
    """
    LINEAR = 'Linear'
    GYROID = 'Gyroid'
    VORONOI = 'Voronoi'
    TRIANGULAR = 'Triangular'

    @property
    def is_volumetric(self) -> bool:
        """True when the pattern fills the archetype's classifier volume."""
        return self is not PatternFamily.LINEAR


class Archetype(Enum):
    """The nine furniture kinds."""
    CHAIR = 'Chair'
    TABLE = 'Table'
    STOOL = 'Stool'
    BENCH = 'Bench'
    SHELF = 'Shelf'
    VASE = 'Vase'
    RECLINER = 'Recliner'
    LAMP = 'Lamp'
    MOBIUS = 'Mobius'


def as_archetype(value) -> Archetype:
    """Coerce an Archetype or its string value ('Chair', ...)."""
    if isinstance(value, Archetype):
        return value
    try:
        return Archetype(value)
    except ValueError:
        raise ValueError(f"Unknown archetype: {value}") from None


def as_pattern(value) -> PatternFamily:
    """Coerce a PatternFamily or its string value ('Linear', ...)."""
    if isinstance(value, PatternFamily):
        return value
    try:
        return PatternFamily(value)
    except ValueError:
        raise ValueError(f"Unknown pattern: {value}") from None


@dataclass
class FurnitureParams:
    """
    Parameters defining one piece of furniture.

    Geometry:
    ---------
    width : float
        Span in x
    height : float
        Extent in y (the floor is y = 0)
    depth : float
        Extent in z
    seat_height : float
        Secondary level; only the Chair uses it

    Topology:
    ---------
    pattern : PatternFamily
        'Linear', 'Gyroid', 'Voronoi' or 'Triangular' (strings are coerced)

    Notes:
    ------
    Values are NOT validated. Non-positive dimensions or a seat outside
    [0, height] still run but may give degenerate or empty graphs.
    """
    width: float = 0.6
    height: float = 0.9
    depth: float = 0.6
    seat_height: float = 0.45
    pattern: PatternFamily = PatternFamily.LINEAR

    def __post_init__(self):
        self.pattern = as_pattern(self.pattern)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "FurnitureParams":
        """
        Build params from a plain mapping.

        Accepts 'seatHeight' as an alias of 'seat_height'; unknown keys are
        ignored.
        """
        data = dict(mapping)
        if 'seatHeight' in data and 'seat_height' not in data:
            data['seat_height'] = data.pop('seatHeight')
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @property
    def bounding_volume(self) -> float:
        return self.width * self.height * self.depth


@dataclass
class NetworkData:
    """
    A joint/strut graph.

    Attributes:
    -----------
    nodes : List[np.ndarray]
        Joint positions, shape (3,) each. The list index IS the node id.
    edges : List[Tuple[int, int]]
        Strut connectivity as (i, j) node-id pairs, in emission order.
        Direction carries no meaning; pair order is kept as emitted.

    Examples:
    ---------
    >>> net = NetworkData()
    >>> a = net.add_node(0.0, 0.0, 0.0)
    >>> b = net.add_node(0.0, 1.0, 0.0)
    >>> net.link(a, b)
    >>> net.n_nodes, net.n_edges
    (2, 1)
    """
    nodes: List[np.ndarray] = field(default_factory=list)
    edges: List[Tuple[int, int]] = field(default_factory=list)

    def add_node(self, x: float, y: float, z: float) -> int:
        """Append a joint and return its id."""
        self.nodes.append(np.array([x, y, z], dtype=float))
        return len(self.nodes) - 1

    def link(self, a: int, b: int) -> None:
        """Append a strut between joints a and b."""
        self.edges.append((int(a), int(b)))

    @property
    def n_nodes(self) -> int:
        return len(self.nodes)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def points(self) -> np.ndarray:
        """All joint positions as an (N, 3) array."""
        if not self.nodes:
            return np.zeros((0, 3))
        return np.vstack(self.nodes)

    def edge_endpoints(self, edge_id: int) -> Tuple[np.ndarray, np.ndarray]:
        i, j = self.edges[edge_id]
        return self.nodes[i], self.nodes[j]
