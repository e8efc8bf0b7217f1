# lattice_craft/generative/skeletal.py
"""
SKELETAL PATTERNS: Hand-Designed Topologies per Archetype
=========================================================

PURPOSE:
--------
The 'Linear' pattern family. Each archetype has its own small, explicitly
enumerated skeleton. These builders never consult the classifier: the
topology IS the design.

BUILDERS:
---------
- Chair:    legs, braced seat quad, backrest with cross braces, side stretchers
- Table:    legs, top quad, mid-edge "wheel" reinforcement around a hub
- Stool:    splayed ring frame with cross diagonals and a foot-rest ring
- Bench:    three leg frames, each braced to the previous one
- Shelf:    four braced levels stacked on vertical posts
- Vase:     twisted, bulged cylindrical shell
- Recliner: jittered lattice draped over a Bezier spine, sparse floor legs
- Lamp:     twisted, perturbed hourglass of stacked rings
- Mobius:   half-twist strip whose seam reverses the cross-section index

All builders share the signature  build_x(params, rng) -> NetworkData  so
they can sit in one dispatch table; only the Recliner draws from rng.

Coordinate convention: y up, footprint centered on the origin in x/z.
"""

import logging
from typing import Callable, Dict, List

import numpy as np

from ..kernel.curves import cubic_bezier_point
from ..model import Archetype, FurnitureParams, NetworkData

logger = logging.getLogger(__name__)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


# =============================================================================
# Frame furniture
# =============================================================================

def build_chair(params: FurnitureParams, rng=None) -> NetworkData:
    """Four legs, braced seat, backrest with cross braces, side stretchers."""
    net = NetworkData()
    w2, d2 = params.width / 2, params.depth / 2
    seat, height = params.seat_height, params.height

    # Floor contacts
    fl_b = net.add_node(-w2, 0, d2)
    fr_b = net.add_node(w2, 0, d2)
    bl_b = net.add_node(-w2, 0, -d2)
    br_b = net.add_node(w2, 0, -d2)
    # Seat level
    fl_s = net.add_node(-w2, seat, d2)
    fr_s = net.add_node(w2, seat, d2)
    bl_s = net.add_node(-w2, seat, -d2)
    br_s = net.add_node(w2, seat, -d2)
    # Backrest top
    bl_t = net.add_node(-w2, height, -d2)
    br_t = net.add_node(w2, height, -d2)

    # Legs
    net.link(fl_b, fl_s)
    net.link(fr_b, fr_s)
    net.link(bl_b, bl_s)
    net.link(br_b, br_s)
    # Seat quad + diagonals
    net.link(fl_s, fr_s)
    net.link(fr_s, br_s)
    net.link(br_s, bl_s)
    net.link(bl_s, fl_s)
    net.link(fl_s, br_s)
    net.link(fr_s, bl_s)
    # Backrest
    net.link(bl_s, bl_t)
    net.link(br_s, br_t)
    net.link(bl_t, br_t)
    net.link(bl_t, br_s)
    net.link(br_t, bl_s)

    # Side stretchers at 30% of the seat height
    stretch_h = seat * 0.3
    fl_str = net.add_node(-w2, stretch_h, d2)
    fr_str = net.add_node(w2, stretch_h, d2)
    bl_str = net.add_node(-w2, stretch_h, -d2)
    br_str = net.add_node(w2, stretch_h, -d2)
    net.link(fl_str, bl_str)
    net.link(fr_str, br_str)

    return net


def build_table(params: FurnitureParams, rng=None) -> NetworkData:
    """Four legs, top quad, and a four-spoke wheel reinforcing the top."""
    net = NetworkData()
    w2, d2 = params.width / 2, params.depth / 2
    h = params.height

    fl_b = net.add_node(-w2, 0, d2)
    fr_b = net.add_node(w2, 0, d2)
    bl_b = net.add_node(-w2, 0, -d2)
    br_b = net.add_node(w2, 0, -d2)
    fl_t = net.add_node(-w2, h, d2)
    fr_t = net.add_node(w2, h, d2)
    bl_t = net.add_node(-w2, h, -d2)
    br_t = net.add_node(w2, h, -d2)

    net.link(fl_b, fl_t)
    net.link(fr_b, fr_t)
    net.link(bl_b, bl_t)
    net.link(br_b, br_t)
    net.link(fl_t, fr_t)
    net.link(fr_t, br_t)
    net.link(br_t, bl_t)
    net.link(bl_t, fl_t)

    # Mid-edge nodes and hub
    tm_f = net.add_node(0, h, d2)
    tm_b = net.add_node(0, h, -d2)
    tm_l = net.add_node(-w2, h, 0)
    tm_r = net.add_node(w2, h, 0)
    center = net.add_node(0, h, 0)

    net.link(fl_t, tm_f)
    net.link(tm_f, fr_t)
    net.link(bl_t, tm_b)
    net.link(tm_b, br_t)
    net.link(fl_t, tm_l)
    net.link(tm_l, bl_t)
    net.link(fr_t, tm_r)
    net.link(tm_r, br_t)
    net.link(tm_l, center)
    net.link(center, tm_r)
    net.link(tm_f, center)
    net.link(center, tm_b)

    return net


STOOL_STEPS = 4
STOOL_REST_LEVEL = 0.3


def build_stool(params: FurnitureParams, rng=None) -> NetworkData:
    """
    Splayed stool: bottom ring wider than the top ring.

    Per step: a vertical, a top-ring edge, a cross diagonal to the next top
    node, and one segment (two fresh nodes) of the foot-rest ring at 30% of
    the height. With 4 steps that is 16 nodes and 16 edges.
    """
    net = NetworkData()
    radius_top = params.width / 2
    radius_bot = params.width / 1.5
    steps = STOOL_STEPS

    rest_h = params.height * STOOL_REST_LEVEL
    rest_r = _lerp(radius_bot, radius_top, STOOL_REST_LEVEL)

    def angle(i: int) -> float:
        return (i / steps) * 2 * np.pi + np.pi / 4

    bottom: List[int] = []
    top: List[int] = []
    for i in range(steps):
        theta = angle(i)
        bottom.append(net.add_node(np.cos(theta) * radius_bot, 0, np.sin(theta) * radius_bot))
        top.append(net.add_node(np.cos(theta) * radius_top, params.height, np.sin(theta) * radius_top))

    for i in range(steps):
        nxt = (i + 1) % steps
        net.link(bottom[i], top[i])
        net.link(top[i], top[nxt])
        net.link(bottom[i], top[nxt])

        rest_a = net.add_node(np.cos(angle(i)) * rest_r, rest_h, np.sin(angle(i)) * rest_r)
        rest_b = net.add_node(np.cos(angle(i + 1)) * rest_r, rest_h, np.sin(angle(i + 1)) * rest_r)
        net.link(rest_a, rest_b)

    return net


BENCH_LEGS = 3


def build_bench(params: FurnitureParams, rng=None) -> NetworkData:
    """Evenly spaced leg frames along x, each cross-braced to the previous one."""
    net = NetworkData()
    w2, d2 = params.width / 2, params.depth / 2
    dx = params.width / (BENCH_LEGS - 1)

    prev_top = None
    for i in range(BENCH_LEGS):
        x = -w2 + i * dx
        f_b = net.add_node(x, 0, d2)
        b_b = net.add_node(x, 0, -d2)
        f_t = net.add_node(x, params.height, d2)
        b_t = net.add_node(x, params.height, -d2)
        net.link(f_b, f_t)
        net.link(b_b, b_t)
        net.link(f_t, b_t)

        if prev_top is not None:
            prev_f_t, prev_b_t = prev_top
            net.link(prev_f_t, f_t)
            net.link(prev_b_t, b_t)
            net.link(prev_f_t, b_t)
            net.link(prev_b_t, f_t)
        prev_top = (f_t, b_t)

    return net


SHELF_LEVELS = 4


def build_shelf(params: FurnitureParams, rng=None) -> NetworkData:
    """Braced quads at evenly spaced levels, posts between consecutive levels."""
    net = NetworkData()
    w2, d2 = params.width / 2, params.depth / 2
    dy = params.height / (SHELF_LEVELS - 1)

    prev_level = None
    for i in range(SHELF_LEVELS):
        y = i * dy
        fl = net.add_node(-w2, y, d2)
        fr = net.add_node(w2, y, d2)
        bl = net.add_node(-w2, y, -d2)
        br = net.add_node(w2, y, -d2)
        net.link(fl, fr)
        net.link(fr, br)
        net.link(br, bl)
        net.link(bl, fl)
        net.link(fl, br)
        net.link(fr, bl)

        level = (fl, fr, bl, br)
        if prev_level is not None:
            for below, above in zip(prev_level, level):
                net.link(below, above)
        prev_level = level

    return net


# =============================================================================
# Shell and surface furniture
# =============================================================================

VASE_RINGS = 8
VASE_SEGMENTS = 6


def build_vase(params: FurnitureParams, rng=None) -> NetworkData:
    """Twisted ring stack with a half-sine bulge; rings joined by verticals and diagonals."""
    net = NetworkData()
    base_radius = params.width * 0.4

    prev_ring: List[int] = []
    for r in range(VASE_RINGS):
        t = r / (VASE_RINGS - 1)
        y = t * params.height
        bulge = np.sin(t * np.pi) * 0.3
        radius = base_radius + bulge + (r / VASE_RINGS) * 0.1
        twist = r * 0.2

        ring = []
        for s in range(VASE_SEGMENTS):
            theta = (s / VASE_SEGMENTS) * 2 * np.pi + twist
            ring.append(net.add_node(np.cos(theta) * radius, y, np.sin(theta) * radius))

        for s in range(VASE_SEGMENTS):
            nxt = (s + 1) % VASE_SEGMENTS
            net.link(ring[s], ring[nxt])
            if prev_ring:
                net.link(prev_ring[s], ring[s])
                net.link(prev_ring[s], ring[nxt])
        prev_ring = ring

    return net


RECLINER_DENSITY_U = 30
RECLINER_DENSITY_V = 12
RECLINER_LEG_CHANCE = 0.03


def build_recliner(params: FurnitureParams, rng=None) -> NetworkData:
    """
    Organic lounge surface.

    A cubic Bezier spine (in the y/z plane) gives the seat profile. A
    (30+1) x (12+1) grid of jittered points is draped over it with a slight
    transverse cradle. Points are linked to nearby points inside a sliding
    window of the following 3 rows. Low points occasionally drop a leg.

    Parameters:
    -----------
    params : FurnitureParams
    rng : np.random.Generator, optional
        Drives the jitter and leg placement; a fresh unseeded generator when
        omitted.
    """
    if rng is None:
        rng = np.random.default_rng()

    net = NetworkData()
    width, height, depth = params.width, params.height, params.depth
    n_u, n_v = RECLINER_DENSITY_U, RECLINER_DENSITY_V

    p0 = (0.0, height * 0.9, -depth / 2)
    p1 = (0.0, height * 0.2, -depth / 4)
    p2 = (0.0, height * 0.6, depth / 4)
    p3 = (0.0, height * 0.3, depth / 2)

    surface: List[int] = []
    for i in range(n_u + 1):
        t = i / n_u
        spine_y = cubic_bezier_point(p0, p1, p2, p3, t)[1]
        spine_z = _lerp(-depth / 2, depth / 2, t)
        jitter_z = (rng.random() - 0.5) * (depth / n_u) * 0.8
        for j in range(n_v + 1):
            u = j / n_v
            x = (u - 0.5) * width
            jitter_x = (rng.random() - 0.5) * (width / n_v) * 0.8
            cradle = np.cos((u - 0.5) * np.pi) * -0.1 * width
            surface.append(net.add_node(x + jitter_x, spine_y + cradle, spine_z + jitter_z))

    connection_dist = (width / n_v) * 1.8
    window = n_v * 3
    for a in range(len(surface)):
        pa = net.nodes[surface[a]]
        for b in range(a + 1, min(a + window, len(surface))):
            if np.linalg.norm(net.nodes[surface[b]] - pa) < connection_dist:
                net.link(surface[a], surface[b])

    for node_id in surface:
        p = net.nodes[node_id]
        if rng.random() > 1.0 - RECLINER_LEG_CHANCE and p[1] < height * 0.5:
            leg = net.add_node(p[0], 0.0, p[2])
            net.link(node_id, leg)

    logger.debug("Recliner: %d nodes, %d edges", net.n_nodes, net.n_edges)
    return net


LAMP_LAYERS = 16
LAMP_POINTS_PER_LAYER = 9


def build_lamp(params: FurnitureParams, rng=None) -> NetworkData:
    """
    Hyphae lamp: stacked rings following a pinched hourglass profile,
    twisted two full turns and perturbed by layered sinusoids.
    """
    net = NetworkData()
    width = params.width
    rad_base = width * 0.4
    rad_top = width * 0.25
    k = LAMP_POINTS_PER_LAYER

    prev_layer: List[int] = []
    for i in range(LAMP_LAYERS + 1):
        t = i / LAMP_LAYERS
        y = t * params.height
        profile = 1 - np.sin(t * np.pi) * 0.5
        radius = _lerp(rad_base, rad_top, t) * profile
        twist = t * np.pi * 4

        layer = []
        for j in range(k):
            angle = (j / k) * 2 * np.pi
            wobble_x = np.sin(angle * 3 + t * 10) * 0.1 * width
            wobble_z = np.cos(angle * 5 - t * 8) * 0.1 * width
            x = np.cos(angle + twist) * radius + wobble_x
            z = np.sin(angle + twist) * radius + wobble_z
            layer.append(net.add_node(x, y, z))

        for j in range(k):
            if prev_layer:
                net.link(layer[j], prev_layer[j])
                net.link(layer[j], prev_layer[(j + 1) % k])
            net.link(layer[j], layer[(j + 1) % k])
        prev_layer = layer

    return net


MOBIUS_SEGMENTS_T = 64
MOBIUS_SEGMENTS_S = 4


def build_mobius(params: FurnitureParams, rng=None) -> NetworkData:
    """
    Mobius bench: a strip with a half twist.

    The strip is a 64 x 5 parametric grid. Crossing the seam (last row back
    to row 0) reverses the cross-section index, j -> 4 - j, which is what
    makes the strip one-sided. Nodes dipping below the floor are clamped to
    y = 0.
    """
    net = NetworkData()
    R = params.width * 0.8
    n_t, n_s = MOBIUS_SEGMENTS_T, MOBIUS_SEGMENTS_S
    strip_width = params.depth * 0.4

    grid: List[List[int]] = []
    for i in range(n_t):
        t = (i / n_t) * 2 * np.pi
        row = []
        for j in range(n_s + 1):
            s = ((j / n_s) - 0.5) * strip_width
            mx = (R + s * np.cos(t / 2)) * np.cos(t)
            my = (R + s * np.cos(t / 2)) * np.sin(t)
            mz = s * np.sin(t / 2)
            row.append(net.add_node(mx, mz + params.height / 2, my * 0.6))
        grid.append(row)

    for i in range(n_t):
        nxt = (i + 1) % n_t
        on_seam = nxt == 0
        for j in range(n_s + 1):
            curr = grid[i][j]
            if on_seam:
                net.link(curr, grid[0][n_s - j])
            else:
                net.link(curr, grid[nxt][j])
            if j < n_s:
                net.link(curr, grid[i][j + 1])
                if not on_seam:
                    net.link(curr, grid[nxt][j + 1])

    for node in net.nodes:
        if node[1] < 0:
            node[1] = 0.0

    return net


SKELETAL_BUILDERS: Dict[Archetype, Callable[..., NetworkData]] = {
    Archetype.CHAIR: build_chair,
    Archetype.TABLE: build_table,
    Archetype.STOOL: build_stool,
    Archetype.BENCH: build_bench,
    Archetype.SHELF: build_shelf,
    Archetype.VASE: build_vase,
    Archetype.RECLINER: build_recliner,
    Archetype.LAMP: build_lamp,
    Archetype.MOBIUS: build_mobius,
}
