"""Hex grid axial coordinate utilities (pointy-top layout)."""
from __future__ import annotations
import math
from typing import List, Tuple

import numpy as np

SQRT3 = math.sqrt(3.0)
Coord = Tuple[int, int]


def axial_to_pixel(q: int, r: int, hex_size: float) -> Tuple[float, float]:
    """Convert axial coords to the pixel centre of a pointy-top hex."""
    x = hex_size * SQRT3 * (q + r / 2.0)
    y = hex_size * 1.5 * r
    return x, y


def pixel_to_axial(x: float, y: float, hex_size: float) -> Coord:
    """Inverse of :func:`axial_to_pixel`.

    The fractional result is snapped with :func:`axial_round`, so any point
    inside a hex maps to that hex. ``hex_size`` must match the size used in
    :func:`axial_to_pixel`.
    """

    if hex_size == 0:
        raise ValueError("hex_size must be non-zero")

    fq = (SQRT3 / 3.0 * x - 1.0 / 3.0 * y) / hex_size
    fr = (2.0 / 3.0 * y) / hex_size
    return axial_round(fq, fr)


def axial_round(q: float, r: float) -> Coord:
    """Round fractional axial coordinates to the nearest hex.

    Each cube component is rounded on its own; the one that moved furthest is
    then rebuilt from the other two so ``q + r + s == 0`` holds again.
    """
    s = -q - r
    rq = round(q)
    rr = round(r)
    rs = round(s)

    dq = abs(rq - q)
    dr = abs(rr - r)
    ds = abs(rs - s)

    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    else:
        rs = -rq - rr

    return int(rq), int(rr)


def hex_corners(cx: float, cy: float, hex_size: float) -> List[Tuple[float, float]]:
    """Return the 6 corner points of a pointy-top hex centred at (cx, cy)."""
    pts: List[Tuple[float, float]] = []
    for i in range(6):
        angle = math.radians(60 * i - 30)
        pts.append((cx + hex_size * math.cos(angle), cy + hex_size * math.sin(angle)))
    return pts


def hex_centers(qs: np.ndarray, rs: np.ndarray, hex_size: float) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorised :func:`axial_to_pixel` over arrays of axial coords."""
    q = np.asarray(qs, dtype=np.float64)
    r = np.asarray(rs, dtype=np.float64)
    return hex_size * SQRT3 * (q + r / 2.0), hex_size * 1.5 * r
