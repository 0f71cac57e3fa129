"""Geometric utility functions.

This module supplements the domain objects with small numeric helpers used
by the editing sessions and the renderer.

The module provides the following functions:
    clamp: Clamp a value into a closed range.
    snap: Round a coordinate to the nearest grid line.
    snap_point: Snap both coordinates of a point.
    sample_cubic: Sample points along a cubic Bezier segment.
    endpoint_distances: Pairwise distances between two endpoint sets.
"""

from __future__ import annotations

import numpy as np

from ..config import GRID
from ..domain.geometry import Point


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def snap(value: float, grid: float = GRID) -> float:
    """Nearest multiple of grid."""
    return round(value / grid) * grid


def snap_point(point: Point, grid: float = GRID) -> Point:
    return Point(snap(point.x, grid), snap(point.y, grid))


def sample_cubic(p0: Point, c1: Point, c2: Point, p1: Point, n_samples: int = 24) -> np.ndarray:
    """Sample a cubic Bezier segment.

    Args:
        p0: Start point.
        c1: First control point.
        c2: Second control point.
        p1: End point.
        n_samples: Number of points to return, endpoints included.

    Returns:
        Array of shape (n_samples, 2).
    """
    t = np.linspace(0.0, 1.0, n_samples)[:, None]
    mt = 1.0 - t
    pts = np.array([p0.to_tuple(), c1.to_tuple(), c2.to_tuple(), p1.to_tuple()], dtype=float)
    return (mt ** 3 * pts[0] + 3 * mt ** 2 * t * pts[1] +
            3 * mt * t ** 2 * pts[2] + t ** 3 * pts[3])


def endpoint_distances(a: list[Point], b: list[Point]) -> np.ndarray:
    """Distance matrix between two point lists, shape (len(a), len(b))."""
    pa = np.array([p.to_tuple() for p in a], dtype=float).reshape(-1, 2)
    pb = np.array([p.to_tuple() for p in b], dtype=float).reshape(-1, 2)
    diff = pa[:, None, :] - pb[None, :, :]
    return np.hypot(diff[..., 0], diff[..., 1])
