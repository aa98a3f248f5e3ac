"""
Vector Algebra Module

Small stateless helpers over fixed-dimension vectors (2 or 3 components)
used throughout the zone construction. Every function returns a new array;
inputs are never modified.
"""

import numpy as np
from typing import Optional

from .utils.constants import DIRECTION_TOL


def as_vector(v) -> np.ndarray:
    """Convert array-like input to a float64 vector."""
    return np.asarray(v, dtype=float)


def add(a, b) -> np.ndarray:
    return as_vector(a) + as_vector(b)


def subtract(a, b) -> np.ndarray:
    return as_vector(a) - as_vector(b)


def scale(a, s: float) -> np.ndarray:
    return as_vector(a) * s


def dot(a, b) -> float:
    return float(np.dot(as_vector(a), as_vector(b)))


def length(a) -> float:
    """Euclidean length."""
    return float(np.linalg.norm(as_vector(a)))


def normalize(a) -> np.ndarray:
    """
    Unit vector along ``a``.

    Returns the zero vector when ``|a| < DIRECTION_TOL`` instead of raising.
    """
    v = as_vector(a)
    norm = np.linalg.norm(v)
    if norm < DIRECTION_TOL:
        return np.zeros_like(v)
    return v / norm


def cross(a, b) -> np.ndarray:
    """Cross product of two 3D vectors."""
    a, b = as_vector(a), as_vector(b)
    if a.shape != (3,) or b.shape != (3,):
        raise ValueError("Cross product is only defined for 3D vectors")
    return np.cross(a, b)


def cross_2d(a, b) -> float:
    """Scalar (z-component) cross product of two 2D vectors."""
    return float(a[0] * b[1] - a[1] * b[0])


def distance(a, b) -> float:
    return length(subtract(a, b))


def lerp(a, b, t: float) -> np.ndarray:
    """Linear interpolation ``a + t (b - a)``."""
    a = as_vector(a)
    return a + (as_vector(b) - a) * t


def line_intersection_2d(p1, n1, p2, n2) -> Optional[np.ndarray]:
    """
    Intersect two 2D lines given in point-normal form ``n · (x - p) = 0``.

    Parameters
    ----------
    p1, n1 : array-like
        Point on and normal of the first line
    p2, n2 : array-like
        Point on and normal of the second line

    Returns
    -------
    np.ndarray or None
        Intersection point, or None when the lines are parallel
        (``|det| < DIRECTION_TOL``).
    """
    n1, n2 = as_vector(n1), as_vector(n2)
    det = cross_2d(n1, n2)
    if abs(det) < DIRECTION_TOL:
        return None
    d1 = dot(n1, p1)
    d2 = dot(n2, p2)
    return np.array([
        (d1 * n2[1] - d2 * n1[1]) / det,
        (n1[0] * d2 - n2[0] * d1) / det,
    ])


__all__ = [
    'as_vector',
    'add',
    'subtract',
    'scale',
    'dot',
    'length',
    'normalize',
    'cross',
    'cross_2d',
    'distance',
    'lerp',
    'line_intersection_2d',
]
