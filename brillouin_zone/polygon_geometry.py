"""
Polygon and polyhedron measurements.

Stateless helpers over 2D polygons ((N, 2) arrays) and polyhedra given as
face lists (see ``clipping.Face``). Used by the zone builder to clean up and
classify fragments, and by consumers for labeling and checks.
"""

import numpy as np
from typing import List, Sequence, Tuple

from .utils.constants import DIRECTION_TOL, DUPLICATE_VERTEX_TOL_SQ, HALF_SPACE_TOL
from .vector_algebra import cross, length, normalize


def polygon_area(vertices) -> float:
    """Area of a 2D polygon (shoelace formula, absolute value)."""
    pts = np.asarray(vertices, dtype=float)
    if len(pts) < 3:
        return 0.0
    x, y = pts[:, 0], pts[:, 1]
    return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2)


def polygon_centroid(vertices) -> np.ndarray:
    """Vertex average of a 2D polygon; the origin for an empty polygon."""
    pts = np.asarray(vertices, dtype=float)
    if len(pts) == 0:
        return np.zeros(2)
    return pts.mean(axis=0)


def polygon_edges(vertices) -> List[Tuple[np.ndarray, np.ndarray]]:
    """Edges of a closed polygon as (start, end) pairs."""
    pts = np.asarray(vertices, dtype=float)
    return [(pts[i], pts[(i + 1) % len(pts)]) for i in range(len(pts))]


def dedupe_vertices(vertices, cyclic: bool = True) -> np.ndarray:
    """
    Drop consecutive vertices closer than sqrt(DUPLICATE_VERTEX_TOL_SQ).

    With ``cyclic`` the last vertex is also compared against the first.
    """
    pts = np.asarray(vertices, dtype=float)
    if len(pts) == 0:
        return pts
    kept = [pts[0]]
    for p in pts[1:]:
        if np.sum((p - kept[-1]) ** 2) >= DUPLICATE_VERTEX_TOL_SQ:
            kept.append(p)
    if cyclic and len(kept) > 1 and np.sum((kept[-1] - kept[0]) ** 2) < DUPLICATE_VERTEX_TOL_SQ:
        kept.pop()
    return np.array(kept)


def unique_points(points) -> np.ndarray:
    """Remove duplicates (any order) within sqrt(DUPLICATE_VERTEX_TOL_SQ)."""
    unique = []
    for p in np.asarray(points, dtype=float):
        if not any(np.sum((p - u) ** 2) < DUPLICATE_VERTEX_TOL_SQ for u in unique):
            unique.append(p)
    return np.array(unique)


def sort_ccw(vertices) -> np.ndarray:
    """Sort 2D points counter-clockwise around their centroid."""
    pts = np.asarray(vertices, dtype=float)
    if len(pts) <= 2:
        return pts.copy()
    c = pts.mean(axis=0)
    angles = np.arctan2(pts[:, 1] - c[1], pts[:, 0] - c[0])
    return pts[np.argsort(angles, kind='stable')]


def plane_basis(normal) -> Tuple[np.ndarray, np.ndarray]:
    """
    Orthonormal in-plane axes (u, v) with u × v along ``normal``.
    """
    n = normalize(normal)
    # Find a vector not parallel to the normal
    if np.abs(n[0]) < 0.9:
        u = cross(n, [1.0, 0.0, 0.0])
    else:
        u = cross(n, [0.0, 1.0, 0.0])
    u = normalize(u)
    v = cross(n, u)
    return u, v


def sort_ccw_3d(vertices, normal) -> np.ndarray:
    """
    Sort coplanar 3D points counter-clockwise as seen from the tip of ``normal``.

    Duplicates are removed first; fewer than 3 distinct points are returned
    unsorted.
    """
    pts = unique_points(vertices)
    if len(pts) < 3 or length(normal) < DIRECTION_TOL:
        return pts
    u, v = plane_basis(normal)
    d = pts - pts.mean(axis=0)
    angles = np.arctan2(d @ v, d @ u)
    return pts[np.argsort(angles, kind='stable')]


def point_in_polygon(point, vertices) -> bool:
    """
    Ray casting test for a point against a simple polygon.

    Points exactly on the boundary may be reported either way.
    """
    x, y = float(point[0]), float(point[1])
    pts = np.asarray(vertices, dtype=float)
    inside = False
    j = len(pts) - 1
    for i in range(len(pts)):
        xi, yi = pts[i]
        xj, yj = pts[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def point_in_convex_polygon(point, vertices, tol: float = HALF_SPACE_TOL) -> bool:
    """Inclusive test against a CCW convex polygon."""
    pts = np.asarray(vertices, dtype=float)
    if len(pts) < 3:
        return False
    p = np.asarray(point, dtype=float)
    for a, b in polygon_edges(pts):
        edge = b - a
        to_point = p - a
        if edge[0] * to_point[1] - edge[1] * to_point[0] < -tol:
            return False
    return True


def face_area_3d(vertices) -> float:
    """Area of a planar 3D polygon (triangle fan from the first vertex)."""
    pts = np.asarray(vertices, dtype=float)
    if len(pts) < 3:
        return 0.0
    a = pts[0]
    area = 0.0
    for b, c in zip(pts[1:-1], pts[2:]):
        area += length(cross(b - a, c - a)) / 2
    return float(area)


def polyhedron_volume(faces: Sequence) -> float:
    """
    Volume of a closed polyhedron by the divergence theorem.

    V = |Σ_faces Σ_fan a · (b × c) / 6|
    """
    volume = 0.0
    for face in faces:
        pts = np.asarray(face.vertices, dtype=float)
        if len(pts) < 3:
            continue
        a = pts[0]
        for b, c in zip(pts[1:-1], pts[2:]):
            volume += np.dot(a, cross(b, c)) / 6
    return float(abs(volume))


def point_in_polyhedron(point, faces: Sequence, tol: float = HALF_SPACE_TOL) -> bool:
    """
    Inclusive test against a convex polyhedron.

    Every face contributes the half-space ``normal · (x - v₀) <= tol``.
    """
    p = np.asarray(point, dtype=float)
    for face in faces:
        v0 = np.asarray(face.vertices[0], dtype=float)
        if np.dot(face.normal, p - v0) > tol:
            return False
    return True


def bounding_radius(vertices) -> float:
    """Largest vertex distance from the origin."""
    pts = np.asarray(vertices, dtype=float)
    if len(pts) == 0:
        return 0.0
    return float(np.max(np.linalg.norm(pts, axis=1)))


def polyhedron_topology(faces: Sequence, decimals: int = 6) -> Tuple[int, int, int]:
    """
    Count distinct vertices, edges and faces of a polyhedron.

    Vertices are identified after rounding to ``decimals``.

    Returns
    -------
    (V, E, F) : Tuple[int, int, int]
    """
    ids = {}
    edges = set()
    for face in faces:
        keys = []
        for p in np.asarray(face.vertices, dtype=float):
            key = tuple(np.round(p, decimals) + 0.0)
            keys.append(ids.setdefault(key, len(ids)))
        for i in range(len(keys)):
            a, b = keys[i], keys[(i + 1) % len(keys)]
            if a != b:
                edges.add((min(a, b), max(a, b)))
    return len(ids), len(edges), len(faces)


__all__ = [
    'polygon_area',
    'polygon_centroid',
    'polygon_edges',
    'dedupe_vertices',
    'unique_points',
    'sort_ccw',
    'plane_basis',
    'sort_ccw_3d',
    'point_in_polygon',
    'point_in_convex_polygon',
    'face_area_3d',
    'polyhedron_volume',
    'point_in_polyhedron',
    'bounding_radius',
    'polyhedron_topology',
]
