"""
Convex Clipping Module

Half-space clipping of convex polygons (2D) and convex polyhedra (3D), the
geometric engine behind the zone construction.

Algorithms:
-----------
2D - Sutherland-Hodgman against a single half-plane n · x <= d. Walking the
oriented edges (current, next) of the polygon:

    current inside                -> keep current
    edge crosses the boundary     -> insert current + t (next - current),
                                     t = dc / (dc - dn)

where dc, dn are the signed distances n · x - d of the two endpoints and
"inside" means a signed distance <= 1e-9.

3D - the same edge walk applied to every face loop of the polyhedron. The
crossing points produced on the cutting plane are collected across all faces,
deduplicated and sorted counter-clockwise around the plane normal to form a
new cap face that closes the clipped polyhedron.

Usage:
------
    from brillouin_zone.clipping import square_polygon, clip_polygon_by_half_plane

    square = square_polygon(1.0)
    half = clip_polygon_by_half_plane(square, [1.0, 0.0], 0.0)
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .polygon_geometry import dedupe_vertices, plane_basis, sort_ccw_3d
from .utils.constants import HALF_SPACE_TOL
from .vector_algebra import lerp, normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Face:
    """
    Planar face of a convex polyhedron.

    Attributes
    ----------
    vertices : np.ndarray
        (M, 3) vertex loop, counter-clockwise seen from outside, M >= 3
    normal : np.ndarray
        Outward unit normal
    """
    vertices: np.ndarray
    normal: np.ndarray

    def __post_init__(self):
        for name in ('vertices', 'normal'):
            arr = np.array(getattr(self, name), dtype=float)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)


def square_polygon(half_width: float) -> np.ndarray:
    """Axis-aligned CCW square centered at the origin."""
    r = half_width
    return np.array([[-r, -r], [r, -r], [r, r], [-r, r]], dtype=float)


def cube_faces(half_width: float) -> List[Face]:
    """Faces of an axis-aligned cube centered at the origin."""
    r = half_width
    return [
        # +X face
        Face([[r, -r, -r], [r, r, -r], [r, r, r], [r, -r, r]], [1, 0, 0]),
        # -X face
        Face([[-r, -r, -r], [-r, -r, r], [-r, r, r], [-r, r, -r]], [-1, 0, 0]),
        # +Y face
        Face([[-r, r, -r], [-r, r, r], [r, r, r], [r, r, -r]], [0, 1, 0]),
        # -Y face
        Face([[-r, -r, -r], [r, -r, -r], [r, -r, r], [-r, -r, r]], [0, -1, 0]),
        # +Z face
        Face([[-r, -r, r], [r, -r, r], [r, r, r], [-r, r, r]], [0, 0, 1]),
        # -Z face
        Face([[-r, -r, -r], [-r, r, -r], [r, r, -r], [r, -r, -r]], [0, 0, -1]),
    ]


def _clip_loop(vertices: np.ndarray, normal: np.ndarray, offset: float,
               tol: float, crossings: Optional[list] = None) -> np.ndarray:
    """Sutherland-Hodgman walk over one closed vertex loop."""
    n = len(vertices)
    if n == 0:
        return vertices
    signed = vertices @ normal - offset
    output = []
    for i in range(n):
        current, nxt = vertices[i], vertices[(i + 1) % n]
        dc, dn = signed[i], signed[(i + 1) % n]
        if dc <= tol:
            output.append(current)
            if dn > tol:
                point = lerp(current, nxt, dc / (dc - dn))
                output.append(point)
                if crossings is not None:
                    crossings.append(point)
        elif dn <= tol:
            point = lerp(current, nxt, dc / (dc - dn))
            output.append(point)
            if crossings is not None:
                crossings.append(point)
    return np.array(output).reshape(-1, vertices.shape[1])


def clip_polygon_by_half_plane(polygon, normal, offset: float,
                               tol: float = HALF_SPACE_TOL) -> np.ndarray:
    """
    Clip a convex polygon to the half-plane ``normal · x <= offset``.

    Parameters
    ----------
    polygon : array-like
        (N, 2) CCW vertex list, implicitly closed
    normal : array-like
        Half-plane normal (need not be unit length)
    offset : float
        Half-plane offset d
    tol : float
        Signed-distance tolerance for "inside"

    Returns
    -------
    np.ndarray
        (M, 2) clipped polygon in CCW order. Fewer than 3 vertices means the
        polygon was clipped away; an empty input gives an empty result.
    """
    pts = np.asarray(polygon, dtype=float).reshape(-1, 2)
    return _clip_loop(pts, np.asarray(normal, dtype=float), offset, tol)


def clip_polyhedron_by_half_space(faces: Sequence[Face], normal, offset: float,
                                  tol: float = HALF_SPACE_TOL) -> List[Face]:
    """
    Clip a convex polyhedron to the half-space ``normal · x <= offset``.

    Parameters
    ----------
    faces : Sequence[Face]
        Closed convex polyhedron
    normal : array-like
        Half-space normal, typically the reciprocal vector G
    offset : float
        Half-space offset, typically |G|² / 2
    tol : float
        Signed-distance tolerance for "inside"

    Returns
    -------
    List[Face]
        Clipped polyhedron. Faces reduced below 3 vertices are dropped; a cap
        face is added on the cutting plane when it has at least 3 distinct
        vertices. An empty list means the polyhedron was clipped away.
    """
    normal = np.asarray(normal, dtype=float)
    new_faces = []
    cap_vertices = []

    for face in faces:
        clipped = _clip_loop(face.vertices, normal, offset, tol, crossings=cap_vertices)
        clipped = dedupe_vertices(clipped)
        if len(clipped) >= 3:
            if len(clipped) == len(face.vertices) and np.array_equal(clipped, face.vertices):
                new_faces.append(face)
            else:
                new_faces.append(Face(clipped, face.normal))

    if len(cap_vertices) >= 3:
        cap_normal = normalize(normal)
        if np.any(cap_normal):
            cap = sort_ccw_3d(cap_vertices, cap_normal)
            if len(cap) >= 3:
                new_faces.append(Face(cap, cap_normal))

    return new_faces


def section_polyhedron(faces: Sequence[Face], normal, offset: float = 0.0) -> Optional[np.ndarray]:
    """
    Polygon where the plane ``n̂ · k = offset`` cuts a convex polyhedron.

    Parameters
    ----------
    faces : Sequence[Face]
        Closed convex polyhedron
    normal : array-like
        Plane normal (e.g. Miller indices [h, k, l]); normalized internally
    offset : float
        Distance of the plane from the origin along the unit normal

    Returns
    -------
    np.ndarray or None
        (N, 3) vertices of the section, CCW around the normal.
        None if the plane misses the polyhedron.
    """
    normal = normalize(normal)
    if not np.any(normal):
        return None

    intersection_points = []
    for face in faces:
        pts = face.vertices
        signed = pts @ normal - offset
        for i in range(len(pts)):
            j = (i + 1) % len(pts)
            d1, d2 = signed[i], signed[j]
            if abs(d1) <= HALF_SPACE_TOL:
                # Vertex lies on the plane
                intersection_points.append(pts[i])
            elif d1 * d2 < 0 and abs(d2) > HALF_SPACE_TOL:
                intersection_points.append(lerp(pts[i], pts[j], d1 / (d1 - d2)))

    if len(intersection_points) < 3:
        return None

    section = sort_ccw_3d(intersection_points, normal)
    if len(section) < 3:
        return None

    # Collinear points (plane touching an edge) do not form a polygon
    u, v = plane_basis(normal)
    flat = section @ np.column_stack((u, v))
    spread = np.linalg.matrix_rank(flat - flat.mean(axis=0), tol=1e-9)
    if spread < 2:
        return None
    return section


__all__ = [
    'Face',
    'square_polygon',
    'cube_faces',
    'clip_polygon_by_half_plane',
    'clip_polyhedron_by_half_space',
    'section_polyhedron',
]
