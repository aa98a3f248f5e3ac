"""
Brillouin Zone Geometry Module

This module handles the construction of Brillouin zones by half-space
clipping against Bragg planes, in 2D (1st and higher zones) and 3D (1st zone).

Mathematical Background:
------------------------
Every reciprocal lattice vector G defines a Bragg plane, the perpendicular
bisector of the segment from Γ to G:

    G · k = |G|² / 2

The nth Brillouin zone is the set of points k reached from Γ by crossing
exactly n-1 Bragg planes, i.e. the points whose zone number

    zone(k) = 1 + |{G : G · k > |G|² / 2}|

equals n. The 1st zone (the Wigner-Seitz cell of the reciprocal lattice) is
the intersection of all half-spaces G · k <= |G|² / 2.

Zone Decomposition Algorithm (2D):
1. Start from a large seed square carrying a crossing count of 0
2. Process Bragg planes shell by shell in ascending distance |G|/2
3. Fragments on the near side keep their count, fragments on the far side
   gain one, fragments straddling the plane are split into both pieces
4. Fragments beyond more planes than the highest requested zone allows are
   discarded; fragments lying inside the sphere of the next shell can no
   longer be cut and are settled
5. The nth zone is the union of fragments with count n-1

All zones built this way have the area of the reciprocal cell.

Usage:
------
    from brillouin_zone import generate_bz

    bz = generate_bz('square', a=1.0, max_zone=3)
    print(bz.zones[2].area)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from scipy.spatial import ConvexHull, Voronoi

from .clipping import (
    Face,
    clip_polygon_by_half_plane,
    clip_polyhedron_by_half_space,
    cube_faces,
    section_polyhedron,
    square_polygon,
)
from .exceptions import InsufficientReciprocalCoverage
from .lattice import (
    LatticeBasis,
    LatticeType,
    ReciprocalBasis,
    ReciprocalPoint,
    compute_reciprocal_lattice,
    generate_reciprocal_points,
    load_lattice,
)
from .polygon_geometry import (
    bounding_radius,
    dedupe_vertices,
    polygon_area,
    polyhedron_volume,
    sort_ccw,
    unique_points,
)
from .symmetry_points import get_high_symmetry_points
from .utils.constants import (
    FRAGMENT_AREA_TOL,
    FRAGMENT_BUDGET,
    HALF_SPACE_TOL,
    SEED_HALF_WIDTH_2D,
    SEED_HALF_WIDTH_3D,
    SHELL_TOL,
)

logger = logging.getLogger(__name__)


@dataclass
class ZoneConfig:
    """
    Per-call overrides for the zone construction.

    Attributes
    ----------
    seed_half_width_2d : float
        Half-width of the seed square
    seed_half_width_3d : float
        Half-width of the seed cube
    fragment_budget : int
        Maximum number of live fragments during nth-zone decomposition
    shell_tol : float
        Distance tolerance when grouping Bragg planes into shells
    check_coverage : bool
        Raise InsufficientReciprocalCoverage when a result touches the seed
    """
    seed_half_width_2d: float = SEED_HALF_WIDTH_2D
    seed_half_width_3d: float = SEED_HALF_WIDTH_3D
    fragment_budget: int = FRAGMENT_BUDGET
    shell_tol: float = SHELL_TOL
    check_coverage: bool = True


@dataclass(frozen=True)
class BraggPlane:
    """
    Bragg plane of a reciprocal lattice vector, as the half-space G · k <= |G|²/2.

    Attributes
    ----------
    normal : np.ndarray
        G itself (not normalized)
    offset : float
        |G|² / 2
    point : np.ndarray
        G / 2, the foot of the plane
    unit_normal : np.ndarray
        G / |G|
    distance : float
        |G| / 2, distance of the plane from Γ
    source : ReciprocalPoint
        The reciprocal point the plane bisects
    """
    normal: np.ndarray
    offset: float
    point: np.ndarray
    unit_normal: np.ndarray
    distance: float
    source: ReciprocalPoint

    def signed_distance(self, k) -> np.ndarray:
        """Raw signed distance G · k - |G|²/2 (positive beyond the plane)."""
        return np.asarray(k, dtype=float) @ self.normal - self.offset


@dataclass
class Zone:
    """
    A 2D Brillouin zone as a union of disjoint convex fragments.

    Attributes
    ----------
    index : int
        Zone number n (1 for the first zone)
    fragments : List[np.ndarray]
        CCW convex polygons, each of shape (N, 2)
    truncated : bool
        True when the fragment budget stopped the decomposition early
    """
    index: int
    fragments: List[np.ndarray] = field(default_factory=list)
    truncated: bool = False

    @property
    def area(self) -> float:
        return float(sum(polygon_area(f) for f in self.fragments))

    @property
    def num_fragments(self) -> int:
        return len(self.fragments)

    def __repr__(self) -> str:
        flag = ", truncated" if self.truncated else ""
        return f"Zone(index={self.index}, fragments={self.num_fragments}, area={self.area:.6f}{flag})"


@dataclass
class BrillouinZone:
    """
    Dataclass representing the constructed Brillouin zones of a lattice.

    Attributes
    ----------
    lattice : LatticeBasis
        The source real-space lattice
    reciprocal_basis : ReciprocalBasis
        Reciprocal lattice vectors
    reciprocal_points : List[ReciprocalPoint]
        Enumerated reciprocal points, ascending by |G|
    bragg_planes : List[BraggPlane]
        One Bragg plane per reciprocal point
    high_symmetry_points : Dict[str, np.ndarray]
        High-symmetry k-points with names as keys (e.g., 'Γ', 'X', 'M')
    zones : List[Zone]
        2D only: zones 1..max_zone
    faces : List[Face]
        3D only: faces of the first zone polyhedron
    max_index : int
        Miller index bound used for the enumeration
    """
    lattice: LatticeBasis
    reciprocal_basis: ReciprocalBasis
    reciprocal_points: List[ReciprocalPoint]
    bragg_planes: List[BraggPlane]
    high_symmetry_points: Dict[str, np.ndarray]
    zones: List[Zone] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    max_index: int = 0

    @property
    def dimension(self) -> int:
        return self.lattice.dimension

    @property
    def first_zone(self) -> Union[np.ndarray, List[Face]]:
        """First zone polygon (2D) or face list (3D)."""
        if self.dimension == 2:
            if not self.zones or not self.zones[0].fragments:
                return np.empty((0, 2))
            return self.zones[0].fragments[0]
        return self.faces

    @property
    def vertices(self) -> np.ndarray:
        """Distinct vertices of the first zone."""
        if self.dimension == 2:
            return self.first_zone
        return unique_points(np.vstack([f.vertices for f in self.faces]))

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_faces(self) -> int:
        return len(self.faces)

    def zone(self, n: int) -> Zone:
        """Look up zone n (2D)."""
        for z in self.zones:
            if z.index == n:
                return z
        raise KeyError(f"Zone {n} was not constructed (max_zone={len(self.zones)})")

    def get_volume(self) -> float:
        """Area (2D) or volume (3D) of the first zone."""
        if self.dimension == 2:
            return polygon_area(self.first_zone)
        return polyhedron_volume(self.faces)

    def get_bounding_box(self) -> Tuple[np.ndarray, np.ndarray]:
        """Get the bounding box of the first zone."""
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def __repr__(self) -> str:
        hs_names = list(self.high_symmetry_points.keys())
        if self.dimension == 2:
            shape = f"zones={len(self.zones)}"
        else:
            shape = f"vertices={self.num_vertices}, faces={self.num_faces}"
        return f"BrillouinZone({self.lattice.name}, {shape}, hs_points={hs_names})"


# ============================================================================
# Bragg planes
# ============================================================================

def bragg_planes(points: Sequence[ReciprocalPoint]) -> List[BraggPlane]:
    """
    Build one Bragg plane per reciprocal point, keeping the input order.
    """
    planes = []
    for p in points:
        g = np.asarray(p.vector, dtype=float)
        norm = float(np.linalg.norm(g))
        planes.append(BraggPlane(
            normal=g,
            offset=norm ** 2 / 2,
            point=g / 2,
            unit_normal=g / norm,
            distance=norm / 2,
            source=p,
        ))
    return planes


def group_shells(planes: Sequence[BraggPlane], tol: float = SHELL_TOL) -> List[List[BraggPlane]]:
    """
    Group consecutive planes of equal distance into shells.

    A plane joins the current shell when its distance differs from the
    shell's first plane by at most ``tol``. Input is expected in ascending
    distance (the order of ``generate_reciprocal_points``).
    """
    shells = []
    for plane in planes:
        if shells and abs(plane.distance - shells[-1][0].distance) <= tol:
            shells[-1].append(plane)
        else:
            shells.append([plane])
    return shells


def _as_planes(items) -> List[BraggPlane]:
    items = list(items)
    if items and isinstance(items[0], ReciprocalPoint):
        return bragg_planes(items)
    return items


def zone_number(k, planes) -> int:
    """
    Zone index of a point: 1 + number of Bragg planes it lies beyond.

    Parameters
    ----------
    k : array-like
        Point in reciprocal space
    planes : Sequence[BraggPlane] or Sequence[ReciprocalPoint]
        Bragg planes (reciprocal points are converted)

    Returns
    -------
    int
        Points on a plane (within 1e-9) count as inside it.
    """
    k = np.asarray(k, dtype=float)
    return 1 + sum(1 for p in _as_planes(planes) if p.signed_distance(k) > HALF_SPACE_TOL)


# ============================================================================
# Coverage checks
# ============================================================================

def _coverage_radius(points: Sequence[ReciprocalPoint]) -> float:
    """
    Radius within which zone numbers are exact for the enumerated points.

    Every lattice point with |G| <= 2π M / max|aᵢ| lies inside the Miller box
    [-M, M]^d, and the zone number of k only depends on points with
    |G| < 2|k|. Returns inf when the basis cannot be recovered.
    """
    if not points:
        return 0.0
    dim = len(points[0].miller)
    max_index = max(max(abs(m) for m in p.miller) for p in points)
    basis = [None] * dim
    for p in points:
        if sum(abs(m) for m in p.miller) == 1 and max(p.miller) == 1:
            basis[p.miller.index(1)] = p.vector
    if any(b is None for b in basis):
        return np.inf
    real = compute_reciprocal_lattice(np.array(basis)).vectors
    return float(np.pi * max_index / np.max(np.linalg.norm(real, axis=1)))


def _touches_seed(vertices: np.ndarray, half_width: float) -> bool:
    if len(vertices) == 0:
        return False
    return bool(np.max(np.abs(vertices)) >= half_width - HALF_SPACE_TOL)


def _check_extent(vertices: np.ndarray, points: Sequence[ReciprocalPoint], label: str):
    radius = bounding_radius(vertices)
    exact = _coverage_radius(points)
    if radius > exact + HALF_SPACE_TOL:
        logger.warning(
            f"{label} extends to |k| = {radius:.4f} but the enumerated points only "
            f"guarantee exact zone numbers up to |k| = {exact:.4f}; "
            f"consider a larger max_index"
        )


# ============================================================================
# First zone
# ============================================================================

def first_zone_2d(points: Sequence[ReciprocalPoint],
                  config: Optional[ZoneConfig] = None) -> np.ndarray:
    """
    Construct the 2D first Brillouin zone by iterative half-plane clipping.

    Parameters
    ----------
    points : Sequence[ReciprocalPoint]
        Reciprocal points, ascending by |G|
    config : ZoneConfig, optional
        Construction overrides

    Returns
    -------
    np.ndarray
        (N, 2) CCW polygon; empty when everything was clipped away

    Raises
    ------
    InsufficientReciprocalCoverage
        If the polygon still touches the seed square
    """
    config = config or ZoneConfig()
    polygon = square_polygon(config.seed_half_width_2d)

    for i, plane in enumerate(bragg_planes(points)):
        polygon = dedupe_vertices(clip_polygon_by_half_plane(polygon, plane.normal, plane.offset))
        if len(polygon) < 3:
            logger.debug(f"First zone clipped away after {i + 1} planes")
            return np.empty((0, 2))

    polygon = sort_ccw(polygon)
    if config.check_coverage:
        if _touches_seed(polygon, config.seed_half_width_2d):
            raise InsufficientReciprocalCoverage(
                "First zone reaches the seed square; increase max_index"
            )
        _check_extent(polygon, points, "First zone")
    return polygon


def first_zone_3d(points: Sequence[ReciprocalPoint],
                  config: Optional[ZoneConfig] = None) -> List[Face]:
    """
    Construct the 3D first Brillouin zone by iterative half-space clipping.

    Parameters
    ----------
    points : Sequence[ReciprocalPoint]
        Reciprocal points, ascending by |G|
    config : ZoneConfig, optional
        Construction overrides

    Returns
    -------
    List[Face]
        Faces of the convex polyhedron, each CCW seen from outside.
        Empty when everything was clipped away.

    Raises
    ------
    InsufficientReciprocalCoverage
        If a face still touches the seed cube
    """
    config = config or ZoneConfig()
    faces = cube_faces(config.seed_half_width_3d)

    for i, plane in enumerate(bragg_planes(points)):
        vertices = np.vstack([f.vertices for f in faces])
        # Planes that miss the polyhedron leave it unchanged
        if np.max(plane.signed_distance(vertices)) <= HALF_SPACE_TOL:
            continue
        faces = clip_polyhedron_by_half_space(faces, plane.normal, plane.offset)
        if not faces:
            logger.debug(f"First zone clipped away after {i + 1} planes")
            return []

    logger.debug(f"First zone has {len(faces)} faces")
    if config.check_coverage:
        vertices = np.vstack([f.vertices for f in faces])
        if _touches_seed(vertices, config.seed_half_width_3d):
            raise InsufficientReciprocalCoverage(
                "First zone reaches the seed cube; increase max_index"
            )
        _check_extent(vertices, points, "First zone")
    return faces


# ============================================================================
# Higher zones (2D)
# ============================================================================

def _decompose_2d(points: Sequence[ReciprocalPoint], lo: int, hi: int,
                  config: ZoneConfig) -> Tuple[List[Tuple[np.ndarray, int]], bool]:
    """
    Subdivide the seed square by Bragg planes and collect fragments whose
    crossing count lies in [lo, hi].

    Returns
    -------
    fragments : List[Tuple[np.ndarray, int]]
        (polygon, count) pairs, polygons CCW
    truncated : bool
        True when the fragment budget stopped the subdivision
    """
    half_width = config.seed_half_width_2d
    min_area = FRAGMENT_AREA_TOL * (2 * half_width) ** 2

    planes = sorted(bragg_planes(points), key=lambda p: p.distance)
    shells = group_shells(planes, config.shell_tol)

    live = [(square_polygon(half_width), 0)]
    settled = []
    truncated = False

    for shell_idx, shell in enumerate(shells):
        # Fragments inside the sphere of this shell are inside every remaining plane
        reach = shell[0].distance
        remaining = []
        for polygon, count in live:
            if bounding_radius(polygon) + HALF_SPACE_TOL < reach:
                if lo <= count:
                    settled.append((polygon, count))
            else:
                remaining.append((polygon, count))
        live = remaining
        if not live:
            break

        for plane in shell:
            split = []
            for polygon, count in live:
                signed = plane.signed_distance(polygon)
                if signed.max() <= HALF_SPACE_TOL:
                    split.append((polygon, count))
                elif signed.min() >= -HALF_SPACE_TOL:
                    if count < hi:
                        split.append((polygon, count + 1))
                else:
                    inner = dedupe_vertices(
                        clip_polygon_by_half_plane(polygon, plane.normal, plane.offset))
                    if len(inner) >= 3 and polygon_area(inner) > min_area:
                        split.append((inner, count))
                    if count < hi:
                        outer = dedupe_vertices(
                            clip_polygon_by_half_plane(polygon, -plane.normal, -plane.offset))
                        if len(outer) >= 3 and polygon_area(outer) > min_area:
                            split.append((outer, count + 1))
            live = split
            if len(live) > config.fragment_budget:
                truncated = True
                break

        logger.debug(f"Shell {shell_idx} (|G|/2 = {reach:.4f}): "
                     f"{len(live)} live, {len(settled)} settled fragments")
        if truncated:
            logger.warning(
                f"Fragment budget of {config.fragment_budget} exceeded; "
                f"zone decomposition stopped early and the result is incomplete"
            )
            break

    fragments = settled + [(p, c) for p, c in live if lo <= c <= hi]
    return [(sort_ccw(p), c) for p, c in fragments], truncated


def _check_zone(zone: Zone, points: Sequence[ReciprocalPoint], config: ZoneConfig):
    if zone.truncated or not config.check_coverage or not zone.fragments:
        return
    vertices = np.vstack(zone.fragments)
    if _touches_seed(vertices, config.seed_half_width_2d):
        raise InsufficientReciprocalCoverage(
            f"Zone {zone.index} reaches the seed square; too few Bragg planes "
            f"to bound it, increase max_index"
        )
    _check_extent(vertices, points, f"Zone {zone.index}")


def nth_zone_2d(points: Sequence[ReciprocalPoint], n: int,
                config: Optional[ZoneConfig] = None) -> Zone:
    """
    Construct the nth 2D Brillouin zone.

    Parameters
    ----------
    points : Sequence[ReciprocalPoint]
        Reciprocal points, ascending by |G|
    n : int
        Zone number (>= 1)
    config : ZoneConfig, optional
        Construction overrides

    Returns
    -------
    Zone
        Fragments lying beyond exactly n-1 Bragg planes

    Raises
    ------
    ValueError
        If n < 1
    InsufficientReciprocalCoverage
        If the zone reaches the seed square
    """
    if n < 1:
        raise ValueError("Zone number must be at least 1")
    config = config or ZoneConfig()

    if n == 1:
        polygon = first_zone_2d(points, config)
        return Zone(index=1, fragments=[polygon] if len(polygon) else [])

    fragments, truncated = _decompose_2d(points, n - 1, n - 1, config)
    zone = Zone(index=n, fragments=[p for p, _ in fragments], truncated=truncated)
    logger.debug(f"{zone}")
    _check_zone(zone, points, config)
    return zone


def accumulated_zone_2d(points: Sequence[ReciprocalPoint], n: int,
                        config: Optional[ZoneConfig] = None) -> Zone:
    """
    Union of zones 1..n as fragments lying beyond at most n-1 Bragg planes.

    Raises
    ------
    ValueError
        If n < 1
    InsufficientReciprocalCoverage
        If the union reaches the seed square
    """
    if n < 1:
        raise ValueError("Zone number must be at least 1")
    config = config or ZoneConfig()

    fragments, truncated = _decompose_2d(points, 0, n - 1, config)
    zone = Zone(index=n, fragments=[p for p, _ in fragments], truncated=truncated)
    _check_zone(zone, points, config)
    return zone


def zones_2d(points: Sequence[ReciprocalPoint], max_zone: int,
             config: Optional[ZoneConfig] = None) -> List[Zone]:
    """
    Construct zones 1..max_zone from a single decomposition.

    Returns
    -------
    List[Zone]
        Zones in ascending index; zone 1 comes from direct clipping
    """
    if max_zone < 1:
        raise ValueError("Zone number must be at least 1")
    config = config or ZoneConfig()

    zones = [nth_zone_2d(points, 1, config)]
    if max_zone == 1:
        return zones

    fragments, truncated = _decompose_2d(points, 1, max_zone - 1, config)
    for n in range(2, max_zone + 1):
        zone = Zone(index=n,
                    fragments=[p for p, c in fragments if c == n - 1],
                    truncated=truncated)
        _check_zone(zone, points, config)
        zones.append(zone)
    return zones


# ============================================================================
# Wigner-Seitz cross-check
# ============================================================================

def wigner_seitz_cell(reciprocal_basis: Union[ReciprocalBasis, np.ndarray],
                      nrange: int = 4) -> Tuple[np.ndarray, np.ndarray]:
    """
    Construct the first Brillouin zone as a Voronoi cell.

    Independent of the clipping construction; useful as a cross-check.

    Parameters
    ----------
    reciprocal_basis : ReciprocalBasis or np.ndarray
        (d, d) array with reciprocal lattice vectors as rows
    nrange : int
        Range of integer multiples: -nrange to +nrange for each direction

    Returns
    -------
    vertices : np.ndarray
        Vertices of the cell, shape (N, d); CCW in 2D
    simplices : np.ndarray
        Hull simplices as vertex indices: edges (2D) or triangles (3D)

    Raises
    ------
    InsufficientReciprocalCoverage
        If the region around Γ is unbounded
    """
    if nrange < 1:
        raise ValueError("nrange must be at least 1")

    vectors = (reciprocal_basis.vectors if isinstance(reciprocal_basis, ReciprocalBasis)
               else np.asarray(reciprocal_basis, dtype=float))
    dim = vectors.shape[0]

    axes = [np.arange(-nrange, nrange + 1)] * dim
    grid = np.stack(np.meshgrid(*axes, indexing='ij'), axis=-1).reshape(-1, dim)
    points = grid @ vectors

    vor = Voronoi(points)

    # Region of the point at the origin
    origin_idx = int(np.argmin(np.linalg.norm(points, axis=1)))
    region = vor.regions[vor.point_region[origin_idx]]
    if -1 in region or not region:
        raise InsufficientReciprocalCoverage(
            "Voronoi region around Γ is unbounded; increase nrange"
        )

    vertices = vor.vertices[region]
    hull = ConvexHull(vertices)
    if dim == 2:
        # 2D hull vertices come out counter-clockwise
        return vertices[hull.vertices], hull.simplices
    return vertices, hull.simplices


# ============================================================================
# Pipeline
# ============================================================================

def default_max_index(dimension: int, max_zone: int) -> int:
    """Miller index bound used when none is given."""
    if dimension == 2:
        return max(max_zone + 2, 4)
    return max(max_zone + 1, 3)


def generate_bz(lattice_type: Union[str, LatticeType],
                a: float = 1.0,
                b: Optional[float] = None,
                max_zone: int = 1,
                max_index: Optional[int] = None,
                config: Optional[ZoneConfig] = None) -> BrillouinZone:
    """
    Generate Brillouin zones for a catalog lattice.

    This is the main entry point: builds the lattice and its reciprocal
    basis, enumerates reciprocal points, constructs the zones and labels the
    high-symmetry points.

    Parameters
    ----------
    lattice_type : str or LatticeType
        Catalog tag ('square', 'rectangular', 'hexagonal', 'cubic', 'fcc', 'bcc')
    a : float, optional
        Lattice constant. Default: 1.0
    b : float, optional
        Second lattice constant (rectangular only)
    max_zone : int, optional
        Highest zone to construct. Only 1 is supported in 3D. Default: 1
    max_index : int, optional
        Miller index bound. Default: max(max_zone + 2, 4) in 2D,
        max(max_zone + 1, 3) in 3D
    config : ZoneConfig, optional
        Construction overrides

    Returns
    -------
    BrillouinZone

    Raises
    ------
    InvalidLatticeType
        Unknown lattice tag
    ValueError
        Non-positive constants, max_zone < 1, or max_zone > 1 in 3D
    InsufficientReciprocalCoverage
        If max_index is too small for the requested zones

    Examples
    --------
    >>> bz = generate_bz('fcc', a=1.0)
    >>> bz.num_faces
    14
    >>> bz2 = generate_bz('hexagonal', max_zone=3)
    >>> [round(z.area, 3) for z in bz2.zones]
    [45.586, 45.586, 45.586]
    """
    if max_zone < 1:
        raise ValueError("max_zone must be at least 1")
    config = config or ZoneConfig()

    lattice = load_lattice(lattice_type, a=a, b=b)
    if lattice.dimension == 3 and max_zone > 1:
        raise ValueError("Only the first zone is available for 3D lattices")

    reciprocal = lattice.reciprocal()
    if max_index is None:
        max_index = default_max_index(lattice.dimension, max_zone)
    points = generate_reciprocal_points(reciprocal, max_index)
    planes = bragg_planes(points)

    logger.info(f"Building {lattice.name} zones up to n={max_zone} "
                f"from {len(points)} reciprocal points (max_index={max_index})")

    if lattice.dimension == 2:
        zones = zones_2d(points, max_zone, config)
        faces = []
    else:
        zones = []
        faces = first_zone_3d(points, config)

    hs_points = get_high_symmetry_points(lattice.lattice_type, reciprocal)

    return BrillouinZone(
        lattice=lattice,
        reciprocal_basis=reciprocal,
        reciprocal_points=points,
        bragg_planes=planes,
        high_symmetry_points=hs_points,
        zones=zones,
        faces=faces,
        max_index=max_index,
    )


def get_bz_intersection_plane(bz: BrillouinZone,
                              plane_normal: Sequence[float],
                              slice_value: float = 0.0) -> Optional[np.ndarray]:
    """
    Compute the 3D polygon formed by the intersection of the first zone with a plane.

    Parameters
    ----------
    bz : BrillouinZone
        3D Brillouin zone
    plane_normal : array-like
        Normal vector of the plane (e.g., Miller indices [h, k, l])
    slice_value : float
        Distance from origin (plane eq: n̂ · k = slice_value)

    Returns
    -------
    np.ndarray or None
        Vertices of the intersection polygon, shape (N, 3).
        Returns None if no intersection.
    """
    if bz.dimension != 3:
        raise ValueError("Plane sections are only defined for 3D zones")
    return section_polyhedron(bz.faces, plane_normal, slice_value)


# Public API
__all__ = [
    'ZoneConfig',
    'BraggPlane',
    'Zone',
    'BrillouinZone',
    'bragg_planes',
    'group_shells',
    'zone_number',
    'first_zone_2d',
    'first_zone_3d',
    'nth_zone_2d',
    'accumulated_zone_2d',
    'zones_2d',
    'wigner_seitz_cell',
    'default_max_index',
    'generate_bz',
    'get_bz_intersection_plane',
]
