"""
Brillouin Zone Construction Package

Tools for constructing Brillouin zones of 2D and 3D Bravais lattices by
clipping against Bragg planes.

Features:
---------
- Lattice catalog: square, rectangular, hexagonal, simple cubic, FCC, BCC
- Reciprocal basis derivation and reciprocal point enumeration
- Convex half-space clipping of polygons and polyhedra
- First zones in 2D and 3D, higher zones in 2D
- High-symmetry point identification and k-path generation
- JSON service (``python -m brillouin_zone.server``)

Quick Start:
------------
    from brillouin_zone import generate_bz

    # Hexagonal lattice, zones 1..3
    bz = generate_bz('hexagonal', a=1.0, max_zone=3)
    for zone in bz.zones:
        print(zone.index, zone.num_fragments, zone.area)

    # FCC first zone (truncated octahedron)
    bz3 = generate_bz('fcc')
    print(bz3.num_faces, bz3.get_volume())
"""

# Core classes and functions
from . import vector_algebra

from .lattice import (
    LatticeType,
    LatticeBasis,
    ReciprocalBasis,
    ReciprocalPoint,
    load_lattice,
    reciprocal_2d,
    reciprocal_3d,
    compute_reciprocal_lattice,
    generate_reciprocal_points,
)

from .clipping import (
    Face,
    clip_polygon_by_half_plane,
    clip_polyhedron_by_half_space,
    section_polyhedron,
)

from .bz_geometry import (
    ZoneConfig,
    BraggPlane,
    Zone,
    BrillouinZone,
    bragg_planes,
    group_shells,
    zone_number,
    first_zone_2d,
    first_zone_3d,
    nth_zone_2d,
    accumulated_zone_2d,
    zones_2d,
    wigner_seitz_cell,
    generate_bz,
    get_bz_intersection_plane,
)

from .symmetry_points import (
    get_high_symmetry_points,
    get_high_symmetry_path,
    default_path,
)

from .exceptions import (
    BrillouinZoneError,
    InvalidLatticeType,
    DegenerateBasis,
    InsufficientReciprocalCoverage,
)


__all__ = [
    # Vector primitives
    'vector_algebra',
    # Lattice
    'LatticeType',
    'LatticeBasis',
    'ReciprocalBasis',
    'ReciprocalPoint',
    'load_lattice',
    'reciprocal_2d',
    'reciprocal_3d',
    'compute_reciprocal_lattice',
    'generate_reciprocal_points',
    # Clipping
    'Face',
    'clip_polygon_by_half_plane',
    'clip_polyhedron_by_half_space',
    'section_polyhedron',
    # BZ Geometry
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
    'generate_bz',
    'get_bz_intersection_plane',
    # Symmetry points
    'get_high_symmetry_points',
    'get_high_symmetry_path',
    'default_path',
    # Errors
    'BrillouinZoneError',
    'InvalidLatticeType',
    'DegenerateBasis',
    'InsufficientReciprocalCoverage',
]

__version__ = '0.1.0'
