"""
Unit tests for 3D first Brillouin zones.

Tests geometric properties:
- Simple cubic cube, FCC truncated octahedron, BCC rhombic dodecahedron
- Volumes equal to the reciprocal cell
- Agreement with the Voronoi construction
"""

import numpy as np
import pytest
from scipy.spatial import ConvexHull

from brillouin_zone.bz_geometry import (
    ZoneConfig,
    first_zone_3d,
    generate_bz,
    get_bz_intersection_plane,
    wigner_seitz_cell,
)
from brillouin_zone.exceptions import InsufficientReciprocalCoverage
from brillouin_zone.lattice import load_lattice
from brillouin_zone.polygon_geometry import (
    face_area_3d,
    point_in_polyhedron,
    polygon_area,
    polyhedron_topology,
)

from conftest import reciprocal_points

TWO_PI = 2 * np.pi


@pytest.fixture(scope="module")
def cubic_bz():
    return generate_bz("cubic")


@pytest.fixture(scope="module")
def fcc_bz():
    return generate_bz("fcc")


@pytest.fixture(scope="module")
def bcc_bz():
    return generate_bz("bcc")


class TestSimpleCubic:

    def test_faces(self, cubic_bz):
        assert cubic_bz.num_faces == 6
        for face in cubic_bz.faces:
            assert face.num_vertices == 4
            assert face_area_3d(face.vertices) == pytest.approx(TWO_PI ** 2)

    def test_volume(self, cubic_bz):
        assert cubic_bz.get_volume() == pytest.approx(TWO_PI ** 3)

    def test_topology(self, cubic_bz):
        assert polyhedron_topology(cubic_bz.faces) == (8, 12, 6)

    def test_vertices(self, cubic_bz):
        assert np.allclose(np.abs(cubic_bz.vertices), np.pi)


class TestFCC:

    def test_truncated_octahedron(self, fcc_bz):
        assert polyhedron_topology(fcc_bz.faces) == (24, 36, 14)
        sizes = sorted(f.num_vertices for f in fcc_bz.faces)
        assert sizes == [4] * 6 + [6] * 8

    def test_volume(self, fcc_bz):
        assert fcc_bz.get_volume() == pytest.approx(4 * TWO_PI ** 3)


class TestBCC:

    def test_rhombic_dodecahedron(self, bcc_bz):
        assert polyhedron_topology(bcc_bz.faces) == (14, 24, 12)
        assert all(f.num_vertices == 4 for f in bcc_bz.faces)

    def test_volume(self, bcc_bz):
        assert bcc_bz.get_volume() == pytest.approx(2 * TWO_PI ** 3)


class TestPolyhedronProperties:

    @pytest.mark.parametrize("lattice_type", ["cubic", "fcc", "bcc"])
    def test_volume_equals_reciprocal_cell(self, lattice_type):
        bz = generate_bz(lattice_type, a=1.7)
        assert bz.get_volume() == pytest.approx(bz.reciprocal_basis.cell_measure)

    @pytest.mark.parametrize("lattice_type", ["cubic", "fcc", "bcc"])
    def test_origin_inside(self, lattice_type):
        bz = generate_bz(lattice_type)
        assert point_in_polyhedron([0, 0, 0], bz.faces)

    @pytest.mark.parametrize("lattice_type", ["cubic", "fcc", "bcc"])
    def test_outward_normals(self, lattice_type):
        bz = generate_bz(lattice_type)
        for face in bz.faces:
            assert np.dot(face.normal, face.vertices.mean(axis=0)) > 0
            v = face.vertices
            assert np.dot(np.cross(v[1] - v[0], v[2] - v[0]), face.normal) > 0

    def test_faces_lie_on_bragg_planes(self, fcc_bz):
        """Every face is the Bragg plane of a nearest reciprocal point."""
        for face in fcc_bz.faces:
            g = None
            for plane in fcc_bz.bragg_planes:
                if np.allclose(plane.unit_normal, face.normal):
                    g = plane
                    break
            assert g is not None
            assert np.allclose(g.signed_distance(face.vertices), 0.0, atol=1e-9)

    def test_seed_too_small(self):
        points = reciprocal_points("cubic", 2)
        with pytest.raises(InsufficientReciprocalCoverage):
            first_zone_3d(points, ZoneConfig(seed_half_width_3d=1.0))

    def test_higher_zones_unsupported(self):
        with pytest.raises(ValueError):
            generate_bz("fcc", max_zone=2)


class TestVoronoiCrossCheck:

    @pytest.mark.parametrize("lattice_type", ["fcc", "bcc"])
    def test_volume_3d(self, lattice_type):
        bz = generate_bz(lattice_type)
        vertices, _ = wigner_seitz_cell(bz.reciprocal_basis, nrange=2)
        assert ConvexHull(vertices).volume == pytest.approx(bz.get_volume(), rel=1e-6)
        assert np.max(np.linalg.norm(vertices, axis=1)) == pytest.approx(
            np.max(np.linalg.norm(bz.vertices, axis=1)))

    def test_hexagonal_2d(self):
        bz = generate_bz("hexagonal")
        vertices, _ = wigner_seitz_cell(bz.reciprocal_basis, nrange=2)
        assert polygon_area(vertices) == pytest.approx(bz.get_volume(), rel=1e-6)

    def test_invalid_nrange(self):
        rec = load_lattice("cubic").reciprocal()
        with pytest.raises(ValueError):
            wigner_seitz_cell(rec, nrange=0)


class TestSections:

    def test_cubic_mid_plane(self, cubic_bz):
        section = get_bz_intersection_plane(cubic_bz, [0, 0, 1], 0.0)
        assert len(section) == 4
        assert np.allclose(np.abs(section[:, :2]), np.pi)

    def test_fcc_111_plane(self, fcc_bz):
        section = get_bz_intersection_plane(fcc_bz, [1, 1, 1], 0.0)
        assert section is not None
        assert len(section) == 6

    def test_miss(self, cubic_bz):
        assert get_bz_intersection_plane(cubic_bz, [0, 0, 1], 10.0) is None

    def test_2d_rejected(self):
        with pytest.raises(ValueError):
            get_bz_intersection_plane(generate_bz("square"), [0, 0, 1])
