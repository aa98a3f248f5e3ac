"""
Unit tests for convex clipping.

Tests:
- Sutherland-Hodgman half-plane clipping
- Polyhedron half-space clipping with cap faces
- Plane sections of polyhedra
"""

import numpy as np
import pytest

from brillouin_zone.clipping import (
    Face,
    clip_polygon_by_half_plane,
    clip_polyhedron_by_half_space,
    cube_faces,
    section_polyhedron,
    square_polygon,
)
from brillouin_zone.polygon_geometry import (
    face_area_3d,
    polygon_area,
    polyhedron_topology,
    polyhedron_volume,
)


def signed_area(polygon):
    x, y = polygon[:, 0], polygon[:, 1]
    return 0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


class TestPolygonClipping:

    def test_half_square(self):
        clipped = clip_polygon_by_half_plane(square_polygon(1.0), [1.0, 0.0], 0.0)
        assert np.isclose(polygon_area(clipped), 2.0)
        assert np.all(clipped[:, 0] <= 1e-9)

    def test_output_stays_ccw(self):
        clipped = clip_polygon_by_half_plane(square_polygon(1.0), [1.0, 1.0], 0.5)
        assert signed_area(clipped) > 0

    def test_fully_inside_unchanged(self):
        square = square_polygon(1.0)
        clipped = clip_polygon_by_half_plane(square, [1.0, 0.0], 5.0)
        assert np.allclose(clipped, square)

    def test_fully_outside_is_empty(self):
        clipped = clip_polygon_by_half_plane(square_polygon(1.0), [1.0, 0.0], -5.0)
        assert len(clipped) < 3

    def test_empty_input(self):
        assert len(clip_polygon_by_half_plane([], [1.0, 0.0], 0.0)) == 0

    def test_normal_length_irrelevant(self):
        """Scaling (normal, offset) together describes the same half-plane."""
        square = square_polygon(2.0)
        a = clip_polygon_by_half_plane(square, [1.0, 2.0], 1.0)
        b = clip_polygon_by_half_plane(square, [10.0, 20.0], 10.0)
        assert np.allclose(a, b)

    def test_corner_cut(self):
        # x + y <= 1 removes a triangle of area 1/2 from [-1, 1]²
        clipped = clip_polygon_by_half_plane(square_polygon(1.0), [1.0, 1.0], 1.0)
        assert np.isclose(polygon_area(clipped), 3.5)
        assert len(clipped) == 5

    def test_tolerance_keeps_boundary_vertex(self):
        # Vertex (1, 1) is 1e-12 beyond x + y <= 2; treated as inside
        clipped = clip_polygon_by_half_plane(square_polygon(1.0), [1.0, 1.0], 2.0 - 1e-12)
        assert len(clipped) == 4


class TestPolyhedronClipping:

    def test_cube_volume(self):
        assert np.isclose(polyhedron_volume(cube_faces(1.0)), 8.0)

    def test_half_cube(self):
        faces = clip_polyhedron_by_half_space(cube_faces(1.0), [1.0, 0.0, 0.0], 0.0)
        assert len(faces) == 6
        assert np.isclose(polyhedron_volume(faces), 4.0)
        cap = faces[-1]
        assert np.allclose(cap.normal, [1, 0, 0])
        assert np.allclose(cap.vertices[:, 0], 0.0)
        assert np.isclose(face_area_3d(cap.vertices), 4.0)

    def test_corner_cut(self):
        # x + y + z <= 2 removes a tetrahedron of volume 1/6
        faces = clip_polyhedron_by_half_space(cube_faces(1.0), [1.0, 1.0, 1.0], 2.0)
        assert len(faces) == 7
        assert faces[-1].num_vertices == 3
        assert np.isclose(polyhedron_volume(faces), 8.0 - 1.0 / 6.0)
        assert polyhedron_topology(faces) == (10, 15, 7)

    def test_plane_touching_vertex(self):
        faces = clip_polyhedron_by_half_space(cube_faces(1.0), [1.0, 1.0, 1.0], 3.0)
        assert len(faces) == 6
        assert np.isclose(polyhedron_volume(faces), 8.0)

    def test_plane_through_edges(self):
        """Faces collapsing to a line are dropped, not kept as slivers."""
        faces = clip_polyhedron_by_half_space(cube_faces(1.0), [1.0, 1.0, 0.0], 0.0)
        assert len(faces) == 5
        assert all(f.num_vertices >= 3 for f in faces)
        assert np.isclose(polyhedron_volume(faces), 4.0)
        assert polyhedron_topology(faces) == (6, 9, 5)

    def test_clipped_away(self):
        faces = clip_polyhedron_by_half_space(cube_faces(1.0), [0.0, 0.0, 1.0], -2.0)
        assert faces == []

    def test_cap_normal_is_unit(self):
        faces = clip_polyhedron_by_half_space(cube_faces(1.0), [0.0, 0.0, 4.0], 2.0)
        assert np.allclose(faces[-1].normal, [0, 0, 1])

    def test_cube_faces_ccw_from_outside(self):
        for face in cube_faces(2.0):
            v = face.vertices
            assert np.dot(np.cross(v[1] - v[0], v[2] - v[0]), face.normal) > 0

    def test_face_read_only(self):
        face = Face([[0, 0, 0], [1, 0, 0], [0, 1, 0]], [0, 0, 1])
        with pytest.raises(ValueError):
            face.vertices[0, 0] = 1.0


class TestSection:

    def test_mid_section(self):
        section = section_polyhedron(cube_faces(1.0), [0, 0, 1], 0.0)
        assert len(section) == 4
        assert np.allclose(section[:, 2], 0.0)
        assert np.isclose(face_area_3d(section), 4.0)

    def test_diagonal_section_is_hexagon(self):
        section = section_polyhedron(cube_faces(1.0), [1, 1, 1], 0.0)
        assert len(section) == 6

    def test_miss(self):
        assert section_polyhedron(cube_faces(1.0), [0, 0, 1], 5.0) is None

    def test_tangent_edge(self):
        # n̂ · k = √2 with n̂ ∥ (1, 1, 0) only touches the edge x = y = 1
        assert section_polyhedron(cube_faces(1.0), [1, 1, 0], np.sqrt(2)) is None

    def test_zero_normal(self):
        assert section_polyhedron(cube_faces(1.0), [0, 0, 0]) is None
