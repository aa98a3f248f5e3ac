"""
Unit tests for the lattice catalog and reciprocal transform.

Tests:
- Catalog vectors and error handling
- Reciprocal duality b_i · a_j = 2π δ_ij
- Reciprocal point enumeration and ordering
"""

import numpy as np
import pytest

from brillouin_zone.exceptions import BrillouinZoneError, DegenerateBasis, InvalidLatticeType
from brillouin_zone.lattice import (
    LatticeType,
    ReciprocalBasis,
    compute_reciprocal_lattice,
    generate_reciprocal_points,
    load_lattice,
    real_space_basis,
    reciprocal_2d,
    reciprocal_3d,
)


class TestLatticeCatalog:

    def test_square(self):
        lat = load_lattice("square", a=2.0)
        assert np.allclose(lat.vectors, [[2, 0], [0, 2]])
        assert lat.dimension == 2
        assert lat.name == "Square"

    def test_rectangular_default_b(self):
        lat = load_lattice("rectangular")
        assert np.allclose(lat.vectors, [[1, 0], [0, 1.5]])
        assert lat.parameters == {"a": 1.0, "b": 1.5}

    def test_hexagonal(self):
        lat = load_lattice(LatticeType.HEXAGONAL, a=1.0)
        assert np.allclose(lat.vectors[1], [0.5, np.sqrt(3) / 2])
        assert np.isclose(lat.cell_measure, np.sqrt(3) / 2)

    def test_fcc_bcc_cell_volumes(self):
        assert np.isclose(load_lattice("fcc", a=2.0).cell_measure, 2.0)  # a³/4
        assert np.isclose(load_lattice("bcc", a=2.0).cell_measure, 4.0)  # a³/2
        assert np.isclose(load_lattice("cubic", a=2.0).cell_measure, 8.0)

    def test_tags_case_insensitive(self):
        assert load_lattice("FCC").lattice_type is LatticeType.FCC

    def test_dimensions(self):
        assert [t.dimension for t in LatticeType] == [2, 2, 2, 3, 3, 3]

    def test_unknown_type(self):
        with pytest.raises(InvalidLatticeType) as excinfo:
            load_lattice("triclinic")
        assert "triclinic" in str(excinfo.value)
        assert isinstance(excinfo.value, ValueError)
        assert isinstance(excinfo.value, BrillouinZoneError)

    @pytest.mark.parametrize("a", [0.0, -1.0])
    def test_non_positive_constant(self, a):
        with pytest.raises(ValueError, match="must be positive"):
            load_lattice("square", a=a)

    def test_non_positive_b(self):
        with pytest.raises(ValueError):
            load_lattice("rectangular", a=1.0, b=-2.0)

    @pytest.mark.parametrize("a", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_constant(self, a):
        with pytest.raises(ValueError, match="finite"):
            load_lattice("fcc", a=a)

    def test_non_finite_b(self):
        with pytest.raises(ValueError):
            load_lattice("rectangular", a=1.0, b=float("nan"))

    def test_vectors_read_only(self):
        lat = load_lattice("square")
        with pytest.raises(ValueError):
            lat.vectors[0, 0] = 5.0


class TestReciprocalTransform:

    @pytest.mark.parametrize("lattice_type", [t.value for t in LatticeType])
    def test_duality(self, lattice_type):
        """b_i · a_j = 2π δ_ij for every catalog lattice."""
        lat = load_lattice(lattice_type, a=1.3)
        rec = lat.reciprocal()
        dim = lat.dimension
        assert np.allclose(rec.vectors @ lat.vectors.T, 2 * np.pi * np.eye(dim))

    def test_square_reciprocal(self):
        rec = reciprocal_2d([1, 0], [0, 1])
        assert np.allclose(rec.vectors, 2 * np.pi * np.eye(2))

    def test_fcc_reciprocal_is_bcc(self):
        rec = load_lattice("fcc").reciprocal()
        expected = 2 * np.pi * np.array([[-1, 1, 1], [1, -1, 1], [1, 1, -1]])
        assert np.allclose(rec.vectors, expected)

    def test_bcc_reciprocal_is_fcc(self):
        rec = load_lattice("bcc").reciprocal()
        expected = 2 * np.pi * np.array([[1, 1, 0], [0, 1, 1], [1, 0, 1]])
        assert np.allclose(rec.vectors, expected)

    def test_round_trip(self):
        lat = load_lattice("hexagonal", a=2.5)
        assert np.allclose(real_space_basis(lat.reciprocal()), lat.vectors)

    def test_collinear_2d(self):
        with pytest.raises(DegenerateBasis, match="collinear"):
            reciprocal_2d([1, 0], [2, 0])

    def test_coplanar_3d(self):
        with pytest.raises(DegenerateBasis, match="coplanar"):
            reciprocal_3d([1, 0, 0], [0, 1, 0], [1, 1, 0])

    def test_dispatch_on_shape(self):
        assert compute_reciprocal_lattice(np.eye(2)).dimension == 2
        assert compute_reciprocal_lattice(np.eye(3)).dimension == 3
        with pytest.raises(ValueError):
            compute_reciprocal_lattice(np.eye(4))

    def test_reciprocal_cell_measure(self):
        lat = load_lattice("fcc")
        assert np.isclose(lat.reciprocal().cell_measure, (2 * np.pi) ** 3 / lat.cell_measure)


class TestReciprocalPoints:

    def test_count_2d(self):
        points = generate_reciprocal_points(load_lattice("square").reciprocal(), 2)
        assert len(points) == 5 ** 2 - 1

    def test_count_3d(self):
        points = generate_reciprocal_points(load_lattice("bcc").reciprocal(), 2)
        assert len(points) == 5 ** 3 - 1

    def test_origin_excluded(self):
        points = generate_reciprocal_points(np.eye(2), 1)
        assert all(p.norm > 0 for p in points)
        assert all(any(p.miller) for p in points)

    def test_sorted_by_norm(self):
        points = generate_reciprocal_points(load_lattice("hexagonal").reciprocal(), 3)
        norms = [p.norm for p in points]
        assert np.all(np.diff(norms) >= -1e-9)

    def test_first_shell(self):
        points = generate_reciprocal_points(load_lattice("hexagonal").reciprocal(), 3)
        first = [p.norm for p in points[:6]]
        assert np.allclose(first, 4 * np.pi / np.sqrt(3))
        assert points[6].norm > first[0] + 1e-6

    def test_ties_keep_enumeration_order(self):
        points = generate_reciprocal_points(load_lattice("square").reciprocal(), 2)
        assert [p.miller for p in points[:4]] == [(-1, 0), (0, -1), (0, 1), (1, 0)]

    def test_vector_matches_miller(self):
        rec = load_lattice("bcc").reciprocal()
        for p in generate_reciprocal_points(rec, 1):
            assert np.allclose(p.vector, np.array(p.miller) @ rec.vectors)
            assert np.isclose(p.norm, np.linalg.norm(p.vector))

    def test_accepts_plain_array(self):
        basis = ReciprocalBasis(np.eye(2))
        assert len(generate_reciprocal_points(basis.vectors, 1)) == 8

    def test_invalid_max_index(self):
        with pytest.raises(ValueError):
            generate_reciprocal_points(np.eye(2), 0)
