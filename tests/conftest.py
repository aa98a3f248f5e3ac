import pytest

from brillouin_zone.lattice import generate_reciprocal_points, load_lattice


def reciprocal_points(lattice_type, max_index, **kwargs):
    lattice = load_lattice(lattice_type, **kwargs)
    return generate_reciprocal_points(lattice.reciprocal(), max_index)


@pytest.fixture(scope="session")
def square_points():
    return reciprocal_points("square", 4)


@pytest.fixture(scope="session")
def hexagonal_points():
    return reciprocal_points("hexagonal", 6)
