"""
Numerical Constants Module

Centralized location for the tolerances and default sizes used by the
Brillouin zone construction. Users can adjust these values for lattices with
unusual length scales.

Tolerance Background
--------------------
Half-space membership of a point k against a Bragg plane of the reciprocal
lattice vector G is decided on the raw signed distance

    s(k) = G · k - |G|² / 2

A point is inside when s(k) <= HALF_SPACE_TOL. Directions whose length falls
below DIRECTION_TOL are treated as degenerate (zero vector, parallel lines).

Usage
-----
    from brillouin_zone.utils.constants import HALF_SPACE_TOL

    inside = np.dot(G, k) - np.dot(G, G) / 2 <= HALF_SPACE_TOL
"""

# =============================================================================
# Tolerances
# =============================================================================

# Half-space membership and determinant/volume degeneracy threshold
HALF_SPACE_TOL: float = 1e-9

# Degenerate direction threshold (normalization, line intersection)
DIRECTION_TOL: float = 1e-12

# Squared distance below which two vertices are the same point
DUPLICATE_VERTEX_TOL_SQ: float = 1e-14

# Equal-distance threshold when grouping Bragg planes into shells
SHELL_TOL: float = 1e-9

# Relative area (w.r.t. the seed shape) below which a fragment is empty
FRAGMENT_AREA_TOL: float = 1e-12


# =============================================================================
# Construction Defaults
# =============================================================================

# Half-width of the initial square clipped into a 2D zone
SEED_HALF_WIDTH_2D: float = 100.0

# Half-width of the initial cube clipped into the 3D first zone
SEED_HALF_WIDTH_3D: float = 50.0

# Maximum number of live fragments during nth-zone decomposition
FRAGMENT_BUDGET: int = 500

# Default rectangular lattice aspect (b when only a is given)
DEFAULT_RECTANGULAR_B: float = 1.5


# =============================================================================
# Module exports
# =============================================================================

__all__ = [
    'HALF_SPACE_TOL',
    'DIRECTION_TOL',
    'DUPLICATE_VERTEX_TOL_SQ',
    'SHELL_TOL',
    'FRAGMENT_AREA_TOL',
    'SEED_HALF_WIDTH_2D',
    'SEED_HALF_WIDTH_3D',
    'FRAGMENT_BUDGET',
    'DEFAULT_RECTANGULAR_B',
]
