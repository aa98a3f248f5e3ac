"""
High-Symmetry Points Module

Standard k-points of the catalog lattices and k-paths between them.

Points are fixed linear combinations of the reciprocal basis vectors
(b₁, b₂[, b₃]) of the catalog's primitive cells, following the labeling
conventions in:
- Setyawan & Curtarolo, Comp. Mat. Sci. 49, 299-312 (2010)

Γ is always the origin.
"""

import logging
from typing import Dict, List, Tuple, Union

import numpy as np

from .lattice import LatticeType, ReciprocalBasis, _parse_lattice_type
from .vector_algebra import line_intersection_2d

logger = logging.getLogger(__name__)

GAMMA = 'Γ'


def _vectors(reciprocal_basis) -> np.ndarray:
    if isinstance(reciprocal_basis, ReciprocalBasis):
        return reciprocal_basis.vectors
    return np.asarray(reciprocal_basis, dtype=float)


def get_high_symmetry_points_2d(lattice_type: LatticeType,
                                reciprocal_basis) -> Dict[str, np.ndarray]:
    """
    High-symmetry points of the 2D lattices.

    - square: X at an edge center, M at a corner
    - rectangular: X and Y at the edge centers, S at a corner
    - hexagonal: K at a corner, M at an edge center
    """
    b1, b2 = _vectors(reciprocal_basis)

    points = {GAMMA: np.zeros(2)}

    if lattice_type is LatticeType.SQUARE:
        points.update({
            'X': 0.5 * b1,                 # (1/2, 0)
            'M': 0.5 * (b1 + b2),          # (1/2, 1/2)
        })
    elif lattice_type is LatticeType.RECTANGULAR:
        points.update({
            'X': 0.5 * b1,                 # (1/2, 0)
            'Y': 0.5 * b2,                 # (0, 1/2)
            'S': 0.5 * (b1 + b2),          # (1/2, 1/2)
        })
    elif lattice_type is LatticeType.HEXAGONAL:
        # Hexagon corner where the Bragg lines of b₁ and b₁ + b₂ meet,
        # equal to (2b₁ + b₂)/3 since b₁ and b₂ enclose 120°
        points.update({
            'K': line_intersection_2d(0.5 * b1, b1, 0.5 * (b1 + b2), b1 + b2),  # (2/3, 1/3)
            'M': 0.5 * b1,                 # (1/2, 0)
        })

    return points


def get_high_symmetry_points_cubic(lattice_type: LatticeType,
                                   reciprocal_basis) -> Dict[str, np.ndarray]:
    """
    Get high-symmetry points for cubic lattices.

    Parameters
    ----------
    lattice_type : LatticeType
        CUBIC, FCC or BCC
    reciprocal_basis : ReciprocalBasis or np.ndarray
        Reciprocal lattice vectors of the primitive cell

    Returns
    -------
    dict
        Dictionary mapping point names to k-vectors
    """
    b1, b2, b3 = _vectors(reciprocal_basis)

    points = {GAMMA: np.zeros(3)}

    if lattice_type is LatticeType.FCC:
        points.update({
            'X': 0.5 * (b1 + b3),                       # (1/2, 0, 1/2)
            'L': 0.5 * (b1 + b2 + b3),                  # (1/2, 1/2, 1/2)
            'W': 0.25 * b1 + 0.5 * b2 + 0.75 * b3,      # (1/4, 1/2, 3/4)
            'K': 0.375 * b1 + 0.375 * b2 + 0.75 * b3,   # (3/8, 3/8, 3/4)
        })
    elif lattice_type is LatticeType.BCC:
        points.update({
            'H': 0.5 * (b1 + b2 - b3),     # (1/2, 1/2, -1/2)
            'N': 0.5 * b1,                 # (1/2, 0, 0)
            'P': 0.25 * (b1 + b2 + b3),    # (1/4, 1/4, 1/4)
        })
    else:  # simple cubic
        points.update({
            'X': 0.5 * b1,                 # (1/2, 0, 0)
            'M': 0.5 * (b1 + b2),          # (1/2, 1/2, 0)
            'R': 0.5 * (b1 + b2 + b3),     # (1/2, 1/2, 1/2)
        })

    return points


def get_high_symmetry_points(lattice_type: Union[str, LatticeType],
                             reciprocal_basis) -> Dict[str, np.ndarray]:
    """
    Get high-symmetry k-points for a catalog lattice.

    Parameters
    ----------
    lattice_type : str or LatticeType
        Catalog tag of the lattice
    reciprocal_basis : ReciprocalBasis or np.ndarray
        Reciprocal vectors as produced for the catalog basis

    Returns
    -------
    Dict[str, np.ndarray]
        Dictionary mapping point names (e.g., 'Γ', 'X', 'M') to k-vectors

    Raises
    ------
    InvalidLatticeType
        Unknown lattice tag
    """
    kind = _parse_lattice_type(lattice_type)
    if kind.dimension == 2:
        return get_high_symmetry_points_2d(kind, reciprocal_basis)
    return get_high_symmetry_points_cubic(kind, reciprocal_basis)


DEFAULT_PATHS: Dict[LatticeType, List[str]] = {
    LatticeType.SQUARE: [GAMMA, 'X', 'M', GAMMA],
    LatticeType.RECTANGULAR: [GAMMA, 'X', 'S', 'Y', GAMMA],
    LatticeType.HEXAGONAL: [GAMMA, 'M', 'K', GAMMA],
    LatticeType.CUBIC: [GAMMA, 'X', 'M', GAMMA, 'R', 'X'],
    LatticeType.FCC: [GAMMA, 'X', 'W', 'K', GAMMA, 'L'],
    LatticeType.BCC: [GAMMA, 'H', 'N', GAMMA, 'P', 'H'],
}


def default_path(lattice_type: Union[str, LatticeType]) -> List[str]:
    """Conventional k-path labels for a catalog lattice."""
    return list(DEFAULT_PATHS[_parse_lattice_type(lattice_type)])


def get_high_symmetry_path(points: Dict[str, np.ndarray],
                           path_spec: List[str],
                           n_points: int = 100) -> Tuple[np.ndarray, np.ndarray, List[Tuple[int, str]]]:
    """
    Generate a k-path through high-symmetry points.

    Parameters
    ----------
    points : Dict[str, np.ndarray]
        High-symmetry points dictionary
    path_spec : List[str]
        Path specification, e.g., ['Γ', 'X', 'M', 'Γ']
    n_points : int
        Total number of points along the path

    Returns
    -------
    k_path : np.ndarray
        Array of k-points along the path, shape (n_points, d)
    k_dist : np.ndarray
        Cumulative distance along the path for plotting
    labels : List[Tuple[int, str]]
        List of (index, label) for tick marks at high-symmetry points

    Raises
    ------
    ValueError
        If the path has fewer than 2 labels or is too short for n_points
    KeyError
        If a label is not in ``points``

    Example
    -------
    >>> from brillouin_zone import load_lattice, get_high_symmetry_points, get_high_symmetry_path
    >>> lat = load_lattice('square')
    >>> points = get_high_symmetry_points('square', lat.reciprocal())
    >>> k_path, k_dist, labels = get_high_symmetry_path(points, ['Γ', 'X', 'M', 'Γ'])
    """
    if len(path_spec) < 2:
        raise ValueError("Path specification needs at least 2 points")
    if n_points < 2 * (len(path_spec) - 1):
        raise ValueError(f"n_points must be at least {2 * (len(path_spec) - 1)} for this path")

    # Calculate total path length
    segments = []
    total_length = 0.0
    for i in range(len(path_spec) - 1):
        start = np.asarray(points[path_spec[i]], dtype=float)
        end = np.asarray(points[path_spec[i + 1]], dtype=float)
        seg_length = float(np.linalg.norm(end - start))
        segments.append((start, end, seg_length))
        total_length += seg_length

    if total_length <= 0:
        raise ValueError("Path has zero length")

    # Distribute points proportionally to segment length
    k_path = []
    k_dist = []
    labels = [(0, path_spec[0])]
    current_dist = 0.0

    for seg_idx, (start, end, seg_length) in enumerate(segments):
        remaining_segments = len(segments) - seg_idx - 1
        if remaining_segments == 0:
            # Last segment gets remaining points
            n_seg = n_points - len(k_path)
        else:
            n_seg = max(2, int(n_points * seg_length / total_length))
            n_seg = min(n_seg, n_points - len(k_path) - 2 * remaining_segments)

        for j in range(n_seg):
            t = j / (n_seg - 1)
            k_path.append((1 - t) * start + t * end)
            k_dist.append(current_dist + t * seg_length)

        current_dist += seg_length
        labels.append((len(k_path) - 1, path_spec[seg_idx + 1]))

    logger.debug(f"k-path {'-'.join(path_spec)}: {len(k_path)} points, length {total_length:.4f}")
    return np.array(k_path), np.array(k_dist), labels


__all__ = [
    'GAMMA',
    'DEFAULT_PATHS',
    'default_path',
    'get_high_symmetry_points',
    'get_high_symmetry_points_2d',
    'get_high_symmetry_points_cubic',
    'get_high_symmetry_path',
]
