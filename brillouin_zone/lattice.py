"""
Lattice Module for Brillouin Zone Construction

This module handles the lattice catalog, reciprocal basis derivation and the
enumeration of reciprocal lattice points.

Supports:
- 2D lattices: square, rectangular, hexagonal
- 3D lattices: simple cubic, FCC, BCC (primitive cells)

Mathematical Background:
------------------------
Reciprocal lattice vectors satisfy bᵢ · aⱼ = 2π δᵢⱼ.

In 3D, from real-space lattice vectors (a₁, a₂, a₃):

    b₁ = 2π (a₂ × a₃) / V
    b₂ = 2π (a₃ × a₁) / V
    b₃ = 2π (a₁ × a₂) / V

where V = a₁ · (a₂ × a₃) is the unit cell volume.

In 2D, with det = a₁ × a₂ (scalar cross product):

    b₁ = 2π (a₂ʸ, -a₂ˣ) / det
    b₂ = 2π (-a₁ʸ, a₁ˣ) / det

Reciprocal lattice points are G = h b₁ + k b₂ (+ l b₃) for integer Miller
indices, enumerated in a box [-M, M]^d and ordered by |G|.

Usage:
------
    from brillouin_zone.lattice import load_lattice, generate_reciprocal_points

    lattice = load_lattice('hexagonal', a=1.0)
    reciprocal = lattice.reciprocal()
    points = generate_reciprocal_points(reciprocal, max_index=4)
"""

import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from .exceptions import DegenerateBasis, InvalidLatticeType
from .utils.constants import DEFAULT_RECTANGULAR_B, HALF_SPACE_TOL

logger = logging.getLogger(__name__)


class LatticeType(str, Enum):
    """Supported Bravais lattices."""
    SQUARE = 'square'
    RECTANGULAR = 'rectangular'
    HEXAGONAL = 'hexagonal'
    CUBIC = 'cubic'
    FCC = 'fcc'
    BCC = 'bcc'

    @property
    def dimension(self) -> int:
        return 2 if self in _LATTICES_2D else 3

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_LATTICES_2D = frozenset({LatticeType.SQUARE, LatticeType.RECTANGULAR, LatticeType.HEXAGONAL})

_DISPLAY_NAMES = {
    LatticeType.SQUARE: 'Square',
    LatticeType.RECTANGULAR: 'Rectangular',
    LatticeType.HEXAGONAL: 'Hexagonal',
    LatticeType.CUBIC: 'Simple Cubic',
    LatticeType.FCC: 'FCC',
    LatticeType.BCC: 'BCC',
}


def _frozen(array) -> np.ndarray:
    arr = np.array(array, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class ReciprocalBasis:
    """
    Reciprocal lattice basis.

    Attributes
    ----------
    vectors : np.ndarray
        (d, d) array with reciprocal vectors as rows (b₁, b₂[, b₃])
    """
    vectors: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, 'vectors', _frozen(self.vectors))

    @property
    def dimension(self) -> int:
        return self.vectors.shape[0]

    @property
    def cell_measure(self) -> float:
        """Area (2D) or volume (3D) of the reciprocal cell."""
        return float(abs(np.linalg.det(self.vectors)))

    def __iter__(self):
        return iter(self.vectors)


@dataclass(frozen=True)
class LatticeBasis:
    """
    Real-space lattice basis produced by the lattice catalog.

    Attributes
    ----------
    lattice_type : LatticeType
        Catalog tag of the lattice
    name : str
        Display name (e.g. 'Hexagonal', 'FCC')
    vectors : np.ndarray
        (d, d) array with real-space vectors as rows (a₁, a₂[, a₃])
    parameters : Dict[str, float]
        Lattice constants used to build the basis
    """
    lattice_type: LatticeType
    name: str
    vectors: np.ndarray
    parameters: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'vectors', _frozen(self.vectors))

    @property
    def dimension(self) -> int:
        return self.vectors.shape[0]

    @property
    def cell_measure(self) -> float:
        """Area (2D) or volume (3D) of the primitive cell."""
        return float(abs(np.linalg.det(self.vectors)))

    def reciprocal(self) -> ReciprocalBasis:
        return compute_reciprocal_lattice(self.vectors)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v:.4f}" for k, v in self.parameters.items())
        return f"LatticeBasis({self.name}, {params})"


@dataclass(frozen=True)
class ReciprocalPoint:
    """
    Reciprocal lattice point G = h b₁ + k b₂ (+ l b₃), never the origin.

    Attributes
    ----------
    vector : np.ndarray
        Cartesian coordinates of G
    miller : Tuple[int, ...]
        Miller indices (h, k[, l])
    norm : float
        |G|
    """
    vector: np.ndarray
    miller: Tuple[int, ...]
    norm: float

    def __post_init__(self):
        object.__setattr__(self, 'vector', _frozen(self.vector))


def _parse_lattice_type(lattice_type: Union[str, LatticeType]) -> LatticeType:
    if isinstance(lattice_type, LatticeType):
        return lattice_type
    try:
        return LatticeType(str(lattice_type).lower())
    except ValueError:
        raise InvalidLatticeType(lattice_type, [t.value for t in LatticeType]) from None


def _check_positive(**constants):
    for value in constants.values():
        if value is None or not (np.isfinite(value) and value > 0):
            raise ValueError("Lattice constant must be positive and finite")


def load_lattice(lattice_type: Union[str, LatticeType],
                 a: float = 1.0,
                 b: Optional[float] = None) -> LatticeBasis:
    """
    Create a lattice basis from the catalog.

    Parameters
    ----------
    lattice_type : str or LatticeType
        'square', 'rectangular', 'hexagonal', 'cubic', 'fcc' or 'bcc'
    a : float, optional
        Lattice constant. Default: 1.0
    b : float, optional
        Second lattice constant, rectangular lattice only. Default: 1.5

    Returns
    -------
    LatticeBasis
        Basis with real-space vectors as rows

    Raises
    ------
    InvalidLatticeType
        If the tag is not in the catalog
    ValueError
        If a lattice constant is not a positive finite number

    Examples
    --------
    >>> lat = load_lattice('hexagonal', a=2.0)
    >>> lat.vectors
    array([[2.        , 0.        ],
           [1.        , 1.73205081]])
    """
    kind = _parse_lattice_type(lattice_type)

    if kind is LatticeType.RECTANGULAR:
        if b is None:
            b = DEFAULT_RECTANGULAR_B
        _check_positive(a=a, b=b)
        parameters = {'a': float(a), 'b': float(b)}
    else:
        _check_positive(a=a)
        parameters = {'a': float(a)}

    if kind is LatticeType.SQUARE:
        vectors = [[a, 0.0], [0.0, a]]
    elif kind is LatticeType.RECTANGULAR:
        vectors = [[a, 0.0], [0.0, b]]
    elif kind is LatticeType.HEXAGONAL:
        # 60° between a₁ and a₂
        vectors = [[a, 0.0], [a * np.cos(np.pi / 3), a * np.sin(np.pi / 3)]]
    elif kind is LatticeType.CUBIC:
        vectors = [[a, 0.0, 0.0], [0.0, a, 0.0], [0.0, 0.0, a]]
    elif kind is LatticeType.FCC:
        # Half face diagonals
        h = a / 2
        vectors = [[0.0, h, h], [h, 0.0, h], [h, h, 0.0]]
    else:
        # BCC: half body diagonals
        h = a / 2
        vectors = [[h, h, -h], [-h, h, h], [h, -h, h]]

    return LatticeBasis(
        lattice_type=kind,
        name=kind.display_name,
        vectors=np.array(vectors, dtype=float),
        parameters=parameters,
    )


def reciprocal_2d(a1, a2) -> ReciprocalBasis:
    """
    Compute 2D reciprocal lattice vectors.

    Parameters
    ----------
    a1, a2 : array-like
        Real-space basis vectors

    Returns
    -------
    ReciprocalBasis
        Basis with rows b₁, b₂

    Raises
    ------
    DegenerateBasis
        If |a₁ × a₂| < 1e-9 (collinear vectors)
    """
    a1 = np.asarray(a1, dtype=float)
    a2 = np.asarray(a2, dtype=float)

    det = a1[0] * a2[1] - a1[1] * a2[0]
    if abs(det) < HALF_SPACE_TOL:
        raise DegenerateBasis("Lattice vectors are collinear (area ≈ 0)")

    factor = 2 * np.pi / det
    b1 = np.array([a2[1], -a2[0]]) * factor
    b2 = np.array([-a1[1], a1[0]]) * factor

    return ReciprocalBasis(np.array([b1, b2]))


def reciprocal_3d(a1, a2, a3) -> ReciprocalBasis:
    """
    Compute 3D reciprocal lattice vectors.

    Uses the standard crystallographic convention with 2π factor.

    Parameters
    ----------
    a1, a2, a3 : array-like
        Real-space basis vectors

    Returns
    -------
    ReciprocalBasis
        Basis with rows b₁, b₂, b₃

    Raises
    ------
    DegenerateBasis
        If |a₁ · (a₂ × a₃)| < 1e-9 (coplanar vectors)
    """
    a1 = np.asarray(a1, dtype=float)
    a2 = np.asarray(a2, dtype=float)
    a3 = np.asarray(a3, dtype=float)

    # Unit cell volume
    volume = np.dot(a1, np.cross(a2, a3))

    if np.abs(volume) < HALF_SPACE_TOL:
        raise DegenerateBasis("Lattice vectors are coplanar (volume ≈ 0)")

    # Reciprocal lattice vectors with 2π factor
    b1 = 2 * np.pi * np.cross(a2, a3) / volume
    b2 = 2 * np.pi * np.cross(a3, a1) / volume
    b3 = 2 * np.pi * np.cross(a1, a2) / volume

    return ReciprocalBasis(np.array([b1, b2, b3]))


def compute_reciprocal_lattice(real_vectors) -> ReciprocalBasis:
    """
    Compute the reciprocal basis of a 2D or 3D real-space basis.

    Parameters
    ----------
    real_vectors : array-like
        (2, 2) or (3, 3) array with real-space vectors as rows

    Returns
    -------
    ReciprocalBasis
    """
    vectors = np.asarray(real_vectors, dtype=float)
    if vectors.shape == (2, 2):
        return reciprocal_2d(*vectors)
    if vectors.shape == (3, 3):
        return reciprocal_3d(*vectors)
    raise ValueError(f"Expected a (2, 2) or (3, 3) basis, got shape {vectors.shape}")


def real_space_basis(reciprocal: ReciprocalBasis) -> np.ndarray:
    """
    Recover the real-space basis from a reciprocal basis.

    The duality is symmetric: applying the transform to (b₁, b₂[, b₃]) gives
    back (a₁, a₂[, a₃]).
    """
    return compute_reciprocal_lattice(reciprocal.vectors).vectors


def generate_reciprocal_points(basis: Union[ReciprocalBasis, np.ndarray],
                               max_index: int) -> List[ReciprocalPoint]:
    """
    Enumerate reciprocal lattice points within a Miller index bound.

    Parameters
    ----------
    basis : ReciprocalBasis or np.ndarray
        Reciprocal basis (rows b₁, b₂[, b₃])
    max_index : int
        Miller indices range over [-max_index, max_index] on every axis

    Returns
    -------
    List[ReciprocalPoint]
        (2·max_index+1)^d - 1 points (origin excluded), ascending by |G|.
        Points of equal norm keep their enumeration order.

    Notes
    -----
    The caller chooses max_index. Too small a bound yields too few Bragg
    planes to enclose the requested zone; the zone builder reports that case
    as InsufficientReciprocalCoverage.
    """
    if max_index < 1:
        raise ValueError("max_index must be at least 1")

    vectors = basis.vectors if isinstance(basis, ReciprocalBasis) else np.asarray(basis, dtype=float)
    dim = vectors.shape[0]

    indices = [m for m in itertools.product(range(-max_index, max_index + 1), repeat=dim)
               if any(m)]
    coords = np.array(indices, dtype=float) @ vectors
    norms = np.linalg.norm(coords, axis=1)

    # Round so that symmetry-equivalent points tie exactly
    order = np.argsort(np.round(norms, 9), kind='stable')

    points = [ReciprocalPoint(vector=coords[i], miller=tuple(indices[i]), norm=float(norms[i]))
              for i in order]
    logger.debug(f"Generated {len(points)} reciprocal points (dim={dim}, max_index={max_index})")
    return points


# Public API
__all__ = [
    'LatticeType',
    'LatticeBasis',
    'ReciprocalBasis',
    'ReciprocalPoint',
    'load_lattice',
    'reciprocal_2d',
    'reciprocal_3d',
    'compute_reciprocal_lattice',
    'real_space_basis',
    'generate_reciprocal_points',
]
