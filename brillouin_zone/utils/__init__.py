"""
Utils package - Shared constants and logging helpers.
"""

from .constants import (
    HALF_SPACE_TOL,
    DIRECTION_TOL,
    DUPLICATE_VERTEX_TOL_SQ,
    SHELL_TOL,
    FRAGMENT_AREA_TOL,
    SEED_HALF_WIDTH_2D,
    SEED_HALF_WIDTH_3D,
    FRAGMENT_BUDGET,
    DEFAULT_RECTANGULAR_B,
)

from .logger import setup_logger

__all__ = [
    # Numerical constants
    "HALF_SPACE_TOL",
    "DIRECTION_TOL",
    "DUPLICATE_VERTEX_TOL_SQ",
    "SHELL_TOL",
    "FRAGMENT_AREA_TOL",
    "SEED_HALF_WIDTH_2D",
    "SEED_HALF_WIDTH_3D",
    "FRAGMENT_BUDGET",
    "DEFAULT_RECTANGULAR_B",
    # Logging
    "setup_logger",
]
