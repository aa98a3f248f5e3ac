"""
Error kinds raised by the Brillouin zone construction.

All failures are deterministic for a given input and propagate to the caller.
Geometric outcomes such as a polygon clipped away entirely are not errors and
are reported as empty results instead.
"""


class BrillouinZoneError(Exception):
    """Base class for all construction errors."""


class InvalidLatticeType(BrillouinZoneError, ValueError):
    """Unknown lattice type tag passed to the lattice catalog."""

    def __init__(self, lattice_type, available=()):
        self.lattice_type = lattice_type
        self.available = tuple(available)
        msg = f"Unknown lattice type '{lattice_type}'."
        if self.available:
            msg += f" Available types: {', '.join(self.available)}"
        super().__init__(msg)


class DegenerateBasis(BrillouinZoneError, ValueError):
    """Real-space basis with (near) zero area or volume."""


class InsufficientReciprocalCoverage(BrillouinZoneError, RuntimeError):
    """
    The clipped region still touches the seed shape.

    Too few Bragg planes were supplied to bound the requested zone; increase
    ``max_index``.
    """


__all__ = [
    'BrillouinZoneError',
    'InvalidLatticeType',
    'DegenerateBasis',
    'InsufficientReciprocalCoverage',
]
