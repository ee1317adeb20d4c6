"""
Exceptions raised by hyperdisk.
"""


class HyperdiskError(Exception):
    """Base class for every error raised by this package."""


class DegenerateGeometryError(HyperdiskError):
    """A construction has no unique solution (parallel lines, inversion of the centre)."""


class InvalidDiskError(HyperdiskError, ValueError):
    """The disk has a non-positive radius or an empty bounding box."""


class NumericalError(HyperdiskError, ArithmeticError):
    """A construction produced NaN or infinity where a finite value was required."""


class GraphFormatError(HyperdiskError, ValueError):
    """A graph description could not be turned into nodes and edges."""
