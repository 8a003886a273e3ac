"""Exceptions raised by the forest fire simulation."""


class ForestFireError(Exception):
    """Base class for all simulation errors."""


class InvalidConfigurationError(ForestFireError, ValueError):
    """Raised when the simulation cannot be set up with the given parameters.

    Covers grids too small to hold a border ring plus one interior cell,
    burn chances outside 0-100, non-positive tick intervals and ignition
    points that are not interior cells.
    """


class OutOfRangeError(ForestFireError, IndexError):
    """Raised on access to a cell outside the grid.

    No legitimate code path produces such a coordinate, so this is never
    clamped or wrapped.
    """
