"""
Exceptions raised by the minefield engine.
"""


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class InvalidParams(MinefieldError, ValueError):
    """Board parameters cannot describe a playable board."""


class PlacementError(MinefieldError, RuntimeError):
    """Mines cannot be placed around the excluded cells."""
