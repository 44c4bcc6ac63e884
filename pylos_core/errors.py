from __future__ import annotations


class PylosError(ValueError):
    """Base error for invalid board configurations and coordinates."""


class CapacityExceededError(PylosError):
    """Raised when a layer count needs more intersections than the register holds."""


class LayerOutOfRangeError(PylosError):
    """Raised when a game layer is above the configured layer count."""


class InvalidLayerError(PylosError):
    """Raised for the zero layer, or a board with no layers at all."""


class CoordinateOutOfRangeError(PylosError):
    """Raised when x or y falls outside 1..size of the layer."""


class ConfigMismatchError(PylosError):
    """Raised when positions or sets from different BoardConfigs are combined."""
