"""
Pylos core Python package.

Coordinate encoding and occupancy tracking for a pyramid-shaped board. Game
rules (move legality, turns, win detection) are left to callers.
Modules:
- errors.py: PylosError and its subclasses
- coords.py: layer/offset arithmetic for the 64-bit register
- config.py: BoardConfig
- position.py: Position
- position_set.py: PositionSet
"""
from .errors import (
    PylosError,
    CapacityExceededError,
    LayerOutOfRangeError,
    InvalidLayerError,
    CoordinateOutOfRangeError,
    ConfigMismatchError,
)
from .coords import (
    REGISTER_BITS,
    total_positions_for_layer_count,
    size_for_layer,
    bit_offset_for_layer,
    layer_mask,
    max_layer_count,
    offset_from_coordinates,
    coordinates_from_offset,
)
from .config import BoardConfig
from .position import Position, iter_positions
from .position_set import PositionSet

__all__ = [
    "PylosError",
    "CapacityExceededError",
    "LayerOutOfRangeError",
    "InvalidLayerError",
    "CoordinateOutOfRangeError",
    "ConfigMismatchError",
    "REGISTER_BITS",
    "total_positions_for_layer_count",
    "size_for_layer",
    "bit_offset_for_layer",
    "layer_mask",
    "max_layer_count",
    "offset_from_coordinates",
    "coordinates_from_offset",
    "BoardConfig",
    "Position",
    "iter_positions",
    "PositionSet",
]
