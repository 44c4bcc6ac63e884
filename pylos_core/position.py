from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from .config import BoardConfig
from .coords import coordinates_from_offset, offset_from_coordinates, size_for_layer
from .errors import CoordinateOutOfRangeError, InvalidLayerError, LayerOutOfRangeError

GameCoord = Tuple[int, int, int]  # (layer, x, y), all 1-based


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Position:
    """A single intersection, stored as its register offset on a given board."""
    config: BoardConfig
    offset: int

    def __post_init__(self) -> None:
        if not _is_int(self.offset) or not (0 <= self.offset < self.config.total_positions):
            raise CoordinateOutOfRangeError(
                f"Offset {self.offset!r} is outside a board of {self.config.total_positions} positions"
            )

    @classmethod
    def build(cls, config: BoardConfig, layer: int, x: int, y: int) -> 'Position':
        """
        Builds a position from 1-based game coordinates.
        Game layer 1 is the base of the pyramid, so it is the largest layer:
        it has config.layer_count intersections per side.
        """
        if not _is_int(layer):
            raise InvalidLayerError(f"Layer must be an integer, got {layer!r}")
        if layer > config.layer_count:
            raise LayerOutOfRangeError(f"Layer {layer} is above the top layer {config.layer_count}")
        if layer < 1:
            raise InvalidLayerError(f"Layer {layer} does not exist; layers start at 1")
        if not (_is_int(x) and _is_int(y)):
            raise CoordinateOutOfRangeError(f"Coordinates must be integers, got ({x!r}, {y!r})")
        mapper_layer = config.layer_count - layer
        layer_size = size_for_layer(mapper_layer)
        if not (1 <= x <= layer_size and 1 <= y <= layer_size):
            raise CoordinateOutOfRangeError(
                f"({x}, {y}) is outside layer {layer}, which is {layer_size}x{layer_size}"
            )
        return cls(config, offset_from_coordinates(mapper_layer, x - 1, y - 1))

    @classmethod
    def from_offset(cls, config: BoardConfig, offset: int) -> 'Position':
        return cls(config, offset)

    @property
    def bit(self) -> int:
        return 1 << self.offset

    def coordinates(self) -> GameCoord:
        """Recovers the 1-based (layer, x, y) this position was built from."""
        mapper_layer, x, y = coordinates_from_offset(self.offset)
        return self.config.layer_count - mapper_layer, x + 1, y + 1


def iter_positions(config: BoardConfig) -> Iterator[Position]:
    """Iterates over every position of the board in offset order."""
    for offset in range(config.total_positions):
        yield Position(config, offset)
