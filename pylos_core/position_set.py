from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .config import BoardConfig
from .errors import ConfigMismatchError, CoordinateOutOfRangeError
from .position import Position


@dataclass
class PositionSet:
    """Bitmask-backed set of positions on one board; bit i is set iff offset i is a member."""
    config: BoardConfig
    bits: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or self.bits & ~self.config.all_positions_mask:
            raise CoordinateOutOfRangeError(
                f"Bits {self.bits!r} fall outside a board of {self.config.total_positions} positions"
            )

    @classmethod
    def new(cls, config: BoardConfig) -> 'PositionSet':
        return cls(config)

    @classmethod
    def full(cls, config: BoardConfig) -> 'PositionSet':
        return cls(config, config.all_positions_mask)

    @classmethod
    def from_positions(cls, config: BoardConfig, positions: Iterable[Position]) -> 'PositionSet':
        s = cls(config)
        for p in positions:
            s.insert(p)
        return s

    def _check_position(self, position: Position) -> None:
        if position.config != self.config:
            raise ConfigMismatchError(
                f"Position from a {position.config.layer_count}-layer board used with a "
                f"{self.config.layer_count}-layer set"
            )

    def _check_set(self, other: 'PositionSet') -> None:
        if other.config != self.config:
            raise ConfigMismatchError(
                f"Cannot combine sets from {self.config.layer_count}-layer and "
                f"{other.config.layer_count}-layer boards"
            )

    def contains(self, position: Position) -> bool:
        self._check_position(position)
        return bool(self.bits & position.bit)

    def insert(self, position: Position) -> None:
        self._check_position(position)
        self.bits |= position.bit

    def remove(self, position: Position) -> None:
        self._check_position(position)
        self.bits &= ~position.bit

    def union(self, other: 'PositionSet') -> 'PositionSet':
        self._check_set(other)
        return PositionSet(self.config, self.bits | other.bits)

    def intersection(self, other: 'PositionSet') -> 'PositionSet':
        self._check_set(other)
        return PositionSet(self.config, self.bits & other.bits)

    def difference(self, other: 'PositionSet') -> 'PositionSet':
        self._check_set(other)
        return PositionSet(self.config, self.bits & ~other.bits)

    def copy(self) -> 'PositionSet':
        return PositionSet(self.config, self.bits)

    def is_empty(self) -> bool:
        return self.bits == 0

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Position):
            return False
        return self.contains(item)

    def __or__(self, other: object) -> 'PositionSet':
        if not isinstance(other, PositionSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> 'PositionSet':
        if not isinstance(other, PositionSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> 'PositionSet':
        if not isinstance(other, PositionSet):
            return NotImplemented
        return self.difference(other)

    def __len__(self) -> int:
        return bin(self.bits).count('1')

    def __iter__(self) -> Iterator[Position]:
        """Members in offset order."""
        bits = self.bits
        while bits:
            low = bits & -bits
            yield Position(self.config, low.bit_length() - 1)
            bits ^= low
