from __future__ import annotations

import logging
from dataclasses import dataclass

from .coords import REGISTER_BITS, layer_mask, total_positions_for_layer_count
from .errors import CapacityExceededError, InvalidLayerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardConfig:
    """How many layers a game instance uses. Build through BoardConfig.build."""
    layer_count: int

    @classmethod
    def build(cls, layer_count: int) -> 'BoardConfig':
        """Validates that the pyramid has at least one layer and fits in the register."""
        if layer_count < 1:
            raise InvalidLayerError(f"A game needs at least one layer, got {layer_count}")
        total = total_positions_for_layer_count(layer_count)
        if total > REGISTER_BITS:
            logger.debug("Rejected %d layers: %d positions > %d bits", layer_count, total, REGISTER_BITS)
            raise CapacityExceededError(
                f"A game with {layer_count} layers needs {total} balls, which is more than supported"
            )
        return cls(layer_count)

    @property
    def total_positions(self) -> int:
        return total_positions_for_layer_count(self.layer_count)

    @property
    def all_positions_mask(self) -> int:
        """Bitmask with every intersection of this board set."""
        mask = 0
        for layer in range(self.layer_count):
            mask |= layer_mask(layer)
        return mask
