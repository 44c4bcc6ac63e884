from __future__ import annotations

from typing import Tuple

# Layers are numbered from 0 here; layer k is a (k+1) x (k+1) grid and its
# cells follow all cells of the smaller layers in the register.

REGISTER_BITS = 64

Coord3 = Tuple[int, int, int]  # (layer, x, y), all 0-based


def total_positions_for_layer_count(layers: int) -> int:
    """Number of intersections on a pyramid of `layers` layers (sum of squares)."""
    return layers * (layers + 1) * (2 * layers + 1) // 6


def size_for_layer(layer: int) -> int:
    """Side length of a 0-based layer."""
    return layer + 1


def bit_offset_for_layer(layer: int) -> int:
    """Index of the first cell of a 0-based layer."""
    return total_positions_for_layer_count(layer)


def layer_mask(layer: int) -> int:
    """Bitmask with every cell of a 0-based layer set."""
    start = bit_offset_for_layer(layer)
    finish = bit_offset_for_layer(layer + 1)
    return ((1 << (finish - start)) - 1) << start


def max_layer_count() -> int:
    """Largest layer count whose intersections all fit in the register."""
    layers = 0
    while total_positions_for_layer_count(layers + 1) <= REGISTER_BITS:
        layers += 1
    return layers


def offset_from_coordinates(layer: int, x: int, y: int) -> int:
    """Flat register index for 0-based (layer, x, y), row-major within the layer."""
    offset = bit_offset_for_layer(layer) + y * size_for_layer(layer) + x
    assert 0 <= offset < REGISTER_BITS, f"offset {offset} outside the {REGISTER_BITS}-bit register"
    return offset


def coordinates_from_offset(offset: int) -> Coord3:
    """Inverse of offset_from_coordinates."""
    assert 0 <= offset < REGISTER_BITS, f"offset {offset} outside the {REGISTER_BITS}-bit register"
    layer = 0
    while bit_offset_for_layer(layer + 1) <= offset:
        layer += 1
    remainder = offset - bit_offset_for_layer(layer)
    size = size_for_layer(layer)
    return layer, remainder % size, remainder // size
