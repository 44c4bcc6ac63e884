import unittest

from pylos_core import (
    BoardConfig,
    Position,
    iter_positions,
    LayerOutOfRangeError,
    InvalidLayerError,
    CoordinateOutOfRangeError,
)


class TestPosition(unittest.TestCase):
    def test_given_three_layer_board_when_building_then_coordinates_roundtrip(self):
        cfg = BoardConfig.build(3)
        p = Position.build(cfg, 1, 2, 3)
        self.assertEqual(p.coordinates(), (1, 2, 3))

    def test_given_two_layer_board_when_building_valid_coords_then_distinct_offsets(self):
        cfg = BoardConfig.build(2)
        coords = [(1, 1, 1), (1, 1, 2), (1, 2, 1), (1, 2, 2), (2, 1, 1)]
        positions = [Position.build(cfg, *c) for c in coords]
        self.assertEqual(sorted(p.offset for p in positions), [0, 1, 2, 3, 4])
        for c, p in zip(coords, positions):
            self.assertEqual(p.coordinates(), c)

    def test_given_two_layer_board_when_building_invalid_coords_then_errors(self):
        cfg = BoardConfig.build(2)
        with self.assertRaises(InvalidLayerError):
            Position.build(cfg, 0, 0, 0)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.build(cfg, 1, 0, 0)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.build(cfg, 1, 3, 1)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.build(cfg, 1, 1, 3)
        with self.assertRaises(LayerOutOfRangeError):
            Position.build(cfg, 3, 1, 1)

    def test_given_base_layer_when_building_then_largest_layer(self):
        cfg = BoardConfig.build(4)
        # Game layer 1 is the 4x4 base, layer 4 is the single top cell
        Position.build(cfg, 1, 4, 4)
        Position.build(cfg, 4, 1, 1)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.build(cfg, 4, 2, 1)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.build(cfg, 2, 4, 1)

    def test_given_every_position_when_iterating_then_offsets_and_coords_roundtrip(self):
        for layers in range(1, 6):
            cfg = BoardConfig.build(layers)
            positions = list(iter_positions(cfg))
            self.assertEqual(len(positions), cfg.total_positions)
            for p in positions:
                layer, x, y = p.coordinates()
                self.assertEqual(Position.build(cfg, layer, x, y), p)

    def test_given_offset_when_building_from_offset_then_bounded_by_board(self):
        cfg = BoardConfig.build(2)
        self.assertEqual(Position.from_offset(cfg, 4).coordinates(), (1, 2, 2))
        self.assertEqual(Position.from_offset(cfg, 0).coordinates(), (2, 1, 1))
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.from_offset(cfg, 5)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.from_offset(cfg, -1)

    def test_given_positions_when_comparing_then_equal_by_offset(self):
        cfg = BoardConfig.build(3)
        a = Position.build(cfg, 2, 1, 2)
        b = Position.build(cfg, 2, 1, 2)
        c = Position.build(cfg, 2, 2, 1)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)
        self.assertEqual(len({a, b, c}), 2)
        self.assertEqual(a.bit, 1 << a.offset)

    def test_given_raw_offset_outside_board_when_constructing_then_rejected(self):
        cfg = BoardConfig.build(2)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position(cfg, 10)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position(cfg, -1)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position(cfg, 1.0)
        self.assertEqual(Position(cfg, 4), Position.from_offset(cfg, 4))

    def test_given_non_integer_coords_when_building_then_rejected(self):
        cfg = BoardConfig.build(3)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.build(cfg, 1, 1.5, 1)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.build(cfg, 1, 1, "2")
        with self.assertRaises(InvalidLayerError):
            Position.build(cfg, 1.0, 1, 1)
        with self.assertRaises(CoordinateOutOfRangeError):
            Position.build(cfg, 1, True, 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
