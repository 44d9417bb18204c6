"""Test grid storage, the piece store and coordinate helpers."""

import unittest
import numpy as np
from tafl_engine.game.board import Grid, Piece, PieceStore
from tafl_engine.game.constants import (
    Side, Position, SquareCategory, BOARD_SIZE, CENTER, CORNERS, initial_layout
)


class TestGrid(unittest.TestCase):

    def test_empty_grid_has_castle_at_center(self):
        grid = Grid()
        self.assertEqual(grid.get(CENTER), SquareCategory.CASTLE)
        self.assertEqual(grid.get(Position(0, 0)), SquareCategory.EMPTY)
        self.assertTrue(grid.is_empty(Position(4, 4)))

    def test_off_board_lookups(self):
        grid = Grid()
        for pos in [Position(-1, 0), Position(0, -1), Position(11, 5), Position(5, 11)]:
            self.assertEqual(grid.get(pos), SquareCategory.OFF_BOARD)

    def test_set_rejects_off_board(self):
        grid = Grid()
        with self.assertRaises(ValueError):
            grid.set(Position(11, 0), SquareCategory.ATTACKER)
        with self.assertRaises(ValueError):
            grid.set(Position(1, 1), SquareCategory.OFF_BOARD)

    def test_piece_overrides_castle(self):
        grid = Grid.from_pieces([Piece(0, Side.DEFENDER, CENTER, is_king=True)])
        self.assertEqual(grid.get(CENTER), SquareCategory.KING)

    def test_captured_pieces_not_projected(self):
        grid = Grid.from_pieces([Piece(0, Side.ATTACKER, Position(2, 2), captured=True)])
        self.assertEqual(grid.get(Position(2, 2)), SquareCategory.EMPTY)

    def test_initial_grid_has_one_king(self):
        grid = PieceStore.initial().to_grid()
        self.assertEqual(grid.positions_of(SquareCategory.KING), [CENTER])
        self.assertEqual(len(grid.positions_of(SquareCategory.ATTACKER)), 24)
        self.assertEqual(len(grid.positions_of(SquareCategory.DEFENDER)), 12)
        self.assertEqual(grid.positions_of(SquareCategory.CASTLE), [])

    def test_numpy_planes(self):
        state = PieceStore.initial().to_grid().to_numpy_array()
        self.assertEqual(state.shape, (3, BOARD_SIZE, BOARD_SIZE))
        self.assertEqual(state.dtype, np.float32)
        self.assertEqual(state[0].sum(), 24)
        self.assertEqual(state[1].sum(), 12)
        self.assertEqual(state[2, CENTER.x, CENTER.y], 1)

    def test_render(self):
        grid = PieceStore.initial().to_grid()
        lines = grid.render(show_coordinates=False).split("\n")
        self.assertEqual(len(lines), BOARD_SIZE)
        # y=10 is printed first
        self.assertEqual(lines[0].replace(" ", ""), "...AAAAA...")
        self.assertEqual(lines[5].replace(" ", ""), "AA.DDKDD.AA")
        self.assertEqual(len(str(grid).split("\n")), BOARD_SIZE + 1)

    def test_copy_is_independent(self):
        grid = Grid()
        clone = grid.copy()
        clone.set(Position(1, 1), SquareCategory.ATTACKER)
        self.assertEqual(grid.get(Position(1, 1)), SquareCategory.EMPTY)
        self.assertNotEqual(grid, clone)


class TestPieceStore(unittest.TestCase):

    def test_initial_store(self):
        store = PieceStore.initial()
        self.assertEqual(len(store), 37)
        self.assertEqual(store.count(Side.ATTACKER), 24)
        self.assertEqual(store.count(Side.DEFENDER), 13)
        self.assertEqual(store.king().position, CENTER)
        self.assertEqual(len({p.id for p in store}), 37)
        self.assertEqual(len(initial_layout()), 37)

    def test_no_piece_starts_on_corner(self):
        store = PieceStore.initial()
        for corner in CORNERS:
            self.assertIsNone(store.piece_at(corner))

    def test_rejects_two_pieces_on_one_square(self):
        with self.assertRaises(ValueError):
            PieceStore([
                Piece(0, Side.ATTACKER, Position(1, 1)),
                Piece(1, Side.DEFENDER, Position(1, 1)),
            ])

    def test_rejects_second_king(self):
        with self.assertRaises(ValueError):
            PieceStore([
                Piece(0, Side.DEFENDER, Position(1, 1), is_king=True),
                Piece(1, Side.DEFENDER, Position(2, 2), is_king=True),
            ])

    def test_rejects_attacking_king(self):
        with self.assertRaises(ValueError):
            PieceStore([Piece(0, Side.ATTACKER, Position(1, 1), is_king=True)])

    def test_rejects_duplicate_id(self):
        with self.assertRaises(ValueError):
            PieceStore([
                Piece(0, Side.ATTACKER, Position(1, 1)),
                Piece(0, Side.ATTACKER, Position(2, 2)),
            ])

    def test_capture_marks_and_removes(self):
        store = PieceStore.initial()
        piece = store.piece_at(Position(5, 1))
        taken = store.capture([Position(5, 1), Position(2, 2)])
        self.assertEqual(taken, [piece])
        self.assertTrue(piece.captured)
        self.assertNotIn(piece.id, store)
        self.assertEqual(len(store), 36)
        self.assertEqual(store.to_grid().get(Position(5, 1)), SquareCategory.EMPTY)


class TestConstants(unittest.TestCase):

    def test_position_from_string(self):
        self.assertEqual(Position.from_string('4,1'), Position(4, 1))
        self.assertEqual(Position.from_string(' 10, 0 '), Position(10, 0))
        self.assertEqual(str(Position(4, 1)), '4,1')
        for bad in ['4', '4,1,2', 'a,b', '']:
            with self.assertRaises(ValueError):
                Position.from_string(bad)

    def test_side_helpers(self):
        self.assertEqual(Side.ATTACKER.opponent, Side.DEFENDER)
        self.assertEqual(Side.DEFENDER.opponent, Side.ATTACKER)
        self.assertEqual(Side.from_string('Defender'), Side.DEFENDER)
        with self.assertRaises(ValueError):
            Side.from_string('king')

    def test_enemy_relation(self):
        A, D, K = SquareCategory.ATTACKER, SquareCategory.DEFENDER, SquareCategory.KING
        self.assertTrue(A.is_enemy_of(D))
        self.assertTrue(A.is_enemy_of(K))
        self.assertTrue(D.is_enemy_of(A))
        self.assertTrue(K.is_enemy_of(A))
        self.assertFalse(D.is_enemy_of(K))
        self.assertFalse(A.is_enemy_of(A))
        for reference in (A, D, K):
            self.assertTrue(SquareCategory.CASTLE.is_enemy_of(reference))
            self.assertFalse(SquareCategory.EMPTY.is_enemy_of(reference))
            self.assertFalse(SquareCategory.OFF_BOARD.is_enemy_of(reference))
            self.assertTrue(SquareCategory.EMPTY.is_friendly_to(reference))

    def test_category_codes_round_trip(self):
        for category in SquareCategory:
            self.assertEqual(SquareCategory.from_code(category.code), category)


if __name__ == '__main__':
    unittest.main()
