"""Test capture detection: enclosure of groups and the flank fallback."""

import unittest
from tafl_engine.game.board import Grid
from tafl_engine.game.capture import CaptureDetector
from tafl_engine.game.constants import Position, SquareCategory

A = SquareCategory.ATTACKER
D = SquareCategory.DEFENDER
K = SquareCategory.KING


def P(text):
    return Position.from_string(text)


class TestCaptureDetection(unittest.TestCase):

    def setUp(self):
        self.grid = Grid()

    def _place(self, category, *squares):
        for square in squares:
            self.grid.set(P(square), category)

    def _detect(self, square):
        return CaptureDetector.detect(self.grid, P(square))

    def test_simple_flank_capture(self):
        self._place(A, '3,3', '5,3')
        self._place(D, '4,3')
        self.assertEqual(self._detect('5,3'), {P('4,3')})

    def test_vertical_flank_capture(self):
        self._place(D, '6,3', '6,1')
        self._place(A, '6,2')
        self.assertEqual(self._detect('6,1'), {P('6,2')})

    def test_no_capture_with_one_flank(self):
        self._place(A, '5,3')
        self._place(D, '4,3')
        self.assertEqual(self._detect('5,3'), set())

    def test_flank_must_be_on_same_axis(self):
        self._place(A, '4,4', '5,3')
        self._place(D, '4,3')
        self.assertEqual(self._detect('5,3'), set())

    def test_piece_moving_between_two_enemies_is_not_captured(self):
        self._place(A, '3,3', '5,3')
        self._place(D, '4,3')
        self.assertEqual(self._detect('4,3'), set())

    def test_board_edge_closes_enclosure(self):
        self._place(A, '0,4')
        self._place(D, '0,3', '1,4', '0,5')
        self.assertEqual(self._detect('0,5'), {P('0,4')})

    def test_edge_alone_is_not_a_flank(self):
        # Off-board squares are hostile to nobody in the flank rule
        self._place(A, '1,4')
        self._place(D, '0,4')
        self.assertEqual(self._detect('1,4'), set())

    def test_enclosed_cluster_is_captured_whole(self):
        self._place(A, '0,3', '0,4')
        self._place(D, '0,2', '1,3', '1,4', '0,5')
        self.assertEqual(self._detect('0,5'), {P('0,3'), P('0,4')})

    def test_larger_enclosed_cluster(self):
        self._place(A, '4,8', '5,8', '6,8', '5,7')
        self._place(D, '3,8', '7,8', '4,7', '6,7', '5,6', '4,9', '5,9', '6,9')
        self.assertEqual(self._detect('6,9'), {P('4,8'), P('5,8'), P('6,8'), P('5,7')})

    def test_single_gap_saves_whole_cluster(self):
        self._place(A, '0,3', '0,4')
        self._place(D, '1,3', '1,4', '0,5')
        # 0,2 left empty
        self.assertEqual(self._detect('0,5'), set())

    def test_flank_fallback_only_runs_without_enclosure(self):
        # 0,4 is enclosed; 0,6 would fall to a flank but 1,6 is empty
        self._place(A, '0,4', '0,6')
        self._place(D, '0,3', '1,4', '0,7', '0,5')
        self.assertEqual(self._detect('0,5'), {P('0,4')})

    def test_flank_fallback_captures_when_enclosure_finds_nothing(self):
        self._place(A, '0,6')
        self._place(D, '0,7', '0,5')
        self.assertEqual(self._detect('0,5'), {P('0,6')})

    def test_empty_castle_is_hostile_to_defenders(self):
        # The throne stays hostile after the king has left it
        self.assertEqual(self.grid.get(P('5,5')), SquareCategory.CASTLE)
        self._place(D, '5,4')
        self._place(A, '5,3')
        self.assertEqual(self._detect('5,3'), {P('5,4')})

    def test_empty_castle_is_hostile_to_attackers(self):
        self._place(A, '5,6')
        self._place(D, '5,7')
        self.assertEqual(self._detect('5,7'), {P('5,6')})

    def test_castle_closes_enclosure_without_being_captured(self):
        self._place(A, '5,6')
        self._place(D, '4,6', '6,6', '5,7')
        self.assertEqual(self._detect('5,7'), {P('5,6')})

    def test_mover_next_to_empty_castle_captures_nothing(self):
        self._place(A, '5,4')
        self.assertEqual(self._detect('5,4'), set())

    def test_king_not_captured_by_two_flanks(self):
        self._place(K, '3,3')
        self._place(A, '2,3', '4,3')
        self.assertEqual(self._detect('4,3'), set())

    def test_king_captured_when_enclosed(self):
        self._place(K, '3,3')
        self._place(A, '2,3', '3,2', '3,4', '4,3')
        self.assertEqual(self._detect('4,3'), {P('3,3')})

    def test_king_captured_with_defenders_in_enclosed_group(self):
        self._place(K, '0,4')
        self._place(D, '0,5')
        self._place(A, '1,4', '1,5', '0,3', '0,6')
        self.assertEqual(self._detect('0,6'), {P('0,4'), P('0,5')})

    def test_king_takes_part_in_captures(self):
        self._place(A, '3,3')
        self._place(D, '2,3')
        self._place(K, '4,3')
        self.assertEqual(self._detect('4,3'), {P('3,3')})

    def test_separate_groups_evaluated_independently(self):
        self._place(A, '0,4', '1,5')
        self._place(D, '0,3', '1,4', '2,5', '1,6')
        # 0,4 is enclosed by the edge; 1,5 is enclosed on all four sides
        self._place(D, '0,5')
        self.assertEqual(self._detect('0,5'), {P('0,4'), P('1,5')})

    def test_detection_is_idempotent(self):
        self._place(A, '0,3', '0,4')
        self._place(D, '0,2', '1,3', '1,4', '0,5')
        before = self.grid.copy()
        first = self._detect('0,5')
        second = self._detect('0,5')
        self.assertEqual(first, second)
        self.assertEqual(self.grid, before)

    def test_empty_mover_square_captures_nothing(self):
        self._place(D, '4,3')
        self.assertEqual(self._detect('5,3'), set())


if __name__ == '__main__':
    unittest.main()
