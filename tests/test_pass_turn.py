"""
Tests for pass turn functionality.
"""

import unittest

from blocku.game import GamePhase, Side, new_game, pass_turn
from tests.utils_game_states import blocked_human_state


class TestPassTurn(unittest.TestCase):
    """Test pass turn functionality."""

    def test_pass_advances_turn(self):
        state = blocked_human_state()

        next_state = pass_turn(state)

        self.assertEqual(next_state.current_side, Side.COMPUTER)
        self.assertEqual(next_state.phase, GamePhase.COMPUTER_TURN)
        self.assertEqual(next_state.consecutive_passes, 1)
        self.assertFalse(next_state.game_over)

    def test_pass_leaves_board_pieces_and_scores(self):
        state = blocked_human_state()

        next_state = pass_turn(state)

        self.assertTrue((next_state.board.grid == state.board.grid).all())
        self.assertEqual(next_state.human_pieces, state.human_pieces)
        self.assertEqual(next_state.computer_pieces, state.computer_pieces)
        self.assertEqual(next_state.human_score, state.human_score)
        self.assertEqual(next_state.computer_score, state.computer_score)
        self.assertEqual(next_state.move_count, state.move_count)

    def test_pass_does_not_modify_previous_snapshot(self):
        state = new_game()

        pass_turn(state)

        self.assertEqual(state.current_side, Side.HUMAN)
        self.assertEqual(state.consecutive_passes, 0)

    def test_pass_with_legal_moves_is_allowed_but_logged(self):
        """Passing while a move exists is driver policy; the engine only warns."""
        state = new_game()

        with self.assertLogs('blocku.game', level='WARNING') as captured:
            next_state = pass_turn(state)

        self.assertEqual(next_state.current_side, Side.COMPUTER)
        self.assertTrue(any('legal moves' in line for line in captured.output))

    def test_two_passes_return_turn(self):
        state = pass_turn(pass_turn(new_game()))
        self.assertEqual(state.current_side, Side.HUMAN)
        self.assertEqual(state.consecutive_passes, 2)


if __name__ == '__main__':
    unittest.main()
