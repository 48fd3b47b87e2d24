"""
Tests to verify that frontier-based move generation produces the same results
as the naive (full-board scan) move generation.
"""

import unittest

from blocku.board import Color, Position
from blocku.game import Side, new_game
from blocku.move_generator import can_place, can_place_anywhere, valid_moves, valid_moves_full_scan
from blocku.pieces import Shape, create_side_pieces, rotate
from tests.utils_game_states import generate_random_valid_state, with_cells


def assert_equivalent(test: unittest.TestCase, state, pieces):
    for piece in pieces:
        frontier = valid_moves(piece, state)
        naive = valid_moves_full_scan(piece, state)
        test.assertEqual(len(frontier), len(set(frontier)),
                         f"{piece.shape.name}: duplicate anchors {frontier}")
        test.assertEqual(set(frontier), set(naive),
                         f"{piece.shape.name}: frontier has {len(frontier)}, naive has {len(naive)}")
        test.assertEqual(can_place_anywhere(piece, state), bool(naive))
        for anchor in frontier:
            test.assertTrue(can_place(piece, anchor, state))


class TestMoveGenerationEquivalence(unittest.TestCase):
    """Test that naive and frontier-based generators produce equivalent results."""

    def test_empty_board_first_move(self):
        """Test equivalence on an empty board (first move scenario)."""
        state = new_game()
        assert_equivalent(self, state, create_side_pieces(Color.RED))

    def test_empty_board_rotated_pieces(self):
        state = new_game()
        pieces = [rotate(p) for p in create_side_pieces(Color.RED)]
        pieces += [rotate(rotate(p)) for p in create_side_pieces(Color.RED)]
        assert_equivalent(self, state, pieces)

    def test_after_single_piece(self):
        """Test equivalence after one placement for each side."""
        state = with_cells(new_game(), {Color.RED: [(0, 0), (1, 0)], Color.BLUE: [(19, 19)]})
        assert_equivalent(self, state, create_side_pieces(Color.RED))
        assert_equivalent(self, state, create_side_pieces(Color.BLUE))

    def test_random_states(self):
        """Test equivalence on random mid-game states."""
        for seed, num_moves in ((0, 4), (1, 8), (2, 12)):
            state = generate_random_valid_state(num_moves, seed=seed)
            for side in Side:
                pieces = list(state.pieces_of(side))
                assert_equivalent(self, state, pieces)
                assert_equivalent(self, state, [rotate(p, clockwise=False) for p in pieces[::3]])

    def test_small_board_late_game(self):
        state = generate_random_valid_state(30, seed=5, board_size=9)
        for side in Side:
            assert_equivalent(self, state, state.pieces_of(side))


class TestValidMoves:
    """Test anchors produced by valid_moves."""

    def test_monomino_first_move_hits_every_corner(self):
        state = new_game()
        monomino = create_side_pieces(Color.RED)[0]

        moves = valid_moves(monomino, state)

        assert set(moves) == {Position(0, 0), Position(19, 0), Position(0, 19), Position(19, 19)}

    def test_domino_first_move(self):
        state = new_game()
        domino = create_side_pieces(Color.RED)[1]

        moves = valid_moves(domino, state)

        assert len(moves) == 4
        assert set(moves) == {Position(0, 0), Position(18, 0), Position(0, 19), Position(18, 19)}

    def test_moves_after_corner_monomino(self):
        """Only the diagonal cell (1, 1) can connect to a lone corner square."""
        state = with_cells(new_game(), {Color.RED: [(0, 0)]})
        domino = create_side_pieces(Color.RED)[1]

        moves = valid_moves(domino, state)

        # Anchoring the right-hand square on (1, 1) would put the left one
        # edge-to-edge with (0, 0)
        assert moves == [Position(1, 1)]
        vertical = rotate(domino)
        assert set(valid_moves(vertical, state)) == {Position(1, 1)}

    def test_no_moves_when_frontier_blocked(self):
        state = with_cells(new_game(), {Color.RED: [(0, 0)], Color.BLUE: [(1, 1)]})
        for piece in create_side_pieces(Color.RED):
            assert valid_moves(piece, state) == []
            assert not can_place_anywhere(piece, state)

    def test_x_pentomino_cannot_open(self):
        """The X never covers a board corner, so it has no first move."""
        state = new_game(board_size=5)
        x_piece = next(p for p in create_side_pieces(Color.RED) if p.shape is Shape.PENTOMINO_X)

        assert valid_moves(x_piece, state) == []
        assert valid_moves_full_scan(x_piece, state) == []


if __name__ == '__main__':
    unittest.main()
