"""
Tests for the pydantic configuration and snapshot schemas.
"""

import json
import warnings

import pytest
from pydantic import ValidationError

from blocku.board import Color, Position
from blocku.game import Side, new_game, place
from blocku.pieces import Shape
from schemas import GameConfig, GameStateView, PieceView
from tests.utils_game_states import piece_for


class TestGameConfig:

    def test_defaults(self):
        config = GameConfig()
        assert config.board_size == 20
        assert config.human_color == Color.RED
        assert config.computer_color == Color.BLUE
        assert config.first_side == Side.HUMAN
        assert config.seed is None
        assert config.think_delay == 0.0

    def test_schema_example_without_deprecation_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            schema = GameConfig.model_json_schema()
        assert schema["example"]["board_size"] == 20

    def test_same_colors_rejected(self):
        with pytest.raises(ValidationError):
            GameConfig(human_color=Color.GREEN, computer_color=Color.GREEN)

    def test_board_size_bounds(self):
        with pytest.raises(ValidationError):
            GameConfig(board_size=1)

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            GameConfig(think_delay=-1)

    def test_with_human_color_picks_first_other_color(self):
        assert GameConfig.with_human_color(Color.RED).computer_color == Color.ORANGE
        assert GameConfig.with_human_color(Color.ORANGE).computer_color == Color.RED
        assert GameConfig.with_human_color(Color.PINK, seed=3).seed == 3

    def test_new_game_uses_config(self):
        config = GameConfig(board_size=10, human_color=Color.YELLOW, computer_color=Color.INDIGO,
                            first_side=Side.COMPUTER)
        state = config.new_game()

        assert state.board_size == 10
        assert state.human_color == Color.YELLOW
        assert state.computer_color == Color.INDIGO
        assert state.current_side == Side.COMPUTER
        assert all(p.color == Color.INDIGO for p in state.computer_pieces)

    def test_same_color_rejected_by_engine(self):
        with pytest.raises(ValueError):
            new_game(human_color=Color.RED, computer_color=Color.RED)


class TestGameStateView:

    def test_fresh_game_view(self):
        view = GameStateView.from_state(new_game())

        assert len(view.board) == 20
        assert all(cell is None for row in view.board for cell in row)
        assert view.current_side == "human"
        assert view.phase == "human_turn"
        assert view.human_color == "RED"
        assert len(view.human_pieces) == 21
        assert view.scores == {"human": 0, "computer": 0}
        assert view.winner is None

    def test_view_after_placement(self):
        state = new_game()
        state = place(piece_for(state.human_pieces, Shape.DOMINO), Position(0, 0), state)

        view = GameStateView.from_state(state)

        assert view.board[0][0] == "RED"
        assert view.board[0][1] == "RED"
        assert view.board[1][0] is None
        assert view.current_side == "computer"
        assert view.scores["human"] == 2
        assert view.move_count == 1

    def test_winner_reported_when_over(self):
        state = new_game(board_size=2)
        state = place(piece_for(state.human_pieces, Shape.TETROMINO_O), Position(0, 0), state)

        view = GameStateView.from_state(state)

        assert view.game_over
        assert view.phase == "game_over"
        assert view.winner == "human"

    def test_json_round_trip(self):
        view = GameStateView.from_state(new_game(board_size=5))
        data = json.loads(view.model_dump_json())
        assert data["human_pieces"][0]["shape"] == "MONOMINO"
        assert data["human_pieces"][0]["offsets"] == [[0, 0]]

    def test_piece_view(self):
        state = new_game()
        view = PieceView.from_piece(piece_for(state.computer_pieces, Shape.PENTOMINO_X))
        assert view.id == Shape.PENTOMINO_X.value
        assert view.color == "BLUE"
        assert view.size == 5
