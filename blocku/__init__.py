"""
Block-U game engine package.

This package contains the core game logic for Block-U, including:
- Board representation and placement legality
- Piece catalog and rotation
- Legal move generation and automated move selection
- Placement, passing, scoring and game-over detection
"""

from .board import Board, Color, Position
from .game import (
    GamePhase, GameResult, GameState, IllegalMoveError, Side,
    game_result, must_pass, new_game, pass_turn, place, side_can_move,
)
from .move_generator import (
    Move, can_place, can_place_anywhere, get_legal_moves,
    pick_automated_move, valid_moves, valid_moves_full_scan,
)
from .pieces import Piece, PiecePlacement, Shape, create_side_pieces, rotate, shape_definitions

__all__ = [
    'Board', 'Color', 'Position',
    'Piece', 'Shape', 'PiecePlacement', 'create_side_pieces', 'rotate', 'shape_definitions',
    'Move', 'can_place', 'can_place_anywhere', 'valid_moves', 'valid_moves_full_scan',
    'get_legal_moves', 'pick_automated_move',
    'GameState', 'GamePhase', 'GameResult', 'IllegalMoveError', 'Side',
    'new_game', 'place', 'pass_turn', 'side_can_move', 'must_pass', 'game_result',
]
