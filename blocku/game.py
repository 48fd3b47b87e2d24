"""
Block-U game state, placement, passing and termination.

Every operation here is a pure function from a ``GameState`` snapshot to a
new snapshot; snapshots are never modified once returned.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple

from .board import Board, Color, Position
from .move_generator import can_place_anywhere
from .pieces import Piece, PiecePlacement, Shape, create_side_pieces

logger = logging.getLogger(__name__)

ALL_PIECES_BONUS = 15
MONOMINO_LAST_BONUS = 5


class IllegalMoveError(ValueError):
    """Raised when a placement or pass violates its precondition."""


class Side(Enum):
    """The two roles in a match."""
    HUMAN = "human"
    COMPUTER = "computer"

    @property
    def other(self) -> 'Side':
        return Side.COMPUTER if self is Side.HUMAN else Side.HUMAN


class GamePhase(Enum):
    HUMAN_TURN = "human_turn"
    COMPUTER_TURN = "computer_turn"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a match."""
    board: Board
    human_color: Color
    computer_color: Color
    human_pieces: Tuple[Piece, ...]
    computer_pieces: Tuple[Piece, ...]
    current_side: Side = Side.HUMAN
    human_score: int = 0
    computer_score: int = 0
    game_over: bool = False
    move_count: int = 0
    consecutive_passes: int = 0

    def color_of(self, side: Side) -> Color:
        return self.human_color if side is Side.HUMAN else self.computer_color

    def pieces_of(self, side: Side) -> Tuple[Piece, ...]:
        return self.human_pieces if side is Side.HUMAN else self.computer_pieces

    def score_of(self, side: Side) -> int:
        return self.human_score if side is Side.HUMAN else self.computer_score

    @property
    def current_color(self) -> Color:
        return self.color_of(self.current_side)

    @property
    def board_size(self) -> int:
        return self.board.size

    @property
    def phase(self) -> GamePhase:
        if self.game_over:
            return GamePhase.GAME_OVER
        if self.current_side is Side.HUMAN:
            return GamePhase.HUMAN_TURN
        return GamePhase.COMPUTER_TURN


@dataclass
class GameResult:
    """Final (or current) standings of a match."""
    scores: Dict[Side, int] = field(default_factory=dict)
    winner: Optional[Side] = None
    is_tie: bool = False


def side_can_move(state: GameState, side: Side) -> bool:
    """True if any of ``side``'s remaining pieces has a legal anchor."""
    return any(can_place_anywhere(piece, state) for piece in state.pieces_of(side))


def must_pass(state: GameState) -> bool:
    """
    True if the side to move has no legal placement but the game goes on.

    Drivers call this after every transition to decide whether to offer (or,
    for the automated side, perform) a pass.
    """
    return not state.game_over and not side_can_move(state, state.current_side)


def _check_game_over(state: GameState) -> GameState:
    """Recompute ``game_over``: the match ends only when neither side can move."""
    due = state.current_side
    game_over = not side_can_move(state, due) and not side_can_move(state, due.other)
    if game_over:
        logger.info(f"Game over after {state.move_count} moves: "
                    f"human={state.human_score}, computer={state.computer_score}")
    return replace(state, game_over=game_over)


def new_game(human_color: Color = Color.RED,
             computer_color: Color = Color.BLUE,
             board_size: int = Board.SIZE,
             first_side: Side = Side.HUMAN) -> GameState:
    """
    Create the initial snapshot: empty board, full piece sets, zero scores.

    Raises:
        ValueError: if both sides are given the same color
    """
    if human_color == computer_color:
        raise ValueError(f"Both sides cannot play {human_color.name}")

    state = GameState(
        board=Board(board_size),
        human_color=human_color,
        computer_color=computer_color,
        human_pieces=tuple(create_side_pieces(human_color)),
        computer_pieces=tuple(create_side_pieces(computer_color)),
        current_side=first_side,
    )
    logger.debug(f"New game: {board_size}x{board_size}, human={human_color.name}, "
                 f"computer={computer_color.name}, first={first_side.name}")
    return _check_game_over(state)


def _with_side(state: GameState, side: Side, pieces: Tuple[Piece, ...], score: int) -> GameState:
    if side is Side.HUMAN:
        return replace(state, human_pieces=pieces, human_score=score)
    return replace(state, computer_pieces=pieces, computer_score=score)


def place(piece: Piece, position: Position, state: GameState) -> GameState:
    """
    Place a piece for the side to move and return the next snapshot.

    Scoring: one point per square; emptying the piece set earns 15 more, and
    5 on top of that if the last piece was the monomino.

    Raises:
        IllegalMoveError: if the game is over, the piece is not the side to
            move's, it has already been used, or the placement is illegal.
            ``state`` is left untouched.
    """
    if state.game_over:
        raise IllegalMoveError("Game is already over")

    side = state.current_side
    if piece.color != state.color_of(side):
        raise IllegalMoveError(f"It is not {piece.color.name}'s turn; {state.current_color.name} to move")

    remaining = state.pieces_of(side)
    if not any(p.id == piece.id and p.shape is piece.shape for p in remaining):
        raise IllegalMoveError(f"Piece {piece.shape.name} has already been used")

    cells = PiecePlacement.get_piece_positions(piece, position)
    violation = state.board.placement_violation(cells, piece.color)
    if violation is not None:
        raise IllegalMoveError(f"Cannot place {piece.shape.name} at ({position.x}, {position.y}): {violation}")

    remaining = tuple(p for p in remaining if p.id != piece.id)
    score = state.score_of(side) + piece.size
    if not remaining:
        score += ALL_PIECES_BONUS
        if piece.shape is Shape.MONOMINO:
            score += MONOMINO_LAST_BONUS

    next_state = _with_side(state, side, remaining, score)
    next_state = replace(
        next_state,
        board=state.board.with_cells(cells, piece.color),
        current_side=side.other,
        move_count=state.move_count + 1,
        consecutive_passes=0,
    )
    logger.debug(f"{side.name} placed {piece.shape.name} at ({position.x}, {position.y}), score={score}")
    return _check_game_over(next_state)


def pass_turn(state: GameState) -> GameState:
    """
    Hand the turn to the other side without placing.

    Passing is allowed even when a legal move exists; avoiding that is the
    driver's policy.

    Raises:
        IllegalMoveError: if the game is already over
    """
    if state.game_over:
        raise IllegalMoveError("Game is already over")

    side = state.current_side
    if side_can_move(state, side):
        logger.warning(f"{side.name} passed with legal moves available")

    next_state = replace(
        state,
        current_side=side.other,
        consecutive_passes=state.consecutive_passes + 1,
    )
    logger.debug(f"{side.name} passed")
    return _check_game_over(next_state)


def game_result(state: GameState) -> GameResult:
    """Standings from the current scores; a tie has no winner."""
    scores = {Side.HUMAN: state.human_score, Side.COMPUTER: state.computer_score}
    if state.human_score == state.computer_score:
        return GameResult(scores=scores, winner=None, is_tie=True)
    winner = max(scores, key=scores.get)
    return GameResult(scores=scores, winner=winner, is_tie=False)
