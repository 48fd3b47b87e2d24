"""
Legal move generation for Block-U.
"""

import os
import time
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional

import numpy as np

from .board import Board, Position
from .pieces import Piece, PiecePlacement

if TYPE_CHECKING:
    from .game import GameState, Side

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("BLOCKU_MOVEGEN_DEBUG", ""))


@dataclass(frozen=True)
class Move:
    """A legal placement: a piece in its current orientation and an anchor."""
    piece: Piece
    position: Position

    def __str__(self):
        return (f"Move(piece_id={self.piece.id}, shape={self.piece.shape.name}, "
                f"anchor=({self.position.x}, {self.position.y}))")


def can_place(piece: Piece, position: Position, state: 'GameState') -> bool:
    """
    Check whether ``piece`` may be anchored at ``position`` in ``state``.

    Args:
        piece: Piece in its current orientation
        position: Board cell the piece's (0, 0) offset maps to
        state: Game snapshot to check against

    Returns:
        True if the placement is legal
    """
    cells = PiecePlacement.get_piece_positions(piece, position)
    return state.board.can_place_piece(cells, piece.color)


def _candidate_targets(piece: Piece, board: Board) -> List[Position]:
    """Board corners before a color's first move, its diagonal frontier after."""
    if not board.has_color(piece.color):
        return board.corners()
    return board.get_frontier(piece.color)


def _iter_valid_moves(piece: Piece, state: 'GameState') -> Iterator[Position]:
    """
    Yield each legal anchor once.

    Every legal placement covers either a board corner (first move) or an
    empty cell diagonal to its own color, so only anchors that put some
    offset of the piece on such a cell are tried.
    """
    board = state.board
    seen = set()
    for target in _candidate_targets(piece, board):
        for offset in piece.offsets:
            anchor = PiecePlacement.anchor_for(offset, target)
            if anchor in seen:
                continue
            seen.add(anchor)
            if can_place(piece, anchor, state):
                yield anchor


def valid_moves(piece: Piece, state: 'GameState') -> List[Position]:
    """
    Get every legal anchor for a piece in its current orientation.

    Args:
        piece: Piece to generate anchors for
        state: Game snapshot

    Returns:
        De-duplicated list of legal anchor positions
    """
    start = time.perf_counter()
    moves = list(_iter_valid_moves(piece, state))

    if MOVEGEN_DEBUG:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info(f"MoveGen[frontier]: piece={piece.shape.name}, color={piece.color.name}, "
                    f"valid_moves={len(moves)}, elapsed_ms={elapsed_ms:.2f}")

    return moves


def can_place_anywhere(piece: Piece, state: 'GameState') -> bool:
    """True if the piece has at least one legal anchor; stops at the first."""
    return next(_iter_valid_moves(piece, state), None) is not None


def valid_moves_full_scan(piece: Piece, state: 'GameState') -> List[Position]:
    """
    Get every legal anchor by testing each board cell as an anchor.

    This is the naive reference generator. Offsets are normalized, so an
    anchor off the board can never be legal and is not tried.
    """
    start = time.perf_counter()
    board = state.board
    moves = []
    for y in range(board.size):
        for x in range(board.size):
            anchor = Position(x, y)
            if can_place(piece, anchor, state):
                moves.append(anchor)

    if MOVEGEN_DEBUG:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info(f"MoveGen[naive]: piece={piece.shape.name}, color={piece.color.name}, "
                    f"valid_moves={len(moves)}, elapsed_ms={elapsed_ms:.2f}")

    return moves


def get_legal_moves(state: 'GameState', side: Optional['Side'] = None) -> List[Move]:
    """
    Get all legal (piece, position) pairs for a side.

    Args:
        state: Game snapshot
        side: Side to generate moves for (defaults to the side to move)

    Returns:
        List of legal moves over the side's remaining pieces
    """
    if side is None:
        side = state.current_side

    start = time.perf_counter()
    pieces = state.pieces_of(side)
    legal_moves = []
    for piece in pieces:
        for position in valid_moves(piece, state):
            legal_moves.append(Move(piece, position))

    logger.debug(f"Legal move generation: {len(legal_moves)} moves in "
                 f"{time.perf_counter() - start:.4f}s for side={side.name}, pieces_checked={len(pieces)}")
    return legal_moves


def pick_automated_move(state: 'GameState',
                        rng: Optional[np.random.RandomState] = None) -> Optional[Move]:
    """
    Pick a uniformly random legal move for the side to move.

    Args:
        state: Game snapshot
        rng: Random source; pass a seeded RandomState for reproducible play

    Returns:
        Selected move, or None if the side to move has no legal move
    """
    if rng is None:
        rng = np.random.RandomState()

    legal_moves = get_legal_moves(state)
    if not legal_moves:
        return None

    move = legal_moves[rng.randint(0, len(legal_moves))]
    logger.debug(f"Automated move for {state.current_side.name}: {move} "
                 f"(chosen from {len(legal_moves)})")
    return move
