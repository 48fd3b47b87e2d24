"""
Game state schemas
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from blocku.board import Color
from blocku.game import GameState, game_result
from blocku.pieces import Piece


class PieceView(BaseModel):
    """A remaining piece in its current orientation."""
    id: int = Field(ge=1, le=21, description="Stable piece id within its side's set")
    shape: str
    color: str
    offsets: List[Tuple[int, int]] = Field(description="(x, y) offsets from the anchor")
    size: int

    @classmethod
    def from_piece(cls, piece: Piece) -> "PieceView":
        return cls(
            id=piece.id,
            shape=piece.shape.name,
            color=piece.color.name,
            offsets=list(piece.offsets),
            size=piece.size,
        )


class GameStateView(BaseModel):
    """Serializable view of an engine snapshot for drivers."""
    board: List[List[Optional[str]]] = Field(description="Rows of color names, null for empty cells")
    current_side: str
    phase: str
    human_color: str
    computer_color: str
    human_pieces: List[PieceView]
    computer_pieces: List[PieceView]
    scores: Dict[str, int] = Field(description="Scores for each side")
    move_count: int
    game_over: bool
    winner: Optional[str] = None

    @classmethod
    def from_state(cls, state: GameState) -> "GameStateView":
        board = [
            [Color(int(value)).name if value else None for value in row]
            for row in state.board.grid
        ]
        winner = None
        if state.game_over:
            result = game_result(state)
            winner = result.winner.value if result.winner is not None else None
        return cls(
            board=board,
            current_side=state.current_side.value,
            phase=state.phase.value,
            human_color=state.human_color.name,
            computer_color=state.computer_color.name,
            human_pieces=[PieceView.from_piece(p) for p in state.human_pieces],
            computer_pieces=[PieceView.from_piece(p) for p in state.computer_pieces],
            scores={"human": state.human_score, "computer": state.computer_score},
            move_count=state.move_count,
            game_over=state.game_over,
            winner=winner,
        )
