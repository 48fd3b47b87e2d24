"""
Pydantic schemas for Block-U drivers.
"""

from .game_config import GameConfig
from .game_state import GameStateView, PieceView

__all__ = [
    "GameConfig",
    "GameStateView",
    "PieceView"
]
