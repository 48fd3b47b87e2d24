"""
Random agent for Block-U that picks uniformly from legal moves.
"""

from typing import Any, Dict, Optional

import numpy as np

from blocku.game import GameState
from blocku.move_generator import Move, pick_automated_move


class RandomAgent:
    """
    Random agent that selects moves uniformly from legal moves.

    This is the automated side's player: no evaluation or search, just a
    seeded random choice so games can be replayed.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducible behavior
        """
        self.seed = seed
        self.rng = np.random.RandomState(seed)

    def select_action(self, state: GameState) -> Optional[Move]:
        """
        Select a random legal move for the side to move.

        Args:
            state: Current game snapshot

        Returns:
            Selected move, or None if the side to move must pass
        """
        return pick_automated_move(state, self.rng)

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "RandomAgent",
            "type": "random",
            "description": "Selects moves uniformly from legal moves"
        }

    def reset(self):
        """Restart the random stream from the original seed."""
        self.rng = np.random.RandomState(self.seed)

    def set_seed(self, seed: int):
        """Set random seed for reproducible behavior."""
        self.seed = seed
        self.rng = np.random.RandomState(seed)
