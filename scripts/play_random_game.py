#!/usr/bin/env python3
"""
Play a full Block-U game between two random agents and print the result.

The human side is driven by a second random agent so the whole rule engine
(placements, forced passes and game-over detection) can be exercised from the
command line.
"""

import os
import sys
import time
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agents.random_agent import RandomAgent
from blocku.board import Color
from blocku.game import Side, game_result, must_pass, pass_turn, place
from schemas.game_config import GameConfig
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def play_game(config: GameConfig, max_turns: int = 1000) -> Dict[str, Any]:
    """
    Play a game to completion.

    Args:
        config: Game configuration
        max_turns: Safety cap on placements plus passes

    Returns:
        Dictionary with the final state, result and turn count
    """
    agents = {
        Side.HUMAN: RandomAgent(seed=config.seed),
        Side.COMPUTER: RandomAgent(seed=None if config.seed is None else config.seed + 1),
    }

    state = config.new_game()
    turns = 0
    while not state.game_over and turns < max_turns:
        side = state.current_side
        if must_pass(state):
            logger.debug(f"{side.name} has no legal move and passes")
            state = pass_turn(state)
        else:
            if side is Side.COMPUTER and config.think_delay > 0:
                time.sleep(config.think_delay)
            move = agents[side].select_action(state)
            state = place(move.piece, move.position, state)
        turns += 1

    if not state.game_over:
        logger.warning(f"Stopped after {turns} turns without reaching game over")

    return {"state": state, "result": game_result(state), "turns": turns}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play a random Block-U game")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--board-size", type=int, default=20, help="Board width and height")
    parser.add_argument("--human-color", default="red", choices=[c.name.lower() for c in Color],
                        help="Color of the human side; the computer takes the first other color")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=Path, default=None, help="Optional log file path")
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level), args.log_file)

    config = GameConfig.with_human_color(
        Color[args.human_color.upper()],
        board_size=args.board_size,
        seed=args.seed,
    )
    outcome = play_game(config)
    state = outcome["state"]
    result = outcome["result"]

    print(state.board)
    print(f"Turns: {outcome['turns']}, placements: {state.move_count}")
    print(f"Human ({state.human_color.name}): {state.human_score}, "
          f"pieces left {len(state.human_pieces)}")
    print(f"Computer ({state.computer_color.name}): {state.computer_score}, "
          f"pieces left {len(state.computer_pieces)}")
    if result.is_tie:
        print("It's a tie!")
    else:
        print(f"Winner: {result.winner.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
