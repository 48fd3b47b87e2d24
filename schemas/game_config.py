"""
Pydantic schemas for game configuration.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from blocku.board import Board, Color
from blocku.game import GameState, Side, new_game


class GameConfig(BaseModel):
    """Configuration supplied by the driver at game start."""
    board_size: int = Field(default=Board.SIZE, ge=2, le=100, description="Width and height of the board")
    human_color: Color = Color.RED
    computer_color: Color = Color.BLUE
    first_side: Side = Side.HUMAN
    seed: Optional[int] = Field(default=None, description="Seed for the automated side's random source")
    think_delay: float = Field(default=0.0, ge=0.0, description="Seconds the driver waits before automated moves")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "board_size": 20,
                "human_color": 1,
                "computer_color": 5,
                "first_side": "human",
                "seed": 42,
                "think_delay": 1.0
            }
        }
    )

    @model_validator(mode="after")
    def _check_distinct_colors(self) -> "GameConfig":
        if self.human_color == self.computer_color:
            raise ValueError("human_color and computer_color must differ")
        return self

    @classmethod
    def with_human_color(cls, human_color: Color, **kwargs) -> "GameConfig":
        """Config where the computer takes the first catalog color the human did not pick."""
        computer_color = next(color for color in Color if color != human_color)
        return cls(human_color=human_color, computer_color=computer_color, **kwargs)

    def new_game(self) -> GameState:
        return new_game(
            human_color=self.human_color,
            computer_color=self.computer_color,
            board_size=self.board_size,
            first_side=self.first_side,
        )
