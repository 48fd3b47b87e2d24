"""
Block-U piece definitions: the 21 polyominoes, per-side piece sets and the
90-degree rotation transform.
"""

import math
import numpy as np
from typing import Dict, List, Tuple
from dataclasses import dataclass, replace
from enum import Enum

from .board import Color, Position

Offset = Tuple[int, int]


class Shape(Enum):
    """Enumeration of all Block-U shapes. Values double as stable piece ids."""
    MONOMINO = 1      # 1 square
    DOMINO = 2        # 2 squares
    TROMINO_I = 3     # 3 squares in line
    TROMINO_L = 4     # 3 squares in L shape
    TETROMINO_I = 5   # 4 squares in line
    TETROMINO_O = 6   # 2x2 square
    TETROMINO_L = 7   # 3 in line with square on end
    TETROMINO_Z = 8   # Z shape
    TETROMINO_T = 9   # T shape
    TETROMINO_S = 10  # S shape
    PENTOMINO_I = 11  # 5 squares in line
    PENTOMINO_L = 12  # 4 in line with one extra
    PENTOMINO_N = 13  # lightning bolt
    PENTOMINO_P = 14  # 2x2 with one sticking out
    PENTOMINO_T = 15  # T shape with longer stem
    PENTOMINO_U = 16  # U shape
    PENTOMINO_V = 17  # V shape
    PENTOMINO_W = 18  # zigzag
    PENTOMINO_X = 19  # plus
    PENTOMINO_Y = 20  # fork
    PENTOMINO_Z = 21  # long Z


# Rows are y, columns are x.
_SHAPE_GRIDS: Dict[Shape, np.ndarray] = {
    Shape.MONOMINO: np.array([[1]]),
    Shape.DOMINO: np.array([[1, 1]]),
    Shape.TROMINO_I: np.array([[1, 1, 1]]),
    Shape.TROMINO_L: np.array([[1, 1], [1, 0]]),
    Shape.TETROMINO_I: np.array([[1, 1, 1, 1]]),
    Shape.TETROMINO_O: np.array([[1, 1], [1, 1]]),
    Shape.TETROMINO_L: np.array([[1, 1], [1, 0], [1, 0]]),
    Shape.TETROMINO_Z: np.array([[1, 1, 0], [0, 1, 1]]),
    Shape.TETROMINO_T: np.array([[1, 1, 1], [0, 1, 0]]),
    Shape.TETROMINO_S: np.array([[0, 1, 1], [1, 1, 0]]),
    Shape.PENTOMINO_I: np.array([[1, 1, 1, 1, 1]]),
    Shape.PENTOMINO_L: np.array([[1, 1], [1, 0], [1, 0], [1, 0]]),
    Shape.PENTOMINO_N: np.array([[1, 1, 1, 0], [0, 0, 1, 1]]),
    Shape.PENTOMINO_P: np.array([[1, 1, 0], [1, 1, 1]]),
    Shape.PENTOMINO_T: np.array([[1, 1, 1], [0, 1, 0], [0, 1, 0]]),
    Shape.PENTOMINO_U: np.array([[1, 0, 1], [1, 1, 1]]),
    Shape.PENTOMINO_V: np.array([[1, 1, 1], [1, 0, 0], [1, 0, 0]]),
    Shape.PENTOMINO_W: np.array([[1, 1, 0], [0, 1, 1], [0, 0, 1]]),
    Shape.PENTOMINO_X: np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]]),
    Shape.PENTOMINO_Y: np.array([[1, 1, 1, 1], [0, 1, 0, 0]]),
    Shape.PENTOMINO_Z: np.array([[1, 1, 0], [0, 1, 0], [0, 1, 1]]),
}


def shape_to_offsets(shape: np.ndarray) -> List[Offset]:
    """
    Convert a numpy shape array to a list of (x, y) offsets.

    Args:
        shape: 2D numpy array with 1s where cells are occupied

    Returns:
        List of (x, y) tuples for occupied cells
    """
    offsets = []
    rows, cols = shape.shape
    for y in range(rows):
        for x in range(cols):
            if shape[y, x] == 1:
                offsets.append((x, y))
    return offsets


def normalize_offsets(offsets) -> Tuple[Offset, ...]:
    """
    Normalize offsets so that min_x = 0 and min_y = 0.

    Args:
        offsets: Iterable of (x, y) tuples

    Returns:
        Normalized offsets, sorted for canonical ordering
    """
    offsets = list(offsets)
    if not offsets:
        return ()

    min_x = min(x for x, y in offsets)
    min_y = min(y for x, y in offsets)

    return tuple(sorted((x - min_x, y - min_y) for x, y in offsets))


_CANONICAL_OFFSETS: Dict[Shape, Tuple[Offset, ...]] = {
    shape: normalize_offsets(shape_to_offsets(grid))
    for shape, grid in _SHAPE_GRIDS.items()
}


def shape_definitions() -> Dict[Shape, Tuple[Offset, ...]]:
    """Mapping from every shape to its canonical offsets, in catalog order."""
    return dict(_CANONICAL_OFFSETS)


@dataclass(frozen=True)
class Piece:
    """
    A shape owned by one side, in its current orientation.

    ``id`` identifies the piece slot within a side's set and survives
    rotation, so a rotated piece is still recognised as the same piece.
    """
    id: int
    shape: Shape
    color: Color
    offsets: Tuple[Offset, ...]

    def __post_init__(self):
        """Validate piece after initialization."""
        if not self.offsets:
            raise ValueError("Piece must have at least one square")
        if len(set(self.offsets)) != len(self.offsets):
            raise ValueError("Piece squares must not repeat")

    @property
    def size(self) -> int:
        """Number of squares in the piece."""
        return len(self.offsets)

    def __str__(self):
        return f"Piece(id={self.id}, shape={self.shape.name}, color={self.color.name})"


def create_side_pieces(color: Color) -> List[Piece]:
    """One piece per shape for ``color``, in catalog order with ids 1-21."""
    return [
        Piece(id=shape.value, shape=shape, color=color, offsets=offsets)
        for shape, offsets in _CANONICAL_OFFSETS.items()
    ]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def rotate(piece: Piece, clockwise: bool = True) -> Piece:
    """
    Rotate a piece 90 degrees about the midpoint of its bounding box.

    Clockwise maps (dx, dy) -> (-dy, dx) and counter-clockwise maps
    (dx, dy) -> (dy, -dx), with y growing downwards. Results are rounded to
    the nearest integer and re-normalized to a (0, 0) origin.

    Args:
        piece: Piece to rotate
        clockwise: Direction of rotation

    Returns:
        New piece with the same id, shape and color
    """
    xs = [x for x, y in piece.offsets]
    ys = [y for x, y in piece.offsets]
    center_x = (min(xs) + max(xs)) / 2
    center_y = (min(ys) + max(ys)) / 2

    rotated = []
    for x, y in piece.offsets:
        dx = x - center_x
        dy = y - center_y
        if clockwise:
            new_dx, new_dy = -dy, dx
        else:
            new_dx, new_dy = dy, -dx
        rotated.append((_round_half_up(new_dx + center_x), _round_half_up(new_dy + center_y)))

    return replace(piece, offsets=normalize_offsets(rotated))


class PiecePlacement:
    """Helper class for piece placement calculations."""

    @staticmethod
    def get_piece_positions(piece: Piece, anchor: Position) -> List[Position]:
        """
        Get the board positions a piece would occupy when anchored at ``anchor``.

        The anchor is where the piece's (0, 0) offset lands.
        """
        return [Position(anchor.x + dx, anchor.y + dy) for dx, dy in piece.offsets]

    @staticmethod
    def anchor_for(offset: Offset, target: Position) -> Position:
        """Anchor that puts ``offset`` exactly on ``target``."""
        return Position(target.x - offset[0], target.y - offset[1])
