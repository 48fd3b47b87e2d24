"""
Block-U board implementation: a square grid of colored cells and the
placement legality rule.
"""

import numpy as np
from typing import Iterable, List, Optional
from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Side colors. Values are the cell codes stored on the board grid."""
    RED = 1
    ORANGE = 2
    YELLOW = 3
    GREEN = 4
    BLUE = 5
    INDIGO = 6
    PINK = 7


@dataclass(frozen=True)
class Position:
    """Represents a position on the board."""
    x: int
    y: int


EDGE_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))
CORNER_OFFSETS = ((-1, -1), (1, -1), (-1, 1), (1, 1))

# Reasons returned by Board.placement_violation
OUT_OF_BOUNDS = "piece would extend out of bounds"
CELL_OCCUPIED = "piece would overlap an occupied cell"
FIRST_MOVE_NOT_ON_CORNER = "first move must cover a board corner"
EDGE_CONTACT = "piece would touch its own color along an edge"
NO_CORNER_CONTACT = "piece must touch its own color at a corner"


class Board:
    """
    Block-U game board.

    The board is an N x N grid indexed ``grid[y, x]`` where:
    - 0 represents an empty cell
    - any other value is the ``Color.value`` of the side occupying it

    Boards are immutable: the grid is read-only and ``with_cells`` returns a
    new board, so older game snapshots can be inspected safely.
    """

    SIZE = 20

    def __init__(self, size: int = SIZE, grid: Optional[np.ndarray] = None):
        if grid is None:
            grid = np.zeros((size, size), dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
                raise ValueError("Board grid must be square")
        grid.setflags(write=False)
        self.grid = grid
        self.size = grid.shape[0]

    def is_valid_position(self, pos: Position) -> bool:
        """Check if position is within board bounds."""
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def get_cell(self, pos: Position) -> int:
        """Get the value at a position, or -1 if it is off the board."""
        if not self.is_valid_position(pos):
            return -1
        return int(self.grid[pos.y, pos.x])

    def is_empty(self, pos: Position) -> bool:
        return self.get_cell(pos) == 0

    def get_color_at(self, pos: Position) -> Optional[Color]:
        """Get the color at a position, or None if empty or off the board."""
        value = self.get_cell(pos)
        if value <= 0:
            return None
        return Color(value)

    def has_color(self, color: Color) -> bool:
        """True once any cell holds ``color``."""
        return bool(np.any(self.grid == color.value))

    def count(self, color: Color) -> int:
        return int(np.count_nonzero(self.grid == color.value))

    def corners(self) -> List[Position]:
        last = self.size - 1
        return [Position(0, 0), Position(last, 0), Position(0, last), Position(last, last)]

    def is_corner(self, pos: Position) -> bool:
        last = self.size - 1
        return pos.x in (0, last) and pos.y in (0, last)

    def get_adjacent_positions(self, pos: Position) -> List[Position]:
        """Get all adjacent positions (including diagonals)."""
        return self.get_edge_adjacent_positions(pos) + self.get_corner_adjacent_positions(pos)

    def get_edge_adjacent_positions(self, pos: Position) -> List[Position]:
        """Get positions that share an edge (not diagonal)."""
        positions = []
        for dx, dy in EDGE_OFFSETS:
            new_pos = Position(pos.x + dx, pos.y + dy)
            if self.is_valid_position(new_pos):
                positions.append(new_pos)
        return positions

    def get_corner_adjacent_positions(self, pos: Position) -> List[Position]:
        """Get positions that are diagonally adjacent (corner touching)."""
        positions = []
        for dx, dy in CORNER_OFFSETS:
            new_pos = Position(pos.x + dx, pos.y + dy)
            if self.is_valid_position(new_pos):
                positions.append(new_pos)
        return positions

    def get_frontier(self, color: Color) -> List[Position]:
        """
        Empty cells diagonally adjacent to ``color``'s cells.

        These are the only cells a non-first placement can touch its own
        territory through. Each cell appears once, in row-major scan order of
        the owning cells.
        """
        frontier = []
        seen = set()
        for y, x in np.argwhere(self.grid == color.value):
            for pos in self.get_corner_adjacent_positions(Position(int(x), int(y))):
                if self.is_empty(pos) and pos not in seen:
                    seen.add(pos)
                    frontier.append(pos)
        return frontier

    def placement_violation(self, cells: List[Position], color: Color) -> Optional[str]:
        """
        Return why ``color`` may not cover ``cells``, or None if it may.

        Rules:
        1. Every cell must be on the board and empty
        2. A color's first placement must cover one of the four board corners
        3. Later placements must touch their own color at a corner at least
           once and never along an edge; the opponent's cells are irrelevant
        """
        if not cells:
            return OUT_OF_BOUNDS

        grid = self.grid
        size = self.size

        for pos in cells:
            x, y = pos.x, pos.y
            if x < 0 or x >= size or y < 0 or y >= size:
                return OUT_OF_BOUNDS
            if grid[y, x] != 0:
                return CELL_OCCUPIED

        if not self.has_color(color):
            if any(self.is_corner(pos) for pos in cells):
                return None
            return FIRST_MOVE_NOT_ON_CORNER

        return self._check_adjacency_rules(cells, color.value)

    def _check_adjacency_rules(self, cells: List[Position], color_value: int) -> Optional[str]:
        """
        Classify same-color neighbors of every covered cell.

        A neighbor differing in one axis is an edge contact, in both axes a
        corner contact. One edge contact anywhere rejects the whole piece.
        """
        has_corner_contact = False

        for pos in cells:
            for adj_pos in self.get_edge_adjacent_positions(pos):
                if self.get_cell(adj_pos) == color_value:
                    return EDGE_CONTACT
            if not has_corner_contact:
                has_corner_contact = any(
                    self.get_cell(adj_pos) == color_value
                    for adj_pos in self.get_corner_adjacent_positions(pos)
                )

        if not has_corner_contact:
            return NO_CORNER_CONTACT
        return None

    def can_place_piece(self, cells: List[Position], color: Color) -> bool:
        """Check if ``color`` may cover exactly ``cells``."""
        return self.placement_violation(cells, color) is None

    def with_cells(self, cells: Iterable[Position], color: Color) -> 'Board':
        """Return a new board with ``cells`` set to ``color``."""
        grid = self.grid.copy()
        for pos in cells:
            grid[pos.y, pos.x] = color.value
        return Board(grid=grid)

    def __str__(self) -> str:
        """One line per row: '.' for empty, otherwise the color's initial."""
        result = []
        for y in range(self.size):
            row_str = ""
            for x in range(self.size):
                value = self.grid[y, x]
                if value == 0:
                    row_str += "."
                else:
                    row_str += Color(int(value)).name[0]
            result.append(row_str)
        return "\n".join(result)
