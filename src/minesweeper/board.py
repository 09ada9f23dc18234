"""
Board module for Minesweeper game.

Implements the grid of cells, neighbor lookup, number calculation and
the revealed/flagged counters the engine keeps in step with the cells.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell
from .config import GameConfig, validate_dimensions
from .errors import InvalidStateError, OutOfBoundsError


# Neighbor offsets in row-major order around the center cell
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    A passive grid of cells with aggregate counters. The board never
    changes game state on its own; the engine queries and mutates it.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        total_mines: Number of mines the generator must place.
    """

    rows: int
    cols: int
    total_mines: int
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _revealed_count: int = field(default=0, init=False)
    _flagged_count: int = field(default=0, init=False)
    _numbers_ready: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate dimensions and create an empty grid."""
        validate_dimensions(self.rows, self.cols, self.total_mines)
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    @classmethod
    def from_config(cls, config: GameConfig) -> "Board":
        """Create an empty board matching a game configuration."""
        return cls(config.rows, config.cols, config.num_mines)

    # ========================================================================
    # Cell Access (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        if not 0 <= row < self.rows:
            raise OutOfBoundsError(f"Row index out of bounds: {row}")
        if not 0 <= col < self.cols:
            raise OutOfBoundsError(f"Column index out of bounds: {col}")
        return self._grid[row][col]

    def positions(self) -> Iterator[Tuple[int, int]]:
        """Iterate over every (row, col) position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbor_positions(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors, in a fixed
            row-major order.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def get_neighbors(self, row: int, col: int) -> List[Cell]:
        """
        Get the cells surrounding a position.

        Returns:
            3 cells at corners, 5 along edges and 8 elsewhere.

        Raises:
            OutOfBoundsError: If the center position is outside the board.
        """
        self.get_cell(row, col)
        return [
            self._grid[neighbor_row][neighbor_col]
            for neighbor_row, neighbor_col in self.neighbor_positions(row, col)
        ]

    # ========================================================================
    # Setup
    # ========================================================================

    def place_mine(self, row: int, col: int) -> None:
        """
        Put a mine on a cell. Only valid before numbers are calculated.

        Raises:
            OutOfBoundsError: If the position is outside the board.
            InvalidStateError: If numbers were already calculated.
        """
        cell = self.get_cell(row, col)
        if self._numbers_ready:
            raise InvalidStateError(
                "Mines cannot be placed after numbers are calculated"
            )
        cell._set_mine()

    def calculate_numbers(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            if cell.is_mine:
                continue
            count = sum(
                1 for neighbor in self.get_neighbors(row, col)
                if neighbor.is_mine
            )
            cell._set_neighbor_mine_count(count)
        self._numbers_ready = True

    def mine_count(self) -> int:
        """Count the mines currently on the board."""
        return sum(1 for row in self._grid for cell in row if cell.is_mine)

    # ========================================================================
    # Counters
    # ========================================================================

    @property
    def revealed_count(self) -> int:
        return self._revealed_count

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.rows * self.cols - self.total_mines

    def increment_revealed_count(self) -> None:
        self._revealed_count += 1

    def increment_flagged_count(self) -> None:
        self._flagged_count += 1

    def decrement_flagged_count(self) -> None:
        if self._flagged_count == 0:
            raise InvalidStateError("Flagged count cannot go below zero")
        self._flagged_count -= 1

    # ========================================================================
    # Observation
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get the player-visible board as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                -3 = questioned
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def hidden_positions(self) -> List[Tuple[int, int]]:
        """
        Get positions a player could still reveal.

        Returns:
            List of (row, col) positions that are unrevealed and unflagged.
        """
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_hidden
            and not self._grid[row][col].is_flagged
        ]
