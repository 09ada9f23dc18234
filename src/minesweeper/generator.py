"""
Map generators for Minesweeper.

A generator receives a freshly built, mine-free board and the first
click, and places exactly ``board.total_mines`` mines outside the 3x3
zone around that click. The engine verifies the result.
"""
import logging
import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Set, Tuple

from .board import Board
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def safe_zone(board: Board, row: int, col: int) -> Set[Tuple[int, int]]:
    """Get the first-click cell and its in-bounds neighbors."""
    zone = set(board.neighbor_positions(row, col))
    zone.add((row, col))
    return zone


def min_free_cells(rows: int, cols: int) -> int:
    """
    Get the fewest cells left outside any first-click zone.

    The worst case is an interior click, whose zone covers up to 3x3
    cells; random placement succeeds for every first click only if the
    mine count does not exceed this value.
    """
    return rows * cols - min(3, rows) * min(3, cols)


# ============================================================================
# Generator Interface
# ============================================================================

class MapGenerator(ABC):
    """
    Abstract base class for mine placement strategies.

    Implementations must place exactly ``board.total_mines`` mines with
    ``board.place_mine`` and leave the first click and its neighbors free.
    """

    @abstractmethod
    def generate(self, board: Board, first_row: int, first_col: int) -> None:
        """
        Place mines on the board.

        Args:
            board: Empty board to populate.
            first_row: Row of the player's first click.
            first_col: Column of the player's first click.
        """


# ============================================================================
# Implementations
# ============================================================================

class RandomMapGenerator(MapGenerator):
    """Place mines uniformly at random outside the first-click zone."""

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducible layouts.
        """
        self.rng = random.Random(seed)

    def generate(self, board: Board, first_row: int, first_col: int) -> None:
        positions = self._get_valid_mine_positions(board, first_row, first_col)
        if len(positions) < board.total_mines:
            raise InvalidArgumentError(
                f"Cannot place {board.total_mines} mines outside the "
                f"first-click zone ({len(positions)} cells available)"
            )
        for row, col in self.rng.sample(positions, board.total_mines):
            board.place_mine(row, col)
        logger.debug(
            "Placed %d random mines avoiding (%d, %d)",
            board.total_mines, first_row, first_col,
        )

    def _get_valid_mine_positions(
        self, board: Board, first_row: int, first_col: int
    ) -> List[Tuple[int, int]]:
        """Get all positions outside the first-click zone."""
        excluded = safe_zone(board, first_row, first_col)
        return [pos for pos in board.positions() if pos not in excluded]


class FixedMapGenerator(MapGenerator):
    """
    Place mines at a predetermined set of positions.

    The layout is used as given regardless of the first click.
    """

    def __init__(self, mine_positions: Iterable[Tuple[int, int]]) -> None:
        self.mine_positions = [tuple(pos) for pos in mine_positions]

    def generate(self, board: Board, first_row: int, first_col: int) -> None:
        for row, col in self.mine_positions:
            board.place_mine(row, col)
