"""
Game configuration for Minesweeper.

Holds board dimensions, mine count and marking options, validated
on construction.
"""
from dataclasses import dataclass

from .errors import InvalidArgumentError


def validate_dimensions(rows: int, cols: int, num_mines: int) -> None:
    """
    Ensure board dimensions and mine count describe a playable board.

    Raises:
        InvalidArgumentError: If a dimension is not positive, the mine
            count is negative, or no safe cell would remain.
    """
    if rows <= 0:
        raise InvalidArgumentError("Rows must be greater than 0")
    if cols <= 0:
        raise InvalidArgumentError("Columns must be greater than 0")
    if num_mines < 0:
        raise InvalidArgumentError("Number of mines cannot be negative")
    max_mines = rows * cols - 1
    if num_mines > max_mines:
        raise InvalidArgumentError(f"Too many mines (max {max_mines})")


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a Minesweeper game.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
        question_marks: Whether marking cycles through a question mark.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10
    question_marks: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_dimensions(self.rows, self.cols, self.num_mines)

    @property
    def safe_cells(self) -> int:
        """Number of cells that do not hold a mine."""
        return self.rows * self.cols - self.num_mines


# Preset difficulty levels
BEGINNER = GameConfig(9, 9, 10)
INTERMEDIATE = GameConfig(16, 16, 40)
EXPERT = GameConfig(16, 30, 99)
