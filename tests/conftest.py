"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Repository root, for the command-line entry point
sys.path.append(str(Path(__file__).parent.parent))

from minesweeper import (
    Board,
    Cell,
    FixedMapGenerator,
    GameConfig,
    GameEngine,
)


# ============================================================================
# Fixed Layouts
# ============================================================================

# 4x4 board: reveal(0, 0) opens 12 cells, (3, 3) is the last safe cell
CORNER_MINES = [(2, 2), (2, 3), (3, 2)]

# 9x9 board with 13 mines; a first click at (8, 8) opens 4 cells
CHORD_MINES = [
    (0, 0), (2, 2), (2, 6), (3, 4), (4, 3), (4, 4), (5, 4),
    (6, 2), (6, 6), (6, 7), (6, 8), (7, 6), (8, 6),
]


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_engine(
    rows: int,
    cols: int,
    mines,
    question_marks: bool = True,
    clock=None,
) -> GameEngine:
    """Create an engine whose board gets the given mine layout."""
    board = Board(rows, cols, len(mines))
    kwargs = {"clock": clock} if clock is not None else {}
    return GameEngine(
        board,
        FixedMapGenerator(mines),
        question_marks_enabled=question_marks,
        **kwargs,
    )


def count_revealed(board: Board) -> int:
    """Count revealed cells by scanning the grid."""
    return sum(
        1 for row, col in board.positions()
        if board.get_cell(row, col).is_revealed
    )


def count_flagged(board: Board) -> int:
    """Count flagged cells by scanning the grid."""
    return sum(
        1 for row, col in board.positions()
        if board.get_cell(row, col).is_flagged
    )


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def corner_engine(clock: FakeClock) -> GameEngine:
    """4x4 engine with three mines in the bottom-right corner."""
    return make_engine(4, 4, CORNER_MINES, clock=clock)


@pytest.fixture
def chord_engine(clock: FakeClock) -> GameEngine:
    """9x9 engine with 13 fixed mines, opened at (8, 8)."""
    engine = make_engine(9, 9, CHORD_MINES, clock=clock)
    engine.reveal(8, 8)
    return engine


@pytest.fixture
def empty_engine() -> GameEngine:
    """3x3 engine without mines."""
    return make_engine(3, 3, [])


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(9, 9, 10)


@pytest.fixture
def small_board() -> Board:
    """Create a small 3x3 board with 1 mine."""
    return Board(3, 3, 1)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    cell = Cell()
    cell._set_mine()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid game configuration."""
    return GameConfig(9, 9, 10)
