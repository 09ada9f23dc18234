"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their reveal state,
player mark (none/flag/question) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass, field

from .errors import InvalidStateError


# ============================================================================
# Constants
# ============================================================================

class MarkState(Enum):
    """Player annotation on a hidden cell."""

    NONE = auto()
    FLAGGED = auto()
    QUESTIONED = auto()


# Three-state cycle used when question marks are enabled
_MARK_CYCLE = {
    MarkState.NONE: MarkState.FLAGGED,
    MarkState.FLAGGED: MarkState.QUESTIONED,
    MarkState.QUESTIONED: MarkState.NONE,
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(eq=False)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Mine placement and neighbor counts are written by the owning Board
    during setup only; gameplay goes through reveal() and cycle_mark().
    Cells compare by identity: each board position owns one cell.
    """

    _is_mine: bool = field(default=False, init=False)
    _neighbor_mine_count: int = field(default=0, init=False)
    _is_revealed: bool = field(default=False, init=False)
    _mark_state: MarkState = field(default=MarkState.NONE, init=False)

    # ========================================================================
    # Setup (Board only)
    # ========================================================================

    def _set_mine(self) -> None:
        self._is_mine = True

    def _set_neighbor_mine_count(self, count: int) -> None:
        self._neighbor_mine_count = count

    # ========================================================================
    # Gameplay
    # ========================================================================

    def reveal(self) -> bool:
        """
        Reveal this cell, clearing any question mark.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self._is_revealed or self._mark_state == MarkState.FLAGGED:
            return False
        self._is_revealed = True
        self._mark_state = MarkState.NONE
        return True

    def cycle_mark(self, question_enabled: bool = True) -> MarkState:
        """
        Advance the mark on this cell.

        With question marks enabled the cycle is none -> flag -> question
        -> none, otherwise the mark toggles between none and flag.

        Args:
            question_enabled: Whether the question mark state is used.

        Returns:
            The new mark state.

        Raises:
            InvalidStateError: If the cell is already revealed.
        """
        if self._is_revealed:
            raise InvalidStateError("Cannot cycle mark on revealed cell")
        if question_enabled:
            self._mark_state = _MARK_CYCLE[self._mark_state]
        elif self._mark_state == MarkState.FLAGGED:
            self._mark_state = MarkState.NONE
        else:
            self._mark_state = MarkState.FLAGGED
        return self._mark_state

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self._is_mine

    @property
    def neighbor_mine_count(self) -> int:
        """Count of mines in neighboring cells (0-8)."""
        return self._neighbor_mine_count

    @property
    def mark_state(self) -> MarkState:
        """Current player mark."""
        return self._mark_state

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self._is_revealed

    @property
    def is_hidden(self) -> bool:
        """Check if cell is not yet revealed."""
        return not self._is_revealed

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self._mark_state == MarkState.FLAGGED

    @property
    def is_questioned(self) -> bool:
        """Check if cell carries a question mark."""
        return self._mark_state == MarkState.QUESTIONED

    @property
    def is_marked(self) -> bool:
        return self._mark_state != MarkState.NONE

    def to_observation(self) -> int:
        """
        Convert cell to its player-visible observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Questioned cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if not self._is_revealed:
            if self._mark_state == MarkState.FLAGGED:
                return -2
            if self._mark_state == MarkState.QUESTIONED:
                return -3
            return -1
        if self._is_mine:
            return 9
        return self._neighbor_mine_count
