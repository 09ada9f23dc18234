"""
Game engine for Minesweeper.

Drives a single game on one board: first-click setup through the map
generator, reveals with flood-fill, chords, mark cycling, timing and
win/loss detection.
"""
import logging
import time
from collections import deque
from enum import Enum, auto
from typing import Callable, Deque, Optional, Tuple

from .board import Board
from .cell import MarkState
from .config import GameConfig
from .errors import GeneratorContractError, InvalidStateError
from .generator import MapGenerator, RandomMapGenerator
from .result import GameResult

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    READY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_finished(self) -> bool:
        """Check if this is a terminal state."""
        return self in (GameState.WON, GameState.LOST)


# ============================================================================
# Game Engine
# ============================================================================

class GameEngine:
    """
    Minesweeper game engine.

    Owns one board for the lifetime of a game. The first reveal (or
    chord) starts the game: mines are placed around the clicked cell by
    the generator and the result is checked before play begins. WON and
    LOST are terminal; any mutating call after that raises.

    Not thread-safe: callers sharing an engine must serialize access.
    """

    def __init__(
        self,
        board: Board,
        generator: Optional[MapGenerator] = None,
        question_marks_enabled: bool = True,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the engine.

        Args:
            board: Empty board to play on.
            generator: Mine placement strategy (default: random).
            question_marks_enabled: Whether cycle_mark passes through a
                question mark.
            clock: Returns the current time in seconds.
        """
        self.board = board
        self.generator = generator or RandomMapGenerator()
        self.question_marks_enabled = question_marks_enabled
        self._clock = clock
        self._state = GameState.READY
        self._first_click_pending = True
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None
        self._flagged_mines_count = 0

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        generator: Optional[MapGenerator] = None,
        clock: Callable[[], float] = time.time,
    ) -> "GameEngine":
        """Create an engine with a fresh board for a configuration."""
        return cls(
            Board.from_config(config),
            generator=generator,
            question_marks_enabled=config.question_marks,
            clock=clock,
        )

    # ========================================================================
    # Game Setup
    # ========================================================================

    def start_game(self, row: int, col: int) -> None:
        """
        Start the game with a first click at the given position.

        Raises:
            InvalidStateError: If the game has already started.
            OutOfBoundsError: If the position is outside the board.
            GeneratorContractError: If the generator put a mine next to
                the first click or placed the wrong number of mines.
        """
        if self._state != GameState.READY or not self._first_click_pending:
            raise InvalidStateError("Game already started or not in READY state")
        self.board.get_cell(row, col)

        started_at = self._clock()
        self.generator.generate(self.board, row, col)
        self._verify_first_click_protection(row, col)
        self.board.calculate_numbers()

        self._start_time = started_at
        self._first_click_pending = False
        self._state = GameState.PLAYING
        logger.debug(
            "Game started at (%d, %d) on %dx%d board with %d mines",
            row, col, self.board.rows, self.board.cols, self.board.total_mines,
        )

    def _verify_first_click_protection(self, row: int, col: int) -> None:
        """Check the generator left the first click zone mine-free."""
        if self.board.get_cell(row, col).is_mine:
            logger.error("Generator placed a mine on the first click (%d, %d)", row, col)
            raise GeneratorContractError("First click position cannot be a mine")
        for neighbor_row, neighbor_col in self.board.neighbor_positions(row, col):
            if self.board.get_cell(neighbor_row, neighbor_col).is_mine:
                logger.error(
                    "Generator placed a mine at (%d, %d) next to the first click",
                    neighbor_row, neighbor_col,
                )
                raise GeneratorContractError("First click neighbor cannot be a mine")
        placed = self.board.mine_count()
        if placed != self.board.total_mines:
            logger.error(
                "Generator placed %d mines, expected %d",
                placed, self.board.total_mines,
            )
            raise GeneratorContractError(
                f"Generator placed {placed} mines, expected {self.board.total_mines}"
            )

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        Starts the game on the first interaction. Blank cells open their
        whole zero region; a mine ends the game.

        Returns:
            True if anything was revealed, False if the cell was already
            revealed or is flagged.

        Raises:
            InvalidStateError: If the game is over.
            OutOfBoundsError: If the position is outside the board.
        """
        if self._first_click_pending:
            self.start_game(row, col)
        self._require_playing()

        cell = self.board.get_cell(row, col)
        if cell.is_revealed or cell.is_flagged:
            return False

        if cell.is_mine:
            cell.reveal()
            self.board.increment_revealed_count()
            self._finish(GameState.LOST)
            return True

        if cell.neighbor_mine_count == 0:
            self._flood_fill(row, col)
        else:
            cell.reveal()
            self.board.increment_revealed_count()

        if self._check_win():
            self._finish(GameState.WON)
        return True

    def _flood_fill(self, row: int, col: int) -> None:
        """Reveal the zero region containing a position and its border."""
        queue: Deque[Tuple[int, int]] = deque([(row, col)])
        opened = 0
        while queue:
            current_row, current_col = queue.popleft()
            cell = self.board.get_cell(current_row, current_col)
            # Re-enqueued positions are skipped once revealed
            if cell.is_revealed or cell.is_flagged:
                continue

            cell.reveal()
            self.board.increment_revealed_count()
            opened += 1

            if cell.neighbor_mine_count != 0:
                continue
            for neighbor_row, neighbor_col in self.board.neighbor_positions(
                current_row, current_col
            ):
                neighbor = self.board.get_cell(neighbor_row, neighbor_col)
                if not neighbor.is_revealed and not neighbor.is_flagged:
                    queue.append((neighbor_row, neighbor_col))
        logger.debug("Flood fill from (%d, %d) opened %d cells", row, col, opened)

    def _check_win(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return self.board.revealed_count == self.board.safe_cells

    def cycle_mark(self, row: int, col: int) -> MarkState:
        """
        Advance the mark on a hidden cell.

        Uses the three-state cycle when question marks are enabled,
        otherwise toggles the flag.

        Returns:
            The new mark state.

        Raises:
            InvalidStateError: If the game is not in progress or the cell
                is revealed.
            OutOfBoundsError: If the position is outside the board.
        """
        return self._mark(row, col, self.question_marks_enabled)

    def toggle_flag(self, row: int, col: int) -> MarkState:
        """Toggle a flag on a hidden cell, ignoring question marks."""
        return self._mark(row, col, False)

    def _mark(self, row: int, col: int, question_enabled: bool) -> MarkState:
        self._require_playing()
        cell = self.board.get_cell(row, col)
        if cell.is_revealed:
            raise InvalidStateError("Cannot mark revealed cell")

        was_flagged = cell.is_flagged
        mark = cell.cycle_mark(question_enabled)

        if not was_flagged and cell.is_flagged:
            self.board.increment_flagged_count()
            self._flagged_mines_count += 1
        elif was_flagged and not cell.is_flagged:
            self.board.decrement_flagged_count()
            self._flagged_mines_count -= 1
        logger.debug("Cell (%d, %d) marked %s", row, col, mark.name)
        return mark

    def chord(self, row: int, col: int) -> bool:
        """
        Chord action: reveal all unflagged neighbors if flag count matches.

        Nothing happens unless the number of flagged neighbors equals
        the cell's number. Neighbors are opened through reveal(), so a
        wrong flag can lose the game; the chord stops as soon as the
        game ends.

        Returns:
            True if at least one neighbor was revealed.

        Raises:
            InvalidStateError: If the game is not in progress, or the
                target is hidden or a mine.
            OutOfBoundsError: If the position is outside the board.
        """
        if self._first_click_pending:
            self.start_game(row, col)
        self._require_playing()

        target = self.board.get_cell(row, col)
        if not target.is_revealed:
            raise InvalidStateError("Target cell must be revealed")
        if target.is_mine:
            raise InvalidStateError("Target cell cannot be a mine")

        flag_count = sum(
            1 for neighbor in self.board.get_neighbors(row, col)
            if neighbor.is_flagged
        )
        if flag_count != target.neighbor_mine_count:
            logger.debug(
                "Chord at (%d, %d) ignored: %d flags for number %d",
                row, col, flag_count, target.neighbor_mine_count,
            )
            return False

        revealed_any = False
        for neighbor_row, neighbor_col in self.board.neighbor_positions(row, col):
            neighbor = self.board.get_cell(neighbor_row, neighbor_col)
            if neighbor.is_revealed or neighbor.is_flagged:
                continue
            if self.reveal(neighbor_row, neighbor_col):
                revealed_any = True
            if self._state.is_finished:
                return True
        return revealed_any

    # ========================================================================
    # State Transitions
    # ========================================================================

    def _require_playing(self) -> None:
        if self._state != GameState.PLAYING:
            raise InvalidStateError(
                f"Game is not in PLAYING state ({self._state.name})"
            )

    def _finish(self, state: GameState) -> None:
        self._end_time = self._clock()
        self._state = state
        logger.info(
            "Game %s after %d ms with %d cells revealed",
            state.name, self.elapsed_millis(), self.board.revealed_count,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

    @property
    def first_click_pending(self) -> bool:
        return self._first_click_pending

    @property
    def flagged_mines_count(self) -> int:
        """Number of flags currently placed."""
        return self._flagged_mines_count

    @property
    def remaining_mines(self) -> int:
        """Mines left to flag; negative when more flags than mines."""
        return self.board.total_mines - self._flagged_mines_count

    def elapsed_millis(self) -> int:
        """
        Get the game time in milliseconds.

        Returns:
            0 before the first click, the final duration once the game is
            over, and the time since the first click otherwise.
        """
        if self._state == GameState.READY:
            return 0
        end = self._end_time if self._state.is_finished else self._clock()
        return max(0, int((end - self._start_time) * 1000))

    def get_game_result(self) -> GameResult:
        """
        Build the result of a finished game.

        Raises:
            InvalidStateError: If the game is not over.
        """
        if not self._state.is_finished:
            raise InvalidStateError("Game is not finished")
        remaining = self.board.total_mines - self.board.flagged_count
        factory = GameResult.victory if self._state == GameState.WON else GameResult.defeat
        return factory(self.elapsed_millis(), remaining, self.board.revealed_count)
