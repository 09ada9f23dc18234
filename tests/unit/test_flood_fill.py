"""
Unit tests for flood-fill reveal.

Uses the fixed 9x9 layout opened at (8, 8), whose top rows hold a
large zero region.
"""
from typing import Set, Tuple

import pytest
from minesweeper import GameEngine, GameState, MarkState

from conftest import CHORD_MINES, count_revealed, make_engine


def revealed_positions(engine: GameEngine) -> Set[Tuple[int, int]]:
    """Collect the positions of all revealed cells."""
    board = engine.board
    return {pos for pos in board.positions() if board.get_cell(*pos).is_revealed}


def opened_from(position: Tuple[int, int]) -> Set[Tuple[int, int]]:
    """Reveal a position on a fresh board and return what it opened."""
    engine = make_engine(9, 9, CHORD_MINES)
    engine.reveal(8, 8)
    before = revealed_positions(engine)
    engine.reveal(*position)
    return revealed_positions(engine) - before


# ============================================================================
# Cascade Tests
# ============================================================================

class TestCascade:
    """Test the breadth-first reveal of zero regions."""

    def test_first_click_opens_corner(self, chord_engine: GameEngine) -> None:
        """Opening (8, 8) reveals it and its three numbered neighbors."""
        assert revealed_positions(chord_engine) == {
            (7, 7), (7, 8), (8, 7), (8, 8)
        }
        assert chord_engine.board.get_cell(7, 7).neighbor_mine_count == 5
        assert chord_engine.board.get_cell(7, 8).neighbor_mine_count == 2

    def test_region_is_closed(self, chord_engine: GameEngine) -> None:
        """Every revealed zero cell has all of its neighbors revealed."""
        chord_engine.reveal(0, 8)
        board = chord_engine.board
        for row, col in revealed_positions(chord_engine):
            cell = board.get_cell(row, col)
            if cell.neighbor_mine_count == 0:
                for neighbor in board.get_neighbors(row, col):
                    assert neighbor.is_revealed

    def test_region_never_reveals_mines(self, chord_engine: GameEngine) -> None:
        """Flood fill stops at numbered cells and never opens a mine."""
        chord_engine.reveal(0, 8)
        board = chord_engine.board
        assert all(
            not board.get_cell(*pos).is_mine
            for pos in revealed_positions(chord_engine)
        )
        assert chord_engine.state == GameState.PLAYING

    def test_counter_matches_cells(self, chord_engine: GameEngine) -> None:
        """The revealed counter tracks the cascade exactly."""
        chord_engine.reveal(0, 8)
        assert chord_engine.board.revealed_count == count_revealed(
            chord_engine.board
        )

    def test_reveal_again_is_noop(self, chord_engine: GameEngine) -> None:
        """Re-opening a revealed zero cell changes nothing."""
        chord_engine.reveal(0, 8)
        count = chord_engine.board.revealed_count
        assert chord_engine.reveal(0, 8) is False
        assert chord_engine.reveal(0, 4) is False
        assert chord_engine.board.revealed_count == count

    def test_same_region_from_any_blank_cell(self) -> None:
        """Any blank cell of a region opens exactly the same set."""
        region = opened_from((0, 8))
        engine = make_engine(9, 9, CHORD_MINES)
        engine.reveal(8, 8)
        blanks = [
            pos for pos in region
            if engine.board.get_cell(*pos).neighbor_mine_count == 0
        ]
        assert len(blanks) > 1
        for blank in blanks:
            assert opened_from(blank) == region


# ============================================================================
# Mark Interaction Tests
# ============================================================================

class TestFloodFillMarks:
    """Flags block the cascade, question marks do not."""

    def test_flagged_cell_survives_cascade(
        self, chord_engine: GameEngine
    ) -> None:
        """A flagged cell inside a zero region stays hidden and flagged."""
        chord_engine.toggle_flag(1, 8)
        chord_engine.reveal(0, 8)
        cell = chord_engine.board.get_cell(1, 8)
        assert cell.is_revealed is False
        assert cell.is_flagged is True
        assert chord_engine.board.flagged_count == 1

    def test_questioned_cell_is_opened(self, chord_engine: GameEngine) -> None:
        """A questioned cell inside a zero region is revealed and cleared."""
        chord_engine.cycle_mark(0, 7)
        chord_engine.cycle_mark(0, 7)
        assert chord_engine.board.get_cell(0, 7).is_questioned

        chord_engine.reveal(0, 8)
        cell = chord_engine.board.get_cell(0, 7)
        assert cell.is_revealed is True
        assert cell.mark_state == MarkState.NONE

    @pytest.mark.parametrize("question_marks", [True, False])
    def test_whole_board_cascade_wins(self, question_marks: bool) -> None:
        """A mine-free board is won by its first click."""
        engine = make_engine(5, 7, [], question_marks=question_marks)
        engine.reveal(2, 3)
        assert engine.board.revealed_count == 35
        assert engine.state == GameState.WON
