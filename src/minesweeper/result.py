"""
Result of a finished Minesweeper game.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class GameResult:
    """
    Immutable snapshot of a won or lost game.

    Attributes:
        is_win: Whether the game was won.
        duration_millis: Time from first click to game end.
        remaining_mines: Total mines minus flags placed.
        total_revealed: Cells revealed when the game ended.
    """

    is_win: bool
    duration_millis: int
    remaining_mines: int
    total_revealed: int

    @classmethod
    def victory(
        cls, duration_millis: int, remaining_mines: int, total_revealed: int
    ) -> "GameResult":
        return cls(True, duration_millis, remaining_mines, total_revealed)

    @classmethod
    def defeat(
        cls, duration_millis: int, remaining_mines: int, total_revealed: int
    ) -> "GameResult":
        return cls(False, duration_millis, remaining_mines, total_revealed)

    def __str__(self) -> str:
        outcome = "WIN" if self.is_win else "LOSS"
        seconds = self.duration_millis / 1000.0
        return (
            f"GameResult[{outcome}, time={seconds:.1f}s, "
            f"revealed={self.total_revealed}]"
        )
