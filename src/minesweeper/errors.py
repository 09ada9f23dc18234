"""
Exceptions raised by the Minesweeper engine.

Callers can tell bad coordinates apart from calls made in the wrong
game state, and both apart from a broken map generator.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(MinesweeperError, ValueError):
    """Raised when a board or configuration is built from invalid values."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """Raised when coordinates fall outside the board."""


class InvalidStateError(MinesweeperError, RuntimeError):
    """Raised when an operation is not allowed in the current state."""


class GeneratorContractError(InvalidStateError):
    """Raised when a map generator places mines it was not allowed to."""
