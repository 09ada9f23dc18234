"""
Minesweeper game module.

Provides the game engine, board and cell model, map generators and a
Gymnasium environment for automated play.
"""
from .cell import Cell, MarkState
from .board import Board
from .config import GameConfig, BEGINNER, INTERMEDIATE, EXPERT
from .engine import GameEngine, GameState
from .environment import MinesweeperEnv
from .errors import (
    GeneratorContractError,
    InvalidArgumentError,
    InvalidStateError,
    MinesweeperError,
    OutOfBoundsError,
)
from .generator import FixedMapGenerator, MapGenerator, RandomMapGenerator
from .result import GameResult
from .simulation import Evaluator, RandomPlayer

__all__ = [
    "Cell",
    "MarkState",
    "Board",
    "GameConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "GameEngine",
    "GameState",
    "GameResult",
    "MapGenerator",
    "RandomMapGenerator",
    "FixedMapGenerator",
    "MinesweeperEnv",
    "Evaluator",
    "RandomPlayer",
    "MinesweeperError",
    "InvalidArgumentError",
    "OutOfBoundsError",
    "InvalidStateError",
    "GeneratorContractError",
]
