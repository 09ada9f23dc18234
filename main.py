#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py simulate [--games N] [--rows R] [--cols C] [--mines M]
    python main.py simulate --preset expert --seed 7
"""
import argparse
import logging
import sys

from src.minesweeper import (
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    Evaluator,
    GameConfig,
    MinesweeperError,
    RandomPlayer,
)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Build the game configuration from a preset or explicit sizes."""
    if args.preset:
        return PRESETS[args.preset]
    return GameConfig(rows=args.rows, cols=args.cols, num_mines=args.mines)


def simulate(args: argparse.Namespace) -> int:
    """Play random games and print aggregate results."""
    try:
        config = build_config(args)
    except MinesweeperError as error:
        logger.error("Invalid board: %s", error)
        return 2

    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    player = RandomPlayer(seed=args.seed)

    print(
        f"Simulating {args.games} games on {config.rows}x{config.cols} "
        f"with {config.num_mines} mines..."
    )
    try:
        results = evaluator.evaluate(player)
    except MinesweeperError as error:
        logger.error("Simulation failed: %s", error)
        return 2

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")
    return 0


def main() -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Run automated games against the engine"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play games with a random player"
    )
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--preset", choices=sorted(PRESETS), help="Named board size"
    )
    simulate_parser.add_argument("--rows", type=int, default=9, help="Board rows")
    simulate_parser.add_argument("--cols", type=int, default=9, help="Board columns")
    simulate_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    simulate_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.command == "simulate":
        return simulate(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
