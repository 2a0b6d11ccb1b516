#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--dimension N] [--mines M] [--seed S]
    python main.py simulate [--games N] [--dimension N] [--mines M]
"""
import argparse
import logging

from src.sweeper.agent import RandomAgent, evaluate_agent
from src.sweeper.console import parse_move, render_board
from src.sweeper.engine import GameEngine
from src.sweeper.errors import InvalidCell, InvalidCommand, InvalidConfiguration
from src.sweeper.layout import BoardConfig


def read_mine_count() -> int:
    """Ask for the mine count until an integer is entered."""
    while True:
        answer = input("How many mines do you want on the field? ")
        try:
            return int(answer)
        except ValueError:
            print(f"Not a number: {answer!r}")


def play(args: argparse.Namespace) -> None:
    """Play one game interactively."""
    mines = args.mines if args.mines is not None else read_mine_count()
    try:
        config = BoardConfig(dimension=args.dimension, num_mines=mines)
    except InvalidConfiguration as e:
        print(e)
        return

    engine = GameEngine(config, seed=args.seed)
    print(render_board(engine))

    while engine.is_playing:
        try:
            line = input("Set/delete mine marks (x and y coordinates): ")
        except EOFError:
            print()
            return
        try:
            index, kind = parse_move(line, engine.dimension)
        except (InvalidCommand, InvalidCell) as e:
            print(e)
            continue

        engine.apply_move(index, kind)
        print(render_board(engine))

    print(engine.message)


def simulate(args: argparse.Namespace) -> None:
    """Evaluate the random baseline and print results."""
    config = BoardConfig(dimension=args.dimension, num_mines=args.mines)
    agent = RandomAgent(config.total_cells, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluate_agent(agent, config, num_episodes=args.games, seed=args.seed)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play in the terminal or run a baseline"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--dimension", type=int, default=9, help="Board side length"
    )
    play_parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines (asked if omitted)"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )

    # Simulate command
    simulate_parser = subparsers.add_parser(
        "simulate", help="Evaluate a random agent"
    )
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--dimension", type=int, default=9, help="Board side length"
    )
    simulate_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    simulate_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )
    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "simulate":
        simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
