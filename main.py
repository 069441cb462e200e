#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}] [--seed N]
    python main.py evaluate [--difficulty ...] [--games N]
"""
import argparse
import logging
import time

from src.minefield import (
    Board,
    Defeat,
    GameController,
    InputSnapshot,
    MinesweeperEnv,
    Params,
    Paused,
    Victory,
    board_to_text,
)
from src.agents import RandomAgent

HELP = "Commands: u X Y (uncover), m X Y (mark), p (pause), c (confirm), r (reset), q (quit)"


def parse_command(line: str, controller: GameController, delta_ms: float):
    """
    Translate a typed command into an input snapshot.

    Returns None for commands that cannot be understood.
    """
    parts = line.split()
    if not parts:
        return InputSnapshot(delta_ms=delta_ms)

    command = parts[0].lower()
    if command in ("u", "m") and len(parts) == 3:
        try:
            x, y = int(parts[1]), int(parts[2])
        except ValueError:
            return None
        # Off-board coordinates map to no tile and are ignored
        pointer = controller.layout.tile_center(x, y)
        return InputSnapshot(
            pointer=pointer,
            primary=command == "u",
            secondary=command == "m",
            delta_ms=delta_ms,
        )
    if command == "p":
        return InputSnapshot(pause=True, delta_ms=delta_ms)
    if command == "c":
        return InputSnapshot(confirm=True, delta_ms=delta_ms)
    if command == "r":
        return InputSnapshot(reset=True, delta_ms=delta_ms)
    return None


def show(controller: GameController) -> None:
    """Print the board and status line for the current stage."""
    board = controller.board
    stage = controller.stage

    if isinstance(stage, Paused):
        print("\n*** PAUSED (c to continue) ***")
        return

    print()
    print(board_to_text(board, reveal_mines=isinstance(stage, (Defeat, Victory))))
    print(
        f"Flags: {board.flags()}/{board.mines()} | "
        f"Time: {controller.run_timer_ms / 1000:.1f}s"
    )
    if isinstance(stage, Defeat):
        print(f"*** BOOM at {stage.trigger} (r to reset) ***")
    elif isinstance(stage, Victory):
        print("*** VICTORY! (r to reset) ***")


def play(args: argparse.Namespace) -> None:
    """Run an interactive game in the terminal."""
    params = Params.from_preset(args.difficulty)
    controller = GameController(board=Board(params, seed=args.seed))

    print(f"{args.difficulty.title()}: {params.width}x{params.height}, {params.mine_count} mines")
    print(HELP)
    show(controller)

    last = time.monotonic()
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip().lower() == "q":
            break

        now = time.monotonic()
        snapshot = parse_command(line, controller, (now - last) * 1000)
        last = now

        if snapshot is None:
            print(HELP)
            continue

        controller.tick(snapshot)
        show(controller)


def evaluate(args: argparse.Namespace) -> None:
    """Report how the random agent fares."""
    params = Params.from_preset(args.difficulty)
    env = MinesweeperEnv(params=params)
    agent = RandomAgent(params.width, params.height, seed=args.seed)

    wins = 0
    total_steps = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        done = False
        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, reward, done, _, info = env.step(action)
        total_steps += info["steps"]
        if info["outcome"] == "VICTORY":
            wins += 1

    print(f"Results for Random on {args.difficulty}:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minefield - terminal minesweeper")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate the random agent")

    for sub in (play_parser, eval_parser):
        sub.add_argument(
            "--difficulty",
            choices=["beginner", "intermediate", "expert"],
            default="beginner",
            help="Difficulty preset",
        )
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
