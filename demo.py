#!/usr/bin/env python3
"""Watch the random agent play the minefield."""
import time
import os

from src.minefield import MinesweeperEnv, Params
from src.agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, difficulty: str = "beginner", seed=None):
    """Run demo games with visualization."""
    params = Params.from_preset(difficulty)
    env = MinesweeperEnv(params=params, render_mode="ansi")
    agent = RandomAgent(params.width, params.height, seed=seed)

    print(f"Board: {params.width}x{params.height} with {params.mine_count} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            _, x, y = agent.action_to_position(action)

            obs, reward, done, _, info = env.step(action)
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())

            if done:
                if info["outcome"] == "VICTORY":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument(
        "--difficulty",
        choices=["beginner", "intermediate", "expert"],
        default="beginner",
        help="Difficulty preset",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, difficulty=args.difficulty, seed=args.seed)
