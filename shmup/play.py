"""
Play the shoot-em-up in a window, or run headless random episodes
"""

import argparse
import logging
from typing import Optional

import numpy as np

from shmup.configs.shmup_config import GAME_CONFIG, ENV_CONFIG
from shmup.game import Simulation, run_random_episode


def play(width: int, height: int):
    """Open the game window"""
    # imported here so headless runs never need a display
    from shmup.game.window import run_window

    sim = Simulation(**{**GAME_CONFIG, "width": width, "height": height})
    run_window(sim)


def run_headless(n_episodes: int = 10, seed: Optional[int] = None, **env_config):
    """
    Run random-action episodes without a window and summarize them
    """
    print("Running random headless episodes...")

    episode_returns = []
    episode_lengths = []
    episode_hits = []

    for episode in range(n_episodes):
        result = run_random_episode(
            seed=seed + episode if seed is not None else None,
            **{**ENV_CONFIG, **env_config},
        )
        episode_returns.append(result["return"])
        episode_lengths.append(result["length"])
        episode_hits.append(result["hit_count"])

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Return = {result['return']:.2f}, Length = {result['length']}, "
              f"Hits = {result['hit_count']}")

    print("\n" + "=" * 50)
    print(f"Results ({n_episodes} episodes):")
    print(f"Mean Return: {np.mean(episode_returns):.2f} ± {np.std(episode_returns):.2f}")
    print(f"Mean Episode Length: {np.mean(episode_lengths):.1f}")
    print(f"Mean Hits: {np.mean(episode_hits):.2f}")
    print("=" * 50)

    return {
        "mean_return": float(np.mean(episode_returns)),
        "mean_length": float(np.mean(episode_lengths)),
        "mean_hits": float(np.mean(episode_hits)),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Parallax shoot-em-up")
    parser.add_argument(
        "--width",
        type=int,
        default=GAME_CONFIG["width"],
        help=f"Arena width in pixels (default: {GAME_CONFIG['width']})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=GAME_CONFIG["height"],
        help=f"Arena height in pixels (default: {GAME_CONFIG['height']})",
    )
    parser.add_argument(
        "--headless",
        type=int,
        default=0,
        metavar="N",
        help="Run N random-action episodes without a window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for headless episodes",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.headless > 0:
        run_headless(args.headless, args.seed, width=args.width, height=args.height)
        return
    play(args.width, args.height)


if __name__ == "__main__":
    main()
