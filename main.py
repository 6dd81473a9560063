"""
main.py — Entry point.

Run with:
    python main.py [--seed N] [--log-level DEBUG]

Requires:
    pip install pygame
"""

import argparse
import logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake Duel: player vs AI on a wrap-around grid")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food, power-up, hazard and AI randomness",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from snakeduel.controller import GameController
    GameController(seed=args.seed).run()


if __name__ == "__main__":
    main()
