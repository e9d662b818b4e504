from __future__ import annotations

import argparse
import logging

from . import config


def _positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chase-snake", add_help=True)
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for fruit placement (default: clock).")
    parser.add_argument("--fps", type=_positive_int, default=config.FPS, help="Frame rate cap.")
    parser.add_argument("--width", type=_positive_int, default=config.WIDTH, help="Window width in pixels.")
    parser.add_argument("--height", type=_positive_int, default=config.HEIGHT, help="Window height in pixels.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    from .game import run

    run(seed=args.seed, fps=args.fps, width=args.width, height=args.height)


if __name__ == "__main__":
    main()
