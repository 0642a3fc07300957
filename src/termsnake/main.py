# main.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .config import Config
from .controls import FrontendError

log = logging.getLogger("termsnake")


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="termsnake", description="Play Snake in the terminal.")
    parser.add_argument("--window", action="store_true", help="Play in a pygame window instead of the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for food placement.")
    parser.add_argument("--log-file", type=str, default=None, help="Write a log here (the terminal is busy drawing).")
    parser.add_argument(
        "--log-level", type=str.upper, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level for --log-file.",
    )
    args = parser.parse_args(argv)
    return Config(
        seed=args.seed,
        frontend="window" if args.window else "terminal",
        log_file=args.log_file,
        log_level=args.log_level,
    )


def setup_logging(config: Config) -> None:
    """Log to a file when asked; otherwise stay silent so nothing lands on the game screen."""
    root = logging.getLogger()
    if config.log_file is None:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(config.log_file)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(config.log_level)


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    setup_logging(config)

    if config.frontend == "window":
        from .window import play
    else:
        from .terminal import play

    try:
        ticks = play(config)
    except FrontendError as exc:
        log.error("%s", exc)
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        log.info("interrupted")
        return 130
    log.info("session ended after %d ticks", ticks)
    return 0


if __name__ == "__main__":
    sys.exit(main())
