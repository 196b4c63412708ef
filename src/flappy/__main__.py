"""
__main__.py: Command-line entry point. Parses options, sets up logging, starts the client.
"""

import argparse
import logging

from .constants import DB_FILE, FPS
from .client import FlappyClient


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="flappy", description="Single-player Flappy Bird.")
    p.add_argument("--db", default=DB_FILE,
                   help="SQLite file holding the best score. Pass an empty string to play without saving.")
    p.add_argument("--fps", type=int, default=FPS,
                   help="Frames (and simulation ticks) per second.")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for pipe gaps and clouds. Omit for a random game.")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    FlappyClient(db_file=args.db, fps=args.fps, seed=args.seed).run()


if __name__ == "__main__":
    main()
