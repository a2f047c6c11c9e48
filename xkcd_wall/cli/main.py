#!/usr/bin/env python3
"""
xkcd-wall command line entry point.
Prints the wallpaper path on success; errors go to stderr with exit code 1.
"""

import argparse
import logging
import os
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..errors import ConfigError, WallpaperError
from ..pipeline.build_wallpaper import build_wallpaper
from ..repositories.config_repository import ConfigRepository, default_config_path

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xkcd-wall",
        description="Recolor an xkcd comic and center it on a solid wallpaper.",
    )
    parser.add_argument("-c", "--config", type=Path, default=default_config_path(),
                        help="Path to config.json")
    parser.add_argument("-t", "--type", dest="kind", default="today",
                        help="today, random, or <number>")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for palette and random comic selection")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser


def log_level(verbose: bool = False) -> int:
    """DEBUG with -v, else $XKCD_WALL_LOG_LEVEL (default INFO)."""
    if verbose:
        return logging.DEBUG
    name = os.getenv("XKCD_WALL_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"unknown XKCD_WALL_LOG_LEVEL: {name!r}")
    return level


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt='%H:%M:%S',
        stream=sys.stderr,
    )


def report(err: WallpaperError, default_stage: str) -> int:
    logger.debug("Pipeline failed", exc_info=err)
    print(f"Error: could not {err.stage or default_stage}: {err}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging(log_level(args.verbose))
        config = ConfigRepository(args.config).load()
    except WallpaperError as err:
        return report(err, "read config")

    try:
        target = build_wallpaper(config, args.kind, rng=random.Random(args.seed))
    except WallpaperError as err:
        return report(err, "create wallpaper")

    print(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
