#!/usr/bin/env python3
"""
Emoji catalogue tasks.

Usage:
    bk-emoji              # README tables (same as `bk-emoji tables`)
    bk-emoji validate     # check aliases and Buildkite images
    EMOJI_JSON=emoji.json bk-emoji generate > img-apple-64.json
    bk-emoji random
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from colorama import just_fix_windows_console

from . import config
from .catalogue import load_all
from .convert import convert, to_json
from .errors import DataIntegrityError, EmojiError, ParseError
from .images import ImageProbe
from .picker import pick_random
from .tables import render
from .validate import report, validate

logger = logging.getLogger(__name__)


def tables_task(directory: Path) -> None:
    """Generate readme emoji tables"""
    sys.stdout.write(render(load_all(directory)))


def validate_task(directory: Path) -> None:
    """Validate emoji aliases and images"""
    emoji = load_all(directory)
    result = validate(emoji, ImageProbe(directory))
    report(result)


def generate_task(directory: Path) -> None:
    """Generate Apple emoji JSON from emoji-data"""
    path = config.emoji_json_path()
    logger.info(f"Reading emoji-data from {path}")

    try:
        with open(path, encoding="utf-8") as f:
            parsed = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"{path}: invalid JSON: {e}") from e
    except OSError as e:
        raise DataIntegrityError(f"Could not read {path}: {e}") from e

    print(to_json(convert(parsed)))


def random_task(directory: Path) -> None:
    """Pick a random emoji"""
    print(pick_random(load_all(directory)))


TASKS = {
    "tables": tables_task,
    "validate": validate_task,
    "generate": generate_task,
    "random": random_task,
}
DEFAULT_TASK = "tables"


def build_parser() -> argparse.ArgumentParser:
    task_help = "\n".join(f"  {name:<10} {task.__doc__}" for name, task in TASKS.items())
    parser = argparse.ArgumentParser(
        prog="bk-emoji",
        description="Buildkite emoji catalogue tasks",
        epilog=f"tasks:\n{task_help}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("task", nargs="?", default=DEFAULT_TASK, choices=TASKS,
                        help=f"Task to run (default: {DEFAULT_TASK})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log progress to stderr")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    directory = config.catalogue_dir()
    config.load_env_file(directory)

    logging.basicConfig(
        level=config.log_level(args.verbose),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    just_fix_windows_console()

    try:
        TASKS[args.task](directory)
    except EmojiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
