"""Command line entry point: inspect the labeling configuration resolved from the environment."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import config
from .settings import ConfigurationError, load_settings


def _setup_logging(log_level: str):
    """Setup logging configuration"""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bulk labeling configuration")
    parser.add_argument(
        "command",
        nargs="?",
        default="show",
        choices=["show", "keys"],
        help="show: print resolved settings as JSON; keys: list environment keys",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.log_level)

    if args.command == "keys":
        for key in config.ENV_KEYS:
            print(key)
        return 0

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    print(json.dumps(settings.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
