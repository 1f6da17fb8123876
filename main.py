"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from application.use_cases import EXIT_CONFIG
from config import Settings
from core.errors import ConfigurationError
from core.logging.config import bootstrap_logging, shutdown_logging
from presentation.cli import UpdateCommand

_RED = "\033[91m"
_RESET = "\033[0m"

# argparse dest → Settings attribute
_OVERRIDES = {
    "platform": "PLATFORM",
    "region": "REGION",
    "seed_players": "SEED_PLAYERS",
    "count_per": "COUNT_PER",
    "min_sample": "MIN_SAMPLE",
    "top_n": "TOP_N",
    "output": "OUTPUT_PATH",
    "log_level": "LOG_LEVEL",
}


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tft-comp-stats",
        description="Harvest recent high-ladder TFT matches and publish ranked team compositions.",
    )
    p.add_argument("--platform", help="platform code or name, e.g. na1, euw1, kr")
    p.add_argument("--region", help="regional route (americas, europe, asia, sea)")
    p.add_argument("--seed-players", type=int, help="number of ladder players to sample")
    p.add_argument("--count-per", type=int, help="recent matches listed per player")
    p.add_argument("--min-sample", type=int, help="minimum games for a composition to be ranked")
    p.add_argument("--top-n", type=int, help="maximum compositions published")
    p.add_argument("--output", type=Path, help="path of the published JSON document")
    p.add_argument("--log-level", help="TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR")
    return p


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied, validated."""
    settings = Settings()
    for dest, attr in _OVERRIDES.items():
        value = getattr(args, dest, None)
        if value is None:
            continue
        if isinstance(value, str) and attr in ("PLATFORM", "REGION"):
            value = value.strip().lower()
        setattr(settings, attr, value)
    settings.validate()
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    try:
        settings = load_settings(args)
    except ConfigurationError as exc:
        print(f"{_RED}Configuration error:{_RESET} {exc}", file=sys.stderr)
        return EXIT_CONFIG

    bootstrap_logging(
        service="harvester",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="harvester.jsonl",
    )
    try:
        result = asyncio.run(UpdateCommand(settings).run())
        return result.exit_code
    finally:
        shutdown_logging()


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
