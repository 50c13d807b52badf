"""Command line entry point that prints a resolved SimpleADB configuration."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml

from simple_adb.client import SimpleADB
from simple_adb.config import ConfigError, load_config_file
from simple_adb.logger import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve a SimpleADB configuration and print it."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML/JSON configuration file.",
    )
    parser.add_argument(
        "--path",
        type=str,
        default=os.environ.get("SIMPLE_ADB_PATH"),
        help="adb executable (overrides the config file; env: SIMPLE_ADB_PATH).",
    )
    parser.add_argument(
        "--serial",
        type=str,
        default=os.environ.get("SIMPLE_ADB_SERIAL"),
        help="Device serial (overrides the config file; env: SIMPLE_ADB_SERIAL).",
    )
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format.",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="WARNING",
        help="Logging level (e.g., DEBUG, INFO, WARNING).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    options: Dict[str, Any] = {}
    if args.config is not None:
        try:
            options.update(load_config_file(args.config))
        except (FileNotFoundError, ValueError, ConfigError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        logger.info("loaded configuration from %s", args.config)

    if args.path is not None:
        options["path"] = args.path
    if args.serial is not None:
        options["serial"] = args.serial

    sadb = SimpleADB(options)
    out = dict(sadb.configuration)
    out["base_command"] = sadb.base_command()

    if args.format == "json":
        print(json.dumps(out, indent=2, sort_keys=True))
    else:
        print(yaml.safe_dump(out, sort_keys=False, allow_unicode=True).rstrip())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
