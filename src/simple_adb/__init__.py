"""simple-adb: a configured adb handle with a logger attached."""

from __future__ import annotations

from simple_adb.client import SimpleADB
from simple_adb.config import (
    DEFAULT_ADB_PATH,
    ConfigError,
    SimpleADBConfig,
    load_config_file,
    resolve_config,
)
from simple_adb.logger import LoggerLike, configure_logging, default_logger

__all__ = [
    "DEFAULT_ADB_PATH",
    "ConfigError",
    "LoggerLike",
    "SimpleADB",
    "SimpleADBConfig",
    "configure_logging",
    "default_logger",
    "load_config_file",
    "resolve_config",
]
