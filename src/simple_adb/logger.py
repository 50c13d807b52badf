"""Logger provider for SimpleADB instances."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, runtime_checkable

LOGGER_NAME = "simple_adb"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


@runtime_checkable
class LoggerLike(Protocol):
    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...


def default_logger(*, serial: Optional[str] = None) -> logging.LoggerAdapter:
    """Return a new adapter over the shared ``simple_adb.device`` logger.

    Each call builds its own ``extra`` mapping, so two instances never see
    each other's context.
    """

    base = logging.getLogger(f"{LOGGER_NAME}.device")
    return logging.LoggerAdapter(base, {"serial": serial})


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = int(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
