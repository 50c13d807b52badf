"""SimpleADB: a configured handle on an adb executable.

The instance only resolves its configuration and carries a logger; it does not
talk to devices. ``base_command()`` exposes the argv prefix that callers
building adb invocations should start from.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from simple_adb.config import SimpleADBConfig, load_config_file, resolve_config
from simple_adb.logger import LoggerLike, default_logger


class SimpleADB:
    """Holds a resolved adb configuration and a logger.

    An injected logger must provide the ``LoggerLike`` methods; anything else is
    replaced by a default logger so construction still succeeds.
    """

    def __init__(
        self,
        config: SimpleADBConfig | Dict[str, Any] | None = None,
        *,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        rejected = None
        if logger is not None and not isinstance(logger, LoggerLike):
            rejected, logger = logger, None
        if logger is None:
            self._config = resolve_config(config)
            logger = default_logger(serial=self._config.serial)
            if rejected is not None:
                logger.warning(
                    "injected logger of type %s lacks logging methods; using default",
                    type(rejected).__name__,
                )
        else:
            self._config = resolve_config(config, log=logger)
        self.logger = logger
        self.logger.debug(
            "SimpleADB configured: path=%s serial=%s", self._config.path, self._config.serial
        )

    @classmethod
    def from_file(cls, path: str | Path, *, logger: Optional[LoggerLike] = None) -> "SimpleADB":
        return cls(load_config_file(path), logger=logger)

    @property
    def config(self) -> SimpleADBConfig:
        return self._config

    @property
    def configuration(self) -> Dict[str, Any]:
        return self._config.to_dict()

    @property
    def path(self) -> str:
        return self._config.path

    @property
    def serial(self) -> Optional[str]:
        return self._config.serial

    def base_command(self) -> list[str]:
        cmd = [self._config.path]
        if self._config.serial:
            cmd += ["-s", self._config.serial]
        return cmd

    def __repr__(self) -> str:
        return f"SimpleADB(path={self._config.path!r}, serial={self._config.serial!r})"
