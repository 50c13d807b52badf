"""Configuration record and resolver for SimpleADB.

Resolution is fail-soft: unknown keys are ignored and invalid values fall back
to their defaults, so constructing a client never fails because of its
options. Loading a configuration *file* is strict about the file itself
(existence, extension, top-level object) and then hands the contents to the
same fail-soft resolver.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import jsonschema
import yaml

DEFAULT_ADB_PATH = "adb"

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be used at all."""


@dataclass(frozen=True)
class SimpleADBConfig:
    path: str = DEFAULT_ADB_PATH
    serial: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


RECOGNIZED_OPTIONS = tuple(f.name for f in fields(SimpleADBConfig))


def _schema_path() -> Path:
    # simple_adb/config.py → simple_adb/schemas/config.schema.json
    return Path(__file__).resolve().parent / "schemas" / "config.schema.json"


@lru_cache(maxsize=1)
def _load_schema() -> dict[str, Any]:
    schema_path = _schema_path()
    data = json.loads(schema_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ConfigError(f"schema must be an object: {schema_path}")
    jsonschema.Draft202012Validator.check_schema(data)
    return data


def _invalid_options(options: Mapping[str, Any]) -> Dict[str, str]:
    """Return {option: message} for every recognized option failing the schema."""

    validator = jsonschema.Draft202012Validator(_load_schema())
    invalid: Dict[str, str] = {}
    for err in sorted(validator.iter_errors(dict(options)), key=lambda e: list(e.path)):
        if not err.path:
            continue
        key = str(err.path[0])
        invalid.setdefault(key, err.message)
    return invalid


def resolve_config(options: Any = None, *, log: Any = None) -> SimpleADBConfig:
    """Produce a fully populated SimpleADBConfig from optional user options.

    Accepts None, an existing SimpleADBConfig or a mapping. Never raises on
    bad input; problems are reported through ``log`` (module logger by default).
    """

    log = log if log is not None else logger

    if options is None:
        return SimpleADBConfig()
    if isinstance(options, SimpleADBConfig):
        invalid = _invalid_options(options.to_dict())
        if not invalid:
            return options
        defaults = SimpleADBConfig()
        for key, message in invalid.items():
            log.warning("invalid configuration value for %r (%s); using default", key, message)
        return replace(options, **{k: getattr(defaults, k) for k in invalid})
    if not isinstance(options, Mapping):
        log.warning(
            "ignoring configuration of type %s; using defaults", type(options).__name__
        )
        return SimpleADBConfig()

    unknown = sorted(str(k) for k in options if k not in RECOGNIZED_OPTIONS)
    if unknown:
        log.debug("ignoring unknown configuration keys: %s", ", ".join(unknown))

    known = {k: options[k] for k in RECOGNIZED_OPTIONS if k in options}
    for key, message in _invalid_options(known).items():
        log.warning("invalid configuration value for %r (%s); using default", key, message)
        known.pop(key, None)

    return SimpleADBConfig(**known)


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """Load a YAML/JSON configuration file into a dict.

    The top level must be an object. An empty YAML file counts as an empty
    configuration.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise ValueError(f"Unsupported config file extension: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e

    if suffix in {".yaml", ".yml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {path}: {e}") from e
        if data is None:
            data = {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Top-level config must be an object: {path}")
    return data
