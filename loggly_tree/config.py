"""Configuration loaded from a YAML file and environment variables."""

import logging
import os
from dataclasses import dataclass

import yaml

from loggly_tree.client import DEFAULT_ENDPOINT, ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    token: str = ""
    endpoint: str = DEFAULT_ENDPOINT
    tags: str = ""
    timeout: float = 10.0
    max_workers: int = 2


_FIELD_TYPES = {
    "token": str,
    "endpoint": str,
    "tags": str,
    "timeout": float,
    "max_workers": int,
}

_ENV_VARS = {
    "token": "LOGGLY_TOKEN",
    "endpoint": "LOGGLY_ENDPOINT",
    "tags": "LOGGLY_TAGS",
    "timeout": "LOGGLY_TIMEOUT",
    "max_workers": "LOGGLY_MAX_WORKERS",
}


def _read_yaml(path: str) -> dict:
    """Return the ``loggly`` section of a YAML file, or {} if unusable."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s, using defaults: %s", path, e)
        return {}

    if not isinstance(data, dict):
        return {}
    section = data.get("loggly", {})
    return section if isinstance(section, dict) else {}


def _convert(key: str, value) -> object:
    if isinstance(value, list):
        value = ",".join(str(v) for v in value)
    try:
        return _FIELD_TYPES[key](value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value for {key}: {value!r}") from e


def load_config(path: str | None = None) -> Config:
    """Build Config from defaults <- YAML file <- env vars (highest priority)."""
    if path is None:
        path = os.environ.get("LOGGLY_CONFIG")

    kwargs: dict = {}
    if path:
        for key, value in _read_yaml(path).items():
            if key not in _FIELD_TYPES:
                logger.warning("Ignoring unknown config key %r in %s", key, path)
                continue
            if value is not None:
                kwargs[key] = _convert(key, value)

    for key, env_name in _ENV_VARS.items():
        if env_name in os.environ:
            kwargs[key] = _convert(key, os.environ[env_name])

    return Config(**kwargs)
