"""Process configuration resolved from the environment.

Settings are read exactly once, at process start, by the CLI layer.
Nothing below ``cli`` reads the environment directly.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DATA_FILE_ENV: str = "HEXACLI_FILE"
"""Environment variable selecting the data file path."""

LOG_LEVEL_ENV: str = "HEXACLI_LOG_LEVEL"
"""Environment variable selecting the logging level name."""

DEFAULT_DATA_FILE: str = "./data.txt"
DEFAULT_LOG_LEVEL: str = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved runtime settings."""

    data_file: str
    """Path of the line-delimited store."""

    log_level: str
    """Logging level name (``DEBUG``, ``INFO``, ...)."""


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    An empty variable is treated the same as an unset one.
    """
    env = os.environ if environ is None else environ
    data_file = env.get(DATA_FILE_ENV) or DEFAULT_DATA_FILE
    log_level = (env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    return Settings(data_file=data_file, log_level=log_level)
