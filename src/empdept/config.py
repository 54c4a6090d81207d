"""Configuration utilities for EMPDEPT.

This module centralizes small helpers and constants related to application
configuration: environment variable names, the default flight-recorder
location and default levels for third-party loggers.
"""

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "empdept"

LOG_PATH_ENVVAR = "EMPDEPT_LOG_PATH"  # pragma: no mutate
FLIGHT_RECORDER_CAPACITY_ENVVAR = "EMPDEPT_FLIGHT_RECORDER_CAPACITY"  # pragma: no mutate
LOGGER_LEVELS_ENVVAR = "EMPDEPT_LOGGER_LEVELS"  # pragma: no mutate

DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

# click-extra logs its own parameter handling on every invocation; keep it
# quiet unless overridden with -L NAME=LEVEL
DEFAULT_LIB_LEVELS: dict[str, int] = {
    "click_extra": logging.WARNING,
}


def default_log_path() -> Path:
    """Return the flight recorder file path.

    Returns:
        The value of `EMPDEPT_LOG_PATH` if set, otherwise ``latest.log`` in
        the per-user log directory (created if missing).
    """
    if path := os.environ.get(LOG_PATH_ENVVAR):
        return Path(path)
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"
