"""Logging setup for the EMPDEPT command line.

Console output goes through a Rich handler on stderr, so stdout stays free for
query results. An optional "flight recorder" keeps the most recent records in
memory at DEBUG granularity and writes them to a file when a WARNING (such as a
failing scenario) is logged, or on exit when forced.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "empdept"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a ``[library]`` prefix.

    Project records get an empty prefix. The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "click_extra.commands" -> "[click_extra]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


@dataclass(frozen=True, slots=True)
class LoggingOptions:
    """Logging choices collected from the command line.

    Attributes:
        verbose: Number of ``-v`` flags; each lowers the console threshold.
        quiet: Number of ``-q`` flags; each raises the console threshold.
        debug: Developer mode: DEBUG console output with timestamps and paths.
        color: Allow colored console output.
        log_path: Flight recorder destination.
        flight_recorder: Enable the flight recorder.
        flight_capacity: Number of records the flight recorder buffers.
        force_flush: Also dump the flight recorder on a clean exit.
        logger_levels: Per-logger minimum levels, e.g. ``{"click_extra": 30}``.
    """

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = False
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """Console threshold: WARNING shifted one level per -v/-q, clamped."""
        level = logging.WARNING - 10 * self.verbose + 10 * self.quiet
        return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler writing to stderr.

    Args:
        level: Console threshold; forced to DEBUG in debug mode.
        debug_mode: Show timestamps, logger names and source paths.
        color: Follow click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder backed by `path`.

    Records are buffered until one at `flush_level` or above arrives, the
    buffer holds `capacity` records, or the handler is closed with
    `flush_on_close` set. The file is only created on the first flush.

    Returns:
        MemoryHandler: Buffering handler targeting a FileHandler.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(options: LoggingOptions) -> list[logging.Handler]:
    """Install the console handler and optional flight recorder on the root logger.

    The root logger passes everything through (DEBUG); each handler applies
    its own threshold. Per-logger levels are applied last.

    Returns:
        The handlers attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=options.console_level,
            debug_mode=options.debug,
            color=options.color,
        )
    ]
    if options.flight_recorder and options.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=options.log_path,
                capacity=options.flight_capacity,
                flush_on_close=options.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in options.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    options: LoggingOptions,
    handlers: list[logging.Handler],
) -> None:
    """Log a one-line summary at INFO and environment diagnostics at DEBUG."""
    flight_recorder = options.flight_recorder and options.log_path is not None
    logger.info(
        "EMPDEPT %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(options.console_level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s, Rich: %s", version("click"), version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            options.log_path,
            options.flight_capacity,
            options.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(lvl)
            for name, lvl in options.logger_levels.items()
        }
        or "<none>",
    )
