"""EMPDEPT CLI entry point.

Defines the top-level ``empdept`` command (via Click-Extra) and registers the
subcommands exposed by the project.

Currently available commands
- ``empdept scenarios``: list, run and show the tutorial query scenarios.
- ``empdept tables``: print the EMP, DEPT and SALGRADE fixture tables.

Notes
- The CLI version is sourced from `empdept.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ empdept scenarios run
    $ empdept -v scenarios show salary_grades
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from empdept import __version__, config
from empdept.bootstrap import bootstrap
from empdept.logging import LoggingOptions, configure_logging, log_startup

from .helpers import parse_log_level
from .scenarios import scenarios as scenarios_group
from .tables import tables as tables_command

logger = logging.getLogger(__name__)


HELP = """EMPDEPT command-line interface.

    Runs the classic EMP/DEPT/SALGRADE SQL exercises as in-memory query
    compositions (filter, order, join, group, aggregate) and checks each
    result against its expected outcome.
    """


@clickx.group(
    help=HELP,
    version_fields={"version": __version__},
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.NoColorOption(),
        clickx.TimerOption(show_envvar=True),
        clickx.VersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight recorder log file.",
    default=config.default_log_path,
    envvar=config.LOG_PATH_ENVVAR,
    show_default="<user log dir>/latest.log",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar=config.FLIGHT_RECORDER_CAPACITY_ENVVAR,
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, such as a "
        "failing scenario, or on exit if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=config.LOGGER_LEVELS_ENVVAR,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L empdept.queries=INFO) "
        "or via EMPDEPT_LOGGER_LEVELS (comma/space list)."
    ),
    show_envvar=True,
)
@clickx.pass_context
def empdept(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """EMPDEPT command-line interface."""

    options = LoggingOptions(
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(options)
    log_startup(logger, app_version=__version__, options=options, handlers=handlers)

    # Subcommands read the wired application from the context
    ctx.obj = bootstrap()

    ctx.call_on_close(logging.shutdown)  # <- will run after the command returns


empdept.add_command(scenarios_group)
empdept.add_command(tables_command)
