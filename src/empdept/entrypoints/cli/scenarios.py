"""``empdept scenarios``: list, run and show the tutorial scenarios.

Behavior
- Tables go to **stdout**; status lines (pass/fail summary) go to **stderr**.
- ``run`` exits with status 1 when any scenario fails, so it can gate CI.
- Unknown scenario names are rejected before anything runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from empdept.service_layer.errors import UnknownScenarioError

from .helpers import error, render_rows, success, warn

if TYPE_CHECKING:
    from empdept.bootstrap import AppContainer

STATUS_STYLES = {"PASS": "green", "FAIL": "red", "ERROR": "bold red"}


def _console(ctx: click.Context) -> Console:
    return Console(color_system=None if ctx.color is False else "auto")


@click.group(cls=clickx.Group)
def scenarios() -> None:
    """Tutorial query scenarios."""


@scenarios.command(name="list")
@click.pass_context
def list_scenarios(ctx: click.Context) -> None:
    """List the scenarios with their SQL equivalents."""
    app: AppContainer = ctx.obj
    table = Table(title="Scenarios")
    table.add_column("NAME", style="cyan", no_wrap=True)
    table.add_column("TITLE")
    table.add_column("SQL")
    for name in app.runner.names:
        item = app.runner.get(name)
        table.add_row(item.name, item.title, item.sql)
    _console(ctx).print(table)


@scenarios.command()
@click.argument("names", nargs=-1)
@click.pass_context
def run(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Run all scenarios, or only NAMES, and report each outcome."""
    app: AppContainer = ctx.obj
    try:
        report = app.runner.run(names or None)
    except UnknownScenarioError as e:
        raise click.BadParameter(str(e), param_hint="NAMES") from e

    table = Table(title="Scenario results")
    table.add_column("SCENARIO", style="cyan", no_wrap=True)
    table.add_column("STATUS")
    table.add_column("TIME (ms)", justify="right")
    table.add_column("MESSAGE")
    for result in report.results:
        style = STATUS_STYLES[result.status]
        table.add_row(
            result.name,
            f"[{style}]{result.status}[/{style}]",
            f"{result.elapsed * 1000:.3f}",
            result.message,
        )
    _console(ctx).print(table)

    total = len(report.results)
    if report.ok:
        success(f"All {total} scenarios passed.")
        return
    warn(f"{report.failed} of {total} scenarios failed.")
    ctx.exit(1)


@scenarios.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Run scenario NAME and print its result rows."""
    app: AppContainer = ctx.obj
    try:
        item = app.runner.get(name)
    except UnknownScenarioError as e:
        raise click.BadParameter(str(e), param_hint="NAME") from e

    result = app.runner.run_one(item)
    console = _console(ctx)
    console.print(f"[bold]{item.title}[/bold]")
    console.print(item.sql, markup=False, highlight=False)
    if result.error:
        error(f"Scenario {name} raised an error: {result.message}")
        ctx.exit(1)
    if result.output is not None:
        console.print(render_rows(result.output))

    if result.passed:
        success(f"Expectation for {name} holds.")
    else:
        error(f"Expectation for {name} does not hold: {result.message}")
        ctx.exit(1)
