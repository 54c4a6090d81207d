"""``empdept tables``: print the fixture tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from rich.console import Console

from .helpers import render_rows

if TYPE_CHECKING:
    from empdept.bootstrap import AppContainer

TABLE_NAMES = ("emp", "dept", "salgrade")


@click.command()
@click.argument(
    "names",
    nargs=-1,
    type=click.Choice(TABLE_NAMES, case_sensitive=False),
)
@click.pass_context
def tables(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Print the EMP, DEPT and SALGRADE tables (or only NAMES)."""
    app: AppContainer = ctx.obj
    sources = {
        "emp": app.store.employees,
        "dept": app.store.departments,
        "salgrade": app.store.salary_grades,
    }
    console = Console(color_system=None if ctx.color is False else "auto")
    for name in names or TABLE_NAMES:
        console.print(render_rows(sources[name.lower()](), title=name.upper()))
