# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from solarwork.terminal import attendance, config, data, project, work, worker
from solarwork.terminal.custom_typer import OrderedTyperGroup
from solarwork.terminal.payroll import payroll
from solarwork.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="solarwork - work tracking and payroll for solar installation crews",
    no_args_is_help=True,
)
app.add_typer(project.app, name="project, p", help="projects, tables and site plans")
app.add_typer(worker.app, name="worker, w", help="workers and their rates")
app.add_typer(work.app, name="work, wk", help="log and search work entries")
app.add_typer(attendance.app, name="attendance, at", help="daily attendance")
app.command(name="payroll, pr")(payroll)
app.add_typer(data.app, name="data, d", help="backup, import and reports")
app.add_typer(config.app, name="config, c", help="settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    solarwork - work tracking and payroll for solar installation crews

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
