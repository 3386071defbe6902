# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from solarwork.repository.attendance import ATTENDANCE_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.service import attendance as attendance_service
from solarwork.terminal.completion import complete_project, complete_worker
from solarwork.terminal.custom_typer import AliasedTyperGroup
from solarwork.terminal.parse import parse_date, resolve_id, resolve_id_list
from solarwork.time import today_local
from solarwork.view import attendance as attendance_report
from solarwork.view.notify import notify_error

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, or day offset like -1"


def _project_id(id: str) -> str:
    return resolve_id(
        id,
        [p["id"] for p in PROJECT_REPO.get_all_projects() if p["id"] is not None],
        "project",
    )


@app.command("show, s", no_args_is_help=True)
def show(
    project_id: Annotated[str, typer.Argument(autocompletion=complete_project)],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """
    show who was present on a day, defaults to today
    """
    resolved_id = _project_id(project_id)
    day = date if date is not None else today_local()
    record = attendance_service.get_attendance(resolved_id, day)

    attendance_report.attendance_report(
        PROJECT_REPO.get_project(resolved_id),
        record,
        WORKER_REPO.get_all_workers(),
        ATTENDANCE_REPO.find_record(record["id"]) is not None,
    )


@app.command("save, sv", no_args_is_help=True)
def save(
    project_id: Annotated[str, typer.Argument(autocompletion=complete_project)],
    present: Annotated[
        Optional[list[str]],
        typer.Option(
            "--present",
            "-p",
            help="accepts multiple or comma separated worker ids",
            autocompletion=complete_worker,
        ),
    ] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """
    save the workers present on a day, nobody when --present is omitted
    """
    resolved_id = _project_id(project_id)
    project = PROJECT_REPO.get_project(resolved_id)
    present_ids = resolve_id_list(
        present,
        [w["id"] for w in WORKER_REPO.get_all_workers() if w["id"] is not None],
        "worker",
    )

    not_on_roster = [id for id in present_ids if id not in project["worker_ids"]]
    if not_on_roster:
        notify_error(
            f"Not on the roster of '{project['name']}': {', '.join(not_on_roster)}"
        )
        raise typer.Exit(1)

    day = date if date is not None else today_local()
    record = attendance_service.save_attendance(resolved_id, day, present_ids)
    attendance_report.attendance_report(
        project, record, WORKER_REPO.get_all_workers(), True
    )
