# SPDX-License-Identifier: MIT

import json
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich import print_json

from solarwork.errors import ImportDataError
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.service.assistant import build_assistant_context
from solarwork.service.merge import import_snapshot, read_import_file, write_export
from solarwork.service.records import daily_report
from solarwork.terminal.custom_typer import AliasedTyperGroup
from solarwork.terminal.parse import parse_date
from solarwork.time import date_to_display_str, today_local
from solarwork.view.notify import notify_error, notify_success, notify_warning

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("export, e")
def export(
    path: Annotated[
        Path,
        typer.Argument(help="file or directory, defaults to the current directory"),
    ] = Path("."),
) -> None:
    """
    write every collection to one JSON backup file
    """
    try:
        written = write_export(path)
    except OSError as e:
        notify_error(f"Could not write {path}: {e}")
        raise typer.Exit(1)
    notify_success(f"Exported to {written}")


@app.command("import, i", no_args_is_help=True)
def import_(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
) -> None:
    """
    merge a JSON backup into the local data
    """
    try:
        snapshot = import_snapshot(read_import_file(path))
    except ImportDataError as e:
        notify_error(str(e))
        raise typer.Exit(1)

    notify_success(
        f"Imported {path.name}: {len(snapshot['projects'])} projects, "
        f"{len(snapshot['workers'])} workers, "
        f"{len(snapshot['work_entries'])} work entries"
    )


@app.command("report, r")
def report(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, or day offset like -1",
        ),
    ] = None,
) -> None:
    """
    plain text report of a day's work, ready to paste into a message
    """
    day = date if date is not None else today_local()
    text = daily_report(
        day,
        WORK_ENTRY_REPO.get_all_work_entries(),
        WORKER_REPO.get_all_workers(),
        PROJECT_REPO.get_all_projects(),
    )
    if text is None:
        notify_warning(f"No work logged on {date_to_display_str(day)}")
        raise typer.Exit(0)
    typer.echo(text, nl=False)


@app.command("context, cx")
def context(
    raw: Annotated[
        bool, typer.Option("--raw", help="plain JSON without highlighting")
    ] = False,
) -> None:
    """
    data summary for a conversational assistant, as JSON
    """
    assistant_context = build_assistant_context(
        PROJECT_REPO.get_all_projects(),
        WORKER_REPO.get_all_workers(),
        WORK_ENTRY_REPO.get_all_work_entries(),
    )
    if raw:
        typer.echo(json.dumps(assistant_context, ensure_ascii=False, indent=2))
    else:
        print_json(data=assistant_context)
