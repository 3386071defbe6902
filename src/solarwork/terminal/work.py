# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer

from solarwork.errors import WorkEntryValidationError
from solarwork.model.project import Project
from solarwork.model.work_entry import WorkEntry
from solarwork.repository.configuration import CONFIGURATION_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.service import work_entry as work_entry_service
from solarwork.service.records import group_by_date, search_entries
from solarwork.template.project import BUILTIN_PROJECT_ID
from solarwork.terminal.completion import (
    complete_project,
    complete_table_size,
    complete_worker,
)
from solarwork.terminal.custom_typer import AliasedTyperGroup
from solarwork.terminal.parse import (
    parse_date,
    parse_datetime,
    parse_table_sizes,
    resolve_id,
    resolve_id_list,
)
from solarwork.time import python_to_pendulum_utc
from solarwork.view import work_entry as work_entry_report
from solarwork.view.notify import notify_error, notify_success

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATETIME_HELP = "valid inputs: YYYY-MM-DD HH:mm, (H)H:mm, now"

ProjectOption = Annotated[
    str,
    typer.Option(
        "--project",
        "-p",
        help="project id, defaults to the built-in project",
        autocompletion=complete_project,
    ),
]
WorkersOption = Annotated[
    list[str],
    typer.Option(
        "--worker",
        "-w",
        help="accepts multiple or comma separated worker ids",
        autocompletion=complete_worker,
    ),
]
StartOption = Annotated[
    pendulum.DateTime,
    typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
]
EndOption = Annotated[
    pendulum.DateTime,
    typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
]


def _project(id: str) -> Project:
    project_id = resolve_id(
        id,
        [p["id"] for p in PROJECT_REPO.get_all_projects() if p["id"] is not None],
        "project",
    )
    return PROJECT_REPO.get_project(project_id)


def _worker_ids(ids: Optional[list[str]]) -> list[str]:
    return resolve_id_list(
        ids,
        [w["id"] for w in WORKER_REPO.get_all_workers() if w["id"] is not None],
        "worker",
    )


def _entry(id: str) -> WorkEntry:
    entry_id = resolve_id(
        id,
        [
            e["id"]
            for e in WORK_ENTRY_REPO.get_all_work_entries()
            if e["id"] is not None
        ],
        "work entry",
    )
    entry = WORK_ENTRY_REPO.find_work_entry(entry_id)
    assert entry is not None
    return entry


def _max_workers() -> int:
    return CONFIGURATION_REPO.get_config().get(
        "max_workers_per_entry", work_entry_service.MAX_WORKERS_PER_ENTRY
    )


def _save_and_show(entry: WorkEntry, title: str) -> None:
    id = WORK_ENTRY_REPO.save_new_work_entry(entry)
    logger.info("added %s work entry %s", title, id)
    new_entry = WORK_ENTRY_REPO.find_work_entry(id)
    assert new_entry is not None
    work_entry_report.single_work_entry_report(
        new_entry,
        WORKER_REPO.get_all_workers(),
        PROJECT_REPO.get_all_projects(),
        f"{title} work added",
    )


@app.command("hourly, h", no_args_is_help=True)
def hourly(
    worker_ids: WorkersOption,
    start: StartOption,
    end: EndOption,
    project_id: ProjectOption = BUILTIN_PROJECT_ID,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
) -> None:
    """
    log hourly work
    """
    try:
        entry = work_entry_service.create_hourly_entry(
            _project(project_id),
            WORKER_REPO.get_all_workers(),
            _worker_ids(worker_ids),
            python_to_pendulum_utc(start),
            python_to_pendulum_utc(end),
            description,
            _max_workers(),
        )
    except WorkEntryValidationError as e:
        notify_error(str(e))
        raise typer.Exit(1)
    _save_and_show(entry, "hourly")


@app.command("paneling, pa", no_args_is_help=True)
def paneling(
    worker_ids: WorkersOption,
    start: StartOption,
    end: EndOption,
    module_count: Annotated[int, typer.Option("--modules", "-m")],
    project_id: ProjectOption = BUILTIN_PROJECT_ID,
) -> None:
    """
    log paneling work, paid per module
    """
    try:
        entry = work_entry_service.create_paneling_entry(
            _project(project_id),
            WORKER_REPO.get_all_workers(),
            _worker_ids(worker_ids),
            python_to_pendulum_utc(start),
            python_to_pendulum_utc(end),
            module_count,
            _max_workers(),
        )
    except WorkEntryValidationError as e:
        notify_error(str(e))
        raise typer.Exit(1)
    _save_and_show(entry, "paneling")


@app.command("construction, co", no_args_is_help=True)
def construction(
    worker_ids: WorkersOption,
    start: StartOption,
    end: EndOption,
    description: Annotated[str, typer.Option("--description", "-d")],
    project_id: ProjectOption = BUILTIN_PROJECT_ID,
) -> None:
    """
    log construction work, paid per hour
    """
    try:
        entry = work_entry_service.create_construction_entry(
            _project(project_id),
            WORKER_REPO.get_all_workers(),
            _worker_ids(worker_ids),
            python_to_pendulum_utc(start),
            python_to_pendulum_utc(end),
            description,
            _max_workers(),
        )
    except WorkEntryValidationError as e:
        notify_error(str(e))
        raise typer.Exit(1)
    _save_and_show(entry, "construction")


@app.command("cables, ca", no_args_is_help=True)
def cables(
    worker_ids: WorkersOption,
    start: StartOption,
    end: EndOption,
    tables: Annotated[
        str,
        typer.Option(
            "--tables",
            "-t",
            help="comma separated, with optional size: 1:small,2:large,3",
        ),
    ],
    project_id: ProjectOption = BUILTIN_PROJECT_ID,
    size: Annotated[
        Optional[str],
        typer.Option(
            "--size",
            help="size for tables listed without one",
            autocompletion=complete_table_size,
        ),
    ] = None,
) -> None:
    """
    log cable work, one entry per finished table
    """
    try:
        entries = work_entry_service.create_cables_entries(
            _project(project_id),
            WORKER_REPO.get_all_workers(),
            _worker_ids(worker_ids),
            python_to_pendulum_utc(start),
            python_to_pendulum_utc(end),
            parse_table_sizes(tables, size),
            WORK_ENTRY_REPO.get_all_work_entries(),
            _max_workers(),
        )
    except WorkEntryValidationError as e:
        notify_error(str(e))
        raise typer.Exit(1)

    for entry in entries:
        WORK_ENTRY_REPO.save_new_work_entry(entry)
    logger.info("added %d cable work entries", len(entries))

    work_entry_report.work_entries_report(
        group_by_date(entries),
        WORKER_REPO.get_all_workers(),
        PROJECT_REPO.get_all_projects(),
        "cable work added",
    )


@app.command("list, ls")
def list_entries(
    project_id: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
    worker_id: Annotated[
        Optional[str],
        typer.Option("--worker", "-w", autocompletion=complete_worker),
    ] = None,
    table_size: Annotated[
        Optional[str],
        typer.Option("--size", autocompletion=complete_table_size),
    ] = None,
    table_query: Annotated[
        Optional[str],
        typer.Option("--tables", "-t", help="table ids and ranges: 1,3-5,T7"),
    ] = None,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--from", "-f", parser=parse_date),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--to", parser=parse_date),
    ] = None,
) -> None:
    """
    list work entries grouped by day, newest first
    """
    entries = search_entries(
        WORK_ENTRY_REPO.get_all_work_entries(),
        worker_id=_worker_ids([worker_id])[0] if worker_id is not None else None,
        table_size=table_size,
        table_query=table_query,
        project_id=_project(project_id)["id"] if project_id is not None else None,
    )
    if start is not None:
        entries = [entry for entry in entries if entry["date"] >= start]
    if end is not None:
        entries = [entry for entry in entries if entry["date"] <= end]

    work_entry_report.work_entries_report(
        group_by_date(entries),
        WORKER_REPO.get_all_workers(),
        PROJECT_REPO.get_all_projects(),
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    worker_ids: Annotated[
        Optional[list[str]],
        typer.Option(
            "--worker",
            "-w",
            help="replaces the workers of the entry",
            autocompletion=complete_worker,
        ),
    ] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--end", "-e", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    module_count: Annotated[Optional[int], typer.Option("--modules", "-m")] = None,
    table_size: Annotated[
        Optional[str],
        typer.Option("--size", autocompletion=complete_table_size),
    ] = None,
) -> None:
    """
    modify a work entry
    """
    entry = _entry(id)
    try:
        updated = work_entry_service.update_work_entry(
            entry,
            WORKER_REPO.get_all_workers(),
            _worker_ids(worker_ids) if worker_ids is not None else None,
            python_to_pendulum_utc(start) if start is not None else None,
            python_to_pendulum_utc(end) if end is not None else None,
            description,
            module_count,
            table_size,
            _max_workers(),
        )
    except WorkEntryValidationError as e:
        notify_error(str(e))
        raise typer.Exit(1)

    WORK_ENTRY_REPO.replace_work_entry(updated)
    work_entry_report.single_work_entry_report(
        updated,
        WORKER_REPO.get_all_workers(),
        PROJECT_REPO.get_all_projects(),
        "work entry modified",
    )


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    """
    delete a work entry
    """
    entry = _entry(id)
    assert entry["id"] is not None
    WORK_ENTRY_REPO.delete_work_entry(entry["id"])
    notify_success(f"Deleted work entry {entry['id']}")
