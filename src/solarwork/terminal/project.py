# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from solarwork.errors import BlobStoreError, ProjectValidationError
from solarwork.repository.blob import BLOB_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.service import project as project_service
from solarwork.service.forecast import forecast_completion, project_progress
from solarwork.terminal.completion import complete_project, complete_worker
from solarwork.terminal.custom_typer import AliasedTyperGroup
from solarwork.terminal.parse import resolve_id, resolve_id_list
from solarwork.view import project as project_report
from solarwork.view.notify import notify_error, notify_success

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

plan_app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)
app.add_typer(plan_app, name="plan, pl", help="site plan of a project")


def _project_id(id: str) -> str:
    return resolve_id(
        id,
        [p["id"] for p in PROJECT_REPO.get_all_projects() if p["id"] is not None],
        "project",
    )


def _worker_ids(ids: Optional[list[str]]) -> list[str]:
    return resolve_id_list(
        ids,
        [w["id"] for w in WORKER_REPO.get_all_workers() if w["id"] is not None],
        "worker",
    )


def _show(project_id: str) -> None:
    project = PROJECT_REPO.get_project(project_id)
    entries = WORK_ENTRY_REPO.get_work_entries_for_project(project_id)
    project_report.single_project_report(
        project,
        WORKER_REPO.get_all_workers(),
        project_progress(project, entries),
        forecast_completion(project["tables"], entries),
        BLOB_REPO.exists(project_id),
    )


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    tables: Annotated[
        Optional[str],
        typer.Option("--tables", "-t", help="comma separated table ids, e.g. 1,2,3"),
    ] = None,
    status: Annotated[str, typer.Option("--status", "-s")] = "active",
) -> None:
    """
    add a project
    """
    try:
        project = project_service.create_project(
            name, status, project_service.parse_tables(tables)
        )
    except ProjectValidationError as e:
        notify_error(str(e))
        raise typer.Exit(1)

    id = PROJECT_REPO.save_new_project(project)
    _show(id)


@app.command("list, ls")
def list_projects(
    status: Annotated[Optional[str], typer.Option("--status", "-s")] = None,
) -> None:
    """
    list projects with their progress
    """
    projects = PROJECT_REPO.get_all_projects()
    if status is not None:
        projects = [p for p in projects if p["status"] == status]

    entries = WORK_ENTRY_REPO.get_all_work_entries()
    progress_by_id = {
        project["id"] or "": project_progress(project, entries) for project in projects
    }
    project_report.projects_report(projects, progress_by_id)


@app.command("show, s", no_args_is_help=True)
def show(
    id: Annotated[str, typer.Argument(autocompletion=complete_project)],
) -> None:
    """
    show a project with its progress and completion forecast
    """
    _show(_project_id(id))


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: Annotated[str, typer.Argument(autocompletion=complete_project)],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    status: Annotated[Optional[str], typer.Option("--status", "-s")] = None,
    tables: Annotated[
        Optional[str],
        typer.Option("--tables", "-t", help="replaces the table list"),
    ] = None,
    add_tables: Annotated[
        Optional[str],
        typer.Option("--add-tables", "-at", help="appended to the table list"),
    ] = None,
) -> None:
    """
    modify a project
    """
    project_id = _project_id(id)
    project = PROJECT_REPO.get_project(project_id)

    try:
        if name is not None and name.strip() == "":
            raise ProjectValidationError("Project name is required.")
        new_status = (
            project_service.validate_status(status) if status is not None else None
        )
    except ProjectValidationError as e:
        notify_error(str(e))
        raise typer.Exit(1)

    new_tables = None
    if tables is not None:
        new_tables = project_service.parse_tables(tables)
    if add_tables is not None:
        new_tables = (new_tables if new_tables is not None else project["tables"]) + (
            project_service.parse_tables(add_tables)
        )

    PROJECT_REPO.modify_project(
        project_id,
        name=name.strip() if name is not None else None,
        status=new_status,
        tables=new_tables,
    )
    _show(project_id)


@app.command("assign, as", no_args_is_help=True)
def assign(
    id: Annotated[str, typer.Argument(autocompletion=complete_project)],
    worker_ids: Annotated[
        list[str],
        typer.Option(
            "--worker",
            "-w",
            help="accepts multiple or comma separated worker ids",
            autocompletion=complete_worker,
        ),
    ],
) -> None:
    """
    add workers to the project roster
    """
    project_id = _project_id(id)
    try:
        project_service.assign_workers(project_id, _worker_ids(worker_ids))
    except ProjectValidationError as e:
        notify_error(str(e))
        raise typer.Exit(1)
    _show(project_id)


@app.command("unassign, un", no_args_is_help=True)
def unassign(
    id: Annotated[str, typer.Argument(autocompletion=complete_project)],
    worker_ids: Annotated[
        list[str],
        typer.Option(
            "--worker",
            "-w",
            help="accepts multiple or comma separated worker ids",
            autocompletion=complete_worker,
        ),
    ],
) -> None:
    """
    remove workers from the project roster
    """
    project_id = _project_id(id)
    project_service.unassign_workers(project_id, _worker_ids(worker_ids))
    _show(project_id)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(autocompletion=complete_project)],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="skip the confirmation")
    ] = False,
) -> None:
    """
    delete a project with its work entries, attendance and site plan
    """
    project_id = _project_id(id)
    project = PROJECT_REPO.get_project(project_id)

    if not yes:
        typer.confirm(
            f"Delete project '{project['name']}' and all its work entries?",
            abort=True,
        )

    try:
        project_service.delete_project(project_id)
    except (ProjectValidationError, BlobStoreError) as e:
        notify_error(str(e))
        raise typer.Exit(1)
    notify_success(f"Deleted project '{project['name']}'")


@plan_app.command("put, p", no_args_is_help=True)
def plan_put(
    id: Annotated[str, typer.Argument(autocompletion=complete_project)],
    file: Annotated[
        Path, typer.Argument(exists=True, dir_okay=False, readable=True)
    ],
) -> None:
    """
    store a site plan document for the project
    """
    project_id = _project_id(id)
    try:
        BLOB_REPO.put(project_id, file.read_bytes())
    except BlobStoreError as e:
        notify_error(str(e))
        raise typer.Exit(1)
    notify_success(f"Saved site plan from {file}")


@plan_app.command("get, g", no_args_is_help=True)
def plan_get(
    id: Annotated[str, typer.Argument(autocompletion=complete_project)],
    output: Annotated[Path, typer.Argument(dir_okay=False)],
) -> None:
    """
    write the site plan of the project to a file
    """
    project_id = _project_id(id)
    try:
        data = BLOB_REPO.get(project_id)
    except BlobStoreError as e:
        notify_error(str(e))
        raise typer.Exit(1)

    if data is None:
        notify_error("This project has no site plan.")
        raise typer.Exit(1)

    output.write_bytes(data)
    notify_success(f"Wrote site plan to {output}")


@plan_app.command("delete, d", no_args_is_help=True)
def plan_delete(
    id: Annotated[str, typer.Argument(autocompletion=complete_project)],
) -> None:
    """
    delete the site plan of the project
    """
    project_id = _project_id(id)
    try:
        BLOB_REPO.delete(project_id)
    except BlobStoreError as e:
        notify_error(str(e))
        raise typer.Exit(1)
    notify_success("Deleted site plan")
