# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from solarwork.repository.worker import WORKER_REPO
from solarwork.service import worker as worker_service
from solarwork.terminal.completion import complete_worker
from solarwork.terminal.custom_typer import AliasedTyperGroup
from solarwork.terminal.parse import resolve_id
from solarwork.view import worker as worker_report
from solarwork.view.notify import notify_error, notify_success

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _worker_id(id: str) -> str:
    return resolve_id(
        id,
        [w["id"] for w in WORKER_REPO.get_all_workers() if w["id"] is not None],
        "worker",
    )


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    rate: Annotated[
        Optional[float], typer.Option("--rate", "-r", min=0, help="€ per hour")
    ] = None,
    panel_rate: Annotated[
        Optional[float], typer.Option("--panel-rate", "-pr", min=0, help="€ per panel")
    ] = None,
    cable_rate_small: Annotated[
        Optional[float],
        typer.Option("--small", "-cs", min=0, help="€ per small table"),
    ] = None,
    cable_rate_medium: Annotated[
        Optional[float],
        typer.Option("--medium", "-cm", min=0, help="€ per medium table"),
    ] = None,
    cable_rate_large: Annotated[
        Optional[float],
        typer.Option("--large", "-cl", min=0, help="€ per large table"),
    ] = None,
) -> None:
    """
    add a worker
    """
    if name.strip() == "":
        notify_error("Worker name is required.")
        raise typer.Exit(1)

    worker = worker_service.create_worker(
        name,
        rate,
        panel_rate,
        cable_rate_small,
        cable_rate_medium,
        cable_rate_large,
    )
    id = WORKER_REPO.save_new_worker(worker)
    new_worker = WORKER_REPO.find_worker(id)
    assert new_worker is not None
    worker_report.workers_report([new_worker], "worker added")


@app.command("list, ls")
def list_workers() -> None:
    """
    list workers and their rates
    """
    workers = sorted(WORKER_REPO.get_all_workers(), key=lambda w: w["name"].lower())
    worker_report.workers_report(workers)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: Annotated[str, typer.Argument(autocompletion=complete_worker)],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    rate: Annotated[
        Optional[float], typer.Option("--rate", "-r", min=0, help="€ per hour")
    ] = None,
    panel_rate: Annotated[
        Optional[float], typer.Option("--panel-rate", "-pr", min=0, help="€ per panel")
    ] = None,
    cable_rate_small: Annotated[
        Optional[float],
        typer.Option("--small", "-cs", min=0, help="€ per small table"),
    ] = None,
    cable_rate_medium: Annotated[
        Optional[float],
        typer.Option("--medium", "-cm", min=0, help="€ per medium table"),
    ] = None,
    cable_rate_large: Annotated[
        Optional[float],
        typer.Option("--large", "-cl", min=0, help="€ per large table"),
    ] = None,
) -> None:
    """
    modify a worker's name or rates
    """
    worker_id = _worker_id(id)
    if name is not None and name.strip() == "":
        notify_error("Worker name is required.")
        raise typer.Exit(1)

    WORKER_REPO.modify_worker(
        worker_id,
        name.strip() if name is not None else None,
        rate,
        panel_rate,
        cable_rate_small,
        cable_rate_medium,
        cable_rate_large,
    )
    modified_worker = WORKER_REPO.find_worker(worker_id)
    assert modified_worker is not None
    worker_report.workers_report([modified_worker], "worker modified")


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(autocompletion=complete_worker)],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="skip the confirmation")
    ] = False,
) -> None:
    """
    delete a worker from every entry, roster and attendance record
    """
    worker_id = _worker_id(id)
    worker = WORKER_REPO.find_worker(worker_id)
    assert worker is not None

    if not yes:
        typer.confirm(
            f"Delete worker '{worker['name']}'? Entries where they worked alone are deleted too.",
            abort=True,
        )

    worker_service.delete_worker(worker_id)
    notify_success(f"Deleted worker '{worker['name']}'")
