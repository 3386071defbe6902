# SPDX-License-Identifier: MIT

import logging
import re
from typing import Optional

from solarwork.errors import ProjectValidationError
from solarwork.model.entity_id import EntityId
from solarwork.model.project import Project
from solarwork.model.work_type import ProjectStatus
from solarwork.repository.attendance import ATTENDANCE_REPO
from solarwork.repository.blob import BLOB_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.template.project import BUILTIN_PROJECT_ID, get_project_template

logger = logging.getLogger(__name__)

_TABLE_SEPARATOR_P = re.compile(r"[\n,]")


def parse_tables(tables_raw: Optional[str]) -> list[str]:
    """Split a comma or newline separated table list, dropping blanks."""
    if tables_raw is None:
        return []
    tables = [table.strip() for table in _TABLE_SEPARATOR_P.split(tables_raw)]
    return list(dict.fromkeys(table for table in tables if table))


def validate_status(status: str) -> str:
    try:
        return ProjectStatus(status).value
    except ValueError:
        raise ProjectValidationError(
            f"Unknown project status '{status}'. "
            f"Valid statuses: {', '.join(s.value for s in ProjectStatus)}"
        )


def create_project(
    name: str, status: str = ProjectStatus.ACTIVE, tables: Optional[list[str]] = None
) -> Project:
    if name.strip() == "":
        raise ProjectValidationError("Project name is required.")
    project = get_project_template()
    project["name"] = name.strip()
    project["status"] = validate_status(status)
    project["tables"] = tables or []
    return project


def assign_workers(project_id: EntityId, worker_ids: list[EntityId]) -> None:
    project = PROJECT_REPO.get_project(project_id)
    for worker_id in worker_ids:
        if WORKER_REPO.find_worker(worker_id) is None:
            raise ProjectValidationError(f"Unknown worker: {worker_id}")
    PROJECT_REPO.modify_project(
        project_id, worker_ids=project["worker_ids"] + worker_ids
    )


def unassign_workers(project_id: EntityId, worker_ids: list[EntityId]) -> None:
    project = PROJECT_REPO.get_project(project_id)
    PROJECT_REPO.modify_project(
        project_id,
        worker_ids=[id for id in project["worker_ids"] if id not in worker_ids],
    )


def delete_project(project_id: EntityId) -> None:
    """Delete a project with its work entries, attendance and plan."""
    if project_id == BUILTIN_PROJECT_ID:
        raise ProjectValidationError("The built-in project cannot be deleted.")

    # A failed plan delete must leave the records untouched
    BLOB_REPO.delete(project_id)
    PROJECT_REPO.delete_project(project_id)
    WORK_ENTRY_REPO.set_all_work_entries(
        [
            entry
            for entry in WORK_ENTRY_REPO.get_all_work_entries()
            if entry["project_id"] != project_id
        ]
    )
    ATTENDANCE_REPO.set_all_records(
        [
            record
            for record in ATTENDANCE_REPO.get_all_records()
            if record["project_id"] != project_id
        ]
    )

    logger.info("deleted project %s", project_id)
