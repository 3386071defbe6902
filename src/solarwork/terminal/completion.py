# SPDX-License-Identifier: MIT

from solarwork.model.work_type import TableSize, WorkType
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.worker import WORKER_REPO


def complete_project(incomplete: str) -> list[str]:
    """Return list of project ids for shell completion."""
    return [
        project["id"]
        for project in PROJECT_REPO.get_all_projects()
        if project["id"] and project["id"].startswith(incomplete)
    ]


def complete_worker(incomplete: str) -> list[str]:
    """Return list of worker ids for shell completion."""
    return [
        worker["id"]
        for worker in WORKER_REPO.get_all_workers()
        if worker["id"] and worker["id"].startswith(incomplete)
    ]


def complete_table_size(incomplete: str) -> list[str]:
    return [size.value for size in TableSize if size.value.startswith(incomplete)]


def complete_work_type(incomplete: str) -> list[str]:
    return [t.value for t in WorkType if t.value.startswith(incomplete)]
