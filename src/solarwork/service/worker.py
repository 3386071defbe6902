# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from solarwork.model.entity_id import EntityId
from solarwork.model.worker import Worker
from solarwork.repository.attendance import ATTENDANCE_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.service.work_entry import remove_worker_from_entries
from solarwork.template.worker import get_worker_template

logger = logging.getLogger(__name__)


def create_worker(
    name: str,
    rate: Optional[float] = None,
    panel_rate: Optional[float] = None,
    cable_rate_small: Optional[float] = None,
    cable_rate_medium: Optional[float] = None,
    cable_rate_large: Optional[float] = None,
) -> Worker:
    worker = get_worker_template()
    worker["name"] = name.strip()
    worker["rate"] = rate
    worker["panel_rate"] = panel_rate
    worker["cable_rate_small"] = cable_rate_small
    worker["cable_rate_medium"] = cable_rate_medium
    worker["cable_rate_large"] = cable_rate_large
    return worker


def delete_worker(worker_id: EntityId) -> None:
    """
    Delete a worker and every reference to it.

    The worker leaves every work entry (entries left without workers are
    dropped), every project roster and every attendance record.
    """
    WORKER_REPO.delete_worker(worker_id)

    entries, removed_entries = remove_worker_from_entries(
        WORK_ENTRY_REPO.get_all_work_entries(), worker_id
    )
    WORK_ENTRY_REPO.set_all_work_entries(entries)

    for project in PROJECT_REPO.get_all_projects():
        if project["id"] is not None and worker_id in project["worker_ids"]:
            PROJECT_REPO.modify_project(
                project["id"],
                worker_ids=[id for id in project["worker_ids"] if id != worker_id],
            )

    records = ATTENDANCE_REPO.get_all_records()
    for record in records:
        record["present_worker_ids"] = [
            id for id in record["present_worker_ids"] if id != worker_id
        ]
    ATTENDANCE_REPO.set_all_records(records)

    logger.info(
        "deleted worker %s, %d work entries dropped", worker_id, removed_entries
    )
