# SPDX-License-Identifier: MIT

import logging

import pendulum

from solarwork.model.attendance import AttendanceRecord
from solarwork.model.entity_id import EntityId
from solarwork.repository.attendance import ATTENDANCE_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.time import date_to_str

logger = logging.getLogger(__name__)


def attendance_id(project_id: EntityId, date: pendulum.Date) -> str:
    return f"{project_id}_{date_to_str(date)}"


def get_attendance(project_id: EntityId, date: pendulum.Date) -> AttendanceRecord:
    """
    Stored attendance for the day, or a default with the whole project
    roster present.
    """
    record = ATTENDANCE_REPO.find_record(attendance_id(project_id, date))
    if record is not None:
        return record

    project = PROJECT_REPO.get_project(project_id)
    return {
        "id": attendance_id(project_id, date),
        "project_id": project_id,
        "date": date,
        "present_worker_ids": list(project["worker_ids"]),
    }


def save_attendance(
    project_id: EntityId, date: pendulum.Date, present_worker_ids: list[EntityId]
) -> AttendanceRecord:
    record: AttendanceRecord = {
        "id": attendance_id(project_id, date),
        "project_id": project_id,
        "date": date,
        "present_worker_ids": list(dict.fromkeys(present_worker_ids)),
    }
    ATTENDANCE_REPO.upsert_record(record)
    logger.info(
        "attendance %s saved, %d present",
        record["id"],
        len(record["present_worker_ids"]),
    )
    return record
