# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

from solarwork.model.attendance import AttendanceRecord
from solarwork.model.project import Project
from solarwork.model.work_entry import WorkEntry
from solarwork.model.worker import Worker


class Snapshot(TypedDict):
    projects: list[Project]
    workers: list[Worker]
    work_entries: list[WorkEntry]
    attendance_records: list[AttendanceRecord]
    theme: NotRequired[Optional[str]]
    locale: NotRequired[Optional[str]]
