# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from solarwork.model.entity_id import EntityId


class AttendanceRecord(TypedDict):
    id: str  # f"{project_id}_{date}"
    project_id: EntityId
    date: pendulum.Date
    present_worker_ids: list[EntityId]
