# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from solarwork.model.entity_id import EntityId


class BaseWorkEntry(TypedDict):
    id: Optional[EntityId]
    project_id: EntityId
    worker_ids: list[EntityId]  # 1 or 2 workers, earnings split evenly
    start_time: pendulum.DateTime
    end_time: pendulum.DateTime
    duration: float  # hours, end_time - start_time
    date: pendulum.Date  # local date of start_time


class HourlyWorkEntry(BaseWorkEntry):
    type: Literal["hourly"]
    description: Optional[str]


class PanelingWorkEntry(BaseWorkEntry):
    type: Literal["task"]
    sub_type: Literal["paneling"]
    module_count: int
    modules_per_hour: float


class ConstructionWorkEntry(BaseWorkEntry):
    type: Literal["task"]
    sub_type: Literal["construction"]
    description: str


class CablesWorkEntry(BaseWorkEntry):
    type: Literal["task"]
    sub_type: Literal["cables"]
    table: str
    table_size: Optional[str]  # small | medium | large


WorkEntry = (
    HourlyWorkEntry | PanelingWorkEntry | ConstructionWorkEntry | CablesWorkEntry
)
