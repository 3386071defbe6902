# SPDX-License-Identifier: MIT

from solarwork.model.entity_id import UNSET_ENTITY_ID
from solarwork.model.work_entry import (
    CablesWorkEntry,
    ConstructionWorkEntry,
    HourlyWorkEntry,
    PanelingWorkEntry,
)
from solarwork.time import datetime_to_local_date, now_utc


def get_hourly_entry_template() -> HourlyWorkEntry:
    now = now_utc()
    return {
        "id": None,
        "type": "hourly",
        "project_id": UNSET_ENTITY_ID,  # Must be set
        "worker_ids": [],
        "start_time": now,
        "end_time": now,
        "duration": 0.0,
        "date": datetime_to_local_date(now),
        "description": None,
    }


def get_paneling_entry_template() -> PanelingWorkEntry:
    now = now_utc()
    return {
        "id": None,
        "type": "task",
        "sub_type": "paneling",
        "project_id": UNSET_ENTITY_ID,
        "worker_ids": [],
        "start_time": now,
        "end_time": now,
        "duration": 0.0,
        "date": datetime_to_local_date(now),
        "module_count": 0,
        "modules_per_hour": 0.0,
    }


def get_construction_entry_template() -> ConstructionWorkEntry:
    now = now_utc()
    return {
        "id": None,
        "type": "task",
        "sub_type": "construction",
        "project_id": UNSET_ENTITY_ID,
        "worker_ids": [],
        "start_time": now,
        "end_time": now,
        "duration": 0.0,
        "date": datetime_to_local_date(now),
        "description": "",
    }


def get_cables_entry_template() -> CablesWorkEntry:
    now = now_utc()
    return {
        "id": None,
        "type": "task",
        "sub_type": "cables",
        "project_id": UNSET_ENTITY_ID,
        "worker_ids": [],
        "start_time": now,
        "end_time": now,
        "duration": 0.0,
        "date": datetime_to_local_date(now),
        "table": "",
        "table_size": None,
    }
