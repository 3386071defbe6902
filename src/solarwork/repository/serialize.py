# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from solarwork import time
from solarwork.model.attendance import AttendanceRecord
from solarwork.model.project import Project
from solarwork.model.work_entry import WorkEntry
from solarwork.model.worker import Worker

_RATE_FIELDS = [
    "rate",
    "panel_rate",
    "cable_rate_small",
    "cable_rate_medium",
    "cable_rate_large",
]


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def project_to_dict(project: Project) -> dict[str, Any]:
    serializable_project = cast(dict[str, Any], deepcopy(project))
    serializable_project["status"] = str(serializable_project["status"])
    serializable_project["tables"] = [str(t) for t in project["tables"]]
    return serializable_project


def project_from_dict(raw: dict[str, Any]) -> Project:
    return {
        "id": raw["id"],
        "name": raw["name"],
        "status": str(raw.get("status") or "active"),
        "tables": [str(t) for t in raw.get("tables") or []],
        "worker_ids": list(raw.get("worker_ids") or []),
    }


def worker_to_dict(worker: Worker) -> dict[str, Any]:
    return cast(dict[str, Any], deepcopy(worker))


def worker_from_dict(raw: dict[str, Any]) -> Worker:
    worker: dict[str, Any] = {"id": raw["id"], "name": raw["name"]}
    for field in _RATE_FIELDS:
        worker[field] = _optional_float(raw.get(field))
    return cast(Worker, worker)


def work_entry_to_dict(entry: WorkEntry) -> dict[str, Any]:
    serializable_entry = cast(dict[str, Any], deepcopy(entry))
    serializable_entry["start_time"] = time.datetime_to_iso_str(entry["start_time"])
    serializable_entry["end_time"] = time.datetime_to_iso_str(entry["end_time"])
    serializable_entry["date"] = time.date_to_str(entry["date"])
    serializable_entry["type"] = str(serializable_entry["type"])
    if "sub_type" in serializable_entry:
        serializable_entry["sub_type"] = str(serializable_entry["sub_type"])
    if serializable_entry.get("table_size") is not None:
        serializable_entry["table_size"] = str(serializable_entry["table_size"])
    return serializable_entry


def work_entry_from_dict(raw: dict[str, Any]) -> WorkEntry:
    deserializable_entry = dict(raw)
    deserializable_entry["start_time"] = time.datetime_from_str(raw["start_time"])
    deserializable_entry["end_time"] = time.datetime_from_str(raw["end_time"])
    if raw.get("date") is not None:
        deserializable_entry["date"] = time.date_from_str(raw["date"])
    else:
        deserializable_entry["date"] = time.datetime_to_local_date(
            deserializable_entry["start_time"]
        )
    deserializable_entry["worker_ids"] = list(raw.get("worker_ids") or [])
    if raw.get("duration") is None:
        deserializable_entry["duration"] = time.hours_between(
            deserializable_entry["start_time"], deserializable_entry["end_time"]
        )
    else:
        deserializable_entry["duration"] = float(raw["duration"])
    if raw.get("table") is not None:
        deserializable_entry["table"] = str(raw["table"])
    return cast(WorkEntry, deserializable_entry)


def attendance_to_dict(record: AttendanceRecord) -> dict[str, Any]:
    serializable_record = cast(dict[str, Any], deepcopy(record))
    serializable_record["date"] = time.date_to_str(record["date"])
    return serializable_record


def attendance_from_dict(raw: dict[str, Any]) -> AttendanceRecord:
    return {
        "id": raw["id"],
        "project_id": raw["project_id"],
        "date": time.date_from_str(raw["date"]),
        "present_worker_ids": list(raw.get("present_worker_ids") or []),
    }
