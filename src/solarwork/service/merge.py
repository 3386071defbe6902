# SPDX-License-Identifier: MIT

import json
import logging
import re
from pathlib import Path
from typing import Any, Optional, cast

from solarwork import configuration
from solarwork.cleanup import flush_all, reload_all
from solarwork.errors import ImportDataError
from solarwork.model.entity_id import EntityId
from solarwork.model.project import Project
from solarwork.model.snapshot import Snapshot
from solarwork.model.work_entry import WorkEntry
from solarwork.model.work_type import WorkType
from solarwork.model.worker import Worker
from solarwork.repository import store
from solarwork.repository.attendance import ATTENDANCE_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.serialize import (
    attendance_from_dict,
    project_from_dict,
    work_entry_from_dict,
    worker_from_dict,
)
from solarwork.repository.settings import SETTINGS_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO
from solarwork.service.rates import work_type_of
from solarwork.template.project import BUILTIN_PROJECT_ID, get_builtin_project
from solarwork.time import today_local

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY_P = re.compile(r"(?<!^)(?=[A-Z])")

REQUIRED_VARIANT_FIELDS: dict[WorkType, tuple[str, ...]] = {
    WorkType.HOURLY: (),
    WorkType.PANELING: ("module_count",),
    WorkType.CONSTRUCTION: (),
    WorkType.CABLES: ("table",),
}


def snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY_P.sub("_", key).lower()


def _normalize_record(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ImportDataError(f"Expected an object, got {type(raw).__name__}")
    return {snake_case(key): value for key, value in raw.items()}


def _collection(payload: dict[str, Any], key: str) -> list[dict[str, Any]]:
    raw_collection = payload.get(key)
    if raw_collection is None:
        raw_collection = payload.get(snake_case(key))
    if raw_collection is None:
        return []
    if not isinstance(raw_collection, list):
        raise ImportDataError(f"'{key}' must be a list")
    return [_normalize_record(raw) for raw in raw_collection]


def _check_variant_fields(entry: dict[str, Any]) -> None:
    """Reject entries missing their variant fields, fill the optional ones."""
    work_type = work_type_of(entry)  # type: ignore[arg-type]
    missing = [
        field for field in REQUIRED_VARIANT_FIELDS[work_type] if entry.get(field) is None
    ]
    if missing:
        raise ImportDataError(
            f"Work entry {entry.get('id')} ({work_type}) is missing: {', '.join(missing)}"
        )

    match work_type:
        case WorkType.HOURLY:
            entry.setdefault("description", None)
        case WorkType.CONSTRUCTION:
            entry["description"] = str(entry.get("description") or "")
        case WorkType.PANELING:
            entry["module_count"] = int(entry["module_count"])
            if entry.get("modules_per_hour") is None:
                entry["modules_per_hour"] = (
                    entry["module_count"] / entry["duration"] if entry["duration"] else 0.0
                )
        case WorkType.CABLES:
            entry.setdefault("table_size", None)


def parse_payload(payload: Any) -> Snapshot:
    """
    Validate and deserialize an import payload.

    Raises ImportDataError without touching any state when a record is
    malformed.
    """
    if not isinstance(payload, dict):
        raise ImportDataError("Import data must be a JSON object")

    try:
        projects = [
            project_from_dict(raw)
            for raw in _collection(payload, configuration.PROJECTS_KEY)
        ]
        workers = [
            worker_from_dict(raw)
            for raw in _collection(payload, configuration.WORKERS_KEY)
        ]
        work_entries = [
            work_entry_from_dict(raw)
            for raw in _collection(payload, configuration.WORK_ENTRIES_KEY)
        ]
        for entry in work_entries:
            _check_variant_fields(cast(dict[str, Any], entry))
        attendance_records = [
            attendance_from_dict(raw)
            for raw in _collection(payload, configuration.ATTENDANCE_RECORDS_KEY)
        ]
    except ImportDataError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ImportDataError(f"Malformed import data: {e!r}") from e

    snapshot: Snapshot = {
        "projects": projects,
        "workers": workers,
        "work_entries": work_entries,
        "attendance_records": attendance_records,
    }
    theme = payload.get(configuration.THEME_KEY)
    if theme is not None:
        snapshot["theme"] = str(theme)
    locale = payload.get(configuration.LOCALE_KEY)
    if locale is not None:
        snapshot["locale"] = str(locale)
    return snapshot


def _merge_projects(local: list[Project], incoming: list[Project]) -> list[Project]:
    merged: dict[Optional[EntityId], Project] = {p["id"]: p for p in local}
    for project in incoming:
        if project["id"] == BUILTIN_PROJECT_ID:
            continue
        merged[project["id"]] = project
    if BUILTIN_PROJECT_ID not in merged:
        merged[BUILTIN_PROJECT_ID] = get_builtin_project()
    return list(merged.values())


def _merge_workers(local: list[Worker], incoming: list[Worker]) -> list[Worker]:
    merged: dict[Optional[EntityId], Worker] = {w["id"]: w for w in local}
    for worker in incoming:
        merged[worker["id"]] = worker
    return list(merged.values())


def _merge_work_entries(
    local: list[WorkEntry], incoming: list[WorkEntry]
) -> list[WorkEntry]:
    merged: dict[Optional[EntityId], WorkEntry] = {e["id"]: e for e in local}
    for entry in incoming:
        existing = merged.get(entry["id"])
        # Keep the version that ended last
        if existing is None or entry["end_time"] > existing["end_time"]:
            merged[entry["id"]] = entry
    return list(merged.values())


def merge_snapshot(local: Snapshot, incoming: Snapshot) -> Snapshot:
    """
    Merge an imported snapshot into the local one.

    - projects, workers: imported records overwrite by id, the built-in
      project is never overwritten and always present
    - work entries: on id collision the entry with the later end_time wins
    - attendance records: imported records overwrite by id
    - theme, locale: taken from the import when present
    """
    attendance = {r["id"]: r for r in local["attendance_records"]}
    for record in incoming["attendance_records"]:
        attendance[record["id"]] = record

    merged: Snapshot = {
        "projects": _merge_projects(local["projects"], incoming["projects"]),
        "workers": _merge_workers(local["workers"], incoming["workers"]),
        "work_entries": _merge_work_entries(
            local["work_entries"], incoming["work_entries"]
        ),
        "attendance_records": list(attendance.values()),
        "theme": incoming.get("theme") or local.get("theme"),
        "locale": incoming.get("locale") or local.get("locale"),
    }
    return merged


def local_snapshot() -> Snapshot:
    return {
        "projects": PROJECT_REPO.get_all_projects(),
        "workers": WORKER_REPO.get_all_workers(),
        "work_entries": WORK_ENTRY_REPO.get_all_work_entries(),
        "attendance_records": ATTENDANCE_REPO.get_all_records(),
        "theme": SETTINGS_REPO.get_theme(),
        "locale": SETTINGS_REPO.get_locale(),
    }


def import_snapshot(payload: Any) -> Snapshot:
    """
    Merge a payload into the store, persist it and reload every repository
    from disk.
    """
    incoming = parse_payload(payload)
    merged = merge_snapshot(local_snapshot(), incoming)

    PROJECT_REPO.set_all_projects(merged["projects"])
    WORKER_REPO.set_all_workers(merged["workers"])
    WORK_ENTRY_REPO.set_all_work_entries(merged["work_entries"])
    ATTENDANCE_REPO.set_all_records(merged["attendance_records"])
    if incoming.get("theme") is not None:
        SETTINGS_REPO.set_theme(incoming["theme"])  # type: ignore[arg-type]
    if incoming.get("locale") is not None:
        SETTINGS_REPO.set_locale(incoming["locale"])  # type: ignore[arg-type]

    try:
        flush_all()
    except OSError as e:
        logger.warning("writing imported data failed: %s", e)
        reload_all()
        raise ImportDataError(
            f"Could not save imported data, it may be partly saved: {e}"
        ) from e

    # Clean-slate reload from what was persisted
    reload_all()

    logger.info(
        "imported %d projects, %d workers, %d work entries, %d attendance records",
        len(incoming["projects"]),
        len(incoming["workers"]),
        len(incoming["work_entries"]),
        len(incoming["attendance_records"]),
    )
    return merged


def read_import_file(path: Path) -> Any:
    try:
        return json.loads(path.read_text())
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("import of %s failed: %s", path, e)
        raise ImportDataError(f"Could not read {path}: {e}") from e


def export_snapshot() -> dict[str, Any]:
    """Every store key that holds data, exactly as persisted."""
    flush_all()
    exported: dict[str, Any] = {}
    for key in configuration.STORE_KEYS:
        value = store.read_key(key)
        if value is not None:
            exported[key] = value
    return exported


def default_export_file_name() -> str:
    return f"solar_work_count_backup_{today_local().isoformat()}.json"


def write_export(path: Path) -> Path:
    if path.is_dir():
        path = path / default_export_file_name()
    path.write_text(json.dumps(export_snapshot(), indent=2, ensure_ascii=False))
    logger.info("exported data to %s", path)
    return path
