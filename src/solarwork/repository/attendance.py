# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from solarwork import configuration
from solarwork.model.attendance import AttendanceRecord
from solarwork.repository import store
from solarwork.repository.serialize import attendance_from_dict, attendance_to_dict


class AttendanceRepository:
    def __init__(self) -> None:
        self._records: Optional[list[AttendanceRecord]] = None
        self.is_dirty = False

    @property
    def records(self) -> list[AttendanceRecord]:
        if self._records is None:
            self.__load_data()
        if self._records is None:
            raise ValueError()
        return self._records

    def __load_data(self) -> None:
        raw_records = store.read_key(configuration.ATTENDANCE_RECORDS_KEY) or []
        self._records = [attendance_from_dict(raw) for raw in raw_records]

    def __save_data(self, records: list[AttendanceRecord]) -> None:
        store.write_key(
            configuration.ATTENDANCE_RECORDS_KEY,
            [attendance_to_dict(record) for record in records],
        )

    def flush(self) -> bool:
        if self._records is not None and self.is_dirty:
            self.__save_data(self._records)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._records = None
        self.is_dirty = False

    def upsert_record(self, record: AttendanceRecord) -> None:
        self.is_dirty = True

        existing_ids = [existing["id"] for existing in self.records]
        if record["id"] in existing_ids:
            self.records[existing_ids.index(record["id"])] = deepcopy(record)
        else:
            self.records.append(deepcopy(record))

    def find_record(self, id: str) -> Optional[AttendanceRecord]:
        for record in self.records:
            if record["id"] == id:
                return deepcopy(record)
        return None

    def get_all_records(self) -> list[AttendanceRecord]:
        return deepcopy(self.records)

    def set_all_records(self, records: list[AttendanceRecord]) -> None:
        self.is_dirty = True
        self._records = deepcopy(records)


ATTENDANCE_REPO = AttendanceRepository()
