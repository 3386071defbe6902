# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from solarwork import configuration
from solarwork.model.entity_id import EntityId, generate_entity_id
from solarwork.model.work_entry import WorkEntry
from solarwork.repository import store
from solarwork.repository.serialize import work_entry_from_dict, work_entry_to_dict


class WorkEntryRepository:
    def __init__(self) -> None:
        self._work_entries: Optional[list[WorkEntry]] = None
        self.is_dirty = False

    @property
    def work_entries(self) -> list[WorkEntry]:
        if self._work_entries is None:
            self.__load_data()
        if self._work_entries is None:
            raise ValueError()
        return self._work_entries

    def __load_data(self) -> None:
        raw_entries = store.read_key(configuration.WORK_ENTRIES_KEY) or []
        self._work_entries = [work_entry_from_dict(raw) for raw in raw_entries]

    def __save_data(self, work_entries: list[WorkEntry]) -> None:
        store.write_key(
            configuration.WORK_ENTRIES_KEY,
            [work_entry_to_dict(entry) for entry in work_entries],
        )

    def flush(self) -> bool:
        if self._work_entries is not None and self.is_dirty:
            self.__save_data(self._work_entries)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._work_entries = None
        self.is_dirty = False

    def save_new_work_entry(self, entry: WorkEntry) -> EntityId:
        self.is_dirty = True

        entry["id"] = generate_entity_id()
        # Newest first, like the records list
        self.work_entries.insert(0, entry)
        return entry["id"]

    def replace_work_entry(self, entry: WorkEntry) -> None:
        self.is_dirty = True

        self._work_entries = [
            deepcopy(entry) if existing["id"] == entry["id"] else existing
            for existing in self.work_entries
        ]

    def delete_work_entry(self, id: EntityId) -> None:
        self.is_dirty = True
        self._work_entries = [
            entry for entry in self.work_entries if entry["id"] != id
        ]

    def get_all_work_entries(self) -> list[WorkEntry]:
        return deepcopy(self.work_entries)

    def find_work_entry(self, id: EntityId) -> Optional[WorkEntry]:
        for entry in self.work_entries:
            if entry["id"] == id:
                return deepcopy(entry)
        return None

    def get_work_entries_for_project(self, project_id: EntityId) -> list[WorkEntry]:
        return deepcopy(
            [entry for entry in self.work_entries if entry["project_id"] == project_id]
        )

    def set_all_work_entries(self, work_entries: list[WorkEntry]) -> None:
        self.is_dirty = True
        self._work_entries = deepcopy(work_entries)


WORK_ENTRY_REPO = WorkEntryRepository()
