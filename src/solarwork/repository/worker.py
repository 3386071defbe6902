# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from solarwork import configuration
from solarwork.model.entity_id import EntityId, generate_entity_id
from solarwork.model.worker import Worker
from solarwork.repository import store
from solarwork.repository.serialize import worker_from_dict, worker_to_dict


class WorkerRepository:
    def __init__(self) -> None:
        self._workers: Optional[list[Worker]] = None
        self.is_dirty = False

    @property
    def workers(self) -> list[Worker]:
        if self._workers is None:
            self.__load_data()
        if self._workers is None:
            raise ValueError()
        return self._workers

    def __load_data(self) -> None:
        raw_workers = store.read_key(configuration.WORKERS_KEY) or []
        self._workers = [worker_from_dict(raw) for raw in raw_workers]

    def __save_data(self, workers: list[Worker]) -> None:
        store.write_key(
            configuration.WORKERS_KEY, [worker_to_dict(worker) for worker in workers]
        )

    def flush(self) -> bool:
        if self._workers is not None and self.is_dirty:
            self.__save_data(self._workers)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._workers = None
        self.is_dirty = False

    def save_new_worker(self, worker: Worker) -> EntityId:
        self.is_dirty = True

        worker["id"] = generate_entity_id()
        self.workers.append(worker)
        return worker["id"]

    def modify_worker(
        self,
        id: EntityId,
        name: Optional[str] = None,
        rate: Optional[float] = None,
        panel_rate: Optional[float] = None,
        cable_rate_small: Optional[float] = None,
        cable_rate_medium: Optional[float] = None,
        cable_rate_large: Optional[float] = None,
    ) -> None:
        self.is_dirty = True

        worker = [worker for worker in self.workers if worker["id"] == id][0]
        if name is not None:
            worker["name"] = name
        if rate is not None:
            worker["rate"] = rate
        if panel_rate is not None:
            worker["panel_rate"] = panel_rate
        if cable_rate_small is not None:
            worker["cable_rate_small"] = cable_rate_small
        if cable_rate_medium is not None:
            worker["cable_rate_medium"] = cable_rate_medium
        if cable_rate_large is not None:
            worker["cable_rate_large"] = cable_rate_large

    def delete_worker(self, id: EntityId) -> None:
        self.is_dirty = True
        self._workers = [worker for worker in self.workers if worker["id"] != id]

    def get_all_workers(self) -> list[Worker]:
        return deepcopy(self.workers)

    def find_worker(self, id: EntityId) -> Optional[Worker]:
        for worker in self.workers:
            if worker["id"] == id:
                return deepcopy(worker)
        return None

    def set_all_workers(self, workers: list[Worker]) -> None:
        self.is_dirty = True
        self._workers = deepcopy(workers)


WORKER_REPO = WorkerRepository()
