# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from solarwork import configuration
from solarwork.errors import BlobStoreError
from solarwork.model.entity_id import EntityId

logger = logging.getLogger(__name__)


class BlobRepository:
    """One binary document (a site plan) per project, stored as a file."""

    def __path(self, project_id: EntityId) -> Path:
        return configuration.DATA_BLOBS_DIR / f"{project_id}.bin"

    def put(self, project_id: EntityId, data: bytes) -> None:
        try:
            configuration.DATA_BLOBS_DIR.mkdir(parents=True, exist_ok=True)
            self.__path(project_id).write_bytes(data)
        except OSError as e:
            logger.warning("saving plan for project %s failed: %s", project_id, e)
            raise BlobStoreError(f"Could not save plan: {e}") from e

    def get(self, project_id: EntityId) -> Optional[bytes]:
        path = self.__path(project_id)
        if not path.is_file():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            logger.warning("reading plan for project %s failed: %s", project_id, e)
            raise BlobStoreError(f"Could not read plan: {e}") from e

    def delete(self, project_id: EntityId) -> None:
        path = self.__path(project_id)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("deleting plan for project %s failed: %s", project_id, e)
            raise BlobStoreError(f"Could not delete plan: {e}") from e

    def exists(self, project_id: EntityId) -> bool:
        return self.__path(project_id).is_file()


BLOB_REPO = BlobRepository()
