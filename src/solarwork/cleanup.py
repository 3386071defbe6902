# SPDX-License-Identifier: MIT

import atexit

from solarwork.repository.attendance import ATTENDANCE_REPO
from solarwork.repository.configuration import CONFIGURATION_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.settings import SETTINGS_REPO
from solarwork.repository.work_entry import WORK_ENTRY_REPO
from solarwork.repository.worker import WORKER_REPO


def flush_all() -> None:
    CONFIGURATION_REPO.flush()

    # Each collection is written whole; there is no transaction across keys
    PROJECT_REPO.flush()
    WORKER_REPO.flush()
    WORK_ENTRY_REPO.flush()
    ATTENDANCE_REPO.flush()
    SETTINGS_REPO.flush()


def reload_all() -> None:
    """Drop every cached collection so the next access reads from disk."""
    CONFIGURATION_REPO.reload()
    PROJECT_REPO.reload()
    WORKER_REPO.reload()
    WORK_ENTRY_REPO.reload()
    ATTENDANCE_REPO.reload()
    SETTINGS_REPO.reload()


def register_cleanup() -> None:
    atexit.register(flush_all)
