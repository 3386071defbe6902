# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "solarwork"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_BLOBS_DIR: Path = DATA_PATH / "blobs"

# Store keys, one YAML file per key in DATA_PATH
PROJECTS_KEY = "projects"
WORKERS_KEY = "workers"
WORK_ENTRIES_KEY = "workEntries"
ATTENDANCE_RECORDS_KEY = "attendanceRecords"
THEME_KEY = "theme"
LOCALE_KEY = "locale"

STORE_KEYS = [
    PROJECTS_KEY,
    WORKERS_KEY,
    WORK_ENTRIES_KEY,
    ATTENDANCE_RECORDS_KEY,
    THEME_KEY,
    LOCALE_KEY,
]


class Configuration(TypedDict):
    data_path: Optional[str]
    log_level: str
    show_header: bool
    default_theme: str
    default_locale: str
    max_workers_per_entry: NotRequired[int]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "log_level": "WARNING",
        "show_header": True,
        "default_theme": "dusk",
        "default_locale": "en",
        "max_workers_per_entry": 2,
    }


def store_key_path(key: str) -> Path:
    return DATA_PATH / f"{key}.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    global DATA_PATH, DATA_BLOBS_DIR

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_BLOBS_DIR

    DATA_PATH = data_path
    DATA_BLOBS_DIR = DATA_PATH / "blobs"
