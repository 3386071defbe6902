# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from solarwork import configuration
from solarwork.logging_config import configure_logging
from solarwork.repository.configuration import CONFIGURATION_REPO
from solarwork.repository.project import PROJECT_REPO
from solarwork.repository.settings import SETTINGS_REPO
from solarwork.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])

    __ensure_data(config)


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data(config: configuration.Configuration) -> None:
    # Loading seeds the built-in project on first start
    PROJECT_REPO.get_all_projects()
    PROJECT_REPO.flush()

    if SETTINGS_REPO.get_theme() is None:
        SETTINGS_REPO.set_theme(config["default_theme"])
    if SETTINGS_REPO.get_locale() is None:
        SETTINGS_REPO.set_locale(config["default_locale"])
    SETTINGS_REPO.flush()
