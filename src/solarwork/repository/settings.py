# SPDX-License-Identifier: MIT

from typing import Optional

from solarwork import configuration
from solarwork.repository import store


class SettingsRepository:
    """Theme and locale, each persisted under its own store key."""

    def __init__(self) -> None:
        self._values: Optional[dict[str, Optional[str]]] = None
        self.is_dirty = False

    @property
    def values(self) -> dict[str, Optional[str]]:
        if self._values is None:
            self.__load_data()
        if self._values is None:
            raise ValueError()
        return self._values

    def __load_data(self) -> None:
        self._values = {
            configuration.THEME_KEY: store.read_key(configuration.THEME_KEY),
            configuration.LOCALE_KEY: store.read_key(configuration.LOCALE_KEY),
        }

    def __save_data(self, values: dict[str, Optional[str]]) -> None:
        for key, value in values.items():
            if value is not None:
                store.write_key(key, value)

    def flush(self) -> bool:
        if self._values is not None and self.is_dirty:
            self.__save_data(self._values)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._values = None
        self.is_dirty = False

    def get_theme(self) -> Optional[str]:
        return self.values[configuration.THEME_KEY]

    def set_theme(self, theme: str) -> None:
        self.is_dirty = True
        self.values[configuration.THEME_KEY] = theme

    def get_locale(self) -> Optional[str]:
        return self.values[configuration.LOCALE_KEY]

    def set_locale(self, locale: str) -> None:
        self.is_dirty = True
        self.values[configuration.LOCALE_KEY] = locale


SETTINGS_REPO = SettingsRepository()
