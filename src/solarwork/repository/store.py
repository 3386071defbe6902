# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from solarwork import configuration


def read_key(key: str) -> Any:
    """Read the whole value stored under key, or None if it was never written."""
    path = configuration.store_key_path(key)
    if not path.is_file():
        return None
    data = load(path.read_text(), Loader=Loader)
    if data is None:
        return None
    return data.get(key)


def write_key(key: str, value: Any) -> None:
    path = configuration.store_key_path(key)
    path.write_text(dump({key: value}, Dumper=Dumper))


def key_exists(key: str) -> bool:
    return configuration.store_key_path(key).is_file()
