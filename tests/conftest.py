"""
Shared fixtures.

Every test runs against a fresh data directory and config file under
tmp_path, with the repository singletons emptied before and after.
"""

from pathlib import Path
from typing import Iterator

import pytest
from yaml import dump

from solarwork import configuration
from solarwork.cleanup import reload_all
from solarwork.view import state as view_state


@pytest.fixture(autouse=True)
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    config_path = tmp_path / "config"
    config_path.mkdir()
    data_path = tmp_path / "data"
    data_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_BLOBS_DIR", data_path / "blobs")

    configuration.APP_CONFIG_PATH.write_text(
        dump(configuration.get_default_configuration())
    )

    reload_all()
    view_state.set_show_header(True)
    yield data_path
    reload_all()
