# SPDX-License-Identifier: MIT

from solarwork.model.worker import Worker


def get_worker_template() -> Worker:
    return {
        "id": None,
        "name": "",
        "rate": None,
        "panel_rate": None,
        "cable_rate_small": None,
        "cable_rate_medium": None,
        "cable_rate_large": None,
    }
