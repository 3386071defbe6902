# SPDX-License-Identifier: MIT

from solarwork.model.entity_id import EntityId
from solarwork.model.project import Project
from solarwork.model.work_type import ProjectStatus

BUILTIN_PROJECT_ID: EntityId = "zarasai_predefined"


def get_project_template() -> Project:
    return {
        "id": None,
        "name": "",
        "status": ProjectStatus.ACTIVE,
        "tables": [],
        "worker_ids": [],
    }


def get_builtin_project() -> Project:
    project = get_project_template()
    project["id"] = BUILTIN_PROJECT_ID
    project["name"] = "Zarasai"
    return project
