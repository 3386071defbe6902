# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from solarwork import configuration
from solarwork.model.entity_id import EntityId, generate_entity_id
from solarwork.model.project import Project
from solarwork.repository import store
from solarwork.repository.serialize import project_from_dict, project_to_dict
from solarwork.template.project import BUILTIN_PROJECT_ID, get_builtin_project


class ProjectRepository:
    def __init__(self) -> None:
        self._projects: Optional[list[Project]] = None
        self.is_dirty = False

    @property
    def projects(self) -> list[Project]:
        if self._projects is None:
            self.__load_data()
        if self._projects is None:
            raise ValueError()
        return self._projects

    def __load_data(self) -> None:
        raw_projects = store.read_key(configuration.PROJECTS_KEY)
        if raw_projects is None:
            # First start: seed the built-in project
            self._projects = [get_builtin_project()]
            self.is_dirty = True
            return
        self._projects = [project_from_dict(raw) for raw in raw_projects]
        if not any(p["id"] == BUILTIN_PROJECT_ID for p in self._projects):
            self._projects.insert(0, get_builtin_project())
            self.is_dirty = True

    def __save_data(self, projects: list[Project]) -> None:
        store.write_key(
            configuration.PROJECTS_KEY,
            [project_to_dict(project) for project in projects],
        )

    def flush(self) -> bool:
        if self._projects is not None and self.is_dirty:
            self.__save_data(self._projects)
            self.is_dirty = False
            return True
        return False

    def reload(self) -> None:
        self._projects = None
        self.is_dirty = False

    def save_new_project(self, project: Project) -> EntityId:
        self.is_dirty = True

        project["id"] = generate_entity_id()
        # Deduplicate tables, keep order
        project["tables"] = list(dict.fromkeys(project["tables"]))

        self.projects.append(project)
        return project["id"]

    def modify_project(
        self,
        id: EntityId,
        name: Optional[str] = None,
        status: Optional[str] = None,
        tables: Optional[list[str]] = None,
        worker_ids: Optional[list[EntityId]] = None,
    ) -> None:
        self.is_dirty = True

        project = self.__find(id)
        if name is not None:
            project["name"] = name
        if status is not None:
            project["status"] = str(status)
        if tables is not None:
            project["tables"] = list(dict.fromkeys(tables))
        if worker_ids is not None:
            project["worker_ids"] = list(dict.fromkeys(worker_ids))

    def delete_project(self, id: EntityId) -> None:
        self.is_dirty = True
        self._projects = [p for p in self.projects if p["id"] != id]

    def get_all_projects(self) -> list[Project]:
        return deepcopy(self.projects)

    def get_project(self, id: EntityId) -> Project:
        return deepcopy(self.__find(id))

    def find_project(self, id: EntityId) -> Optional[Project]:
        for project in self.projects:
            if project["id"] == id:
                return deepcopy(project)
        return None

    def project_exists(self, id: EntityId) -> bool:
        return any(project["id"] == id for project in self.projects)

    def set_all_projects(self, projects: list[Project]) -> None:
        self.is_dirty = True
        self._projects = deepcopy(projects)

    def __find(self, id: EntityId) -> Project:
        return [project for project in self.projects if project["id"] == id][0]


PROJECT_REPO = ProjectRepository()
