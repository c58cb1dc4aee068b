# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from sitegantt import configuration
from sitegantt.model.entity_id import EntityId
from sitegantt.model.project import Project
from sitegantt.repository.task import load_records, stored_date_str


class ProjectRepository:
    def __init__(self) -> None:
        self._projects: Optional[list[Project]] = None

    @property
    def projects(self) -> list[Project]:
        if self._projects is None:
            self.__load_data()
        if self._projects is None:
            raise ValueError()
        return self._projects

    def __load_data(self) -> None:
        raw_data = None
        if configuration.DATA_PROJECTS_PATH.is_file():
            raw_data = load(
                configuration.DATA_PROJECTS_PATH.read_text(), Loader=Loader
            )
        self._projects = [
            self.__convert_project_for_deserialization(raw_project)
            for raw_project in load_records(raw_data, "projects")
        ]

    def __convert_project_for_deserialization(self, project: dict[str, Any]) -> Project:
        return {
            "id": str(project["id"]),
            "name": str(project.get("name") or ""),
            "client": project.get("client"),
            "start_date": stored_date_str(project.get("start_date")),
            "end_date": stored_date_str(project.get("end_date")),
        }

    def reload(self) -> None:
        self._projects = None

    def get_all_projects(self) -> list[Project]:
        return deepcopy(self.projects)

    def get_project(self, id: EntityId) -> Project:
        for project in self.projects:
            if project["id"] == id:
                return deepcopy(project)
        raise ValueError(f"project not found: {id}")


PROJECT_REPO = ProjectRepository()
