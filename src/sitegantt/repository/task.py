# SPDX-License-Identifier: MIT

import datetime
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from sitegantt import configuration
from sitegantt.model.status import Priority, TaskStatus
from sitegantt.model.task import Task
from sitegantt.time import date_to_iso_str


def stored_date_str(value: Any) -> Optional[str]:
    """
    YAML resolves bare `2024-03-15` scalars to date objects; the engine expects
    the stored strings, so dates are turned back into ISO text here.
    """
    if value is None:
        return None
    if isinstance(value, datetime.date):
        return date_to_iso_str(value)
    return str(value)


def load_records(raw_data: Any, key: str) -> list[dict[str, Any]]:
    if raw_data is None:
        return []
    if not isinstance(raw_data, dict) or not isinstance(raw_data.get(key), list):
        raise ValueError(f"expected a mapping with a '{key}' list")

    records = cast(list[Any], raw_data[key])
    for index, record in enumerate(records):
        if not isinstance(record, dict) or record.get("id") is None:
            raise ValueError(f"{key}[{index}]: each record needs an 'id'")
    return cast(list[dict[str, Any]], records)


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        raw_data = None
        if configuration.DATA_TASKS_PATH.is_file():
            raw_data = load(configuration.DATA_TASKS_PATH.read_text(), Loader=Loader)
        self._tasks = [
            self.__convert_task_for_deserialization(raw_task)
            for raw_task in load_records(raw_data, "tasks")
        ]

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        status = task.get("status")
        priority = task.get("priority")
        progress = task.get("progress")
        return {
            "id": str(task["id"]),
            "title": str(task.get("title") or ""),
            "description": task.get("description"),
            "project_id": (
                str(task["project_id"]) if task.get("project_id") is not None else None
            ),
            "start_date": stored_date_str(task.get("start_date")),
            "end_date": stored_date_str(task.get("end_date")),
            "status": TaskStatus(status) if status is not None else None,
            "priority": Priority(priority) if priority is not None else None,
            "progress": int(progress) if progress is not None else None,
            "created_at": stored_date_str(task.get("created_at")),
        }

    def reload(self) -> None:
        self._tasks = None

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)


TASK_REPO = TaskRepository()
