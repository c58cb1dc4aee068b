# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

from sitegantt.model.enhanced_task import EnhancedTask
from sitegantt.model.filter import TaskFilter
from sitegantt.model.status import EffectiveStatus
from sitegantt.query.filter_type import ALL, FilterType


def generate_filter(task_filter: Optional[TaskFilter]) -> "Predicate":
    """Build an And of one predicate per criterion that narrows the task list."""
    filter_obj = And()
    if task_filter is None:
        return filter_obj

    for filter_type in FilterType:
        if filter_type == FilterType.AND:
            continue
        value = task_filter.get(filter_type_key(filter_type))
        if value is None or value == "" or value == ALL:
            continue
        filter_obj.add_predicate(filter_factory(filter_type, value))
    return filter_obj


def filter_type_key(filter_type: FilterType) -> str:
    if filter_type == FilterType.PROJECT:
        return "project_id"
    return filter_type.value


def filter_factory(filter_type: FilterType, value: str) -> "Predicate":
    match filter_type:
        case FilterType.STATUS:
            return Status(value)
        case FilterType.PRIORITY:
            return Priority(value)
        case FilterType.PROJECT:
            return Project(value)
        case FilterType.SEARCH:
            return Search(value)
    raise ValueError(f"No predicate for filter type {filter_type!r}")


def filter_tasks(
    tasks: list[EnhancedTask], task_filter: Optional[TaskFilter]
) -> list[EnhancedTask]:
    return generate_filter(task_filter).filter(tasks)


class Predicate(ABC):
    @abstractmethod
    def matches(self, task: EnhancedTask) -> bool: ...

    def filter(self, tasks: list[EnhancedTask]) -> list[EnhancedTask]:
        return [task for task in tasks if self.matches(task)]


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def matches(self, task: EnhancedTask) -> bool:
        return all(predicate.matches(task) for predicate in self.predicates)


class Status(Predicate):
    """
    Stored-status match, except "delayed" which only exists as an effective
    status.
    """

    def __init__(self, status: str) -> None:
        self.status = status

    def matches(self, task: EnhancedTask) -> bool:
        if self.status == EffectiveStatus.DELAYED:
            return task["effective_status"] == EffectiveStatus.DELAYED
        return task["status"] is not None and task["status"] == self.status


class Priority(Predicate):
    def __init__(self, priority: str) -> None:
        self.priority = priority

    def matches(self, task: EnhancedTask) -> bool:
        return task["priority"] is not None and task["priority"] == self.priority


class Project(Predicate):
    def __init__(self, project_id: str) -> None:
        self.project_id = project_id

    def matches(self, task: EnhancedTask) -> bool:
        return task["project_id"] == self.project_id


class Search(Predicate):
    """Case-insensitive substring search over the task's descriptive text."""

    def __init__(self, term: str) -> None:
        self.term = term.lower()

    def matches(self, task: EnhancedTask) -> bool:
        haystacks = (
            task["title"],
            task["project_name"],
            task["project_client"],
            task["description"],
        )
        return any(
            haystack is not None and self.term in haystack.lower()
            for haystack in haystacks
        )
