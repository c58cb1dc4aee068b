# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from sitegantt.model.entity_id import EntityId
from sitegantt.model.task import Task
from sitegantt.model.task_key_scope import TaskKeyScope
from sitegantt.time import parse_instant_optional

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26


def alpha_key(index: int) -> str:
    """
    Spreadsheet-column style key for a 0-based ordinal.

    0 -> "A", 25 -> "Z", 26 -> "AA", 27 -> "AB", 701 -> "ZZ", 702 -> "AAA"
    """
    if index < 0:
        raise ValueError(f"alpha_key() expects a non-negative index, got {index}")

    key = ""
    remaining = index
    while remaining >= 0:
        key = chr(ord("A") + remaining % ALPHABET_SIZE) + key
        remaining = remaining // ALPHABET_SIZE - 1
    return key


def sort_by_creation(tasks: list[Task]) -> list[Task]:
    """
    Stable ascending sort on `created_at`.

    Tasks without a creation instant keep their relative order and go last.
    """
    created: list[tuple[pendulum.DateTime, Task]] = []
    uncreated: list[Task] = []
    for task in tasks:
        created_at = parse_instant_optional(task["created_at"], "created_at")
        if created_at is None:
            uncreated.append(task)
        else:
            created.append((created_at, task))

    created.sort(key=lambda pair: pair[0])
    return [task for _, task in created] + uncreated


def assign_task_keys(
    tasks: list[Task], scope: TaskKeyScope = TaskKeyScope.PROJECT
) -> dict[EntityId, str]:
    """
    Map every task id to its sequential key.

    With project scope each project_id (tasks without a project form one group
    of their own) restarts at "A"; with global scope one sequence covers all
    tasks.
    """
    groups: dict[Optional[EntityId], list[Task]] = {}
    for task in tasks:
        group_id = task["project_id"] if scope == TaskKeyScope.PROJECT else None
        groups.setdefault(group_id, []).append(task)

    task_keys: dict[EntityId, str] = {}
    for group_tasks in groups.values():
        for index, task in enumerate(sort_by_creation(group_tasks)):
            task_keys[task["id"]] = alpha_key(index)

    logger.debug(
        "assigned %d task keys across %d %s group(s)",
        len(task_keys),
        len(groups),
        scope.value,
    )
    return task_keys
