# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from sitegantt.model.entity_id import EntityId
from sitegantt.model.status import Priority, TaskStatus


class Task(TypedDict):
    id: EntityId
    title: str
    description: Optional[str]
    project_id: Optional[EntityId]
    start_date: Optional[str]
    end_date: Optional[str]
    status: Optional[TaskStatus]
    priority: Optional[Priority]
    progress: Optional[int]
    created_at: Optional[str]
