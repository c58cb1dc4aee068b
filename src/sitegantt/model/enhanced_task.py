# SPDX-License-Identifier: MIT

from typing import Optional

from sitegantt.model.position import TaskPosition
from sitegantt.model.status import EffectiveStatus
from sitegantt.model.task import Task


class EnhancedTask(Task):
    project_name: str
    project_client: Optional[str]
    is_overdue: bool
    days_until_deadline: Optional[int]
    effective_status: Optional[EffectiveStatus]
    task_key: str
    position: TaskPosition
