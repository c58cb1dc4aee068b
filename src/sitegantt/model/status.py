# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional


class TaskStatus(StrEnum):
    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"


class EffectiveStatus(StrEnum):
    """Displayed status: a TaskStatus, or DELAYED when an open task is overdue."""

    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    DELAYED = "delayed"

    @classmethod
    def from_task_status(
        cls, status: Optional[TaskStatus]
    ) -> Optional["EffectiveStatus"]:
        if status is None:
            return None
        return cls(status.value)


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def status_display(status: Optional[StrEnum]) -> str:
    """'in-progress' -> 'In Progress'; a task without a status reads 'Not Started'."""
    if status is None:
        return "Not Started"
    return " ".join(word.capitalize() for word in status.value.split("-"))
