# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional

import pendulum

from sitegantt.model.status import EffectiveStatus, TaskStatus
from sitegantt.time import days_between


class Deadline(NamedTuple):
    is_overdue: bool
    days_until_deadline: Optional[int]
    effective_status: Optional[EffectiveStatus]


def is_overdue(
    end_date: Optional[pendulum.Date],
    status: Optional[TaskStatus],
    today: pendulum.Date,
) -> bool:
    if status == TaskStatus.COMPLETED or end_date is None:
        return False
    return end_date < today


def days_until_deadline(
    end_date: Optional[pendulum.Date],
    status: Optional[TaskStatus],
    today: pendulum.Date,
) -> Optional[int]:
    if status == TaskStatus.COMPLETED or end_date is None:
        return None
    return days_between(today, end_date)


def effective_status(
    status: Optional[TaskStatus], overdue: bool
) -> Optional[EffectiveStatus]:
    if overdue and status != TaskStatus.COMPLETED:
        return EffectiveStatus.DELAYED
    return EffectiveStatus.from_task_status(status)


def evaluate_deadline(
    end_date: Optional[pendulum.Date],
    status: Optional[TaskStatus],
    today: pendulum.Date,
) -> Deadline:
    """
    Deadline state of a task against a single, already sampled `today`.

    Completed tasks are never overdue and carry no day count.
    """
    overdue = is_overdue(end_date, status, today)
    return Deadline(
        is_overdue=overdue,
        days_until_deadline=days_until_deadline(end_date, status, today),
        effective_status=effective_status(status, overdue),
    )


def deadline_caption(days: Optional[int], overdue: bool) -> Optional[str]:
    if days is None:
        return None
    if overdue:
        count = abs(days)
        return f"{count} day{'s' if count != 1 else ''} overdue"
    if days == 0:
        return "Due today"
    return f"{days} day{'s' if days != 1 else ''} left"
