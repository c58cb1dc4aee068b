# SPDX-License-Identifier: MIT

from typing import NotRequired, TypedDict


class TaskFilter(TypedDict):
    """
    Filter bar criteria; omitted keys and the value "all" match every task.

    `status` accepts any TaskStatus value or "delayed", which is matched
    against the effective status.
    """

    status: NotRequired[str]
    priority: NotRequired[str]
    project_id: NotRequired[str]
    search: NotRequired[str]
