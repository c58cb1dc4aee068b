# SPDX-License-Identifier: MIT

from sitegantt.model.enhanced_task import EnhancedTask
from sitegantt.model.gantt_layout import GanttStats
from sitegantt.model.status import EffectiveStatus, TaskStatus


def compute_stats(tasks: list[EnhancedTask]) -> GanttStats:
    total = len(tasks)
    progress_values = [task["progress"] or 0 for task in tasks]
    return {
        "total": total,
        "completed": sum(1 for t in tasks if t["status"] == TaskStatus.COMPLETED),
        "in_progress": sum(1 for t in tasks if t["status"] == TaskStatus.IN_PROGRESS),
        "delayed": sum(
            1 for t in tasks if t["effective_status"] == EffectiveStatus.DELAYED
        ),
        "avg_progress": round(sum(progress_values) / total) if total else 0,
    }
