"""Shared fixtures for sitegantt tests."""

from pathlib import Path
from typing import Any, Callable, Optional

import pendulum
import pytest

from sitegantt import configuration
from sitegantt import time as site_time
from sitegantt.model.status import Priority, TaskStatus
from sitegantt.model.task import Task
from sitegantt.repository.configuration import CONFIGURATION_REPO
from sitegantt.repository.project import PROJECT_REPO
from sitegantt.repository.task import TASK_REPO
from sitegantt.view import state as view_state

TaskFactory = Callable[..., Task]


@pytest.fixture
def make_task() -> TaskFactory:
    """Build a Task record with sensible defaults; keyword arguments override."""

    def _make_task(
        id: str,
        project_id: Optional[str] = "p1",
        start_date: Optional[str] = "2024-03-01",
        end_date: Optional[str] = "2024-03-10",
        status: Optional[TaskStatus] = TaskStatus.IN_PROGRESS,
        created_at: Optional[str] = "2024-01-01T00:00:00Z",
        **overrides: Any,
    ) -> Task:
        task: Task = {
            "id": id,
            "title": f"Task {id}",
            "description": None,
            "project_id": project_id,
            "start_date": start_date,
            "end_date": end_date,
            "status": status,
            "priority": Priority.MEDIUM,
            "progress": 0,
            "created_at": created_at,
        }
        task.update(overrides)  # type: ignore[typeddict-item]
        return task

    return _make_task


@pytest.fixture
def isolated_storage(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration and data files at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()
    data_path.mkdir()

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", data_path / "tasks.yaml")
    monkeypatch.setattr(
        configuration, "DATA_PROJECTS_PATH", data_path / "projects.yaml"
    )

    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_tasks", None)
    monkeypatch.setattr(PROJECT_REPO, "_projects", None)
    view_state.set_show_header(True)

    return tmp_path


@pytest.fixture
def frozen_clock(monkeypatch: pytest.MonkeyPatch) -> pendulum.Date:
    """Fix the UTC clock at 2024-03-15 02:00, which is 10:00 at the site."""
    monkeypatch.setattr(
        site_time, "now_utc", lambda: pendulum.datetime(2024, 3, 15, 2, 0, tz="UTC")
    )
    return pendulum.date(2024, 3, 15)
