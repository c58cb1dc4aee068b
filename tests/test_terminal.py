"""Tests for the command line interface."""

import pendulum
import pytest
import typer
from typer.testing import CliRunner

from sitegantt import configuration
from sitegantt.model.view_mode import ViewMode
from sitegantt.repository.configuration import CONFIGURATION_REPO
from sitegantt.terminal.app import app
from sitegantt.terminal.parse import parse_date

runner = CliRunner()


def invoke(args):
    return runner.invoke(app, args, env={"COLUMNS": "200"})

TASKS_YAML = """
tasks:
  - id: t1
    title: Pour slab
    project_id: p1
    start_date: 2024-03-01
    end_date: 2024-03-10
    status: in-progress
    priority: high
    progress: 40
    created_at: 2024-01-01T00:00:00Z
  - id: t2
    title: Roofing
    project_id: p1
    start_date: 2024-03-12
    end_date: 2024-04-02
    status: planning
    priority: low
    progress: 0
    created_at: 2024-01-02T00:00:00Z
"""

PROJECTS_YAML = """
projects:
  - id: p1
    name: Harbour Tower
    client: Acme Builders
"""


@pytest.fixture
def data_files(isolated_storage, frozen_clock):
    configuration.DATA_TASKS_PATH.write_text(TASKS_YAML)
    configuration.DATA_PROJECTS_PATH.write_text(PROJECTS_YAML)
    return isolated_storage


# === Date parsing ===


TODAY = pendulum.date(2024, 3, 15)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-02", pendulum.date(2024, 1, 2)),
        ("t", TODAY),
        ("today", TODAY),
        ("y", pendulum.date(2024, 3, 14)),
        ("tomorrow", pendulum.date(2024, 3, 16)),
        ("-7", pendulum.date(2024, 3, 8)),
        (3, pendulum.date(2024, 3, 18)),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value, TODAY) == expected


def test_parse_date_none():
    assert parse_date(None, TODAY) is None


@pytest.mark.parametrize("value", ["someday", "2024-13-01", "15.03.2024"])
def test_parse_date_rejects_bad_input(value):
    with pytest.raises(typer.BadParameter):
        parse_date(value, TODAY)


# === view ===


def test_view_gantt(data_files):
    result = invoke(["view", "gantt", "--mode", "monthly"])
    assert result.exit_code == 0, result.output
    assert "Pour slab" in result.output
    assert "Roofing" in result.output
    assert "Monthly - March 2024" in result.output
    assert "5 days overdue" in result.output


def test_view_gantt_aliases_and_filters(data_files):
    result = invoke(["v", "g", "-m", "weekly", "--status", "delayed"])
    assert result.exit_code == 0, result.output
    assert "Pour slab" in result.output
    assert "Roofing" not in result.output


def test_view_gantt_project_scope(data_files):
    result = invoke(["view", "gantt", "--project", "p1", "-m", "daily"])
    assert result.exit_code == 0, result.output
    assert "Harbour Tower Timeline" in result.output


def test_view_gantt_navigation(data_files):
    result = invoke(
        ["view", "gantt", "-m", "monthly", "--period", "2024-03-15", "-ff"]
    )
    assert result.exit_code == 0, result.output
    assert "Monthly - May 2024" in result.output


def test_view_gantt_without_header(data_files):
    result = invoke(["--no-header", "view", "gantt", "-m", "monthly"])
    assert result.exit_code == 0, result.output
    assert "Monthly - March 2024" not in result.output
    assert "Pour slab" in result.output


def test_view_gantt_unknown_project(data_files):
    result = invoke(["view", "gantt", "--project", "p404"])
    assert result.exit_code == 1


def test_view_gantt_malformed_task_date(data_files):
    configuration.DATA_TASKS_PATH.write_text(
        "tasks:\n  - id: t1\n    start_date: soon\n    end_date: later\n"
    )
    result = invoke(["view", "gantt"])
    assert result.exit_code == 1


def test_view_gantt_rejects_bad_period(data_files):
    result = invoke(["view", "gantt", "--period", "someday"])
    assert result.exit_code == 2


def test_view_gantt_rejects_unknown_mode(data_files):
    result = invoke(["view", "gantt", "--mode", "yearly"])
    assert result.exit_code == 2


def test_view_gantt_with_global_data_path(data_files, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "tasks.yaml").write_text(
        "tasks:\n  - id: x1\n    title: Excavation\n    start_date: 2024-03-14\n"
        "    end_date: 2024-03-20\n"
    )
    result = invoke(
        ["--data-path", str(other), "view", "gantt", "-m", "monthly"]
    )
    assert result.exit_code == 0, result.output
    assert "Excavation" in result.output
    assert "Pour slab" not in result.output


def test_view_stats(data_files):
    result = invoke(["view", "stats", "-m", "monthly"])
    assert result.exit_code == 0, result.output
    assert "Total tasks" in result.output
    assert "20%" in result.output


# === config ===


def test_config_view(isolated_storage):
    result = invoke(["config", "view"])
    assert result.exit_code == 0, result.output
    assert "utc_offset_hours" in result.output
    assert "UTC+8" in result.output


def test_config_set(isolated_storage):
    result = invoke(["c", "set", "--default-view-mode", "daily"])
    assert result.exit_code == 0, result.output
    assert CONFIGURATION_REPO.get_view_mode() == ViewMode.DAILY
    assert CONFIGURATION_REPO.is_dirty is True


def test_config_set_rejects_bad_offset(isolated_storage):
    result = invoke(["config", "set", "--utc-offset-hours", "20"])
    assert result.exit_code == 1
