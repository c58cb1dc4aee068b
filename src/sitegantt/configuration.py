# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "sitegantt"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_PROJECTS_PATH: Path = DATA_PATH / "projects.yaml"


class Configuration(TypedDict):
    utc_offset_hours: int
    default_view_mode: str
    task_key_scope: str
    left_column_width: int
    show_header: bool
    data_path: Optional[str]


def default_configuration() -> Configuration:
    return {
        "utc_offset_hours": 8,
        "default_view_mode": "weekly",
        "task_key_scope": "project",
        "left_column_width": 40,
        "show_header": True,
        "data_path": None,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_PATH, DATA_PROJECTS_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_PROJECTS_PATH = DATA_PATH / "projects.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
