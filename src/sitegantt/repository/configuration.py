# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from sitegantt import configuration
from sitegantt.model.task_key_scope import TaskKeyScope
from sitegantt.model.view_mode import ViewMode


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(
                configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
            )
        if self._config is None:
            self._config = configuration.default_configuration()
            return

        # Migration: add any settings introduced after the file was written
        for key, value in configuration.default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_view_mode(self) -> ViewMode:
        return ViewMode(self.config["default_view_mode"])

    def get_task_key_scope(self) -> TaskKeyScope:
        return TaskKeyScope(self.config["task_key_scope"])

    def update_config(
        self,
        utc_offset_hours: Optional[int] = None,
        default_view_mode: Optional[ViewMode] = None,
        task_key_scope: Optional[TaskKeyScope] = None,
        left_column_width: Optional[int] = None,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if utc_offset_hours is not None:
            if not -12 <= utc_offset_hours <= 14:
                raise ValueError(
                    f"utc_offset_hours must be between -12 and 14, got {utc_offset_hours}"
                )
            self.config["utc_offset_hours"] = utc_offset_hours
        if default_view_mode is not None:
            self.config["default_view_mode"] = default_view_mode.value
        if task_key_scope is not None:
            self.config["task_key_scope"] = task_key_scope.value
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
