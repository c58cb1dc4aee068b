# SPDX-License-Identifier: MIT

from enum import StrEnum


class TaskKeyScope(StrEnum):
    PROJECT = "project"
    GLOBAL = "global"
