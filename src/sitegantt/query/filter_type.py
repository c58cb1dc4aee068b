# SPDX-License-Identifier: MIT

from enum import StrEnum


class FilterType(StrEnum):
    AND = "and"
    STATUS = "status"
    PRIORITY = "priority"
    PROJECT = "project"
    SEARCH = "search"


ALL = "all"
