# SPDX-License-Identifier: MIT

from enum import StrEnum


class ViewMode(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    FULL = "full"
