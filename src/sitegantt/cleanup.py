# SPDX-License-Identifier: MIT

import atexit

from sitegantt.repository.configuration import CONFIGURATION_REPO


def flush() -> None:
    # Task and project records are owned by the persistence layer and never written here
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
