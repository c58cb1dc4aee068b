# SPDX-License-Identifier: MIT

from sitegantt.cleanup import register_cleanup
from sitegantt.initialize import initialize
from sitegantt.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
