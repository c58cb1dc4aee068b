# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from sitegantt.view.state import get_show_header


def header(
    title: str, sub_header: Optional[str] = None, console: Optional[Console] = None
) -> None:
    """Print the application name, the timeline title and an optional sub-header.

    Nothing is printed when headers are switched off for this invocation.
    """
    if not get_show_header():
        return

    if console is None:
        console = Console()

    console.print(Padding("[dark_orange]sitegantt[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(f"[plum1]{title}[/plum1]", (0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
