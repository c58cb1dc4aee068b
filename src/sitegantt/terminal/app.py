# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from sitegantt import configuration as app_configuration
from sitegantt.repository.project import PROJECT_REPO
from sitegantt.repository.task import TASK_REPO
from sitegantt.terminal import configuration, view
from sitegantt.terminal.custom_typer import OrderedTyperGroup
from sitegantt.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="sitegantt - Construction project timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(view.app, name="view, v")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-vb", help="Log layout details to stderr"),
    ] = False,
    data_path: Annotated[
        Optional[Path],
        typer.Option(
            "--data-path",
            file_okay=False,
            help="Read tasks.yaml and projects.yaml from this directory",
        ),
    ] = None,
) -> None:
    """
    sitegantt - Construction project timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            force=True,
        )
    if data_path is not None:
        app_configuration.set_data_path(data_path)
        TASK_REPO.reload()
        PROJECT_REPO.reload()


def run() -> None:
    app()
