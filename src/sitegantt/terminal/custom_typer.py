# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered under "name, alias" strings.

    `sitegantt view gantt` and `sitegantt v g` resolve to the same command.
    """

    _ALIAS_SPLIT_P = re.compile(r" ?, ?")

    def aliases(self, registered_name: str) -> list[str]:
        return self._ALIAS_SPLIT_P.split(registered_name)

    def resolve_name(self, name: str) -> str:
        """Registered "name, alias" string for a name or alias, else the input."""
        for registered_name in self.commands:
            if name in self.aliases(registered_name):
                return registered_name
        return name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_name(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name or ""
        registered_name = self.resolve_name(name)
        # typer may register a command again under one of its aliases
        if registered_name in self.commands and registered_name != name:
            return
        super().add_command(cmd, name)


class OrderedTyperGroup(AliasedTyperGroup):
    """Top-level group listing the chart commands before configuration"""

    _COMMAND_ORDER = ["view, v", "config, c"]

    def list_commands(self, ctx: click.Context) -> list[str]:
        result = [name for name in self._COMMAND_ORDER if name in self.commands]
        result.extend(name for name in self.commands if name not in result)
        return result
