# topmark:header:start
#
#   project      : ByteNot
#   file         : version.py
#   file_relpath : src/bytenot/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteNot `version` command.

Prints the current ByteNot version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytenot.constants import BYTENOT_VERSION

if TYPE_CHECKING:
    from bytenot.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of ByteNot.",
)
def version_command() -> None:
    """Show the current version of ByteNot.

    With ``-v`` the version is prefixed with a heading.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("ByteNot version:", bold=True, underline=True))
        console.print(f"    {console.styled(BYTENOT_VERSION, bold=True)}")
    else:
        console.print(console.styled(BYTENOT_VERSION, bold=True))
