# topmark:header:start
#
#   project      : Header42
#   file         : version.py
#   file_relpath : src/header42/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 `version` command.

Prints the current Header42 version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from header42.cli.cmd_common import get_console, get_effective_verbosity
from header42.constants import HEADER42_VERSION


@click.command(
    name="version",
    help="Show the current version of Header42.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of Header42."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Header42 version:", bold=True, underline=True))
        console.print(f"    {console.styled(HEADER42_VERSION, bold=True)}")
    else:
        console.print(console.styled(HEADER42_VERSION, bold=True))
