# topmark:header:start
#
#   project      : Header42
#   file         : languages.py
#   file_relpath : src/header42/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 ``languages`` command.

Lists the language identifiers Header42 knows about, with their comment style
and tokens. Configured overrides (``[languages]``) are included.
"""

from __future__ import annotations

from pathlib import Path

import click

from header42.cli.cmd_common import build_config, get_console
from header42.cli.options import CONTEXT_SETTINGS


@click.command(
    name="languages",
    help="List supported languages and their comment tokens.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    help="Also list known languages without comment syntax.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this TOML file.",
)
@click.pass_context
def languages_command(ctx: click.Context, *, show_all: bool, config_file: Path | None) -> None:
    """List the language table."""
    console = get_console(ctx)
    _config, table = build_config(config_file=config_file, username=None, email=None)

    for language_id in table:
        style = table.get(language_id)
        if style is None:
            continue
        if not style.supported:
            if show_all:
                console.print(f"{language_id:<18} {console.styled('unsupported', dim=True)}")
            continue
        tokens = f"{style.left.strip()} ... {style.right.strip()}"
        console.print(f"{language_id:<18} {style.name:<11} {tokens}")
