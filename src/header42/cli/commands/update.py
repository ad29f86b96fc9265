# topmark:header:start
#
#   project      : Header42
#   file         : update.py
#   file_relpath : src/header42/cli/commands/update.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 ``update`` command.

Refreshes the "Updated" row (and file name and author) of files that already
carry a 42 header, the way an editor does on save. Files without a header are
left alone. Performs a dry run by default and applies changes with ``--apply``.

Examples:
  Refresh headers before committing:

    $ git diff --name-only | xargs header42 update --apply

  Save hook for an editor buffer:

    $ header42 update - --stdin-filename main.c < main.c
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from header42.cli.options import CONTEXT_SETTINGS, common_config_options, common_write_options
from header42.cli.plan_runner import run_plan_command
from header42.document import PlanMode

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


@click.command(
    name="update",
    help="Refresh existing 42 headers; files without a header are left untouched.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_write_options
@click.pass_context
def update_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    apply_changes: bool,
    diff: bool,
    timestamp: datetime | None,
    stdin_filename: str | None,
    language_id: str | None,
    config_file: Path | None,
    username: str | None,
    email: str | None,
) -> None:
    """Refresh the 42 header of each PATH that has one."""
    run_plan_command(
        ctx,
        mode=PlanMode.UPDATE,
        paths=paths,
        stdin_filename=stdin_filename,
        apply_changes=apply_changes,
        diff=diff,
        timestamp=timestamp,
        language_id=language_id,
        config_file=config_file,
        username=username,
        email=email,
    )
