# topmark:header:start
#
#   project      : Header42
#   file         : insert.py
#   file_relpath : src/header42/cli/commands/insert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 ``insert`` command.

Inserts a 42 header into files that have none and refreshes the header of files
that already carry one (the "Created" row is kept). Performs a dry run by default
and applies changes when ``--apply`` is given.

Examples:
  Preview changes (dry run):

    $ header42 insert main.c utils.h

  Apply changes (write in place):

    $ header42 insert --apply main.c

  Filter an editor buffer through STDIN:

    $ header42 insert - --stdin-filename main.c < main.c
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
    name="insert",
    help="Insert a 42 header, or refresh the existing one.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Exit status is 2 in dry-run mode when at least one file would change.

Examples:

  # Preview which files would change (dry-run)
  header42 insert src/*.c

  # Apply: insert or refresh headers in-place
  header42 insert --apply src/*.c
""",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_write_options
@click.pass_context
def insert_command(
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
    """Insert or refresh the 42 header of each PATH."""
    run_plan_command(
        ctx,
        mode=PlanMode.INSERT,
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
