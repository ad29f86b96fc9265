# topmark:header:start
#
#   project      : Header42
#   file         : check.py
#   file_relpath : src/header42/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 ``check`` command.

Reports, for each file, whether it starts with a valid 42 header. Never modifies
files. Exits with 2 when at least one supported file lacks a valid header.

Examples:
    $ header42 check src/*.c
    $ header42 check -v main.c        # also print the decoded fields
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from header42.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    plan_inputs,
    read_document,
    read_stdin,
)
from header42.cli.exit_codes import ExitCode
from header42.cli.options import CONTEXT_SETTINGS
from header42.document import HeaderStatus, inspect_header
from header42.filetypes import resolve_language
from header42.header.model import format_timestamp

if TYPE_CHECKING:
    from header42.cli.console import ClickConsole
    from header42.document import HeaderInspection


def _report(
    console: ClickConsole, name: str, inspection: HeaderInspection, verbosity: int
) -> None:
    if inspection.status is HeaderStatus.PRESENT:
        if verbosity >= 0:
            console.print(f"{name}: {console.styled('ok', fg='green')}")
        info = inspection.info
        if verbosity > 0 and info is not None:
            console.print(f"    filename : {info.filename}")
            console.print(f"    author   : {info.author}")
            console.print(f"    created  : {format_timestamp(info.created_at)} by {info.created_by}")
            console.print(f"    updated  : {format_timestamp(info.updated_at)} by {info.updated_by}")
    elif inspection.status is HeaderStatus.MISSING:
        console.print(f"{name}: {console.styled('missing header', fg='yellow')}")
    else:
        console.print(f"{name}: {console.styled('malformed header', fg='red')}")
        if inspection.error is not None and verbosity >= 0:
            console.print(f"    {inspection.error}")


@click.command(
    name="check",
    help="Check that files start with a valid 42 header.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--stdin-filename",
    "stdin_filename",
    type=str,
    default=None,
    help="Assumed filename when reading a single file's content from STDIN via '-' (dash).",
)
@click.option(
    "--language",
    "language_id",
    type=str,
    default=None,
    help="Language identifier to use for every file (e.g. 'c', 'python').",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this TOML file.",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    stdin_filename: str | None,
    language_id: str | None,
    config_file: Path | None,
) -> None:
    """Check the header of each PATH."""
    console = get_console(ctx)
    verbosity = get_effective_verbosity(ctx)
    inputs = plan_inputs(paths, stdin_filename)
    config, table = build_config(config_file=config_file, username=None, email=None)
    extensions = dict(config.extensions)

    documents: list[tuple[str, str]]
    if inputs.stdin_filename is not None:
        documents = [(inputs.stdin_filename, read_stdin())]
    else:
        documents = [(str(path), read_document(path)) for path in inputs.paths]

    failed = False
    for name, text in documents:
        resolved = resolve_language(Path(name), override=language_id, extensions=extensions)
        if resolved is None or not table.supports_language(resolved):
            if verbosity >= 0:
                console.warn(f"{name}: unsupported language ({resolved or 'unknown'}), skipped")
            continue
        inspection = inspect_header(text)
        if inspection.status is not HeaderStatus.PRESENT:
            failed = True
        _report(console, name, inspection, verbosity)

    ctx.exit(ExitCode.WOULD_CHANGE if failed else ExitCode.SUCCESS)
