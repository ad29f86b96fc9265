# topmark:header:start
#
#   project      : Header42
#   file         : dump_config.py
#   file_relpath : src/header42/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 `dump-config` command.

Prints the effective configuration (discovered files, ``--config``, environment
and identity flags merged) as TOML, with the operator identity resolved.

Examples:
    $ header42 dump-config
    $ header42 dump-config --username jdoe
"""

from __future__ import annotations

from pathlib import Path

import click

from header42.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    resolve_identity,
)
from header42.cli.options import CONTEXT_SETTINGS
from header42.config.io import to_toml
from header42.config.logging import get_logger

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the effective configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this TOML file.",
)
@click.option("--username", type=str, default=None, help="Override the configured username.")
@click.option("--email", type=str, default=None, help="Override the configured e-mail.")
@click.pass_context
def dump_config_command(
    ctx: click.Context,
    *,
    config_file: Path | None,
    username: str | None,
    email: str | None,
) -> None:
    """Dump the final merged configuration as TOML."""
    console = get_console(ctx)
    config, _table = build_config(config_file=config_file, username=username, email=email)
    logger.trace("Config to dump: %s", config)
    # Reject an unusable identity before printing anything.
    resolve_identity(config)

    if get_effective_verbosity(ctx) > 0:
        for path in config.config_files:
            console.print(f"# source: {path}")
    console.print(to_toml(config.to_toml_dict()), nl=False)
