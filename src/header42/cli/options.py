# topmark:header:start
#
#   project      : Header42
#   file         : options.py
#   file_relpath : src/header42/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, identity and input
handling) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from header42.cli.errors import Header42UsageError
from header42.header.model import parse_timestamp

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags.

    Raises:
        Header42UsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise Header42UsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-file output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then ``FORCE_COLOR`` and ``NO_COLOR``,
    and defaults to enabling color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add identity and configuration options (``--config``, ``--username``, ``--email``)."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read configuration from this TOML file (after header42.toml / pyproject.toml).",
    )(f)
    f = click.option(
        "--username",
        type=str,
        default=None,
        help="Username written in the header (default: config, then $USER).",
    )(f)
    f = click.option(
        "--email",
        type=str,
        default=None,
        help="E-mail written in the header (default: config, then <username>@student.42.fr).",
    )(f)
    f = click.option(
        "--language",
        "language_id",
        type=str,
        default=None,
        help="Language identifier to use for every file (e.g. 'c', 'python').",
    )(f)
    return f


class TimestampParam(click.ParamType):
    """Click parameter type for ``YYYY/MM/DD HH:MM:SS`` timestamps."""

    name = "timestamp"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> datetime:
        """Parse the option value into a `datetime`."""
        if isinstance(value, datetime):
            return value
        try:
            return parse_timestamp(str(value))
        except ValueError:
            self.fail(f"{value!r} is not a 'YYYY/MM/DD HH:MM:SS' timestamp", param, ctx)


def common_write_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options shared by the commands that modify files."""
    f = click.option(
        "--apply",
        "apply_changes",
        is_flag=True,
        help="Write changes to files (off by default).",
    )(f)
    f = click.option("--diff", is_flag=True, help="Show unified diffs of the changes.")(f)
    f = click.option(
        "--timestamp",
        "timestamp",
        type=TimestampParam(),
        default=None,
        help="Use this time ('YYYY/MM/DD HH:MM:SS') instead of now.",
    )(f)
    f = click.option(
        "--stdin-filename",
        "stdin_filename",
        type=str,
        default=None,
        help=(
            "Assumed filename when reading a single file's content from STDIN via '-' (dash). "
            "Required when '-' is provided as a PATH."
        ),
    )(f)
    return f
