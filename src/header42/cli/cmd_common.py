# topmark:header:start
#
#   project      : Header42
#   file         : cmd_common.py
#   file_relpath : src/header42/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the Header42 subcommands.

Covers the plumbing every command needs: reaching the console stored on the
Click context, building the effective configuration, validating the PATHS /
STDIN combination, and reading/writing documents with errors mapped onto the
CLI exception hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import click

from header42.cli.errors import (
    Header42ConfigError,
    Header42EncodingError,
    Header42FileNotFoundError,
    Header42IOError,
    Header42UsageError,
)
from header42.config import ConfigError, MutableConfig, load_config
from header42.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from header42.cli.console import ClickConsole
    from header42.config import Config
    from header42.config.logging import Header42Logger
    from header42.header.model import Identity
    from header42.header.styles import CommentStyleTable

logger: Header42Logger = get_logger(__name__)

STDIN_MARKER: str = "-"


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console initialized by the ``header42`` group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the ``header42`` group."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    *,
    config_file: Path | None,
    username: str | None,
    email: str | None,
) -> tuple[Config, CommentStyleTable]:
    """Load the configuration with CLI overrides and build its language table.

    Raises:
        Header42ConfigError: If a configuration source is invalid.
    """
    overrides = MutableConfig(username=username, email=email)
    try:
        config = load_config(config_file=config_file, overrides=overrides)
        return config, config.style_table()
    except ConfigError as exc:
        raise Header42ConfigError(str(exc)) from exc


def resolve_identity(config: Config) -> Identity:
    """Return the operator identity of ``config``.

    Raises:
        Header42ConfigError: If the configured username cannot be written in a header.
    """
    try:
        return config.resolve_identity()
    except ConfigError as exc:
        raise Header42ConfigError(str(exc)) from exc


@dataclass(frozen=True)
class InputPlan:
    """Where a command reads its documents from.

    Attributes:
        paths (tuple[Path, ...]): Files to process (empty in STDIN mode).
        stdin_filename (str | None): Assumed file name of the STDIN document, or
            ``None`` when reading files.
    """

    paths: tuple[Path, ...]
    stdin_filename: str | None = None


def plan_inputs(paths: Sequence[str], stdin_filename: str | None) -> InputPlan:
    """Validate the PATHS / ``--stdin-filename`` combination.

    Raises:
        Header42UsageError: On an invalid combination.
    """
    if STDIN_MARKER in paths:
        if len(paths) != 1:
            raise Header42UsageError("'-' (STDIN) must be the only PATH.")
        if not stdin_filename:
            raise Header42UsageError("'--stdin-filename' is required when reading from STDIN.")
        return InputPlan(paths=(), stdin_filename=stdin_filename)
    if stdin_filename:
        raise Header42UsageError("'--stdin-filename' is only valid with '-' as PATH.")
    if not paths:
        raise Header42UsageError("No PATHS given (use '-' to read from STDIN).")
    return InputPlan(paths=tuple(Path(p) for p in paths))


def read_stdin() -> str:
    """Read the whole STDIN document, keeping its newline convention.

    Raises:
        Header42EncodingError: If the content is not valid UTF-8.
    """
    data: bytes = click.get_binary_stream("stdin").read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Header42EncodingError(f"Cannot decode STDIN as UTF-8: {exc}") from exc


def read_document(path: Path) -> str:
    """Read a document, keeping its newline convention.

    Raises:
        Header42FileNotFoundError: If the path does not exist.
        Header42EncodingError: If the file is not valid UTF-8.
        Header42IOError: On other I/O errors.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as fp:
            return fp.read()
    except FileNotFoundError as exc:
        raise Header42FileNotFoundError(f"No such file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise Header42EncodingError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise Header42IOError(f"Cannot read {path}: {exc}") from exc


def write_document(path: Path, text: str) -> None:
    """Write a document without translating newlines.

    Raises:
        Header42IOError: If the file cannot be written.
    """
    try:
        with path.open("w", encoding="utf-8", newline="") as fp:
            fp.write(text)
    except OSError as exc:
        raise Header42IOError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Wrote %s", path)
