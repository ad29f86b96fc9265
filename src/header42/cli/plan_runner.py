# topmark:header:start
#
#   project      : Header42
#   file         : plan_runner.py
#   file_relpath : src/header42/cli/plan_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared implementation of the ``insert`` and ``update`` commands.

Both commands compute a `HeaderPlan` per document and differ only in the
`PlanMode`. Files are previewed by default and written with ``--apply``; a
document read from STDIN is always written back to STDOUT.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from header42.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    plan_inputs,
    read_document,
    read_stdin,
    resolve_identity,
    write_document,
)
from header42.cli.errors import Header42UnsupportedLanguageError
from header42.cli.exit_codes import ExitCode
from header42.config.logging import get_logger
from header42.document import PlanMode, PlanOutcome, plan_header
from header42.filetypes import resolve_language
from header42.header.model import format_timestamp
from header42.utils.diff import make_patch, render_patch

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from header42.cli.console import ClickConsole
    from header42.config.logging import Header42Logger
    from header42.document import HeaderPlan
    from header42.header.model import Identity
    from header42.header.styles import CommentStyleTable

logger: Header42Logger = get_logger(__name__)

_APPLIED_LABELS: dict[PlanOutcome, str] = {
    PlanOutcome.INSERTED: "header inserted",
    PlanOutcome.REPLACED: "header updated",
    PlanOutcome.REPAIRED: "malformed header replaced",
    PlanOutcome.NO_HEADER: "no header, skipped",
    PlanOutcome.UNSUPPORTED: "unsupported language, skipped",
}

_PREVIEW_LABELS: dict[PlanOutcome, str] = {
    PlanOutcome.INSERTED: "would insert header",
    PlanOutcome.REPLACED: "would update header",
    PlanOutcome.REPAIRED: "would replace malformed header",
    PlanOutcome.NO_HEADER: "no header, skipped",
    PlanOutcome.UNSUPPORTED: "unsupported language, skipped",
}


def _report(
    console: ClickConsole,
    name: str,
    language_id: str | None,
    plan: HeaderPlan,
    *,
    applied: bool,
    verbosity: int,
) -> None:
    if verbosity < 0:
        return
    labels = _APPLIED_LABELS if applied else _PREVIEW_LABELS
    label = labels[plan.outcome]
    if plan.outcome is PlanOutcome.UNSUPPORTED:
        console.warn(f"{name}: {label} ({language_id or 'unknown'})")
        return
    if not plan.changed and plan.outcome is PlanOutcome.REPLACED:
        label = "header up to date"
    color = "yellow" if plan.changed else "green"
    console.print(f"{name}: {console.styled(label, fg=color)}")
    if verbosity > 0 and plan.previous is not None and plan.outcome is PlanOutcome.REPLACED:
        console.print(
            f"    created {format_timestamp(plan.previous.created_at)} by {plan.previous.created_by}"
        )


def _plan_document(
    text: str,
    name: str,
    *,
    language_override: str | None,
    extensions: dict[str, str],
    identity: Identity,
    now: datetime,
    mode: PlanMode,
    table: CommentStyleTable,
) -> tuple[str | None, HeaderPlan]:
    language_id = resolve_language(name, override=language_override, extensions=extensions)
    plan = plan_header(
        text,
        language_id=language_id or "",
        filename=name,
        identity=identity,
        now=now,
        mode=mode,
        table=table,
    )
    return language_id, plan


def run_plan_command(
    ctx: click.Context,
    *,
    mode: PlanMode,
    paths: Sequence[str],
    stdin_filename: str | None,
    apply_changes: bool,
    diff: bool,
    timestamp: datetime | None,
    language_id: str | None,
    config_file: Path | None,
    username: str | None,
    email: str | None,
) -> None:
    """Run ``insert`` or ``update`` over the given inputs and exit with the outcome code.

    Raises:
        Header42UnsupportedLanguageError: When inserting into a STDIN document whose
            language has no header support.
        Header42ConfigError: If the resolved username cannot be written in a header.
    """
    console = get_console(ctx)
    verbosity = get_effective_verbosity(ctx)
    inputs = plan_inputs(paths, stdin_filename)
    config, table = build_config(config_file=config_file, username=username, email=email)
    identity = resolve_identity(config)
    now = timestamp or datetime.now()
    extensions = dict(config.extensions)
    logger.info("Running %s as %s at %s", mode.value, identity.author, now)

    if inputs.stdin_filename is not None:
        name = inputs.stdin_filename
        resolved, plan = _plan_document(
            read_stdin(),
            name,
            language_override=language_id,
            extensions=extensions,
            identity=identity,
            now=now,
            mode=mode,
            table=table,
        )
        if plan.outcome is PlanOutcome.UNSUPPORTED and mode is PlanMode.INSERT:
            raise Header42UnsupportedLanguageError(
                f"No header support for language {resolved or 'unknown'} ({name})"
            )
        if diff:
            patch = make_patch(plan.original_text, plan.updated_text, name)
            console.print(render_patch(patch, color=console.enable_color), nl=False)
        else:
            console.print(plan.updated_text, nl=False)
        ctx.exit(ExitCode.SUCCESS)

    would_change = False
    for path in inputs.paths:
        text = read_document(path)
        resolved, plan = _plan_document(
            text,
            path.name,
            language_override=language_id,
            extensions=extensions,
            identity=identity,
            now=now,
            mode=mode,
            table=table,
        )
        _report(console, str(path), resolved, plan, applied=apply_changes, verbosity=verbosity)
        if diff and plan.changed:
            patch = make_patch(plan.original_text, plan.updated_text, str(path))
            console.print(render_patch(patch, color=console.enable_color), nl=False)
        if not plan.changed:
            continue
        if apply_changes:
            write_document(path, plan.updated_text)
        else:
            would_change = True

    ctx.exit(ExitCode.WOULD_CHANGE if would_change else ExitCode.SUCCESS)
