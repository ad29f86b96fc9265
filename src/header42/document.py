# topmark:header:start
#
#   project      : Header42
#   file         : document.py
#   file_relpath : src/header42/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Apply the header engine to a whole document.

This is the glue an editor integration needs: given the document text, its
language identifier, its base name, the operator identity and the current time,
compute the new document text.

Two modes mirror the two editor entry points:

* ``PlanMode.INSERT`` (the "insert header" command): refresh an existing header
  or insert a fresh one, followed by a blank separator line.
* ``PlanMode.UPDATE`` (the save hook): refresh an existing header; documents
  without one are left alone.

A header whose frame is intact but whose fields do not decode is replaced by a
fresh header in both modes; that fallback is decided here, never in the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from header42.config.logging import get_logger
from header42.header.errors import MalformedHeaderError
from header42.header.layout import HEADER_HEIGHT
from header42.header.model import refresh_header_info
from header42.header.parser import extract_header, get_header_info
from header42.header.renderer import render_header
from header42.header.styles import DEFAULT_STYLE_TABLE

if TYPE_CHECKING:
    from datetime import datetime

    from header42.config.logging import Header42Logger
    from header42.header.model import HeaderInfo, Identity
    from header42.header.styles import CommentStyleTable

logger: Header42Logger = get_logger(__name__)


class PlanMode(Enum):
    """Which editor entry point a plan is computed for."""

    INSERT = "insert"
    UPDATE = "update"


class PlanOutcome(Enum):
    """Outcome of `plan_header`.

    Members:
        INSERTED: No header was present; a fresh one was prepended.
        REPLACED: An existing header was refreshed (creation fields kept).
        REPAIRED: A malformed header was replaced by a fresh one.
        NO_HEADER: Update mode and no header present; text unchanged.
        UNSUPPORTED: The language has no comment style; text unchanged.
    """

    INSERTED = "inserted"
    REPLACED = "replaced"
    REPAIRED = "repaired"
    NO_HEADER = "no_header"
    UNSUPPORTED = "unsupported"


class HeaderStatus(Enum):
    """Classification of a document's leading lines.

    Members:
        PRESENT: A well-formed header is present.
        MISSING: The leading lines do not form a header frame.
        MALFORMED: The frame is present but a field does not decode.
    """

    PRESENT = "present"
    MISSING = "missing"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class HeaderInspection:
    """Result of `inspect_header`.

    Attributes:
        status (HeaderStatus): What was found.
        info (HeaderInfo | None): Decoded header when ``status`` is ``PRESENT``.
        error (MalformedHeaderError | None): Decoding error when ``status`` is ``MALFORMED``.
    """

    status: HeaderStatus
    info: HeaderInfo | None = None
    error: MalformedHeaderError | None = None


@dataclass(frozen=True)
class HeaderPlan:
    """Result of `plan_header`.

    Attributes:
        outcome (PlanOutcome): What the plan does to the document.
        original_text (str): Document text the plan was computed from.
        updated_text (str): Document text after the plan is applied.
        info (HeaderInfo | None): Content of the rendered header, if one was rendered.
        previous (HeaderInfo | None): Header decoded from the original text, if any.
    """

    outcome: PlanOutcome
    original_text: str
    updated_text: str
    info: HeaderInfo | None = None
    previous: HeaderInfo | None = None

    @property
    def changed(self) -> bool:
        """Whether applying the plan modifies the document."""
        return self.updated_text != self.original_text


def detect_newline(text: str) -> str:
    r"""Return the first newline sequence used in ``text`` (``\n`` when there is none)."""
    for i, ch in enumerate(text):
        if ch == "\r":
            return "\r\n" if text[i + 1 : i + 2] == "\n" else "\r"
        if ch == "\n":
            return "\n"
    return "\n"


def _split_after_header(text: str) -> str:
    """Return what follows the first ``HEADER_HEIGHT`` lines of ``text``."""
    pos = 0
    for _ in range(HEADER_HEIGHT):
        nl = min((i for i in (text.find("\r", pos), text.find("\n", pos)) if i >= 0), default=-1)
        if nl < 0:
            return ""
        pos = nl + (2 if text.startswith("\r\n", nl) else 1)
    return text[pos:]


def inspect_header(text: str) -> HeaderInspection:
    """Classify the leading lines of ``text`` and decode the header if possible."""
    block = extract_header(text)
    if block is None:
        return HeaderInspection(HeaderStatus.MISSING)
    try:
        return HeaderInspection(HeaderStatus.PRESENT, info=get_header_info(block))
    except MalformedHeaderError as exc:
        return HeaderInspection(HeaderStatus.MALFORMED, error=exc)


def plan_header(
    text: str,
    *,
    language_id: str,
    filename: str,
    identity: Identity,
    now: datetime,
    mode: PlanMode = PlanMode.INSERT,
    table: CommentStyleTable = DEFAULT_STYLE_TABLE,
) -> HeaderPlan:
    """Compute the document text with an inserted or refreshed header.

    Args:
        text (str): Current document text.
        language_id (str): Editor language identifier of the document.
        filename (str): Current base name of the document.
        identity (Identity): Operator performing the edit.
        now (datetime): Time of the edit.
        mode (PlanMode): ``INSERT`` for the insert command, ``UPDATE`` for the save hook.
        table (CommentStyleTable): Language lookup table.

    Returns:
        HeaderPlan: The outcome and the resulting text. The input text is returned
            unchanged for ``UNSUPPORTED`` and ``NO_HEADER`` outcomes.
    """
    if not table.supports_language(language_id):
        logger.info("No header support for language %s (%s)", language_id, filename)
        return HeaderPlan(PlanOutcome.UNSUPPORTED, text, text)

    inspection = inspect_header(text)
    if inspection.status is HeaderStatus.MISSING and mode is PlanMode.UPDATE:
        logger.debug("No header in %s; nothing to update", filename)
        return HeaderPlan(PlanOutcome.NO_HEADER, text, text)
    if inspection.status is HeaderStatus.MALFORMED:
        logger.warning(
            "Replacing malformed header in %s with a fresh one: %s", filename, inspection.error
        )

    info = refresh_header_info(inspection.info, filename=filename, identity=identity, now=now)
    newline = detect_newline(text)
    rendered = render_header(language_id, info, table=table)
    if newline != "\n":
        rendered = rendered.replace("\n", newline)

    if inspection.status is HeaderStatus.MISSING:
        outcome = PlanOutcome.INSERTED
        updated = rendered + newline + text
    else:
        outcome = (
            PlanOutcome.REPLACED
            if inspection.status is HeaderStatus.PRESENT
            else PlanOutcome.REPAIRED
        )
        updated = rendered + _split_after_header(text)

    logger.info("%s header in %s", outcome.value, filename)
    return HeaderPlan(outcome, text, updated, info=info, previous=inspection.info)
