# topmark:header:start
#
#   project      : Header42
#   file         : parser.py
#   file_relpath : src/header42/header/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header recognition and decoding.

Two steps, kept separate so callers can tell "no header" from "broken header":

1. `extract_header` looks at the first ``HEADER_HEIGHT`` lines of a document and
   returns them when they form a 42 header frame, or ``None`` otherwise.
2. `get_header_info` decodes the field spans of an extracted block into a
   `HeaderInfo`, raising `MalformedHeaderError` when a field does not parse.

Neither step needs the language: comment tokens live in the frame margins, which
the frame check ignores.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from header42.config.logging import get_logger
from header42.header.errors import MalformedHeaderError
from header42.header.layout import FIELDS_BY_NAME, HEADER_HEIGHT, matches_frame
from header42.header.model import HeaderInfo, parse_timestamp

if TYPE_CHECKING:
    from datetime import datetime

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` on ``\n``, ``\r\n`` and ``\r`` only, dropping the terminators.

    Unlike `str.splitlines`, form feeds and other Unicode separators stay inside
    their line, so column counts match what an editor shows.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def split_header_lines(text: str) -> list[str]:
    """Return the first ``HEADER_HEIGHT`` lines of ``text`` without terminators."""
    return split_lines(text)[:HEADER_HEIGHT]


def extract_header(text: str) -> str | None:
    """Return the leading header block of ``text``, if there is one.

    Args:
        text (str): Full document text.

    Returns:
        str | None: The ``HEADER_HEIGHT`` header rows joined with ``\\n`` (each row
            terminated), or ``None`` when the document is too short or its leading
            lines do not form a header frame.
    """
    lines = split_header_lines(text)
    if len(lines) < HEADER_HEIGHT:
        logger.trace("No header: only %d line(s) available", len(lines))
        return None
    if not matches_frame(lines):
        return None
    return "\n".join(lines) + "\n"


def _read_text(lines: list[str], name: str) -> str:
    span = FIELDS_BY_NAME[name]
    return span.read(lines[span.row])


def _read_username(lines: list[str], name: str) -> str:
    value = _read_text(lines, name)
    if not value:
        raise MalformedHeaderError(name, value, "expected a username")
    return value


def _read_timestamp(lines: list[str], name: str) -> datetime:
    value = _read_text(lines, name)
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise MalformedHeaderError(name, value, "expected YYYY/MM/DD HH:MM:SS") from exc


def get_header_info(header: str) -> HeaderInfo:
    """Decode an extracted header block.

    Args:
        header (str): Block returned by `extract_header`.

    Returns:
        HeaderInfo: Decoded header content.

    Raises:
        MalformedHeaderError: If the block is not a header frame, or if a field does
            not conform to its format (the error names the field).
    """
    lines = split_header_lines(header)
    if not matches_frame(lines):
        raise MalformedHeaderError("frame", header, "block does not match the header frame")

    info = HeaderInfo(
        filename=_read_text(lines, "filename"),
        # Pass-through text: the renderer may have cut the e-mail short.
        author=_read_text(lines, "author"),
        created_at=_read_timestamp(lines, "created_at"),
        created_by=_read_username(lines, "created_by"),
        updated_at=_read_timestamp(lines, "updated_at"),
        updated_by=_read_username(lines, "updated_by"),
    )
    logger.debug("Decoded header: %s", info)
    return info
