# topmark:header:start
#
#   project      : Header42
#   file         : layout.py
#   file_relpath : src/header42/header/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Geometry of the 42 header frame.

The header is a rectangle of ``HEADER_HEIGHT`` rows by ``HEADER_WIDTH`` columns.
``GENERIC_FRAME`` holds the rows with every comment token position filled with
``*`` and every field span left blank; a concrete header is obtained by writing
the language's comment tokens over the outer columns and the field values into
their spans (see `header42.header.renderer`).

Comment tokens are at most ``FRAME_MARGIN`` columns wide, so the columns between
the margins are identical for every language once the field spans are masked.
That property is what `matches_frame` checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from header42.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)

HEADER_WIDTH: Final[int] = 80
HEADER_HEIGHT: Final[int] = 11
FRAME_MARGIN: Final[int] = 3

# fmt: off
GENERIC_FRAME: Final[tuple[str, ...]] = (
    "********************************************************************************",
    "*                                                                              *",
    "*                                                         :::      ::::::::    *",
    "*                                                       :+:      :+:    :+:    *",
    "*                                                     +:+ +:+         +:+      *",
    "*    By:                                            +#+  +:+       +#+         *",
    "*                                                 +#+#+#+#+#+   +#+            *",
    "*    Created:                     by                   #+#    #+#              *",
    "*    Updated:                     by                  ###   ########.fr        *",
    "*                                                                              *",
    "********************************************************************************",
)
# fmt: on


class FieldKind(Enum):
    """Semantic type of a field span."""

    TEXT = "text"
    AUTHOR = "author"
    TIMESTAMP = "timestamp"
    USERNAME = "username"


@dataclass(frozen=True)
class FieldSpan:
    """Column range reserved for one metadata value.

    Attributes:
        name (str): Name of the `HeaderInfo` attribute stored in the span.
        kind (FieldKind): How the text in the span is decoded.
        row (int): 0-based frame row.
        start (int): First column of the span (inclusive).
        end (int): Column after the span (exclusive).
    """

    name: str
    kind: FieldKind
    row: int
    start: int
    end: int

    @property
    def width(self) -> int:
        """Number of columns available to the value."""
        return self.end - self.start

    def read(self, line: str) -> str:
        """Return the span's text in ``line``, without padding."""
        return line[self.start : self.end].strip()

    def write(self, line: str, value: str) -> str:
        """Return ``line`` with ``value`` written into the span (truncated or right-padded)."""
        return line[: self.start] + value[: self.width].ljust(self.width) + line[self.end :]


FILENAME_ROW: Final[int] = 3
AUTHOR_ROW: Final[int] = 5
CREATED_ROW: Final[int] = 7
UPDATED_ROW: Final[int] = 8

FIELD_SPANS: Final[tuple[FieldSpan, ...]] = (
    FieldSpan("filename", FieldKind.TEXT, FILENAME_ROW, 5, 48),
    FieldSpan("author", FieldKind.AUTHOR, AUTHOR_ROW, 9, 48),
    FieldSpan("created_at", FieldKind.TIMESTAMP, CREATED_ROW, 14, 33),
    FieldSpan("created_by", FieldKind.USERNAME, CREATED_ROW, 37, 48),
    FieldSpan("updated_at", FieldKind.TIMESTAMP, UPDATED_ROW, 14, 33),
    FieldSpan("updated_by", FieldKind.USERNAME, UPDATED_ROW, 37, 48),
)

FIELDS_BY_NAME: Final[dict[str, FieldSpan]] = {span.name: span for span in FIELD_SPANS}

# Rows that carry no field at all (borders, blank rows and pure art).
DECORATIVE_ROWS: Final[tuple[int, ...]] = tuple(
    row for row in range(HEADER_HEIGHT) if all(span.row != row for span in FIELD_SPANS)
)


def _mask_row(line: str, row: int) -> str:
    """Return the inner columns of ``line`` with the row's field spans blanked."""
    for span in FIELD_SPANS:
        if span.row == row:
            line = line[: span.start] + " " * span.width + line[span.end :]
    return line[FRAME_MARGIN : HEADER_WIDTH - FRAME_MARGIN]


_MASKED_FRAME: Final[tuple[str, ...]] = tuple(
    _mask_row(line, row) for row, line in enumerate(GENERIC_FRAME)
)


def matches_frame(lines: Sequence[str]) -> bool:
    """Return True iff ``lines`` have the frame's geometry and decorative glyphs.

    The outer ``FRAME_MARGIN`` columns (comment tokens) and the field spans are
    ignored; every other column must equal the generic frame.

    Args:
        lines (Sequence[str]): Candidate header rows, without line terminators.

    Returns:
        bool: ``True`` if the rows form a 42 header frame.
    """
    if len(lines) != HEADER_HEIGHT:
        logger.trace("Frame mismatch: %d rows instead of %d", len(lines), HEADER_HEIGHT)
        return False
    for row, line in enumerate(lines):
        if len(line) != HEADER_WIDTH:
            logger.trace("Frame mismatch: row %d is %d columns wide", row, len(line))
            return False
        if _mask_row(line, row) != _MASKED_FRAME[row]:
            logger.trace("Frame mismatch: row %d differs from the frame", row)
            return False
    return True
