# topmark:header:start
#
#   project      : Header42
#   file         : errors.py
#   file_relpath : src/header42/header/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the header engine.

The engine never decides on recovery itself: it reports what it found and lets
the caller choose a fallback (see `header42.document`).
"""

from __future__ import annotations


class Header42Error(Exception):
    """Base class for all header engine errors."""


class UnsupportedLanguageError(Header42Error):
    """The requested language has no usable comment style."""

    def __init__(self, language_id: str) -> None:
        self.language_id = language_id
        super().__init__(f"No header support for language {language_id!r}")


class MalformedHeaderError(Header42Error):
    """A header block matches the frame but one of its fields cannot be decoded.

    Attributes:
        field (str): Name of the offending field (``"created_at"``, ``"author"``, ...),
            or ``"frame"`` when the block does not have the frame's geometry.
        value (str): The raw text found in the field span.
        reason (str): Human-readable explanation.
    """

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed header field {field!r} ({value!r}): {reason}")
