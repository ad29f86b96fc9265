# topmark:header:start
#
#   project      : Header42
#   file         : model.py
#   file_relpath : src/header42/header/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value objects carried through the header engine.

`HeaderInfo` is the decoded content of one header. It is immutable and rebuilt
for every edit by `refresh_header_info`, which spells out the precedence between
a previously parsed header and the values of the current operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from header42.constants import TIMESTAMP_FORMAT


@dataclass(frozen=True)
class Identity:
    """Fully resolved operator identity.

    Attributes:
        user (str): Username written on the "by" side of the timestamp rows.
        email (str): E-mail address shown in the "By:" row.
    """

    user: str
    email: str

    @property
    def author(self) -> str:
        """The "By:" row value, ``"<user> <<email>>"``."""
        return f"{self.user} <{self.email}>"


@dataclass(frozen=True, kw_only=True)
class HeaderInfo:
    """Structured content of a 42 header.

    Attributes:
        filename (str): Base name of the file.
        author (str): ``"<user> <<email>>"`` of the last operator.
        created_at (datetime): Creation timestamp (second precision).
        created_by (str): Username of the creator.
        updated_at (datetime): Timestamp of the last update (second precision).
        updated_by (str): Username of the last operator.
    """

    filename: str
    author: str
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as ``YYYY/MM/DD HH:MM:SS``.

    The year is always four digits wide (``0999``), which `parse_timestamp` requires.
    """
    # strftime leaves years below 1000 unpadded on glibc.
    return f"{value.year:04d}" + value.strftime(TIMESTAMP_FORMAT.removeprefix("%Y"))


def parse_timestamp(text: str) -> datetime:
    """Parse a ``YYYY/MM/DD HH:MM:SS`` timestamp.

    Raises:
        ValueError: If ``text`` does not match the format or is not a valid date/time.
    """
    return datetime.strptime(text, TIMESTAMP_FORMAT)


def refresh_header_info(
    previous: HeaderInfo | None,
    *,
    filename: str,
    identity: Identity,
    now: datetime,
) -> HeaderInfo:
    """Build the header for the current operation.

    Precedence, field by field:

    * ``created_at`` / ``created_by``: taken from ``previous`` when a header
      existed, otherwise ``now`` / ``identity.user``.
    * ``filename``: always the document's current base name.
    * ``author``: always ``identity.author``.
    * ``updated_at`` / ``updated_by``: always ``now`` / ``identity.user``.

    Args:
        previous (HeaderInfo | None): Header decoded from the document, if any.
        filename (str): Current base name of the document.
        identity (Identity): Operator performing the edit.
        now (datetime): Time of the edit; truncated to whole seconds, offset dropped
            (the header stores wall-clock time).

    Returns:
        HeaderInfo: The merged header content.
    """
    now = now.replace(microsecond=0, tzinfo=None)
    if previous is None:
        created_at, created_by = now, identity.user
    else:
        created_at, created_by = previous.created_at, previous.created_by
    return HeaderInfo(
        filename=filename,
        author=identity.author,
        created_at=created_at,
        created_by=created_by,
        updated_at=now,
        updated_by=identity.user,
    )
