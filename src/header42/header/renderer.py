# topmark:header:start
#
#   project      : Header42
#   file         : renderer.py
#   file_relpath : src/header42/header/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header rendering.

A header is rendered in two passes over the generic frame: the language's comment
tokens are written over the outer columns of every row, then each `HeaderInfo`
value is written into its field span. Values longer than their span are
truncated, shorter ones are right-padded, so every row keeps ``HEADER_WIDTH``
columns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from header42.config.logging import get_logger
from header42.header.layout import FIELD_SPANS, GENERIC_FRAME, HEADER_WIDTH, FieldKind
from header42.header.model import format_timestamp
from header42.header.styles import DEFAULT_STYLE_TABLE

if TYPE_CHECKING:
    from header42.config.logging import Header42Logger
    from header42.header.model import HeaderInfo
    from header42.header.styles import CommentStyle, CommentStyleTable

logger: Header42Logger = get_logger(__name__)

# Line breaks and tabs inside a value would break the frame geometry.
_FLATTEN = str.maketrans({"\r": " ", "\n": " ", "\t": " "})


def frame_for_style(style: CommentStyle) -> list[str]:
    """Return the empty header frame wrapped in ``style``'s comment tokens."""
    left, right = style.left, style.right
    return [
        left + line[len(left) : HEADER_WIDTH - len(right)] + right for line in GENERIC_FRAME
    ]


def render_header_lines(style: CommentStyle, info: HeaderInfo) -> list[str]:
    """Render ``info`` as header rows (without terminators) for ``style``."""
    lines = frame_for_style(style)
    for span in FIELD_SPANS:
        raw = getattr(info, span.name)
        value: str = format_timestamp(raw) if span.kind is FieldKind.TIMESTAMP else str(raw)
        value = value.translate(_FLATTEN)
        if len(value) > span.width:
            logger.debug(
                "Truncating %s to %d columns: %r", span.name, span.width, value
            )
        lines[span.row] = span.write(lines[span.row], value)
    return lines


def render_header(
    language_id: str,
    info: HeaderInfo,
    *,
    table: CommentStyleTable = DEFAULT_STYLE_TABLE,
) -> str:
    """Render the header block for a language.

    Args:
        language_id (str): Editor language identifier (``"c"``, ``"python"``, ...).
        info (HeaderInfo): Header content.
        table (CommentStyleTable): Language lookup table; defaults to the built-in one.

    Returns:
        str: ``HEADER_HEIGHT`` rows of ``HEADER_WIDTH`` columns, each terminated by ``\\n``.

    Raises:
        UnsupportedLanguageError: If ``language_id`` has no usable comment style.
    """
    style = table.style_for(language_id)
    logger.trace("Rendering header for %s with %s style", language_id, style.name)
    return "".join(f"{line}\n" for line in render_header_lines(style, info))
