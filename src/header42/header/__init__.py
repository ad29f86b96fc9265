# topmark:header:start
#
#   project      : Header42
#   file         : __init__.py
#   file_relpath : src/header42/header/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header engine: recognize, decode and render 42 headers.

Typical flow::

    if supports_language(language_id):
        block = extract_header(text)
        previous = get_header_info(block) if block else None
        info = refresh_header_info(previous, filename=..., identity=..., now=...)
        replacement = render_header(language_id, info)

All functions are pure; applying the rendered text to a document is up to the
caller (see `header42.document`).
"""

from __future__ import annotations

from header42.header.errors import Header42Error, MalformedHeaderError, UnsupportedLanguageError
from header42.header.layout import HEADER_HEIGHT, HEADER_WIDTH, matches_frame
from header42.header.model import HeaderInfo, Identity, refresh_header_info
from header42.header.parser import extract_header, get_header_info
from header42.header.renderer import render_header
from header42.header.styles import CommentStyle, CommentStyleTable, supports_language

__all__ = [
    "HEADER_HEIGHT",
    "HEADER_WIDTH",
    "CommentStyle",
    "CommentStyleTable",
    "Header42Error",
    "HeaderInfo",
    "Identity",
    "MalformedHeaderError",
    "UnsupportedLanguageError",
    "extract_header",
    "get_header_info",
    "matches_frame",
    "refresh_header_info",
    "render_header",
    "supports_language",
]
