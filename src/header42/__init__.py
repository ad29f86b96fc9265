# topmark:header:start
#
#   project      : Header42
#   file         : __init__.py
#   file_relpath : src/header42/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 package.

Header42 maintains the fixed-format 42 banner at the top of source files. It
inserts a fresh banner into new files and refreshes the "Updated" row on every
save while keeping the original "Created" row intact. It exposes a small header
engine (`header42.header`), a document layer for editor integrations
(`header42.document`) and a Click CLI.
"""

from __future__ import annotations
