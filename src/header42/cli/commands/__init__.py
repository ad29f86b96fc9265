# topmark:header:start
#
#   project      : Header42
#   file         : __init__.py
#   file_relpath : src/header42/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 subcommands, one module per command."""

from __future__ import annotations
