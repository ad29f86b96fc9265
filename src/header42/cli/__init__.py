# topmark:header:start
#
#   project      : Header42
#   file         : __init__.py
#   file_relpath : src/header42/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 CLI package.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        header42 = "header42.cli.main:cli"

All subcommands live in [`header42.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
