# topmark:header:start
#
#   project      : Header42
#   file         : __main__.py
#   file_relpath : src/header42/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Header42 via ``python -m header42``.

It delegates directly to :func:`header42.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Header42 is launched.

Examples:
    Refresh the banner of a C file::

        python -m header42 insert --apply main.c
"""

from __future__ import annotations

from header42.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
