# topmark:header:start
#
#   project      : Header42
#   file         : exit_codes.py
#   file_relpath : src/header42/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Header42 CLI.

Header42 aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `WOULD_CHANGE=2`,
which signals a dry run in which files would be modified (or, for ``check``, files
without a valid header). Click still reports its own parsing errors (unknown options,
invalid option values) with 2; the usage checks Header42 performs itself exit with
`USAGE_ERROR`.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Header42 CLI.

    Attributes:
        SUCCESS: Successful execution, nothing to change.
        FAILURE: Generic failure.
        WOULD_CHANGE: Dry run: changes would be made if ``--apply`` were set.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding error. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_LANGUAGE: No header support for the file's language.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_LANGUAGE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
