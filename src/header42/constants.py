# topmark:header:start
#
#   project      : Header42
#   file         : constants.py
#   file_relpath : src/header42/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header42 Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

HEADER42_VERSION: str = get_version("header42")

# Timestamp layout used on the "Created:" and "Updated:" rows.
TIMESTAMP_FORMAT: Final[str] = "%Y/%m/%d %H:%M:%S"

# Identity fallbacks, applied by the configuration layer only.
DEFAULT_USERNAME: Final[str] = "marvin"
DEFAULT_EMAIL_DOMAIN: Final[str] = "student.42.fr"

# Configuration sources, looked up in the working directory.
CONFIG_FILE_NAME: Final[str] = "header42.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[str] = "header42"

# Environment variables
ENV_LOG_LEVEL: Final[str] = "HEADER42_LOG_LEVEL"
ENV_USERNAME: Final[str] = "HEADER42_USERNAME"
ENV_EMAIL: Final[str] = "HEADER42_EMAIL"
ENV_SYSTEM_USER: Final[str] = "USER"
