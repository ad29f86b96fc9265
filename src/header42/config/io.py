# topmark:header:start
#
#   project      : Header42
#   file         : io.py
#   file_relpath : src/header42/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Reads ``header42.toml`` files and the ``[tool.header42]`` table of
``pyproject.toml``. Parsing is done with `tomlkit` and returned as plain
``dict`` structures; the typed getters below validate individual values.

Layout of a configuration table::

    username = "jdoe"
    email = "jdoe@student.42.fr"

    [languages]          # language identifier -> comment style name
    nim = "hashes"

    [extensions]         # file suffix -> language identifier
    ".nim" = "nim"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from header42.config.logging import get_logger
from header42.constants import PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)

TomlTable = dict[str, Any]

KEY_USERNAME: Final[str] = "username"
KEY_EMAIL: Final[str] = "email"
KEY_LANGUAGES: Final[str] = "languages"
KEY_EXTENSIONS: Final[str] = "extensions"

KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {KEY_USERNAME, KEY_EMAIL, KEY_LANGUAGES, KEY_EXTENSIONS}
)


class ConfigError(Exception):
    """A configuration source is unreadable, not valid TOML, or has invalid values."""


def load_toml_dict(path: Path) -> TomlTable:
    """Read a TOML file and return it as a plain ``dict``.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    return cast("TomlTable", doc.unwrap())


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Header42 table of a parsed file.

    For ``pyproject.toml`` this is ``[tool.header42]`` (``None`` when absent);
    other files are the table themselves.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict) or PYPROJECT_TOOL_TABLE not in tool:
        logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_TABLE, path)
        return None
    table: Any = cast("TomlTable", tool)[PYPROJECT_TOOL_TABLE]
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_TABLE}] in {path} must be a table")
    return cast("TomlTable", table)


def get_string_value_or_none(table: TomlTable, key: str, *, source: str) -> str | None:
    """Return ``table[key]`` as a string, or ``None`` when absent.

    Raises:
        ConfigError: If the value is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string in {source} (got {type(value).__name__})")
    return value


def get_string_mapping(table: TomlTable, key: str, *, source: str) -> dict[str, str]:
    """Return ``table[key]`` as a ``str -> str`` mapping (empty when absent).

    Raises:
        ConfigError: If the value is not a table of strings.
    """
    value: Any = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table in {source}")
    result: dict[str, str] = {}
    for k, v in cast("dict[str, Any]", value).items():
        if not isinstance(v, str):
            raise ConfigError(f"[{key}].{k} must be a string in {source}")
        result[k] = v
    return result


def to_toml(table: TomlTable) -> str:
    """Serialize a configuration table to TOML text."""
    return tomlkit.dumps(table)
