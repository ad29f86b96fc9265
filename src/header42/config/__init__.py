# topmark:header:start
#
#   project      : Header42
#   file         : __init__.py
#   file_relpath : src/header42/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot used at runtime.
    - `MutableConfig`: a mutable builder used while merging sources; it is
      frozen into `Config` once all sources are applied.

Sources, lowest to highest precedence:
    1. built-in defaults (nothing set),
    2. ``[tool.header42]`` in ``pyproject.toml``, then ``header42.toml``, both in
       the working directory,
    3. an explicit config file (``--config``),
    4. the environment (``HEADER42_USERNAME``, ``HEADER42_EMAIL``),
    5. command-line flags.

The operator identity is resolved here, never in the header engine: username
from configuration, else ``$USER``, else ``marvin``; e-mail from configuration,
else ``<username>@student.42.fr``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from header42.config.io import (
    KEY_EMAIL,
    KEY_EXTENSIONS,
    KEY_LANGUAGES,
    KEY_USERNAME,
    KNOWN_KEYS,
    ConfigError,
    TomlTable,
    extract_config_table,
    get_string_mapping,
    get_string_value_or_none,
    load_toml_dict,
)
from header42.config.logging import get_logger
from header42.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_EMAIL_DOMAIN,
    DEFAULT_USERNAME,
    ENV_EMAIL,
    ENV_SYSTEM_USER,
    ENV_USERNAME,
    PYPROJECT_FILE_NAME,
)
from header42.header.layout import FIELDS_BY_NAME
from header42.header.model import Identity
from header42.header.styles import DEFAULT_STYLE_TABLE

if TYPE_CHECKING:
    from collections.abc import Mapping

    from header42.config.logging import Header42Logger
    from header42.header.styles import CommentStyleTable

logger: Header42Logger = get_logger(__name__)

USERNAME_WIDTH: Final[int] = FIELDS_BY_NAME["created_by"].width

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
    "load_config",
]


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        username (str | None): Configured username (``None``: fall back to ``$USER``).
        email (str | None): Configured e-mail (``None``: derive from the username).
        languages (Mapping[str, str]): Language identifier to comment style name overrides.
        extensions (Mapping[str, str]): File suffix to language identifier overrides.
        config_files (tuple[Path, ...]): Files that contributed to this configuration.
    """

    username: str | None = None
    email: str | None = None
    languages: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    extensions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    config_files: tuple[Path, ...] = ()

    def resolve_identity(self, environ: Mapping[str, str] | None = None) -> Identity:
        """Return the operator identity with fallbacks applied.

        Args:
            environ (Mapping[str, str] | None): Environment to read ``USER`` from;
                defaults to `os.environ`.

        Returns:
            Identity: Fully resolved username and e-mail.

        Raises:
            ConfigError: If the username contains whitespace or does not fit the
                "by" column of the header, which could then not be read back.
        """
        env = os.environ if environ is None else environ
        user = self.username or env.get(ENV_SYSTEM_USER) or DEFAULT_USERNAME
        if any(ch.isspace() for ch in user):
            raise ConfigError(f"Invalid username {user!r}: must not contain whitespace")
        if len(user) > USERNAME_WIDTH:
            raise ConfigError(
                f"Invalid username {user!r}: longer than {USERNAME_WIDTH} characters"
            )
        email = self.email or f"{user}@{DEFAULT_EMAIL_DOMAIN}"
        return Identity(user=user, email=email)

    def to_toml_dict(self, environ: Mapping[str, str] | None = None) -> TomlTable:
        """Return the effective configuration as a TOML-ready table.

        The identity is reported resolved, so the dump shows what would be written
        into a header.

        Raises:
            ConfigError: If the identity cannot be resolved (see `resolve_identity`).
        """
        identity = self.resolve_identity(environ)
        return {
            KEY_USERNAME: identity.user,
            KEY_EMAIL: identity.email,
            KEY_LANGUAGES: dict(self.languages),
            KEY_EXTENSIONS: dict(self.extensions),
        }

    def style_table(self) -> CommentStyleTable:
        """Return the built-in language table extended with the configured overrides.

        Raises:
            ConfigError: If an override names an unknown comment style.
        """
        if not self.languages:
            return DEFAULT_STYLE_TABLE
        try:
            return DEFAULT_STYLE_TABLE.with_overrides(self.languages)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc


@dataclass
class MutableConfig:
    """Mutable configuration used while merging sources.

    Attributes:
        username (str | None): Username, ``None`` = inherit.
        email (str | None): E-mail, ``None`` = inherit.
        languages (dict[str, str]): Language to style name overrides (merged key-wise).
        extensions (dict[str, str]): Suffix to language overrides (merged key-wise).
        config_files (list[Path]): Provenance.
    """

    username: str | None = None
    email: str | None = None
    languages: dict[str, str] = field(default_factory=lambda: {})
    extensions: dict[str, str] = field(default_factory=lambda: {})
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            username=self.username,
            email=self.email,
            languages=MappingProxyType(dict(self.languages)),
            extensions=MappingProxyType(dict(self.extensions)),
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            username=other.username if other.username is not None else self.username,
            email=other.email if other.email is not None else self.email,
            languages={**self.languages, **other.languages},
            extensions={**self.extensions, **other.extensions},
            config_files=self.config_files + other.config_files,
        )

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, source: str = "<dict>") -> MutableConfig:
        """Build a draft from a Header42 configuration table.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        for key in table:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown config key '%s' in %s", key, source)
        return cls(
            username=get_string_value_or_none(table, KEY_USERNAME, source=source),
            email=get_string_value_or_none(table, KEY_EMAIL, source=source),
            languages=get_string_mapping(table, KEY_LANGUAGES, source=source),
            extensions=get_string_mapping(table, KEY_EXTENSIONS, source=source),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``header42.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or ``None`` for a ``pyproject.toml``
                without a ``[tool.header42]`` table.

        Raises:
            ConfigError: If the file is unreadable or invalid.
        """
        logger.debug("Loading config from %s", path)
        table = extract_config_table(path, load_toml_dict(path))
        if table is None:
            return None
        draft = cls.from_toml_dict(table, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MutableConfig:
        """Build a draft from ``HEADER42_USERNAME`` / ``HEADER42_EMAIL``."""
        env = os.environ if environ is None else environ
        return cls(username=env.get(ENV_USERNAME) or None, email=env.get(ENV_EMAIL) or None)


def load_config(
    *,
    cwd: Path | None = None,
    config_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
    overrides: MutableConfig | None = None,
) -> Config:
    """Discover, merge and freeze the configuration.

    Args:
        cwd (Path | None): Directory searched for ``pyproject.toml`` and
            ``header42.toml``; defaults to the current working directory.
        config_file (Path | None): Explicit config file, applied after discovered ones.
        environ (Mapping[str, str] | None): Environment; defaults to `os.environ`.
        overrides (MutableConfig | None): Highest-precedence values (CLI flags).

    Returns:
        Config: The merged configuration.

    Raises:
        ConfigError: If a source is unreadable or invalid.
    """
    base = cwd or Path.cwd()
    draft = MutableConfig()
    candidates = [base / PYPROJECT_FILE_NAME, base / CONFIG_FILE_NAME]
    for path in candidates:
        if path.is_file():
            loaded = MutableConfig.from_toml_file(path)
            if loaded is not None:
                draft = draft.merge_with(loaded)
    if config_file is not None:
        if not config_file.is_file():
            raise ConfigError(f"Config file not found: {config_file}")
        loaded = MutableConfig.from_toml_file(config_file)
        if loaded is not None:
            draft = draft.merge_with(loaded)
    draft = draft.merge_with(MutableConfig.from_env(environ))
    if overrides is not None:
        draft = draft.merge_with(overrides)
    config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
