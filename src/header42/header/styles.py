# topmark:header:start
#
#   project      : Header42
#   file         : styles.py
#   file_relpath : src/header42/header/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment styles and the language lookup table.

Every row of a 42 header is wrapped in the same pair of comment tokens: a left
token that overwrites the first columns of the frame and a mirrored right token
that overwrites the last columns. Languages differ only in which pair they use,
so support for a language is a single table entry mapping its editor identifier
(``"c"``, ``"python"``, ...) to one of a small set of named styles.

Example (``slashes`` and ``hashes``, first two rows):

    /* ************************************************************************** */
    /*                                                                            */

    # **************************************************************************** #
    #                                                                              #
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from header42.config.logging import get_logger
from header42.header.errors import UnsupportedLanguageError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)


class CommentKind(Enum):
    """Closed set of comment style variants.

    Members:
        BLOCK: Each row is a self-contained block comment (``/* ... */``).
        LINE: Each row starts with a line-comment token, mirrored at the end of
            the row for symmetry (``# ... #``).
        UNSUPPORTED: The language has no comment syntax a header can live in.
    """

    BLOCK = "block"
    LINE = "line"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class CommentStyle:
    """Delimiter tokens for one comment style.

    Attributes:
        name (str): Style name used in configuration (``"slashes"``, ``"hashes"``, ...).
        kind (CommentKind): Style variant.
        left (str): Token written at the start of every header row.
        right (str): Token written at the end of every header row.
    """

    name: str
    kind: CommentKind
    left: str = ""
    right: str = ""

    @property
    def supported(self) -> bool:
        """Whether a header can be rendered with this style."""
        return self.kind is not CommentKind.UNSUPPORTED


SLASHES: Final = CommentStyle("slashes", CommentKind.BLOCK, "/* ", " */")
PARENS: Final = CommentStyle("parens", CommentKind.BLOCK, "(* ", " *)")
HASHES: Final = CommentStyle("hashes", CommentKind.LINE, "# ", " #")
SEMICOLONS: Final = CommentStyle("semicolons", CommentKind.LINE, ";; ", " ;;")
DASHES: Final = CommentStyle("dashes", CommentKind.LINE, "-- ", " --")
PERCENTS: Final = CommentStyle("percents", CommentKind.LINE, "%% ", " %%")
NO_COMMENTS: Final = CommentStyle("none", CommentKind.UNSUPPORTED)

STYLES_BY_NAME: Final[Mapping[str, CommentStyle]] = MappingProxyType(
    {
        style.name: style
        for style in (SLASHES, PARENS, HASHES, SEMICOLONS, DASHES, PERCENTS, NO_COMMENTS)
    }
)

# Editor language identifiers and the style their header uses.
BUILTIN_LANGUAGES: Final[Mapping[str, CommentStyle]] = MappingProxyType(
    {
        "c": SLASHES,
        "coffeescript": HASHES,
        "cpp": SLASHES,
        "css": SLASHES,
        "dockerfile": HASHES,
        "fsharp": PARENS,
        "go": SLASHES,
        "groovy": SLASHES,
        "haskell": DASHES,
        "ini": SEMICOLONS,
        "jade": SLASHES,
        "java": SLASHES,
        "javascript": SLASHES,
        "javascriptreact": SLASHES,
        "json": NO_COMMENTS,
        "latex": PERCENTS,
        "less": SLASHES,
        "lua": DASHES,
        "makefile": HASHES,
        "markdown": NO_COMMENTS,
        "objective-c": SLASHES,
        "objective-cpp": SLASHES,
        "ocaml": PARENS,
        "perl": HASHES,
        "perl6": HASHES,
        "php": SLASHES,
        "plaintext": HASHES,
        "powershell": HASHES,
        "python": HASHES,
        "r": HASHES,
        "ruby": HASHES,
        "rust": SLASHES,
        "scss": SLASHES,
        "shellscript": HASHES,
        "sql": HASHES,
        "swift": SLASHES,
        "typescript": SLASHES,
        "typescriptreact": SLASHES,
        "xsl": SLASHES,
        "yaml": HASHES,
    }
)


class CommentStyleTable:
    """Read-only lookup from language identifier to comment style."""

    def __init__(self, entries: Mapping[str, CommentStyle]) -> None:
        self._entries: Mapping[str, CommentStyle] = MappingProxyType(dict(entries))

    def __contains__(self, language_id: object) -> bool:
        return language_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def supports_language(self, language_id: str) -> bool:
        """Return True iff ``language_id`` maps to a style a header can be rendered in."""
        style = self._entries.get(language_id)
        return style is not None and style.supported

    def get(self, language_id: str) -> CommentStyle | None:
        """Return the style entry for ``language_id`` (supported or not), if any."""
        return self._entries.get(language_id)

    def style_for(self, language_id: str) -> CommentStyle:
        """Return the comment style for a supported language.

        Raises:
            UnsupportedLanguageError: If the language is unknown or has no comment syntax.
        """
        style = self._entries.get(language_id)
        if style is None or not style.supported:
            raise UnsupportedLanguageError(language_id)
        return style

    def with_overrides(self, overrides: Mapping[str, str]) -> CommentStyleTable:
        """Return a new table with extra or replaced entries.

        Args:
            overrides (Mapping[str, str]): Language identifier to style name
                (a key of ``STYLES_BY_NAME``).

        Returns:
            CommentStyleTable: The merged table; ``self`` is left untouched.

        Raises:
            ValueError: If a style name is unknown.
        """
        merged: dict[str, CommentStyle] = dict(self._entries)
        for language_id, style_name in overrides.items():
            style = STYLES_BY_NAME.get(style_name)
            if style is None:
                raise ValueError(
                    f"Unknown comment style {style_name!r} for language {language_id!r} "
                    f"(expected one of: {', '.join(sorted(STYLES_BY_NAME))})"
                )
            logger.debug("Language %s uses comment style %s", language_id, style.name)
            merged[language_id] = style
        return CommentStyleTable(merged)


DEFAULT_STYLE_TABLE: Final = CommentStyleTable(BUILTIN_LANGUAGES)


def supports_language(language_id: str) -> bool:
    """Return True iff the built-in table can render a header for ``language_id``."""
    return DEFAULT_STYLE_TABLE.supports_language(language_id)
