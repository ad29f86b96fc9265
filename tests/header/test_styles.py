# topmark:header:start
#
#   project      : Header42
#   file         : test_styles.py
#   file_relpath : tests/header/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment styles and the language lookup table."""

from __future__ import annotations

import pytest

from header42.header.errors import UnsupportedLanguageError
from header42.header.layout import FRAME_MARGIN
from header42.header.styles import (
    DEFAULT_STYLE_TABLE,
    HASHES,
    SLASHES,
    STYLES_BY_NAME,
    CommentKind,
    supports_language,
)
from tests.conftest import mark_engine, parametrize


@mark_engine
@parametrize(
    "language_id, style_name",
    [
        ("c", "slashes"),
        ("cpp", "slashes"),
        ("javascript", "slashes"),
        ("python", "hashes"),
        ("shellscript", "hashes"),
        ("makefile", "hashes"),
        ("ini", "semicolons"),
        ("ocaml", "parens"),
        ("haskell", "dashes"),
        ("lua", "dashes"),
        ("latex", "percents"),
    ],
)
def test_builtin_languages(language_id: str, style_name: str) -> None:
    """Known editor identifiers map to the expected style."""
    assert supports_language(language_id)
    assert DEFAULT_STYLE_TABLE.style_for(language_id).name == style_name


@mark_engine
@parametrize("language_id", ["json", "markdown", "brainfuck", ""])
def test_unsupported_languages(language_id: str) -> None:
    """Languages without comment syntax, or unknown ones, are not supported."""
    assert not supports_language(language_id)
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        DEFAULT_STYLE_TABLE.style_for(language_id)
    assert exc_info.value.language_id == language_id


@mark_engine
def test_unsupported_entries_are_listed_by_name() -> None:
    """Known-but-unsupported languages are in the table with the ``none`` style."""
    assert "json" in DEFAULT_STYLE_TABLE
    style = DEFAULT_STYLE_TABLE.get("json")
    assert style is not None
    assert style.kind is CommentKind.UNSUPPORTED
    assert not style.supported
    assert DEFAULT_STYLE_TABLE.get("brainfuck") is None


@mark_engine
def test_tokens_fit_in_the_margin() -> None:
    """Every supported style's tokens fit in the frame margin and are mirrored in width."""
    for style in STYLES_BY_NAME.values():
        if not style.supported:
            continue
        assert 0 < len(style.left) <= FRAME_MARGIN
        assert len(style.left) == len(style.right)


@mark_engine
def test_style_kinds() -> None:
    """Block and line styles are tagged as such."""
    assert SLASHES.kind is CommentKind.BLOCK
    assert HASHES.kind is CommentKind.LINE


@mark_engine
def test_table_iterates_sorted() -> None:
    """Iteration is alphabetical, for stable listings."""
    ids = list(DEFAULT_STYLE_TABLE)
    assert ids == sorted(ids)
    assert len(ids) == len(DEFAULT_STYLE_TABLE)


@mark_engine
def test_with_overrides_adds_and_replaces() -> None:
    """Overrides add new languages and replace existing ones without touching the original."""
    table = DEFAULT_STYLE_TABLE.with_overrides({"nim": "hashes", "c": "parens"})

    assert table.style_for("nim") is HASHES
    assert table.style_for("c").name == "parens"
    assert DEFAULT_STYLE_TABLE.style_for("c") is SLASHES
    assert "nim" not in DEFAULT_STYLE_TABLE


@mark_engine
def test_with_overrides_can_disable_a_language() -> None:
    """Mapping a language to ``none`` turns its support off."""
    table = DEFAULT_STYLE_TABLE.with_overrides({"python": "none"})
    assert not table.supports_language("python")


@mark_engine
def test_with_overrides_rejects_unknown_style() -> None:
    """An unknown style name is reported with the valid choices."""
    with pytest.raises(ValueError, match="slashes"):
        DEFAULT_STYLE_TABLE.with_overrides({"nim": "curly"})
