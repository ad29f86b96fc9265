# topmark:header:start
#
#   project      : Header42
#   file         : test_filetypes.py
#   file_relpath : tests/filetypes/test_filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path to language identifier resolution."""

from __future__ import annotations

from pathlib import Path

from header42.filetypes import FILETYPES, get_file_type_registry, resolve_language
from header42.header.styles import DEFAULT_STYLE_TABLE
from tests.conftest import parametrize


@parametrize(
    "path, expected",
    [
        ("main.c", "c"),
        ("src/libft.h", "c"),
        ("ft_printf.cpp", "cpp"),
        ("script.py", "python"),
        ("run.sh", "shellscript"),
        ("Makefile", "makefile"),
        ("rules.mk", "makefile"),
        ("Dockerfile", "dockerfile"),
        ("MAIN.C", "c"),
        ("notes.md", "markdown"),
        ("README", None),
        ("archive.tar.gz", None),
    ],
)
def test_resolve_language(path: str, expected: str | None) -> None:
    """Exact names and suffixes map to editor identifiers."""
    assert resolve_language(Path(path)) == expected


def test_override_wins() -> None:
    """An explicit language identifier bypasses the path rules."""
    assert resolve_language("main.c", override="cpp") == "cpp"


def test_configured_extensions_take_precedence() -> None:
    """Configured suffixes are consulted before the built-in rules."""
    extensions = {".h": "cpp", ".nim": "nim"}
    assert resolve_language("x.h", extensions=extensions) == "cpp"
    assert resolve_language("x.NIM", extensions=extensions) == "nim"
    assert resolve_language("x.c", extensions=extensions) == "c"


def test_registry_is_keyed_by_language() -> None:
    """Every built-in file type is registered under its identifier."""
    registry = get_file_type_registry()
    assert len(registry) == len(FILETYPES)
    assert registry["python"].matches(Path("a.pyi"))


def test_every_file_type_is_in_the_style_table() -> None:
    """Each file type resolves to an identifier the style table knows."""
    for ft in FILETYPES:
        assert ft.name in DEFAULT_STYLE_TABLE, ft.name
