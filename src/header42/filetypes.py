# topmark:header:start
#
#   project      : Header42
#   file         : filetypes.py
#   file_relpath : src/header42/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map file paths to editor language identifiers.

Editors hand the header engine a language identifier together with the document.
On the command line we only have a path, so this module recovers the identifier
from the file name or extension. Matching is by exact file name first
(``Makefile``, ``Dockerfile``), then by suffix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import PurePath
from typing import TYPE_CHECKING, Final

from header42.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)


@dataclass(frozen=True)
class FileType:
    """A language identifier and the path rules that select it.

    Attributes:
        name (str): Editor language identifier (``"c"``, ``"python"``, ...).
        extensions (tuple[str, ...]): Suffixes including the dot (``".c"``).
        filenames (tuple[str, ...]): Exact base names (``"Makefile"``).
        description (str): Human-readable description.
    """

    name: str
    extensions: tuple[str, ...] = field(default_factory=tuple)
    filenames: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def matches(self, path: PurePath) -> bool:
        """Return True if ``path`` is selected by this file type's name rules."""
        return path.name in self.filenames or path.suffix.lower() in self.extensions


FILETYPES: Final[tuple[FileType, ...]] = (
    FileType("c", (".c", ".h"), description="C sources and headers"),
    FileType("cpp", (".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx", ".tpp"), description="C++"),
    FileType("coffeescript", (".coffee",), description="CoffeeScript"),
    FileType("css", (".css",), description="CSS stylesheets"),
    FileType("dockerfile", filenames=("Dockerfile",), description="Dockerfiles"),
    FileType("fsharp", (".fs", ".fsi", ".fsx"), description="F#"),
    FileType("go", (".go",), description="Go"),
    FileType("groovy", (".groovy", ".gradle"), description="Groovy"),
    FileType("haskell", (".hs",), description="Haskell"),
    FileType("ini", (".ini", ".cfg"), description="INI files"),
    FileType("jade", (".jade", ".pug"), description="Jade/Pug templates"),
    FileType("java", (".java",), description="Java"),
    FileType("javascript", (".js", ".mjs", ".cjs"), description="JavaScript"),
    FileType("javascriptreact", (".jsx",), description="JavaScript React"),
    FileType("json", (".json",), description="JSON (no comment syntax)"),
    FileType("latex", (".tex", ".sty", ".cls"), description="LaTeX"),
    FileType("less", (".less",), description="Less stylesheets"),
    FileType("lua", (".lua",), description="Lua"),
    FileType(
        "makefile",
        (".mk",),
        ("Makefile", "makefile", "GNUmakefile"),
        description="Makefiles",
    ),
    FileType("markdown", (".md", ".markdown"), description="Markdown (no comment syntax)"),
    FileType("objective-c", (".m",), description="Objective-C"),
    FileType("objective-cpp", (".mm",), description="Objective-C++"),
    FileType("ocaml", (".ml", ".mli"), description="OCaml"),
    FileType("perl", (".pl", ".pm"), description="Perl"),
    FileType("perl6", (".p6", ".pm6", ".raku"), description="Raku"),
    FileType("php", (".php",), description="PHP"),
    FileType("plaintext", (".txt",), description="Plain text"),
    FileType("powershell", (".ps1", ".psm1"), description="PowerShell"),
    FileType("python", (".py", ".pyi"), description="Python"),
    FileType("r", (".r",), description="R"),
    FileType("ruby", (".rb",), ("Rakefile", "Gemfile"), description="Ruby"),
    FileType("rust", (".rs",), description="Rust"),
    FileType("scss", (".scss",), description="Sass (SCSS)"),
    FileType("shellscript", (".sh", ".bash", ".zsh"), description="Shell scripts"),
    FileType("sql", (".sql",), description="SQL"),
    FileType("swift", (".swift",), description="Swift"),
    FileType("typescript", (".ts",), description="TypeScript"),
    FileType("typescriptreact", (".tsx",), description="TypeScript React"),
    FileType("xsl", (".xsl", ".xslt"), description="XSL stylesheets"),
    FileType("yaml", (".yml", ".yaml"), description="YAML"),
)


@lru_cache(maxsize=1)
def get_file_type_registry() -> dict[str, FileType]:
    """Return the built-in file types keyed by language identifier."""
    return {ft.name: ft for ft in FILETYPES}


def resolve_language(
    path: str | PurePath,
    *,
    override: str | None = None,
    extensions: Mapping[str, str] | None = None,
) -> str | None:
    """Return the language identifier for ``path``.

    Args:
        path (str | PurePath): File path; only the base name is inspected.
        override (str | None): Explicit language identifier; wins over every rule.
        extensions (Mapping[str, str] | None): Extra suffix to language mappings
            (from configuration), consulted before the built-in rules.

    Returns:
        str | None: The language identifier, or ``None`` if nothing matched.
    """
    if override:
        return override

    p = PurePath(path)
    if extensions:
        suffix = p.suffix.lower()
        for ext, language_id in extensions.items():
            if ext.lower() == suffix:
                return language_id

    for ft in get_file_type_registry().values():
        if p.name in ft.filenames:
            return ft.name
    for ft in get_file_type_registry().values():
        if ft.matches(p):
            return ft.name

    logger.debug("No language identifier for %s", p)
    return None
