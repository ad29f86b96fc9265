# topmark:header:start
#
#   project      : Header42
#   file         : test_main_group.py
#   file_relpath : tests/cli/test_main_group.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: group options and the informational commands (`languages`, `dump-config`)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import tomlkit

from header42.cli.exit_codes import ExitCode
from header42.config.logging import TRACE_LEVEL
from tests.cli.conftest import assert_exit_code, assert_SUCCESS, assert_USAGE_ERROR, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


@mark_cli
def test_no_command_prints_help() -> None:
    """Running the bare group prints a hint and the help text."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "insert" in result.output
    assert "update" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """-v and -q cannot be combined."""
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
@parametrize("level, expected", [("TRACE", TRACE_LEVEL), ("info", logging.INFO), ("10", 10)])
def test_log_level_from_environment(
    level: str, expected: int, monkeypatch: pytest.MonkeyPatch
) -> None:
    """HEADER42_LOG_LEVEL configures internal logging."""
    monkeypatch.setenv("HEADER42_LOG_LEVEL", level)

    assert_SUCCESS(run_cli(["version"]))

    assert logging.getLogger().level == expected


@mark_cli
def test_languages_lists_supported_styles() -> None:
    """Supported languages are listed with their tokens; unsupported ones are hidden."""
    result = run_cli(["languages"])

    assert_SUCCESS(result)
    rows = {line.split()[0]: line for line in result.output.splitlines() if line.strip()}
    assert "/* ... */" in rows["c"]
    assert "hashes" in rows["python"]
    assert "json" not in rows


@mark_cli
def test_languages_all_includes_unsupported() -> None:
    """--all also lists languages without comment syntax."""
    result = run_cli(["languages", "--all"])

    assert_SUCCESS(result)
    rows = {line.split()[0]: line for line in result.output.splitlines() if line.strip()}
    assert "unsupported" in rows["json"]


@mark_cli
def test_languages_includes_configured(tmp_path: Path) -> None:
    """Configured languages appear in the listing."""
    (tmp_path / "header42.toml").write_text('[languages]\nnim = "hashes"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["languages"])

    assert_SUCCESS(result)
    assert any(line.startswith("nim ") for line in result.output.splitlines())


@mark_cli
def test_dump_config_is_valid_toml(tmp_path: Path) -> None:
    """The dump parses back and reflects config files and flags."""
    (tmp_path / "header42.toml").write_text(
        'email = "cfg@example.org"\n\n[extensions]\n".nim" = "nim"\n', encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["dump-config", "--username", "jdoe"])

    assert_SUCCESS(result)
    data = tomlkit.parse(result.output).unwrap()
    assert data["username"] == "jdoe"
    assert data["email"] == "cfg@example.org"
    assert data["extensions"] == {".nim": "nim"}


@mark_cli
def test_dump_config_defaults(tmp_path: Path) -> None:
    """Without configuration the identity falls back to $USER."""
    result = run_cli_in(tmp_path, ["dump-config"])

    assert_SUCCESS(result)
    data = tomlkit.parse(result.output).unwrap()
    assert data["username"] == "marvin"
    assert data["email"] == "marvin@student.42.fr"


@mark_cli
def test_dump_config_missing_explicit_file(tmp_path: Path) -> None:
    """An explicit --config that does not exist is a config error."""
    result = run_cli_in(tmp_path, ["dump-config", "--config", "missing.toml"])

    assert_exit_code(result, ExitCode.CONFIG_ERROR)


@mark_cli
def test_dump_config_rejects_long_username(tmp_path: Path) -> None:
    """dump-config fails on a username that does not fit the header."""
    result = run_cli_in(tmp_path, ["dump-config", "--username", "averyveryverylongname"])

    assert_exit_code(result, ExitCode.CONFIG_ERROR)
    assert "longer than 11 characters" in result.output
