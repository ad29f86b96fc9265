# topmark:header:start
#
#   project      : Header42
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Header42 test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing. It also holds the
canonical C header used as the reference block throughout the suite.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any, Final, TypeVar, cast

import pytest

from header42.config import logging
from header42.header.model import HeaderInfo, Identity

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_engine: DecoratorType[Any] = as_typed_mark(pytest.mark.engine)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


# fmt: off
CANONICAL_C_LINES: Final[tuple[str, ...]] = (
    "/* ************************************************************************** */",
    "/*                                                                            */",
    "/*                                                        :::      ::::::::   */",
    "/*   main.c                                             :+:      :+:    :+:   */",
    "/*                                                    +:+ +:+         +:+     */",
    "/*   By: jdoe <jdoe@student.42.fr>                  +#+  +:+       +#+        */",
    "/*                                                +#+#+#+#+#+   +#+           */",
    "/*   Created: 2024/01/10 09:00:00 by jdoe              #+#    #+#             */",
    "/*   Updated: 2024/02/01 17:30:00 by jdoe             ###   ########.fr       */",
    "/*                                                                            */",
    "/* ************************************************************************** */",
)
# fmt: on

CANONICAL_C_HEADER: Final[str] = "".join(f"{line}\n" for line in CANONICAL_C_LINES)

CANONICAL_C_INFO: Final[HeaderInfo] = HeaderInfo(
    filename="main.c",
    author="jdoe <jdoe@student.42.fr>",
    created_at=datetime(2024, 1, 10, 9, 0, 0),
    created_by="jdoe",
    updated_at=datetime(2024, 2, 1, 17, 30, 0),
    updated_by="jdoe",
)


@pytest.fixture(autouse=True)
def silence_header42_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Header42's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("HEADER42_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def stable_identity_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the identity-related environment so tests do not depend on the developer's shell."""
    monkeypatch.delenv("HEADER42_USERNAME", raising=False)
    monkeypatch.delenv("HEADER42_EMAIL", raising=False)
    monkeypatch.setenv("USER", "marvin")


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def identity() -> Identity:
    """Operator identity used by the engine and document tests."""
    return Identity(user="jdoe", email="jdoe@student.42.fr")


@pytest.fixture
def now() -> datetime:
    """A fixed edit time."""
    return datetime(2024, 3, 15, 12, 34, 56)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty temporary working directory.

    Keeps configuration discovery (``pyproject.toml`` / ``header42.toml``) from
    picking up files of the repository itself.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
