# topmark:header:start
#
#   project      : LineMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Pytest configuration for the LineMark test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `linemark.config.MutableConfig`, then `freeze()` them into a
    `linemark.config.Config` for pipeline and API calls.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from linemark.config import MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from linemark.config import Config
    from linemark.markup.keywords import Clock

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

# Instant returned by the `fixed_clock` fixture.
FIXED_NOW: datetime = datetime(2024, 3, 9, 14, 5, 7, tzinfo=timezone.utc)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


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


@pytest.fixture(autouse=True)
def silence_linemark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure LineMark's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    LINEMARK_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("LINEMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    The directory carries a ``linemark.toml`` with ``root = true`` so config
    discovery never climbs into the developer's own files.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "linemark.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def fixed_clock() -> Clock:
    """Return a clock pinned to `FIXED_NOW`."""
    return lambda: FIXED_NOW


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute values set on the `MutableConfig` before freezing.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def make_loader(templates: dict[str, str]) -> Callable[[str], str]:
    """Return a template loader serving ``templates`` from memory.

    Unknown paths raise `FileNotFoundError`, like a missing file on disk.
    """

    def _load(path: str) -> str:
        try:
            return templates[path]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", path) from None

    return _load
