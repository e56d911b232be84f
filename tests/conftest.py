# topmark:header:start
#
#   project      : FmtBits
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FmtBits test suite.

Sets up TRACE logging for the whole run and provides typed wrappers around
pytest decorators plus a few shared fixtures.

Notes:
    Tests that register printers must not leak them into the process-global
    `fmtbits.DEFAULT_REGISTRY`; use the ``registry`` fixture (an independent
    copy) and pass it to ``build(..., registry=registry)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from fmtbits.config import logging
from fmtbits.core.printers import DEFAULT_REGISTRY, PrinterRegistry
from fmtbits.core.stream import OutputStream

F = TypeVar("F", bound=Callable[..., object])

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


@pytest.fixture(autouse=True)
def silence_fmtbits_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure a developer's exported FMTBITS_LOG_LEVEL does not leak into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to drop the variable.
    """
    monkeypatch.delenv("FMTBITS_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show every rendered placeholder.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def registry() -> PrinterRegistry:
    """Return an independent copy of the default printer registry."""
    return DEFAULT_REGISTRY.copy()


@pytest.fixture
def stream() -> OutputStream:
    """Return a buffered stream in its default state."""
    return OutputStream()
