# topmark:header:start
#
#   project      : FmtBits
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FmtBits through Click's test runner.

Every CLI invocation calls `setup_logging`, which replaces the root logger's
handlers with one bound to the runner's temporary stderr. The autouse
``restore_root_logger`` fixture puts the suite-wide logging setup back after
each test.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from fmtbits.cli.exit_codes import ExitCode
from fmtbits.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Save and restore the root logger's level and handlers around a test."""
    root: logging.Logger = logging.getLogger()
    level: int = root.level
    handlers: list[logging.Handler] = root.handlers[:]
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["render", "{0:x}", "255"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["version"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
