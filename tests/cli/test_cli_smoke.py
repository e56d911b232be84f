# topmark:header:start
#
#   project      : FmtBits
#   file         : test_cli_smoke.py
#   file_relpath : tests/cli/test_cli_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests: group behavior, verbosity flags and exit codes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from fmtbits.cli.errors import FmtbitsUsageError
from fmtbits.cli.exit_codes import ExitCode
from fmtbits.cli.options import resolve_verbosity
from fmtbits.config.logging import TRACE_LEVEL
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from click.testing import Result


@parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_conflict() -> None:
    with pytest.raises(FmtbitsUsageError) as excinfo:
        resolve_verbosity(1, 1)
    assert excinfo.value.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "fmtbits render TEMPLATE" in result.output
    assert "Commands:" in result.output


@mark_cli
def test_help_lists_commands() -> None:
    result: Result = run_cli(["-h"])
    assert_SUCCESS(result)
    for name in ("render", "parse", "dump-config", "version"):
        assert name in result.output


@mark_cli
def test_verbose_and_quiet_conflict() -> None:
    result: Result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
def test_quiet_render_still_prints() -> None:
    result: Result = run_cli(["-q", "render", "{0:o}", "8"])
    assert_SUCCESS(result)
    assert result.output == "10\n"


@mark_cli
def test_env_log_level_overrides_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    """FMTBITS_LOG_LEVEL wins over -v/-q; diagnostics go to the log stream."""
    monkeypatch.setenv("FMTBITS_LOG_LEVEL", "DEBUG")
    result: Result = run_cli(["-q", "version"])
    assert_SUCCESS(result)
    assert logging.getLogger().level == logging.DEBUG
