# topmark:header:start
#
#   project      : FmtBits
#   file         : errors.py
#   file_relpath : src/fmtbits/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FmtBits CLI.

Raise these from commands to terminate with a message on stderr and the
matching `ExitCode`.
"""

from __future__ import annotations

import click

from fmtbits.cli.exit_codes import ExitCode


class FmtbitsCliError(click.ClickException):
    """Base class for all FmtBits CLI errors."""

    exit_code = ExitCode.FAILURE


class FmtbitsUsageError(FmtbitsCliError):
    """Invalid command-line invocation (conflicting flags, bad arguments)."""

    exit_code = ExitCode.USAGE_ERROR


class FmtbitsConfigError(FmtbitsCliError):
    """Configuration file missing, malformed or holding invalid values."""

    exit_code = ExitCode.CONFIG_ERROR


class FmtbitsBuildError(FmtbitsCliError):
    """The formatter could not be built from the given values."""

    exit_code = ExitCode.FAILURE
