# topmark:header:start
#
#   project      : FmtBits
#   file         : options.py
#   file_relpath : src/fmtbits/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

The verbosity flags select the level of FmtBits' internal logging (written to
stderr); ``FMTBITS_LOG_LEVEL`` takes precedence when set.

The config options (``--config``, ``--unterminated``, ``--fill``, ``--align``)
are shared by the commands that build a `FormatConfig`; `resolve_format_config`
layers the overrides on top of the optional config file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from fmtbits.cli.cli_types import EnumChoiceParam
from fmtbits.cli.errors import FmtbitsConfigError, FmtbitsUsageError
from fmtbits.config.io import load_config_file
from fmtbits.config.logging import TRACE_LEVEL
from fmtbits.config.model import DEFAULT_CONFIG, Alignment, FormatConfig, UnterminatedBracePolicy
from fmtbits.errors import ConfigError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of ``-v`` flags.
        quiet_count: Number of ``-q`` flags.

    Returns:
        The logging level: TRACE (``-vvv``), DEBUG (``-vv``), INFO (``-v``),
        ERROR (``-q``) or WARNING (default).

    Raises:
        FmtbitsUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FmtbitsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (up to -vvv for TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the config file and config override options to a command."""
    f = click.option(
        "--align",
        type=EnumChoiceParam(Alignment),
        default=None,
        help="Padding side for width directives (right, left).",
    )(f)
    f = click.option(
        "--fill",
        type=str,
        default=None,
        help="Padding character for width directives.",
    )(f)
    f = click.option(
        "--unterminated",
        type=EnumChoiceParam(UnterminatedBracePolicy),
        default=None,
        help="Handling of a '{' without closing '}' (literal, discard).",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from a fmtbits.toml or pyproject.toml ([tool.fmtbits]).",
    )(f)
    return f


def resolve_format_config(
    config_path: Path | None,
    *,
    unterminated: UnterminatedBracePolicy | None,
    fill: str | None,
    align: Alignment | None,
) -> FormatConfig:
    """Build the effective `FormatConfig` from the config options.

    Args:
        config_path (Path | None): Optional configuration file; defaults when None.
        unterminated (UnterminatedBracePolicy | None): Override of the unterminated-brace policy.
        fill (str | None): Override of the padding character.
        align (Alignment | None): Override of the padding side.

    Returns:
        FormatConfig: Defaults, then the file, then the non-None overrides.

    Raises:
        FmtbitsConfigError: If the file is unreadable or a value is invalid.
    """
    try:
        base: FormatConfig = load_config_file(config_path) if config_path else DEFAULT_CONFIG
        return base.merged_with(unterminated=unterminated, fill=fill, align=align)
    except ConfigError as exc:
        raise FmtbitsConfigError(str(exc)) from exc
