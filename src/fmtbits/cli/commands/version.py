# topmark:header:start
#
#   project      : FmtBits
#   file         : version.py
#   file_relpath : src/fmtbits/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtBits `version` command."""

from __future__ import annotations

import json

import click

from fmtbits.cli.cli_types import EnumChoiceParam, OutputFormat
from fmtbits.constants import FMTBITS_VERSION


@click.command(
    name="version",
    help="Show the current version of FmtBits.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Print the FmtBits version installed in the current environment."""
    if output_format is OutputFormat.JSON:
        click.echo(json.dumps({"version": FMTBITS_VERSION}))
    else:
        click.echo(FMTBITS_VERSION)
