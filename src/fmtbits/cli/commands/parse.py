# topmark:header:start
#
#   project      : FmtBits
#   file         : parse.py
#   file_relpath : src/fmtbits/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtBits `parse` command.

Lists the placeholders of a template together with their parsed directives,
which helps when debugging the permissive directive scanner.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

import click

from fmtbits.cli.cli_types import EnumChoiceParam, OutputFormat
from fmtbits.constants import OPEN_BRACE
from fmtbits.core.directive import Placeholder, iter_placeholders


def describe_template(template: str) -> dict[str, Any]:
    """Return a JSON-compatible description of ``template``'s placeholders.

    The ``unterminated`` entry holds the offset of a trailing ``{`` without
    closing ``}``, or ``None``.
    """
    placeholders: list[Placeholder] = list(iter_placeholders(template))
    tail: int = placeholders[-1].end if placeholders else 0
    unterminated: int = template.find(OPEN_BRACE, tail)
    return {
        "template": template,
        "placeholders": [
            {"start": p.start, "end": p.end, "body": p.body, **asdict(p.directive)}
            for p in placeholders
        ],
        "unterminated": unterminated if unterminated >= 0 else None,
    }


@click.command(
    name="parse",
    help="Show the placeholders of TEMPLATE and their parsed directives.",
)
@click.argument("template")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def parse_command(*, template: str, output_format: OutputFormat | None) -> None:
    """Print the placeholders found in ``template``."""
    info: dict[str, Any] = describe_template(template)

    if output_format is OutputFormat.JSON:
        click.echo(json.dumps(info))
        return

    if not info["placeholders"]:
        click.echo("No placeholders.")
    for entry in info["placeholders"]:
        click.echo(
            f"{entry['start']}-{entry['end']}  {{{entry['body']}}}  "
            f"index={entry['index']} width={entry['width']} "
            f"specifier={entry['specifier']} precision={entry['precision']}"
        )
    if info["unterminated"] is not None:
        click.echo(f"Unterminated '{{' at offset {info['unterminated']}.")
