# topmark:header:start
#
#   project      : FmtBits
#   file         : render.py
#   file_relpath : src/fmtbits/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtBits `render` command.

Renders a template with values given on the command line:

    ```console
    $ fmtbits render "Test: {0:X}, {1}" 42 sup
    Test: 2A, sup
    ```

Values that look like integers or decimal floats are converted so numeric
specifiers apply to them; ``--no-coerce`` passes every value as a string.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import click

from fmtbits.cli.errors import FmtbitsBuildError
from fmtbits.cli.options import common_config_options, resolve_format_config
from fmtbits.config.logging import get_logger
from fmtbits.core.formatter import Formatter, build
from fmtbits.errors import BuildError

if TYPE_CHECKING:
    from pathlib import Path

    from fmtbits.config.model import Alignment, FormatConfig, UnterminatedBracePolicy

logger = get_logger(__name__)

_FLOAT_RE: re.Pattern[str] = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


def coerce_value(text: str) -> Any:
    """Convert ``text`` to ``int`` or ``float`` when it spells one; else return it."""
    try:
        return int(text)
    except ValueError:
        pass
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    return text


@click.command(
    name="render",
    help="Render TEMPLATE with VALUES substituted for its {index} placeholders.",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("template")
@click.argument("values", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--coerce/--no-coerce",
    default=True,
    show_default=True,
    help="Convert numeric-looking values to int/float.",
)
@common_config_options
@click.option(
    "-n",
    "--no-newline",
    is_flag=True,
    default=False,
    help="Do not print a trailing newline.",
)
def render_command(
    *,
    template: str,
    values: tuple[str, ...],
    coerce: bool,
    config_path: Path | None,
    unterminated: UnterminatedBracePolicy | None,
    fill: str | None,
    align: Alignment | None,
    no_newline: bool,
) -> None:
    """Render a template with command-line values.

    Args:
        template (str): The template string.
        values (tuple[str, ...]): Raw values, one per argument position.
        coerce (bool): Whether to convert numeric-looking values.
        config_path (Path | None): Optional configuration file.
        unterminated (UnterminatedBracePolicy | None): Override of the config policy.
        fill (str | None): Override of the padding character.
        align (Alignment | None): Override of the padding side.
        no_newline (bool): Suppress the trailing newline.

    Raises:
        FmtbitsConfigError: If the configuration is unreadable or invalid.
        FmtbitsBuildError: If a value cannot be captured.
    """
    config: FormatConfig = resolve_format_config(
        config_path, unterminated=unterminated, fill=fill, align=align
    )

    args: list[Any] = [coerce_value(v) for v in values] if coerce else list(values)
    logger.debug("Rendering %r with %d value(s)", template, len(args))

    try:
        formatter: Formatter = build(template, *args, config=config)
    except BuildError as exc:
        raise FmtbitsBuildError(str(exc)) from exc

    click.echo(formatter.to_string(), nl=not no_newline)
