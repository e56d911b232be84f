# topmark:header:start
#
#   project      : FmtBits
#   file         : dump_config.py
#   file_relpath : src/fmtbits/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtBits `dump-config` command.

Emits the effective configuration as TOML after applying defaults, the
optional config file and any CLI overrides. The output is wrapped between
`# === BEGIN ===` and `# === END ===` markers; the body is a valid
``fmtbits.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fmtbits.cli.options import common_config_options, resolve_format_config
from fmtbits.config.io import to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from fmtbits.config.model import Alignment, FormatConfig, UnterminatedBracePolicy

BEGIN_MARKER = "# === BEGIN ==="
END_MARKER = "# === END ==="


@click.command(
    name="dump-config",
    help="Dump the effective FmtBits configuration as TOML.",
)
@common_config_options
def dump_config_command(
    *,
    config_path: Path | None,
    unterminated: UnterminatedBracePolicy | None,
    fill: str | None,
    align: Alignment | None,
) -> None:
    """Print the merged configuration between BEGIN/END markers.

    Raises:
        FmtbitsConfigError: If the configuration is unreadable or invalid.
    """
    config: FormatConfig = resolve_format_config(
        config_path, unterminated=unterminated, fill=fill, align=align
    )
    click.echo(BEGIN_MARKER)
    click.echo(to_toml(config), nl=False)
    click.echo(END_MARKER)
