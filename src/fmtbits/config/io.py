# topmark:header:start
#
#   project      : FmtBits
#   file         : io.py
#   file_relpath : src/fmtbits/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render FmtBits configuration as TOML.

Supported sources:
- ``fmtbits.toml``: configuration keys at the top level;
- ``pyproject.toml``: configuration keys in the ``[tool.fmtbits]`` table.

Parsing is done with `tomlkit`; documents are converted to plain `dict`
structures before validation by `FormatConfig.from_mapping`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fmtbits.config.keys import Toml
from fmtbits.config.logging import get_logger
from fmtbits.config.model import FormatConfig
from fmtbits.constants import PYPROJECT_TOML_NAME
from fmtbits.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from fmtbits.config.logging import FmtbitsLogger

TomlTable = dict[str, Any]

logger: FmtbitsLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Read ``path`` and return its content as a plain dict.

    Args:
        path (Path): TOML file to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", doc.unwrap())


def extract_fmtbits_table(doc: TomlTable, *, is_pyproject: bool) -> TomlTable:
    """Return the FmtBits table of a parsed document.

    For ``pyproject.toml`` this is ``[tool.fmtbits]`` (empty when absent); for
    a ``fmtbits.toml`` it is the whole document.

    Raises:
        ConfigError: If the table exists but is not a table.
    """
    if not is_pyproject:
        return doc
    tool: object = doc.get(Toml.SECTION_TOOL, {})
    table: object = tool.get(Toml.SECTION_FMTBITS, {}) if isinstance(tool, dict) else {}
    if not isinstance(table, dict):
        raise ConfigError(f"[{Toml.SECTION_TOOL}.{Toml.SECTION_FMTBITS}] must be a table")
    return cast("TomlTable", table)


def load_config_file(path: Path) -> FormatConfig:
    """Load a `FormatConfig` from a ``fmtbits.toml`` or ``pyproject.toml``.

    Args:
        path (Path): Path to the configuration file.

    Returns:
        FormatConfig: The validated configuration.

    Raises:
        ConfigError: If the file is unreadable, malformed, or holds invalid values.
    """
    doc: TomlTable = load_toml_dict(path)
    table: TomlTable = extract_fmtbits_table(doc, is_pyproject=path.name == PYPROJECT_TOML_NAME)
    return FormatConfig.from_mapping(table)


def to_toml(config: FormatConfig) -> str:
    """Render ``config`` as a ``fmtbits.toml`` document."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in config.to_dict().items():
        doc.add(key, value)
    return tomlkit.dumps(doc)
