# topmark:header:start
#
#   project      : FmtBits
#   file         : constants.py
#   file_relpath : src/fmtbits/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtBits Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

FMTBITS_VERSION: str = get_version("fmtbits")

# Placeholder delimiters
OPEN_BRACE: Final[str] = "{"
CLOSE_BRACE: Final[str] = "}"

# Directive separators
WIDTH_SEPARATOR: Final[str] = ","
SPECIFIER_SEPARATOR: Final[str] = ":"

# Specifier used when a placeholder carries none (selects generic insertion)
GENERIC_SPECIFIER: Final[str] = "G"

# Precision used by fixed/scientific notation when none was requested
DEFAULT_FLOAT_PRECISION: Final[int] = 6

DEFAULT_FILL: Final[str] = " "

# Upper bounds applied when rendering; larger directive values are clamped
MAX_FIELD_WIDTH: Final[int] = 4096
MAX_FLOAT_PRECISION: Final[int] = 1024

# Config file names
FMTBITS_TOML_NAME: Final[str] = "fmtbits.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: Final[str] = "FMTBITS_LOG_LEVEL"
