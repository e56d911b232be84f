# topmark:header:start
#
#   project      : FmtBits
#   file         : keys.py
#   file_relpath : src/fmtbits/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML table and key names for FmtBits configuration.

Configuration is read from a ``fmtbits.toml`` file (keys at top level) or from
the ``[tool.fmtbits]`` table of a ``pyproject.toml``. Renaming a key here is a
breaking change for users' configuration files.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table names and keys used by FmtBits configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_FMTBITS: Final[str] = "fmtbits"

    # Keys
    KEY_UNTERMINATED: Final[str] = "unterminated"
    KEY_FILL: Final[str] = "fill"
    KEY_ALIGN: Final[str] = "align"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_UNTERMINATED, KEY_FILL, KEY_ALIGN})
