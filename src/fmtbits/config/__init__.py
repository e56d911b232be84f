# topmark:header:start
#
#   project      : FmtBits
#   file         : __init__.py
#   file_relpath : src/fmtbits/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for FmtBits.

Public surface:
    - `FormatConfig`, `UnterminatedBracePolicy`, `Alignment`
    - `load_config_file`, `to_toml`
"""

from __future__ import annotations

from fmtbits.config.io import load_config_file, to_toml
from fmtbits.config.model import DEFAULT_CONFIG, Alignment, FormatConfig, UnterminatedBracePolicy

__all__ = [
    "DEFAULT_CONFIG",
    "Alignment",
    "FormatConfig",
    "UnterminatedBracePolicy",
    "load_config_file",
    "to_toml",
]
