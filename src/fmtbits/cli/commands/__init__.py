# topmark:header:start
#
#   project      : FmtBits
#   file         : __init__.py
#   file_relpath : src/fmtbits/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtBits CLI subcommands."""

from __future__ import annotations
