# topmark:header:start
#
#   project      : FmtBits
#   file         : __init__.py
#   file_relpath : src/fmtbits/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for FmtBits."""

from __future__ import annotations
