# topmark:header:start
#
#   project      : FmtBits
#   file         : __init__.py
#   file_relpath : src/fmtbits/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting engine internals.

Modules:
    - fmtbits.core.directive: placeholder parsing
    - fmtbits.core.stream: output sink and its formatting state
    - fmtbits.core.state: scoped state save/restore and directive application
    - fmtbits.core.printers: per-type printers and their registry
    - fmtbits.core.arguments: argument capture
    - fmtbits.core.formatter: the render pipeline

The public API is re-exported from the top-level `fmtbits` package.
"""

from __future__ import annotations
