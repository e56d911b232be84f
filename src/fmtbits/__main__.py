# topmark:header:start
#
#   project      : FmtBits
#   file         : __main__.py
#   file_relpath : src/fmtbits/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for ``python -m fmtbits``.

Delegates to `fmtbits.cli.main.cli`, the same entry point as the ``fmtbits``
console script.
"""

from __future__ import annotations

from fmtbits.cli.main import cli

if __name__ == "__main__":
    cli()
