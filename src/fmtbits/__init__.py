# topmark:header:start
#
#   project      : FmtBits
#   file         : __init__.py
#   file_relpath : src/fmtbits/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FmtBits package.

FmtBits brings indexed, type-safe format strings to Python. A template is bound
once to its arguments (each argument is copied and paired with a per-type
printer), and the resulting `Formatter` can be rendered any number of times:

    ```python
    import fmtbits

    f = fmtbits.build("Test: {0:X}, {1}", 42, "sup")
    str(f)                      # "Test: 2A, sup"
    f.render(sys.stdout)        # writes the same text to stdout
    ```

Placeholder syntax: ``{index[,width][:specifier[precision]]}`` with the
specifiers ``d`` (decimal), ``e`` (scientific), ``f`` (fixed), ``o`` (octal)
and ``x`` (hexadecimal); the specifier's case selects the letter case.
"""

from __future__ import annotations

from fmtbits.config.model import Alignment, FormatConfig, UnterminatedBracePolicy
from fmtbits.core.arguments import CapturedArgument
from fmtbits.core.directive import Directive, Placeholder, iter_placeholders, parse_directive
from fmtbits.core.formatter import Formatter, build, format_string, render, to_string
from fmtbits.core.printers import (
    DEFAULT_REGISTRY,
    Printer,
    PrinterRegistry,
    default_printer,
    printer_for,
    register_printer,
    unregister_printer,
)
from fmtbits.core.state import StreamStateGuard, apply_directive
from fmtbits.core.stream import OutputStream, StreamFlags, StreamState
from fmtbits.errors import (
    ArgumentCaptureError,
    BuildError,
    ConfigError,
    FmtbitsError,
    MissingPrinterError,
)

format = format_string  # noqa: A001

__all__ = [
    "DEFAULT_REGISTRY",
    "Alignment",
    "ArgumentCaptureError",
    "BuildError",
    "CapturedArgument",
    "ConfigError",
    "Directive",
    "FmtbitsError",
    "FormatConfig",
    "Formatter",
    "MissingPrinterError",
    "OutputStream",
    "Placeholder",
    "Printer",
    "PrinterRegistry",
    "StreamFlags",
    "StreamState",
    "StreamStateGuard",
    "UnterminatedBracePolicy",
    "apply_directive",
    "build",
    "default_printer",
    "format",
    "format_string",
    "iter_placeholders",
    "parse_directive",
    "printer_for",
    "register_printer",
    "render",
    "to_string",
    "unregister_printer",
]
