# topmark:header:start
#
#   project      : FmtBits
#   file         : errors.py
#   file_relpath : src/fmtbits/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the FmtBits library.

The engine favors silent degradation over failure: malformed directives,
out-of-range indices and unterminated braces never raise. Errors are limited
to problems detected while *building* a formatter (capturing arguments) and
to configuration problems.

Hierarchy:
    - `FmtbitsError`
        - `BuildError`
            - `ArgumentCaptureError`
            - `MissingPrinterError`
        - `ConfigError`
"""

from __future__ import annotations


class FmtbitsError(Exception):
    """Base class for all FmtBits errors."""


class BuildError(FmtbitsError):
    """A formatter could not be built from the supplied arguments."""


class ArgumentCaptureError(BuildError):
    """An argument could not be copied into its captured handle.

    Attributes:
        position (int): Zero-based argument position.
        value_type (type): Type of the offending value.
    """

    def __init__(self, position: int, value_type: type, reason: str) -> None:
        self.position = position
        self.value_type = value_type
        super().__init__(
            f"Cannot capture argument {position} of type {value_type.__qualname__!r}: {reason}"
        )


class MissingPrinterError(BuildError):
    """No printer is registered for the type of an argument.

    Attributes:
        position (int): Zero-based argument position.
        value_type (type): Type that has no resolvable printer.
    """

    def __init__(self, position: int, value_type: type) -> None:
        self.position = position
        self.value_type = value_type
        super().__init__(
            f"No printer registered for argument {position} of type {value_type.__qualname__!r}"
        )


class ConfigError(FmtbitsError):
    """Invalid configuration value or unreadable configuration source."""
