# topmark:header:start
#
#   project      : FmtBits
#   file         : arguments.py
#   file_relpath : src/fmtbits/core/arguments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capture of heterogeneous formatter arguments.

`capture_arguments` turns the positional arguments given to a formatter into a
tuple of `CapturedArgument` handles. Each handle owns a private deep copy of
its value together with the printer resolved for the value's type, so the
formatter can later render any argument without knowing its type, and without
being affected by the caller mutating the original object.

Capture is eager: it runs once when the formatter is built. Both failure modes
(a value that cannot be copied, a type without printer) surface here as
`fmtbits.errors.BuildError` subclasses rather than during rendering.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fmtbits.config.logging import get_logger
from fmtbits.core.printers import DEFAULT_REGISTRY
from fmtbits.core.state import StreamStateGuard
from fmtbits.errors import ArgumentCaptureError, MissingPrinterError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fmtbits.config.logging import FmtbitsLogger
    from fmtbits.core.directive import Directive
    from fmtbits.core.printers import Printer, PrinterRegistry
    from fmtbits.core.stream import OutputStream

logger: FmtbitsLogger = get_logger(__name__)

T = TypeVar("T")


class CapturedArgument(Generic[T]):
    """Type-erased handle owning one captured value.

    Args:
        value (T): The captured (already copied) value.
        printer (Printer[T]): Printer resolved for ``type(value)``.
    """

    __slots__ = ("_printer", "_value")

    def __init__(self, value: T, printer: Printer[T]) -> None:
        self._value: T = value
        self._printer: Printer[T] = printer

    @property
    def value(self) -> T:
        """The owned copy of the argument."""
        return self._value

    @property
    def value_type(self) -> type:
        """Type of the captured value, used for printer resolution."""
        return type(self._value)

    def render(self, stream: OutputStream, directive: Directive) -> None:
        """Render the owned value into ``stream`` using ``directive``.

        The printer runs inside a `StreamStateGuard`; the stream's formatting
        state is restored even if the printer raises.
        """
        with StreamStateGuard(stream):
            self._printer(
                self._value,
                stream,
                directive.width,
                directive.specifier,
                directive.precision,
            )

    def __repr__(self) -> str:
        return f"CapturedArgument({self._value!r})"


def capture_argument(
    position: int,
    value: T,
    registry: PrinterRegistry = DEFAULT_REGISTRY,
) -> CapturedArgument[T]:
    """Copy ``value`` and bind it to its printer.

    Args:
        position (int): Argument position, used in error messages.
        value (T): The caller's value.
        registry (PrinterRegistry): Registry used to resolve the printer.

    Returns:
        CapturedArgument[T]: The handle owning the copy.

    Raises:
        MissingPrinterError: If no printer resolves for ``type(value)``.
        ArgumentCaptureError: If ``value`` cannot be copied.
    """
    value_type: type = type(value)
    printer: Printer[Any] | None = registry.resolve(value_type)
    if printer is None:
        raise MissingPrinterError(position, value_type)
    try:
        owned: T = copy.deepcopy(value)
    except Exception as exc:
        raise ArgumentCaptureError(position, value_type, str(exc)) from exc
    return CapturedArgument(owned, printer)


def capture_arguments(
    values: Iterable[Any],
    registry: PrinterRegistry = DEFAULT_REGISTRY,
) -> tuple[CapturedArgument[Any], ...]:
    """Capture ``values`` in order into an immutable tuple of handles.

    Args:
        values (Iterable[Any]): The formatter's positional arguments.
        registry (PrinterRegistry): Registry used to resolve printers.

    Returns:
        tuple[CapturedArgument[Any], ...]: One handle per value, same order.
    """
    captured: tuple[CapturedArgument[Any], ...] = tuple(
        capture_argument(position, value, registry) for position, value in enumerate(values)
    )
    logger.trace("Captured %d argument(s)", len(captured))
    return captured
