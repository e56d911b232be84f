# topmark:header:start
#
#   project      : FmtBits
#   file         : printers.py
#   file_relpath : src/fmtbits/core/printers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-type printers and the registry that resolves them.

A *printer* renders one captured value into an `OutputStream`:

    ``printer(value, stream, width, specifier, precision) -> None``

The default printer applies the directive to the stream state and inserts the
value generically. Custom printers replace that behavior for a type (and its
subclasses, unless a more specific registration exists). Resolution walks the
value type's MRO and happens once, when an argument is captured.

Typical usage:
    ```python
    from fmtbits import build, printer_for

    @printer_for(Point)
    def print_point(value, stream, width, specifier, precision):
        stream.write(f"({value.x}, {value.y})")

    str(build("at {0}", Point(1, 2)))  # "at (1, 2)"
    ```

Warning:
    `DEFAULT_REGISTRY` is process-global. Tests registering temporary printers
    should unregister them again (or use a `PrinterRegistry.copy`).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar

from fmtbits.config.logging import get_logger
from fmtbits.core.state import apply_directive

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fmtbits.config.logging import FmtbitsLogger
    from fmtbits.core.stream import OutputStream

logger: FmtbitsLogger = get_logger(__name__)

_T_contra = TypeVar("_T_contra", contravariant=True)
_P = TypeVar("_P", bound="Printer[Any]")


class Printer(Protocol[_T_contra]):
    """Callable rendering one value into a stream."""

    def __call__(
        self,
        value: _T_contra,
        stream: OutputStream,
        width: int,
        specifier: str,
        precision: int,
    ) -> None: ...


def default_printer(
    value: object,
    stream: OutputStream,
    width: int,
    specifier: str,
    precision: int,
) -> None:
    """Apply the directive to the stream state, then insert ``value``."""
    apply_directive(stream, width=width, specifier=specifier, precision=precision)
    stream.insert(value)


class PrinterRegistry:
    """Mapping from types to printers with MRO-based resolution.

    Args:
        include_default (bool): Register `default_printer` for ``object`` so that
            every type resolves. Without it, unregistered types have no printer.
    """

    def __init__(self, *, include_default: bool = True) -> None:
        self._printers: dict[type, Printer[Any] | None] = {}
        if include_default:
            self._printers[object] = default_printer

    def register(self, cls: type, printer: Printer[Any]) -> None:
        """Bind ``printer`` to ``cls`` (replacing any previous binding)."""
        logger.debug("Registering printer %r for %s", printer, cls.__qualname__)
        self._printers[cls] = printer

    def block(self, cls: type) -> None:
        """Mark ``cls`` (and subclasses without their own printer) as unprintable."""
        logger.debug("Blocking printing of %s", cls.__qualname__)
        self._printers[cls] = None

    def unregister(self, cls: type) -> bool:
        """Remove the binding for ``cls``.

        Returns:
            bool: ``True`` if a binding (printer or block) was removed.
        """
        if cls not in self._printers:
            return False
        del self._printers[cls]
        return True

    def resolve(self, cls: type) -> Printer[Any] | None:
        """Return the printer for ``cls``, or ``None`` when none applies.

        The most specific class in ``cls.__mro__`` with a binding wins; a
        blocked class stops the search.
        """
        for klass in cls.__mro__:
            if klass in self._printers:
                return self._printers[klass]
        return None

    def is_registered(self, cls: type) -> bool:
        """Return True if ``cls`` itself has a binding."""
        return cls in self._printers

    def as_mapping(self) -> Mapping[type, Printer[Any] | None]:
        """Return a read-only view of the bindings."""
        return MappingProxyType(self._printers)

    def copy(self) -> PrinterRegistry:
        """Return an independent registry with the same bindings."""
        clone = PrinterRegistry(include_default=False)
        clone._printers.update(self._printers)
        return clone

    def printer_for(self, cls: type) -> Callable[[_P], _P]:
        """Decorator registering the decorated function as printer for ``cls``."""

        def _decorator(func: _P) -> _P:
            self.register(cls, func)
            return func

        return _decorator


DEFAULT_REGISTRY: PrinterRegistry = PrinterRegistry()


def register_printer(cls: type, printer: Printer[Any]) -> None:
    """Register ``printer`` for ``cls`` in the default registry."""
    DEFAULT_REGISTRY.register(cls, printer)


def unregister_printer(cls: type) -> bool:
    """Remove the default-registry binding for ``cls``."""
    return DEFAULT_REGISTRY.unregister(cls)


def printer_for(cls: type) -> Callable[[_P], _P]:
    """Decorator form of `register_printer` for the default registry."""
    return DEFAULT_REGISTRY.printer_for(cls)
