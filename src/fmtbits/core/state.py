# topmark:header:start
#
#   project      : FmtBits
#   file         : state.py
#   file_relpath : src/fmtbits/core/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scoped mutation of an `OutputStream`'s formatting state.

Every placeholder is rendered inside a `StreamStateGuard`. The guard snapshots
the stream state on entry and puts exactly that snapshot back on exit, also
when the printer raises, so one placeholder's base, width or precision never
leaks into the next placeholder or into the caller's later writes.

Typical usage:
    ```python
    with StreamStateGuard(stream):
        apply_directive(stream, width=6, specifier="X", precision=0)
        stream.insert(255)          # "    FF"
    stream.insert(255)              # "255": state restored
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtbits.core.stream import BASEFIELD, FLOATFIELD, StreamFlags

if TYPE_CHECKING:
    from types import TracebackType

    from fmtbits.core.stream import OutputStream, StreamState

# Lower-cased specifier -> (flags to set, field cleared first)
_SPECIFIER_FLAGS: dict[str, tuple[StreamFlags, StreamFlags]] = {
    "d": (StreamFlags.DEC, BASEFIELD),
    "e": (StreamFlags.SCIENTIFIC, FLOATFIELD),
    "f": (StreamFlags.FIXED, FLOATFIELD),
    "o": (StreamFlags.OCT, BASEFIELD),
    "x": (StreamFlags.HEX, BASEFIELD),
}


class StreamStateGuard:
    """Context manager restoring a stream's formatting state on exit.

    Args:
        stream (OutputStream): The stream whose state is saved and restored.
    """

    __slots__ = ("_saved", "_stream")

    def __init__(self, stream: OutputStream) -> None:
        self._stream: OutputStream = stream
        self._saved: StreamState = stream.snapshot()

    @property
    def saved(self) -> StreamState:
        """State captured when the guard was created."""
        return self._saved

    def __enter__(self) -> OutputStream:
        return self._stream

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._stream.restore(self._saved)


def apply_directive(
    stream: OutputStream,
    *,
    width: int,
    specifier: str,
    precision: int,
) -> None:
    """Apply one placeholder's directive to ``stream``.

    - The specifier's case switches uppercase mode on or off.
    - A nonzero ``width`` / ``precision`` is set on the stream.
    - ``d``/``o``/``x`` select the numeric base and ``e``/``f`` the float
      notation (case-insensitive); any other specifier leaves both untouched.

    Args:
        stream (OutputStream): Stream to mutate; callers wrap this in a `StreamStateGuard`.
        width (int): Minimum field width, 0 for none.
        specifier (str): Specifier character.
        precision (int): Decimal precision, 0 for unspecified.
    """
    if specifier.isupper():
        stream.setf(StreamFlags.UPPERCASE)
    else:
        stream.unsetf(StreamFlags.UPPERCASE)

    if width:
        stream.width = width
    if precision:
        stream.precision = precision

    selected: tuple[StreamFlags, StreamFlags] | None = _SPECIFIER_FLAGS.get(specifier.lower())
    if selected is not None:
        flags, field = selected
        stream.setf(flags, field)
