# topmark:header:start
#
#   project      : FmtBits
#   file         : stream.py
#   file_relpath : src/fmtbits/core/stream.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sink with iostream-like formatting state.

`OutputStream` is the append-only destination a formatter renders into. Besides
forwarding text to a target (anything with a ``write(str)`` method, an internal
buffer by default) it carries the mutable formatting state that placeholders
adjust:

- ``flags``: numeric base, float notation, uppercase mode and padding side;
- ``width``: minimum width of the *next* inserted field only;
- ``precision``: decimal precision for floats (0 means unspecified);
- ``fill``: padding character.

Width and precision are clamped to `MAX_FIELD_WIDTH` and `MAX_FLOAT_PRECISION`
when a value is rendered, so an oversized directive never fails.

`OutputStream.write` emits literal text untouched; `OutputStream.insert`
renders one value according to the current state.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import IntFlag
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fmtbits.constants import (
    DEFAULT_FILL,
    DEFAULT_FLOAT_PRECISION,
    MAX_FIELD_WIDTH,
    MAX_FLOAT_PRECISION,
)

if TYPE_CHECKING:
    from fmtbits.config.model import FormatConfig


@runtime_checkable
class TextSink(Protocol):
    """Anything that accepts text through ``write``."""

    def write(self, s: str, /) -> object:
        """Append ``s`` to the sink."""
        ...


class StreamFlags(IntFlag):
    """Formatting flags carried by an `OutputStream`."""

    NONE = 0

    # basefield
    DEC = 1 << 0
    OCT = 1 << 1
    HEX = 1 << 2

    # floatfield
    FIXED = 1 << 3
    SCIENTIFIC = 1 << 4

    UPPERCASE = 1 << 5

    # adjustfield
    LEFT = 1 << 6
    RIGHT = 1 << 7


BASEFIELD = StreamFlags.DEC | StreamFlags.OCT | StreamFlags.HEX
FLOATFIELD = StreamFlags.FIXED | StreamFlags.SCIENTIFIC
ADJUSTFIELD = StreamFlags.LEFT | StreamFlags.RIGHT

DEFAULT_FLAGS = StreamFlags.DEC | StreamFlags.RIGHT


@dataclass(frozen=True, slots=True)
class StreamState:
    """Immutable snapshot of an `OutputStream`'s formatting state."""

    flags: StreamFlags = DEFAULT_FLAGS
    width: int = 0
    precision: int = 0
    fill: str = DEFAULT_FILL


class OutputStream:
    """Append-only text sink with mutable formatting state.

    Args:
        target (TextSink | None): Destination for the produced text; an internal
            `io.StringIO` buffer when omitted.
        fill (str): Padding character.
        flags (StreamFlags): Initial formatting flags.
    """

    def __init__(
        self,
        target: TextSink | None = None,
        *,
        fill: str = DEFAULT_FILL,
        flags: StreamFlags = DEFAULT_FLAGS,
    ) -> None:
        self._buffer: io.StringIO | None = None
        if target is None:
            self._buffer = io.StringIO()
            target = self._buffer
        self._target: TextSink = target
        self.flags: StreamFlags = flags
        self.width: int = 0
        self.precision: int = 0
        self.fill: str = fill

    @classmethod
    def from_config(cls, config: FormatConfig, target: TextSink | None = None) -> OutputStream:
        """Create a stream seeded with the padding settings of ``config``."""
        flags: StreamFlags = StreamFlags.DEC | config.align.flag
        return cls(target, fill=config.fill, flags=flags)

    # --- state ---

    def snapshot(self) -> StreamState:
        """Return the current formatting state."""
        return StreamState(
            flags=self.flags, width=self.width, precision=self.precision, fill=self.fill
        )

    def restore(self, state: StreamState) -> None:
        """Reinstate a state previously returned by `snapshot`."""
        self.flags = state.flags
        self.width = state.width
        self.precision = state.precision
        self.fill = state.fill

    def setf(self, flags: StreamFlags, mask: StreamFlags | None = None) -> None:
        """Set ``flags``, clearing the bits of ``mask`` first when given."""
        if mask is not None:
            self.flags &= ~mask
        self.flags |= flags

    def unsetf(self, flags: StreamFlags) -> None:
        """Clear ``flags``."""
        self.flags &= ~flags

    @property
    def base(self) -> int:
        """Numeric base selected by the basefield flags."""
        if self.flags & StreamFlags.HEX:
            return 16
        if self.flags & StreamFlags.OCT:
            return 8
        return 10

    @property
    def uppercase(self) -> bool:
        return bool(self.flags & StreamFlags.UPPERCASE)

    # --- output ---

    def write(self, text: str) -> OutputStream:
        """Write literal ``text``; formatting state is neither used nor changed."""
        if text:
            self._target.write(text)
        return self

    def insert(self, value: object) -> OutputStream:
        """Render ``value`` with the current state and write it.

        The field is padded to ``width`` and ``width`` is reset to 0 afterwards.
        """
        text: str = self._pad(self.render_value(value))
        self.width = 0
        self._target.write(text)
        return self

    def render_value(self, value: object) -> str:
        """Return the unpadded text of ``value`` under the current state."""
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, int):
            return self._render_int(value)
        if isinstance(value, float):
            return self._render_float(value)
        return str(value)

    def getvalue(self) -> str:
        """Return the text written so far to the internal buffer.

        Raises:
            TypeError: If the stream writes to an external target.
        """
        if self._buffer is None:
            raise TypeError("OutputStream writes to an external target; it has no buffer")
        return self._buffer.getvalue()

    def _render_int(self, value: int) -> str:
        base: int = self.base
        if base == 10:
            return str(value)
        code: str = "o" if base == 8 else ("X" if self.uppercase else "x")
        sign: str = "-" if value < 0 else ""
        return f"{sign}{abs(value):{code}}"

    def _render_float(self, value: float) -> str:
        floatfield = self.flags & FLOATFIELD
        if floatfield == StreamFlags.FIXED:
            code = "f"
        elif floatfield == StreamFlags.SCIENTIFIC:
            code = "e"
        elif self.precision:
            code = "g"
        else:
            text: str = str(value)
            return text.upper() if self.uppercase else text
        precision: int = min(self.precision or DEFAULT_FLOAT_PRECISION, MAX_FLOAT_PRECISION)
        if self.uppercase:
            code = code.upper()
        return f"{value:.{precision}{code}}"

    def _pad(self, text: str) -> str:
        width: int = min(self.width, MAX_FIELD_WIDTH)
        if width <= len(text):
            return text
        if self.flags & StreamFlags.LEFT:
            return text.ljust(width, self.fill)
        return text.rjust(width, self.fill)
