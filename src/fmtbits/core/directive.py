# topmark:header:start
#
#   project      : FmtBits
#   file         : directive.py
#   file_relpath : src/fmtbits/core/directive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Placeholder directive parsing.

A placeholder is the text between a ``{`` and the next ``}`` in a template:

    ``{index[,width][:specifier[precision]]}``

`parse_directive` turns the enclosed text into a `Directive`. The scanner is
permissive: unknown characters are skipped, missing fields keep their defaults
and nothing ever raises. ``{}`` therefore means argument 0 with the generic
specifier, and ``{1:}`` means argument 1 with the generic specifier.

Examples:
    ```python
    parse_directive("0")        # Directive(index=0, width=0, specifier="G", precision=0)
    parse_directive("1,6:x")    # Directive(index=1, width=6, specifier="x", precision=0)
    parse_directive("2:F3")     # Directive(index=2, width=0, specifier="F", precision=3)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, NamedTuple

from fmtbits.constants import (
    CLOSE_BRACE,
    GENERIC_SPECIFIER,
    OPEN_BRACE,
    SPECIFIER_SEPARATOR,
    WIDTH_SEPARATOR,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

_DIGITS: str = "0123456789"


class ScanState(Enum):
    """Field currently being accumulated by the directive scanner."""

    ARGUMENT_POSITION = auto()
    WIDTH = auto()
    SPECIFIER = auto()
    PRECISION = auto()


@dataclass(frozen=True, slots=True)
class Directive:
    """Parsed form of one placeholder.

    Attributes:
        index (int): Zero-based position of the referenced argument.
        width (int): Minimum field width; 0 disables padding.
        specifier (str): Single character selecting base/notation; its case
            selects upper/lower case letters in the output.
        precision (int): Decimal precision; 0 means unspecified.
    """

    index: int = 0
    width: int = 0
    specifier: str = GENERIC_SPECIFIER
    precision: int = 0


def parse_directive(text: str) -> Directive:
    """Parse the body of a placeholder (delimiters excluded).

    Args:
        text (str): Text strictly between ``{`` and ``}``.

    Returns:
        Directive: The parsed directive; unset fields keep their defaults.
    """
    index = 0
    width = 0
    specifier: str = GENERIC_SPECIFIER
    precision = 0
    state: ScanState = ScanState.ARGUMENT_POSITION

    for ch in text:
        if ch in _DIGITS:
            digit: int = ord(ch) - ord("0")
            if state is ScanState.ARGUMENT_POSITION:
                index = index * 10 + digit
            elif state is ScanState.WIDTH:
                width = width * 10 + digit
            elif state is ScanState.PRECISION:
                precision = precision * 10 + digit
            # digits never form a specifier
        elif ch.isalpha():
            if state is ScanState.SPECIFIER:
                specifier = ch
                state = ScanState.PRECISION
        elif ch == SPECIFIER_SEPARATOR:
            state = ScanState.SPECIFIER
        elif ch == WIDTH_SEPARATOR:
            state = ScanState.WIDTH

    return Directive(index=index, width=width, specifier=specifier, precision=precision)


class Placeholder(NamedTuple):
    """A placeholder located in a template.

    Attributes:
        start (int): Offset of the opening ``{``.
        end (int): Offset just past the closing ``}``.
        body (str): Raw text between the delimiters.
        directive (Directive): The parsed directive.
    """

    start: int
    end: int
    body: str
    directive: Directive


def iter_placeholders(template: str) -> Iterator[Placeholder]:
    """Yield every terminated placeholder of ``template`` in order.

    Scanning stops at the first ``{`` without a closing ``}``; the trailing
    fragment is not a placeholder.

    Args:
        template (str): The template to scan.

    Yields:
        Placeholder: Location, raw body and parsed directive of each placeholder.
    """
    pos = 0
    while True:
        start: int = template.find(OPEN_BRACE, pos)
        if start < 0:
            return
        close: int = template.find(CLOSE_BRACE, start + 1)
        if close < 0:
            return
        body: str = template[start + 1 : close]
        yield Placeholder(start, close + 1, body, parse_directive(body))
        pos = close + 1
