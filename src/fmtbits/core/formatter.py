# topmark:header:start
#
#   project      : FmtBits
#   file         : formatter.py
#   file_relpath : src/fmtbits/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The render pipeline.

A `Formatter` binds a template to the arguments captured at construction.
Rendering walks the template left to right: literal text is copied verbatim and
every ``{...}`` placeholder is replaced by the referenced argument, rendered by
its printer inside a `StreamStateGuard`.

- An index beyond the captured arguments renders nothing.
- A ``{`` without a closing ``}`` ends the scan; the configured
  `UnterminatedBracePolicy` decides whether the trailing fragment is emitted.
- Literal braces cannot be escaped.

A formatter never changes after construction, so it can be rendered any number
of times, also concurrently from several threads into distinct streams.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fmtbits.config.logging import get_logger
from fmtbits.config.model import DEFAULT_CONFIG, UnterminatedBracePolicy
from fmtbits.constants import CLOSE_BRACE, OPEN_BRACE
from fmtbits.core.arguments import capture_arguments
from fmtbits.core.directive import parse_directive
from fmtbits.core.printers import DEFAULT_REGISTRY
from fmtbits.core.stream import OutputStream

if TYPE_CHECKING:
    from fmtbits.config.logging import FmtbitsLogger
    from fmtbits.config.model import FormatConfig
    from fmtbits.core.arguments import CapturedArgument
    from fmtbits.core.directive import Directive
    from fmtbits.core.printers import PrinterRegistry
    from fmtbits.core.stream import TextSink

logger: FmtbitsLogger = get_logger(__name__)


class Formatter:
    """A template bound to a fixed sequence of captured arguments.

    Args:
        template (str): Template with ``{index[,width][:specifier[precision]]}`` placeholders.
        *args (Any): Values referenced by index; each is copied at construction.
        registry (PrinterRegistry | None): Printer registry; the default registry when None.
        config (FormatConfig | None): Formatter configuration; defaults when None.

    Raises:
        MissingPrinterError: If an argument's type has no printer.
        ArgumentCaptureError: If an argument cannot be copied.
    """

    __slots__ = ("_args", "_config", "_template")

    def __init__(
        self,
        template: str,
        *args: Any,
        registry: PrinterRegistry | None = None,
        config: FormatConfig | None = None,
    ) -> None:
        self._template: str = template
        self._config: FormatConfig = config or DEFAULT_CONFIG
        self._args: tuple[CapturedArgument[Any], ...] = capture_arguments(
            args, registry or DEFAULT_REGISTRY
        )

    @property
    def template(self) -> str:
        return self._template

    @property
    def arguments(self) -> tuple[CapturedArgument[Any], ...]:
        """The captured argument handles, in capture order."""
        return self._args

    @property
    def config(self) -> FormatConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._args)

    def render(self, sink: OutputStream | TextSink) -> OutputStream:
        """Render the template once, appending to ``sink``.

        Args:
            sink (OutputStream | TextSink): An `OutputStream`, or any object with
                ``write(str)``, which is then wrapped in a fresh `OutputStream`
                configured from this formatter's config.

        Returns:
            OutputStream: The stream that received the output.
        """
        stream: OutputStream = (
            sink if isinstance(sink, OutputStream) else OutputStream.from_config(self._config, sink)
        )
        template: str = self._template
        pos = 0
        end: int = len(template)

        while pos < end:
            brace: int = template.find(OPEN_BRACE, pos)
            if brace < 0:
                stream.write(template[pos:])
                break
            stream.write(template[pos:brace])

            close: int = template.find(CLOSE_BRACE, brace + 1)
            if close < 0:
                self._render_unterminated(stream, brace)
                break

            self._render_placeholder(stream, parse_directive(template[brace + 1 : close]))
            pos = close + 1

        return stream

    def to_string(self) -> str:
        """Render into a fresh buffer and return the text."""
        stream: OutputStream = OutputStream.from_config(self._config)
        self.render(stream)
        return stream.getvalue()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Formatter({self._template!r}, {len(self._args)} argument(s))"

    def _render_placeholder(self, stream: OutputStream, directive: Directive) -> None:
        if directive.index >= len(self._args):
            logger.debug(
                "Placeholder index %d out of range (%d argument(s)); nothing emitted",
                directive.index,
                len(self._args),
            )
            return
        logger.trace("Rendering %r", directive)
        self._args[directive.index].render(stream, directive)

    def _render_unterminated(self, stream: OutputStream, brace: int) -> None:
        logger.debug(
            "Unterminated '{' at offset %d in %r (policy: %s)",
            brace,
            self._template,
            self._config.unterminated.value,
        )
        if self._config.unterminated is UnterminatedBracePolicy.LITERAL:
            stream.write(self._template[brace:])


def build(
    template: str,
    *args: Any,
    registry: PrinterRegistry | None = None,
    config: FormatConfig | None = None,
) -> Formatter:
    """Capture ``args`` and bind them to ``template``.

    Examples:
        ```python
        str(build("Test: {0:X}, {1}", 42, "sup"))  # "Test: 2A, sup"
        ```
    """
    return Formatter(template, *args, registry=registry, config=config)


def render(formatter: Formatter, sink: OutputStream | TextSink) -> OutputStream:
    """Render ``formatter`` once into ``sink``. See `Formatter.render`."""
    return formatter.render(sink)


def to_string(formatter: Formatter) -> str:
    """Render ``formatter`` into a new string."""
    return formatter.to_string()


def format_string(
    template: str,
    *args: Any,
    registry: PrinterRegistry | None = None,
    config: FormatConfig | None = None,
) -> str:
    """One-shot ``to_string(build(template, *args))``."""
    return Formatter(template, *args, registry=registry, config=config).to_string()
