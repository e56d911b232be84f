# topmark:header:start
#
#   project      : FmtBits
#   file         : model.py
#   file_relpath : src/fmtbits/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for formatters.

`FormatConfig` is an immutable snapshot consumed by `fmtbits.build`. It is
built from defaults, from a mapping (e.g. a parsed TOML table, see
`fmtbits.config.io`), and refined with `FormatConfig.merged_with` for
CLI/API overrides.

Scope:
    - *In scope*: field shapes, defaults, validation and override layering.
    - *Out of scope*: TOML file I/O, which lives in `fmtbits.config.io`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from fmtbits.config.keys import Toml
from fmtbits.config.logging import get_logger
from fmtbits.constants import DEFAULT_FILL
from fmtbits.core.stream import StreamFlags
from fmtbits.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fmtbits.config.logging import FmtbitsLogger

logger: FmtbitsLogger = get_logger(__name__)


class UnterminatedBracePolicy(str, Enum):
    """What the render pipeline does with a ``{`` that has no closing ``}``.

    Either way rendering stops at that brace.
    """

    LITERAL = "literal"  # emit the "{" and the remaining text verbatim
    DISCARD = "discard"  # drop the "{" and the remaining text


class Alignment(str, Enum):
    """Side on which padded fields are aligned."""

    RIGHT = "right"
    LEFT = "left"

    @property
    def flag(self) -> StreamFlags:
        """The stream adjust flag matching this alignment."""
        return StreamFlags.LEFT if self is Alignment.LEFT else StreamFlags.RIGHT


def _enum_value(enum_cls: type[Enum], key: str, raw: object) -> Any:
    if isinstance(raw, enum_cls):
        return raw
    if isinstance(raw, str):
        try:
            return enum_cls(raw.strip().lower())
        except ValueError:
            pass
    allowed: str = ", ".join(repr(m.value) for m in enum_cls)
    raise ConfigError(f"Invalid value {raw!r} for '{key}' (expected one of: {allowed})")


def _fill_value(raw: object) -> str:
    if not isinstance(raw, str) or len(raw) != 1:
        raise ConfigError(f"Invalid value {raw!r} for '{Toml.KEY_FILL}' (expected one character)")
    return raw


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable formatter configuration.

    Attributes:
        unterminated (UnterminatedBracePolicy): Handling of an unmatched ``{``.
        fill (str): Padding character used for width directives.
        align (Alignment): Padding side for width directives.
    """

    unterminated: UnterminatedBracePolicy = UnterminatedBracePolicy.LITERAL
    fill: str = DEFAULT_FILL
    align: Alignment = Alignment.RIGHT

    def __post_init__(self) -> None:
        # Normalize plain strings passed by API callers
        object.__setattr__(
            self,
            "unterminated",
            _enum_value(UnterminatedBracePolicy, Toml.KEY_UNTERMINATED, self.unterminated),
        )
        object.__setattr__(self, "align", _enum_value(Alignment, Toml.KEY_ALIGN, self.align))
        _fill_value(self.fill)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> FormatConfig:
        """Build a config from a TOML-like mapping.

        Unknown keys are logged and ignored.

        Args:
            data (Mapping[str, object]): Table of configuration keys.

        Returns:
            FormatConfig: The validated configuration.

        Raises:
            ConfigError: If a known key carries an invalid value.
        """
        unknown: list[str] = sorted(k for k in data if k not in Toml.ALL_KEYS)
        if unknown:
            logger.warning("Ignoring unknown configuration key(s): %s", ", ".join(unknown))
        return cls().merged_with(**{k: v for k, v in data.items() if k in Toml.ALL_KEYS})

    def merged_with(self, **overrides: object) -> FormatConfig:
        """Return a copy with the non-``None`` ``overrides`` applied.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        changes: dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        bad: list[str] = sorted(k for k in changes if k not in Toml.ALL_KEYS)
        if bad:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(bad)}")
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict[str, str]:
        """Return the configuration as a TOML-compatible table."""
        return {
            Toml.KEY_UNTERMINATED: self.unterminated.value,
            Toml.KEY_FILL: self.fill,
            Toml.KEY_ALIGN: self.align.value,
        }


DEFAULT_CONFIG: FormatConfig = FormatConfig()
