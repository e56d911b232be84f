# topmark:header:start
#
#   project      : FmtBits
#   file         : strategies_fmtbits.py
#   file_relpath : tests/strategies_fmtbits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for templates, directives and argument values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

EXCLUDED_CATEGORIES: tuple[str, ...] = ("Cs",)

SPECIFIERS: str = "dDeEfFoOxXgGsS"


def s_literal_text(max_size: int = 40) -> st.SearchStrategy[str]:
    """Text that contains no opening brace (and thus no placeholder)."""
    return st.text(
        alphabet=st.characters(exclude_characters="{", exclude_categories=EXCLUDED_CATEGORIES),
        max_size=max_size,
    )


def s_any_template(max_size: int = 60) -> st.SearchStrategy[str]:
    """Arbitrary text biased towards braces and directive characters."""
    return st.text(
        alphabet=st.one_of(
            st.sampled_from("{},:0123456789xXdDfFeEoO"),
            st.characters(exclude_categories=EXCLUDED_CATEGORIES),
        ),
        max_size=max_size,
    )


def s_generic_value() -> st.SearchStrategy[Any]:
    """Values whose generic rendering is ``str(value)`` in any stream state."""
    return st.one_of(
        st.integers(min_value=-(10**12), max_value=10**12),
        st.booleans(),
        s_literal_text(max_size=12),
    )


@st.composite
def s_directive_fields(draw: Draw) -> tuple[int, int, str, int]:
    """Generate (index, width, specifier, precision) with small numbers."""
    index: int = draw(st.integers(min_value=0, max_value=20))
    width: int = draw(st.integers(min_value=0, max_value=30))
    specifier: str = draw(st.sampled_from(SPECIFIERS))
    precision: int = draw(st.integers(min_value=0, max_value=12))
    return index, width, specifier, precision


def directive_text(index: int, width: int, specifier: str, precision: int) -> str:
    """Spell a directive body in canonical form."""
    text: str = str(index)
    if width:
        text += f",{width}"
    text += f":{specifier}"
    if precision:
        text += str(precision)
    return text
