# topmark:header:start
#
#   project      : FmtBits
#   file         : test_directive.py
#   file_relpath : tests/core/test_directive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit and property tests for the placeholder directive scanner."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from fmtbits.constants import GENERIC_SPECIFIER
from fmtbits.core.directive import Directive, Placeholder, iter_placeholders, parse_directive
from tests.conftest import parametrize
from tests.strategies_fmtbits import directive_text, s_any_template, s_directive_fields


@parametrize(
    "body, expected",
    [
        ("", Directive()),
        ("0", Directive(0, 0, GENERIC_SPECIFIER, 0)),
        ("12", Directive(index=12)),
        ("1,6", Directive(index=1, width=6)),
        ("0:x", Directive(specifier="x")),
        ("0:X4", Directive(specifier="X", precision=4)),
        ("2,10:f3", Directive(2, 10, "f", 3)),
        (":e", Directive(specifier="e")),
        ("1:", Directive(index=1)),
        (" 3 , 4 : d ", Directive(3, 4, "d", 0)),
    ],
)
def test_parse_well_formed(body: str, expected: Directive) -> None:
    """Well-formed directive bodies parse into the expected fields."""
    assert parse_directive(body) == expected


def test_digits_in_specifier_state_are_ignored() -> None:
    """A digit right after ':' neither sets the specifier nor the precision."""
    assert parse_directive("0:12x") == Directive(specifier="x")
    assert parse_directive("0:1x2") == Directive(specifier="x", precision=2)


def test_letters_outside_specifier_state_are_ignored() -> None:
    """Letters before ':' and after the specifier are skipped."""
    assert parse_directive("x1") == Directive(index=1)
    assert parse_directive("0,a5") == Directive(width=5)
    assert parse_directive("0:xy3") == Directive(specifier="x", precision=3)


def test_separators_always_switch_state() -> None:
    """',' and ':' switch state regardless of the current one."""
    # Second ',' goes back to WIDTH and keeps accumulating
    assert parse_directive("0,5,3") == Directive(width=53)
    # ',' after the specifier re-enters WIDTH
    assert parse_directive("0:x,4") == Directive(width=4, specifier="x")
    # second ':' lets a later letter replace the specifier
    assert parse_directive("0:x:o") == Directive(specifier="o")


def test_non_ascii_characters() -> None:
    """Unicode letters count as letters; non-ASCII digits are ignored."""
    assert parse_directive("0:é").specifier == "é"
    assert parse_directive("٣") == Directive()


@given(text=s_any_template())
def test_parse_never_fails(text: str) -> None:
    """Any text parses into a directive with sane fields."""
    d: Directive = parse_directive(text)
    assert d.index >= 0
    assert d.width >= 0
    assert d.precision >= 0
    assert len(d.specifier) == 1


@given(fields=s_directive_fields())
def test_canonical_spelling_parses_back(fields: tuple[int, int, str, int]) -> None:
    """A directive spelled in canonical form parses back to its fields."""
    index, width, specifier, precision = fields
    assert parse_directive(directive_text(*fields)) == Directive(index, width, specifier, precision)


def test_iter_placeholders_locates_each_placeholder() -> None:
    """Placeholders are reported with offsets, raw body and directive."""
    found: list[Placeholder] = list(iter_placeholders("a{0}b{1,3:x}c"))

    assert found == [
        Placeholder(1, 4, "0", Directive()),
        Placeholder(5, 12, "1,3:x", Directive(1, 3, "x", 0)),
    ]


def test_iter_placeholders_stops_at_unterminated_brace() -> None:
    """An unmatched '{' ends the scan; later braces are not considered."""
    found: list[Placeholder] = list(iter_placeholders("{0} {1 {2}"))

    # "{1 {2}" is a placeholder whose body is "1 {2"
    assert [p.body for p in found] == ["0", "1 {2"]
    assert list(iter_placeholders("x {0")) == []


@given(text=st.text(max_size=30))
def test_iter_placeholders_terminates(text: str) -> None:
    """Every reported placeholder lies within the template, in order."""
    last_end = 0
    for p in iter_placeholders(text):
        assert last_end <= p.start < p.end <= len(text)
        assert text[p.start] == "{" and text[p.end - 1] == "}"
        last_end = p.end
