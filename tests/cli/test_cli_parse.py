# topmark:header:start
#
#   project      : FmtBits
#   file         : test_cli_parse.py
#   file_relpath : tests/cli/test_cli_parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `fmtbits parse`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fmtbits.cli.commands.parse import describe_template
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_describe_template() -> None:
    info: dict[str, Any] = describe_template("a {0,6:x} {1")

    assert info["placeholders"] == [
        {
            "start": 2,
            "end": 9,
            "body": "0,6:x",
            "index": 0,
            "width": 6,
            "specifier": "x",
            "precision": 0,
        }
    ]
    assert info["unterminated"] == 10


def test_describe_template_without_braces() -> None:
    info: dict[str, Any] = describe_template("plain } text")
    assert info["placeholders"] == []
    assert info["unterminated"] is None


@mark_cli
def test_parse_default_output() -> None:
    result: Result = run_cli(["parse", "a {0,6:x} {1:F3} {"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "2-9  {0,6:x}  index=0 width=6 specifier=x precision=0",
        "10-16  {1:F3}  index=1 width=0 specifier=F precision=3",
        "Unterminated '{' at offset 17.",
    ]


@mark_cli
def test_parse_without_placeholders() -> None:
    result: Result = run_cli(["parse", "nothing here"])
    assert_SUCCESS(result)
    assert result.output == "No placeholders.\n"


@mark_cli
def test_parse_json_output() -> None:
    result: Result = run_cli(["parse", "--format", "json", "{}"])
    assert_SUCCESS(result)

    info: dict[str, Any] = json.loads(result.output)
    assert info["template"] == "{}"
    assert info["placeholders"][0]["specifier"] == "G"
    assert info["unterminated"] is None
