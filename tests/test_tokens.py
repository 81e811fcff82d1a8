"""Тести примітивів токенізатора."""
from __future__ import annotations

import pytest

from syslogdrain.parsers.errors import (
    ExpectedToken,
    TooFewDigits,
    TooManyDigits,
    UnexpectedEndOfInput,
)
from syslogdrain.parsers.tokens import expect_char, maybe_char, parse_num, parse_term


def test_parse_num_stops_at_non_digit() -> None:
    assert parse_num("123 x", 1, 3) == (123, " x")


def test_parse_num_accepts_end_of_input() -> None:
    assert parse_num("42", 1, 3) == (42, "")


def test_parse_num_too_many_digits() -> None:
    with pytest.raises(TooManyDigits):
        parse_num("1234>", 1, 3)


def test_parse_num_too_few_digits() -> None:
    with pytest.raises(TooFewDigits):
        parse_num("7x", 2, 2)
    with pytest.raises(TooFewDigits):
        parse_num("abc", 1, 3)


@pytest.mark.parametrize("text", ["", "7"])
def test_parse_num_runs_out_of_input(text: str) -> None:
    with pytest.raises(UnexpectedEndOfInput):
        parse_num(text, 2, 2)


def test_expect_char() -> None:
    assert expect_char(" rest", " ") == "rest"
    with pytest.raises(UnexpectedEndOfInput):
        expect_char("", " ")
    with pytest.raises(ExpectedToken) as exc_info:
        expect_char("x", " ")
    assert exc_info.value.token == " "


def test_maybe_char() -> None:
    assert maybe_char(" body", " ") == "body"
    assert maybe_char("body", " ") == "body"
    assert maybe_char("", " ") == ""


@pytest.mark.parametrize(
    ("text", "max_length", "expected"),
    [
        ("- rest", 32, (None, " rest")),
        ("-", 32, (None, "")),
        ("-foo bar", 32, ("-foo", " bar")),
        ("host app", 32, ("host", " app")),
        ("host", 32, ("host", "")),
        ("abcdef", 3, ("abc", "def")),
        ("héllo", 32, ("h", "éllo")),
    ],
)
def test_parse_term(text: str, max_length: int, expected: tuple) -> None:
    assert parse_term(text, 1, max_length) == expected


def test_parse_term_too_short() -> None:
    with pytest.raises(TooFewDigits):
        parse_term(" x", 1, 3)
    with pytest.raises(UnexpectedEndOfInput):
        parse_term("", 1, 3)
