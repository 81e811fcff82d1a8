"""Примітиви рекурсивного спуску.

Кожна функція отримує залишок рядка і повертає пару (значення, новий залишок).
Спільного змінного курсора немає, тож кожен крок можна тестувати окремо.
"""
from __future__ import annotations

from typing import Tuple

from .errors import (
    ExpectedToken,
    IntegerConversionError,
    TooFewDigits,
    TooManyDigits,
    UnexpectedEndOfInput,
)

NIL = "-"


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_printable(char: str) -> bool:
    return 33 <= ord(char) <= 126


def expect_char(text: str, char: str) -> str:
    """Споживає рівно один очікуваний символ."""

    if not text:
        raise UnexpectedEndOfInput()
    if text[0] != char:
        raise ExpectedToken(char)
    return text[1:]


def maybe_char(text: str, char: str) -> str:
    if text.startswith(char):
        return text[1:]
    return text


def parse_num(text: str, min_digits: int, max_digits: int) -> Tuple[int, str]:
    """Читає від min_digits до max_digits ASCII-цифр."""

    end = 0
    while end < len(text) and end < max_digits and is_digit(text[end]):
        end += 1
    if end < min_digits:
        if end == len(text):
            raise UnexpectedEndOfInput()
        raise TooFewDigits()
    if end == max_digits and end < len(text) and is_digit(text[end]):
        raise TooManyDigits()
    try:
        value = int(text[:end])
    except ValueError as exc:  # pragma: no cover - цифри вже перевірено
        raise IntegerConversionError(str(exc)) from exc
    return value, text[end:]


def parse_term(text: str, min_length: int, max_length: int) -> Tuple[str | None, str]:
    """Обмежений токен із друкованих ASCII-символів (33..126).

    Одиночний `-` без продовження означає відсутнє поле (NILVALUE).
    """

    if text.startswith(NIL) and (len(text) == 1 or not is_printable(text[1])):
        return None, text[1:]
    end = 0
    while end < len(text) and end < max_length and is_printable(text[end]):
        end += 1
    if end < min_length:
        if end == len(text):
            raise UnexpectedEndOfInput()
        raise TooFewDigits(f"field shorter than {min_length} characters")
    return text[:end], text[end:]


__all__ = ["NIL", "expect_char", "is_digit", "is_printable", "maybe_char", "parse_num", "parse_term"]
