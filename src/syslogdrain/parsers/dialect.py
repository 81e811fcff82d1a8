"""Діалекти syslog, які розуміє парсер."""
from __future__ import annotations

from enum import Enum


class Dialect(str, Enum):
    """RFC 5424 або варіант Heroku Logplex (без STRUCTURED-DATA і facility)."""

    RFC5424 = "rfc5424"
    HEROKU = "heroku"

    @property
    def has_facility(self) -> bool:
        return self is Dialect.RFC5424

    @property
    def has_structured_data(self) -> bool:
        return self is Dialect.RFC5424


__all__ = ["Dialect"]
