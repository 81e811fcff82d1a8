"""Рівні важливості syslog (RFC 5424)."""
from __future__ import annotations

from enum import IntEnum

LABELS = {
    0: "emerg",
    1: "alert",
    2: "crit",
    3: "err",
    4: "warning",
    5: "notice",
    6: "info",
    7: "debug",
}


class Severity(IntEnum):
    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def from_int(cls, value: int) -> "Severity | None":
        """Повертає рівень за кодом або None, якщо код поза 0..7."""

        if value in LABELS:
            return cls(value)
        return None

    @property
    def label(self) -> str:
        return LABELS[self.value]


__all__ = ["Severity"]
