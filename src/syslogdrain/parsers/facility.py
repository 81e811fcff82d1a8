"""Джерела (facility) syslog. Коди з RFC 5424, назви як у Linux."""
from __future__ import annotations

from enum import IntEnum


class Facility(IntEnum):
    KERN = 0
    USER = 1
    MAIL = 2
    DAEMON = 3
    AUTH = 4
    SYSLOG = 5
    LPR = 6
    NEWS = 7
    UUCP = 8
    CRON = 9
    AUTHPRIV = 10
    FTP = 11
    NTP = 12
    AUDIT = 13
    ALERT = 14
    CLOCKD = 15
    LOCAL0 = 16
    LOCAL1 = 17
    LOCAL2 = 18
    LOCAL3 = 19
    LOCAL4 = 20
    LOCAL5 = 21
    LOCAL6 = 22
    LOCAL7 = 23

    @classmethod
    def from_int(cls, value: int) -> "Facility | None":
        """Повертає facility за кодом або None для значень поза 0..23."""

        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return self.name.lower()


__all__ = ["Facility"]
