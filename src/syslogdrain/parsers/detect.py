"""Автовизначення діалекту syslog-рядка."""
from __future__ import annotations

from .dialect import Dialect
from .errors import SyslogParseError
from .message import Message
from .syslog import parse_message

# SD-ID без `@` допустимі лише зареєстровані в IANA (RFC 5424, розділ 7)
REGISTERED_SD_IDS = frozenset({"timeQuality", "origin", "meta"})


def _try_parse(line: str | bytes, dialect: Dialect) -> Message | None:
    try:
        return parse_message(line, dialect)
    except SyslogParseError:
        return None


def has_conforming_sd_ids(message: Message) -> bool:
    """Чи схожі всі SD-ID на справжні: зареєстровані або у формі `name@number`."""

    if not message.structured_data:
        return True
    return all(sd_id in REGISTERED_SD_IDS or "@" in sd_id for sd_id in message.structured_data)


def detect_dialect(line: str | bytes) -> Dialect | None:
    """Повертає діалект, яким рядок розбирається повністю, або None.

    RFC 5424 має пріоритет, крім випадку, коли його STRUCTURED-DATA містить
    SD-ID, що не відповідає RFC 5424 (типово тіло Heroku на кшталт
    `[INFO] started`), а рядок розбирається і як Heroku. Тіло Heroku, що
    починається з `- `, залишається неоднозначним і визначається як RFC 5424.
    """

    rfc_message = _try_parse(line, Dialect.RFC5424)
    if rfc_message is not None and has_conforming_sd_ids(rfc_message):
        return Dialect.RFC5424
    if _try_parse(line, Dialect.HEROKU) is not None:
        return Dialect.HEROKU
    if rfc_message is not None:
        return Dialect.RFC5424
    return None


__all__ = ["REGISTERED_SD_IDS", "detect_dialect", "has_conforming_sd_ids"]
