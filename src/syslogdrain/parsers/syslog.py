"""Парсер syslog (RFC 5424 та Heroku Logplex) методом рекурсивного спуску.

Регулярні вирази тут не підходять: поля мають жорсткі обмеження довжини та
класу символів, а STRUCTURED-DATA містить екрановані значення. Тому рядок
розбирається зліва направо послідовністю кроків, кожен з яких повертає
значення та залишок рядка або піднімає типізовану помилку.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Tuple

from .dialect import Dialect
from .errors import (
    BadFacilityInPri,
    BadSeverityInPri,
    InvalidDateTime,
    SyslogParseError,
    TextEncodingError,
    TooFewDigits,
    UnexpectedEndOfInput,
    UnsupportedVersion,
)
from .facility import Facility
from .message import Message, ProcessId, StructuredData
from .severity import Severity
from .tokens import NIL, expect_char, is_printable, maybe_char, parse_num, parse_term

SUPPORTED_VERSION = 1

HOSTNAME_BOUNDS = (1, 255)
APPNAME_BOUNDS = (1, 48)
PROCID_BOUNDS = (1, 128)
MSGID_BOUNDS = (1, 32)
SD_NAME_MAX = 32

SD_NAME_FORBIDDEN = frozenset('= ]"')
SD_ESCAPABLE = frozenset('"\\]')


def parse_pri(value: int, dialect: Dialect = Dialect.RFC5424) -> Tuple[Severity, Facility | None]:
    """Розкладає PRI на severity (молодші 3 біти) та facility (решта)."""

    severity = Severity.from_int(value & 0x7)
    if severity is None:
        raise BadSeverityInPri()
    if not dialect.has_facility:
        return severity, None
    facility = Facility.from_int(value >> 3)
    if facility is None:
        raise BadFacilityInPri()
    return severity, facility


def _parse_utc_offset(text: str) -> Tuple[int, str]:
    if not text:
        return 0, text
    if text[0] == "Z":
        return 0, text[1:]
    if text[0] not in "+-":
        raise InvalidDateTime(f"invalid UTC offset {text[:6]!r}")
    sign = 1 if text[0] == "+" else -1
    try:
        hours, rest = parse_num(text[1:], 2, 2)
        rest = expect_char(rest, ":")
        minutes, rest = parse_num(rest, 2, 2)
    except SyslogParseError as exc:
        raise InvalidDateTime(f"invalid UTC offset {text[:6]!r}") from exc
    if hours > 23 or minutes > 59:
        raise InvalidDateTime(f"invalid UTC offset {text[:6]!r}")
    return sign * (hours * 60 + minutes), rest


def parse_timestamp(text: str) -> Tuple[datetime | None, str]:
    """Розбирає `YYYY-MM-DDTHH:MM:SS[.ffffff][Z|±HH:MM]` або `-`.

    Дробова частина секунд перевіряється, але не зберігається. Результат має
    фіксований зсув, тож `.timestamp()` дає абсолютний момент часу.
    """

    if text.startswith(NIL):
        return None, text[1:]
    rest = text
    year, rest = parse_num(rest, 4, 4)
    rest = expect_char(rest, "-")
    month, rest = parse_num(rest, 2, 2)
    rest = expect_char(rest, "-")
    day, rest = parse_num(rest, 2, 2)
    rest = expect_char(rest, "T")
    hour, rest = parse_num(rest, 2, 2)
    rest = expect_char(rest, ":")
    minute, rest = parse_num(rest, 2, 2)
    rest = expect_char(rest, ":")
    second, rest = parse_num(rest, 2, 2)
    if rest.startswith("."):
        _, rest = parse_num(rest[1:], 1, 6)
    offset_minutes, rest = _parse_utc_offset(rest)
    try:
        tz = timezone(timedelta(minutes=offset_minutes))
        value = datetime(year, month, day, hour, minute, second, tzinfo=tz)
    except ValueError as exc:
        raise InvalidDateTime(str(exc)) from exc
    return value, rest


def parse_procid(text: str) -> Tuple[ProcessId | None, str]:
    token, rest = parse_term(text, *PROCID_BOUNDS)
    if token is None:
        return None, rest
    return ProcessId.from_token(token), rest


def _parse_sd_name(text: str) -> Tuple[str, str]:
    end = 0
    while (
        end < len(text)
        and end < SD_NAME_MAX
        and is_printable(text[end])
        and text[end] not in SD_NAME_FORBIDDEN
    ):
        end += 1
    if end == 0:
        if not text:
            raise UnexpectedEndOfInput()
        raise TooFewDigits("empty structured data name")
    return text[:end], text[end:]


def _parse_param_value(text: str) -> Tuple[str, str]:
    # значення вже без відкривальної лапки; читаємо до неекранованої `"`
    chars = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == '"':
            return "".join(chars), text[index + 1 :]
        if char == "\\" and index + 1 < len(text) and text[index + 1] in SD_ESCAPABLE:
            chars.append(text[index + 1])
            index += 2
            continue
        chars.append(char)
        index += 1
    raise UnexpectedEndOfInput()


def _parse_sd_element(text: str, data: StructuredData) -> str:
    rest = expect_char(text, "[")
    sd_id, rest = _parse_sd_name(rest)
    data.add_element(sd_id)
    while rest.startswith(" "):
        param, rest = _parse_sd_name(rest[1:])
        rest = expect_char(rest, "=")
        rest = expect_char(rest, '"')
        value, rest = _parse_param_value(rest)
        data.insert(sd_id, param, value)
    return expect_char(rest, "]")


def parse_structured_data(text: str) -> Tuple[StructuredData, str]:
    """STRUCTURED-DATA: `-` або один чи більше елементів `[id key="value" ...]`."""

    data = StructuredData()
    if text.startswith(NIL):
        return data, text[1:]
    rest = _parse_sd_element(text, data)
    while rest.startswith("["):
        rest = _parse_sd_element(rest, data)
    return data, rest


def _decode(line: str | bytes) -> str:
    if isinstance(line, str):
        return line
    try:
        return bytes(line).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TextEncodingError(str(exc)) from exc


class SyslogParser:
    """Розбирає один рядок у `Message` для заданого діалекту.

    Екземпляр не має змінного стану, тож його можна ділити між потоками.
    """

    def __init__(self, dialect: Dialect | str = Dialect.RFC5424) -> None:
        self.dialect = Dialect(dialect)

    def parse(self, line: str | bytes) -> Message:
        rest = _decode(line)
        rest = expect_char(rest, "<")
        prival, rest = parse_num(rest, 1, 3)
        rest = expect_char(rest, ">")
        severity, facility = parse_pri(prival, self.dialect)
        version, rest = parse_num(rest, 1, 2)
        if version != SUPPORTED_VERSION:
            raise UnsupportedVersion(version)
        rest = expect_char(rest, " ")
        timestamp, rest = parse_timestamp(rest)
        rest = expect_char(rest, " ")
        hostname, rest = parse_term(rest, *HOSTNAME_BOUNDS)
        rest = expect_char(rest, " ")
        appname, rest = parse_term(rest, *APPNAME_BOUNDS)
        rest = expect_char(rest, " ")
        procid, rest = parse_procid(rest)
        rest = expect_char(rest, " ")
        msgid, rest = parse_term(rest, *MSGID_BOUNDS)
        structured_data = None
        if self.dialect.has_structured_data:
            if rest:
                rest = expect_char(rest, " ")
                structured_data, rest = parse_structured_data(rest)
            else:
                # рядок закінчився одразу після MSGID: SD порожні, тіло порожнє
                structured_data = StructuredData()
        rest = maybe_char(rest, " ")
        return Message(
            severity=severity,
            facility=facility,
            version=version,
            timestamp=timestamp,
            hostname=hostname,
            appname=appname,
            procid=procid,
            msgid=msgid,
            structured_data=structured_data,
            msg=rest,
        )

    def __repr__(self) -> str:
        return f"SyslogParser(dialect={self.dialect.value!r})"


_PARSERS = {dialect: SyslogParser(dialect) for dialect in Dialect}


def parse_message(line: str | bytes, dialect: Dialect | str = Dialect.RFC5424) -> Message:
    """Парсить один рядок syslog. Піднімає `SyslogParseError` при першій помилці."""

    return _PARSERS[Dialect(dialect)].parse(line)


def parse_heroku_message(line: str | bytes) -> Message:
    """Парсить рядок із Logplex HTTP drain (RFC 5424 без STRUCTURED-DATA)."""

    return _PARSERS[Dialect.HEROKU].parse(line)


__all__ = [
    "SyslogParser",
    "parse_heroku_message",
    "parse_message",
    "parse_pri",
    "parse_procid",
    "parse_structured_data",
    "parse_timestamp",
]
