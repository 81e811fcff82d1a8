"""Пакетний розбір уже розділених syslog-рядків."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from syslogdrain.config import get_settings
from syslogdrain.logging import logger
from syslogdrain.parsers import Dialect, Message, detect_dialect, parse_message
from syslogdrain.parsers.errors import SyslogParseError

AUTO = "auto"


@dataclass(slots=True)
class LineError:
    """Рядок, який не вдалося розібрати."""

    line_no: int
    line: str
    error: SyslogParseError

    @property
    def kind(self) -> str:
        return self.error.kind


@dataclass
class IngestResult:
    messages: List[Message] = field(default_factory=list)
    errors: List[LineError] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.messages) + len(self.errors)


def _resolve_dialect(line: str, dialect: Dialect | str) -> Dialect:
    if dialect != AUTO:
        return Dialect(dialect)
    detected = detect_dialect(line)
    # якщо жоден діалект не підійшов, помилку покаже суворіший RFC 5424
    return detected or Dialect.RFC5424


def parse_lines(lines: Iterable[str], dialect: Dialect | str | None = None) -> IngestResult:
    """Парсить кожен рядок незалежно. Порожні рядки пропускаються.

    `dialect=None` бере значення з налаштувань; `"auto"` визначає діалект
    окремо для кожного рядка.
    """

    if dialect is None:
        dialect = get_settings().syslog_dialect
    result = IngestResult()
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            message = parse_message(line, _resolve_dialect(line, dialect))
        except SyslogParseError as exc:
            logger.bind(line_no=line_no, error_kind=exc.kind).warning(
                "Не вдалося розібрати syslog-рядок: {}", exc
            )
            result.errors.append(LineError(line_no=line_no, line=line, error=exc))
            continue
        result.messages.append(message)
    logger.debug(
        "Розібрано {} з {} рядків", len(result.messages), result.total
    )
    return result


__all__ = ["IngestResult", "LineError", "parse_lines"]
