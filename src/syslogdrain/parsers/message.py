"""Модель розібраного syslog-повідомлення."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterator, List, Mapping, Tuple, TypedDict

from .dialect import Dialect
from .errors import MissingField
from .facility import Facility
from .severity import Severity

MAX_PID = 2**32 - 1
MAX_PROCID_NAME = 128


def is_printable_ascii(value: str) -> bool:
    return all(33 <= ord(char) <= 126 for char in value)


@dataclass(frozen=True, slots=True)
class ProcessId:
    """PROCID: числовий PID або довільна назва процесу."""

    pid: int | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if (self.pid is None) == (self.name is None):
            raise ValueError("ProcessId потребує рівно одного з pid або name")
        if self.pid is not None and not 0 <= self.pid <= MAX_PID:
            raise ValueError(f"PID поза межами u32: {self.pid}")
        if self.name is not None and not (
            0 < len(self.name) <= MAX_PROCID_NAME and is_printable_ascii(self.name)
        ):
            raise ValueError(f"Недопустима назва процесу: {self.name!r}")

    @classmethod
    def from_pid(cls, pid: int) -> "ProcessId":
        return cls(pid=pid)

    @classmethod
    def from_name(cls, name: str) -> "ProcessId":
        return cls(name=name)

    @classmethod
    def from_token(cls, token: str) -> "ProcessId":
        """Токен із цифр, що вміщується в u32, стає PID, інакше назвою.

        Як і в беззнаковому розборі цілих, допускається `+` попереду. Це
        евристика: назва процесу, що складається лише з цифр, завжди
        інтерпретується як PID.
        """

        digits = token[1:] if token.startswith("+") else token
        if digits.isascii() and digits.isdigit():
            value = int(digits)
            if value <= MAX_PID:
                return cls(pid=value)
        return cls(name=token)

    @property
    def is_pid(self) -> bool:
        return self.pid is not None

    @property
    def value(self) -> int | str:
        return self.pid if self.pid is not None else self.name  # type: ignore[return-value]

    def __str__(self) -> str:
        return str(self.value)


class StructuredData:
    """Дворівневе відображення SD-ID -> (параметр -> значення), впорядковане за ключем.

    Повторна вставка того ж SD-ID зливає параметри, а повторний параметр
    перезаписує попереднє значення без можливості його відновити.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._elements: Dict[str, Dict[str, str]] = {}
        for sd_id, params in (elements or {}).items():
            self._elements.setdefault(sd_id, {})
            for param, value in params.items():
                self.insert(sd_id, param, value)

    def insert(self, sd_id: str, param: str, value: str) -> None:
        self._elements.setdefault(sd_id, {})[param] = value

    def add_element(self, sd_id: str) -> None:
        """Реєструє SD-ID без параметрів (елемент `[id]` валідний за RFC 5424)."""

        self._elements.setdefault(sd_id, {})

    def get(self, sd_id: str, param: str) -> str | None:
        params = self._elements.get(sd_id)
        if params is None:
            return None
        return params.get(param)

    def find(self, sd_id: str) -> Dict[str, str] | None:
        params = self._elements.get(sd_id)
        if params is None:
            return None
        return dict(sorted(params.items()))

    def items(self) -> List[Tuple[str, Dict[str, str]]]:
        return [(sd_id, dict(sorted(self._elements[sd_id].items()))) for sd_id in self]

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        return dict(self.items())

    def __contains__(self, sd_id: object) -> bool:
        return sd_id in self._elements

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._elements))

    def __len__(self) -> int:
        return len(self._elements)

    def __bool__(self) -> bool:
        return bool(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredData):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(
            frozenset((sd_id, frozenset(params.items())) for sd_id, params in self._elements.items())
        )

    def __repr__(self) -> str:
        return f"StructuredData({self.as_dict()!r})"


class SyslogRecord(TypedDict, total=False):
    timestamp: datetime | None
    host: str | None
    app: str | None
    pid: str | None
    msgid: str | None
    severity: str
    facility: str | None
    structured_data: Dict[str, Dict[str, str]]
    message: str


@dataclass(frozen=True, slots=True)
class Message:
    """Одне повідомлення, повністю провалідоване парсером."""

    severity: Severity
    facility: Facility | None = None
    version: int = 1
    timestamp: datetime | None = None
    hostname: str | None = None
    appname: str | None = None
    procid: ProcessId | None = None
    msgid: str | None = None
    structured_data: StructuredData | None = None
    msg: str = ""

    @classmethod
    def parse(cls, line: str | bytes, dialect: Dialect = Dialect.RFC5424) -> "Message":
        from .syslog import SyslogParser

        return SyslogParser(dialect).parse(line)

    @classmethod
    def build(
        cls,
        *,
        severity: Severity | None = None,
        facility: Facility | None = None,
        timestamp: datetime | None = None,
        hostname: str | None = None,
        appname: str | None = None,
        procid: ProcessId | None = None,
        msgid: str | None = None,
        structured_data: StructuredData | None = None,
        msg: str = "",
        dialect: Dialect = Dialect.RFC5424,
    ) -> "Message":
        """Програмна побудова повідомлення з перевіркою обовʼязкових полів."""

        if severity is None:
            raise MissingField("severity")
        if dialect.has_facility and facility is None:
            raise MissingField("facility")
        if dialect.has_structured_data and structured_data is None:
            raise MissingField("structured_data")
        owned_data = None
        if dialect.has_structured_data and structured_data is not None:
            # повідомлення володіє власною копією, зміни оригіналу його не зачіпають
            owned_data = StructuredData(structured_data.as_dict())
        return cls(
            severity=severity,
            facility=facility if dialect.has_facility else None,
            timestamp=timestamp,
            hostname=hostname,
            appname=appname,
            procid=procid,
            msgid=msgid,
            structured_data=owned_data,
            msg=msg,
        )

    def as_record(self) -> SyslogRecord:
        """Плаский словник у форматі нормалізованих записів для конвеєрів прийому."""

        return {
            "timestamp": self.timestamp,
            "host": self.hostname,
            "app": self.appname,
            "pid": str(self.procid) if self.procid is not None else None,
            "msgid": self.msgid,
            "severity": self.severity.label,
            "facility": self.facility.label if self.facility is not None else None,
            "structured_data": self.structured_data.as_dict() if self.structured_data else {},
            "message": self.msg,
        }


__all__ = ["Message", "ProcessId", "StructuredData", "SyslogRecord", "is_printable_ascii"]
