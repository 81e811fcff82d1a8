"""Парсери syslog."""

from .detect import detect_dialect
from .dialect import Dialect
from .facility import Facility
from .message import Message, ProcessId, StructuredData, SyslogRecord
from .severity import Severity
from .syslog import SyslogParser, parse_heroku_message, parse_message

__all__ = [
    "Dialect",
    "Facility",
    "Message",
    "ProcessId",
    "Severity",
    "StructuredData",
    "SyslogParser",
    "SyslogRecord",
    "detect_dialect",
    "parse_heroku_message",
    "parse_message",
]
