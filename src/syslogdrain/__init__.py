"""Парсер syslog-рядків RFC 5424 та Heroku Logplex HTTP drain."""

from syslogdrain.parsers import (
    Dialect,
    Facility,
    Message,
    ProcessId,
    Severity,
    StructuredData,
    SyslogParser,
    detect_dialect,
    parse_heroku_message,
    parse_message,
)
from syslogdrain.parsers.errors import SyslogParseError

__all__ = [
    "Dialect",
    "Facility",
    "Message",
    "ProcessId",
    "Severity",
    "StructuredData",
    "SyslogParseError",
    "SyslogParser",
    "detect_dialect",
    "parse_heroku_message",
    "parse_message",
]

__version__ = "0.1.0"
