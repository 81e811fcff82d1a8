"""Помилки розбору syslog-рядків."""
from __future__ import annotations


class SyslogParseError(ValueError):
    """Базова помилка парсера. Перше порушене обмеження завершує розбір."""

    kind = "parse_error"
    default_message = "помилка розбору syslog"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class BadSeverityInPri(SyslogParseError):
    kind = "bad_severity_in_pri"
    default_message = "invalid severity value in priority header"


class BadFacilityInPri(SyslogParseError):
    kind = "bad_facility_in_pri"
    default_message = "invalid facility value in priority header"


class UnexpectedEndOfInput(SyslogParseError):
    kind = "unexpected_end_of_input"
    default_message = "unexpected end of input"


class TooFewDigits(SyslogParseError):
    kind = "too_few_digits"
    default_message = "too few digits"


class TooManyDigits(SyslogParseError):
    kind = "too_many_digits"
    default_message = "too many digits"


class InvalidDateTime(SyslogParseError):
    kind = "invalid_date_time"
    default_message = "invalid date time"


class TextEncodingError(SyslogParseError):
    kind = "text_encoding_error"
    default_message = "text is not valid UTF-8"


class IntegerConversionError(SyslogParseError):
    kind = "integer_conversion_error"
    default_message = "integer conversion error"


class UnsupportedVersion(SyslogParseError):
    """Поле VERSION присутнє, але не дорівнює 1."""

    kind = "unsupported_version"

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"unsupported version {version}")


class ExpectedToken(SyslogParseError):
    """Обовʼязковий символ-роздільник не знайдено."""

    kind = "expected_token"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"expected token {token!r}")


class MissingField(SyslogParseError):
    """Відсутнє обовʼязкове поле під час програмної побудови повідомлення."""

    kind = "missing_field"

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"missing field {field_name!r}")


__all__ = [
    "BadFacilityInPri",
    "BadSeverityInPri",
    "ExpectedToken",
    "IntegerConversionError",
    "InvalidDateTime",
    "MissingField",
    "SyslogParseError",
    "TextEncodingError",
    "TooFewDigits",
    "TooManyDigits",
    "UnexpectedEndOfInput",
    "UnsupportedVersion",
]
