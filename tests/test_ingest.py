"""Тести автовизначення діалекту та пакетного розбору."""
from __future__ import annotations

from typing import Any

import pytest

from syslogdrain.ingest import parse_lines
from syslogdrain.logging import logger
from syslogdrain.parsers import Dialect, detect_dialect


def test_detect_dialect(router_line: str, web_line: str, rfc5424_line: str) -> None:
    assert detect_dialect(rfc5424_line) is Dialect.RFC5424
    assert detect_dialect(router_line) is Dialect.HEROKU
    assert detect_dialect(web_line) is Dialect.HEROKU
    assert detect_dialect("not syslog at all") is None


def test_bracketed_heroku_body_is_detected_as_heroku() -> None:
    line = "<158>1 - host app web.1 - [INFO] started"
    assert detect_dialect(line) is Dialect.HEROKU
    result = parse_lines([line], dialect="auto")
    assert result.messages[0].facility is None
    assert result.messages[0].msg == "[INFO] started"


def test_conforming_sd_ids_keep_rfc5424() -> None:
    assert detect_dialect('<158>1 - host app web.1 - [origin ip="10.0.0.1"] started') is Dialect.RFC5424
    assert detect_dialect("<158>1 - host app web.1 - [meta][x@1] started") is Dialect.RFC5424


def test_dash_body_stays_rfc5424() -> None:
    # тіло `- started` неоднозначне: `-` читається як порожні SD
    msg_line = "<158>1 - host app web.1 - - started"
    assert detect_dialect(msg_line) is Dialect.RFC5424


def test_out_of_range_facility_forces_heroku() -> None:
    assert detect_dialect("<200>1 - host app web.1 - - started") is Dialect.HEROKU


def test_parse_lines_collects_errors(router_line: str) -> None:
    result = parse_lines([router_line, "", "   ", "garbage"], dialect="heroku")
    assert len(result.messages) == 1
    assert result.messages[0].appname == "heroku"
    assert result.total == 2
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.line_no == 4
    assert error.line == "garbage"
    assert error.kind == "expected_token"


def test_parse_lines_auto(router_line: str, rfc5424_line: str) -> None:
    result = parse_lines([rfc5424_line, router_line], dialect="auto")
    assert not result.errors
    assert result.messages[0].facility is not None
    assert result.messages[1].facility is None


def test_parse_lines_uses_settings(monkeypatch: pytest.MonkeyPatch, router_line: str) -> None:
    monkeypatch.setenv("SYSLOG_DIALECT", "heroku")
    result = parse_lines([router_line])
    assert len(result.messages) == 1

    monkeypatch.setenv("SYSLOG_DIALECT", "rfc5424")
    from syslogdrain.config import get_settings

    get_settings.cache_clear()
    result = parse_lines([router_line])
    assert not result.messages
    assert result.errors[0].kind == "expected_token"


def test_parse_lines_logs_failures() -> None:
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="WARNING")
    try:
        parse_lines(["<13>2 - host app - - x"], dialect="heroku")
    finally:
        logger.remove(handler_id)
    assert len(records) == 1
    assert records[0]["extra"]["line_no"] == 1
    assert records[0]["extra"]["error_kind"] == "unsupported_version"
