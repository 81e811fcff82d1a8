"""Загальні фікстури для pytest."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Додаємо src до sys.path, щоб імпортувати syslogdrain без інсталяції пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from syslogdrain.config import get_settings  # noqa: E402

ROUTER_LINE = (
    '<158>1 2014-08-04T18:28:43.078581+00:00 host heroku router - at=info method=GET path="/foo" '
    "host=app-name-7277.herokuapp.com request_id=e5bb3580-44b0-46d2-aad3-185263641044 "
    'fwd="50.168.96.221" dyno=web.1 connect=0ms service=2ms status=200 bytes=415'
)
WEB_LINE = (
    "<190>1 2014-08-04T18:28:43.015630+00:00 host app web.1 - 50.168.96.221 - - "
    '[04/Aug/2014 18:28:43] "GET /foo HTTP/1.1" 200 12 0.0019'
)
RFC5424_LINE = (
    "<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 "
    '[exampleSDID@32473 iut="3" eventSource="Application" eventID="1011"]'
    '[examplePriority@32473 class="high"] An application event log entry...'
)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Ізолює тести від змінних середовища та кешу налаштувань."""

    for name in ("SYSLOG_DIALECT", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def router_line() -> str:
    return ROUTER_LINE


@pytest.fixture
def web_line() -> str:
    return WEB_LINE


@pytest.fixture
def rfc5424_line() -> str:
    return RFC5424_LINE
