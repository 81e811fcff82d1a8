"""Налаштування структурованого логування через loguru."""
from __future__ import annotations

import json
import sys
from typing import Any, Dict

from loguru import logger

from syslogdrain.config import get_settings

PLAIN_FORMAT = "{time:YYYY-MM-DDTHH:mm:ss.SSSZ} | {level} | {name}:{function}:{line} - {message}"


class JsonFormatter:
    """JSON-форматер для loguru.

    loguru трактує результат форматера як шаблон, тому готовий JSON кладеться
    в `extra` і підставляється через `{extra[serialized]}`.
    """

    def __call__(self, record: "loguru.Record") -> str:  # type: ignore[name-defined]
        payload: Dict[str, Any] = {
            "time": record["time"].strftime("%Y-%m-%dT%H:%M:%S.%f%z"),
            "level": record["level"].name,
            "message": record["message"],
            "module": record["module"],
            "function": record["function"],
            "line": record["line"],
        }
        extra = {key: value for key, value in record["extra"].items() if key != "serialized"}
        if extra:
            payload.update(extra)
        record["extra"]["serialized"] = json.dumps(payload, ensure_ascii=False, default=str)
        return "{extra[serialized]}\n"


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Ініціалізує логер: stdout, рівень і формат із налаштувань."""

    settings = get_settings()
    level = level or settings.log_level
    json_output = settings.log_json if json_output is None else json_output
    logger.remove()
    if json_output:
        logger.add(sys.stdout, level=level, format=JsonFormatter())
    else:
        logger.add(sys.stdout, level=level, format=PLAIN_FORMAT)


__all__ = ["JsonFormatter", "configure_logging", "logger"]
