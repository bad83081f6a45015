"""Root logger configuration driven by ``settings.logging``."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from .config import settings

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO/DEBUG
NOISY_LOGGERS = ("pdfminer", "pdfplumber", "PIL", "pypdf")


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(level: str | None = None) -> None:
    """Configure console (and optional file) logging.

    Args:
        level: Overrides ``settings.logging.level`` when given
    """
    default_level = "DEBUG" if settings.debug else settings.logging.level
    log_level = getattr(logging, (level or default_level).upper(), logging.INFO)
    formatter = _make_formatter(settings.logging.format)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    handlers.append(console)

    if settings.logging.file:
        file_handler = logging.FileHandler(settings.logging.file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
