"""Structured logging configuration.

Outside development every record is one key=value line, so scoring events
can be filtered by instrument or request id.
"""

import logging
import sys

from carescore.core.config import settings

# Optional record attributes set through `extra=`
CONTEXT_FIELDS = ("request_id", "instrument", "severity_level")


def _quote(value: object) -> str:
    text = str(value)
    if " " in text or "=" in text:
        return '"' + text.replace('"', '\\"') + '"'
    return text


class StructuredFormatter(logging.Formatter):
    """Render a record as a single key=value line."""

    def format(self, record: logging.LogRecord) -> str:
        fields = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                fields[name] = value

        if record.exc_info:
            fields["exc"] = self.formatException(record.exc_info)

        return " ".join(f"{key}={_quote(value)}" for key, value in fields.items())


def setup_logging(level: str | None = None) -> None:
    """Install a single stdout handler on the root logger.

    Args:
        level: Level name overriding the configured one
    """
    log_level = logging.getLevelName((level or settings.log_level).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if settings.is_dev:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
    else:
        handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(log_level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
