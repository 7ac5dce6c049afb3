"""Logging setup shared by the MCP server and the CLI.

Forvo carries the API key in the URL path, and httpx puts request URLs into
its log lines and exception messages. Every record that reaches our handler
is passed through :class:`RedactKeyFilter` first.
"""

import json
import logging
from datetime import UTC, datetime

from forvomcp.config import settings
from forvomcp.request import redact_url

logger = logging.getLogger("forvomcp")

# httpx logs "HTTP Request: GET <url>" at INFO
HTTPX_LOGGER = "httpx"

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RedactKeyFilter(logging.Filter):
    """Replaces the ``/key/<key>`` URL segment in messages and tracebacks."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact_url(record.getMessage())
        record.args = None
        if record.exc_info and not record.exc_text:
            record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = redact_url(record.exc_text)
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with any ``props`` extra merged in."""

    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "path": record.pathname,
            "lineno": record.lineno,
        }
        if hasattr(record, "props"):
            log_record.update(record.props)
        if record.exc_info:
            log_record["exception"] = record.exc_text or self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)


def _ensure_filter(target: logging.Filterer) -> None:
    if not any(isinstance(f, RedactKeyFilter) for f in target.filters):
        target.addFilter(RedactKeyFilter())


def configure_logging():
    """Install one redacting stream handler on the ``forvomcp`` logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if settings.log_json else logging.Formatter(PLAIN_FORMAT))
    _ensure_filter(handler)

    # Calling twice must not duplicate output
    logger.handlers = [handler]
    logger.setLevel(settings.log_level.upper())

    # httpx records go to whatever handlers the application set up
    _ensure_filter(logging.getLogger(HTTPX_LOGGER))
