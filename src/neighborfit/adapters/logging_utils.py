# src/neighborfit/adapters/logging_utils.py
import json
import logging
import sys
from datetime import datetime, timezone

from .config import config

SERVICE_NAME = "neighborfit"


class JsonLogFormatter(logging.Formatter):
    """
    One JSON object per line.

    Callers pass structured fields as extra={"context": {...}}; they are
    emitted under a "context" key so they never collide with the envelope.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "env": config.ENV,
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            entry["context"] = ctx
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        stream = logging.StreamHandler(sys.stdout)
        stream.setFormatter(JsonLogFormatter())
        logger.addHandler(stream)
        logger.setLevel(config.LOG_LEVEL)
        logger.propagate = False
    return logger
