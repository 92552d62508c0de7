"""Logging setup.

``configure_logging()`` is called once by the application factory. Every other
module defines its own logger at module scope::

    import logging
    logger = logging.getLogger(__name__)
"""

import json
import logging
import sys
from datetime import datetime, timezone

__all__ = ["configure_logging", "JsonFormatter"]

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_FORMATS = {"text", "json"}

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per line: ts, level, logger, message (+ exc_info)."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", fmt: str = "text", force: bool = False) -> None:
    """Configure the root logger.

    Raises:
        ValueError: If *level* or *fmt* is not recognised.
    """
    resolved_level = level.upper()
    resolved_fmt = fmt.lower()

    if resolved_level not in _VALID_LEVELS:
        raise ValueError(f"Unknown log level {level!r}")
    if resolved_fmt not in _VALID_FORMATS:
        raise ValueError(f"Unknown log format {fmt!r}")

    root = logging.getLogger()
    if root.handlers and not force:
        # Already configured (uvicorn, pytest); only adjust the level.
        root.setLevel(resolved_level)
        return

    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    if resolved_fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=_TEXT_FORMAT, datefmt=_DATE_FORMAT))

    root.setLevel(resolved_level)
    root.addHandler(handler)

    if resolved_level != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
