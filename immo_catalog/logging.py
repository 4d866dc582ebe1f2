"""Logging setup for immo-catalog.

Every module gets its logger from ``get_logger`` so that script and test
loggers land under the ``immo_catalog`` namespace and follow the level
set by ``setup_logging``. Catalog events carry context (listing id, action,
result revision) through ``extra=``; the JSON formatter lifts those fields
into the emitted object.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "immo_catalog"

# Attributes passed through ``extra=`` that belong in structured output
CONTEXT_FIELDS = ("property_id", "action", "revision", "result_count", "query")

LOG_FORMATS = ("standard", "json")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure logging for immo-catalog.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "standard" for human-readable lines or "json" for one object per line.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger(ROOT_LOGGER).setLevel(log_level)

    # Faker logs every provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with catalog context fields inlined."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        if isinstance(getattr(record, "extra", None), dict):
            log_data.update(record.extra)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``immo_catalog`` namespace.

    Parameters
    ----------
    name : str
        Logger name, usually ``__name__``. Names outside the package
        (``__main__``, ``scripts.browse_catalog``) are re-rooted under
        ``immo_catalog`` using their last component.

    Returns
    -------
    logging.Logger
        The namespaced logger.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name.rsplit('.', 1)[-1].strip('_') or 'main'}"
    return logging.getLogger(name)
