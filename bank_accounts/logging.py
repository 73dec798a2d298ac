"""Structured logging configuration for bank-accounts.

Balance changes and transfers attach their fields (account numbers, amount,
transfer id) through :func:`log_fields`. The standard format shows only the
message; the JSON format merges those fields into each log line.
"""

import json
import logging
import sys
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, TextIO


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure logging for bank-accounts.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    stream : TextIO | None
        Where log lines go; defaults to stderr so the demo's stdout stays
        readable.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("bank_accounts").setLevel(log_level)

    # Faker reports locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def log_fields(**fields: Any) -> dict[str, dict[str, Any]]:
    """Build the ``extra`` argument carrying structured fields.

    ``None`` values are dropped; money, enums and dates become strings.

    Example::

        logger.info("Transferred %s", amt, extra=log_fields(amount=amt))
    """
    return {
        "extra": {
            key: _plain(value) for key, value in fields.items() if value is not None
        }
    }


def _plain(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually __name__).

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name)
