"""Logging configuration for payment-schedule.

Data-integrity problems are logged at WARNING with the identifiers of the
offending record attached as ``extra={"extra": {...}}``. The JSON format
lifts those identifiers to top-level keys so a log pipeline can group bad
records by loan or payment.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure logging for payment-schedule.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "standard" for pipe-separated lines, "json" for one object per line.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("payment_schedule").setLevel(log_level)

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Format records as JSON, merging record identifiers from ``extra``.

    Identifier fields that are None (a record with no loan id, say) are
    left out rather than written as null.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        fields = getattr(record, "extra", None)
        if isinstance(fields, dict):
            log_data.update({k: v for k, v in fields.items() if v is not None})

        return json.dumps(log_data, default=str)
