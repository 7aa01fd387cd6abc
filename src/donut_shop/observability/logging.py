"""Structured JSON logging"""

import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from pythonjsonlogger.json import JsonFormatter


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter that stamps every record with time, level and service"""

    def __init__(self, *args: Any, service_name: str = "donut-shop", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(
    level: str = "INFO",
    service_name: str = "donut-shop",
    stream: TextIO | None = None,
) -> None:
    """Configure structured JSON logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(
        ServiceJsonFormatter("%(name)s %(message)s", service_name=service_name)
    )
    logger.addHandler(handler)
