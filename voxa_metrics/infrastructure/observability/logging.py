"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from voxa_metrics.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_usage_computed(
    request_id: str,
    client_id: str,
    status: str,
    percentage_used: float,
    call_count: int,
    duration_ms: float,
) -> None:
    """Log structured usage outcome for analysis"""
    logging.info(
        "Usage computed",
        extra={
            "request_id": request_id,
            "client_id": client_id,
            "step": "usage_complete",
            "quota_status": status,
            "percentage_used": percentage_used,
            "call_count": call_count,
            "duration_ms": duration_ms,
        },
    )
