"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from debt_coach.config import settings


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

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_coach_exchange(
    request_id: str,
    endpoint: str,
    outcome: str,
    prompt_chars: int,
    duration_ms: float,
) -> None:
    """Log one prompt/response round trip with the coach"""
    logging.info(
        "Coach exchange completed",
        extra={
            "request_id": request_id,
            "endpoint": endpoint,
            "step": "coach_complete",
            "coach_outcome": outcome,
            "prompt_chars": prompt_chars,
            "duration_ms": duration_ms,
        },
    )
