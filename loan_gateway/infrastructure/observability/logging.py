"""Structured JSON logging for loan decisions"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from loan_gateway.config import settings

LOG_FORMAT = "%(timestamp)s %(level)s %(name)s %(message)s"

# Server loggers that should emit through the JSON root handler
PROPAGATED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class DecisionJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping each record with UTC time, level and service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Route all service and server logs to a single JSON handler on stdout"""
    root = logging.getLogger()
    root.setLevel(level)

    # Idempotent: repeated app creation must not stack handlers
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(DecisionJsonFormatter(LOG_FORMAT))
    root.addHandler(handler)

    for name in PROPAGATED_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True


def log_decision(
    request_id: str,
    approved_amount: int,
    approved_period: int,
    requested_period: int,
    duration_ms: float,
) -> None:
    """Log structured approval outcome; the personal code is never logged"""
    logging.info(
        "Loan approved",
        extra={
            "request_id": request_id,
            "step": "decision_complete",
            "decision_outcome": "approved",
            "approved_amount": approved_amount,
            "approved_period": approved_period,
            "requested_period": requested_period,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, reason: str, message: str, duration_ms: float) -> None:
    """Log structured rejection outcome"""
    logging.info(
        "Loan rejected",
        extra={
            "request_id": request_id,
            "step": "decision_complete",
            "decision_outcome": "rejected",
            "reason": reason,
            "error_message": message,
            "duration_ms": duration_ms,
        },
    )
