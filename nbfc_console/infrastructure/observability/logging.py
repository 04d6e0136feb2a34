"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from nbfc_console.config import settings


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


def log_credit_score(request_id: str, score: int, band: str, duration_ms: float) -> None:
    """Log calculated score for underwriting analysis"""
    logging.info(
        "Credit score calculated",
        extra={
            "request_id": request_id,
            "step": "credit_score",
            "score": score,
            "band": band,
            "duration_ms": duration_ms,
        },
    )


def log_access_denied(request_id: str, role: str, permission: str, path: str) -> None:
    logging.warning(
        "Access denied",
        extra={
            "request_id": request_id,
            "step": "access_gate",
            "role": role,
            "permission": permission,
            "path": path,
        },
    )


def log_disbursement_retry(
    request_id: str,
    disbursement_id: str,
    status: str,
    retry_count: int,
) -> None:
    """Log the settled outcome of a disbursement retry"""
    logging.info(
        "Disbursement retry settled",
        extra={
            "request_id": request_id,
            "step": "disbursement_retry",
            "disbursement_id": disbursement_id,
            "status": status,
            "retry_count": retry_count,
        },
    )
