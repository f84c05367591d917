"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "loan-calculator", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "loan-calculator") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_offers(request_id: str, amount: Decimal, term: int, offer_count: int, duration_ms: float) -> None:
    """Log structured outcome of an offers request"""
    logging.info(
        "Offers completed",
        extra={
            "request_id": request_id,
            "step": "offers_complete",
            "amount": str(amount),
            "term": term,
            "offer_count": offer_count,
            "duration_ms": duration_ms,
        },
    )


def log_credit_decision(
    request_id: str,
    approved: bool,
    rate: Decimal | None,
    refusal_code: str | None,
    duration_ms: float,
) -> None:
    """Log structured credit outcome for analysis"""
    logging.info(
        "Credit decision completed",
        extra={
            "request_id": request_id,
            "step": "credit_complete",
            "approval_outcome": "approved" if approved else "refused",
            "rate": str(rate) if rate is not None else None,
            "refusal_code": refusal_code,
            "duration_ms": duration_ms,
        },
    )
