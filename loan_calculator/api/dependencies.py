"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from loan_calculator.config import settings
from loan_calculator.domain.models import RateConfig

# Built once at import; read-only for the life of the process
_rate_config = settings.rate_config()


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_rate_config() -> RateConfig:
    """Provide the process-wide rate configuration"""
    return _rate_config
