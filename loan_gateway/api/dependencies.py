"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from loan_gateway.config import settings
from loan_gateway.domain.models import DecisionConfig


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_decision_config() -> DecisionConfig:
    """Provide the decision constants, built once per process"""
    return settings.decision_config()
