"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_decision_config
from loan_gateway.domain.models import DecisionConfig
from loan_gateway.domain.personal_code import calculate_checksum


@pytest.fixture
def config() -> DecisionConfig:
    """Default decision constants"""
    return DecisionConfig()


@pytest.fixture
def today() -> date:
    """Fixed evaluation date for age-dependent tests"""
    return date(2026, 10, 16)


@pytest.fixture
def make_personal_code() -> Callable[[str], str]:
    """Build a valid personal code from its first ten digits"""

    def _make(first_ten: str) -> str:
        return first_ten + str(calculate_checksum(first_ten))

    return _make


@pytest.fixture
def client(config: DecisionConfig) -> TestClient:
    """Create FastAPI test client with default decision constants"""
    app = create_app()
    app.dependency_overrides[get_decision_config] = lambda: config
    return TestClient(app)
