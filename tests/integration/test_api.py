"""Integration tests for API endpoints"""

import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_decision_config
from loan_gateway.domain.exceptions import (
    IneligibleAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from loan_gateway.domain.models import DecisionConfig, LoanDecision, Segment

ENGINE_PATH = "loan_gateway.api.v1.decision.make_loan_decision"


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/loan/decision", json={"personalCode": "49002010987", "loanAmount": 4000, "loanPeriod": 12})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_decision_total" in response.text
    assert "loan_rejection_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_decision_segment_2_approval(client: TestClient):
    """Test POST /loan/decision with the requested period approved as-is"""
    response = client.post(
        "/loan/decision",
        json={"personalCode": "49002010987", "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 200
    assert response.json() == {"loanAmount": 3600, "loanPeriod": 12, "errorMessage": None}


def test_decision_segment_1_period_extended(client: TestClient):
    response = client.post(
        "/loan/decision",
        json={"personalCode": "49002010976", "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["loanAmount"] == 2000
    assert data["loanPeriod"] == 20
    assert data["errorMessage"] is None


def test_decision_invalid_personal_code(client: TestClient):
    response = client.post(
        "/loan/decision",
        json={"personalCode": "12345678901", "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 400
    assert response.json() == {"loanAmount": None, "loanPeriod": None, "errorMessage": "Invalid personal ID code!"}


def test_decision_debtor_not_found(client: TestClient):
    response = client.post(
        "/loan/decision",
        json={"personalCode": "49002010965", "loanAmount": 10000, "loanPeriod": 48},
    )

    assert response.status_code == 404
    assert response.json()["errorMessage"] == "No valid loan found!"


def test_decision_empty_body_reports_personal_code(client: TestClient):
    response = client.post("/loan/decision", json={})

    assert response.status_code == 400
    assert response.json()["errorMessage"] == "Invalid personal ID code!"


def test_decision_missing_amount(client: TestClient):
    response = client.post("/loan/decision", json={"personalCode": "49002010987", "loanPeriod": 12})

    assert response.status_code == 400
    assert response.json()["errorMessage"] == "Invalid loan amount!"


def test_decision_malformed_body(client: TestClient):
    response = client.post(
        "/loan/decision",
        json={"personalCode": "49002010987", "loanAmount": "a lot", "loanPeriod": 12},
    )

    assert response.status_code == 400
    assert response.json() == {"loanAmount": None, "loanPeriod": None, "errorMessage": "Invalid request!"}


def test_decision_uses_injected_config():
    """Raising the maximum amount lets segment 3 receive the uncapped amount"""
    app = create_app()
    app.dependency_overrides[get_decision_config] = lambda: DecisionConfig(max_loan_amount=20000)
    client = TestClient(app)

    response = client.post(
        "/loan/decision",
        json={"personalCode": "49002010998", "loanAmount": 4000, "loanPeriod": 12},
    )

    assert response.status_code == 200
    assert response.json()["loanAmount"] == 12000


@patch(ENGINE_PATH)
def test_decision_returns_engine_result(mock_engine: MagicMock, client: TestClient):
    mock_engine.return_value = LoanDecision(approved_amount=1000, approved_period=12, segment=Segment.SEGMENT_2)

    response = client.post(
        "/loan/decision",
        json={"personalCode": "1234", "loanAmount": 10, "loanPeriod": 10},
    )

    assert response.status_code == 200
    assert response.json() == {"loanAmount": 1000, "loanPeriod": 12, "errorMessage": None}
    loan_request = mock_engine.call_args.args[0]
    assert loan_request.personal_code == "1234"
    assert loan_request.loan_amount == 10
    assert loan_request.loan_period == 10


@pytest.mark.parametrize(
    "error,status_code",
    [
        (InvalidPersonalCodeError("Invalid personal code"), 400),
        (InvalidLoanAmountError("Invalid loan amount"), 400),
        (InvalidLoanPeriodError("Invalid loan period"), 400),
        (IneligibleAgeError("Invalid age"), 400),
        (NoValidLoanError("No valid loan found"), 404),
    ],
)
@patch(ENGINE_PATH)
def test_decision_error_translation(mock_engine: MagicMock, client: TestClient, error, status_code):
    mock_engine.side_effect = error

    response = client.post(
        "/loan/decision",
        json={"personalCode": "1234", "loanAmount": 10, "loanPeriod": 10},
    )

    assert response.status_code == status_code
    assert response.json() == {"loanAmount": None, "loanPeriod": None, "errorMessage": error.message}


@patch(ENGINE_PATH)
def test_decision_unexpected_error(mock_engine: MagicMock, client: TestClient):
    mock_engine.side_effect = RuntimeError("connection string postgres://secret")

    response = client.post(
        "/loan/decision",
        json={"personalCode": "1234", "loanAmount": 10, "loanPeriod": 10},
    )

    assert response.status_code == 500
    assert response.json() == {"loanAmount": None, "loanPeriod": None, "errorMessage": "An unexpected error occurred"}
    assert "secret" not in response.text


@patch(ENGINE_PATH)
def test_unexpected_error_not_counted_as_rejection(mock_engine: MagicMock, client: TestClient):
    mock_engine.side_effect = RuntimeError("boom")
    rejected_before = REGISTRY.get_sample_value("loan_decision_total", {"outcome": "rejected"}) or 0.0
    errors_before = REGISTRY.get_sample_value("loan_decision_total", {"outcome": "error"}) or 0.0

    response = client.post(
        "/loan/decision",
        json={"personalCode": "1234", "loanAmount": 10, "loanPeriod": 10},
    )

    assert response.status_code == 500
    assert (REGISTRY.get_sample_value("loan_decision_total", {"outcome": "rejected"}) or 0.0) == rejected_before
    assert REGISTRY.get_sample_value("loan_decision_total", {"outcome": "error"}) == errors_before + 1
