"""POST /loan/decision - loan amount and period decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request

from loan_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_gateway.api.dependencies import get_decision_config, get_request_id
from loan_gateway.api.errors import error_response, translate_error
from loan_gateway.domain.exceptions import DomainException
from loan_gateway.domain.models import DecisionConfig, LoanRequest
from loan_gateway.domain.scoring import make_loan_decision
from loan_gateway.infrastructure.observability.metrics import record_decision, record_failure, record_rejection
from loan_gateway.infrastructure.observability.logging import log_decision, log_rejection

router = APIRouter()


@router.post(
    "/decision",
    response_model=DecisionResponse,
    responses={
        400: {"model": DecisionResponse, "description": "Invalid input or ineligible age"},
        404: {"model": DecisionResponse, "description": "No valid loan found"},
        500: {"model": DecisionResponse, "description": "Unexpected error"},
    },
)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    config: DecisionConfig = Depends(get_decision_config),
):
    """
    Decide the maximum loan amount and earliest period for an applicant.

    Flow:
    1. Validate personal code, amount and period
    2. Check age eligibility for the issuing country
    3. Derive the credit modifier from the applicant's segment
    4. Search for the earliest period meeting the credit score threshold
    5. Return the capped amount for that period
    """
    start_time = time.time()
    request_id = get_request_id(request)

    loan_request = LoanRequest(
        personal_code=request_body.personal_code,
        loan_amount=request_body.loan_amount,
        loan_period=request_body.loan_period,
    )

    try:
        decision = make_loan_decision(loan_request, config)

    except DomainException as e:
        status_code, message = translate_error(e)
        duration_ms = (time.time() - start_time) * 1000
        record_rejection(e.reason)
        log_rejection(request_id, e.reason, message, duration_ms)
        return error_response(status_code, message)

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        record_failure()
        logging.error(
            f"Unexpected error: {e}",
            extra={"request_id": request_id, "duration_ms": duration_ms},
        )
        return error_response(*translate_error(e))

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision.approved_amount, decision.approved_period, loan_request.loan_period)
    log_decision(
        request_id,
        decision.approved_amount,
        decision.approved_period,
        loan_request.loan_period,
        duration_ms,
    )

    return DecisionResponse(
        loan_amount=decision.approved_amount,
        loan_period=decision.approved_period,
        error_message=None,
    )
