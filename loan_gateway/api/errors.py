"""Translation of decision failures into HTTP responses"""

import logging
from typing import Dict, Tuple, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from loan_gateway.api.dependencies import get_request_id
from loan_gateway.api.v1.schemas import DecisionResponse
from loan_gateway.domain.exceptions import (
    DomainException,
    IneligibleAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
INVALID_REQUEST_MESSAGE = "Invalid request!"

ERROR_STATUS_CODES: Dict[Type[DomainException], int] = {
    InvalidPersonalCodeError: 400,
    InvalidLoanAmountError: 400,
    InvalidLoanPeriodError: 400,
    IneligibleAgeError: 400,
    NoValidLoanError: 404,
}


def translate_error(exc: Exception) -> Tuple[int, str]:
    """Map an exception to (status_code, message); unknown errors never leak details"""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code, exc.message
    return 500, UNEXPECTED_ERROR_MESSAGE


def error_response(status_code: int, message: str) -> JSONResponse:
    body = DecisionResponse(loan_amount=None, loan_period=None, error_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Catch failures that escape the route handlers"""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logging.warning(
            f"Malformed request body: {[error['loc'] for error in exc.errors()]}",
            extra={"request_id": get_request_id(request)},
        )
        return error_response(400, INVALID_REQUEST_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logging.error(f"Unexpected error: {exc}", extra={"request_id": get_request_id(request)})
        return error_response(*translate_error(exc))
