"""Unit tests for translating decision failures into HTTP status codes"""

import pytest
from loan_gateway.api.errors import UNEXPECTED_ERROR_MESSAGE, translate_error
from loan_gateway.domain.exceptions import (
    IneligibleAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)


@pytest.mark.parametrize(
    "error,status_code,message",
    [
        (InvalidPersonalCodeError(), 400, "Invalid personal ID code!"),
        (InvalidLoanAmountError(), 400, "Invalid loan amount!"),
        (InvalidLoanPeriodError(), 400, "Invalid loan period!"),
        (IneligibleAgeError(), 400, "Age is not eligible for a loan!"),
        (NoValidLoanError(), 404, "No valid loan found!"),
    ],
)
def test_translate_domain_errors(error, status_code, message):
    assert translate_error(error) == (status_code, message)


def test_translate_keeps_custom_message():
    assert translate_error(NoValidLoanError("Applicant is in debt")) == (404, "Applicant is in debt")


def test_translate_unexpected_error_hides_details():
    status_code, message = translate_error(KeyError("internal lookup table"))

    assert status_code == 500
    assert message == UNEXPECTED_ERROR_MESSAGE
    assert "internal" not in message
