"""Request validation and age eligibility checks"""

from datetime import date

from loan_gateway.domain import personal_code
from loan_gateway.domain.exceptions import (
    IneligibleAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
)
from loan_gateway.domain.models import DecisionConfig, LoanRequest


def validate_request(request: LoanRequest, config: DecisionConfig) -> None:
    """
    Validate the request fields in a fixed order and report the first failure.

    Order: personal code, loan amount, loan period. Bounds are inclusive.
    """
    if not personal_code.is_valid(request.personal_code):
        raise InvalidPersonalCodeError()

    amount = request.loan_amount
    if amount is None or not config.min_loan_amount <= amount <= config.max_loan_amount:
        raise InvalidLoanAmountError()

    period = request.loan_period
    if period is None or not config.min_loan_period <= period <= config.max_loan_period:
        raise InvalidLoanPeriodError()


def check_age(code: str, config: DecisionConfig, today: date | None = None) -> int:
    """
    Verify the applicant's age falls inside the eligible window.

    The upper bound is the issuing country's life expectancy minus the longest
    loan period in whole years, so the loan can be repaid in full.

    Returns:
        The applicant's age in whole years
    """
    age = personal_code.get_age(code, today)
    country = personal_code.get_country(code)

    if age < config.min_age or age > config.max_eligible_age(country):
        raise IneligibleAgeError()

    return age
