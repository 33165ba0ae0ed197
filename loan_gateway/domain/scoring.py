"""Loan decision engine - core business logic for approved amount and period"""

from datetime import date

from loan_gateway.domain.exceptions import NoValidLoanError
from loan_gateway.domain.models import DecisionConfig, LoanDecision, LoanRequest, Segment
from loan_gateway.domain.validation import check_age, validate_request

SEGMENT_BY_LAST_DIGIT: dict[str, Segment] = {
    "4": Segment.SEGMENT_1, "6": Segment.SEGMENT_1,
    "3": Segment.SEGMENT_2, "7": Segment.SEGMENT_2,
    "8": Segment.SEGMENT_3, "9": Segment.SEGMENT_3,
}


def get_segment(code: str) -> Segment:
    """Map the last digit of the personal code to a credit segment (0, 1, 2, 5 are debt)."""
    return SEGMENT_BY_LAST_DIGIT.get(code[-1], Segment.DEBT)


def get_credit_modifier(code: str, config: DecisionConfig) -> int:
    """
    Credit modifier for the applicant's segment.

    - Digits 4 or 6: segment 1 (low modifier)
    - Digits 3 or 7: segment 2 (medium modifier)
    - Digits 8 or 9: segment 3 (high modifier)
    - Anything else: debt, no loan is offered
    """
    modifier = config.credit_modifier(get_segment(code))
    if modifier is None:
        raise NoValidLoanError()
    return modifier


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """Credit score for a modifier, amount and period (months)."""
    return (credit_modifier / loan_amount) * loan_period / 10


def find_earliest_eligible_period(credit_modifier: int, requested_period: int, config: DecisionConfig) -> int:
    """
    Shortest period, starting from the requested one, that meets the score threshold.

    The score is evaluated at the minimum loan amount, so the period found is
    the earliest one at which any loan can be approved.
    """
    for period in range(requested_period, config.max_loan_period + 1):
        score = calculate_credit_score(credit_modifier, config.min_loan_amount, period)
        if score >= config.credit_score_threshold:
            return period

    raise NoValidLoanError()


def calculate_max_amount(credit_modifier: int, period: int, config: DecisionConfig) -> int:
    """
    Largest amount approvable for the period, capped at the system maximum.

    Note: this is a linear cap (modifier * period), not the score equation
    solved for amount at the threshold.
    """
    return min(credit_modifier * period, config.max_loan_amount)


def make_loan_decision(
    request: LoanRequest,
    config: DecisionConfig,
    today: date | None = None,
) -> LoanDecision:
    """
    Main entry point: validate the request and compute the approved loan.

    Flow:
    1. Validate personal code, amount and period
    2. Check the applicant's age against the country's eligible window
    3. Resolve the credit modifier from the applicant's segment
    4. Find the earliest period meeting the credit score threshold
    5. Size the approved amount for that period

    Raises one of the DomainException subclasses when the loan is rejected.
    """
    validate_request(request, config)
    code = request.personal_code
    check_age(code, config, today)

    segment = get_segment(code)
    credit_modifier = get_credit_modifier(code, config)
    approved_period = find_earliest_eligible_period(credit_modifier, request.loan_period, config)
    approved_amount = calculate_max_amount(credit_modifier, approved_period, config)

    return LoanDecision(
        approved_amount=approved_amount,
        approved_period=approved_period,
        segment=segment,
    )
