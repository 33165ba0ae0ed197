"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    default_message = "Loan decision failed"
    reason = "domain_error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidPersonalCodeError(DomainException):
    """Personal code is missing, malformed or fails the checksum"""

    default_message = "Invalid personal ID code!"
    reason = "invalid_personal_code"


class InvalidLoanAmountError(DomainException):
    """Requested amount is missing or outside the allowed range"""

    default_message = "Invalid loan amount!"
    reason = "invalid_loan_amount"


class InvalidLoanPeriodError(DomainException):
    """Requested period is missing or outside the allowed range"""

    default_message = "Invalid loan period!"
    reason = "invalid_loan_period"


class IneligibleAgeError(DomainException):
    """Applicant is too young or too old for the longest loan period"""

    default_message = "Age is not eligible for a loan!"
    reason = "ineligible_age"


class NoValidLoanError(DomainException):
    """Applicant is in debt or no period reaches the credit score threshold"""

    default_message = "No valid loan found!"
    reason = "no_valid_loan"
