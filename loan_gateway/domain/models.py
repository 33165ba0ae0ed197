"""Domain models - pure Python dataclasses representing loan decision entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Country(str, Enum):
    """Country that issued the applicant's personal code"""

    ESTONIA = "EE"
    LATVIA = "LV"
    LITHUANIA = "LT"


class Segment(str, Enum):
    """Applicant credit segment derived from the personal code"""

    SEGMENT_1 = "segment_1"
    SEGMENT_2 = "segment_2"
    SEGMENT_3 = "segment_3"
    DEBT = "debt"


@dataclass(frozen=True)
class DecisionConfig:
    """Immutable decision engine constants, shared across requests"""

    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12  # months
    max_loan_period: int = 48  # months
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000
    credit_score_threshold: float = 0.1
    min_age: int = 18
    life_expectancy_estonia: int = 84
    life_expectancy_latvia: int = 82
    life_expectancy_lithuania: int = 86

    def life_expectancy(self, country: Country) -> int:
        if country is Country.LATVIA:
            return self.life_expectancy_latvia
        if country is Country.LITHUANIA:
            return self.life_expectancy_lithuania
        return self.life_expectancy_estonia

    def max_eligible_age(self, country: Country) -> int:
        """Oldest age at which a loan of the longest period still ends within life expectancy"""
        return self.life_expectancy(country) - self.max_loan_period // 12

    def credit_modifier(self, segment: Segment) -> Optional[int]:
        """Credit modifier for a segment, None for the debt segment"""
        return {
            Segment.SEGMENT_1: self.segment_1_credit_modifier,
            Segment.SEGMENT_2: self.segment_2_credit_modifier,
            Segment.SEGMENT_3: self.segment_3_credit_modifier,
        }.get(segment)


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as received from the caller; any field may be missing"""

    personal_code: Optional[str]
    loan_amount: Optional[int]
    loan_period: Optional[int]


@dataclass(frozen=True)
class LoanDecision:
    """Output of the decision engine"""

    approved_amount: int
    approved_period: int
    segment: Segment
