"""Estonian personal identification code (isikukood) parsing and validation.

Code format: GYYMMDDSSSC (11 digits)
  - G:      sex and century of birth (1-2: 1800s, 3-4: 1900s, 5-6: 2000s, 7-8: 2100s)
  - YYMMDD: date of birth
  - SSS:    serial number
  - C:      check digit (weighted sum mod 11, second weight set if the first yields 10)

The first digit also selects the country whose life expectancy bounds the
applicant's maximum age: 4 is read as Latvia, 5 as Lithuania, anything else as
Estonia.
"""

import re
from datetime import date
from typing import Optional

from loan_gateway.domain.exceptions import InvalidPersonalCodeError
from loan_gateway.domain.models import Country
from loan_gateway.utils.date_utils import full_years_between

_CODE_PATTERN = re.compile(r"[1-8][0-9]{10}")

FIRST_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

CENTURY_BY_DIGIT: dict[str, int] = {
    "1": 1800, "2": 1800,
    "3": 1900, "4": 1900,
    "5": 2000, "6": 2000,
    "7": 2100, "8": 2100,
}

COUNTRY_BY_DIGIT: dict[str, Country] = {
    "4": Country.LATVIA,
    "5": Country.LITHUANIA,
}


def calculate_checksum(digits: str) -> int:
    """Compute the check digit for the first ten digits of a personal code."""
    checksum = sum(int(d) * w for d, w in zip(digits, FIRST_WEIGHTS)) % 11
    if checksum == 10:
        checksum = sum(int(d) * w for d, w in zip(digits, SECOND_WEIGHTS)) % 11
        if checksum == 10:
            checksum = 0
    return checksum


def parse_birth_date(code: str) -> date:
    """Extract the date of birth; raises InvalidPersonalCodeError if it is not a real date."""
    if not _CODE_PATTERN.fullmatch(code):
        raise InvalidPersonalCodeError()

    year = CENTURY_BY_DIGIT[code[0]] + int(code[1:3])
    try:
        return date(year, int(code[3:5]), int(code[5:7]))
    except ValueError as e:
        raise InvalidPersonalCodeError() from e


def is_valid(code: Optional[str]) -> bool:
    """Check format, date of birth and check digit."""
    if not isinstance(code, str) or not _CODE_PATTERN.fullmatch(code):
        return False
    if calculate_checksum(code[:10]) != int(code[10]):
        return False
    try:
        parse_birth_date(code)
    except InvalidPersonalCodeError:
        return False
    return True


def get_age(code: str, today: date | None = None) -> int:
    """Applicant age in whole years as of `today` (default: current date)."""
    if today is None:
        today = date.today()
    return full_years_between(parse_birth_date(code), today)


def get_country(code: str) -> Country:
    if not code:
        raise InvalidPersonalCodeError()
    return COUNTRY_BY_DIGIT.get(code[0], Country.ESTONIA)
