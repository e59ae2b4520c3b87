"""
Core math modules

Целочисленные примитивы и правила григорианского календаря.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    DAYS_PER_WEEK,
    abs_int,
    floor_mod,
    sign,
    validate_int_in_range,
)

# Gregorian Rules
from src.core.math.gregorian import (
    DAYS_IN_COMMON_YEAR,
    DAYS_IN_LEAP_YEAR,
    FEBRUARY,
    MONTHS_PER_YEAR,
    THIRTY_DAY_MONTHS,
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap,
)

__all__ = [
    # Integer Safeguards — Constants
    "DAYS_PER_WEEK",
    # Integer Safeguards — Functions
    "abs_int",
    "floor_mod",
    "sign",
    "validate_int_in_range",
    # Gregorian — Constants
    "DAYS_IN_COMMON_YEAR",
    "DAYS_IN_LEAP_YEAR",
    "FEBRUARY",
    "MONTHS_PER_YEAR",
    "THIRTY_DAY_MONTHS",
    # Gregorian — Functions
    "day_of_year",
    "days_in_month",
    "days_in_year",
    "is_leap",
]
