"""
Contract Validation Module

Граница ввода/вывода календарного движка:
- разбор строки даты YYYY-MM-DD
- валидация JSON контрактов weekday_request / weekday_report
"""

from .date_input import (
    DATE_PATTERN,
    DateFormatError,
    DateInputError,
    InvalidDateError,
    match_date_string,
    parse_date_string,
)
from .validators import (
    ContractValidator,
    SchemaLoader,
    WeekdayReportValidator,
    WeekdayRequestValidator,
    validate_weekday_report,
)

__all__ = [
    # Date input
    "DATE_PATTERN",
    "DateInputError",
    "DateFormatError",
    "InvalidDateError",
    "match_date_string",
    "parse_date_string",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WeekdayRequestValidator",
    "WeekdayReportValidator",
    # Functions
    "validate_weekday_report",
]
