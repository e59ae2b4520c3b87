"""
Date Input — синтаксический разбор строки YYYY-MM-DD

Граница между внешним вводом и календарным движком:
1. Строка проверяется регулярным выражением целиком (fullmatch)
   YYYY: 4 ASCII-цифры, начинается с 1 или 2; MM: 01-12; DD: 01-31
   (явный класс [0-9]: цифровой класс re в Python совпадает с любой Unicode-цифрой)
2. Только после этого строится CalendarDate; несуществующие даты
   (например 2021-02-30) проходят шаблон и отвергаются конструктором

Неразобранные или частично разобранные данные в движок не передаются.
"""

import re
from typing import Final

from pydantic import ValidationError

from src.core.domain.calendar_date import CalendarDate

# =============================================================================
# ШАБЛОН
# =============================================================================

DATE_PATTERN: Final[str] = r"([12][0-9]{3})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])"

_DATE_RE: Final[re.Pattern[str]] = re.compile(DATE_PATTERN)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DateInputError(ValueError):
    """Базовая ошибка пользовательского ввода даты."""

    def __init__(self, text: str, message: str):
        self.text = text
        super().__init__(message)


class DateFormatError(DateInputError):
    """Строка не соответствует шаблону YYYY-MM-DD."""

    def __init__(self, text: str):
        super().__init__(text, f"Date {text!r} does not match YYYY-MM-DD")


class InvalidDateError(DateInputError):
    """Строка соответствует шаблону, но такой даты не существует."""

    def __init__(self, text: str, cause: ValidationError):
        self.cause = cause
        reasons = "; ".join(err["msg"] for err in cause.errors())
        super().__init__(text, f"Date {text!r} is not a valid calendar date: {reasons}")


# =============================================================================
# PARSING
# =============================================================================


def match_date_string(text: str) -> tuple[int, int, int]:
    """
    Синтаксическая проверка и извлечение (year, month, day).

    Raises:
        DateFormatError: Если строка не соответствует шаблону
    """
    match = _DATE_RE.fullmatch(text.strip())
    if match is None:
        raise DateFormatError(text)

    year, month, day = (int(group) for group in match.groups())
    return year, month, day


def parse_date_string(text: str) -> CalendarDate:
    """
    Разбор строки в CalendarDate.

    Args:
        text: Строка вида "2024-02-29"

    Returns:
        CalendarDate

    Raises:
        DateFormatError: Строка не соответствует шаблону
        InvalidDateError: Дата не существует (день вне месяца)
    """
    year, month, day = match_date_string(text)

    try:
        return CalendarDate(day=day, month=month, year=year)
    except ValidationError as e:
        raise InvalidDateError(text, e) from e
