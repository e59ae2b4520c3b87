"""
Gregorian Rules — високосные годы, длины месяцев, порядковый день года

Листовой слой календарного движка. Чистые функции без состояния:
- is_leap: правило 4/100/400
- days_in_month: таблица длин месяцев с учётом февраля
- days_in_year: 365 или 366
- day_of_year: порядковый день года (1 = 1 января) через prefix-sum длин месяцев

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_leap тотальна на всех int, без исключений
2. day_of_year ∈ [1, 365] для невисокосного года, [1, 366] для високосного
3. Неверный месяц/день → ValueError (восстанавливаемая ошибка, не abort)
"""

from typing import Final

from src.core.math.integer_safeguards import validate_int_in_range

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

DAYS_IN_COMMON_YEAR: Final[int] = 365
DAYS_IN_LEAP_YEAR: Final[int] = 366

FEBRUARY: Final[int] = 2

# 30 дней: апрель, июнь, сентябрь, ноябрь
THIRTY_DAY_MONTHS: Final[frozenset[int]] = frozenset({4, 6, 9, 11})


# =============================================================================
# LEAP YEAR
# =============================================================================


def is_leap(year: int) -> bool:
    """
    Високосный ли год по григорианскому правилу.

    Год високосный, если делится на 4 и (не делится на 100 или делится на 400).

    Examples:
        >>> is_leap(2024)
        True
        >>> is_leap(1900)
        False
        >>> is_leap(2000)
        True
    """
    div_by_4 = year % 4 == 0
    div_by_100 = year % 100 == 0
    div_by_400 = year % 400 == 0

    return div_by_4 and (not div_by_100 or div_by_400)


def days_in_year(year: int) -> int:
    """Количество дней в году: 366 для високосного, иначе 365."""
    return DAYS_IN_LEAP_YEAR if is_leap(year) else DAYS_IN_COMMON_YEAR


# =============================================================================
# MONTH LENGTHS
# =============================================================================


def days_in_month(month: int, is_leap_year: bool) -> int:
    """
    Длина месяца в днях.

    Args:
        month: Номер месяца [1, 12]
        is_leap_year: Високосный ли год

    Returns:
        28/29 для февраля, 30 для апреля/июня/сентября/ноября, иначе 31

    Raises:
        ValueError: Если month вне [1, 12]
    """
    validate_int_in_range(month, "month", 1, MONTHS_PER_YEAR)

    if month == FEBRUARY:
        return 29 if is_leap_year else 28
    if month in THIRTY_DAY_MONTHS:
        return 30
    return 31


# =============================================================================
# DAY OF YEAR
# =============================================================================


def day_of_year(day: int, month: int, is_leap_year: bool) -> int:
    """
    Порядковый день года (ordinal / "julian" day в терминологии движка).

    Сумма длин всех предшествующих месяцев плюс day. Не более 11 сложений.

    Args:
        day: День месяца [1, days_in_month(month, is_leap_year)]
        month: Номер месяца [1, 12]
        is_leap_year: Високосный ли год

    Returns:
        Порядковый день в [1, 365] или [1, 366]

    Raises:
        ValueError: Если month или day вне допустимого диапазона

    Examples:
        >>> day_of_year(1, 1, False)
        1
        >>> day_of_year(6, 5, False)
        126
        >>> day_of_year(31, 12, True)
        366
    """
    validate_int_in_range(day, "day", 1, days_in_month(month, is_leap_year))

    days_so_far = 0
    for preceding_month in range(1, month):
        days_so_far += days_in_month(preceding_month, is_leap_year)

    return days_so_far + day
