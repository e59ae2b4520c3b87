"""
Integer Safeguards — целочисленные примитивы для календарной арифметики

Модуль содержит небольшие, но критичные для корректности помощники:
- Абсолютное значение и знак для signed day-delta
- Floored modulo (остаток всегда в [0, modulus))
- Валидация целочисленных диапазонов с понятным сообщением об ошибке

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. floor_mod(x, m) ∈ [0, m) для любого x (в том числе отрицательного)
2. abs_int(x) >= 0 для любого x
3. Все операции детерминированы и не зависят от платформы

Замечание: в Python оператор % уже floored для положительного modulus,
но в C/C++/Java остаток от отрицательного делимого отрицателен.
floor_mod нормализует явно, чтобы контракт не зависел от семантики оператора.
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Модуль по умолчанию для приведения day-delta к дню недели
DAYS_PER_WEEK: Final[int] = 7


# =============================================================================
# ЗНАК И АБСОЛЮТНОЕ ЗНАЧЕНИЕ
# =============================================================================


def abs_int(value: int) -> int:
    """
    Абсолютное значение целого числа.

    Args:
        value: Целое число (может быть отрицательным)

    Returns:
        value если value >= 0, иначе -value

    Examples:
        >>> abs_int(-6)
        6
        >>> abs_int(0)
        0
    """
    return -value if value < 0 else value


def sign(value: int) -> int:
    """
    Знак целого числа: -1, 0 или 1.

    Examples:
        >>> sign(-42)
        -1
        >>> sign(0)
        0
        >>> sign(3)
        1
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


# =============================================================================
# FLOORED MODULO
# =============================================================================


def floor_mod(value: int, modulus: int = DAYS_PER_WEEK) -> int:
    """
    Остаток от деления, нормализованный в [0, modulus).

    Truncating-остаток (как в C) для отрицательного value может быть
    отрицательным: -6 % 7 == -6. Здесь такой остаток сдвигается на modulus,
    так что результат всегда неотрицателен: floor_mod(-6, 7) == 1.

    Args:
        value: Делимое (любого знака)
        modulus: Положительный модуль (default: DAYS_PER_WEEK)

    Returns:
        Остаток в диапазоне [0, modulus)

    Raises:
        ValueError: Если modulus <= 0

    Examples:
        >>> floor_mod(8)
        1
        >>> floor_mod(-6)
        1
        >>> floor_mod(-7)
        0
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be > 0, got {modulus}")

    # Остаток с знаком делимого (truncating semantics)
    residue = abs_int(value) % modulus
    if value < 0:
        residue = -residue

    if residue < 0:
        residue += modulus

    return residue


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_int_in_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Валидация, что целое значение лежит в заданном замкнутом диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value не int или вне диапазона
    """
    # bool является подклассом int, но как день/месяц/год не имеет смысла
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
