"""
Weekday Resolution — день недели через day-delta от опорного воскресенья

Алгоритм:
    delta   = date.delta_julian_days(REFERENCE_SUNDAY)
    residue = floor_mod(delta, 7)        # всегда в [0, 6]
    weekday = DayOfWeek(residue)         # 0 = Sunday

Для дат раньше опорной delta отрицательна; нормализация остатка обязательна
(truncating-остаток -6 не является днём недели, нормализованный 1 = Monday).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. resolve_weekday(REFERENCE_SUNDAY) == DayOfWeek.SUNDAY
2. residue ∈ [0, 6] для любой валидной даты
3. Функции тотальны на валидных CalendarDate и не имеют побочных эффектов
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Final

from src.core.domain.calendar_date import CalendarDate
from src.core.domain.day_of_week import DayOfWeek
from src.core.math.integer_safeguards import DAYS_PER_WEEK, floor_mod

logger = logging.getLogger(__name__)

# =============================================================================
# ОПОРНАЯ ДАТА
# =============================================================================

# 7 марта 2021 — воскресенье (residue 0)
REFERENCE_SUNDAY: Final[CalendarDate] = CalendarDate(day=7, month=3, year=2021)


# =============================================================================
# RESIDUE & WEEKDAY
# =============================================================================


def weekday_residue(delta_days: int) -> int:
    """Остаток day-delta по модулю 7, нормализованный в [0, 6]."""
    return floor_mod(delta_days, DAYS_PER_WEEK)


def resolve_weekday(date: CalendarDate) -> DayOfWeek:
    """
    День недели для даты.

    Args:
        date: Валидная календарная дата

    Returns:
        DayOfWeek

    Examples:
        >>> resolve_weekday(CalendarDate(day=1, month=1, year=2000))
        <DayOfWeek.SATURDAY: 6>
    """
    delta = date.delta_julian_days(REFERENCE_SUNDAY)
    return DayOfWeek.from_residue(weekday_residue(delta))


# =============================================================================
# ДИАГНОСТИЧЕСКИЙ ОТЧЁТ
# =============================================================================


@dataclass(frozen=True)
class WeekdayReport:
    """Результат расчёта дня недели с промежуточными значениями."""

    date: CalendarDate
    delta_days: int
    residue: int
    weekday: DayOfWeek
    reference_date: CalendarDate = REFERENCE_SUNDAY

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в формат контракта weekday_report."""
        return {
            "date": self.date.to_iso(),
            "delta_days": self.delta_days,
            "residue": self.residue,
            "weekday": self.weekday.label,
            "reference_date": self.reference_date.to_iso(),
        }

    def to_lines(self) -> list[str]:
        """Текстовый вывод: delta, остаток, название дня."""
        return [
            f"DeltaDays={self.delta_days}",
            f"DeltaDays Mod 7={self.residue}",
            f"Result={self.weekday.label}",
        ]


def build_weekday_report(date: CalendarDate) -> WeekdayReport:
    """
    Полный расчёт для даты: delta от опорного воскресенья, остаток, день недели.
    """
    delta = date.delta_julian_days(REFERENCE_SUNDAY)
    residue = weekday_residue(delta)
    weekday = DayOfWeek.from_residue(residue)

    logger.debug(
        "weekday %s: delta=%d residue=%d weekday=%s",
        date.to_iso(),
        delta,
        residue,
        weekday.label,
    )

    return WeekdayReport(date=date, delta_days=delta, residue=residue, weekday=weekday)
