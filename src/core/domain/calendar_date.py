"""
CalendarDate — Модель календарной даты (григорианский календарь)

Immutable Pydantic модель (day, month, year) с производным порядковым днём года.

ИНВАРИАНТЫ:
1. ordinal_day_of_year всегда вычисляется из day/month/is_leap(year), задать его нельзя
2. day ∈ [1, days_in_month(month, is_leap(year))], month ∈ [1, 12], year >= 1
   → иначе ValidationError (восстанавливаемая ошибка)
3. Арифметика (add_days/subtract_days) возвращает новый объект

Арифметика по дням сдвигает ТОЛЬКО день месяца, без переноса в месяц/год.
Вызывающий код обязан не выходить за границы месяца; при выходе конструктор
бросит ValidationError вместо создания некорректной даты.
"""

import logging
from functools import cached_property, total_ordering

from pydantic import BaseModel, Field, computed_field, field_validator

from src.core.math.gregorian import day_of_year, days_in_month, days_in_year, is_leap
from src.core.math.integer_safeguards import sign

logger = logging.getLogger(__name__)


@total_ordering
class CalendarDate(BaseModel):
    """
    Календарная дата.

    Поля объявлены в порядке year → month → day: валидатор day опирается на
    уже провалидированные month и year через info.data.
    """

    year: int = Field(..., ge=1, description="Год (>= 1)")
    month: int = Field(..., ge=1, le=12, description="Месяц [1, 12]")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("day")
    @classmethod
    def validate_day_in_month(cls, v: int, info) -> int:
        """Проверка, что день существует в данном месяце данного года"""
        if "month" not in info.data or "year" not in info.data:
            return v

        month = info.data["month"]
        year = info.data["year"]
        month_length = days_in_month(month, is_leap(year))
        if v > month_length:
            raise ValueError(
                f"day {v} out of range for {year:04d}-{month:02d} "
                f"(month has {month_length} days)"
            )
        return v

    # -------------------------------------------------------------------------
    # Производные значения
    # -------------------------------------------------------------------------

    @computed_field
    @cached_property
    def ordinal_day_of_year(self) -> int:
        """Порядковый день года (1 = 1 января)"""
        return day_of_year(self.day, self.month, self.is_leap_year)

    @property
    def is_leap_year(self) -> bool:
        return is_leap(self.year)

    def to_iso(self) -> str:
        """Дата в формате YYYY-MM-DD."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @classmethod
    def from_iso(cls, text: str) -> "CalendarDate":
        """
        Разбор строки YYYY-MM-DD.

        Raises:
            DateInputError: Если строка не соответствует формату или дата не существует
        """
        from src.core.contracts.date_input import parse_date_string

        return parse_date_string(text)

    # -------------------------------------------------------------------------
    # Арифметика по дню месяца
    # -------------------------------------------------------------------------

    def add_days(self, days: int) -> "CalendarDate":
        """
        Сдвиг дня месяца вперёд на days (месяц и год не меняются).

        Raises:
            ValidationError: Если результат выходит за границы месяца
        """
        return CalendarDate(day=self.day + days, month=self.month, year=self.year)

    def subtract_days(self, days: int) -> "CalendarDate":
        """Сдвиг дня месяца назад на days (см. add_days)."""
        return CalendarDate(day=self.day - days, month=self.month, year=self.year)

    def __add__(self, days: int) -> "CalendarDate":
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return self.add_days(days)

    def __sub__(self, days: int) -> "CalendarDate":
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return self.subtract_days(days)

    # -------------------------------------------------------------------------
    # Day-delta
    # -------------------------------------------------------------------------

    def delta_julian_days(self, other: "CalendarDate") -> int:
        """
        Знаковое количество дней от other до self.

        Положительно, если self позже other. Годы между датами суммируются
        линейным проходом по полуоткрытому диапазону [min(year), max(year)),
        без формулы подсчёта високосных дней. O(|year delta|).

        Args:
            other: Дата, от которой отсчитывается разница

        Returns:
            self - other в днях

        Examples:
            >>> a = CalendarDate(day=7, month=3, year=2021)
            >>> (a + 3).delta_julian_days(a)
            3
            >>> CalendarDate(day=7, month=3, year=2022).delta_julian_days(a)
            365
        """
        ordinal_diff = self.ordinal_day_of_year - other.ordinal_day_of_year

        year_delta = self.year - other.year
        if year_delta == 0:
            return ordinal_diff

        # Дни от 1 января более раннего года до 1 января более позднего
        days_tally = 0
        for year in range(min(self.year, other.year), max(self.year, other.year)):
            days_tally += days_in_year(year)

        delta = sign(year_delta) * days_tally + ordinal_diff
        logger.debug(
            "delta %s -> %s: years=%d tally=%d ordinal_diff=%d delta=%d",
            other.to_iso(),
            self.to_iso(),
            year_delta,
            days_tally,
            ordinal_diff,
            delta,
        )
        return delta

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _sort_key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        return self.to_iso()
