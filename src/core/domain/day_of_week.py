"""
DayOfWeek — перечисление дней недели

Фиксированный циклический порядок, Sunday = 0. Значение enum совпадает с
остатком day-delta по модулю 7 относительно опорного воскресенья.
"""

from enum import IntEnum


class DayOfWeek(IntEnum):
    """День недели, значение = остаток в [0, 6]"""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def label(self) -> str:
        """Английское название дня ("Sunday", "Monday", ...)."""
        return self.name.capitalize()

    @classmethod
    def from_residue(cls, residue: int) -> "DayOfWeek":
        """
        День недели по нормализованному остатку.

        Raises:
            ValueError: Если residue вне [0, 6]
        """
        if not 0 <= residue < len(cls):
            raise ValueError(f"residue must be in [0, {len(cls) - 1}], got {residue}")
        return cls(residue)

    def __str__(self) -> str:
        return self.label
