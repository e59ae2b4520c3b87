"""
Self-checks — проверки календарного движка на известных значениях

Набор утверждений, которые должны выполняться всегда: длины месяцев,
порядковые дни года, delta от опорной даты в пределах месяца. Запускается
из CLI (--self-check) и из тестов.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List

from src.core.calendar.weekday_resolution import REFERENCE_SUNDAY
from src.core.math.gregorian import day_of_year, days_in_month

logger = logging.getLogger(__name__)

# Максимальный сдвиг от опорной даты, не выходящий за границы марта 2021
MAX_ANCHOR_OFFSET = 6


class SelfCheckFailure(AssertionError):
    """Одна или несколько self-check проверок не прошли."""

    def __init__(self, failed: List[str]):
        self.failed = failed
        super().__init__(f"{len(failed)} self-check(s) failed: " + "; ".join(failed))


@dataclass(frozen=True)
class SelfCheck:
    description: str
    predicate: Callable[[], bool]


def _anchor_offset_checks() -> List[SelfCheck]:
    checks = [
        SelfCheck(
            "Diff of anchor with itself is 0",
            lambda: REFERENCE_SUNDAY.delta_julian_days(REFERENCE_SUNDAY) == 0,
        )
    ]
    for k in range(1, MAX_ANCHOR_OFFSET + 1):
        checks.append(
            SelfCheck(
                f"Diff of anchor+{k} is {k}",
                lambda k=k: (REFERENCE_SUNDAY + k).delta_julian_days(REFERENCE_SUNDAY) == k,
            )
        )
        checks.append(
            SelfCheck(
                f"Diff of anchor-{k} is -{k}",
                lambda k=k: (REFERENCE_SUNDAY - k).delta_julian_days(REFERENCE_SUNDAY) == -k,
            )
        )
    return checks


def default_checks() -> List[SelfCheck]:
    """Полный набор проверок."""
    return [
        SelfCheck("January has 31 days", lambda: days_in_month(1, False) == 31),
        SelfCheck("January has 31 days (leap)", lambda: days_in_month(1, True) == 31),
        SelfCheck("Feb has 28 days (no leap)", lambda: days_in_month(2, False) == 28),
        SelfCheck("Feb has 29 days (leap)", lambda: days_in_month(2, True) == 29),
        SelfCheck("First day is day 1", lambda: day_of_year(1, 1, False) == 1),
        SelfCheck("Last day is day 365 (no leap)", lambda: day_of_year(31, 12, False) == 365),
        SelfCheck("Last day is day 366 (leap)", lambda: day_of_year(31, 12, True) == 366),
        SelfCheck("May 6th is 126 (no leap)", lambda: day_of_year(6, 5, False) == 126),
        SelfCheck("May 6th is 127 (leap)", lambda: day_of_year(6, 5, True) == 127),
        *_anchor_offset_checks(),
    ]


def run_self_checks(checks: List[SelfCheck] | None = None) -> int:
    """
    Выполнение проверок.

    Args:
        checks: Список проверок (default: default_checks())

    Returns:
        Количество выполненных проверок

    Raises:
        SelfCheckFailure: Если хотя бы одна проверка вернула False
    """
    checks = default_checks() if checks is None else checks

    failed = []
    for check in checks:
        if check.predicate():
            logger.debug("self-check ok: %s", check.description)
        else:
            logger.error("self-check FAILED: %s", check.description)
            failed.append(check.description)

    if failed:
        raise SelfCheckFailure(failed)

    return len(checks)
