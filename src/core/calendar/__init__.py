"""
Calendar engine: weekday resolution against the reference Sunday and self-checks.
"""

from src.core.calendar.weekday_resolution import (
    REFERENCE_SUNDAY,
    WeekdayReport,
    build_weekday_report,
    resolve_weekday,
    weekday_residue,
)
from src.core.calendar.self_checks import (
    SelfCheck,
    SelfCheckFailure,
    default_checks,
    run_self_checks,
)

__all__ = [
    # Weekday resolution
    "REFERENCE_SUNDAY",
    "WeekdayReport",
    "build_weekday_report",
    "resolve_weekday",
    "weekday_residue",
    # Self-checks
    "SelfCheck",
    "SelfCheckFailure",
    "default_checks",
    "run_self_checks",
]
