"""
Domain models and value objects.

Contains the calendar value types: CalendarDate and DayOfWeek.
"""

from src.core.domain.calendar_date import CalendarDate
from src.core.domain.day_of_week import DayOfWeek

__all__ = [
    "CalendarDate",
    "DayOfWeek",
]
