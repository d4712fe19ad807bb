from datetime import date

from pydantic import BaseModel


class CalendarDay(BaseModel):
    """Single slot of the calendar grid."""

    date: date
    week: int
    weekday: int
    in_year: bool


class CalendarWeek(BaseModel):
    """Week column with its optional month label."""

    index: int
    month_label: str | None
    days: list[CalendarDay]


class CalendarResponse(BaseModel):
    """Week-major calendar layout of a year."""

    year: int
    start: date
    end: date
    weekday_labels: list[str]
    weeks: list[CalendarWeek]
