from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from datetime import timedelta


DAYS_PER_WEEK = 7
SUNDAY = 0

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
WEEKDAY_LABELS = ("", "Mon", "", "Wed", "", "Fri", "")


def weekday_index(day: date) -> int:
    """Return the day-of-week index with 0=Sunday..6=Saturday."""

    return (day.weekday() + 1) % 7


def week_start(day: date, first_weekday: int = SUNDAY) -> date:
    """Return the first day of the week containing `day`."""

    return day - timedelta(days=(weekday_index(day) - first_weekday) % 7)


def week_end(day: date, first_weekday: int = SUNDAY) -> date:
    """Return the last day of the week containing `day`."""

    return week_start(day, first_weekday) + timedelta(days=DAYS_PER_WEEK - 1)


@dataclass(frozen=True)
class CalendarDay:
    """One slot of the calendar grid."""

    date: date
    week: int
    weekday: int
    in_year: bool


@dataclass(frozen=True)
class CalendarGrid:
    """Week-major calendar of a year, padded out to whole weeks."""

    year: int
    first_weekday: int
    weeks: tuple[tuple[CalendarDay, ...], ...]

    @property
    def start(self) -> date:
        return self.weeks[0][0].date

    @property
    def end(self) -> date:
        return self.weeks[-1][-1].date

    def days(self) -> Iterator[CalendarDay]:
        for week in self.weeks:
            yield from week

    def year_days(self) -> Iterator[CalendarDay]:
        return (day for day in self.days() if day.in_year)

    def month_labels(self) -> list[str | None]:
        """Label each week whose first day starts a new month of the year.

        Week 0 is labelled only when it already begins inside the year, so
        January lands on the first column that actually shows January.
        """

        labels: list[str | None] = []
        previous_first_day: date | None = None
        for week in self.weeks:
            first_day = week[0]
            label = None
            if first_day.in_year and (
                previous_first_day is None
                or first_day.date.month != previous_first_day.month
            ):
                label = MONTH_ABBREVIATIONS[first_day.date.month - 1]
            labels.append(label)
            previous_first_day = first_day.date
        return labels


def build_grid(year: int, first_weekday: int = SUNDAY) -> CalendarGrid:
    """Build the calendar grid for `year`.

    The grid runs from the week start on or before Jan 1 to the week end on
    or after Dec 31, so every week holds exactly seven days. Days from the
    neighbouring years stay in the grid and are flagged with `in_year=False`.
    """

    grid_start = week_start(date(year, 1, 1), first_weekday)
    grid_end = week_end(date(year, 12, 31), first_weekday)
    total_days = (grid_end - grid_start).days + 1

    weeks: list[tuple[CalendarDay, ...]] = []
    current_week: list[CalendarDay] = []
    for offset in range(total_days):
        day = grid_start + timedelta(days=offset)
        current_week.append(
            CalendarDay(
                date=day,
                week=len(weeks),
                weekday=weekday_index(day),
                in_year=day.year == year,
            )
        )
        if len(current_week) == DAYS_PER_WEEK:
            weeks.append(tuple(current_week))
            current_week = []

    return CalendarGrid(year=year, first_weekday=first_weekday, weeks=tuple(weeks))
