import random
from collections.abc import Mapping
from datetime import date

from contribart.services.calendar_service import CalendarGrid
from contribart.services.level_service import MAX_LEVEL


NOISE_DENSITY = 0.4


def checkerboard(grid: CalendarGrid, overlay: Mapping[date, int]) -> dict[date, int]:
    """Paint every other slot of the flattened grid at full level.

    Padding slots count towards the alternation, so consecutive weeks are
    offset by one row and the result reads as a checkerboard.
    """

    painted = dict(overlay)
    for index, day in enumerate(grid.days()):
        if day.in_year and index % 2 == 0:
            painted[day.date] = MAX_LEVEL
    return painted


def invert(grid: CalendarGrid, overlay: Mapping[date, int]) -> dict[date, int]:
    """Swap painted and unpainted days of the year."""

    painted = dict(overlay)
    for day in grid.year_days():
        painted[day.date] = 0 if painted.get(day.date, 0) > 0 else MAX_LEVEL
    return painted


def random_noise(grid: CalendarGrid, rng: random.Random) -> dict[date, int]:
    """Return a fresh overlay sprinkled with random levels."""

    painted: dict[date, int] = {}
    for day in grid.year_days():
        if rng.random() < NOISE_DENSITY:
            painted[day.date] = rng.randint(1, MAX_LEVEL)
    return painted
