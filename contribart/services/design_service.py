import logging
import random
from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from datetime import date
from datetime import time

from contribart.services import pattern_service
from contribart.services.calendar_service import CalendarGrid
from contribart.services.calendar_service import build_grid
from contribart.services.fonts import BLOCK_FONT
from contribart.services.fonts import Glyph
from contribart.services.level_service import DEFAULT_POLICY
from contribart.services.level_service import LEVELS
from contribart.services.level_service import MAX_LEVEL
from contribart.services.level_service import ThresholdPolicy
from contribart.services.level_service import effective_level
from contribart.services.level_service import level_from_count
from contribart.services.level_service import observed_max as max_count
from contribart.services.script_service import DEFAULT_COMMIT_MESSAGE
from contribart.services.script_service import DEFAULT_COMMIT_TIME
from contribart.services.script_service import CompiledScript
from contribart.services.script_service import compile_script
from contribart.services.text_service import place_text


logger = logging.getLogger(__name__)


@dataclass
class DesignSession:
    """Transient design state for one year: painted overlay over real history.

    Entries outside `year` are dropped on construction and ignored by every
    operation afterwards.
    """

    year: int
    overlay: dict[date, int] = field(default_factory=dict)
    baseline: dict[date, int] = field(default_factory=dict)
    policy: ThresholdPolicy = DEFAULT_POLICY
    observed_max: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.overlay = {
            day: level for day, level in self.overlay.items() if self.in_year(day)
        }
        self.baseline = {
            day: count for day, count in self.baseline.items() if self.in_year(day)
        }
        self.observed_max = max_count(self.baseline)

    def in_year(self, day: date) -> bool:
        return day.year == self.year

    @property
    def grid(self) -> CalendarGrid:
        return build_grid(self.year)

    def select_year(self, year: int) -> None:
        self.year = year
        self.overlay = {}
        self.baseline = {}
        self.observed_max = 0

    def import_baseline(self, counts: Mapping[date, int]) -> None:
        """Replace real history and seed the overlay with its levels."""

        self.baseline = {
            day: count for day, count in counts.items() if self.in_year(day)
        }
        self.observed_max = max_count(self.baseline)
        self.overlay = {}
        for day, count in self.baseline.items():
            level = level_from_count(count, self.observed_max, self.policy)
            if level:
                self.overlay[day] = level
        logger.info(
            "Imported %d days for %d (max=%d)",
            len(self.baseline),
            self.year,
            self.observed_max,
        )

    def paint(self, days: Iterable[date], level: int) -> int:
        if level not in LEVELS:
            raise ValueError(f"level must be between 0 and {MAX_LEVEL}")

        painted = 0
        for day in days:
            if self.in_year(day):
                self.overlay[day] = level
                painted += 1
        return painted

    def clear(self) -> None:
        self.overlay = {}

    def level(self, day: date) -> int:
        return effective_level(
            day, self.overlay, self.baseline, self.observed_max, self.policy
        )

    def checkerboard(self) -> None:
        self.overlay = pattern_service.checkerboard(self.grid, self.overlay)

    def invert(self) -> None:
        self.overlay = pattern_service.invert(self.grid, self.overlay)

    def random_noise(self, rng: random.Random | None = None) -> None:
        self.overlay = pattern_service.random_noise(self.grid, rng or random.Random())

    def draw_text(
        self,
        text: str,
        column_offset: int = 2,
        glyphs: Mapping[str, Glyph] = BLOCK_FONT,
    ) -> list[date]:
        """Paint `text` at full level, counting weeks from the grid start."""

        dates = [
            day
            for day in place_text(text, self.grid.start, column_offset, glyphs)
            if self.in_year(day)
        ]
        self.paint(dates, MAX_LEVEL)
        return dates

    def compile(
        self,
        commit_time: time = DEFAULT_COMMIT_TIME,
        message: str = DEFAULT_COMMIT_MESSAGE,
    ) -> CompiledScript:
        return compile_script(
            self.overlay,
            self.baseline,
            self.observed_max,
            policy=self.policy,
            commit_time=commit_time,
            message=message,
        )
