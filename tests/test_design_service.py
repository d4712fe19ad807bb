import random
from datetime import date

import pytest

from contribart.services.calendar_service import build_grid
from contribart.services.design_service import DesignSession
from contribart.services.fonts import COMPACT_FONT
from contribart.services.pattern_service import checkerboard
from contribart.services.pattern_service import invert
from contribart.services.pattern_service import random_noise


def test_session_drops_entries_outside_year() -> None:
    session = DesignSession(
        year=2024,
        overlay={date(2024, 1, 1): 2, date(2023, 12, 31): 4},
        baseline={date(2024, 1, 2): 3, date(2025, 1, 1): 99},
    )

    assert session.overlay == {date(2024, 1, 1): 2}
    assert session.baseline == {date(2024, 1, 2): 3}
    assert session.observed_max == 3


def test_select_year_resets_state() -> None:
    session = DesignSession(year=2024, baseline={date(2024, 6, 1): 12})
    session.paint([date(2024, 6, 2)], 3)

    session.select_year(2023)

    assert session.year == 2023
    assert session.overlay == {}
    assert session.baseline == {}
    assert session.observed_max == 0


def test_import_baseline_seeds_overlay_with_real_levels() -> None:
    session = DesignSession(year=2024)
    session.paint([date(2024, 2, 2)], 4)

    session.import_baseline(
        {date(2024, 2, 1): 20, date(2024, 2, 3): 5, date(2024, 2, 4): 0}
    )

    assert session.observed_max == 20
    assert session.overlay == {date(2024, 2, 1): 4, date(2024, 2, 3): 2}


def test_seeded_overlay_compiles_to_no_commits() -> None:
    session = DesignSession(year=2024)
    session.import_baseline({date(2024, 2, day): day * 3 for day in range(1, 20)})

    assert session.compile().operations == ()


def test_paint_ignores_out_of_year_dates() -> None:
    session = DesignSession(year=2024)

    painted = session.paint([date(2024, 3, 1), date(2025, 1, 2)], 3)

    assert painted == 1
    assert session.overlay == {date(2024, 3, 1): 3}


def test_paint_rejects_invalid_level() -> None:
    session = DesignSession(year=2024)

    with pytest.raises(ValueError):
        session.paint([date(2024, 3, 1)], 5)


def test_level_never_drops_below_history() -> None:
    session = DesignSession(year=2024, baseline={date(2024, 3, 1): 10})
    session.paint([date(2024, 3, 1)], 0)

    assert session.level(date(2024, 3, 1)) == 4


def test_clear_keeps_baseline() -> None:
    session = DesignSession(year=2024, baseline={date(2024, 3, 1): 6})
    session.paint([date(2024, 3, 2)], 2)

    session.clear()

    assert session.overlay == {}
    assert session.baseline == {date(2024, 3, 1): 6}


def test_draw_text_paints_full_level_inside_year() -> None:
    session = DesignSession(year=2024)

    dates = session.draw_text("HI", column_offset=0, glyphs=COMPACT_FONT)

    assert dates
    assert all(day.year == 2024 for day in dates)
    assert all(session.overlay[day] == 4 for day in dates)


def test_draw_text_clips_to_year() -> None:
    session = DesignSession(year=2024)

    dates = session.draw_text("HI", column_offset=52)

    assert dates == [date(2024, 12, 30), date(2024, 12, 31)]
    assert session.overlay == {date(2024, 12, 30): 4, date(2024, 12, 31): 4}


def test_compile_uses_session_state() -> None:
    session = DesignSession(year=2024, baseline={date(2024, 3, 1): 6})
    session.paint([date(2024, 3, 1)], 4)

    compiled = session.compile()

    assert compiled.commits_by_date == {date(2024, 3, 1): 4}


def test_checkerboard_alternates_over_flattened_grid() -> None:
    grid = build_grid(2024)

    painted = checkerboard(grid, {})

    flat = list(grid.days())
    # Grid of 2024 starts with one padding day, so Jan 1 has odd index.
    assert date(2024, 1, 1) not in painted
    assert painted[date(2024, 1, 2)] == 4
    assert flat[7].date not in painted
    assert painted[flat[8].date] == 4
    assert all(day.year == 2024 for day in painted)
    assert len(painted) == 183


def test_checkerboard_overlays_existing_paint() -> None:
    grid = build_grid(2024)

    painted = checkerboard(grid, {date(2024, 1, 1): 2})

    assert painted[date(2024, 1, 1)] == 2


def test_invert_swaps_painted_and_empty_days() -> None:
    grid = build_grid(2024)

    painted = invert(grid, {date(2024, 1, 1): 2})

    assert painted[date(2024, 1, 1)] == 0
    assert painted[date(2024, 1, 2)] == 4
    assert len(painted) == 366


def test_random_noise_is_reproducible_and_in_range() -> None:
    grid = build_grid(2024)

    first = random_noise(grid, random.Random(7))
    second = random_noise(grid, random.Random(7))

    assert first == second
    assert first
    assert all(1 <= level <= 4 for level in first.values())
    assert all(day.year == 2024 for day in first)


def test_session_random_noise_replaces_overlay() -> None:
    session = DesignSession(year=2024, overlay={date(2024, 1, 1): 1})

    session.random_noise(random.Random(3))

    assert session.overlay == random_noise(session.grid, random.Random(3))
