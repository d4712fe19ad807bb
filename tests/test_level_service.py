from datetime import date

import pytest

from contribart.services.level_service import ThresholdPolicy
from contribart.services.level_service import effective_level
from contribart.services.level_service import level_from_count
from contribart.services.level_service import observed_max


def test_targets_use_floor_for_sparse_year() -> None:
    policy = ThresholdPolicy()

    assert policy.ceiling(0) == 10
    assert policy.targets(0) == (0, 1, 3, 5, 10)
    assert policy.targets(6) == (0, 1, 3, 5, 10)


def test_targets_scale_with_observed_max() -> None:
    policy = ThresholdPolicy()

    assert policy.targets(40) == (0, 1, 10, 20, 40)
    assert policy.targets(13) == (0, 1, 4, 7, 13)


@pytest.mark.parametrize(
    ("count", "max_count", "expected"),
    [
        (0, 0, 0),
        (0, 50, 0),
        (1, 0, 1),
        (2, 0, 1),
        (3, 0, 2),
        (5, 0, 3),
        (9, 0, 3),
        (10, 0, 4),
        (25, 0, 4),
        (9, 40, 1),
        (10, 40, 2),
        (20, 40, 3),
        (40, 40, 4),
    ],
)
def test_level_from_count(count: int, max_count: int, expected: int) -> None:
    assert level_from_count(count, max_count) == expected


@pytest.mark.parametrize("max_count", [0, 6, 10, 17, 40, 333])
def test_level_from_count_is_monotonic(max_count: int) -> None:
    levels = [level_from_count(count, max_count) for count in range(max_count + 20)]

    assert levels[0] == 0
    assert levels == sorted(levels)
    assert set(levels) <= {0, 1, 2, 3, 4}


def test_level_from_count_matches_target_ladder() -> None:
    policy = ThresholdPolicy()
    targets = policy.targets(23)

    for level in range(1, 5):
        assert level_from_count(targets[level], 23, policy) == level


def test_effective_level_never_hides_real_history() -> None:
    day = date(2024, 3, 1)
    baseline = {day: 6}

    for painted in range(5):
        level = effective_level(day, {day: painted}, baseline, 6)
        assert level >= painted
        assert level >= level_from_count(6, 6)


def test_effective_level_defaults_to_zero_for_unknown_day() -> None:
    assert effective_level(date(2024, 3, 1), {}, {}, 0) == 0


def test_effective_level_prefers_higher_paint() -> None:
    day = date(2024, 3, 1)

    assert effective_level(day, {day: 4}, {day: 1}, 1) == 4


def test_observed_max() -> None:
    assert observed_max({}) == 0
    assert observed_max({date(2024, 1, 1): 3, date(2024, 1, 2): 8}) == 8


def test_custom_policy_changes_cut_points() -> None:
    policy = ThresholdPolicy(floor=20, fractions=(0.1, 0.3))

    assert policy.targets(0) == (0, 1, 2, 6, 20)
    assert level_from_count(6, 0, policy) == 3


@pytest.mark.parametrize(
    ("floor", "fractions"),
    [(0, (0.25, 0.5)), (10, (0.0, 0.5)), (10, (0.6, 0.5)), (10, (0.25, 1.5))],
)
def test_invalid_policy_is_rejected(floor: int, fractions: tuple[float, float]) -> None:
    with pytest.raises(ValueError):
        ThresholdPolicy(floor=floor, fractions=fractions)
