from datetime import time

import pytest
from pydantic import ValidationError

from contribart.api.dependencies import threshold_policy
from contribart.settings import Settings


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.min_year == 2008
    assert settings.ceiling_floor == 10
    assert settings.level_fractions == (0.25, 0.5)
    assert settings.commit_time == time(12, 0, 0)


def test_settings_read_policy_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("CEILING_FLOOR", "20")
    monkeypatch.setenv("LEVEL_FRACTIONS", "[0.1, 0.3]")
    monkeypatch.setenv("COMMIT_TIME", "09:30:00")

    settings = Settings()
    policy = threshold_policy(settings)

    assert settings.commit_time == time(9, 30)
    assert policy.targets(0) == (0, 1, 2, 6, 20)


@pytest.mark.parametrize(
    ("name", "value"),
    [("CEILING_FLOOR", "0"), ("LEVEL_FRACTIONS", "[0.6, 0.5]")],
)
def test_invalid_threshold_policy_fails_at_load(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings()
