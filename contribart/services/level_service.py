import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date


MAX_LEVEL = 4
LEVELS = range(MAX_LEVEL + 1)


@dataclass(frozen=True)
class ThresholdPolicy:
    """Scaling rule shared by the level preview and the script compiler.

    The ceiling is the user's own busiest day, never lower than `floor`.
    Levels 2 and 3 start at the given fractions of the ceiling, rounded up.
    """

    floor: int = 10
    fractions: tuple[float, float] = (0.25, 0.5)

    def __post_init__(self) -> None:
        if self.floor < 1:
            raise ValueError("ceiling floor must be at least 1")
        low, high = self.fractions
        if not 0 < low <= high <= 1:
            raise ValueError("level fractions must satisfy 0 < low <= high <= 1")

    def ceiling(self, observed_max: int) -> int:
        return max(observed_max, self.floor)

    def targets(self, observed_max: int) -> tuple[int, int, int, int, int]:
        """Return the commit count each level 0..4 stands for."""

        ceiling = self.ceiling(observed_max)
        low, high = self.fractions
        return (
            0,
            1,
            math.ceil(ceiling * low),
            math.ceil(ceiling * high),
            ceiling,
        )


DEFAULT_POLICY = ThresholdPolicy()


def observed_max(baseline: Mapping[date, int]) -> int:
    """Return the highest real count in the baseline, 0 when it is empty."""

    return max(baseline.values(), default=0)


def level_from_count(
    count: int, observed_max: int, policy: ThresholdPolicy = DEFAULT_POLICY
) -> int:
    """Map a daily count to a level in range 0..4, relative to the user's max."""

    if count <= 0:
        return 0
    targets = policy.targets(observed_max)
    for level in range(MAX_LEVEL, 1, -1):
        if count >= targets[level]:
            return level
    return 1


def effective_level(
    day: date,
    overlay: Mapping[date, int],
    baseline: Mapping[date, int],
    observed_max: int,
    policy: ThresholdPolicy = DEFAULT_POLICY,
) -> int:
    """Return the level shown for `day`: paint can add to history, never hide it."""

    painted = overlay.get(day, 0)
    real = level_from_count(baseline.get(day, 0), observed_max, policy)
    return max(painted, real)
