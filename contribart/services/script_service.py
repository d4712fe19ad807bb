import logging
import shlex
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from datetime import datetime
from datetime import time

from contribart.services.level_service import DEFAULT_POLICY
from contribart.services.level_service import MAX_LEVEL
from contribart.services.level_service import ThresholdPolicy


logger = logging.getLogger(__name__)

DEFAULT_COMMIT_TIME = time(12, 0, 0)
DEFAULT_COMMIT_MESSAGE = "contribart pattern"


@dataclass(frozen=True)
class WriteOperation:
    """One empty commit backdated to `day`."""

    day: date

    def render(self, commit_time: time, message: str) -> str:
        stamp = datetime.combine(self.day, commit_time).isoformat(timespec="seconds")
        return (
            f'GIT_AUTHOR_DATE="{stamp}" GIT_COMMITTER_DATE="{stamp}" '
            f"git commit --allow-empty -m {shlex.quote(message)} > /dev/null"
        )


@dataclass(frozen=True)
class CompiledScript:
    """Compiled script together with the numbers it was built from."""

    ceiling: int
    targets: tuple[int, ...]
    operations: tuple[WriteOperation, ...]
    text: str

    @property
    def commits_by_date(self) -> dict[date, int]:
        counts: dict[date, int] = {}
        for operation in self.operations:
            counts[operation.day] = counts.get(operation.day, 0) + 1
        return counts


def plan_operations(
    overlay: Mapping[date, int],
    baseline: Mapping[date, int],
    observed_max: int,
    policy: ThresholdPolicy = DEFAULT_POLICY,
) -> list[WriteOperation]:
    """Return the write operations that lift each painted day to its target.

    Days whose real count already meets the target produce nothing, since
    existing history is never reduced. Levels outside 0..MAX_LEVEL raise
    ValueError.
    """

    targets = policy.targets(observed_max)
    operations: list[WriteOperation] = []
    for day in sorted(overlay):
        level = overlay[day]
        if not 0 <= level <= MAX_LEVEL:
            raise ValueError(f"level must be between 0 and {MAX_LEVEL}, got {level}")
        if level == 0:
            continue
        delta = targets[level] - baseline.get(day, 0)
        if delta <= 0:
            continue
        operations.extend(WriteOperation(day) for _ in range(delta))
    return operations


def compile_script(
    overlay: Mapping[date, int],
    baseline: Mapping[date, int],
    observed_max: int,
    policy: ThresholdPolicy = DEFAULT_POLICY,
    commit_time: time = DEFAULT_COMMIT_TIME,
    message: str = DEFAULT_COMMIT_MESSAGE,
) -> CompiledScript:
    """Compile the design into a bash script to replay in an empty repository."""

    ceiling = policy.ceiling(observed_max)
    targets = policy.targets(observed_max)
    operations = plan_operations(overlay, baseline, observed_max, policy)

    lines = [
        "#!/bin/bash",
        "",
        'echo "🎨 Starting contribart..."',
        "git init",
        "",
        f'echo "Calculated Max Commit Ceiling: {ceiling}"',
        f'echo "Targets: L1={targets[1]}, L2={targets[2]}, '
        f'L3={targets[3]}, L4={targets[4]}"',
        "",
    ]
    lines.extend(operation.render(commit_time, message) for operation in operations)
    lines.extend(
        [
            "",
            "",
            'echo "✅ Art generation complete!"',
            'echo "Push to GitHub to see the changes."',
        ]
    )

    logger.info(
        "Compiled %d write operations for %d days (ceiling=%d)",
        len(operations),
        len({operation.day for operation in operations}),
        ceiling,
    )
    return CompiledScript(
        ceiling=ceiling,
        targets=targets,
        operations=tuple(operations),
        text="\n".join(lines) + "\n",
    )
